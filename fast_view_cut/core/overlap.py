"""
Sheet overlap resolution.

Viewport outlines and the user pick are flattened onto a projection plane,
snapped to whole millimeters, and intersected; the viewport covering the
largest share of the pick wins.
"""

from .math_utils import AxisRect, BASIS_Z, ZERO, create_plane, project_onto
from .units import to_millimeters


def sheet_plane():
    """Global top-down plane used for sheet-space comparisons."""
    return create_plane(BASIS_Z, ZERO)


def to_axis_rect(outline_min, outline_max, plane):
    """Convert a min/max 3D pair into a millimeter-rounded AxisRect.

    Projection can flip the ordering of the extrema, so min/max are
    re-normalized per axis after rounding.

    Example:
        >>> ft = 1.0 / 304.8
        >>> to_axis_rect((0, 0, 0), (100 * ft, 50 * ft, 3.0), sheet_plane())
        AxisRect(x=0, y=0, w=100, h=50)
    """
    u0, v0 = plane.to_local(project_onto(plane, outline_min))
    u1, v1 = plane.to_local(project_onto(plane, outline_max))

    x0 = int(round(to_millimeters(u0)))
    y0 = int(round(to_millimeters(v0)))
    x1 = int(round(to_millimeters(u1)))
    y1 = int(round(to_millimeters(v1)))

    return AxisRect.from_extents(x0, y0, x1, y1)


def intersection_area(rect_a, rect_b):
    """Area of the overlap between two AxisRects, or None when they do not overlap."""
    inter = rect_a.intersect(rect_b)
    if inter.empty:
        return None
    return inter.area()


def best_match(candidates, pick_min, pick_max, plane=None, diag=None):
    """Select the candidate whose outline overlaps the pick the most.

    Args:
        candidates: iterable of objects with `outline_min`, `outline_max`
            (and optionally `view_id` for diagnostics)
        pick_min, pick_max: picked corners (any order)
        plane: projection plane (default: global top-down sheet plane)
        diag: Diagnostics (optional)

    Returns:
        (candidate, area_mm2) for the best match; ties keep the first
        candidate encountered. (None, None) when nothing overlaps.
    """
    if plane is None:
        plane = sheet_plane()

    pick_rect = to_axis_rect(pick_min, pick_max, plane)

    best = None
    best_area = None
    for cand in candidates:
        cand_rect = to_axis_rect(cand.outline_min, cand.outline_max, plane)
        area = intersection_area(cand_rect, pick_rect)
        if area is None:
            continue
        if best_area is None or area > best_area:
            best = cand
            best_area = area

    if diag is not None:
        diag.debug(
            phase="overlap",
            callsite="best_match",
            message="Sheet overlap resolved" if best is not None else "No viewport overlaps the pick",
            view_id=getattr(best, "view_id", None),
            extra={"pick_rect": repr(pick_rect), "area_mm2": best_area},
        )

    return best, best_area
