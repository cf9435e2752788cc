"""
Fast View Cut - crop policies.

Turns a picked box into a crop result for one of three view kinds:

1. THREE_D      -> axis-aligned crop box in the existing crop-box frame
2. SHEET        -> pick the most-covered viewport, then crop its view as planar
3. OTHER_PLANAR -> rectangular curve loop derived from the view up direction

Everything here is a pure function of the pick and a geometry snapshot of the
view; applying the result is the host's job (see revit.commit).
"""

from enum import Enum

from .config import Config
from .core.math_utils import Transform, create_plane, v3, v_dist
from .core.overlap import best_match, sheet_plane
from .core.rectangle import RectLoop, build_rect, is_rectangular
from .core.results import (
    BoundingBoxCrop,
    CurveLoopCrop,
    NoTarget,
    Rejected,
    REASON_DEGENERATE_PICK,
    REASON_INVALID_RECTANGLE,
)


class ViewKind(Enum):
    """Crop policy selector for the active view."""

    THREE_D = "ThreeD"
    SHEET = "Sheet"
    OTHER_PLANAR = "OtherPlanar"


class PickRegion:
    """Two opposite corners of the user's box gesture (model space).

    `min`/`max` are positional labels from the pick; they are not ordered
    per axis.
    """

    def __init__(self, min_pt, max_pt):
        self.min = v3(*min_pt)
        self.max = v3(*max_pt)

    def diagonal(self):
        return v_dist(self.min, self.max)

    def transformed(self, transform):
        return PickRegion(transform.of_point(self.min), transform.of_point(self.max))

    def __repr__(self):
        return f"PickRegion(min={self.min}, max={self.max})"


class ViewGeometry:
    """Geometry snapshot of a view, as needed by the crop policies.

    Attributes:
        kind: ViewKind
        view_id: host identifier of the view (opaque)
        origin, up, view_direction: view frame (planar policy)
        crop_transform, crop_min, crop_max: existing crop box (3D policy)
        viewports: list of ViewportCandidate (sheet policy)
    """

    def __init__(
        self,
        kind,
        view_id=None,
        origin=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        view_direction=(0.0, 0.0, 1.0),
        crop_transform=None,
        crop_min=None,
        crop_max=None,
        viewports=None,
    ):
        self.kind = kind
        self.view_id = view_id
        self.origin = v3(*origin)
        self.up = v3(*up)
        self.view_direction = v3(*view_direction)
        self.crop_transform = crop_transform
        self.crop_min = v3(*crop_min) if crop_min is not None else None
        self.crop_max = v3(*crop_max) if crop_max is not None else None
        self.viewports = list(viewports or [])

    def __repr__(self):
        return f"ViewGeometry(kind={self.kind}, view_id={self.view_id})"


class ViewportCandidate:
    """A view placed on a sheet.

    Attributes:
        view_id: id of the placed view (target of the crop)
        outline_min, outline_max: viewport box outline in sheet space
        view: ViewGeometry of the placed view
        sheet_to_view: optional Transform mapping sheet points into the
            placed view's model space
        viewport_id: id of the viewport element itself (diagnostics only)
    """

    def __init__(self, view_id, outline_min, outline_max, view, sheet_to_view=None, viewport_id=None):
        self.view_id = view_id
        self.outline_min = v3(*outline_min)
        self.outline_max = v3(*outline_max)
        self.view = view
        self.sheet_to_view = sheet_to_view
        self.viewport_id = viewport_id

    def __repr__(self):
        return f"ViewportCandidate(view_id={self.view_id}, outline={self.outline_min}..{self.outline_max})"


def is_degenerate_pick(pick, cfg):
    """True if the picked corners are closer than the minimum pick distance."""
    return pick.diagonal() < cfg.min_pick_distance_ft


def crop_three_d(pick, geometry, cfg=None, diag=None):
    """Crop-box policy for 3D views.

    Both corners are mapped into the crop box's local frame; X/Y take the
    per-axis extremes of the pick and Z keeps the existing crop depth.
    """
    transform = geometry.crop_transform or Transform.identity()
    inverse = transform.inverse()

    p1 = inverse.of_point(pick.min)
    p2 = inverse.of_point(pick.max)

    z_min = geometry.crop_min[2] if geometry.crop_min is not None else min(p1[2], p2[2])
    z_max = geometry.crop_max[2] if geometry.crop_max is not None else max(p1[2], p2[2])

    result = BoundingBoxCrop(
        (min(p1[0], p2[0]), min(p1[1], p2[1]), z_min),
        (max(p1[0], p2[0]), max(p1[1], p2[1]), z_max),
        transform=transform,
        view_id=geometry.view_id,
    )

    if diag is not None:
        diag.debug(
            phase="crop",
            callsite="crop_three_d",
            message="Crop box resolved in crop-box frame",
            view_id=geometry.view_id,
            extra={"min": list(result.min), "max": list(result.max)},
        )
    return result


def crop_planar(pick, geometry, cfg=None, diag=None):
    """Curve-loop policy for plans, sections, elevations and other planar views."""
    cfg = cfg or Config()

    built = build_rect(pick.min, pick.max, geometry.up, cfg.min_segment_length_ft)
    if not isinstance(built, RectLoop):
        if diag is not None:
            diag.warn(
                phase="crop",
                callsite="crop_planar.build_rect",
                message="Degenerate rectangle edge; pick rejected",
                view_id=geometry.view_id,
                extra={"pick": repr(pick)},
            )
        return built.with_view_id(geometry.view_id)

    view_plane = create_plane(geometry.view_direction, geometry.origin)
    if not is_rectangular(built, view_plane, cfg.planarity_tolerance_ft, cfg.angle_tolerance_rad):
        if diag is not None:
            diag.warn(
                phase="crop",
                callsite="crop_planar.is_rectangular",
                message="Loop is not a rectangle in the view plane; pick rejected",
                view_id=geometry.view_id,
                extra={"vertices": [list(p) for p in built.vertices()]},
            )
        return Rejected(REASON_INVALID_RECTANGLE, notify=True, view_id=geometry.view_id)

    return CurveLoopCrop(built, view_id=geometry.view_id)


def crop_sheet(pick, geometry, cfg=None, diag=None):
    """Sheet policy: crop the view of the viewport that overlaps the pick most."""
    cfg = cfg or Config()

    match, area = best_match(geometry.viewports, pick.min, pick.max, plane=sheet_plane(), diag=diag)
    if match is None:
        return NoTarget(view_id=geometry.view_id)

    sub_pick = pick
    if cfg.transform_sheet_pick and match.sheet_to_view is not None:
        sub_pick = pick.transformed(match.sheet_to_view)
    elif diag is not None:
        # Sheet coordinates are used as-is for the placed view.
        diag.debug_dedupe(
            dedupe_key="sheet_pick_untransformed",
            phase="crop",
            callsite="crop_sheet",
            message="Viewport has no sheet-to-view transform; using sheet coordinates",
            view_id=match.view_id,
        )

    if diag is not None:
        diag.info(
            phase="crop",
            callsite="crop_sheet",
            message="Viewport selected for crop",
            view_id=match.view_id,
            extra={"area_mm2": area, "viewport_id": match.viewport_id},
        )

    return crop_planar(sub_pick, match.view, cfg=cfg, diag=diag).with_view_id(match.view_id)


_POLICIES = {
    ViewKind.THREE_D: crop_three_d,
    ViewKind.SHEET: crop_sheet,
    ViewKind.OTHER_PLANAR: crop_planar,
}


def resolve_crop(geometry, pick, cfg=None, diag=None):
    """Resolve a pick against a view into a single CropResult.

    Args:
        geometry: ViewGeometry of the active view
        pick: PickRegion (or a (min, max) pair)
        cfg: Config (default Config())
        diag: Diagnostics (optional)

    Returns:
        BoundingBoxCrop | CurveLoopCrop | NoTarget | Rejected

    Raises:
        ValueError: if geometry.kind is not a ViewKind.
    """
    cfg = cfg or Config()
    if not isinstance(pick, PickRegion):
        pick = PickRegion(pick[0], pick[1])

    policy = _POLICIES.get(geometry.kind)
    if policy is None:
        raise ValueError(f"unsupported view kind: {geometry.kind!r}")

    if is_degenerate_pick(pick, cfg):
        if diag is not None:
            diag.debug(
                phase="crop",
                callsite="resolve_crop",
                message="Pick smaller than minimum distance; ignored",
                view_id=geometry.view_id,
                extra={"diagonal_ft": pick.diagonal()},
            )
        return Rejected(REASON_DEGENERATE_PICK, notify=False, view_id=geometry.view_id)

    return policy(pick, geometry, cfg=cfg, diag=diag)
