"""
Rectangle construction and validation for planar crop shapes.

A user pick gives two diagonal corners. The remaining corners are derived by
projecting each picked corner onto the plane through the other one with the
view up direction as normal, so the loop follows the view orientation rather
than the global axes.
"""

import math

from .math_utils import create_plane, project_onto, v3, v_dist, v_dot, v_norm, v_sub
from .results import Rejected, REASON_INVALID_RECTANGLE


class Segment:
    """Bounded line from `start` to `end` (model coordinates)."""

    def __init__(self, start, end):
        self.start = v3(*start)
        self.end = v3(*end)

    def length(self):
        return v_dist(self.start, self.end)

    def direction(self):
        """Unit direction from start to end."""
        return v_norm(v_sub(self.end, self.start))

    def __repr__(self):
        return f"Segment({self.start} -> {self.end})"


def try_create_segment(start, end, min_length):
    """Create a Segment, or return None when it would be shorter than min_length.

    Example:
        >>> try_create_segment((0, 0, 0), (0, 0, 0.001), 0.00328) is None
        True
        >>> try_create_segment((0, 0, 0), (1, 0, 0), 0.00328).length()
        1.0
    """
    if v_dist(v3(*start), v3(*end)) < min_length:
        return None
    return Segment(start, end)


class RectLoop:
    """Ordered closed loop of exactly four segments.

    Raises:
        ValueError: if not given exactly four segments.
    """

    def __init__(self, segments):
        segments = list(segments)
        if len(segments) != 4:
            raise ValueError(f"RectLoop needs exactly 4 segments, got {len(segments)}")
        if any(s is None for s in segments):
            raise ValueError("RectLoop segments must not be None")
        self.segments = segments

    def __iter__(self):
        return iter(self.segments)

    def __len__(self):
        return len(self.segments)

    def vertices(self):
        """Start point of each segment, in loop order."""
        return [s.start for s in self.segments]

    def is_closed(self, tolerance):
        n = len(self.segments)
        for i in range(n):
            if v_dist(self.segments[i].end, self.segments[(i + 1) % n].start) > tolerance:
                return False
        return True

    def __repr__(self):
        return f"RectLoop({self.vertices()})"


def build_rect(pt1, pt3, up_direction, min_length):
    """Build a rectangular loop from two diagonal corners.

    Args:
        pt1: first picked corner
        pt3: opposite picked corner
        up_direction: view up vector, used as the projection normal
        min_length: shortest allowed edge (internal units)

    Returns:
        RectLoop (pt1 -> pt2 -> pt3 -> pt4), or Rejected(invalid_rectangle)
        when any edge would be degenerate.
    """
    pt1 = v3(*pt1)
    pt3 = v3(*pt3)

    pt2 = project_onto(create_plane(up_direction, pt3), pt1)
    pt4 = project_onto(create_plane(up_direction, pt1), pt3)

    segments = [
        try_create_segment(pt1, pt2, min_length),
        try_create_segment(pt2, pt3, min_length),
        try_create_segment(pt3, pt4, min_length),
        try_create_segment(pt4, pt1, min_length),
    ]
    if any(s is None for s in segments):
        return Rejected(REASON_INVALID_RECTANGLE, notify=True)

    return RectLoop(segments)


def is_rectangular(loop, plane, planarity_tolerance, angle_tolerance):
    """Check that `loop` is a right-angled rectangle lying parallel to `plane`.

    Args:
        loop: RectLoop
        plane: view plane (normal = view direction)
        planarity_tolerance: max spread of vertex distances to the plane
        angle_tolerance: max deviation from 90 degrees (radians)
    """
    if not loop.is_closed(planarity_tolerance):
        return False

    dists = [plane.signed_distance(p) for p in loop.vertices()]
    if max(dists) - min(dists) > planarity_tolerance:
        return False

    max_cos = math.sin(angle_tolerance)
    segments = loop.segments
    n = len(segments)
    for i in range(n):
        a = segments[i].direction()
        b = segments[(i + 1) % n].direction()
        if abs(v_dot(a, b)) > max_cos:
            return False

    return True
