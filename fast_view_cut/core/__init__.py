"""
Geometry kernel for Fast View Cut.

Modules:
- math_utils: vectors, planes, projection, transforms, AxisRect
- units: internal unit (feet) <-> millimeters
- rectangle: Segment, RectLoop, build_rect, is_rectangular
- overlap: to_axis_rect, best_match
- results: BoundingBoxCrop, CurveLoopCrop, NoTarget, Rejected
"""

from .math_utils import AxisRect, Plane, Transform, create_plane, project_onto
from .rectangle import RectLoop, Segment, build_rect, is_rectangular, try_create_segment
from .overlap import best_match, to_axis_rect
from .units import to_internal_units, to_millimeters

__all__ = [
    "AxisRect",
    "Plane",
    "Transform",
    "create_plane",
    "project_onto",
    "RectLoop",
    "Segment",
    "build_rect",
    "is_rectangular",
    "try_create_segment",
    "best_match",
    "to_axis_rect",
    "to_internal_units",
    "to_millimeters",
]
