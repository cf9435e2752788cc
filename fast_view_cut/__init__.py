"""
Fast View Cut: crop a Revit view to a box dragged by the user.

Modules:
- config: Config with pick/segment tolerances and commit behavior
- core.math_utils: vectors, planes, transforms, integer axis rectangles
- core.units: feet <-> millimeter conversion
- core.rectangle: rectangle builder and rectangularity check
- core.overlap: sheet viewport overlap resolution
- core.results: CropResult variants
- core.diagnostics: structured event recorder
- crop: crop policies (ThreeD / Sheet / OtherPlanar) and resolve_crop
- revit: view classification, geometry extraction and commit
- entry_dynamo: Dynamo / pyRevit entry point
"""

__version__ = "1.0.0"

from .config import Config
from .crop import PickRegion, ViewGeometry, ViewKind, ViewportCandidate, resolve_crop

__all__ = [
    "Config",
    "PickRegion",
    "ViewGeometry",
    "ViewKind",
    "ViewportCandidate",
    "resolve_crop",
]
