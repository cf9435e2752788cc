"""
Revit-specific integrations for Fast View Cut.

Modules:
- view_basis: view classification and ViewGeometry extraction
- commit: transactional write of crop results
- safe_api: guarded host API calls
"""

from .view_basis import classify_view, view_geometry_from_view
from .commit import commit_crop_result

__all__ = [
    "classify_view",
    "view_geometry_from_view",
    "commit_crop_result",
]
