"""
View classification and geometry extraction for Fast View Cut.

Reads a Revit view (or a duck-typed stub) and produces the ViewGeometry
snapshot consumed by the crop policies. No Autodesk import is needed here so
the module stays unit-testable.
"""

from ..core.math_utils import Transform, xyz_to_v
from ..crop import ViewGeometry, ViewKind, ViewportCandidate
from .safe_api import safe_call


# Revit ViewType codes observed when the enum stringifies as a number
_VIEW_TYPE_CODES = {
    0: "Undefined",
    1: "FloorPlan",
    2: "CeilingPlan",
    3: "Elevation",
    4: "ThreeD",
    5: "Schedule",
    6: "DrawingSheet",
    7: "ProjectBrowser",
    8: "Report",
    9: "DraftingView",
    10: "Legend",
    11: "Section",
    12: "Detail",
    13: "Rendering",
    14: "Walkthrough",
    15: "SystemBrowser",
    16: "CostReport",
    17: "LoadReport",
    18: "ColumnSchedule",
    19: "PanelSchedule",
    20: "PresureLossReport",
    21: "AreaPlan",
    22: "EngineeringPlan",
}

# View types without a croppable graphical area
_SCHEDULE_LIKE = (
    "Schedule",
    "ColumnSchedule",
    "PanelSchedule",
    "Report",
    "CostReport",
    "LoadReport",
    "PresureLossReport",
)
_NON_GRAPHICAL = (
    "ProjectBrowser",
    "SystemBrowser",
    "Internal",
    "Undefined",
)

# View3D subclasses; all of them carry a 3D crop box
_THREE_D_TYPES = ("ThreeD", "Walkthrough")


def element_id_value(element_id):
    """Integer value of a Revit ElementId (IntegerValue or Value in 2024+)."""
    if element_id is None:
        return None
    for attr in ("IntegerValue", "Value"):
        v = getattr(element_id, attr, None)
        if v is not None:
            try:
                return int(v)
            except (TypeError, ValueError):
                continue
    try:
        return int(element_id)
    except (TypeError, ValueError):
        return None


def view_type_name(view):
    """
    Stable view type name (e.g. 'FloorPlan', 'ThreeD', 'DrawingSheet') or ''.

    View.ViewType may arrive as the enum, its string form ('ViewType.Legend'),
    or a bare number depending on the Python host.
    """
    if view is None:
        return ""

    vt = getattr(view, "ViewType", None)
    if vt is None:
        return ""

    if isinstance(vt, int):
        return _VIEW_TYPE_CODES.get(vt, str(vt))

    s = (str(vt) or "").split(".")[-1]
    if s and not s.isdigit():
        return s

    name = getattr(vt, "Name", "") or ""
    if name:
        return name

    try:
        code = int(s)
    except ValueError:
        return ""
    return _VIEW_TYPE_CODES.get(code, str(code))


def classify_view(view):
    """
    Decide which crop policy applies to this view, and WHY.

    Returns:
        (ViewKind | None, reason_dict). None means the view is refused; the
        reason dict then carries `why` and `detail` (message key).
    """
    vt = view_type_name(view)
    reason = {"view_type": vt, "is_template": None}

    if view is None:
        return None, {**reason, "why": "view_is_none", "detail": None}

    reason["is_template"] = bool(getattr(view, "IsTemplate", False))
    if reason["is_template"]:
        return None, {**reason, "why": "view_is_template", "detail": "view_is_template"}

    if vt == "Legend":
        return None, {**reason, "why": "legend_view", "detail": "Legend"}
    if vt == "DraftingView":
        return None, {**reason, "why": "drafting_view", "detail": "DraftingView"}
    if vt in _SCHEDULE_LIKE:
        return None, {**reason, "why": "no_graphical_area", "detail": "Schedule"}
    if vt in _NON_GRAPHICAL or not vt:
        return None, {**reason, "why": "no_graphical_area", "detail": None}

    if vt in _THREE_D_TYPES:
        return ViewKind.THREE_D, {**reason, "why": "three_d_view"}
    if vt == "DrawingSheet":
        return ViewKind.SHEET, {**reason, "why": "sheet_view"}

    return ViewKind.OTHER_PLANAR, {**reason, "why": "planar_view"}


def transform_from_revit(trf):
    """Convert a Revit Transform into a core Transform (None -> identity)."""
    if trf is None:
        return Transform.identity()
    return Transform(
        origin=xyz_to_v(trf.Origin),
        basis_x=xyz_to_v(trf.BasisX),
        basis_y=xyz_to_v(trf.BasisY),
        basis_z=xyz_to_v(trf.BasisZ),
    )


def _planar_geometry(view, view_id, kind):
    return ViewGeometry(
        kind,
        view_id=view_id,
        origin=xyz_to_v(view.Origin),
        up=xyz_to_v(view.UpDirection),
        view_direction=xyz_to_v(view.ViewDirection),
    )


def sheet_to_view_transform(viewport, placed, diag=None, context=None):
    """Transform mapping sheet points into the model space of the placed view.

    Built as inverse(model -> projection) * inverse(projection -> sheet) from
    `Viewport.GetProjectionToSheetTransform` and the view's first
    `GetModelToProjectionTransforms` entry. Returns None when either is
    unavailable or not invertible.
    """
    if not hasattr(viewport, "GetProjectionToSheetTransform") or not hasattr(
        placed, "GetModelToProjectionTransforms"
    ):
        return None

    proj_to_sheet = safe_call(
        diag,
        phase="view_basis",
        callsite="sheet_to_view_transform.GetProjectionToSheetTransform",
        fn=viewport.GetProjectionToSheetTransform,
        default=None,
        context=context,
    )
    model_to_proj = safe_call(
        diag,
        phase="view_basis",
        callsite="sheet_to_view_transform.GetModelToProjectionTransforms",
        fn=lambda: list(placed.GetModelToProjectionTransforms()),
        default=[],
        context=context,
    )
    if proj_to_sheet is None or not model_to_proj:
        return None

    # Split views carry several entries; the first covers the primary region.
    to_proj = transform_from_revit(model_to_proj[0].GetModelToProjectionTransform())
    to_sheet = transform_from_revit(proj_to_sheet)
    try:
        return to_proj.inverse().multiply(to_sheet.inverse())
    except ValueError as e:
        if diag is not None:
            diag.warn(
                phase="view_basis",
                callsite="sheet_to_view_transform",
                message="Viewport transform is not invertible; using sheet coordinates",
                view_id=(context or {}).get("view_id"),
                extra={"error": str(e)},
            )
        return None


def viewport_candidates(doc, sheet, diag=None, views_by_id=None):
    """Collect ViewportCandidates for every viewport placed on `sheet`.

    Viewports whose outline or view cannot be read are skipped (recorded in
    diag).
    """
    sheet_id = element_id_value(getattr(sheet, "Id", None))
    ctx = {"view_id": sheet_id}

    ids = safe_call(
        diag,
        phase="view_basis",
        callsite="viewport_candidates.GetAllViewports",
        fn=lambda: list(sheet.GetAllViewports()),
        default=[],
        context=ctx,
    )

    candidates = []
    for vp_id in ids:
        viewport = doc.GetElement(vp_id)
        if viewport is None:
            continue

        outline = safe_call(
            diag,
            phase="view_basis",
            callsite="viewport_candidates.GetBoxOutline",
            fn=viewport.GetBoxOutline,
            default=None,
            context={"view_id": sheet_id, "viewport_id": element_id_value(vp_id)},
        )
        placed = doc.GetElement(viewport.ViewId)
        if outline is None or placed is None:
            continue

        placed_id = element_id_value(viewport.ViewId)
        if views_by_id is not None:
            views_by_id[placed_id] = placed

        sheet_to_view = sheet_to_view_transform(
            viewport,
            placed,
            diag=diag,
            context={"view_id": placed_id, "viewport_id": element_id_value(vp_id)},
        )

        candidates.append(
            ViewportCandidate(
                view_id=placed_id,
                outline_min=xyz_to_v(outline.MinimumPoint),
                outline_max=xyz_to_v(outline.MaximumPoint),
                view=_planar_geometry(placed, placed_id, ViewKind.OTHER_PLANAR),
                sheet_to_view=sheet_to_view,
                viewport_id=element_id_value(vp_id),
            )
        )

    if diag is not None:
        diag.debug(
            phase="view_basis",
            callsite="viewport_candidates",
            message="Collected sheet viewports",
            view_id=sheet_id,
            extra={"num_viewports": len(ids), "num_candidates": len(candidates)},
        )
    return candidates


def view_geometry_from_view(doc, view, kind=None, diag=None, views_by_id=None):
    """Build the ViewGeometry snapshot for `view`.

    Args:
        doc: Revit Document (used to resolve sheet viewports)
        view: Revit View
        kind: ViewKind (default: classify_view(view))
        diag: Diagnostics (optional)
        views_by_id: optional dict filled with {view_id: view} for every view
            a result may target

    Raises:
        ValueError: if the view is refused by classify_view and no kind is given.
    """
    if kind is None:
        kind, reason = classify_view(view)
        if kind is None:
            raise ValueError(f"view cannot be cropped: {reason.get('why')}")

    view_id = element_id_value(getattr(view, "Id", None))
    if views_by_id is not None:
        views_by_id[view_id] = view

    if kind == ViewKind.THREE_D:
        crop_box = view.CropBox
        return ViewGeometry(
            kind,
            view_id=view_id,
            crop_transform=transform_from_revit(getattr(crop_box, "Transform", None)),
            crop_min=xyz_to_v(crop_box.Min),
            crop_max=xyz_to_v(crop_box.Max),
        )

    if kind == ViewKind.SHEET:
        return ViewGeometry(
            kind,
            view_id=view_id,
            viewports=viewport_candidates(doc, view, diag=diag, views_by_id=views_by_id),
        )

    return _planar_geometry(view, view_id, kind)
