"""
Dynamo / pyRevit entry point for Fast View Cut.

Compatible with both IronPython (Dynamo 2.x, pyRevit) and CPython3 (Dynamo 3.3+).

Usage in a Dynamo CPython3 node:
    import sys
    sys.path.append(r'C:\\path\\to\\fast_view_cut_repo')

    from fast_view_cut.entry_dynamo import run_fast_view_cut
    from fast_view_cut.config import Config

    OUT = run_fast_view_cut(cfg=Config(crop_box_visible=True))

The active view is cropped to the box the user drags. On a sheet, the view of
the viewport covering most of the box is cropped instead.
"""

try:
    from .config import Config
    from .core.diagnostics import Diagnostics
    from .core.math_utils import xyz_to_v
    from .core.results import NoTarget, Rejected, REASON_VIEW_NOT_SUPPORTED
    from .crop import PickRegion, resolve_crop
    from .revit.commit import commit_crop_result
    from .revit.view_basis import classify_view, view_geometry_from_view
except Exception:
    # Dynamo sometimes imports modules without package context; fall back to absolute.
    from fast_view_cut.config import Config
    from fast_view_cut.core.diagnostics import Diagnostics
    from fast_view_cut.core.math_utils import xyz_to_v
    from fast_view_cut.core.results import NoTarget, Rejected, REASON_VIEW_NOT_SUPPORTED
    from fast_view_cut.crop import PickRegion, resolve_crop
    from fast_view_cut.revit.commit import commit_crop_result
    from fast_view_cut.revit.view_basis import classify_view, view_geometry_from_view


STATUS_SUCCEEDED = "succeeded"
STATUS_NO_OP = "no_op"
STATUS_REJECTED = "rejected"
STATUS_CANCELLED = "cancelled"
STATUS_FAILED = "failed"


def get_active_ui_document():
    """Get the active UIDocument (works in both IronPython and CPython3).

    Raises:
        RuntimeError: If not running in Revit/Dynamo context
    """
    try:
        from RevitServices.Persistence import DocumentManager

        ui_app = DocumentManager.Instance.CurrentUIApplication
        if ui_app is not None and ui_app.ActiveUIDocument is not None:
            return ui_app.ActiveUIDocument
    except ImportError:
        pass

    try:
        return __revit__.ActiveUIDocument  # noqa: F821 (IronPython/pyRevit global)
    except NameError:
        pass

    raise RuntimeError(
        "Not running in Revit/Dynamo context. "
        "Pass the UIDocument directly to run_fast_view_cut()."
    )


def pick_box(ui_doc, prompt):
    """Ask the user for a crossing pick box; returns the Revit PickedBox."""
    from Autodesk.Revit.UI.Selection import PickBoxStyle

    return ui_doc.Selection.PickBox(PickBoxStyle.Crossing, prompt)


def _is_cancellation(exc):
    # Autodesk.Revit.Exceptions.OperationCanceledException, matched by name so
    # the check works without Revit assemblies loaded.
    return type(exc).__name__ == "OperationCanceledException"


def _status_for(result):
    if result.applies_geometry:
        return STATUS_SUCCEEDED
    if isinstance(result, NoTarget):
        return STATUS_NO_OP
    if isinstance(result, Rejected) and not result.notify:
        return STATUS_NO_OP
    return STATUS_REJECTED


def _response(status, cfg, diag, result=None, message=None, errors=None):
    return {
        "success": status in (STATUS_SUCCEEDED, STATUS_NO_OP),
        "status": status,
        "result": result.to_dict() if result is not None else None,
        "message": message,
        "errors": list(errors or []),
        "config": cfg.to_dict(),
        "diagnostics": diag.to_dict(),
    }


def run_fast_view_cut(ui_doc=None, cfg=None, diag=None, pick_box_fn=None, api=None, commit=True):
    """Crop the active view to a user-picked box.

    Args:
        ui_doc: Revit UIDocument (default: active UIDocument)
        cfg: Config (default Config())
        diag: Diagnostics (default: new recorder)
        pick_box_fn: callable(ui_doc, prompt) -> object with Min/Max points
            (default: Selection.PickBox with crossing style)
        api: Revit DB namespace for commit (see revit.commit.revit_api)
        commit: write the result to the document (False = dry run)

    Returns:
        JSON-safe dict with success, status, result, message, errors,
        config and diagnostics.
    """
    cfg = cfg or Config()
    diag = diag or Diagnostics()
    pick_box_fn = pick_box_fn or pick_box

    try:
        if ui_doc is None:
            ui_doc = get_active_ui_document()
        doc = ui_doc.Document
        view = doc.ActiveView

        kind, reason = classify_view(view)
        if kind is None:
            diag.info(
                phase="entry",
                callsite="run_fast_view_cut.classify",
                message="Active view cannot be cropped",
                extra=reason,
            )
            result = Rejected(REASON_VIEW_NOT_SUPPORTED, notify=True, detail=reason.get("detail"))
            return _response(STATUS_REJECTED, cfg, diag, result=result, message=result.message)

        box = pick_box_fn(ui_doc, cfg.pick_prompt)
        pick = PickRegion(xyz_to_v(box.Min), xyz_to_v(box.Max))

        views_by_id = {}
        geometry = view_geometry_from_view(doc, view, kind=kind, diag=diag, views_by_id=views_by_id)
        result = resolve_crop(geometry, pick, cfg=cfg, diag=diag)

        if commit and result.applies_geometry:
            target = views_by_id.get(result.view_id, view)
            commit_crop_result(doc, target, result, cfg=cfg, api=api, diag=diag)

        message = result.message if isinstance(result, Rejected) else None
        return _response(_status_for(result), cfg, diag, result=result, message=message)

    except Exception as e:
        if _is_cancellation(e):
            diag.debug(phase="entry", callsite="run_fast_view_cut", message="Pick cancelled by user")
            return _response(STATUS_CANCELLED, cfg, diag)

        diag.error(phase="entry", callsite="run_fast_view_cut", message="Fast View Cut failed", exc=e)
        return _response(STATUS_FAILED, cfg, diag, message=str(e), errors=[f"{type(e).__name__}: {e}"])
