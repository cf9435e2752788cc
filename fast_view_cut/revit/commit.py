"""
Apply crop results to Revit views.

All writes for one result happen in a single Transaction; a failure rolls the
transaction back and re-raises, leaving the document untouched.
"""

import types

from ..config import Config
from ..core.results import BoundingBoxCrop, CurveLoopCrop


def revit_api():
    """Resolve the Revit DB classes used by commit (lazy import)."""
    from Autodesk.Revit.DB import CurveLoop, Line, Transaction, XYZ

    return types.SimpleNamespace(XYZ=XYZ, Line=Line, CurveLoop=CurveLoop, Transaction=Transaction)


def make_curve_loop(loop, api):
    """Build a Revit CurveLoop from a RectLoop."""
    curve_loop = api.CurveLoop()
    for seg in loop.segments:
        curve_loop.Append(api.Line.CreateBound(api.XYZ(*seg.start), api.XYZ(*seg.end)))
    return curve_loop


def _ensure_crop_active(view, cfg):
    if cfg.activate_crop_box and not view.CropBoxActive:
        view.CropBoxActive = True
        view.CropBoxVisible = cfg.crop_box_visible


def _write_crop_box(view, result, api):
    bb = view.CropBox
    bb.Max = api.XYZ(*result.max)
    bb.Min = api.XYZ(*result.min)
    view.CropBox = bb


def _write_crop_shape(view, result, api):
    manager = view.GetCropRegionShapeManager()
    manager.SetCropShape(make_curve_loop(result.loop, api))


def commit_crop_result(doc, view, result, cfg=None, api=None, diag=None):
    """Write `result` to `view` inside one transaction.

    Args:
        doc: Revit Document
        view: target view (the placed view for sheet picks)
        result: CropResult from resolve_crop
        cfg: Config (transaction name, crop activation)
        api: namespace with XYZ, Line, CurveLoop, Transaction (default: revit_api())
        diag: Diagnostics (optional)

    Returns:
        True if geometry was written, False for NoTarget / Rejected.
    """
    if not result.applies_geometry:
        return False

    cfg = cfg or Config()
    api = api or revit_api()

    if isinstance(result, BoundingBoxCrop):
        write = _write_crop_box
    elif isinstance(result, CurveLoopCrop):
        write = _write_crop_shape
    else:
        raise ValueError(f"cannot commit result of kind {result.kind!r}")

    tr = api.Transaction(doc, cfg.transaction_name)
    tr.Start()
    try:
        _ensure_crop_active(view, cfg)
        write(view, result, api)
        tr.Commit()
    except Exception as e:
        tr.RollBack()
        if diag is not None:
            diag.error(
                phase="commit",
                callsite="commit_crop_result",
                message="Crop write failed; transaction rolled back",
                exc=e,
                view_id=result.view_id,
                extra={"kind": result.kind},
            )
        raise

    if diag is not None:
        diag.info(
            phase="commit",
            callsite="commit_crop_result",
            message="Crop applied",
            view_id=result.view_id,
            extra={"kind": result.kind},
        )
    return True
