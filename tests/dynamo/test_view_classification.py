"""
View Classification Check - see which crop policy the active view gets

Shows the view type, the crop policy Fast View Cut would apply and the
geometry it would read, without asking for a pick or writing anything.
Paste into a Dynamo Python node.
"""

import sys
sys.path.append(r'C:\path\to\fast_view_cut_repo')

from fast_view_cut.core.diagnostics import Diagnostics
from fast_view_cut.entry_dynamo import get_active_ui_document
from fast_view_cut.revit.view_basis import classify_view, view_geometry_from_view

ui_doc = get_active_ui_document()
doc = ui_doc.Document
view = doc.ActiveView
diag = Diagnostics()

results = []
results.append("=" * 70)
results.append("VIEW CLASSIFICATION CHECK")
results.append("=" * 70)
results.append("")
results.append("View: {0}".format(view.Name))
results.append("View Type: {0}".format(view.ViewType))

kind, reason = classify_view(view)
results.append("Crop policy: {0}".format(kind.value if kind is not None else "REFUSED"))
results.append("Reason: {0}".format(reason.get("why")))

if kind is not None:
    geometry = view_geometry_from_view(doc, view, kind=kind, diag=diag)
    results.append("Up: {0}".format(geometry.up))
    results.append("View direction: {0}".format(geometry.view_direction))
    if geometry.crop_min is not None:
        results.append("Crop box: {0} .. {1}".format(geometry.crop_min, geometry.crop_max))
    for cand in geometry.viewports:
        results.append("Viewport -> view {0}: {1} .. {2}".format(
            cand.view_id, cand.outline_min, cand.outline_max))

results.append("")
results.append("Diagnostics events: {0}".format(diag.to_dict()["num_events"]))

OUT = "\n".join(results)
