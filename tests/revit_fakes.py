# tests/revit_fakes.py
#
# Minimal stand-ins for the Revit API objects touched by fast_view_cut.

import types


class XYZ:
    def __init__(self, x, y, z):
        self.X, self.Y, self.Z = float(x), float(y), float(z)

    def as_tuple(self):
        return (self.X, self.Y, self.Z)

    def __repr__(self):
        return f"XYZ({self.X}, {self.Y}, {self.Z})"


class ElementId:
    def __init__(self, value):
        self.IntegerValue = value

    def __hash__(self):
        return hash(self.IntegerValue)

    def __eq__(self, other):
        return isinstance(other, ElementId) and other.IntegerValue == self.IntegerValue


class RevitTransform:
    def __init__(self, origin=(0, 0, 0), bx=(1, 0, 0), by=(0, 1, 0), bz=(0, 0, 1)):
        self.Origin = XYZ(*origin)
        self.BasisX = XYZ(*bx)
        self.BasisY = XYZ(*by)
        self.BasisZ = XYZ(*bz)


class BoundingBoxXYZ:
    def __init__(self, min_pt, max_pt, transform=None):
        self.Min = XYZ(*min_pt)
        self.Max = XYZ(*max_pt)
        self.Transform = transform or RevitTransform()


class Outline:
    def __init__(self, min_pt, max_pt):
        self.MinimumPoint = XYZ(*min_pt)
        self.MaximumPoint = XYZ(*max_pt)


class CropShapeManager:
    def __init__(self, fail=False):
        self.shape = None
        self.fail = fail

    def SetCropShape(self, loop):
        if self.fail:
            raise RuntimeError("crop shape rejected")
        self.shape = loop


class FakeView:
    def __init__(
        self,
        view_type,
        view_id=1,
        is_template=False,
        origin=(0, 0, 0),
        up=(0, 1, 0),
        view_direction=(0, 0, 1),
        crop_box=None,
        crop_active=False,
        viewport_ids=None,
        fail_crop_shape=False,
    ):
        self.ViewType = view_type
        self.Id = ElementId(view_id)
        self.IsTemplate = is_template
        self.Name = "Fake"
        self.Origin = XYZ(*origin)
        self.UpDirection = XYZ(*up)
        self.ViewDirection = XYZ(*view_direction)
        self.CropBox = crop_box
        self.CropBoxActive = crop_active
        self.CropBoxVisible = True
        self._viewport_ids = list(viewport_ids or [])
        self._shape_manager = CropShapeManager(fail=fail_crop_shape)

    def GetAllViewports(self):
        return list(self._viewport_ids)

    def GetCropRegionShapeManager(self):
        return self._shape_manager

    def with_model_to_projection(self, *transforms):
        self.GetModelToProjectionTransforms = lambda: [TransformWithBoundary(t) for t in transforms]
        return self


class FakeViewport:
    def __init__(self, viewport_id, view_id, outline):
        self.Id = ElementId(viewport_id)
        self.ViewId = ElementId(view_id)
        self._outline = outline

    def with_projection_to_sheet(self, transform):
        # Only viewports built this way expose GetProjectionToSheetTransform
        self.GetProjectionToSheetTransform = lambda: transform
        return self

    def GetBoxOutline(self):
        if self._outline is None:
            raise RuntimeError("no outline")
        return self._outline


class TransformWithBoundary:
    def __init__(self, transform):
        self._transform = transform

    def GetModelToProjectionTransform(self):
        return self._transform


class FakeDocument:
    def __init__(self, active_view, elements=()):
        self.ActiveView = active_view
        self._elements = {}
        for e in (active_view,) + tuple(elements):
            self._elements[e.Id.IntegerValue] = e

    def GetElement(self, element_id):
        return self._elements.get(element_id.IntegerValue)


class FakeUIDocument:
    def __init__(self, doc):
        self.Document = doc


class PickedBox:
    def __init__(self, min_pt, max_pt):
        self.Min = XYZ(*min_pt)
        self.Max = XYZ(*max_pt)


class Line:
    def __init__(self, start, end):
        self.start = start
        self.end = end

    @staticmethod
    def CreateBound(start, end):
        return Line(start, end)


class CurveLoop:
    def __init__(self):
        self.curves = []

    def Append(self, curve):
        self.curves.append(curve)


class Transaction:
    log = []

    def __init__(self, doc, name):
        self.doc = doc
        self.name = name

    def Start(self):
        Transaction.log.append(("start", self.name))

    def Commit(self):
        Transaction.log.append(("commit", self.name))

    def RollBack(self):
        Transaction.log.append(("rollback", self.name))


def fake_api():
    Transaction.log = []
    return types.SimpleNamespace(XYZ=XYZ, Line=Line, CurveLoop=CurveLoop, Transaction=Transaction)


class OperationCanceledException(Exception):
    """Same name as Autodesk.Revit.Exceptions.OperationCanceledException."""
