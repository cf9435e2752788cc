"""
Crop results handed back to the host.

A crop operation always ends in exactly one of:
- BoundingBoxCrop: new crop box bounds for a 3D view (crop-box local frame)
- CurveLoopCrop:   closed rectangular loop to set as a planar view crop shape
- NoTarget:        nothing to crop (sheet pick touched no viewport)
- Rejected:        pick could not be turned into a crop; `notify` tells the
                   host whether to show a message or stay silent
"""

REASON_DEGENERATE_PICK = "degenerate_pick"
REASON_INVALID_RECTANGLE = "invalid_rectangle"
REASON_VIEW_NOT_SUPPORTED = "view_not_supported"

# English user-facing messages per rejection reason / refused view type.
MESSAGES = {
    REASON_INVALID_RECTANGLE: "Could not get a valid rectangular region. Please try again.",
    REASON_VIEW_NOT_SUPPORTED: "Cropping is not available in this view.",
    "view_is_template": "Cropping is not available in a view template.",
    "Legend": "Cropping is not available in legends.",
    "Schedule": "Cropping is not available in schedules.",
    "DraftingView": "Cropping is not available in drafting views.",
}

DEFAULT_PICK_PROMPT = "Specify a rectangular area for the crop boundary"


class CropResult:
    """Base class for crop results."""

    kind = "crop_result"
    applies_geometry = False

    def __init__(self, view_id=None):
        self.view_id = view_id

    def with_view_id(self, view_id):
        self.view_id = view_id
        return self

    def to_dict(self):
        return {"kind": self.kind, "view_id": self.view_id}

    def __repr__(self):
        return f"{type(self).__name__}(view_id={self.view_id})"


class BoundingBoxCrop(CropResult):
    """New crop box bounds, expressed in the crop box's local frame."""

    kind = "bounding_box"
    applies_geometry = True

    def __init__(self, min_pt, max_pt, transform=None, view_id=None):
        super().__init__(view_id=view_id)
        self.min = tuple(min_pt)
        self.max = tuple(max_pt)
        self.transform = transform

    def to_dict(self):
        d = super().to_dict()
        d["min"] = list(self.min)
        d["max"] = list(self.max)
        d["transform"] = self.transform.to_dict() if self.transform is not None else None
        return d

    def __repr__(self):
        return f"BoundingBoxCrop(min={self.min}, max={self.max}, view_id={self.view_id})"


class CurveLoopCrop(CropResult):
    """Closed rectangular loop to apply as the view crop shape."""

    kind = "curve_loop"
    applies_geometry = True

    def __init__(self, loop, view_id=None):
        super().__init__(view_id=view_id)
        self.loop = loop

    def to_dict(self):
        d = super().to_dict()
        d["loop"] = [[list(s.start), list(s.end)] for s in self.loop.segments]
        return d

    def __repr__(self):
        return f"CurveLoopCrop(loop={self.loop!r}, view_id={self.view_id})"


class NoTarget(CropResult):
    """No sub-view matched the pick; the host takes no action."""

    kind = "no_target"


class Rejected(CropResult):
    """The pick was not usable.

    Attributes:
        reason: one of the REASON_* codes
        notify: True if the host should tell the user (and let them retry)
        detail: optional extra context (e.g. refused view type)
    """

    kind = "rejected"

    def __init__(self, reason, notify=True, detail=None, view_id=None):
        super().__init__(view_id=view_id)
        self.reason = reason
        self.notify = bool(notify)
        self.detail = detail

    @property
    def message(self):
        """User-facing message, or None for silent rejections."""
        if not self.notify:
            return None
        if self.detail is not None and self.detail in MESSAGES:
            return MESSAGES[self.detail]
        return MESSAGES.get(self.reason, MESSAGES[REASON_INVALID_RECTANGLE])

    def to_dict(self):
        d = super().to_dict()
        d["reason"] = self.reason
        d["notify"] = self.notify
        d["detail"] = self.detail
        d["message"] = self.message
        return d

    def __repr__(self):
        return f"Rejected(reason={self.reason!r}, notify={self.notify}, detail={self.detail!r})"
