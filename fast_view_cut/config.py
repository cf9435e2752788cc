"""
Configuration for Fast View Cut.

Defines the Config class with the tolerances and host-side behavior used when
turning a picked box into a crop boundary.
"""

from .core.results import DEFAULT_PICK_PROMPT
from .core.units import to_internal_units


class Config:
    """Configuration for crop resolution and commit.

    Attributes:
        min_pick_distance_mm (float): Picks whose corners are closer than this
            are ignored silently (default: 1.0)
        min_segment_length_mm (float): Shortest allowed crop rectangle edge
            (default: 1.0)
        planarity_tolerance_mm (float): Allowed spread of loop vertex depths
            along the view direction (default: 0.16, Revit vertex tolerance)
        angle_tolerance_rad (float): Allowed deviation from a right angle
            between consecutive edges (default: 0.00174533, Revit angle tolerance)
        transform_sheet_pick (bool): Map a sheet pick through the viewport's
            sheet-to-view transform (built from the viewport's projection
            transforms) before cropping the placed view (default: True)
        activate_crop_box (bool): Turn the crop on when it is off (default: True)
        crop_box_visible (bool): Crop region visibility after activation
            (default: False)
        transaction_name (str): Name of the committing transaction
        pick_prompt (str): Status bar prompt during the pick gesture

    Example:
        >>> cfg = Config()
        >>> cfg.min_pick_distance_mm
        1.0
        >>> round(cfg.min_pick_distance_ft, 6)
        0.003281
    """

    def __init__(
        self,
        min_pick_distance_mm=1.0,
        min_segment_length_mm=1.0,
        planarity_tolerance_mm=0.16,
        angle_tolerance_rad=0.00174533,
        transform_sheet_pick=True,
        activate_crop_box=True,
        crop_box_visible=False,
        transaction_name="Fast View Cut",
        pick_prompt=DEFAULT_PICK_PROMPT,
    ):
        self.min_pick_distance_mm = float(min_pick_distance_mm)
        self.min_segment_length_mm = float(min_segment_length_mm)
        self.planarity_tolerance_mm = float(planarity_tolerance_mm)
        self.angle_tolerance_rad = float(angle_tolerance_rad)
        self.transform_sheet_pick = bool(transform_sheet_pick)
        self.activate_crop_box = bool(activate_crop_box)
        self.crop_box_visible = bool(crop_box_visible)
        self.transaction_name = str(transaction_name)
        self.pick_prompt = str(pick_prompt)

        # Validate
        if self.min_pick_distance_mm < 0:
            raise ValueError("min_pick_distance_mm must be non-negative")
        if self.min_segment_length_mm <= 0:
            raise ValueError("min_segment_length_mm must be positive")
        if self.planarity_tolerance_mm < 0:
            raise ValueError("planarity_tolerance_mm must be non-negative")
        if not (0.0 <= self.angle_tolerance_rad < 0.5):
            raise ValueError("angle_tolerance_rad must be in [0, 0.5)")
        if not self.transaction_name.strip():
            raise ValueError("transaction_name must not be empty")

    @property
    def min_pick_distance_ft(self):
        """Pick distance threshold in internal units (feet)."""
        return to_internal_units(self.min_pick_distance_mm)

    @property
    def min_segment_length_ft(self):
        return to_internal_units(self.min_segment_length_mm)

    @property
    def planarity_tolerance_ft(self):
        return to_internal_units(self.planarity_tolerance_mm)

    def __repr__(self):
        return (
            f"Config(min_pick_distance_mm={self.min_pick_distance_mm}, "
            f"min_segment_length_mm={self.min_segment_length_mm}, "
            f"planarity_tolerance_mm={self.planarity_tolerance_mm}, "
            f"angle_tolerance_rad={self.angle_tolerance_rad}, "
            f"transform_sheet_pick={self.transform_sheet_pick}, "
            f"activate_crop_box={self.activate_crop_box}, "
            f"crop_box_visible={self.crop_box_visible}, "
            f"transaction_name='{self.transaction_name}')"
        )

    def to_dict(self):
        """Export configuration as dictionary for JSON serialization."""
        return {
            "min_pick_distance_mm": self.min_pick_distance_mm,
            "min_segment_length_mm": self.min_segment_length_mm,
            "planarity_tolerance_mm": self.planarity_tolerance_mm,
            "angle_tolerance_rad": self.angle_tolerance_rad,
            "transform_sheet_pick": self.transform_sheet_pick,
            "activate_crop_box": self.activate_crop_box,
            "crop_box_visible": self.crop_box_visible,
            "transaction_name": self.transaction_name,
            "pick_prompt": self.pick_prompt,
        }

    @classmethod
    def from_dict(cls, d):
        """Create Config from dictionary (e.g., from JSON)."""
        return cls(
            min_pick_distance_mm=d.get("min_pick_distance_mm", 1.0),
            min_segment_length_mm=d.get("min_segment_length_mm", 1.0),
            planarity_tolerance_mm=d.get("planarity_tolerance_mm", 0.16),
            angle_tolerance_rad=d.get("angle_tolerance_rad", 0.00174533),
            transform_sheet_pick=d.get("transform_sheet_pick", True),
            activate_crop_box=d.get("activate_crop_box", True),
            crop_box_visible=d.get("crop_box_visible", False),
            transaction_name=d.get("transaction_name", "Fast View Cut"),
            pick_prompt=d.get("pick_prompt", DEFAULT_PICK_PROMPT),
        )
