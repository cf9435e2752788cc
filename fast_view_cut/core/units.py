"""
Length unit conversion for the crop kernel.

Revit stores every length in decimal feet; tolerances and sheet rectangles
are expressed in millimeters.
"""

MM_PER_FOOT = 304.8


def to_millimeters(length_internal):
    """Convert a length in internal units (feet) to millimeters.

    Example:
        >>> to_millimeters(1.0)
        304.8
    """
    return float(length_internal) * MM_PER_FOOT


def to_internal_units(length_mm):
    """Convert a length in millimeters to internal units (feet).

    Example:
        >>> to_internal_units(304.8)
        1.0
    """
    return float(length_mm) / MM_PER_FOOT
