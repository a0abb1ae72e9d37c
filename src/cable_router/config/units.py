# File: src/cable_router/config/units.py

"""
Unit management and conversion for the cable router.

Equipment dimensions arrive from the scene in millimetres; every geometric
computation (positions, zones, paths, heights) runs in metres. This module is
the only place where that conversion happens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from ..utils.vectors import Vector3


class LengthUnit(Enum):
    """
    Enumeration of supported length units.
    """
    MILLIMETERS = "mm"
    METERS = "m"


MILLIMETERS_PER_METER = 1000.0

# Conversion factors to metres
_CONVERSION_TO_METERS: Dict[LengthUnit, float] = {
    LengthUnit.MILLIMETERS: 1.0 / MILLIMETERS_PER_METER,
    LengthUnit.METERS: 1.0,
}


def _parse_unit(unit: Union[LengthUnit, str]) -> LengthUnit:
    if isinstance(unit, str):
        try:
            return LengthUnit(unit.lower())
        except ValueError:
            raise ValueError(f"Unsupported unit: {unit}")
    if not isinstance(unit, LengthUnit):
        raise ValueError(f"Units must be LengthUnit enum or string, got {type(unit)}")
    return unit


def convert_length(
    value: float,
    from_unit: Union[LengthUnit, str],
    to_unit: Union[LengthUnit, str],
) -> float:
    """
    Converts a length between two units.

    Args:
        value: The numeric value to convert
        from_unit: Units of the value (LengthUnit enum or "mm"/"m")
        to_unit: Target units

    Returns:
        The converted value

    Raises:
        ValueError: If either unit is not supported
    """
    source = _parse_unit(from_unit)
    target = _parse_unit(to_unit)
    return value * _CONVERSION_TO_METERS[source] / _CONVERSION_TO_METERS[target]


def mm_to_m(value: float) -> float:
    """Millimetres to metres."""
    return value / MILLIMETERS_PER_METER


def m_to_mm(value: float) -> float:
    """Metres to millimetres."""
    return value * MILLIMETERS_PER_METER


@dataclass(frozen=True)
class Dimensions:
    """
    Equipment bounding dimensions as stored by the host, in millimetres.

    Attributes:
        width: Extent along local X
        height: Extent along local Y (vertical)
        depth: Extent along local Z
    """
    width: float
    height: float
    depth: float

    def to_meters(self) -> Vector3:
        """Full extents in metres as (width, height, depth)."""
        return Vector3(mm_to_m(self.width), mm_to_m(self.height), mm_to_m(self.depth))

    def half_extents(self) -> Vector3:
        """Half extents in metres."""
        return self.to_meters() * 0.5

    def scale_relative_to(self, reference: "Dimensions") -> Vector3:
        """Per-axis ratio of these dimensions to a reference size."""
        return Vector3(
            self.width / reference.width,
            self.height / reference.height,
            self.depth / reference.depth,
        )

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "depth": self.depth}

    @classmethod
    def from_dict(cls, data: dict) -> "Dimensions":
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            depth=float(data["depth"]),
        )
