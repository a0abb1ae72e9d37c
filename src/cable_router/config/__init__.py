# File: src/cable_router/config/__init__.py

"""
Configuration package for the cable router.
Provides:
- Millimetre/metre conversion at the scene boundary
- Cable height rules
"""

from .units import (
    LengthUnit,
    Dimensions,
    convert_length,
    mm_to_m,
    m_to_mm,
    MILLIMETERS_PER_METER,
)
from .height_config import CableHeightConfig, DEFAULT_HEIGHT_CONFIG

__all__ = [
    "LengthUnit",
    "Dimensions",
    "convert_length",
    "mm_to_m",
    "m_to_mm",
    "MILLIMETERS_PER_METER",
    "CableHeightConfig",
    "DEFAULT_HEIGHT_CONFIG",
]
