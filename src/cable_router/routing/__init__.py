# File: src/cable_router/routing/__init__.py
"""
Cable Routing Module

Spatial planning for cable runs between equipment connection points.

Components:
- Zone generation: equipment clearance, forbidden and passage zones
- Height arbitration: safe cruising height for a run
- Path synthesis: stub/riser/cruise polyline between two snap points
- Collision detection: path samples against forbidden volumes
- Tray recommendation: tray type and width for a connection
"""

from .zones import (
    ZoneType,
    CableZone,
    ZoneInfo,
    PASSAGE_ZONE_ID,
    generate_cable_zones,
    get_zone_at_point,
    object_bounds,
)
from .height import (
    HeightCalculationResult,
    calculate_optimal_height,
    calculate_segment_height,
)
from .path_synthesizer import (
    SegmentKind,
    CablePathSegment,
    generate_optimized_path,
    classify_segment,
    path_length,
)
from .collisions import CollisionResult, check_path_collisions
from .trays import (
    CableTrayType,
    CableCategory,
    Voltage,
    TrayStyle,
    TrayPreset,
    TRAY_STYLES,
    TRAY_PRESETS,
    DEFAULT_PRESET,
    CableTrayRecommendation,
    recommend_cable_tray_type,
    estimate_support_count,
)

__all__ = [
    # Zones
    "ZoneType",
    "CableZone",
    "ZoneInfo",
    "PASSAGE_ZONE_ID",
    "generate_cable_zones",
    "get_zone_at_point",
    "object_bounds",
    # Height
    "HeightCalculationResult",
    "calculate_optimal_height",
    "calculate_segment_height",
    # Paths
    "SegmentKind",
    "CablePathSegment",
    "generate_optimized_path",
    "classify_segment",
    "path_length",
    # Collisions
    "CollisionResult",
    "check_path_collisions",
    # Trays
    "CableTrayType",
    "CableCategory",
    "Voltage",
    "TrayStyle",
    "TrayPreset",
    "TRAY_STYLES",
    "TRAY_PRESETS",
    "DEFAULT_PRESET",
    "CableTrayRecommendation",
    "recommend_cable_tray_type",
    "estimate_support_count",
]
