# File: src/cable_router/equipment/__init__.py
"""
Equipment Connection Registry

Static connection-point and forbidden-zone templates per equipment type,
alias resolution for loosely named types and their placement in world space.
"""

from .snap_configs import (
    ConnectionType,
    ZoneShape,
    EquipmentSnapPoint,
    ForbiddenZone,
    EquipmentSnapConfig,
    EQUIPMENT_DIMENSIONS,
    EQUIPMENT_SNAP_CONFIGS,
    get_snap_config,
    get_reference_dimensions,
)
from .type_resolver import (
    TYPE_ALIASES,
    TypeResolution,
    resolve_object_type,
    resolve_object_type_detailed,
)
from .snap_points import (
    WorldSnapPoint,
    compute_template_scale,
    generate_snap_points_for_object,
    generate_generic_snap_points,
    generate_scene_snap_points,
    snap_points_for_object,
    find_nearest_compatible_snap_point,
    filter_snap_points_by_type,
    group_snap_points_by_object,
)
from .forbidden import (
    WorldForbiddenZone,
    ForbiddenCheck,
    get_world_forbidden_zones,
    is_in_forbidden_zone,
)

__all__ = [
    # Templates
    "ConnectionType",
    "ZoneShape",
    "EquipmentSnapPoint",
    "ForbiddenZone",
    "EquipmentSnapConfig",
    "EQUIPMENT_DIMENSIONS",
    "EQUIPMENT_SNAP_CONFIGS",
    "get_snap_config",
    "get_reference_dimensions",
    # Type resolution
    "TYPE_ALIASES",
    "TypeResolution",
    "resolve_object_type",
    "resolve_object_type_detailed",
    # World snap points
    "WorldSnapPoint",
    "compute_template_scale",
    "generate_snap_points_for_object",
    "generate_generic_snap_points",
    "generate_scene_snap_points",
    "snap_points_for_object",
    "find_nearest_compatible_snap_point",
    "filter_snap_points_by_type",
    "group_snap_points_by_object",
    # Forbidden zones
    "WorldForbiddenZone",
    "ForbiddenCheck",
    "get_world_forbidden_zones",
    "is_in_forbidden_zone",
]
