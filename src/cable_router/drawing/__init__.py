# File: src/cable_router/drawing/__init__.py
"""User-drawn cable routes and the interactive routing tool."""

from .cable_route import (
    CableFitting,
    CablePoint,
    CableRoute,
    CableSegment,
    FittingType,
    PointType,
    RouteStatistics,
    RouteType,
    classify_turn,
    detect_fittings,
    duplicate_route,
    generate_id,
    summarize_routes,
)
from .routing_tool import (
    CableRoutingTool,
    RoutingToolSettings,
    SnapCandidate,
    ToolMode,
    find_nearest_snap_target,
    snap_to_grid,
)

__all__ = [
    "CableFitting",
    "CablePoint",
    "CableRoute",
    "CableSegment",
    "FittingType",
    "PointType",
    "RouteStatistics",
    "RouteType",
    "classify_turn",
    "detect_fittings",
    "duplicate_route",
    "generate_id",
    "summarize_routes",
    "CableRoutingTool",
    "RoutingToolSettings",
    "SnapCandidate",
    "ToolMode",
    "find_nearest_snap_target",
    "snap_to_grid",
]
