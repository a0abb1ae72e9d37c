# File: src/cable_router/routing/height.py
"""
Cruising height arbitration.

A cable run travels horizontally at one elevation between its vertical
transitions. The elevation is the highest of the default tray height, the
clearance demanded by every equipment zone under the straight run and any
connection point already mounted above the passage minimum, capped at the
configured maximum.
"""

from dataclasses import dataclass, field
from typing import List, Sequence
import math

from .zones import CableZone, ZoneType, get_zone_at_point
from ..config.height_config import CableHeightConfig, DEFAULT_HEIGHT_CONFIG
from ..utils.logging_config import get_logger
from ..utils.vectors import Vector3, sample_segment

logger = get_logger(__name__)

FORBIDDEN_WARNING_PREFIX = "Path crosses forbidden zone"


@dataclass
class HeightCalculationResult:
    """
    Outcome of a height arbitration.

    Attributes:
        height: Cruising height in metres
        reason: Which constraint decided the height
        warnings: Non-fatal problems (forbidden crossings, clamping)
        is_valid: False when the straight run crosses a forbidden zone
    """
    height: float
    reason: str
    warnings: List[str] = field(default_factory=list)
    is_valid: bool = True

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "reason": self.reason,
            "warnings": list(self.warnings),
            "is_valid": self.is_valid,
        }


def height_sample_count(start: Vector3, end: Vector3) -> int:
    """Number of sampling intervals along a straight run."""
    return max(10, math.ceil(start.distance_to(end) * 2))


def calculate_optimal_height(
    start: Vector3,
    end: Vector3,
    zones: Sequence[CableZone],
    config: CableHeightConfig = DEFAULT_HEIGHT_CONFIG,
) -> HeightCalculationResult:
    """
    Safe cruising height for a run between two points.

    Args:
        start: Run start (world metres)
        end: Run end (world metres)
        zones: Zone set of the current scene
        config: Height rules

    Returns:
        HeightCalculationResult; forbidden crossings are reported as warnings
        with is_valid False, never raised
    """
    warnings: List[str] = []
    is_valid = True
    required_min_height = config.min_passage_height
    max_equipment_height = 0.0
    reported_zones = set()

    samples = sample_segment(start, end, height_sample_count(start, end))
    for sample in samples:
        zone_info = get_zone_at_point(sample, zones)
        logger.trace(f"Sample {sample.to_tuple()} in {zone_info.zone_type.value} zone {zone_info.zone_id}")

        if zone_info.zone_type == ZoneType.FORBIDDEN:
            is_valid = False
            if zone_info.zone_id not in reported_zones:
                reported_zones.add(zone_info.zone_id)
                warnings.append(f"{FORBIDDEN_WARNING_PREFIX}: {zone_info.reason}")
        elif zone_info.zone_type == ZoneType.EQUIPMENT:
            required_min_height = max(required_min_height, zone_info.min_cable_height)
            max_equipment_height = max(max_equipment_height, zone_info.min_cable_height)

    optimal_height = config.default_tray_height
    reason = "standard tray height"

    if required_min_height > optimal_height:
        optimal_height = required_min_height
        reason = f"raised to clear equipment ({max_equipment_height:.2f}m required)"

    if start.y > config.min_passage_height or end.y > config.min_passage_height:
        connection_height = max(start.y, end.y)
        if connection_height > optimal_height:
            optimal_height = connection_height
            reason = f"aligned to connection point ({connection_height:.2f}m)"

    if optimal_height > config.max_height:
        optimal_height = config.max_height
        warnings.append(f"Height limited to maximum ({config.max_height}m)")
        logger.warning(
            f"Run {start.to_tuple()} -> {end.to_tuple()} clamped to {config.max_height}m"
        )

    if not is_valid:
        logger.warning(
            f"Run {start.to_tuple()} -> {end.to_tuple()} crosses "
            f"{len(reported_zones)} forbidden zone(s)"
        )
    logger.debug(f"Optimal height {optimal_height:.2f}m: {reason}")

    return HeightCalculationResult(
        height=optimal_height,
        reason=reason,
        warnings=warnings,
        is_valid=is_valid,
    )


def calculate_segment_height(
    points: Sequence[Vector3],
    zones: Sequence[CableZone],
    config: CableHeightConfig = DEFAULT_HEIGHT_CONFIG,
) -> HeightCalculationResult:
    """
    Uniform cruising height for a multi-point route.

    The route is held at the maximum of the per-pair heights so it travels
    at one elevation end to end.
    """
    if len(points) < 2:
        return HeightCalculationResult(
            height=config.default_tray_height,
            reason="not enough points",
        )

    results = [
        calculate_optimal_height(points[i], points[i + 1], zones, config)
        for i in range(len(points) - 1)
    ]

    warnings: List[str] = []
    for result in results:
        for warning in result.warnings:
            if warning not in warnings:
                warnings.append(warning)

    return HeightCalculationResult(
        height=max(r.height for r in results),
        reason=f"uniform height over {len(results)} segments",
        warnings=warnings,
        is_valid=all(r.is_valid for r in results),
    )
