# File: src/cable_router/routing/collisions.py
"""
Collision detection between cable paths and forbidden volumes.

Every segment is sampled densely. Each sample is tested against the
forbidden zones of the zone set (world AABBs) and, independently, against
every object's own forbidden templates in object-local space.
"""

from dataclasses import dataclass, field
from typing import List, Sequence
import math

from .path_synthesizer import CablePathSegment
from .zones import CableZone, ZoneType
from ..equipment.forbidden import is_in_forbidden_zone
from ..scene import SceneObject
from ..utils.logging_config import get_logger
from ..utils.vectors import Vector3, sample_segment

logger = get_logger(__name__)

# Minimum samples per metre of segment
SAMPLES_PER_METER = 5
MIN_SAMPLES_PER_SEGMENT = 5


@dataclass
class CollisionResult:
    """
    Collision report for a path.

    Attributes:
        has_collision: True when any sample hit a forbidden volume
        collision_points: Every colliding sample, one entry per hit
        colliding_objects: Ids of objects whose volumes were hit, first-seen order
        suggestions: Deduplicated "Avoid: reason (object name)" hints
    """
    has_collision: bool = False
    collision_points: List[Vector3] = field(default_factory=list)
    colliding_objects: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "has_collision": self.has_collision,
            "collision_points": [p.to_list() for p in self.collision_points],
            "colliding_objects": list(self.colliding_objects),
            "suggestions": list(self.suggestions),
        }


def collision_sample_count(segment: CablePathSegment) -> int:
    """Number of sampling intervals for a segment."""
    return max(MIN_SAMPLES_PER_SEGMENT, math.ceil(segment.length * SAMPLES_PER_METER))


def check_path_collisions(
    path: Sequence[CablePathSegment],
    zones: Sequence[CableZone],
    objects: Sequence[SceneObject],
) -> CollisionResult:
    """
    Sample a path against forbidden zones and object forbidden templates.

    Args:
        path: Segments to check
        zones: Zone set of the current scene
        objects: Scene snapshot the zones were generated from

    Returns:
        CollisionResult
    """
    forbidden_zones = [z for z in zones if z.zone_type == ZoneType.FORBIDDEN]
    result = CollisionResult()

    def add_object(object_id: str) -> None:
        if object_id not in result.colliding_objects:
            result.colliding_objects.append(object_id)

    for segment in path:
        for point in sample_segment(segment.start, segment.end, collision_sample_count(segment)):
            for zone in forbidden_zones:
                if zone.contains_point(point):
                    logger.trace(f"Sample {point.to_tuple()} inside {zone.id}")
                    result.collision_points.append(point)
                    if zone.object_id:
                        add_object(zone.object_id)

            for obj in objects:
                check = is_in_forbidden_zone(point, obj)
                if not check.forbidden:
                    continue
                logger.trace(f"Sample {point.to_tuple()} hits {check.reason} of {obj.id}")
                result.collision_points.append(point)
                add_object(obj.id)
                suggestion = f"Avoid: {check.reason} ({obj.name})"
                if suggestion not in result.suggestions:
                    result.suggestions.append(suggestion)

    result.has_collision = bool(result.collision_points)
    if result.has_collision:
        logger.warning(
            f"Path collides with {len(result.colliding_objects)} object(s) "
            f"at {len(result.collision_points)} sample(s)"
        )
    return result
