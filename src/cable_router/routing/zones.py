# File: src/cable_router/routing/zones.py
"""
Cable zone generation for a scene.

The zone set is rebuilt from scratch whenever scene geometry changes. For
each object it holds one equipment zone and one forbidden zone per template
volume; one passage zone covers the whole scene plus a perimeter margin.
Point lookups resolve overlaps as forbidden > equipment > passage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from ..config.height_config import CableHeightConfig, DEFAULT_HEIGHT_CONFIG
from ..equipment.forbidden import get_world_forbidden_zones
from ..scene import SceneObject
from ..utils.logging_config import get_logger
from ..utils.vectors import Box3, Vector3, world_bounds

logger = get_logger(__name__)

PASSAGE_ZONE_ID = "main-passage"


class ZoneType(Enum):
    """Cable zone categories, in increasing lookup priority."""
    PASSAGE = "passage"
    EQUIPMENT = "equipment"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class CableZone:
    """
    World-space AABB with cable height rules.

    Attributes:
        id: Zone id ("{object_id}-equipment", "{object_id}-forbidden-{i}", "main-passage")
        zone_type: Passage, equipment or forbidden
        bounds: Axis-aligned bounds in metres
        min_cable_height: Lowest height a cable may cross this zone at
        max_cable_height: Highest allowed cable height
        preferred_height: Suggested cable height
        object_id: Owning object for equipment and forbidden zones
        reason: Why the zone is forbidden
    """
    id: str
    zone_type: ZoneType
    bounds: Box3
    min_cable_height: float
    max_cable_height: float
    preferred_height: float
    object_id: Optional[str] = None
    reason: Optional[str] = None

    def contains_point(self, point: Vector3) -> bool:
        return self.bounds.contains_point(point)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "zone_type": self.zone_type.value,
            "bounds": self.bounds.to_dict(),
            "min_cable_height": self.min_cable_height,
            "max_cable_height": self.max_cable_height,
            "preferred_height": self.preferred_height,
            "object_id": self.object_id,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CableZone":
        return cls(
            id=data["id"],
            zone_type=ZoneType(data["zone_type"]),
            bounds=Box3.from_dict(data["bounds"]),
            min_cable_height=data.get("min_cable_height", 0.0),
            max_cable_height=data.get("max_cable_height", 0.0),
            preferred_height=data.get("preferred_height", 0.0),
            object_id=data.get("object_id"),
            reason=data.get("reason"),
        )


@dataclass(frozen=True)
class ZoneInfo:
    """Zone classification of a single point."""
    zone_type: ZoneType
    min_cable_height: float
    reason: Optional[str] = None
    zone_id: Optional[str] = None
    object_id: Optional[str] = None


def object_bounds(obj: SceneObject) -> Box3:
    """World AABB of an object, accounting for its rotation."""
    local_box = Box3.from_center_size(Vector3(), obj.size)
    return world_bounds(obj.transform(), local_box)


def create_equipment_zone(obj: SceneObject, config: CableHeightConfig) -> CableZone:
    """
    Clearance zone around one object.

    The footprint is padded horizontally by the equipment margin and spans
    vertically from the object base to its top. Cables crossing it must stay
    at least the configured clearance above the top.
    """
    bounds = object_bounds(obj)
    margin = config.equipment_margin
    padded = Box3(
        Vector3(bounds.min.x - margin, bounds.min.y, bounds.min.z - margin),
        Vector3(bounds.max.x + margin, bounds.max.y, bounds.max.z + margin),
    )
    min_cable_height = bounds.max.y + config.min_clearance_above_equipment
    return CableZone(
        id=f"{obj.id}-equipment",
        zone_type=ZoneType.EQUIPMENT,
        bounds=padded,
        min_cable_height=min_cable_height,
        max_cable_height=config.max_height,
        preferred_height=max(min_cable_height, config.default_tray_height),
        object_id=obj.id,
    )


def create_forbidden_zones(obj: SceneObject) -> List[CableZone]:
    """One forbidden CableZone per forbidden template of the object."""
    return [
        CableZone(
            id=f"{obj.id}-forbidden-{idx}",
            zone_type=ZoneType.FORBIDDEN,
            bounds=world_zone.bounds,
            min_cable_height=0.0,
            max_cable_height=0.0,
            preferred_height=0.0,
            object_id=obj.id,
            reason=world_zone.reason,
        )
        for idx, world_zone in enumerate(get_world_forbidden_zones(obj))
    ]


def create_passage_zone(
    objects: Sequence[SceneObject],
    config: CableHeightConfig,
) -> Optional[CableZone]:
    """
    Single walkway zone covering the scene footprint plus a perimeter margin.

    Returns None for an empty scene.
    """
    if not objects:
        return None

    footprint = object_bounds(objects[0])
    for obj in objects[1:]:
        footprint = footprint.union(object_bounds(obj))

    margin = config.passage_margin
    return CableZone(
        id=PASSAGE_ZONE_ID,
        zone_type=ZoneType.PASSAGE,
        bounds=Box3(
            Vector3(footprint.min.x - margin, 0.0, footprint.min.z - margin),
            Vector3(footprint.max.x + margin, config.max_height, footprint.max.z + margin),
        ),
        min_cable_height=config.min_passage_height,
        max_cable_height=config.max_height,
        preferred_height=config.default_tray_height,
    )


def generate_cable_zones(
    objects: Iterable[SceneObject],
    config: CableHeightConfig = DEFAULT_HEIGHT_CONFIG,
) -> List[CableZone]:
    """
    Build the complete zone set for a scene.

    Args:
        objects: Scene snapshot
        config: Height rules

    Returns:
        Equipment and forbidden zones in object order, then the passage zone
    """
    objects = list(objects)
    zones: List[CableZone] = []

    for obj in objects:
        zones.append(create_equipment_zone(obj, config))
        zones.extend(create_forbidden_zones(obj))

    passage = create_passage_zone(objects, config)
    if passage is not None:
        zones.append(passage)

    forbidden_count = sum(1 for z in zones if z.zone_type == ZoneType.FORBIDDEN)
    logger.info(
        f"Generated {len(zones)} cable zones for {len(objects)} objects "
        f"({forbidden_count} forbidden)"
    )
    return zones


def get_zone_at_point(point: Vector3, zones: Sequence[CableZone]) -> ZoneInfo:
    """
    Classify a point against a zone set.

    Forbidden zones are tested first and any hit wins, then equipment zones,
    otherwise the point is in the passage.
    """
    for zone in zones:
        if zone.zone_type == ZoneType.FORBIDDEN and zone.contains_point(point):
            return ZoneInfo(
                zone_type=ZoneType.FORBIDDEN,
                min_cable_height=0.0,
                reason=zone.reason,
                zone_id=zone.id,
                object_id=zone.object_id,
            )

    for zone in zones:
        if zone.zone_type == ZoneType.EQUIPMENT and zone.contains_point(point):
            return ZoneInfo(
                zone_type=ZoneType.EQUIPMENT,
                min_cable_height=zone.min_cable_height,
                zone_id=zone.id,
                object_id=zone.object_id,
            )

    passage = next((z for z in zones if z.zone_type == ZoneType.PASSAGE), None)
    if passage is None:
        return ZoneInfo(
            zone_type=ZoneType.PASSAGE,
            min_cable_height=DEFAULT_HEIGHT_CONFIG.min_passage_height,
        )
    return ZoneInfo(
        zone_type=ZoneType.PASSAGE,
        min_cable_height=passage.min_cable_height,
        zone_id=passage.id,
    )
