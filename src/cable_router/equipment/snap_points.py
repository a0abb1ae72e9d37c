# File: src/cable_router/equipment/snap_points.py
"""
World-space snap points for equipment instances.

Template connection points are scaled by the ratio of the instance size to
the reference size of its type, rotated by the instance rotation and moved to
the instance position. Unknown types get a generic set of roof points plus an
earth point derived from the bounding box.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .snap_configs import (
    ConnectionType,
    EquipmentSnapConfig,
    get_reference_dimensions,
    get_snap_config,
)
from .type_resolver import resolve_object_type
from ..config.units import Dimensions
from ..errors import CableCapacityError
from ..scene import SceneObject
from ..utils.logging_config import get_logger
from ..utils.vectors import EulerRotation, Transform, Vector3

logger = get_logger(__name__)


@dataclass
class WorldSnapPoint:
    """
    A snap point placed in world space for one equipment instance.

    Attributes:
        id: Unique id, "{object_id}-snap-{index}" for templated points
        object_id: Owning object
        object_name: Owning object display name
        object_type: Owning object type as supplied by the scene
        position: World position (metres)
        direction: Unit direction a cable leaves the equipment
        connection_type: Kind of cable accepted
        label: Human-readable label
        cable_width: Recommended tray width (mm)
        max_cables: Capacity of the point
        priority: 1 = primary, 2 = secondary
        current_cables: Cables connected so far, never above max_cables
    """
    id: str
    object_id: str
    object_name: str
    object_type: str
    position: Vector3
    direction: Vector3
    connection_type: ConnectionType
    label: str
    cable_width: float
    max_cables: int
    priority: int
    current_cables: int = 0

    def __post_init__(self):
        if self.current_cables < 0 or self.current_cables > self.max_cables:
            raise CableCapacityError(self.id, self.max_cables, self.current_cables)

    @property
    def available_capacity(self) -> int:
        return self.max_cables - self.current_cables

    @property
    def is_full(self) -> bool:
        return self.current_cables >= self.max_cables

    def connect_cable(self, count: int = 1) -> None:
        """
        Register cables connected at this point.

        Raises:
            CableCapacityError: If the point cannot take that many more cables
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        if self.current_cables + count > self.max_cables:
            logger.warning(
                f"Snap point {self.id} is at capacity "
                f"({self.current_cables}/{self.max_cables}), refusing {count} cable(s)"
            )
            raise CableCapacityError(self.id, self.max_cables)
        self.current_cables += count

    def release_cable(self, count: int = 1) -> None:
        """Remove connected cables; the counter never drops below zero."""
        if count < 0:
            raise ValueError("count must be non-negative")
        self.current_cables = max(0, self.current_cables - count)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "object_id": self.object_id,
            "object_name": self.object_name,
            "object_type": self.object_type,
            "position": self.position.to_list(),
            "direction": self.direction.to_list(),
            "connection_type": self.connection_type.value,
            "label": self.label,
            "cable_width": self.cable_width,
            "max_cables": self.max_cables,
            "priority": self.priority,
            "current_cables": self.current_cables,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorldSnapPoint":
        return cls(
            id=data["id"],
            object_id=data["object_id"],
            object_name=data.get("object_name", ""),
            object_type=data.get("object_type", ""),
            position=Vector3.from_iterable(data["position"]),
            direction=Vector3.from_iterable(data.get("direction", (0.0, 1.0, 0.0))),
            connection_type=ConnectionType(data["connection_type"]),
            label=data.get("label", ""),
            cable_width=data.get("cable_width", 300),
            max_cables=data.get("max_cables", 1),
            priority=data.get("priority", 1),
            current_cables=data.get("current_cables", 0),
        )


def compute_template_scale(canonical_type: Optional[str], dimensions: Dimensions) -> Vector3:
    """
    Per-axis ratio of actual to reference dimensions.

    Types without a reference size are not scaled.
    """
    reference = get_reference_dimensions(canonical_type) if canonical_type else None
    if reference is None:
        return Vector3(1.0, 1.0, 1.0)
    return dimensions.scale_relative_to(reference)


def generate_snap_points_for_object(
    object_id: str,
    object_name: str,
    object_type: str,
    position: Vector3,
    rotation: EulerRotation,
    dimensions: Dimensions,
) -> List[WorldSnapPoint]:
    """
    Generate the world snap points of one equipment instance.

    Args:
        object_id: Instance id
        object_name: Instance display name
        object_type: Loose type string (resolved through the alias table)
        position: Instance centre in world metres
        rotation: Instance rotation
        dimensions: Instance size in millimetres

    Returns:
        World snap points, templated for known types, generic otherwise
    """
    canonical_type = resolve_object_type(object_type)
    config = get_snap_config(canonical_type) if canonical_type else None
    if config is None:
        logger.warning(f"No snap template for '{object_type}', using generic points")
        return generate_generic_snap_points(
            object_id, object_name, object_type, position, rotation, dimensions
        )

    scale = compute_template_scale(canonical_type, dimensions)
    transform = Transform.from_euler(position, rotation, scale)
    logger.debug(
        f"Snap points for {object_id} as '{canonical_type}' "
        f"(scale {scale.x:.3f}, {scale.y:.3f}, {scale.z:.3f})"
    )
    return _place_template_points(object_id, object_name, object_type, config, transform)


def _place_template_points(
    object_id: str,
    object_name: str,
    object_type: str,
    config: EquipmentSnapConfig,
    transform: Transform,
) -> List[WorldSnapPoint]:
    return [
        WorldSnapPoint(
            id=f"{object_id}-snap-{index}",
            object_id=object_id,
            object_name=object_name,
            object_type=object_type,
            position=transform.apply_point(template.local_position),
            direction=transform.apply_direction(template.direction),
            connection_type=template.connection_type,
            label=template.label,
            cable_width=template.cable_width,
            max_cables=template.max_cables,
            priority=template.priority,
        )
        for index, template in enumerate(config.snap_points)
    ]


# Generic roof points: (x factor of half width, z factor of half depth, label)
_GENERIC_ROOF_POINTS = (
    (-0.7, 0.0, "Roof Left"),
    (0.7, 0.0, "Roof Right"),
    (0.0, -0.7, "Roof Front"),
    (0.0, 0.7, "Roof Back"),
)


def generate_generic_snap_points(
    object_id: str,
    object_name: str,
    object_type: str,
    position: Vector3,
    rotation: EulerRotation,
    dimensions: Dimensions,
) -> List[WorldSnapPoint]:
    """
    Fallback snap points for equipment without a template.

    Four low-voltage points on the roof and one earth point at the lower
    front-left corner, positioned from the bounding box.
    """
    half = dimensions.half_extents()
    transform = Transform.from_euler(position, rotation)
    snap_points = []

    for i, (fx, fz, label) in enumerate(_GENERIC_ROOF_POINTS):
        local = Vector3(half.x * fx, half.y, half.z * fz)
        snap_points.append(WorldSnapPoint(
            id=f"{object_id}-snap-roof-{i}",
            object_id=object_id,
            object_name=object_name,
            object_type=object_type,
            position=transform.apply_point(local),
            direction=transform.apply_direction(Vector3(0.0, 1.0, 0.0)),
            connection_type=ConnectionType.POWER_BT,
            label=label,
            cable_width=300,
            max_cables=6,
            priority=2,
        ))

    earth_local = Vector3(-half.x, -half.y * 0.8, -half.z * 0.8)
    snap_points.append(WorldSnapPoint(
        id=f"{object_id}-snap-earth",
        object_id=object_id,
        object_name=object_name,
        object_type=object_type,
        position=transform.apply_point(earth_local),
        direction=transform.apply_direction(Vector3(-1.0, -0.5, 0.0)),
        connection_type=ConnectionType.EARTH,
        label="Earth",
        cable_width=50,
        max_cables=1,
        priority=1,
    ))
    return snap_points


def snap_points_for_object(obj: SceneObject) -> List[WorldSnapPoint]:
    """Snap points of a scene object."""
    return generate_snap_points_for_object(
        obj.id, obj.name, obj.object_type, obj.position, obj.rotation, obj.dimensions
    )


def generate_scene_snap_points(objects: Iterable[SceneObject]) -> List[WorldSnapPoint]:
    """Snap points of every object in the scene, in object order."""
    snap_points: List[WorldSnapPoint] = []
    for obj in objects:
        snap_points.extend(snap_points_for_object(obj))
    logger.info(f"Generated {len(snap_points)} snap points")
    return snap_points


def find_nearest_compatible_snap_point(
    position: Vector3,
    snap_points: Sequence[WorldSnapPoint],
    connection_type: Optional[ConnectionType] = None,
    max_distance: float = 2.0,
) -> Optional[WorldSnapPoint]:
    """
    Nearest snap point with spare capacity, optionally of a given type.

    Args:
        position: Query position
        snap_points: Candidates
        connection_type: Only consider points of this type when given
        max_distance: Search radius (exclusive)

    Returns:
        The nearest matching point or None
    """
    nearest = None
    min_distance = max_distance
    for snap_point in snap_points:
        if connection_type is not None and snap_point.connection_type != connection_type:
            continue
        if snap_point.is_full:
            continue
        distance = position.distance_to(snap_point.position)
        if distance < min_distance:
            min_distance = distance
            nearest = snap_point
    return nearest


def filter_snap_points_by_type(
    snap_points: Iterable[WorldSnapPoint],
    types: Iterable[ConnectionType],
) -> List[WorldSnapPoint]:
    wanted = set(types)
    return [sp for sp in snap_points if sp.connection_type in wanted]


def group_snap_points_by_object(
    snap_points: Iterable[WorldSnapPoint],
) -> Dict[str, List[WorldSnapPoint]]:
    grouped: Dict[str, List[WorldSnapPoint]] = {}
    for snap_point in snap_points:
        grouped.setdefault(snap_point.object_id, []).append(snap_point)
    return grouped
