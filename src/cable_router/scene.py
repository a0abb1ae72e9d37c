# File: src/cable_router/scene.py
"""
Scene object snapshot consumed by the routing engine.

The host scene supplies one record per placed piece of equipment. Position is
the object's geometric centre in metres, rotation is a set of Euler angles and
dimensions are the stored millimetre sizes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
import math

from .config.units import Dimensions
from .errors import InvalidDimensionsError
from .utils.vectors import Box3, EulerRotation, Transform, Vector3


@dataclass(frozen=True)
class SceneObject:
    """
    A piece of equipment placed in the scene.

    Attributes:
        id: Unique object identifier
        name: Display name (used in collision suggestions)
        object_type: Loose type string, resolved through the equipment registry
        position: Geometric centre in world metres
        rotation: Euler rotation in radians
        dimensions: Bounding dimensions in millimetres

    Raises:
        InvalidDimensionsError: If any dimension is zero, negative or not finite
    """
    id: str
    name: str
    object_type: str
    position: Vector3 = field(default_factory=Vector3)
    rotation: EulerRotation = field(default_factory=EulerRotation)
    dimensions: Dimensions = field(default_factory=lambda: Dimensions(1000.0, 1000.0, 1000.0))

    def __post_init__(self):
        for axis in ("width", "height", "depth"):
            value = getattr(self.dimensions, axis)
            if not math.isfinite(value) or value <= 0:
                raise InvalidDimensionsError(self.id, axis, value)

    @property
    def size(self) -> Vector3:
        """Full extents in metres."""
        return self.dimensions.to_meters()

    @property
    def base_height(self) -> float:
        return self.position.y - self.size.y / 2

    @property
    def top_height(self) -> float:
        return self.position.y + self.size.y / 2

    def footprint(self) -> Box3:
        """Unrotated bounding box of the object in world metres."""
        return Box3.from_center_size(self.position, self.size)

    def transform(self, scale: Vector3 = Vector3(1.0, 1.0, 1.0)) -> Transform:
        """Local-to-world transform of this object with an optional template scale."""
        return Transform.from_euler(self.position, self.rotation, scale)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "object_type": self.object_type,
            "position": self.position.to_list(),
            "rotation": self.rotation.to_dict(),
            "dimensions": self.dimensions.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SceneObject":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            object_type=data.get("object_type", ""),
            position=Vector3.from_iterable(data.get("position", (0.0, 0.0, 0.0))),
            rotation=EulerRotation.from_dict(data.get("rotation", {})),
            dimensions=Dimensions.from_dict(data["dimensions"]),
        )
