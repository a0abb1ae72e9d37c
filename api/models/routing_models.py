from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Any, Optional, Literal

from cable_router.config.height_config import CableHeightConfig
from cable_router.equipment.snap_configs import ConnectionType
from cable_router.routing.path_synthesizer import CablePathSegment
from cable_router.routing.trays import CableCategory
from cable_router.scene import SceneObject
from cable_router.utils.vectors import Vector3


class Point3D(BaseModel):
    """3D point coordinates in metres (Y up)."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate (elevation)")
    z: float = Field(description="Z coordinate")

    @field_validator('x', 'y', 'z')
    @classmethod
    def validate_coordinate(cls, v: float) -> float:
        """Validate that coordinate values are reasonable."""
        if abs(v) > 10000:
            raise ValueError("Coordinate value exceeds reasonable range")
        return v

    def to_vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


class RotationModel(BaseModel):
    """Euler rotation in radians."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    order: Literal["XYZ", "XZY", "YXZ", "YZX", "ZXY", "ZYX"] = "XYZ"


class DimensionsModel(BaseModel):
    """Equipment dimensions in millimetres."""
    width: float = Field(description="Size along X (mm)", gt=0)
    height: float = Field(description="Size along Y (mm)", gt=0)
    depth: float = Field(description="Size along Z (mm)", gt=0)


class SceneObjectModel(BaseModel):
    """An equipment instance of the scene."""
    id: str = Field(description="Unique object id", min_length=1)
    name: str = Field(default="", description="Display name")
    object_type: str = Field(description="Equipment type, canonical or alias")
    position: Point3D = Field(description="Geometric centre in metres")
    rotation: RotationModel = Field(default_factory=RotationModel)
    dimensions: DimensionsModel

    def to_scene_object(self) -> SceneObject:
        data = self.model_dump()
        data["position"] = self.position.to_vector().to_list()
        data["name"] = self.name or self.id
        return SceneObject.from_dict(data)


class HeightConfigModel(BaseModel):
    """Height rules in metres."""
    min_passage_height: float = Field(default=3.0, ge=0)
    min_clearance_above_equipment: float = Field(default=0.3, ge=0)
    default_tray_height: float = Field(default=3.5, ge=0)
    max_height: float = Field(default=6.0, gt=0)
    equipment_margin: float = Field(default=0.5, ge=0)
    passage_margin: float = Field(default=5.0, ge=0)

    @model_validator(mode='after')
    def validate_order(self) -> 'HeightConfigModel':
        """Ensure min <= default <= max."""
        self.to_config().validate()
        return self

    def to_config(self) -> CableHeightConfig:
        return CableHeightConfig.from_dict(self.model_dump())


class SceneRequest(BaseModel):
    """Scene snapshot with optional height rules."""
    objects: List[SceneObjectModel] = Field(default_factory=list)
    height_config: Optional[HeightConfigModel] = None

    @field_validator('objects')
    @classmethod
    def validate_unique_ids(cls, v: List[SceneObjectModel]) -> List[SceneObjectModel]:
        """Object ids must be unique within a scene."""
        ids = [obj.id for obj in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Object ids must be unique")
        return v

    def scene_objects(self) -> List[SceneObject]:
        return [obj.to_scene_object() for obj in self.objects]

    def config(self) -> CableHeightConfig:
        if self.height_config is None:
            return CableHeightConfig()
        return self.height_config.to_config()


class HeightRequest(SceneRequest):
    """Straight run between two points."""
    start: Point3D
    end: Point3D


class PathRequest(SceneRequest):
    """Connection between two snap points of the scene."""
    start_snap_id: str = Field(description="Snap point the cable leaves")
    end_snap_id: str = Field(description="Snap point the cable reaches")
    cable_categories: List[CableCategory] = Field(
        default_factory=lambda: [CableCategory.POWER]
    )


class TrayRequest(SceneRequest):
    """Tray recommendation for a connection."""
    start_snap_id: str
    end_snap_id: str
    cable_categories: List[CableCategory] = Field(default_factory=list)


class PathSegmentModel(BaseModel):
    """A straight piece of a cable path."""
    start: Point3D
    end: Point3D
    height: float = 0.0
    kind: Literal["horizontal", "vertical", "ramp"] = "horizontal"

    def to_segment(self) -> CablePathSegment:
        return CablePathSegment.from_dict({
            "start": self.start.to_vector().to_list(),
            "end": self.end.to_vector().to_list(),
            "height": self.height,
            "kind": self.kind,
        })


class CollisionRequest(SceneRequest):
    """Path to check against the scene."""
    path: List[PathSegmentModel] = Field(min_length=1)


class SnapPointsResponse(BaseModel):
    """World snap points of a scene."""
    snap_points: List[Dict[str, Any]]
    count: int
    by_type: Dict[str, int] = Field(default_factory=dict)


class ZonesResponse(BaseModel):
    """Cable zones of a scene."""
    zones: List[Dict[str, Any]]
    count: int


class PathResponse(BaseModel):
    """Synthesized path with its analyses."""
    segments: List[Dict[str, Any]]
    total_length: float
    height: Dict[str, Any]
    collisions: Dict[str, Any]
    tray: Dict[str, Any]


def count_by_connection_type(snap_points: List[Dict[str, Any]]) -> Dict[str, int]:
    counts = {t.value: 0 for t in ConnectionType}
    for sp in snap_points:
        counts[sp["connection_type"]] += 1
    return counts
