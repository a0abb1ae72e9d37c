# File: src/cable_router/equipment/snap_configs.py
"""
Static connection templates per equipment type.

Each canonical equipment type lists its connection points (snap points) and
the volumes where no cable may pass, both expressed relative to the centre
of an equipment instance at its reference size.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config.units import Dimensions
from ..utils.vectors import Vector3


class ConnectionType(Enum):
    """Kind of cable a snap point accepts."""
    POWER_HT = "power-ht"          # High voltage (transformer primary)
    POWER_BT = "power-bt"          # Low voltage
    POWER_INPUT = "power-input"
    POWER_OUTPUT = "power-output"
    EARTH = "earth"
    DATA = "data"
    CONTROL = "control"
    COOLING_IN = "cooling-in"
    COOLING_OUT = "cooling-out"


class ZoneShape(Enum):
    """Shape of a forbidden volume."""
    BOX = "box"
    CYLINDER = "cylinder"


@dataclass(frozen=True)
class EquipmentSnapPoint:
    """
    Connection point template in equipment-local space.

    Attributes:
        local_position: Offset from the equipment centre (metres, reference size)
        direction: Direction a cable leaves the equipment face
        connection_type: Kind of cable accepted
        label: Human-readable label
        cable_width: Recommended tray width (mm)
        max_cables: Maximum number of cables at this point
        priority: 1 = primary, 2 = secondary
    """
    local_position: Vector3
    direction: Vector3
    connection_type: ConnectionType
    label: str
    cable_width: float
    max_cables: int
    priority: int = 1


@dataclass(frozen=True)
class ForbiddenZone:
    """
    Volume template where cables must not be routed.

    For a box, size is (width, height, depth). For a cylinder, size is
    (radius, height, unused) with the axis vertical.

    Attributes:
        shape: Box or cylinder
        local_position: Centre of the volume relative to the equipment centre
        size: Extents as described above
        reason: Why the volume is off limits
    """
    shape: ZoneShape
    local_position: Vector3
    size: Vector3
    reason: str

    def contains_local(self, point: Vector3) -> bool:
        """
        Strict containment test for a point in the same local frame.
        """
        dx = point.x - self.local_position.x
        dy = point.y - self.local_position.y
        dz = point.z - self.local_position.z
        if self.shape == ZoneShape.BOX:
            return (
                abs(dx) < self.size.x / 2 and
                abs(dy) < self.size.y / 2 and
                abs(dz) < self.size.z / 2
            )
        radial = (dx * dx + dz * dz) ** 0.5
        return radial < self.size.x and abs(dy) < self.size.y / 2

    def local_extent(self) -> Vector3:
        """Full box extent enclosing the volume."""
        if self.shape == ZoneShape.CYLINDER:
            return Vector3(self.size.x * 2, self.size.y, self.size.x * 2)
        return self.size


@dataclass(frozen=True)
class EquipmentSnapConfig:
    """
    Snap point and forbidden zone templates for one canonical type.
    """
    object_type: str
    display_name: str
    snap_points: List[EquipmentSnapPoint] = field(default_factory=list)
    forbidden_zones: List[ForbiddenZone] = field(default_factory=list)


# Reference sizes (mm) the templates were authored against
EQUIPMENT_DIMENSIONS: Dict[str, Dimensions] = {
    "iso-container-40ft": Dimensions(12192, 2896, 2438),
    "bitmain-cooling-ec2-dt": Dimensions(12192, 1200, 2438),
    "oil-transformer": Dimensions(3500, 2800, 2500),
    "pdu": Dimensions(800, 2200, 600),
    "generator": Dimensions(6000, 2500, 2200),
    "switchgear": Dimensions(3000, 2200, 1200),
    "ups": Dimensions(1200, 2000, 800),
}


def _sp(position, direction, connection_type, label, cable_width, max_cables, priority):
    return EquipmentSnapPoint(
        local_position=Vector3(*position),
        direction=Vector3(*direction).normalized(),
        connection_type=connection_type,
        label=label,
        cable_width=cable_width,
        max_cables=max_cables,
        priority=priority,
    )


def _box(position, size, reason):
    return ForbiddenZone(ZoneShape.BOX, Vector3(*position), Vector3(*size), reason)


def _cylinder(position, radius, height, reason):
    return ForbiddenZone(ZoneShape.CYLINDER, Vector3(*position), Vector3(radius, height, 0.0), reason)


CT = ConnectionType

EQUIPMENT_SNAP_CONFIGS: Dict[str, EquipmentSnapConfig] = {
    # 40ft container housing the miners
    "iso-container-40ft": EquipmentSnapConfig(
        object_type="iso-container-40ft",
        display_name="ISO 40ft Container",
        snap_points=[
            _sp((-6.1, -0.8, 0), (-1, 0, 0), CT.POWER_BT, "Power Inlet", 300, 6, 1),
            _sp((-4, -0.8, -1.2), (0, 0, -1), CT.POWER_BT, "Front Power Inlet", 300, 6, 1),
            _sp((-6.1, 0.3, 0.5), (-1, 0, 0), CT.DATA, "Data", 100, 12, 2),
            _sp((-6.1, -1.4, -1), (0, -1, 0), CT.EARTH, "Earth", 50, 1, 1),
        ],
        forbidden_zones=[
            _box((7, 0, 0), (2, 3, 2.5), "Rear door access"),
        ],
    ),

    # Bitmain EC2-DT dry cooler
    "bitmain-cooling-ec2-dt": EquipmentSnapConfig(
        object_type="bitmain-cooling-ec2-dt",
        display_name="EC2-DT Cooling",
        snap_points=[
            _sp((-5, 0, 1.2), (0, 0, 1), CT.POWER_BT, "Fan Power", 200, 4, 1),
            _sp((-4, 0, 1.2), (0, 0, 1), CT.CONTROL, "Fan Control", 50, 2, 2),
            _sp((4, 0, 1.2), (0, 0, 1), CT.DATA, "Sensor Bus", 50, 4, 2),
            _sp((5.5, -0.5, 1), (0, 0, 1), CT.EARTH, "Cooling Earth", 25, 1, 1),
        ],
        forbidden_zones=[
            _box((0, 1.5, 0), (11, 2, 2), "Hot air exhaust"),
            _box((0, 0, -1.5), (12, 1.2, 1), "Fresh air intake"),
            _box((0, 0, 1.5), (12, 1.2, 1), "Fresh air intake"),
        ],
    ),

    # Oil transformer, connections on the sides rather than the roof
    "oil-transformer": EquipmentSnapConfig(
        object_type="oil-transformer",
        display_name="Transformer",
        snap_points=[
            _sp((0, -0.5, -1.3), (0, 0, -1), CT.POWER_HT, "HV Inlet", 150, 3, 1),
            _sp((0, -0.5, 1.3), (0, 0, 1), CT.POWER_BT, "LV Outlet", 600, 6, 1),
            _sp((1.3, -0.5, 0), (1, 0, 0), CT.POWER_BT, "LV Outlet Right", 300, 4, 1),
            _sp((-1.3, -0.5, 0), (-1, 0, 0), CT.POWER_BT, "LV Outlet Left", 300, 4, 1),
            _sp((-1.2, -1.4, -1), (0, -1, 0), CT.EARTH, "Earth", 70, 1, 1),
        ],
        forbidden_zones=[
            _box((-2.5, 0, 0), (1.5, 2, 2.5), "Cooling radiators"),
            _box((2.5, 0, 0), (1.5, 2, 2.5), "Cooling radiators"),
            _cylinder((0, 2.5, -1.3), 1.5, 2, "High voltage safety zone"),
        ],
    ),

    # Power distribution unit
    "pdu": EquipmentSnapConfig(
        object_type="pdu",
        display_name="PDU",
        snap_points=[
            _sp((0, -0.3, -0.45), (0, 0, -1), CT.POWER_INPUT, "Inlet", 300, 4, 1),
            _sp((-0.45, -0.3, 0), (-1, 0, 0), CT.POWER_OUTPUT, "Outlet C1", 200, 6, 1),
            _sp((0.45, -0.3, 0), (1, 0, 0), CT.POWER_OUTPUT, "Outlet C2", 200, 6, 1),
            _sp((0, -0.3, 0.45), (0, 0, 1), CT.POWER_OUTPUT, "Front Outlet", 300, 8, 1),
            _sp((-0.35, -1.0, -0.3), (0, -1, 0), CT.EARTH, "Earth", 35, 1, 1),
        ],
        forbidden_zones=[
            _box((0, 0, 0.8), (1, 2.2, 1), "Front door access"),
        ],
    ),

    "generator": EquipmentSnapConfig(
        object_type="generator",
        display_name="Generator",
        snap_points=[
            _sp((3.1, 0, 0), (1, 0, 0), CT.POWER_BT, "Power Output", 600, 6, 1),
            _sp((3.1, -0.5, 0.5), (1, 0, 0), CT.EARTH, "Generator Neutral", 150, 1, 1),
            _sp((-3.1, 0.5, 0.8), (-1, 0, 0), CT.CONTROL, "Start Control", 50, 4, 1),
            _sp((-3.1, -0.8, 0), (-1, 0, 0), CT.CONTROL, "Fuel Connection", 100, 1, 2),
            _sp((0, -1.2, 1.1), (0, -1, 0.3), CT.EARTH, "Generator Earth", 70, 1, 1),
        ],
        forbidden_zones=[
            _cylinder((2.5, 2, 0), 0.5, 3, "Engine exhaust"),
            _box((-4, 0.5, 0), (2, 2, 2), "Engine radiator"),
            _box((0, 1.5, -1.3), (3, 1, 0.8), "Engine air intake"),
        ],
    ),

    # HV/LV switchboard
    "switchgear": EquipmentSnapConfig(
        object_type="switchgear",
        display_name="Switchgear",
        snap_points=[
            _sp((0, 1.3, -0.7), (0, 1, -0.5), CT.POWER_HT, "HV Inlet", 200, 3, 1),
            _sp((-1, 0, 0.7), (0, 0, 1), CT.POWER_BT, "LV Feeder 1", 300, 4, 1),
            _sp((0, 0, 0.7), (0, 0, 1), CT.POWER_BT, "LV Feeder 2", 300, 4, 1),
            _sp((1, 0, 0.7), (0, 0, 1), CT.POWER_BT, "LV Feeder 3", 300, 4, 1),
            _sp((-1.5, -1, 0), (-1, -0.5, 0), CT.EARTH, "Switchgear Earth", 70, 1, 1),
            _sp((1.5, 0.8, 0.7), (0, 0, 1), CT.DATA, "Communication Bus", 50, 4, 2),
        ],
        forbidden_zones=[
            _box((0, 0, 1.5), (3.2, 2.2, 1.5), "Maintenance access"),
            _box((0, 0, -1.5), (3.2, 2.2, 1.5), "Rear access"),
        ],
    ),
}


def get_snap_config(canonical_type: str) -> Optional[EquipmentSnapConfig]:
    """Template set for a canonical type, or None."""
    return EQUIPMENT_SNAP_CONFIGS.get(canonical_type)


def get_reference_dimensions(canonical_type: str) -> Optional[Dimensions]:
    """Reference size for a canonical type, or None."""
    return EQUIPMENT_DIMENSIONS.get(canonical_type)
