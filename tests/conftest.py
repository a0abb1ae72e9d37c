# tests/conftest.py
import sys
import os

# Add src directory and project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from typing import Optional, Tuple

from cable_router.config.units import Dimensions
from cable_router.equipment.snap_configs import ConnectionType
from cable_router.equipment.snap_points import WorldSnapPoint
from cable_router.scene import SceneObject
from cable_router.utils.vectors import EulerRotation, Vector3


def build_object(
    object_id: str = "obj-1",
    object_type: str = "rack",
    position: Tuple[float, float, float] = (0.0, 0.5, 0.0),
    dimensions: Tuple[float, float, float] = (1000, 1000, 1000),
    rotation: Optional[EulerRotation] = None,
    name: Optional[str] = None,
) -> SceneObject:
    """Build a scene object from plain tuples (position in m, dimensions in mm)."""
    return SceneObject(
        id=object_id,
        name=name or object_id,
        object_type=object_type,
        position=Vector3(*position),
        rotation=rotation or EulerRotation(),
        dimensions=Dimensions(*dimensions),
    )


def build_snap(
    snap_id: str = "snap-1",
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0),
    connection_type: ConnectionType = ConnectionType.POWER_BT,
    cable_width: float = 300,
    direction: Tuple[float, float, float] = (0.0, 1.0, 0.0),
    max_cables: int = 6,
    object_id: str = "obj-1",
) -> WorldSnapPoint:
    """Build a world snap point directly."""
    return WorldSnapPoint(
        id=snap_id,
        object_id=object_id,
        object_name=object_id,
        object_type="test",
        position=Vector3(*position),
        direction=Vector3(*direction).normalized(),
        connection_type=connection_type,
        label=snap_id,
        cable_width=cable_width,
        max_cables=max_cables,
        priority=1,
    )


@pytest.fixture
def container():
    """A 40ft container at its reference size, resting on the ground at the origin."""
    return build_object(
        "container-1", "iso-container-40ft",
        position=(0.0, 1.448, 0.0),
        dimensions=(12192, 2896, 2438),
        name="Container 1",
    )


@pytest.fixture
def transformer():
    """An oil transformer at its reference size, 20 m along X."""
    return build_object(
        "tx-1", "oil-transformer",
        position=(20.0, 1.4, 0.0),
        dimensions=(3500, 2800, 2500),
        name="Transformer 1",
    )


@pytest.fixture
def make_object():
    """Factory for scene objects."""
    return build_object


@pytest.fixture
def make_snap():
    """Factory for world snap points."""
    return build_snap
