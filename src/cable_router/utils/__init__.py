# File: src/cable_router/utils/__init__.py
"""Geometry and logging helpers shared by the routing engine."""

from .vectors import (
    Vector3,
    EulerOrder,
    EulerRotation,
    RotationMatrix,
    Transform,
    Box3,
    sample_segment,
    world_bounds,
)
from .logging_config import CableRouterLogger, get_logger

__all__ = [
    "Vector3",
    "EulerOrder",
    "EulerRotation",
    "RotationMatrix",
    "Transform",
    "Box3",
    "sample_segment",
    "world_bounds",
    "CableRouterLogger",
    "get_logger",
]
