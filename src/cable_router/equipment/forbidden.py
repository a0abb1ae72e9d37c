# File: src/cable_router/equipment/forbidden.py
"""
Forbidden volumes of equipment instances.

Two views of the same templates: world-space AABBs for zone generation, and
an exact box/cylinder test performed in the object's local frame, where the
query point is brought back through the inverse rotation and scale.
"""

from dataclasses import dataclass
from typing import List, Optional

from .snap_configs import ForbiddenZone, ZoneShape, get_snap_config
from .snap_points import compute_template_scale
from .type_resolver import resolve_object_type
from ..scene import SceneObject
from ..utils.vectors import Box3, Transform, Vector3, world_bounds


@dataclass(frozen=True)
class WorldForbiddenZone:
    """
    A forbidden zone template placed for one equipment instance.

    Attributes:
        template: The local template
        world_position: Centre of the volume in world metres
        size: Template size scaled to the instance
        bounds: World AABB enclosing the rotated, scaled volume
    """
    template: ForbiddenZone
    world_position: Vector3
    size: Vector3
    bounds: Box3

    @property
    def reason(self) -> str:
        return self.template.reason

    @property
    def shape(self) -> ZoneShape:
        return self.template.shape


@dataclass(frozen=True)
class ForbiddenCheck:
    """Result of testing a point against an object's forbidden zones."""
    forbidden: bool
    reason: Optional[str] = None


def _object_transform(obj: SceneObject) -> tuple:
    canonical_type = resolve_object_type(obj.object_type)
    config = get_snap_config(canonical_type) if canonical_type else None
    scale = compute_template_scale(canonical_type, obj.dimensions)
    return config, obj.transform(scale)


def get_world_forbidden_zones(obj: SceneObject) -> List[WorldForbiddenZone]:
    """
    Forbidden zones of an object in world space.

    Returns an empty list for types without a template.
    """
    config, transform = _object_transform(obj)
    if config is None:
        return []
    return [
        _place_zone(zone, transform)
        for zone in config.forbidden_zones
    ]


def _place_zone(zone: ForbiddenZone, transform: Transform) -> WorldForbiddenZone:
    local_box = Box3.from_center_size(zone.local_position, zone.local_extent())
    size = transform.apply_size(zone.size)
    if zone.shape == ZoneShape.CYLINDER:
        # radius scales with X, unused third component stays 0
        size = Vector3(size.x, size.y, 0.0)
    return WorldForbiddenZone(
        template=zone,
        world_position=transform.apply_point(zone.local_position),
        size=size,
        bounds=world_bounds(transform, local_box),
    )


def is_in_forbidden_zone(point: Vector3, obj: SceneObject) -> ForbiddenCheck:
    """
    Test a world point against an object's own forbidden-zone templates.

    The point is transformed into template-local space (inverse translation,
    rotation and scale) and tested with strict box/cylinder containment.
    """
    config, transform = _object_transform(obj)
    if config is None:
        return ForbiddenCheck(forbidden=False)

    local_point = transform.to_local(point)
    for zone in config.forbidden_zones:
        if zone.contains_local(local_point):
            return ForbiddenCheck(forbidden=True, reason=zone.reason)
    return ForbiddenCheck(forbidden=False)
