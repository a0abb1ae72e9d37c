# File: src/cable_router/errors.py
"""
Exceptions raised at the boundaries of the cable routing engine.

Geometry functions report expected conditions (forbidden-zone hits, height
clamping) through their return values. These exceptions are reserved for
malformed input and broken invariants.
"""

from typing import Optional


class CableRouterError(ValueError):
    """Base class for cable router errors."""


class InvalidDimensionsError(CableRouterError):
    """Raised when an equipment dimension is zero, negative or not finite."""

    def __init__(self, object_id: str, axis: str, value: float):
        self.object_id = object_id
        self.axis = axis
        self.value = value
        super().__init__(
            f"Object '{object_id}' has invalid {axis} dimension: {value!r} mm"
        )


class CableCapacityError(CableRouterError):
    """Raised when connecting a cable to a snap point that is already full."""

    def __init__(self, snap_point_id: str, max_cables: int, current_cables: Optional[int] = None):
        self.snap_point_id = snap_point_id
        self.max_cables = max_cables
        self.current_cables = current_cables
        if current_cables is None:
            message = f"Snap point '{snap_point_id}' already carries {max_cables} cable(s)"
        else:
            message = (
                f"Snap point '{snap_point_id}' cannot carry {current_cables} cable(s), "
                f"capacity is {max_cables}"
            )
        super().__init__(message)


class RouteIntegrityError(CableRouterError):
    """Raised when a cable segment references a point missing from its route."""

    def __init__(self, route_id: str, segment_id: str, point_id: Optional[str] = None):
        self.route_id = route_id
        self.segment_id = segment_id
        self.point_id = point_id
        super().__init__(
            f"Segment '{segment_id}' of route '{route_id}' references "
            f"unknown point '{point_id}'"
        )


class UnknownRouteError(CableRouterError):
    """Raised when the routing tool is asked to act on a route it does not hold."""

    def __init__(self, route_id: str):
        self.route_id = route_id
        super().__init__(f"Route '{route_id}' not found")
