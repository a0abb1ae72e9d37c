# File: src/cable_router/drawing/routing_tool.py
"""
Interactive cable routing tool.

A mode-based state machine driven by clicks and key presses from the host
viewport. Routes are built incrementally: every click after the first adds
a segment to the active route immediately, "finish" only retags the last
point as the route end.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from .cable_route import (
    CablePoint,
    CableRoute,
    CableSegment,
    PointType,
    RouteType,
    generate_id,
)
from ..equipment.snap_points import WorldSnapPoint
from ..errors import UnknownRouteError
from ..routing.trays import (
    DEFAULT_PRESET,
    TRAY_PRESETS,
    CableTrayType,
    TrayPreset,
    Voltage,
)
from ..utils.logging_config import get_logger
from ..utils.vectors import Vector3

logger = get_logger(__name__)

# Cables assumed on a newly drawn segment
DEFAULT_CABLE_COUNT = 6


class ToolMode(Enum):
    """Mutually exclusive tool modes."""
    SELECT = "select"
    DRAW = "draw"
    EDIT = "edit"
    JUNCTION = "junction"
    DELETE = "delete"


@dataclass
class RoutingToolSettings:
    """
    User-adjustable tool settings.

    Attributes:
        snap_enabled: Snap clicks onto nearby external snap points
        snap_radius: Search radius for external snap points (m)
        grid_snap: Round clicks to the grid
        grid_size: Grid spacing (m)
        auto_fitting: Insert fittings automatically
        show_labels: Display route labels
        show_dimensions: Display segment lengths
        default_tray_type: Tray type of the active preset
        default_width: Tray width of the active preset (mm)
        default_height: Tray height of the active preset (mm)
    """
    snap_enabled: bool = True
    snap_radius: float = 0.5
    grid_snap: bool = True
    grid_size: float = 0.25
    auto_fitting: bool = True
    show_labels: bool = True
    show_dimensions: bool = True
    default_tray_type: CableTrayType = CableTrayType.LADDER
    default_width: float = 300
    default_height: float = 100


@dataclass(frozen=True)
class SnapCandidate:
    """A snap target offered by the scene (equipment edge, centre, corner...)."""
    position: Vector3
    object_id: Optional[str] = None
    object_name: str = ""
    kind: str = "connection"


SnapTarget = Union[SnapCandidate, WorldSnapPoint]


def snap_to_grid(point: Vector3, grid_size: float) -> Vector3:
    """Round each axis to the nearest multiple of ``grid_size``."""
    return Vector3(
        round(point.x / grid_size) * grid_size,
        round(point.y / grid_size) * grid_size,
        round(point.z / grid_size) * grid_size,
    )


def find_nearest_snap_target(
    position: Vector3,
    targets: Sequence[SnapTarget],
    radius: float,
) -> Optional[SnapTarget]:
    """Closest target strictly within ``radius``, or None."""
    nearest = None
    best = radius
    for target in targets:
        distance = position.distance_to(target.position)
        if distance < best:
            best = distance
            nearest = target
    return nearest


# Mode shortcuts, matched case-insensitively for letters
MODE_KEYS: Dict[str, ToolMode] = {
    "v": ToolMode.SELECT,
    "p": ToolMode.DRAW,
    "e": ToolMode.EDIT,
    "j": ToolMode.JUNCTION,
    "Delete": ToolMode.DELETE,
    "Backspace": ToolMode.DELETE,
}

# Setting toggles, ignored when a modifier is held
TOGGLE_KEYS: Dict[str, str] = {
    "s": "snap_enabled",
    "g": "grid_snap",
}


class CableRoutingTool:
    """
    Drawing state machine for cable routes.

    The tool owns its routes. External snap targets are supplied by the host
    and replaced whenever the scene changes.
    """

    def __init__(
        self,
        routes: Optional[List[CableRoute]] = None,
        snap_targets: Optional[Sequence[SnapTarget]] = None,
        settings: Optional[RoutingToolSettings] = None,
        preset: str = DEFAULT_PRESET,
    ):
        self.routes: List[CableRoute] = list(routes) if routes else []
        self.snap_targets: List[SnapTarget] = list(snap_targets) if snap_targets else []
        self.settings = settings or RoutingToolSettings()
        self.mode = ToolMode.SELECT
        self.active_route_id: Optional[str] = None
        self.is_drawing = False
        self.drawing_points: List[Vector3] = []
        self.drawing_targets: List[Optional[SnapTarget]] = []
        self.preview_point: Optional[Vector3] = None
        self.selected_segment_ids: List[str] = []
        self.selected_point_ids: List[str] = []
        self.active_preset = DEFAULT_PRESET
        self.apply_preset(preset)

    @property
    def preset(self) -> TrayPreset:
        return TRAY_PRESETS[self.active_preset]

    @property
    def active_route(self) -> Optional[CableRoute]:
        if self.active_route_id is None:
            return None
        return self._find_route(self.active_route_id)

    def _find_route(self, route_id: str) -> Optional[CableRoute]:
        for route in self.routes:
            if route.id == route_id:
                return route
        return None

    def get_route(self, route_id: str) -> CableRoute:
        route = self._find_route(route_id)
        if route is None:
            raise UnknownRouteError(route_id)
        return route

    def _reset_drawing(self) -> None:
        self.is_drawing = False
        self.drawing_points = []
        self.drawing_targets = []
        self.preview_point = None

    # Modes and settings

    def set_mode(self, mode: Union[ToolMode, str]) -> None:
        """Switch mode, discarding uncommitted drawing points."""
        if not isinstance(mode, ToolMode):
            mode = ToolMode(mode)
        self.mode = mode
        self._reset_drawing()
        logger.debug(f"Tool mode: {mode.value}")

    def toggle_setting(self, name: str) -> bool:
        """
        Flip a boolean setting.

        Returns:
            The new value

        Raises:
            ValueError: If ``name`` is not a boolean setting
        """
        bool_settings = {
            f.name for f in fields(RoutingToolSettings)
            if isinstance(getattr(self.settings, f.name), bool)
        }
        if name not in bool_settings:
            raise ValueError(f"Unknown toggle setting: {name}")
        value = not getattr(self.settings, name)
        setattr(self.settings, name, value)
        return value

    def apply_preset(self, key: str) -> TrayPreset:
        """Make a tray preset the active one for new segments."""
        if key not in TRAY_PRESETS:
            raise ValueError(
                f"Unknown tray preset: {key}. Valid: {', '.join(TRAY_PRESETS)}"
            )
        preset = TRAY_PRESETS[key]
        self.active_preset = key
        self.settings.default_tray_type = preset.tray_type
        self.settings.default_width = preset.width
        self.settings.default_height = preset.height
        return preset

    # Route management

    def create_route(self, preset: Optional[str] = None) -> CableRoute:
        """Create an empty route from a preset, make it active and start drawing."""
        if preset is not None:
            self.apply_preset(preset)
        config = self.preset
        route = CableRoute(
            id=generate_id(),
            name=f"Route {len(self.routes) + 1} - {config.name}",
            route_type=RouteType.BRANCH if config.voltage == Voltage.DATA else RouteType.MAIN,
            voltage=config.voltage,
            color=config.color,
        )
        self.routes.append(route)
        self.active_route_id = route.id
        self.mode = ToolMode.DRAW
        logger.info(f"Created route '{route.name}' ({route.id})")
        return route

    def delete_route(self, route_id: str) -> None:
        route = self.get_route(route_id)
        self.routes.remove(route)
        if self.active_route_id == route_id:
            self.active_route_id = None
            self._reset_drawing()

    def toggle_route_visibility(self, route_id: str) -> bool:
        route = self.get_route(route_id)
        route.visible = not route.visible
        return route.visible

    # Drawing

    def resolve_click(self, position: Vector3) -> Vector3:
        """Final position of a click after grid and object snapping."""
        position, _ = self._resolve(position)
        return position

    def _resolve(self, position: Vector3):
        target = None
        if self.settings.grid_snap:
            position = snap_to_grid(position, self.settings.grid_size)
        if self.settings.snap_enabled:
            target = find_nearest_snap_target(
                position, self.snap_targets, self.settings.snap_radius
            )
            if target is not None:
                position = target.position
        return position, target

    def place_point(self, position: Vector3) -> Optional[Vector3]:
        """
        Handle a click while drawing.

        Returns:
            The resolved point, or None when not in draw mode or no route is active
        """
        if self.mode != ToolMode.DRAW:
            return None
        route = self.active_route
        if route is None:
            return None

        final_position, target = self._resolve(position)
        self.drawing_points.append(final_position)
        self.drawing_targets.append(target)
        self.is_drawing = True

        if len(self.drawing_points) >= 2:
            self._commit_segment(route)
        return final_position

    def _commit_segment(self, route: CableRoute) -> None:
        config = self.preset
        start_target, end_target = self.drawing_targets[-2:]
        start = CablePoint(
            id=generate_id(),
            position=self.drawing_points[-2],
            point_type=PointType.START if not route.points else PointType.WAYPOINT,
            object_id=getattr(start_target, "object_id", None),
        )
        end = CablePoint(
            id=generate_id(),
            position=self.drawing_points[-1],
            point_type=PointType.WAYPOINT,
            object_id=getattr(end_target, "object_id", None),
        )
        segment = CableSegment(
            id=generate_id(),
            start_point_id=start.id,
            end_point_id=end.id,
            tray_type=config.tray_type,
            width=config.width,
            height=config.height,
            cable_count=DEFAULT_CABLE_COUNT,
            cable_types=list(config.cable_types),
            color=config.color,
        )
        length = route.add_segment(start, end, segment)
        logger.debug(f"Route {route.id}: +{length:.2f}m ({route.total_length:.2f}m total)")

    def update_preview(self, position: Optional[Vector3]) -> Optional[Vector3]:
        """Track the cursor while drawing."""
        if position is None or self.mode != ToolMode.DRAW:
            self.preview_point = None
        else:
            self.preview_point = self.resolve_click(position)
        return self.preview_point

    def finish_drawing(self) -> None:
        """End the gesture and mark the last committed point as the route end."""
        if not self.is_drawing or self.active_route_id is None:
            return
        route = self.active_route
        if route is not None and route.points:
            route.points[-1].point_type = PointType.END
        self.is_drawing = False
        self.drawing_points = []
        self.drawing_targets = []

    def cancel_drawing(self) -> None:
        self._reset_drawing()

    # Keyboard

    def handle_key(
        self,
        key: str,
        text_input_focused: bool = False,
        modifier: bool = False,
    ) -> bool:
        """
        Apply a keyboard shortcut.

        Args:
            key: Key name as reported by the host ("v", "Enter", "Delete"...)
            text_input_focused: True while a text field has focus
            modifier: True while Ctrl or Meta is held

        Returns:
            True when the key was handled
        """
        if text_input_focused:
            return False

        mode = MODE_KEYS.get(key) or MODE_KEYS.get(key.lower())
        if mode is not None:
            self.set_mode(mode)
            return True
        if key == "Escape":
            self.cancel_drawing()
            return True
        if key == "Enter":
            self.finish_drawing()
            return True
        if key in TOGGLE_KEYS and not modifier:
            self.toggle_setting(TOGGLE_KEYS[key])
            return True
        return False
