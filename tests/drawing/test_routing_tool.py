# File: tests/drawing/test_routing_tool.py
"""Tests for the interactive routing tool state machine."""

import pytest

from cable_router.drawing.cable_route import PointType, RouteType
from cable_router.drawing.routing_tool import (
    CableRoutingTool,
    RoutingToolSettings,
    SnapCandidate,
    ToolMode,
    snap_to_grid,
)
from cable_router.errors import UnknownRouteError
from cable_router.routing.trays import CableTrayType, Voltage
from cable_router.utils.vectors import Vector3


@pytest.fixture
def tool():
    """A tool with one external snap point near (0.3, 0, 0)."""
    return CableRoutingTool(
        snap_targets=[SnapCandidate(Vector3(0.3, 0, 0.4), object_id="pdu-1", object_name="PDU 1")]
    )


class TestSnapping:
    """Grid and object snapping."""

    def test_snap_to_grid(self):
        assert snap_to_grid(Vector3(0.3, 0.1, -0.4), 0.25) == Vector3(0.25, 0.0, -0.5)

    def test_external_snap_beats_grid(self, tool):
        """The second click resolves to the nearby external snap point."""
        tool.create_route()
        first = tool.place_point(Vector3(0, 0, 0))
        second = tool.place_point(Vector3(0.3, 0, 0))

        assert first == Vector3(0, 0, 0)
        assert second == Vector3(0.3, 0, 0.4)
        route = tool.active_route
        assert route.points[-1].position == Vector3(0.3, 0, 0.4)
        assert route.points[-1].object_id == "pdu-1"
        assert route.total_length == pytest.approx(0.5)

    def test_snap_radius_is_exclusive(self, tool):
        """A target exactly at the radius is not used."""
        tool.create_route()
        assert tool.place_point(Vector3(0, 0, 0)) == Vector3(0, 0, 0)

    def test_snapping_disabled(self, tool):
        tool.settings.snap_enabled = False
        tool.settings.grid_snap = False
        tool.create_route()
        assert tool.place_point(Vector3(0.3, 0, 0)) == Vector3(0.3, 0, 0)


class TestDrawing:
    """Incremental route building."""

    def test_segments_materialise_per_click(self, tool):
        tool.settings.snap_enabled = False
        route = tool.create_route()
        tool.place_point(Vector3(0, 0, 0))
        assert tool.is_drawing
        assert route.segments == []

        tool.place_point(Vector3(1, 0, 0))
        tool.place_point(Vector3(1, 0, 1))

        assert len(route.segments) == 2
        assert len(route.points) == 4
        assert route.points[0].point_type == PointType.START
        assert route.points[2].point_type == PointType.WAYPOINT
        assert route.total_length == pytest.approx(2.0)
        segment = route.segments[0]
        assert segment.tray_type == CableTrayType.LADDER
        assert segment.width == 300
        assert segment.cable_count == 6
        route.validate()

    def test_finish_marks_end(self, tool):
        tool.settings.snap_enabled = False
        route = tool.create_route()
        tool.place_point(Vector3(0, 0, 0))
        tool.place_point(Vector3(2, 0, 0))
        tool.finish_drawing()
        assert route.points[-1].point_type == PointType.END
        assert not tool.is_drawing
        assert tool.drawing_points == []

    def test_mode_switch_discards_uncommitted_points(self, tool):
        tool.settings.snap_enabled = False
        route = tool.create_route()
        tool.place_point(Vector3(0, 0, 0))
        tool.place_point(Vector3(2, 0, 0))
        tool.set_mode(ToolMode.SELECT)
        assert tool.drawing_points == []
        assert not tool.is_drawing
        assert len(route.segments) == 1

    def test_ignored_outside_draw_mode(self, tool):
        tool.create_route()
        tool.set_mode("select")
        assert tool.place_point(Vector3(1, 0, 0)) is None

    def test_ignored_without_active_route(self, tool):
        tool.set_mode(ToolMode.DRAW)
        assert tool.place_point(Vector3(1, 0, 0)) is None

    def test_preview(self, tool):
        tool.set_mode(ToolMode.DRAW)
        assert tool.update_preview(Vector3(1.1, 0, 0)) == Vector3(1.0, 0, 0)
        tool.cancel_drawing()
        assert tool.preview_point is None


class TestRouteManagement:
    """Creating, deleting and styling routes."""

    def test_create_route_from_preset(self, tool):
        route = tool.create_route()
        assert route.name == "Route 1 - Power Branch"
        assert route.route_type == RouteType.MAIN
        assert route.voltage == Voltage.LV
        assert tool.mode == ToolMode.DRAW
        assert tool.active_route_id == route.id

    def test_data_route_is_branch(self, tool):
        tool.create_route()
        route = tool.create_route("data-main")
        assert route.name == "Route 2 - Main Data Network"
        assert route.route_type == RouteType.BRANCH
        assert tool.settings.default_tray_type == CableTrayType.WIRE_MESH
        assert tool.settings.default_width == 200

    def test_unknown_preset(self, tool):
        with pytest.raises(ValueError, match="Unknown tray preset"):
            tool.apply_preset("steam")

    def test_delete_route(self, tool):
        route = tool.create_route()
        tool.delete_route(route.id)
        assert tool.routes == []
        assert tool.active_route_id is None
        with pytest.raises(UnknownRouteError):
            tool.delete_route(route.id)

    def test_toggle_visibility(self, tool):
        route = tool.create_route()
        assert tool.toggle_route_visibility(route.id) is False
        assert tool.toggle_route_visibility(route.id) is True


class TestKeyboard:
    """Keyboard shortcuts."""

    @pytest.mark.parametrize("key,mode", [
        ("v", ToolMode.SELECT),
        ("P", ToolMode.DRAW),
        ("e", ToolMode.EDIT),
        ("j", ToolMode.JUNCTION),
        ("Delete", ToolMode.DELETE),
        ("Backspace", ToolMode.DELETE),
    ])
    def test_mode_keys(self, tool, key, mode):
        assert tool.handle_key(key)
        assert tool.mode == mode

    def test_suppressed_while_typing(self, tool):
        assert not tool.handle_key("p", text_input_focused=True)
        assert tool.mode == ToolMode.SELECT

    def test_toggle_keys(self, tool):
        assert tool.handle_key("s")
        assert tool.settings.snap_enabled is False
        assert tool.handle_key("g")
        assert tool.settings.grid_snap is False

    def test_toggle_ignored_with_modifier(self, tool):
        assert not tool.handle_key("s", modifier=True)
        assert tool.settings.snap_enabled is True

    def test_enter_and_escape(self, tool):
        tool.settings.snap_enabled = False
        route = tool.create_route()
        tool.place_point(Vector3(0, 0, 0))
        tool.place_point(Vector3(1, 0, 0))
        tool.handle_key("Enter")
        assert route.points[-1].point_type == PointType.END
        tool.place_point(Vector3(2, 0, 0))
        tool.handle_key("Escape")
        assert tool.drawing_points == []

    def test_toggle_setting_rejects_non_boolean(self, tool):
        with pytest.raises(ValueError):
            tool.toggle_setting("snap_radius")

    def test_settings_defaults(self):
        settings = RoutingToolSettings()
        assert settings.snap_radius == 0.5
        assert settings.grid_size == 0.25
