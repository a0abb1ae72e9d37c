# File: tests/equipment/test_snap_points.py
"""Tests for world snap point generation."""

import logging
import math
import pytest

from cable_router.config.units import Dimensions
from cable_router.equipment.snap_configs import ConnectionType
from cable_router.equipment.snap_points import (
    compute_template_scale,
    filter_snap_points_by_type,
    find_nearest_compatible_snap_point,
    generate_scene_snap_points,
    group_snap_points_by_object,
    WorldSnapPoint,
    snap_points_for_object,
)
from cable_router.errors import CableCapacityError
from cable_router.utils.vectors import EulerRotation, Vector3


class TestTemplatedSnapPoints:
    """Snap points of equipment with a template."""

    def test_container_points(self, container):
        """Reference-size container places its template points around the centre."""
        points = snap_points_for_object(container)
        assert [p.id for p in points] == [f"container-1-snap-{i}" for i in range(4)]
        inlet = points[0]
        assert inlet.label == "Power Inlet"
        assert inlet.position.to_tuple() == pytest.approx((-6.1, 0.648, 0.0))
        assert inlet.direction.to_tuple() == pytest.approx((-1.0, 0.0, 0.0))
        assert inlet.object_name == "Container 1"
        assert inlet.current_cables == 0

    def test_rotation_applies_to_position_and_direction(self, make_object):
        """A quarter turn about Y carries -X points onto +Z."""
        obj = make_object(
            "c-rot", "iso-container-40ft",
            position=(0, 1.448, 0), dimensions=(12192, 2896, 2438),
            rotation=EulerRotation(0, math.pi / 2, 0),
        )
        inlet = snap_points_for_object(obj)[0]
        assert inlet.position.to_tuple() == pytest.approx((0.0, 0.648, 6.1), abs=1e-9)
        assert inlet.direction.to_tuple() == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)

    def test_template_scaled_to_instance(self, make_object):
        """A transformer twice the reference width spreads its side outlets."""
        obj = make_object("tx-wide", "oil-transformer", position=(0, 1.4, 0), dimensions=(7000, 2800, 2500))
        assert compute_template_scale("oil-transformer", obj.dimensions).to_tuple() == pytest.approx((2, 1, 1))
        right = snap_points_for_object(obj)[2]
        assert right.label == "LV Outlet Right"
        assert right.position.x == pytest.approx(2.6)
        assert right.direction.to_tuple() == pytest.approx((1.0, 0.0, 0.0))

    def test_alias_resolves_template(self, make_object):
        """Vendor names use the canonical template."""
        obj = make_object("hd5", "Antspace HD5", position=(0, 1.448, 0), dimensions=(12192, 2896, 2438))
        assert len(snap_points_for_object(obj)) == 4

    def test_no_scale_without_reference(self):
        assert compute_template_scale(None, Dimensions(5000, 1000, 1000)) == Vector3(1, 1, 1)


class TestGenericSnapPoints:
    """Fallback snap points for unknown equipment."""

    def test_roof_and_earth_points(self, make_object):
        """Four roof points and one earth point from the bounding box."""
        obj = make_object("rack-1", "battery rack", position=(0, 0.5, 0), dimensions=(2000, 1000, 1000))
        points = snap_points_for_object(obj)
        assert [p.id for p in points] == [
            "rack-1-snap-roof-0",
            "rack-1-snap-roof-1",
            "rack-1-snap-roof-2",
            "rack-1-snap-roof-3",
            "rack-1-snap-earth",
        ]
        roof_left = points[0]
        assert roof_left.position.to_tuple() == pytest.approx((-0.7, 1.0, 0.0))
        assert roof_left.connection_type == ConnectionType.POWER_BT
        assert roof_left.priority == 2
        assert roof_left.max_cables == 6

        earth = points[-1]
        assert earth.position.to_tuple() == pytest.approx((-1.0, 0.1, -0.4))
        assert earth.connection_type == ConnectionType.EARTH
        assert earth.max_cables == 1
        assert earth.direction.to_tuple() == pytest.approx(
            (-2 / math.sqrt(5), -1 / math.sqrt(5), 0.0)
        )

    def test_earth_direction_rotates(self, make_object):
        """The earth direction follows the object rotation."""
        obj = make_object(
            "rack-2", "rack", position=(0, 0.5, 0),
            rotation=EulerRotation(0, math.pi, 0),
        )
        earth = snap_points_for_object(obj)[-1]
        assert earth.direction.x == pytest.approx(2 / math.sqrt(5))

    def test_ups_uses_generic_points(self, make_object):
        obj = make_object("ups-1", "ups", position=(0, 1.0, 0), dimensions=(1200, 2000, 800))
        assert len(snap_points_for_object(obj)) == 5

    def test_fallback_logged_as_warning(self, make_object, caplog):
        obj = make_object("rack-3", "battery rack")
        with caplog.at_level(logging.WARNING, logger="cable_router.equipment.snap_points"):
            snap_points_for_object(obj)
        assert "No snap template for 'battery rack'" in caplog.text


class TestCableCapacity:
    """currentCables never exceeds maxCables."""

    def test_connect_until_full(self, make_snap):
        snap = make_snap(max_cables=2)
        snap.connect_cable()
        snap.connect_cable()
        assert snap.is_full
        assert snap.available_capacity == 0
        with pytest.raises(CableCapacityError):
            snap.connect_cable()
        assert snap.current_cables == 2

    def test_over_capacity_batch_rejected(self, make_snap):
        snap = make_snap(max_cables=3)
        with pytest.raises(CableCapacityError):
            snap.connect_cable(4)
        assert snap.current_cables == 0

    def test_release_floors_at_zero(self, make_snap):
        snap = make_snap()
        snap.connect_cable(2)
        snap.release_cable(5)
        assert snap.current_cables == 0

    def test_negative_release_rejected(self, make_snap):
        """Releasing a negative count cannot push the counter past capacity."""
        snap = make_snap(max_cables=2)
        with pytest.raises(ValueError):
            snap.release_cable(-5)
        assert snap.current_cables == 0

    def test_from_dict_over_capacity_rejected(self, make_snap):
        data = make_snap(max_cables=1).to_dict()
        data["current_cables"] = 4
        with pytest.raises(CableCapacityError):
            WorldSnapPoint.from_dict(data)

    def test_negative_counter_rejected(self, make_snap):
        data = make_snap().to_dict()
        data["current_cables"] = -1
        with pytest.raises(CableCapacityError):
            WorldSnapPoint.from_dict(data)

    def test_from_dict_keeps_valid_counter(self, make_snap):
        data = make_snap(max_cables=3).to_dict()
        data["current_cables"] = 3
        assert WorldSnapPoint.from_dict(data).is_full

    def test_exhaustion_logged(self, make_snap, caplog):
        snap = make_snap("full-1", max_cables=1)
        snap.connect_cable()
        with caplog.at_level(logging.WARNING, logger="cable_router.equipment.snap_points"):
            with pytest.raises(CableCapacityError):
                snap.connect_cable()
        assert "full-1 is at capacity" in caplog.text

    def test_invariant_over_scene(self, container, transformer):
        """Simulated connections keep every point within capacity."""
        points = generate_scene_snap_points([container, transformer])
        for snap in points:
            for _ in range(10):
                if snap.is_full:
                    break
                snap.connect_cable()
            assert snap.current_cables <= snap.max_cables


class TestSnapPointSearch:
    """Search, filtering and grouping helpers."""

    def test_nearest_compatible(self, make_snap):
        near = make_snap("near", (1, 0, 0))
        far = make_snap("far", (1.5, 0, 0))
        data = make_snap("data", (0.5, 0, 0), ConnectionType.DATA)
        result = find_nearest_compatible_snap_point(
            Vector3(), [far, near, data], ConnectionType.POWER_BT
        )
        assert result is near

    def test_skips_full_points(self, make_snap):
        full = make_snap("full", (0.1, 0, 0), max_cables=1)
        full.connect_cable()
        spare = make_snap("spare", (1, 0, 0))
        assert find_nearest_compatible_snap_point(Vector3(), [full, spare]) is spare

    def test_max_distance_is_exclusive(self, make_snap):
        edge = make_snap("edge", (2.0, 0, 0))
        assert find_nearest_compatible_snap_point(Vector3(), [edge]) is None
        assert find_nearest_compatible_snap_point(Vector3(), [edge], max_distance=2.1) is edge

    def test_filter_and_group(self, container, transformer):
        points = generate_scene_snap_points([container, transformer])
        earths = filter_snap_points_by_type(points, [ConnectionType.EARTH])
        assert {p.object_id for p in earths} == {"container-1", "tx-1"}
        grouped = group_snap_points_by_object(points)
        assert len(grouped["container-1"]) == 4
        assert len(grouped["tx-1"]) == 5
