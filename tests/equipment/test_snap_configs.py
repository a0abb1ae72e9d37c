# File: tests/equipment/test_snap_configs.py
"""Tests for the static equipment template table."""

import pytest

from cable_router.equipment.snap_configs import (
    EQUIPMENT_DIMENSIONS,
    EQUIPMENT_SNAP_CONFIGS,
    ConnectionType,
    ZoneShape,
    get_reference_dimensions,
    get_snap_config,
)
from cable_router.utils.vectors import Vector3


class TestTemplateTable:
    """Tests for EQUIPMENT_SNAP_CONFIGS."""

    def test_known_types(self):
        """Six template sets are registered."""
        assert set(EQUIPMENT_SNAP_CONFIGS) == {
            "iso-container-40ft",
            "bitmain-cooling-ec2-dt",
            "oil-transformer",
            "pdu",
            "generator",
            "switchgear",
        }

    def test_every_template_has_reference_size(self):
        """Templates are authored against a reference size."""
        for key in EQUIPMENT_SNAP_CONFIGS:
            assert get_reference_dimensions(key) is not None

    def test_ups_has_size_but_no_template(self):
        """UPS falls through to the generic generator."""
        assert "ups" in EQUIPMENT_DIMENSIONS
        assert get_snap_config("ups") is None

    def test_directions_are_unit_vectors(self):
        """Template directions are normalised."""
        for config in EQUIPMENT_SNAP_CONFIGS.values():
            for sp in config.snap_points:
                assert sp.direction.length() == pytest.approx(1.0)

    def test_transformer_hv_inlet(self):
        """The transformer primary accepts high voltage."""
        config = get_snap_config("oil-transformer")
        hv = config.snap_points[0]
        assert hv.label == "HV Inlet"
        assert hv.connection_type == ConnectionType.POWER_HT
        assert hv.cable_width == 150
        assert hv.max_cables == 3


class TestForbiddenZoneTemplate:
    """Tests for local forbidden volume containment."""

    def test_box_containment_is_strict(self):
        """Points on the box faces are not inside."""
        zone = get_snap_config("iso-container-40ft").forbidden_zones[0]
        assert zone.shape == ZoneShape.BOX
        assert zone.contains_local(Vector3(7, 0, 0))
        assert not zone.contains_local(Vector3(8, 0, 0))
        assert not zone.contains_local(Vector3(6, 0, 0))

    def test_cylinder_containment(self):
        """Cylinders test radial distance and half height."""
        zone = get_snap_config("oil-transformer").forbidden_zones[2]
        assert zone.shape == ZoneShape.CYLINDER
        assert zone.reason == "High voltage safety zone"
        assert zone.contains_local(Vector3(1.0, 2.5, -1.3))
        assert not zone.contains_local(Vector3(1.6, 2.5, -1.3))
        assert not zone.contains_local(Vector3(0, 3.6, -1.3))

    def test_cylinder_extent(self):
        """A cylinder is enclosed by a 2r x h x 2r box."""
        zone = get_snap_config("oil-transformer").forbidden_zones[2]
        assert zone.local_extent() == Vector3(3.0, 2.0, 3.0)
