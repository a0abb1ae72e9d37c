# File: tests/utils/test_vectors.py
"""Tests for vector, rotation and bounding box utilities."""

import math
import pytest

from cable_router.utils.vectors import (
    Box3,
    EulerOrder,
    EulerRotation,
    RotationMatrix,
    Transform,
    Vector3,
    sample_segment,
    world_bounds,
)


def assert_vec(actual: Vector3, expected, abs_tol=1e-9):
    assert actual.x == pytest.approx(expected[0], abs=abs_tol)
    assert actual.y == pytest.approx(expected[1], abs=abs_tol)
    assert actual.z == pytest.approx(expected[2], abs=abs_tol)


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_arithmetic(self):
        """Addition, subtraction and scaling are component-wise."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert -a == Vector3(-1, -2, -3)

    def test_length_and_distance(self):
        """Euclidean length and distance."""
        assert Vector3(3, 4, 0).length() == pytest.approx(5.0)
        assert Vector3(0, 0, 0).distance_to(Vector3(0, 3, 4)) == pytest.approx(5.0)

    def test_normalized_zero_vector(self):
        """Normalising the zero vector leaves it unchanged."""
        assert Vector3().normalized() == Vector3()
        assert Vector3(0, 0, 2).normalized() == Vector3(0, 0, 1)

    def test_from_iterable(self):
        """Vectors can be built from lists."""
        assert Vector3.from_iterable([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)


class TestSampling:
    """Tests for segment sampling."""

    def test_includes_endpoints(self):
        """n intervals give n + 1 samples including both ends."""
        samples = sample_segment(Vector3(0, 0, 0), Vector3(10, 0, 0), 4)
        assert len(samples) == 5
        assert samples[0] == Vector3(0, 0, 0)
        assert samples[-1] == Vector3(10, 0, 0)
        assert samples[2].x == pytest.approx(5.0)


class TestRotationMatrix:
    """Tests for rotation composition."""

    def test_about_y_quarter_turn(self):
        """A quarter turn about Y takes +X to -Z."""
        m = RotationMatrix.about_y(math.pi / 2)
        assert_vec(m.apply(Vector3(1, 0, 0)), (0, 0, -1))

    def test_xyz_order_is_rx_ry_rz(self):
        """XYZ Euler order multiplies Rx * Ry * Rz."""
        euler = EulerRotation(0.3, 0.5, 0.7, EulerOrder.XYZ)
        expected = (
            RotationMatrix.about_x(0.3)
            .compose(RotationMatrix.about_y(0.5))
            .compose(RotationMatrix.about_z(0.7))
        )
        v = Vector3(1, 2, 3)
        assert_vec(RotationMatrix.from_euler(euler).apply(v), expected.apply(v).to_tuple())

    def test_inverse_undoes_rotation(self):
        """The transpose is the inverse of a rotation."""
        m = RotationMatrix.from_euler(EulerRotation(0.2, -1.1, 0.4))
        v = Vector3(1.5, -2, 0.25)
        assert_vec(m.inverse().apply(m.apply(v)), v.to_tuple())


class TestTransform:
    """Tests for scale -> rotate -> translate placement."""

    def test_scale_applies_before_rotation(self):
        """Scaling happens in local axes, before the rotation."""
        t = Transform.from_euler(
            Vector3(10, 0, 0),
            EulerRotation(0, math.pi / 2, 0),
            Vector3(2, 1, 1),
        )
        # local +X scaled to 2, rotated onto -Z, then translated
        assert_vec(t.apply_point(Vector3(1, 0, 0)), (10, 0, -2))

    def test_directions_ignore_scale(self):
        """Directions are rotated and stay unit length."""
        t = Transform.from_euler(Vector3(5, 5, 5), EulerRotation(), Vector3(3, 1, 1))
        assert_vec(t.apply_direction(Vector3(1, 1, 0)), (math.sqrt(0.5), math.sqrt(0.5), 0))

    def test_to_local_round_trip(self):
        """to_local inverts apply_point including scale."""
        t = Transform.from_euler(Vector3(1, 2, 3), EulerRotation(0.1, 0.7, -0.3), Vector3(2, 0.5, 1.5))
        local = Vector3(0.4, -0.2, 1.1)
        assert_vec(t.to_local(t.apply_point(local)), local.to_tuple())


class TestBox3:
    """Tests for axis-aligned boxes."""

    def test_containment_is_inclusive(self):
        """Points on the faces are inside."""
        box = Box3(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert box.contains_point(Vector3(1, 1, 1))
        assert box.contains_point(Vector3(0, 0.5, 0))
        assert not box.contains_point(Vector3(1.0001, 0.5, 0.5))

    def test_world_bounds_of_rotated_box(self):
        """A 4 x 1 x 2 box turned a quarter about Y becomes 2 x 1 x 4."""
        t = Transform.from_euler(Vector3(), EulerRotation(0, math.pi / 2, 0))
        bounds = world_bounds(t, Box3.from_center_size(Vector3(), Vector3(4, 1, 2)))
        assert_vec(bounds.size, (2, 1, 4))

    def test_union(self):
        """Union encloses both boxes."""
        a = Box3(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = Box3(Vector3(-1, 2, 0), Vector3(0, 3, 5))
        u = a.union(b)
        assert u.min == Vector3(-1, 0, 0)
        assert u.max == Vector3(1, 3, 5)
