# File: src/cable_router/utils/vectors.py
"""
3D vector, rotation and bounding-box utilities.

All routing geometry is expressed in metres in a Y-up world frame (the
ground plane is X/Z). Local-to-world placement of equipment geometry is
always composed in the same order: scale, then rotate, then translate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple
import math


@dataclass(frozen=True)
class Vector3:
    """
    Immutable 3D vector.

    Attributes:
        x: X component (metres)
        y: Y component, vertical (metres)
        z: Z component (metres)
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def multiply(self, other: "Vector3") -> "Vector3":
        """Component-wise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def divide(self, other: "Vector3") -> "Vector3":
        """Component-wise quotient."""
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance_to(self, other: "Vector3") -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def normalized(self) -> "Vector3":
        """Unit vector in the same direction (zero vector stays zero)."""
        length = self.length()
        if length == 0.0:
            return self
        return self * (1.0 / length)

    def with_y(self, y: float) -> "Vector3":
        """Copy with the vertical component replaced."""
        return Vector3(self.x, y, self.z)

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation, t=0 gives self and t=1 gives other."""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def is_close(self, other: "Vector3", tol: float = 1e-6) -> bool:
        return self.distance_to(other) <= tol

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_list(self) -> list:
        return [self.x, self.y, self.z]

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        """Create from any 3-element sequence."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


def sample_segment(start: Vector3, end: Vector3, sample_count: int) -> list:
    """
    Evenly sample a straight segment, both endpoints included.

    Args:
        start: Segment start
        end: Segment end
        sample_count: Number of intervals (the result has sample_count + 1 points)

    Returns:
        List of Vector3 samples from start to end
    """
    return [start.lerp(end, i / sample_count) for i in range(sample_count + 1)]


class EulerOrder(Enum):
    """Axis order in which Euler angles are applied to a local vector."""
    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"


@dataclass(frozen=True)
class EulerRotation:
    """
    Euler angles in radians.

    With the default XYZ order the rotation matrix is Rx * Ry * Rz, which is
    the convention used by the 3D scene that supplies object rotations.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    order: EulerOrder = EulerOrder.XYZ

    def is_identity(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z, "order": self.order.value}

    @classmethod
    def from_dict(cls, data: dict) -> "EulerRotation":
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            z=data.get("z", 0.0),
            order=EulerOrder(data.get("order", "XYZ")),
        )


Matrix3Rows = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]


@dataclass(frozen=True)
class RotationMatrix:
    """
    Orthonormal 3x3 rotation matrix stored row-major.

    ``a.compose(b)`` is the matrix product a * b, so the composed matrix
    applies ``b`` first and ``a`` second.
    """
    rows: Matrix3Rows = (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    )

    @classmethod
    def identity(cls) -> "RotationMatrix":
        return cls()

    @classmethod
    def about_x(cls, angle: float) -> "RotationMatrix":
        c, s = math.cos(angle), math.sin(angle)
        return cls(((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)))

    @classmethod
    def about_y(cls, angle: float) -> "RotationMatrix":
        c, s = math.cos(angle), math.sin(angle)
        return cls(((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))

    @classmethod
    def about_z(cls, angle: float) -> "RotationMatrix":
        c, s = math.cos(angle), math.sin(angle)
        return cls(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def from_euler(cls, euler: EulerRotation) -> "RotationMatrix":
        """
        Build the rotation for a set of Euler angles.

        The letters of the order are multiplied left to right, e.g. XYZ
        gives Rx * Ry * Rz.
        """
        axis_matrices = {
            "X": cls.about_x(euler.x),
            "Y": cls.about_y(euler.y),
            "Z": cls.about_z(euler.z),
        }
        result = cls.identity()
        for axis in euler.order.value:
            result = result.compose(axis_matrices[axis])
        return result

    def compose(self, other: "RotationMatrix") -> "RotationMatrix":
        """Matrix product self * other."""
        a, b = self.rows, other.rows
        return RotationMatrix(tuple(
            tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
            for i in range(3)
        ))

    def transposed(self) -> "RotationMatrix":
        r = self.rows
        return RotationMatrix(tuple(
            tuple(r[j][i] for j in range(3)) for i in range(3)
        ))

    def inverse(self) -> "RotationMatrix":
        """Inverse of an orthonormal matrix is its transpose."""
        return self.transposed()

    def apply(self, v: Vector3) -> Vector3:
        r = self.rows
        return Vector3(
            r[0][0] * v.x + r[0][1] * v.y + r[0][2] * v.z,
            r[1][0] * v.x + r[1][1] * v.y + r[1][2] * v.z,
            r[2][0] * v.x + r[2][1] * v.y + r[2][2] * v.z,
        )


@dataclass(frozen=True)
class Transform:
    """
    Local-to-world placement: scale, then rotate, then translate.

    Positions are scaled per axis, rotated and translated. Directions are
    only rotated and renormalised; scale never applies to them.
    """
    translation: Vector3 = Vector3()
    rotation: RotationMatrix = RotationMatrix()
    scale: Vector3 = Vector3(1.0, 1.0, 1.0)

    @classmethod
    def from_euler(
        cls,
        translation: Vector3,
        euler: EulerRotation,
        scale: Vector3 = Vector3(1.0, 1.0, 1.0),
    ) -> "Transform":
        return cls(translation, RotationMatrix.from_euler(euler), scale)

    def apply_point(self, local: Vector3) -> Vector3:
        return self.rotation.apply(local.multiply(self.scale)) + self.translation

    def apply_direction(self, direction: Vector3) -> Vector3:
        return self.rotation.apply(direction).normalized()

    def apply_size(self, size: Vector3) -> Vector3:
        """Scale a local extent; rotation is accounted for by world_bounds()."""
        return size.multiply(self.scale)

    def to_local_unscaled(self, world: Vector3) -> Vector3:
        """Undo translation and rotation but keep the world scale."""
        return self.rotation.inverse().apply(world - self.translation)

    def to_local(self, world: Vector3) -> Vector3:
        """Full inverse: world point to template-local coordinates."""
        return self.to_local_unscaled(world).divide(self.scale)


@dataclass(frozen=True)
class Box3:
    """
    Axis-aligned bounding box (AABB). Containment is inclusive of the faces.
    """
    min: Vector3
    max: Vector3

    @classmethod
    def from_center_size(cls, center: Vector3, size: Vector3) -> "Box3":
        half = size * 0.5
        return cls(center - half, center + half)

    @classmethod
    def from_points(cls, points: Sequence[Vector3]) -> "Box3":
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(
            Vector3(min(xs), min(ys), min(zs)),
            Vector3(max(xs), max(ys), max(zs)),
        )

    @property
    def size(self) -> Vector3:
        return self.max - self.min

    @property
    def center(self) -> Vector3:
        return self.min.lerp(self.max, 0.5)

    def contains_point(self, point: Vector3) -> bool:
        return (
            self.min.x <= point.x <= self.max.x and
            self.min.y <= point.y <= self.max.y and
            self.min.z <= point.z <= self.max.z
        )

    def union(self, other: "Box3") -> "Box3":
        return Box3(
            Vector3(
                min(self.min.x, other.min.x),
                min(self.min.y, other.min.y),
                min(self.min.z, other.min.z),
            ),
            Vector3(
                max(self.max.x, other.max.x),
                max(self.max.y, other.max.y),
                max(self.max.z, other.max.z),
            ),
        )

    def corners(self) -> list:
        """The eight corners of the box."""
        return [
            Vector3(x, y, z)
            for x in (self.min.x, self.max.x)
            for y in (self.min.y, self.max.y)
            for z in (self.min.z, self.max.z)
        ]

    def to_dict(self) -> dict:
        return {"min": self.min.to_list(), "max": self.max.to_list()}

    @classmethod
    def from_dict(cls, data: dict) -> "Box3":
        return cls(Vector3.from_iterable(data["min"]), Vector3.from_iterable(data["max"]))


def world_bounds(transform: Transform, local_box: Box3) -> Box3:
    """AABB enclosing a local box after scale, rotation and translation."""
    return Box3.from_points([transform.apply_point(c) for c in local_box.corners()])
