"""Minimal 3D math: vectors, quaternions, transforms and spinning objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable, Iterator, Tuple

_PARALLEL_EPSILON = 1e-7


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vec3"]
    ONE: ClassVar["Vec3"]
    X: ClassVar["Vec3"]
    Y: ClassVar["Vec3"]
    Z: ClassVar["Vec3"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero or non-finite vector")
        return self / length

    def normalize_or_zero(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if that is impossible."""
        try:
            return self.normalize()
        except ValueError:
            return Vec3.ZERO

    def distance(self, other: Vec3) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


def _any_orthonormal(v: Vec3) -> Vec3:
    sign = math.copysign(1.0, v.z)
    a = -1.0 / (sign + v.z)
    b = v.x * v.y * a
    return Vec3(1.0 + sign * v.x * v.x * a, sign * b, -sign * v.x)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar["Quat"]

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of `angle` radians about `axis`."""
        unit = axis.normalize()
        s = math.sin(angle / 2.0)
        return cls(unit.x * s, unit.y * s, unit.z * s, math.cos(angle / 2.0))

    @classmethod
    def from_rotation_arc(cls, start: Vec3, end: Vec3) -> Quat:
        """Shortest rotation that turns the direction `start` into `end`."""
        start = start.normalize()
        end = end.normalize()
        dot = start.dot(end)
        if dot > 1.0 - _PARALLEL_EPSILON:
            return cls.IDENTITY
        if dot < -1.0 + _PARALLEL_EPSILON:
            return cls.from_axis_angle(_any_orthonormal(start), math.pi)
        c = start.cross(end)
        return cls(c.x, c.y, c.z, 1.0 + dot).normalize()

    @classmethod
    def _from_axes(cls, right: Vec3, up: Vec3, back: Vec3) -> Quat:
        m00, m01, m02 = right.x, up.x, back.x
        m10, m11, m12 = right.y, up.y, back.y
        m20, m21, m22 = right.z, up.z, back.z
        trace = m00 + m11 + m22
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return cls((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
        if m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            return cls(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
        if m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            return cls((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
        s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
        return cls((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)

    def __mul__(self, other: Quat) -> Quat:
        return Quat(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def normalize(self) -> Quat:
        norm = math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        if norm == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quat(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    def rotate(self, vector: Vec3) -> Vec3:
        """Apply this rotation to a vector."""
        axis = Vec3(self.x, self.y, self.z)
        t = axis.cross(vector) * 2.0
        return vector + t * self.w + axis.cross(t)


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass
class Transform:
    """Position, orientation and scale of an object."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=lambda: Quat.IDENTITY)
    scale: Vec3 = field(default_factory=lambda: Vec3.ONE)

    def _rotate_local(self, axis: Vec3, angle: float) -> None:
        self.rotation = self.rotation * Quat.from_axis_angle(axis, angle)

    def rotate_local_x(self, angle: float) -> None:
        self._rotate_local(Vec3.X, angle)

    def rotate_local_y(self, angle: float) -> None:
        self._rotate_local(Vec3.Y, angle)

    def rotate_local_z(self, angle: float) -> None:
        self._rotate_local(Vec3.Z, angle)

    def forward(self) -> Vec3:
        """The local -Z direction in world space."""
        return self.rotation.rotate(-Vec3.Z).normalize()

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """A copy of this transform turned so its forward points at `target`."""
        back = -(target - self.translation).normalize_or_zero()
        if back == Vec3.ZERO:
            back = Vec3.Z
        up_dir = up.normalize_or_zero()
        if up_dir == Vec3.ZERO:
            up_dir = Vec3.Y
        right = up_dir.cross(back).normalize_or_zero()
        if right == Vec3.ZERO:
            right = _any_orthonormal(up_dir)
        true_up = back.cross(right)
        return replace(self, rotation=Quat._from_axes(right, true_up, back))


@dataclass
class Rotatable:
    """Spins an object at `speed` turns per second about the local `axis` ("x", "y" or "z")."""

    speed: float
    axis: str


def rotate_object(objects: Iterable[Tuple[Transform, Rotatable]], delta_secs: float) -> None:
    """Advance every rotatable object by one frame of `delta_secs` seconds."""
    for transform, rotatable in objects:
        angle = rotatable.speed * math.tau * delta_secs
        if rotatable.axis == "x":
            transform.rotate_local_x(angle)
        elif rotatable.axis == "y":
            transform.rotate_local_y(angle)
        elif rotatable.axis == "z":
            transform.rotate_local_z(angle)