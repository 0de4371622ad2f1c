"""Two- and three-dimensional vectors and the scalar helpers they rely on."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Union

PI = 3.1415926535897932
DEG_TO_RAD_RATIO = 0.0174532925199433
RAD_TO_DEG_RATIO = 57.295779513082321

Number = Union[int, float]


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD_RATIO


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG_RATIO


def floor(n: float) -> int:
    """Truncate toward zero, then step down by one for any negative input."""
    return int(n) - (1 if n < 0 else 0)


def clamp(n, low, high):
    """Limit ``n`` to the closed range ``[low, high]``."""
    if n < low:
        return low
    if n > high:
        return high
    return n


def _unit_clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: Number) -> "Vec2":
        """A vector with both components set to ``value``."""
        return cls(value, value)

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union["Vec2", Number]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec2":
        if isinstance(other, (int, float)):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Union["Vec2", Number]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def radian(self) -> float:
        """Direction angle in radians, in ``[0, 2*pi)``."""
        res = math.acos(_unit_clamp(self.x / self.length()))
        return 2 * PI - res if self.y < 0 else res

    def degree(self) -> float:
        """Direction angle in degrees."""
        return rad_to_deg(self.radian())

    def included_angle(self, other: "Vec2") -> float:
        """Unsigned angle between the two vectors, in radians."""
        return math.acos(_unit_clamp(self.dot(other) / (self.length() * other.length())))

    def included_angle_degree(self, other: "Vec2") -> float:
        return rad_to_deg(self.included_angle(other))

    def rotated(self, rad: float) -> "Vec2":
        """This vector rotated counter-clockwise by ``rad`` radians."""
        cosr, sinr = math.cos(rad), math.sin(rad)
        return Vec2(self.x * cosr - self.y * sinr, self.y * cosr + self.x * sinr)

    def rotated_degree(self, deg: float) -> "Vec2":
        return self.rotated(deg_to_rad(deg))

    def normalized(self) -> "Vec2":
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: Number) -> "Vec3":
        return cls(value, value, value)

    @classmethod
    def from_vec2(cls, xy: Vec2, z: Number) -> "Vec3":
        return cls(xy.x, xy.y, z)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vec3", Number]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec3":
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Union["Vec3", Number]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)


def point_in_rectangle(point: Vec2, corner1: Vec2, corner2: Vec2) -> bool:
    """Whether ``point`` lies in the rectangle spanned by two opposite corners, edges included."""
    left, right = min(corner1.x, corner2.x), max(corner1.x, corner2.x)
    top, bottom = min(corner1.y, corner2.y), max(corner1.y, corner2.y)
    return left <= point.x <= right and top <= point.y <= bottom


def rotate_vectors(radian: float, vectors: Iterable[Vec2]) -> list[Vec2]:
    """Rotate every vector by the same angle in radians."""
    cosr, sinr = math.cos(radian), math.sin(radian)
    return [Vec2(v.x * cosr - v.y * sinr, v.y * cosr + v.x * sinr) for v in vectors]


def rotate_vectors_degree(degree: float, vectors: Iterable[Vec2]) -> list[Vec2]:
    """Rotate every vector by the same angle in degrees."""
    return rotate_vectors(deg_to_rad(degree), vectors)