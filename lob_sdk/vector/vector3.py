"""3D vector value type and its plain record peer.

Vector3 is frozen: unlike Vector2 it has no in-place mutator. Its
``normalize`` also differs on purpose: a zero-length vector is returned as
the very same instance instead of a freshly built zero vector.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence

import numpy as np

from ..errors import DivisionByZeroError
from ..math_utils import round_half_up
from .vector2 import Vector2

ArrayVector3 = tuple[float, float, float]


class Point3Like(Protocol):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Point3:
    """A bare 3D point with no operations."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Vector3:
    """3D vector used for elevation-aware positions."""
    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector3":
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return self.divide(scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_vector2(cls, v: Vector2, z: float) -> "Vector3":
        """Lift a 2D vector into 3D with the given ``z``."""
        return cls(v.x, v.y, z)

    def to_vector2(self) -> Vector2:
        """Drop the z component."""
        return Vector2(self.x, self.y)

    def add(self, v: "Vector3") -> "Vector3":
        return Vector3(self.x + v.x, self.y + v.y, self.z + v.z)

    def subtract(self, v: "Vector3") -> "Vector3":
        return Vector3(self.x - v.x, self.y - v.y, self.z - v.z)

    def multiply(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def scale(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide(self, scalar: float) -> "Vector3":
        if scalar == 0:
            raise DivisionByZeroError("Cannot divide by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def scale_xy(self, scalar: float) -> "Vector3":
        """Scale x and y, leaving z untouched."""
        return Vector3(self.x * scalar, self.y * scalar, self.z)

    def distance_to(self, v: "Vector3") -> float:
        return math.sqrt(
            (self.x - v.x) ** 2 + (self.y - v.y) ** 2 + (self.z - v.z) ** 2
        )

    def dot(self, v: "Vector3") -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z

    def cross(self, v: "Vector3") -> "Vector3":
        return Vector3(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def normalize(self) -> "Vector3":
        """Return the unit vector, or ``self`` unchanged when zero-length."""
        length = self.length()
        return self.scale(1 / length) if length > 0 else self

    def round(self, decimals: int = 0) -> "Vector3":
        return Vector3(
            round_half_up(self.x, decimals),
            round_half_up(self.y, decimals),
            round_half_up(self.z, decimals),
        )

    def floor_xy(self) -> "Vector3":
        return Vector3(float(np.floor(self.x)), float(np.floor(self.y)), self.z)

    def equals(self, v: "Vector3") -> bool:
        return self.x == v.x and self.y == v.y and self.z == v.z

    def to_array(self) -> ArrayVector3:
        return (self.x, self.y, self.z)

    def to_point(self) -> Point3:
        return Point3(self.x, self.y, self.z)

    @classmethod
    def from_array(cls, coords: Sequence[float]) -> "Vector3":
        if len(coords) != 3:
            raise ValueError("Array must contain exactly 3 elements")
        return cls(coords[0], coords[1], coords[2])

    @classmethod
    def from_point(cls, point: Point3Like) -> "Vector3":
        return cls(point.x, point.y, point.z)
