"""2D vector value type and its plain record peer.

Data shapes:
- Point2: frozen ``x``/``y`` record with no behavior, used for interchange
- PointLike: any object exposing numeric ``x`` and ``y`` attributes
- ArrayVector2: ``(x, y)`` tuple, the form paths take on the wire
- Vector2: the value type carrying all 2D math

Every Vector2 operation returns a new instance except ``add_value``, which
shifts the vector in place.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, Optional, Protocol, Sequence

import numpy as np

from ..errors import DivisionByZeroError, EmptyInputError
from ..math_utils import round_half_up

ArrayVector2 = tuple[float, float]


class PointLike(Protocol):
    """Anything with numeric ``x`` and ``y`` attributes."""
    x: float
    y: float


@dataclass(frozen=True)
class Point2:
    """A bare 2D point with no operations."""
    x: float
    y: float


def format_coordinate(value: float) -> str:
    """Format a coordinate the way the JavaScript clients print numbers.

    Uses the shortest digits that round-trip (``repr``) laid out with the
    ECMAScript ``Number#toString`` rules: integral values drop the fraction
    (``1`` not ``1.0``), plain decimals for 1e-7 <= |v| < 1e21 and
    ``1e-7`` / ``1.5e+21`` exponent form outside that range.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k  # value == 0.<digits> * 10**n
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + text if sign else text


@dataclass
class Vector2:
    """2D vector with the math used by movement, deployment and paths."""
    x: float
    y: float

    # Operators mirror the named methods below

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return self.divide(scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __hash__(self) -> int:
        """Hash for use in sets and dictionaries."""
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        """Make Vector2 iterable for unpacking (x, y order)."""
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return self.to_string()

    def add(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x + v.x, self.y + v.y)

    def add_value(self, x: float, y: float) -> None:
        """Shift this vector in place by raw deltas. The only mutator."""
        self.x += x
        self.y += y

    def subtract(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x - v.x, self.y - v.y)

    def dot(self, v: "Vector2") -> float:
        return self.x * v.x + self.y * v.y

    def perp(self) -> "Vector2":
        """Perpendicular vector, rotated 90 degrees counterclockwise."""
        return Vector2(-self.y, self.x)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2":
        """Return the unit vector. The zero vector yields a new zero vector."""
        length = self.length()
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> "Vector2":
        """Divide both components by ``scalar``.

        Raises:
            DivisionByZeroError: if ``scalar`` is zero
        """
        if scalar == 0:
            raise DivisionByZeroError("Cannot divide by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def squared_distance_to(self, point: PointLike) -> float:
        dx = point.x - self.x
        dy = point.y - self.y
        return dx * dx + dy * dy

    def distance_to(self, point: PointLike) -> float:
        return math.sqrt(self.squared_distance_to(point))

    def round(self, decimals: int = 0) -> "Vector2":
        """Round both components half-up to ``decimals`` places."""
        return Vector2(
            round_half_up(self.x, decimals),
            round_half_up(self.y, decimals)
        )

    def floor(self) -> "Vector2":
        return Vector2(float(np.floor(self.x)), float(np.floor(self.y)))

    def to_array(self) -> ArrayVector2:
        return (self.x, self.y)

    def to_string(self) -> str:
        """Textual ``"x,y"`` encoding, see ``format_coordinate``."""
        return f"{format_coordinate(self.x)},{format_coordinate(self.y)}"

    def to_point(self) -> Point2:
        return Point2(self.x, self.y)

    def get_closest_vector(self, vectors: Iterable["Vector2"]) -> Optional["Vector2"]:
        """Return the vector nearest to this one, or None if there are none.

        The first of several equally near vectors wins.
        """
        closest: Optional[Vector2] = None
        closest_distance = math.inf
        for vector in vectors:
            distance = vector.squared_distance_to(self)
            if distance < closest_distance:
                closest_distance = distance
                closest = vector
        return closest

    def interpolate(self, goal: "Vector2", t: float) -> "Vector2":
        """Linear interpolation toward ``goal``; t=0 is self, t=1 is goal."""
        return Vector2(
            self.x + (goal.x - self.x) * t,
            self.y + (goal.y - self.y) * t
        )

    def rotate(self, angle_in_radians: float) -> "Vector2":
        cos = math.cos(angle_in_radians)
        sin = math.sin(angle_in_radians)
        return Vector2(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos
        )

    def angle(self) -> float:
        """Angle relative to the positive x-axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def get_rotation_to(self, target: "Vector2") -> float:
        """Angle of the vector pointing from this one to ``target``."""
        return target.subtract(self).angle()

    @staticmethod
    def cross(v1: "Vector2", v2: "Vector2") -> float:
        """Z component of the 3D cross product of two 2D vectors."""
        return v1.x * v2.y - v1.y * v2.x

    @staticmethod
    def equal(p1: PointLike, p2: PointLike) -> bool:
        return p1.x == p2.x and p1.y == p2.y

    @classmethod
    def from_point(cls, point: PointLike) -> "Vector2":
        return cls(point.x, point.y)

    @classmethod
    def from_array(cls, coords: Sequence[float]) -> "Vector2":
        """Create Vector2 from an ``(x, y)`` pair."""
        if len(coords) != 2:
            raise ValueError("Array must contain exactly 2 elements")
        return cls(coords[0], coords[1])

    @classmethod
    def from_string(cls, text: str) -> "Vector2":
        """Parse the ``"x,y"`` encoding produced by ``to_string``."""
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid vector string: {text!r}")
        return cls(float(parts[0]), float(parts[1]))

    @classmethod
    def from_angle(cls, angle: float) -> "Vector2":
        """Unit vector pointing at ``angle`` radians."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def center(cls, vectors: Sequence["Vector2"]) -> "Vector2":
        """Centroid of ``vectors``.

        Raises:
            EmptyInputError: if no vectors are given
        """
        if len(vectors) == 0:
            raise EmptyInputError("No vectors provided.")
        total = cls(0, 0)
        for vector in vectors:
            total = total.add(vector)
        count = len(vectors)
        return cls(total.x / count, total.y / count)
