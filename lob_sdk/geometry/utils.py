"""Point helpers used by deployment and movement code."""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from ..math_utils import median
from ..vector.vector2 import Point2, PointLike, Vector2

T = TypeVar("T")


@dataclass(frozen=True)
class Zone:
    """Axis-aligned rectangle anchored at its top-left corner (x, y)."""
    x: float
    y: float
    width: float
    height: float


def get_squared_distance(point1: PointLike, point2: PointLike) -> float:
    dx = point2.x - point1.x
    dy = point2.y - point1.y
    return dx * dx + dy * dy


def median_point(points: Sequence[PointLike]) -> Point2:
    """Per-axis median of ``points`` (not the geometric median).

    An empty sequence gives Point2(0, 0).
    """
    return Point2(
        x=median(point.x for point in points),
        y=median(point.y for point in points),
    )


def divide_array_in_half(items: Sequence[T]) -> tuple[list[T], list[T]]:
    """Split ``items`` in two; the first half takes the extra element."""
    mid = math.ceil(len(items) / 2)
    return list(items[:mid]), list(items[mid:])


def get_closest_point_inside_zone(zone: Zone, point: PointLike, buffer: float = 0) -> Vector2:
    """Clamp ``point`` into ``zone`` grown by ``buffer`` on every side."""
    clamped_x = max(zone.x - buffer, min(point.x, zone.x + zone.width + buffer))
    clamped_y = max(zone.y - buffer, min(point.y, zone.y + zone.height + buffer))
    return Vector2(clamped_x, clamped_y)
