"""Douglas-Peucker path simplification.

Reduces a polyline to the points needed to keep every dropped point within
``epsilon`` of the simplified line. The first and last points always
survive. Points are returned as the same objects that were passed in, so
callers' extended point types keep any extra fields.
"""

import math
from typing import Sequence, TypeVar

from ..vector.vector2 import PointLike

P = TypeVar("P", bound=PointLike)

DEFAULT_EPSILON = 0.5


def perpendicular_distance(point: PointLike, line_start: PointLike, line_end: PointLike) -> float:
    """Distance from ``point`` to the infinite line through the two others.

    When the two line points coincide there is no line, and the plain
    distance from ``point`` to ``line_start`` is returned instead.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    denominator = math.hypot(dx, dy)
    if denominator == 0:
        return math.hypot(point.x - line_start.x, point.y - line_start.y)
    numerator = abs(
        dy * point.x - dx * point.y
        + line_end.x * line_start.y - line_end.y * line_start.x
    )
    return numerator / denominator


def _find_furthest_point(path: Sequence[PointLike], start: int, end: int, epsilon: float) -> int:
    """Index of the interior point furthest from the start-end line.

    Returns -1 when no interior point is further than ``epsilon``. The first
    point wins when several share the maximum distance.
    """
    max_distance = -1.0
    index = -1
    for i in range(start + 1, end):
        distance = perpendicular_distance(path[i], path[start], path[end])
        if distance > max_distance:
            max_distance = distance
            index = i
    return index if max_distance > epsilon else -1


def douglas_peucker(path: Sequence[P], epsilon: float = DEFAULT_EPSILON) -> list[P]:
    """Simplify ``path`` keeping deviations within ``epsilon``.

    Args:
        path: Ordered points; anything with ``x`` and ``y`` attributes
        epsilon: Largest allowed perpendicular deviation of a dropped point

    Returns:
        A new list holding a subsequence of ``path``. Paths shorter than
        three points come back with all their points.

    Raises:
        ValueError: if ``epsilon`` is negative
    """
    if epsilon < 0:
        raise ValueError("epsilon must be non-negative")
    if len(path) < 3:
        return list(path)

    # Work stack of (start, end) spans instead of recursion; same result
    keep = [False] * len(path)
    keep[0] = keep[-1] = True
    spans = [(0, len(path) - 1)]
    while spans:
        start, end = spans.pop()
        if end - start < 2:
            continue
        index = _find_furthest_point(path, start, end, epsilon)
        if index == -1:
            continue
        keep[index] = True
        spans.append((index, end))
        spans.append((start, index))

    return [point for point, kept in zip(path, keep) if kept]
