"""Compact array encoding for point paths crossing the wire.

Order paths and action payloads carry points as ``[x, y]`` pairs. Before a
recorded or drawn path is sent it is simplified and its coordinates rounded
so the payload stays small.
"""

from typing import Iterable, Optional, Sequence

from ..config import SdkConfig
from ..vector.vector2 import ArrayVector2, PointLike, Vector2
from .douglas_peucker import douglas_peucker


def encode_path(points: Sequence[PointLike], config: Optional[SdkConfig] = None) -> list[ArrayVector2]:
    """Simplify ``points`` and encode them as rounded ``(x, y)`` pairs.

    Rounding happens after simplification, so the kept points are chosen
    from the exact input coordinates.
    """
    config = config or SdkConfig()
    simplified = douglas_peucker(points, config.simplify_epsilon)
    return [
        Vector2.from_point(point).round(config.path_decimals).to_array()
        for point in simplified
    ]


def decode_path(arrays: Iterable[Sequence[float]]) -> list[Vector2]:
    return [Vector2.from_array(coords) for coords in arrays]
