"""Geometry algorithms over point sequences.

- douglas_peucker.py: path simplification
- utils.py: distance, median point, zone clamping and splitting helpers
- path_codec.py: simplified array encoding of paths
"""

from .douglas_peucker import DEFAULT_EPSILON, douglas_peucker, perpendicular_distance
from .utils import (
    Zone,
    divide_array_in_half,
    get_closest_point_inside_zone,
    get_squared_distance,
    median_point,
)
from .path_codec import decode_path, encode_path

__all__ = [
    "DEFAULT_EPSILON",
    "douglas_peucker",
    "perpendicular_distance",
    "Zone",
    "divide_array_in_half",
    "get_closest_point_inside_zone",
    "get_squared_distance",
    "median_point",
    "decode_path",
    "encode_path",
]
