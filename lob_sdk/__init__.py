"""lob_sdk core primitives.

General-purpose building blocks consumed by the game engine:
- vector: Vector2/Vector3 algebra, Vector2Set and numpy VectorArray
- containers: PriorityQueue with an injected ordering
- geometry: Douglas-Peucker simplification and point helpers
- events: EventEmitter
- math_utils: median, angle conversions, half-up rounding
"""

from .errors import ConfigError, DivisionByZeroError, EmptyInputError, LobSdkError
from .config import ConfigLoader, SdkConfig, load_config
from .math_utils import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    TWO_PI,
    degrees_to_radians,
    degrees_to_radians_normalized,
    median,
    radians_to_degrees,
    radians_to_degrees_normalized,
    round_half_up,
)
from .vector import (
    ArrayVector2,
    ArrayVector3,
    Point2,
    Point3,
    PointLike,
    Vector2,
    Vector2Set,
    Vector3,
    VectorArray,
)
from .containers import PriorityQueue, ascending, descending
from .geometry import (
    Zone,
    decode_path,
    divide_array_in_half,
    douglas_peucker,
    encode_path,
    get_closest_point_inside_zone,
    get_squared_distance,
    median_point,
    perpendicular_distance,
)
from .events import EventEmitter

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DivisionByZeroError",
    "EmptyInputError",
    "LobSdkError",
    "ConfigLoader",
    "SdkConfig",
    "load_config",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "TWO_PI",
    "degrees_to_radians",
    "degrees_to_radians_normalized",
    "median",
    "radians_to_degrees",
    "radians_to_degrees_normalized",
    "round_half_up",
    "ArrayVector2",
    "ArrayVector3",
    "Point2",
    "Point3",
    "PointLike",
    "Vector2",
    "Vector2Set",
    "Vector3",
    "VectorArray",
    "PriorityQueue",
    "ascending",
    "descending",
    "Zone",
    "decode_path",
    "divide_array_in_half",
    "douglas_peucker",
    "encode_path",
    "get_closest_point_inside_zone",
    "get_squared_distance",
    "median_point",
    "perpendicular_distance",
    "EventEmitter",
]
