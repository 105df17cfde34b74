"""Scalar math helpers shared by the vector and geometry modules.

Rounding follows the half-up convention used by the game engine clients
(``floor(x + 0.5)``) rather than Python's round-half-to-even, so values
rounded here agree with coordinates produced on the other side of the wire.
"""

import math
from typing import Iterable

import numpy as np

DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
TWO_PI = 2 * math.pi


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round ``value`` to ``decimals`` places, halves going toward +infinity.

    Infinities and NaN are returned unchanged, as are values too large to
    carry any digits after scaling.
    """
    factor = 10 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def median(values: Iterable[float]) -> float:
    """Return the median of ``values``.

    Even-length inputs average the two middle values. An empty input yields
    0.0 instead of raising. The input is never reordered.
    """
    data = np.asarray(list(values), dtype=np.float64)
    if data.size == 0:
        return 0.0
    return float(np.median(data))


def degrees_to_radians(degrees: float) -> float:
    return degrees * DEG_TO_RAD


def radians_to_degrees(radians: float) -> float:
    return radians * RAD_TO_DEG


def degrees_to_radians_normalized(degrees: float) -> float:
    """Convert degrees to radians wrapped into [0, 2*pi).

    Non-finite input has no angle to wrap and yields NaN.
    """
    if not math.isfinite(degrees):
        return math.nan
    radians = math.fmod(degrees * DEG_TO_RAD, TWO_PI)
    if radians < 0:
        radians += TWO_PI
    # Tiny negative inputs can land exactly on 2*pi after the correction
    if radians >= TWO_PI:
        radians -= TWO_PI
    return radians


def radians_to_degrees_normalized(radians: float) -> float:
    """Convert radians to a whole number of degrees wrapped into [0, 360).

    Non-finite input yields NaN.
    """
    if not math.isfinite(radians):
        return math.nan
    degrees = math.fmod(radians * RAD_TO_DEG, 360)
    if degrees < 0:
        degrees += 360
    return round_half_up(degrees) % 360
