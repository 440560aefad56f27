import math
import numpy as np

FULL_ROTATION = 360.0
HALF_ROTATION = 180.0


def normalize_angle(value: float) -> float:
    """
    Bring an angle (in degrees) into the range [-180, 180].

    Non-finite input (NaN or +/-inf) maps to 0. That is a fallback value, not an error:
    callers get a usable angle back instead of a NaN that spreads through later math.

    Angles already in range are returned untouched so that exact values like 180 and -180
    survive. Anything else has the nearest whole number of rotations removed, e.g.
    480 -> 120, -960 -> 120.
    """
    if not np.isfinite(value):
        return type(value)(0.0) if isinstance(value, np.floating) else 0.0
    if -HALF_ROTATION <= value <= HALF_ROTATION:
        return value

    # round half away from zero
    rotations = math.floor(abs(value) / FULL_ROTATION + 0.5)
    if value < 0:
        return value + FULL_ROTATION * rotations
    return value - FULL_ROTATION * rotations
