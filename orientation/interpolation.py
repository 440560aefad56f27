import logging
import numpy as np

from orientation import basis, recovery, vec3
from orientation.euler import Euler

log = logging.getLogger(__name__)


def is_finite(value) -> bool:
    "True if every component of an Euler triple or a vector is finite"
    if isinstance(value, Euler):
        return value.is_finite()
    return vec3.is_finite(value)


def lerp(start: Euler, end: Euler, amount: float) -> Euler:
    """
    Step from `start` towards `end` along the unit sphere of forward directions.

    `amount` divides the remaining chord between the two forward vectors, so bigger values
    give smaller steps (e.g. a turn speed scaled by frame time). The step snaps to `end`
    when it would overshoot, when it is too small to matter, or when the recovered angle is
    not finite. Roll of the result is always 0.
    """
    v1 = vec3.normalize(basis.forward(start))
    v2 = vec3.normalize(basis.forward(end))

    delta = vec3.subtract(v2, v1)
    mag = vec3.length(delta)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        delta = delta / amount
        new_mag = vec3.length(delta)

    eps = np.finfo(delta.dtype).eps
    if not np.isfinite(new_mag) or new_mag < eps or new_mag > mag:
        # prevent overshoot
        log.debug("lerp snapped to target (step %s, remaining %s)", new_mag, mag)
        return end

    t = vec3.add(v1, delta)
    out = recovery.euler_angles(t).normalize()
    if not out.is_finite():
        log.debug("lerp produced a non-finite angle from %s, using target", t)
        return end
    return out
