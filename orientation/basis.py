"""
Forward / right / up unit vectors for an Euler triple.

The formulas are the pitch-yaw-roll rotation matrix rows written for an X-forward, Y-left,
Z-up frame. Every vector is then passed through swap_yz so results come out Y-up, and is
normalized. In that frame forward x right == up.
"""

from typing import TYPE_CHECKING
import numpy as np

from orientation import vec3

if TYPE_CHECKING:
    from orientation.euler import Euler


def _sin_cos(angle: "Euler"):
    dtype = angle.dtype
    p, y, r = np.radians(np.array([angle.p, angle.y, angle.r], dtype=dtype))
    return (np.sin(p), np.cos(p)), (np.sin(y), np.cos(y)), (np.sin(r), np.cos(r))


def _forward(sp, cp, sy, cy) -> vec3.VEC3:
    # no roll term, rolling spins around forward
    v = np.array([cp * cy, cp * sy, -sp])
    return vec3.normalize(vec3.swap_yz(v))


def _right(sp, cp, sy, cy, sr, cr) -> vec3.VEC3:
    v = np.array(
        [
            -sr * sp * cy + -cr * -sy,
            -sr * sp * sy + -cr * cy,
            -sr * cp,
        ]
    )
    return vec3.normalize(vec3.swap_yz(v))


def _up(sp, cp, sy, cy, sr, cr) -> vec3.VEC3:
    v = np.array(
        [
            cr * sp * cy + -sr * -sy,
            cr * sp * sy + -sr * cy,
            cr * cp,
        ]
    )
    return vec3.normalize(vec3.swap_yz(v))


def forward(angle: "Euler") -> vec3.VEC3:
    "Direction the angle looks along. Positive pitch points it downward (-Y)."
    (sp, cp), (sy, cy), _ = _sin_cos(angle)
    return _forward(sp, cp, sy, cy)


def right(angle: "Euler") -> vec3.VEC3:
    (sp, cp), (sy, cy), (sr, cr) = _sin_cos(angle)
    return _right(sp, cp, sy, cy, sr, cr)


def up(angle: "Euler") -> vec3.VEC3:
    (sp, cp), (sy, cy), (sr, cr) = _sin_cos(angle)
    return _up(sp, cp, sy, cy, sr, cr)


def vectors(angle: "Euler") -> tuple[vec3.VEC3, vec3.VEC3, vec3.VEC3]:
    """
    Forward, right and up in one call.
    Shares the trig between the three; results are identical to the single-vector functions.
    """
    (sp, cp), (sy, cy), (sr, cr) = _sin_cos(angle)
    return (
        _forward(sp, cp, sy, cy),
        _right(sp, cp, sy, cy, sr, cr),
        _up(sp, cp, sy, cy, sr, cr),
    )
