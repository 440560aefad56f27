import numpy as np
import numpy.typing as npt
from typing import TypeAlias

# A 3-component float vector (float32 or float64)
VEC3: TypeAlias = npt.NDArray[np.floating]


# --- constructors -------------------------------------------------------------


def zero(dtype=np.float64) -> VEC3:
    return np.zeros(3, dtype=dtype)


def from_list(lst, dtype=np.float64) -> VEC3:
    v = np.asarray(lst, dtype=dtype)
    if v.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {v.shape}")
    return v


# --- basic arithmetic ---------------------------------------------------------


def add(v1: VEC3, v2: VEC3) -> VEC3:
    "Returns a new vector that is the sum of v1 and v2"
    return v1 + v2


def subtract(v1: VEC3, v2: VEC3) -> VEC3:
    "Returns a new vector that is the difference of v1 and v2"
    return v1 - v2


def scale(v: VEC3, scalar: float) -> VEC3:
    "Returns a new vector that is v scaled by the given scalar"
    return v * scalar


# --- vector math --------------------------------------------------------------


def dot(v1: VEC3, v2: VEC3) -> float:
    return np.dot(v1, v2)


def cross(v1: VEC3, v2: VEC3) -> VEC3:
    return np.cross(v1, v2)  # type: ignore


def length(v: VEC3) -> float:
    return np.linalg.norm(v)


def normalize(v: VEC3) -> VEC3:
    "Returns a new vector that is the normalized version of v"
    norm = np.linalg.norm(v)
    if norm == 0:
        return v
    return v / norm


def distance(v1: VEC3, v2: VEC3) -> float:
    return np.linalg.norm(v1 - v2)


# --- orientation helpers ------------------------------------------------------


def swap_yz(v: VEC3) -> VEC3:
    """
    Exchange the Y and Z components.
    Converts between the Z-up frame the basis formulas are written in and the Y-up frame
    everything else uses. Applying it twice gives back the original vector.
    """
    return v[[0, 2, 1]]


def magnitude_xz_squared(v: VEC3) -> float:
    return v[0] * v[0] + v[2] * v[2]


def magnitude_xz(v: VEC3) -> float:
    "Length of the vector projected onto the horizontal (XZ) plane"
    return np.sqrt(magnitude_xz_squared(v))


def is_finite(v: VEC3) -> bool:
    return bool(np.all(np.isfinite(v)))
