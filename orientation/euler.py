from dataclasses import dataclass
import numpy as np

from orientation.angles import normalize_angle

PITCH_LIMIT = 90.0
ROLL_LIMIT = 90.0


@dataclass(frozen=True)
class Euler:
    """
    Pitch / yaw / roll triple, in degrees.
    Positive pitch looks down. No range is enforced on construction, see normalize().
    """

    p: float = 0.0
    y: float = 0.0
    r: float = 0.0

    @classmethod
    def from_list(cls, lst) -> "Euler":
        if len(lst) != 3:
            raise ValueError(f"expected 3 angles (pitch, yaw, roll), got {len(lst)}")
        p, y, r = lst
        return cls(p, y, r)

    def to_list(self) -> list[float]:
        return [float(self.p), float(self.y), float(self.r)]

    @property
    def dtype(self) -> np.dtype:
        "Floating dtype the components are computed in"
        dtype = np.result_type(self.p, self.y, self.r)
        if not np.issubdtype(dtype, np.floating):
            return np.dtype(np.float64)
        return dtype

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.p) and np.isfinite(self.y) and np.isfinite(self.r))

    def normalize(self) -> "Euler":
        "Returns a new triple with every component in [-180, 180]"
        return Euler(normalize_angle(self.p), normalize_angle(self.y), normalize_angle(self.r))

    def sanitize(self) -> "Euler":
        """
        Normalize, then clamp pitch and roll to [-90, 90].
        Yaw keeps its full normalized range.
        """
        ang = self.normalize()
        return Euler(
            min(max(ang.p, -PITCH_LIMIT), PITCH_LIMIT),
            ang.y,
            min(max(ang.r, -ROLL_LIMIT), ROLL_LIMIT),
        )

    # --- arithmetic -----------------------------------------------------------

    def __add__(self, other: "Euler") -> "Euler":
        if not isinstance(other, Euler):
            return NotImplemented
        return Euler(self.p + other.p, self.y + other.y, self.r + other.r)

    def __sub__(self, other: "Euler") -> "Euler":
        if not isinstance(other, Euler):
            return NotImplemented
        return Euler(self.p - other.p, self.y - other.y, self.r - other.r)

    def __neg__(self) -> "Euler":
        return Euler(-self.p, -self.y, -self.r)

    def __mul__(self, other) -> "Euler":
        # scalar or component-wise
        if isinstance(other, Euler):
            return Euler(self.p * other.p, self.y * other.y, self.r * other.r)
        return Euler(self.p * other, self.y * other, self.r * other)

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Euler":
        if isinstance(other, Euler):
            return Euler(self.p / other.p, self.y / other.y, self.r / other.r)
        return Euler(self.p / other, self.y / other, self.r / other)
