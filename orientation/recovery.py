import numpy as np

from orientation import vec3
from orientation.angles import FULL_ROTATION
from orientation.euler import Euler

HORIZONTAL_EPSILON = 0.001
STRAIGHT_UP_PITCH = 270.0
STRAIGHT_DOWN_PITCH = 90.0


def euler_angles(v: vec3.VEC3) -> Euler:
    """
    Convert a direction vector (Y-up) to a normalized Euler triple.
    Roll can't be recovered from a single direction and is always 0.
    """
    x, y, z = v
    if x == 0 and z == 0:
        # straight up or down, yaw is undefined
        pitch = STRAIGHT_UP_PITCH if y > 0 else STRAIGHT_DOWN_PITCH
        return Euler(v.dtype.type(pitch), v.dtype.type(0.0), v.dtype.type(0.0)).normalize()

    pitch = np.degrees(np.arctan2(-y, vec3.magnitude_xz(v)))
    if pitch < 0:
        pitch += FULL_ROTATION

    yaw = np.degrees(np.arctan2(z, x))
    if yaw < 0:
        yaw += FULL_ROTATION

    return Euler(pitch, yaw, v.dtype.type(0.0)).normalize()


def euler_angles_with_up(v: vec3.VEC3, up: vec3.VEC3) -> Euler:
    """
    Convert a forward vector plus a reference up vector to a normalized Euler triple,
    roll included. up does not need to be exactly perpendicular to v.

    When v is (nearly) vertical the yaw is taken from the left vector instead and roll is 0.
    """
    # unit length first, so roll and the horizontal threshold below do not depend on |v|
    v = vec3.normalize(v)
    # Y-up frame: forward x up points left
    left = vec3.normalize(vec3.cross(v, up))
    x, y, z = v

    distxz = vec3.magnitude_xz(v)
    pitch = np.degrees(np.arctan2(-y, distxz))

    if distxz > HORIZONTAL_EPSILON:
        # vertical component of forward x left, without building the whole vector
        up_y = x * left[2] - z * left[0]
        yaw = np.degrees(np.arctan2(z, x))
        roll = np.degrees(np.arctan2(left[1], up_y))
        return Euler(pitch, yaw, roll).normalize()

    yaw = np.degrees(np.arctan2(-left[0], left[2]))
    return Euler(pitch, yaw, v.dtype.type(0.0)).normalize()
