"""Course and number cleanup shared by the resolver, vessel records and clock.

Compass courses are folded into [0, 360) and malformed numeric fields are
turned into 0.0 here, so callers never branch on NaN themselves.
"""
import math
import numpy as np

from tacsim.playback.config import KINEMATICS


def finite_or_zero(x) -> float:
    """Return ``float(x)`` or 0.0 when it is NaN, infinite or not numeric."""
    try:
        v = float(x)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return v


def non_negative(x) -> float:
    """Like finite_or_zero but negative values also collapse to 0.0."""
    v = finite_or_zero(x)
    return v if v > 0.0 else 0.0


def wrap_course(x):
    """Fold compass degrees into [0, 360); 360 becomes 0, -90 becomes 270.

    Works element-wise on arrays as well as on a single course.
    """
    x_arr = np.asarray(x, dtype=float)
    return x_arr % KINEMATICS['course_wrap_deg']


def course_to_bearing_rad(course_deg: float) -> float:
    """Compass course (0 = north, clockwise) to a math bearing in radians.

    0 deg north maps to +pi/2 ("up"), 90 deg east maps to 0.
    """
    return math.radians(90.0 - course_deg)


def bearing_rad_to_course(bearing: float) -> float:
    """Inverse of course_to_bearing_rad, wrapped to [0, 360)."""
    return float(wrap_course(90.0 - math.degrees(bearing)))
