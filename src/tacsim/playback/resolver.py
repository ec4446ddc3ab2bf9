"""
resolver.py

Dead-reckoning position resolver for the playback engine.

Given an anchor position, a compass course, a speed in knots and a number of
simulated seconds, return where the vessel is. The math is a flat-earth
approximation:

  • 1 knot = 1 nautical mile per hour = 1/60 degree of latitude per hour
  • latitude  delta = d * sin(bearing)
  • longitude delta = d * cos(bearing) / cos(mean latitude)

where ``bearing = radians(90 - course)`` and the mean latitude is taken halfway
along the leg. No antimeridian or polar handling.

Everything here is pure: the same inputs always give bit-identical outputs, so
scrubbing the clock back and forth redraws the same track. Malformed numbers
(NaN, inf, negative speed or elapsed) are neutralized to zero instead of
raising; one bad vessel record must not abort a whole frame.
"""
import logging
import math

from tacsim.playback.angle_utils import (
    course_to_bearing_rad,
    finite_or_zero,
    non_negative,
    wrap_course,
)
from tacsim.playback.config import KINEMATICS
from tacsim.playback.vessel import LatLng

log = logging.getLogger(__name__)


def knots_to_degrees_per_second(knots: float) -> float:
    """Speed in knots to angular degrees of latitude per second."""
    return (knots / KINEMATICS['nm_per_degree']) / KINEMATICS['seconds_per_hour']


def position_at(baseline, course_degrees: float, speed_knots: float,
                elapsed_seconds: float) -> LatLng:
    """
    Dead-reckon a position from ``baseline``.

    Parameters
    ----------
    baseline : LatLng, Baseline or (lat, lng)
        Anchor position in decimal degrees.
    course_degrees : float
        Compass course, 0 = north, clockwise. Wrapped to [0, 360).
    speed_knots : float
        Speed over ground; negative or malformed values count as 0.
    elapsed_seconds : float
        Simulated time since the anchor; negative or malformed values count as 0.

    Returns
    -------
    LatLng
    """
    if hasattr(baseline, 'lat'):
        lat0, lng0 = baseline.lat, baseline.lng
    else:
        lat0, lng0 = baseline
    lat0 = finite_or_zero(lat0)
    lng0 = finite_or_zero(lng0)

    speed = non_negative(speed_knots)
    elapsed = non_negative(elapsed_seconds)
    course = float(wrap_course(finite_or_zero(course_degrees)))

    distance = knots_to_degrees_per_second(speed) * elapsed
    bearing = course_to_bearing_rad(course)

    lat_delta = distance * math.sin(bearing)
    # meridians converge away from the equator; use the mid-leg latitude
    cos_lat = math.cos(math.radians(lat0 + lat_delta / 2.0))
    lng_delta = distance * math.cos(bearing) / cos_lat if cos_lat != 0.0 else 0.0

    return LatLng(lat0 + lat_delta, lng0 + lng_delta)


def vessel_position_at(vessel, elapsed_seconds: float, baselines) -> LatLng:
    """Resolve ``vessel`` at ``elapsed_seconds`` from its session baseline.

    The first call for a vessel in a session captures its current position
    as the baseline.
    """
    baseline = baselines.ensure_baseline(vessel.id, vessel.position)
    if non_negative(vessel.speed_knots) != vessel.speed_knots or \
            finite_or_zero(vessel.course_degrees) != vessel.course_degrees:
        log.debug("[RESOLVE] %s: malformed course/speed (%r, %r) neutralized",
                  vessel.id, vessel.course_degrees, vessel.speed_knots)
    return position_at(baseline, vessel.course_degrees, vessel.speed_knots, elapsed_seconds)
