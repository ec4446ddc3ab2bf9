"""Trail sampler: fixed-length polylines from session start to now.

Trails are derived views and are rebuilt on every query. Points are
``[lng, lat]`` rows in chronological order; the last row is computed through
exactly the same path as the vessel's icon position so the two never disagree.
"""
import numpy as np
from shapely.geometry import LineString

from tacsim.playback.angle_utils import non_negative
from tacsim.playback.config import TRAIL
from tacsim.playback.resolver import vessel_position_at


def sample_times(elapsed_seconds: float, sample_count: int) -> np.ndarray:
    """Evenly spaced instants in [0, elapsed], both ends included.

    ``sample_count == 1`` gives only the endpoint; ``<= 0`` gives an empty array.
    """
    elapsed = non_negative(elapsed_seconds)
    n = int(sample_count)
    if n <= 0:
        return np.empty(0, dtype=float)
    if n == 1:
        return np.array([elapsed], dtype=float)
    times = np.linspace(0.0, elapsed, n)
    times[-1] = elapsed
    return times


def trail_at(vessel, elapsed_seconds: float, baselines,
             sample_count: int = TRAIL['sample_count']) -> np.ndarray:
    """
    Sample ``vessel``'s dead-reckoned track.

    Parameters
    ----------
    vessel : VesselKinematics
    elapsed_seconds : float
        Current playback time; negative or malformed counts as 0.
    baselines : BaselineCache
        Session cache; a miss captures the vessel's current position.
    sample_count : int
        Number of points returned.

    Returns
    -------
    ndarray, shape (sample_count, 2)
        Columns are (lng, lat), rows in increasing time order.
    """
    times = sample_times(elapsed_seconds, sample_count)
    out = np.empty((times.size, 2), dtype=float)
    for i, t in enumerate(times):
        pos = vessel_position_at(vessel, float(t), baselines)
        out[i, 0] = pos.lng
        out[i, 1] = pos.lat
    return out


def trail_linestring(trail: np.ndarray) -> LineString:
    """Trail rows as a shapely LineString in (lng, lat) axis order.

    A single-point trail becomes a zero-length two-point line.
    """
    pts = np.asarray(trail, dtype=float)
    if pts.shape[0] == 0:
        return LineString()
    if pts.shape[0] == 1:
        pts = np.vstack([pts, pts])
    return LineString(pts)
