# -*- coding: utf-8 -*-

"""
playback/config.py

This module centralizes all configuration parameters for the tacsim kinematic
playback engine. By keeping unit conversions, sampling defaults, clock limits and
the reference vessel catalog in one place, the resolver, trail sampler, clock and
session (and any host that drives them) stay consistent.

Contents:
---------
1. KINEMATICS:
   - Unit conversions used by the dead-reckoning position resolver.
   - The flat-earth approximation (1 knot = 1/60 degree of latitude per hour)
     lives here so a future geodesic variant only has one place to change.

2. TRAIL:
   - Number of points sampled per vessel trail.

3. PLAYBACK:
   - Default speed multiplier and the standard multiplier menu offered to the
     operator (1x .. 50x).
   - Default scenario duration.

4. LOGGING:
   - Level and format of the package-wide `tacsim` logger.

5. OPERATING_AREAS (EPSG:4326)
   - Named operating theatres with a center point and bounding box. The
     headless runner drops its demo fleet at the chosen center.

    Usage example:
        from tacsim.playback.config import OPERATING_AREAS

        hawaii = OPERATING_AREAS["Hawaii"]
        # hawaii["center"] == (19.5, -155.5)

6. VESSEL_CATALOG / VESSEL_TYPE_LABELS:
   - Reference platforms an operator can place on the chart.
   - A label for every VesselType member.

Usage:
------
    from tacsim.playback.config import KINEMATICS, TRAIL, PLAYBACK
"""
import logging

# ───────────────────────────────────────────────────────────────────────────────
# 1) KINEMATICS (flat-earth dead reckoning)
# ───────────────────────────────────────────────────────────────────────────────
KINEMATICS = {
    # one nautical mile spans 1/60 degree of latitude
    'nm_per_degree': 60.0,
    'seconds_per_hour': 3600.0,
    # compass courses are wrapped into [0, course_wrap_deg)
    'course_wrap_deg': 360.0,
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) TRAIL SAMPLING
# ───────────────────────────────────────────────────────────────────────────────
TRAIL = {
    # points per trail polyline, start and end inclusive
    'sample_count': 10,
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) PLAYBACK CLOCK
# ───────────────────────────────────────────────────────────────────────────────
PLAYBACK = {
    # simulated seconds per wall-clock second
    'default_speed': 1.0,
    # multiplier menu shown next to the play/pause control
    'speed_options': (1, 2, 5, 10, 20, 50),
    # scenario length when the host does not supply one (s)
    'default_duration': 3600.0,
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) LOGGING
# ───────────────────────────────────────────────────────────────────────────────
LOGGING = {
    'logger_name': 'tacsim',
    'level': logging.INFO,
    'format': '[%(levelname)s] %(message)s',
}

# ───────────────────────────────────────────────────────────────────────────────
# 5) OPERATING AREAS
# ───────────────────────────────────────────────────────────────────────────────
OPERATING_AREAS = {
    "Hawaii": {
        # Big Island approaches, EPSG:4326
        "center": (19.5, -155.5),
        "minx": -156.5,
        "maxx": -154.5,
        "miny":   18.5,
        "maxy":   20.5,
    },
    "Strait of Gibraltar": {
        "center": (35.95, -5.6),
        "minx": -6.2,
        "maxx": -5.0,
        "miny":  35.7,
        "maxy":  36.2,
    },
    "GIUK Gap": {
        # Greenland / Iceland / UK gap; high latitude, expect visible
        # longitude stretching from the flat-earth correction
        "center": (63.0, -15.0),
        "minx": -30.0,
        "maxx":   0.0,
        "miny":  58.0,
        "maxy":  67.0,
    },
    "South China Sea": {
        "center": (14.0, 114.0),
        "minx": 109.0,
        "maxx": 119.0,
        "miny":   8.0,
        "maxy":  20.0,
    },
}

# ───────────────────────────────────────────────────────────────────────────────
# 6) VESSEL CATALOG
# ───────────────────────────────────────────────────────────────────────────────
# Keys of VESSEL_TYPE_LABELS must match tacsim.playback.vessel.VesselType names
# exactly; tests check that every member is covered.
VESSEL_TYPE_LABELS = {
    'SURFACE_WARSHIP': 'Surface warship',
    'SUBMARINE': 'Submarine',
    'MERCHANT': 'Merchant',
    'FISHING': 'Fishing vessel',
    'BIOLOGIC': 'Biologic',
}

# speeds in knots
VESSEL_CATALOG = {
    'ddg-51':     {'name': 'USS Arleigh Burke', 'hull_number': 'DDG-51',
                   'vessel_type': 'SURFACE_WARSHIP', 'nationality': 'USA',
                   'min_speed': 0.0, 'max_speed': 30.0},
    'ssn-688':    {'name': 'USS Los Angeles', 'hull_number': 'SSN-688',
                   'vessel_type': 'SUBMARINE', 'nationality': 'USA',
                   'min_speed': 0.0, 'max_speed': 25.0},
    'type-45':    {'name': 'HMS Daring', 'hull_number': 'D32',
                   'vessel_type': 'SURFACE_WARSHIP', 'nationality': 'GBR',
                   'min_speed': 0.0, 'max_speed': 29.0},
    'akula':      {'name': 'K-335 Gepard', 'hull_number': 'K-335',
                   'vessel_type': 'SUBMARINE', 'nationality': 'RUS',
                   'min_speed': 0.0, 'max_speed': 28.0},
    'type-055':   {'name': 'Nanchang', 'hull_number': '101',
                   'vessel_type': 'SURFACE_WARSHIP', 'nationality': 'CHN',
                   'min_speed': 0.0, 'max_speed': 30.0},
    'soryu':      {'name': 'JS Soryu', 'hull_number': 'SS-501',
                   'vessel_type': 'SUBMARINE', 'nationality': 'JPN',
                   'min_speed': 0.0, 'max_speed': 20.0},
    'whale-1':    {'name': 'Humpback Pod', 'hull_number': 'BIO-01',
                   'vessel_type': 'BIOLOGIC', 'nationality': None,
                   'min_speed': 0.0, 'max_speed': 15.0},
    'fishing-1':  {'name': 'Trawler', 'hull_number': None,
                   'vessel_type': 'FISHING', 'nationality': None,
                   'min_speed': 0.0, 'max_speed': 12.0},
    'merchant-1': {'name': 'Ever Given', 'hull_number': 'IMO-9811000',
                   'vessel_type': 'MERCHANT', 'nationality': 'JPN',
                   'min_speed': 0.0, 'max_speed': 22.0},
}
