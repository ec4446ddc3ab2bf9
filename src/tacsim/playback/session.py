"""
session.py

This module defines the PlaybackSession class, the host-facing side of the
tacsim playback engine. It owns one PlaybackClock (which in turn owns the
session's BaselineCache) and the roster of VesselKinematics records, and turns
host commands into clock transitions.

Core Responsibilities:
----------------------
1. Roster:
   • Add, update and remove vessels by id. Edits are allowed in both modes;
     while running, replayed tracks stay anchored to the captured baselines.

2. Modes:
   • Setup (editing) mode shows the raw host positions and ignores playback
     commands.
   • Entering run mode restarts the clock, so every vessel is re-anchored at
     its current position on the first resolve.
   • Returning to setup mode restarts the clock again, which clears the
     baselines and resets the playback state to zero.

3. Frames:
   • frame(dt) ticks the clock by the wall-clock delta and returns a
     FrameSnapshot with every vessel's position and trail.

4. Export:
   • track_table() gives the sampled tracks as a pandas DataFrame.

Usage Example:
--------------
    from tacsim.playback.session import PlaybackSession
    from tacsim.playback.vessel import VesselKinematics

    session = PlaybackSession(duration_seconds=3600.0)
    session.add_vessel(VesselKinematics('ddg-51', 90.0, 30.0, (19.5, -155.5)))
    session.enter_run_mode()
    session.play()
    snap = session.frame(1 / 60)       # once per animation frame
"""
import logging
import sys
from dataclasses import dataclass, field
from typing import Dict

import numpy as np
import pandas as pd

from tacsim.playback.clock import PlaybackClock, PlaybackState
from tacsim.playback.config import LOGGING, PLAYBACK, TRAIL
from tacsim.playback.resolver import vessel_position_at
from tacsim.playback.trail import sample_times, trail_at
from tacsim.playback.vessel import LatLng, VesselKinematics

pkg_log = logging.getLogger(LOGGING['logger_name'])
if not pkg_log.handlers:                                # avoid dupes on re-import
    h = logging.StreamHandler(sys.stdout)               # console only
    h.setFormatter(logging.Formatter(LOGGING['format']))
    h.setLevel(LOGGING['level'])
    pkg_log.addHandler(h)
pkg_log.setLevel(LOGGING['level'])

log = logging.getLogger(__name__)


@dataclass
class FrameSnapshot:
    """Everything the renderer needs for one frame."""
    state: PlaybackState
    positions: Dict[str, LatLng] = field(default_factory=dict)
    trails: Dict[str, np.ndarray] = field(default_factory=dict)
    run_mode: bool = False


class PlaybackSession:
    def __init__(self, duration_seconds: float = PLAYBACK['default_duration'], vessels=(),
                 sample_count: int = TRAIL['sample_count'],
                 speed_multiplier: float = PLAYBACK['default_speed']):
        self.clock = PlaybackClock(duration_seconds, speed_multiplier)
        self.sample_count = int(sample_count)
        self.run_mode = False
        self._vessels = {}
        for v in vessels:
            self.add_vessel(v)

    @property
    def baselines(self):
        return self.clock.baselines

    @property
    def state(self) -> PlaybackState:
        return self.clock.state

    # ── roster ───────────────────────────────────────────────────────────────
    @property
    def vessels(self):
        return list(self._vessels.values())

    def get_vessel(self, vessel_id) -> VesselKinematics:
        return self._vessels[vessel_id]

    def add_vessel(self, vessel) -> VesselKinematics:
        if not isinstance(vessel, VesselKinematics):
            vessel = VesselKinematics.from_dict(vessel)
        if vessel.id in self._vessels:
            raise ValueError(f"duplicate vessel id: {vessel.id!r}")
        self._vessels[vessel.id] = vessel
        log.debug("[SESSION] added %s", vessel.id)
        return vessel

    def update_vessel(self, vessel: VesselKinematics) -> None:
        """Replace the host record; a captured baseline is left untouched."""
        if vessel.id not in self._vessels:
            raise KeyError(vessel.id)
        self._vessels[vessel.id] = vessel

    def remove_vessel(self, vessel_id) -> VesselKinematics:
        removed = self._vessels.pop(vessel_id)
        self.baselines.discard(vessel_id)
        log.debug("[SESSION] removed %s", vessel_id)
        return removed

    # ── modes ────────────────────────────────────────────────────────────────
    def enter_run_mode(self) -> None:
        self.clock.restart()
        self.run_mode = True
        log.info("[SESSION] Run mode: %d vessels, duration %.1f s",
                 len(self._vessels), self.clock.duration_seconds)

    def enter_setup_mode(self) -> None:
        self.clock.restart()
        self.run_mode = False
        log.info("[SESSION] Setup mode")

    def set_duration(self, duration_seconds: float) -> None:
        self.clock.set_duration(duration_seconds)

    # ── playback commands ────────────────────────────────────────────────────
    def _in_run_mode(self, command: str) -> bool:
        if not self.run_mode:
            log.debug("[SESSION] %s ignored in setup mode", command)
        return self.run_mode

    def play(self) -> bool:
        return self._in_run_mode('play') and self.clock.play()

    def pause(self) -> bool:
        return self._in_run_mode('pause') and self.clock.pause()

    def toggle(self) -> bool:
        if self._in_run_mode('toggle'):
            return self.clock.toggle()
        return False

    def seek(self, t: float) -> float:
        if self._in_run_mode('seek'):
            return self.clock.seek(t)
        return self.clock.elapsed_seconds

    def restart(self) -> None:
        if self._in_run_mode('restart'):
            self.clock.restart()

    def set_speed(self, speed_multiplier: float) -> float:
        if self._in_run_mode('set_speed'):
            return self.clock.set_speed(speed_multiplier)
        return self.clock.speed_multiplier

    def on_complete(self, fn) -> None:
        self.clock.add_completion_listener(fn)

    def close(self) -> None:
        self.clock.close()

    # ── frames ───────────────────────────────────────────────────────────────
    def frame(self, real_delta_seconds: float) -> FrameSnapshot:
        """Tick the clock by one frame's wall-clock delta, then snapshot."""
        if self.run_mode:
            self.clock.tick(real_delta_seconds)
        return self.snapshot()

    def snapshot(self) -> FrameSnapshot:
        state = self.clock.state
        snap = FrameSnapshot(state=state, run_mode=self.run_mode)
        if not self.run_mode:
            for vid, v in self._vessels.items():
                snap.positions[vid] = v.position
            return snap

        t = state.elapsed_seconds
        for vid, v in self._vessels.items():
            snap.positions[vid] = vessel_position_at(v, t, self.baselines)
            snap.trails[vid] = trail_at(v, t, self.baselines, self.sample_count)
        return snap

    def track_table(self, sample_count: int = None) -> pd.DataFrame:
        """Sampled tracks over [0, elapsed] as rows of (vessel_id, t, lat, lng).

        In setup mode each vessel contributes its raw host position at t = 0
        and no baseline is captured.
        """
        n = self.sample_count if sample_count is None else int(sample_count)
        rows = []
        if not self.run_mode:
            for vid, v in self._vessels.items():
                rows.append((vid, 0.0, v.position.lat, v.position.lng))
            return pd.DataFrame(rows, columns=['vessel_id', 't', 'lat', 'lng'])

        times = sample_times(self.clock.elapsed_seconds, n)
        for vid, v in self._vessels.items():
            for t in times:
                pos = vessel_position_at(v, float(t), self.baselines)
                rows.append((vid, float(t), pos.lat, pos.lng))
        return pd.DataFrame(rows, columns=['vessel_id', 't', 'lat', 'lng'])
