"""
clock.py

Playback clock for the tacsim engine.

The clock turns wall-clock frame deltas into simulated elapsed time. It never
owns a timer: the host calls ``tick(delta)`` once per animation frame with the
real seconds since the previous frame, so dropped or throttled frames still
advance simulated time by the right amount.

States
------
  • STOPPED  elapsed = 0, not playing
  • PAUSED   elapsed = t, not playing
  • RUNNING  elapsed = t, playing at ``speed_multiplier``

Transitions
-----------
  play()       STOPPED|PAUSED → RUNNING, elapsed kept
  pause()      RUNNING → PAUSED, elapsed kept
  seek(t)      any → PAUSED, elapsed = clamp(t, 0, duration)
  restart()    any → STOPPED, elapsed = 0, baseline cache reset
  set_speed(s) rate for later ticks only
  tick(dt)     RUNNING only; reaching duration → PAUSED + completion signal

A duration of zero (or less) pins the clock at PAUSED / 0; ``play()`` is then a
logged no-op. After ``close()`` every tick and play is ignored.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from tacsim.playback.angle_utils import finite_or_zero, non_negative
from tacsim.playback.baseline import BaselineCache
from tacsim.playback.config import PLAYBACK

log = logging.getLogger(__name__)


class ClockMode(Enum):
    STOPPED = 'stopped'
    PAUSED = 'paused'
    RUNNING = 'running'


@dataclass(frozen=True)
class PlaybackState:
    """Read-only snapshot of the clock handed to the host."""
    elapsed_seconds: float
    is_playing: bool
    speed_multiplier: float
    duration_seconds: float
    mode: ClockMode

    @property
    def progress(self) -> float:
        """Elapsed fraction of the scenario, 0..1."""
        if self.duration_seconds <= 0.0:
            return 0.0
        return self.elapsed_seconds / self.duration_seconds


def format_clock(seconds: float) -> str:
    """Seconds as HH:MM:SS for the time readout."""
    s = int(non_negative(seconds))
    return f"{s // 3600:02d}:{(s % 3600) // 60:02d}:{s % 60:02d}"


class PlaybackClock:
    """Variable-speed, pausable simulated clock.

    The clock owns the session's ``BaselineCache`` and is the only thing that
    resets it (on ``restart()``).
    """

    def __init__(self, duration_seconds: float, speed_multiplier: float = PLAYBACK['default_speed'],
                 baselines: BaselineCache = None):
        self.baselines = baselines if baselines is not None else BaselineCache()
        self._duration = non_negative(duration_seconds)
        self._speed = PLAYBACK['default_speed']
        self._elapsed = 0.0
        self._playing = False
        self._mode = ClockMode.STOPPED
        self._closed = False
        self._listeners = []
        self.set_speed(speed_multiplier)
        if self._duration <= 0.0:
            self._mode = ClockMode.PAUSED

    # ── snapshot ─────────────────────────────────────────────────────────────
    @property
    def state(self) -> PlaybackState:
        return PlaybackState(
            elapsed_seconds=self._elapsed,
            is_playing=self._playing,
            speed_multiplier=self._speed,
            duration_seconds=self._duration,
            mode=self._mode,
        )

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed

    @property
    def duration_seconds(self) -> float:
        return self._duration

    @property
    def speed_multiplier(self) -> float:
        return self._speed

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def mode(self) -> ClockMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return self._closed

    # ── completion signal ────────────────────────────────────────────────────
    def add_completion_listener(self, fn) -> None:
        """``fn(state)`` is called each time playback reaches the end."""
        if fn not in self._listeners:
            self._listeners.append(fn)

    def remove_completion_listener(self, fn) -> None:
        if fn in self._listeners:
            self._listeners.remove(fn)

    def _emit_complete(self) -> None:
        snap = self.state
        log.info("[CLOCK] Playback complete at t=%.1f s", snap.elapsed_seconds)
        for fn in list(self._listeners):
            try:
                fn(snap)
            except Exception:
                log.exception("[CLOCK] completion listener %r failed", fn)

    # ── transitions ──────────────────────────────────────────────────────────
    def _clamp(self, t: float) -> float:
        return min(max(t, 0.0), self._duration)

    def play(self) -> bool:
        """Start or resume. Returns False when the request was a no-op."""
        if self._closed:
            return False
        if self._duration <= 0.0:
            log.info("[CLOCK] play ignored: scenario duration is %.1f s", self._duration)
            self._mode = ClockMode.PAUSED
            self._elapsed = 0.0
            return False
        if self._playing:
            return False
        self._playing = True
        self._mode = ClockMode.RUNNING
        log.debug("[CLOCK] play at t=%.1f s (x%g)", self._elapsed, self._speed)
        return True

    def pause(self) -> bool:
        if not self._playing:
            return False
        self._playing = False
        self._mode = ClockMode.PAUSED
        log.debug("[CLOCK] pause at t=%.1f s", self._elapsed)
        return True

    def toggle(self) -> bool:
        """Single play/pause control. Returns the resulting ``is_playing``."""
        if self._playing:
            self.pause()
        else:
            self.play()
        return self._playing

    def seek(self, t: float) -> float:
        """Jump to ``t`` and pause; a manual scrub never races the tick loop."""
        self._elapsed = self._clamp(finite_or_zero(t))
        self._playing = False
        self._mode = ClockMode.PAUSED
        log.debug("[CLOCK] seek to t=%.1f s", self._elapsed)
        return self._elapsed

    def restart(self) -> None:
        """Back to STOPPED at 0 and drop every vessel baseline."""
        self._elapsed = 0.0
        self._playing = False
        self._mode = ClockMode.PAUSED if self._duration <= 0.0 else ClockMode.STOPPED
        self.baselines.reset()
        log.debug("[CLOCK] restart")

    def set_speed(self, speed_multiplier: float) -> float:
        """Change the rate used by later ticks; elapsed time is not rescaled.

        Non-positive or malformed multipliers are ignored.
        """
        s = finite_or_zero(speed_multiplier)
        if s <= 0.0:
            log.warning("[CLOCK] ignoring speed multiplier %r; keeping x%g",
                        speed_multiplier, self._speed)
            return self._speed
        self._speed = s
        return self._speed

    def set_duration(self, duration_seconds: float) -> None:
        """Host changed the scenario length; elapsed is re-clamped."""
        was_empty = self._duration <= 0.0
        self._duration = non_negative(duration_seconds)
        self._elapsed = self._clamp(self._elapsed)
        if self._duration <= 0.0:
            self._playing = False
            self._mode = ClockMode.PAUSED
        elif was_empty:
            self._mode = ClockMode.STOPPED

    def tick(self, real_delta_seconds: float) -> float:
        """Advance by ``real_delta_seconds * speed_multiplier``.

        No-op unless RUNNING. Negative or malformed deltas advance nothing.
        Returns the elapsed time after the tick.
        """
        if self._closed or not self._playing:
            return self._elapsed
        delta = non_negative(real_delta_seconds)
        self._elapsed = self._clamp(self._elapsed + delta * self._speed)
        if self._elapsed >= self._duration:
            self._elapsed = self._duration
            self._playing = False
            self._mode = ClockMode.PAUSED
            self._emit_complete()
        return self._elapsed

    def close(self) -> None:
        """Host teardown; the clock stops answering play and tick."""
        self._playing = False
        if self._mode is ClockMode.RUNNING:
            self._mode = ClockMode.PAUSED
        self._closed = True
