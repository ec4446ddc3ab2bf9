"""Headless playback runner for quick smoke tests without a chart.

Places the catalog fleet at an operating area's center on a fan of courses,
enters run mode, plays the scenario at a fixed frame rate until the completion
signal fires, then logs where everyone ended up.
"""
import argparse
import logging

from tacsim.playback.clock import format_clock
from tacsim.playback.config import LOGGING, OPERATING_AREAS, PLAYBACK, TRAIL, VESSEL_CATALOG
from tacsim.playback.session import PlaybackSession
from tacsim.playback.vessel import VesselKinematics

log = logging.getLogger(__name__)


def build_demo_session(area: str, duration: float, samples: int = TRAIL['sample_count'],
                       speed: float = PLAYBACK['default_speed']) -> PlaybackSession:
    lat, lng = OPERATING_AREAS[area]['center']
    session = PlaybackSession(duration_seconds=duration, sample_count=samples,
                              speed_multiplier=speed)
    n = len(VESSEL_CATALOG)
    for k, (cid, entry) in enumerate(VESSEL_CATALOG.items()):
        session.add_vessel(VesselKinematics.from_catalog(
            cid, (lat, lng),
            course_degrees=360.0 * k / n,
            speed_knots=0.5 * entry['max_speed'],
        ))
    return session


def run(session: PlaybackSession, fps: float, max_frames: int = 10_000_000) -> int:
    """Drive ``session`` to completion; returns the number of frames used."""
    done = []
    session.on_complete(done.append)
    try:
        session.enter_run_mode()
        if not session.play():
            log.warning("[HEADLESS] nothing to play (duration %.1f s)", session.state.duration_seconds)
            return 0
        dt = 1.0 / fps
        frames = 0
        while not done and frames < max_frames:
            session.frame(dt)
            frames += 1
    finally:
        session.clock.remove_completion_listener(done.append)
    return frames


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a tacsim playback scenario headless.")
    parser.add_argument('--duration', type=float, default=PLAYBACK['default_duration'],
                        help="scenario length in simulated seconds")
    parser.add_argument('--speed', type=float, default=PLAYBACK['default_speed'],
                        help="speed multiplier")
    parser.add_argument('--fps', type=float, default=60.0, help="frames per wall-clock second")
    parser.add_argument('--samples', type=int, default=TRAIL['sample_count'],
                        help="points per trail")
    parser.add_argument('--area', default='Hawaii', choices=sorted(OPERATING_AREAS))
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    if args.verbose:
        pkg_log = logging.getLogger(LOGGING['logger_name'])
        pkg_log.setLevel(logging.DEBUG)
        for h in pkg_log.handlers:
            h.setLevel(logging.DEBUG)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    session = build_demo_session(args.area, args.duration, args.samples, args.speed)
    frames = run(session, args.fps)
    snap = session.snapshot()
    log.info("[HEADLESS] %s after %d frames (x%g)",
             format_clock(snap.state.elapsed_seconds), frames, snap.state.speed_multiplier)
    for vid, pos in snap.positions.items():
        log.info("[HEADLESS] %-10s lat=%.5f lng=%.5f", vid, pos.lat, pos.lng)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
