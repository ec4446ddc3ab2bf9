import numpy as np
import pytest

from tacsim.playback.clock import ClockMode
from tacsim.playback.resolver import position_at
from tacsim.playback.session import PlaybackSession
from tacsim.playback.vessel import LatLng, VesselKinematics


@pytest.fixture
def fleet(hawaii):
    return [
        VesselKinematics('ddg-51', 90.0, 30.0, hawaii),
        VesselKinematics('ssn-688', 0.0, 15.0, (19.0, -156.0)),
        VesselKinematics('whale-1', 200.0, 4.0, (20.0, -155.0), vessel_type='BIOLOGIC'),
    ]


def test_setup_mode_shows_raw_positions(fleet):
    session = PlaybackSession(3600.0, fleet)
    snap = session.frame(1.0)
    assert not snap.run_mode
    assert snap.positions['ssn-688'] == LatLng(19.0, -156.0)
    assert snap.trails == {}
    assert session.play() is False
    assert session.state.elapsed_seconds == 0.0


def test_run_mode_frames(fleet, hawaii):
    session = PlaybackSession(7200.0, fleet, speed_multiplier=60.0)
    session.enter_run_mode()
    assert session.play()
    for _ in range(60):
        snap = session.frame(1.0)
    assert snap.state.elapsed_seconds == 3600.0
    assert snap.positions['ddg-51'] == position_at(hawaii, 90.0, 30.0, 3600.0)
    for vid, trail in snap.trails.items():
        assert trail.shape == (10, 2)
        assert trail[-1, 0] == snap.positions[vid].lng
        assert trail[-1, 1] == snap.positions[vid].lat


def test_host_edits_do_not_reanchor_until_setup(fleet, hawaii):
    session = PlaybackSession(3600.0, fleet)
    session.enter_run_mode()
    session.seek(600.0)
    before = session.snapshot().positions['ddg-51']

    session.update_vessel(fleet[0].moved_to(0.0, 0.0))
    assert session.snapshot().positions['ddg-51'] == before

    session.enter_setup_mode()
    assert session.state.mode is ClockMode.STOPPED
    assert len(session.baselines) == 0
    session.enter_run_mode()
    session.seek(600.0)
    assert session.snapshot().positions['ddg-51'] == position_at((0.0, 0.0), 90.0, 30.0, 600.0)


def test_restart_reanchors(fleet):
    session = PlaybackSession(3600.0, fleet)
    session.enter_run_mode()
    session.seek(900.0)
    session.snapshot()
    session.update_vessel(fleet[1].moved_to(10.0, 10.0))
    session.restart()
    assert session.state.elapsed_seconds == 0.0
    assert session.snapshot().positions['ssn-688'] == LatLng(10.0, 10.0)


def test_roster_errors(fleet):
    session = PlaybackSession(3600.0, fleet)
    with pytest.raises(ValueError):
        session.add_vessel(VesselKinematics('ddg-51', 0.0, 0.0, (0.0, 0.0)))
    with pytest.raises(KeyError):
        session.update_vessel(VesselKinematics('nope', 0.0, 0.0, (0.0, 0.0)))
    with pytest.raises(KeyError):
        session.remove_vessel('nope')


def test_remove_vessel_drops_baseline(fleet):
    session = PlaybackSession(3600.0, fleet)
    session.enter_run_mode()
    session.snapshot()
    assert 'whale-1' in session.baselines
    session.remove_vessel('whale-1')
    assert 'whale-1' not in session.baselines
    assert 'whale-1' not in session.snapshot().positions


def test_add_vessel_from_dict():
    session = PlaybackSession(60.0)
    v = session.add_vessel({'id': 'f1', 'course': 10, 'speed': 5,
                            'position': {'lat': 1.0, 'lng': 2.0}, 'type': 'FISHING'})
    assert session.get_vessel('f1') is v
    assert [x.id for x in session.vessels] == ['f1']


def test_vessel_order_does_not_matter(fleet):
    a = PlaybackSession(3600.0, fleet)
    b = PlaybackSession(3600.0, list(reversed(fleet)))
    for s in (a, b):
        s.enter_run_mode()
        s.seek(1800.0)
    sa, sb = a.snapshot(), b.snapshot()
    assert sa.positions == sb.positions
    for vid in sa.trails:
        assert np.array_equal(sa.trails[vid], sb.trails[vid])


def test_completion_listener(fleet):
    session = PlaybackSession(10.0, fleet)
    done = []
    session.on_complete(done.append)
    session.enter_run_mode()
    session.play()
    session.frame(4.0)
    session.frame(4.0)
    assert done == []
    session.frame(4.0)
    assert len(done) == 1
    assert session.state.mode is ClockMode.PAUSED


def test_track_table(fleet):
    session = PlaybackSession(3600.0, fleet)
    session.enter_run_mode()
    session.seek(1200.0)
    df = session.track_table(sample_count=4)
    assert list(df.columns) == ['vessel_id', 't', 'lat', 'lng']
    assert len(df) == 3 * 4
    ddg = df[df['vessel_id'] == 'ddg-51']
    assert ddg['t'].tolist()[-1] == 1200.0
    assert ddg['t'].is_monotonic_increasing


def test_zero_duration_session(fleet):
    session = PlaybackSession(0.0, fleet)
    session.enter_run_mode()
    assert session.play() is False
    snap = session.frame(1.0)
    assert snap.state.mode is ClockMode.PAUSED
    assert snap.state.elapsed_seconds == 0.0


def test_closed_session_ignores_frames(fleet):
    session = PlaybackSession(100.0, fleet)
    session.enter_run_mode()
    session.play()
    session.frame(1.0)
    session.close()
    assert session.frame(1.0).state.elapsed_seconds == 1.0


def test_set_speed_ignored_in_setup_mode(fleet):
    session = PlaybackSession(3600.0, fleet)
    assert session.set_speed(50.0) == 1.0
    assert session.state.speed_multiplier == 1.0
    session.enter_run_mode()
    assert session.set_speed(50.0) == 50.0
    assert session.state.speed_multiplier == 50.0


def test_track_table_in_setup_mode_uses_host_positions(fleet):
    session = PlaybackSession(3600.0, fleet)
    first = session.track_table()
    assert len(session.baselines) == 0
    assert len(first) == 3
    assert first['t'].tolist() == [0.0, 0.0, 0.0]

    session.update_vessel(fleet[1].moved_to(5.0, 6.0))
    again = session.track_table()
    ssn = again[again['vessel_id'] == 'ssn-688'].iloc[-1]
    assert (ssn['lat'], ssn['lng']) == (5.0, 6.0)
    assert len(session.baselines) == 0
