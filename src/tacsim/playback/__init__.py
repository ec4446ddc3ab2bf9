from tacsim.playback.baseline import BaselineCache
from tacsim.playback.clock import ClockMode, PlaybackClock, PlaybackState, format_clock
from tacsim.playback.resolver import position_at, vessel_position_at
from tacsim.playback.session import FrameSnapshot, PlaybackSession
from tacsim.playback.trail import trail_at
from tacsim.playback.vessel import Baseline, LatLng, VesselKinematics, VesselType
