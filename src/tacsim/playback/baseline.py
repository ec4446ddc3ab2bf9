# -*- coding: utf-8 -*-
import logging
from collections import OrderedDict

from tacsim.playback.angle_utils import finite_or_zero
from tacsim.playback.vessel import Baseline

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
class BaselineCache:
    """Session-scoped anchor positions, one per vessel id.

    A cache miss is the trigger for capturing a baseline, not an error.
    Once captured, a baseline is only dropped by ``reset()`` (or ``discard()``
    when the host deletes the vessel).
    """
    def __init__(self):
        self._anchors = OrderedDict()      # {vessel_id: Baseline}

    def ensure_baseline(self, vessel_id, current_position) -> Baseline:
        """Return the stored baseline, capturing ``current_position`` on a miss.

        ``current_position`` is ignored once a baseline exists, even if the
        host has since moved the vessel.
        """
        found = self._anchors.get(vessel_id)
        if found is not None:
            return found
        if hasattr(current_position, 'lat'):
            lat, lng = current_position.lat, current_position.lng
        else:
            lat, lng = current_position
        found = Baseline(vessel_id, finite_or_zero(lat), finite_or_zero(lng))
        self._anchors[vessel_id] = found
        log.debug("[BASELINE] captured %s at (%.5f, %.5f)", vessel_id, found.lat, found.lng)
        return found

    def get(self, vessel_id, default=None):
        return self._anchors.get(vessel_id, default)

    def discard(self, vessel_id) -> None:
        self._anchors.pop(vessel_id, None)

    def reset(self) -> None:
        """Forget every baseline; the next resolve re-anchors each vessel."""
        if self._anchors:
            log.debug("[BASELINE] reset (%d anchors dropped)", len(self._anchors))
        self._anchors.clear()

    def __contains__(self, vessel_id):
        return vessel_id in self._anchors

    def __len__(self):
        return len(self._anchors)

    def __iter__(self):
        return iter(self._anchors.values())
