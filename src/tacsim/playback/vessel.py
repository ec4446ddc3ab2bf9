"""Vessel and position containers shared by the playback engine.

The host owns ``VesselKinematics`` records; the engine only reads them.
``Baseline`` values are created by the baseline cache and never mutated.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional

from tacsim.playback.angle_utils import finite_or_zero, non_negative, wrap_course
from tacsim.playback.config import VESSEL_CATALOG, VESSEL_TYPE_LABELS


class VesselType(Enum):
    SURFACE_WARSHIP = 'SURFACE_WARSHIP'
    SUBMARINE = 'SUBMARINE'
    MERCHANT = 'MERCHANT'
    FISHING = 'FISHING'
    BIOLOGIC = 'BIOLOGIC'

    @classmethod
    def parse(cls, value) -> 'VesselType':
        """Accept a member, its name, or a case-insensitive value string.

        Unknown strings raise ValueError; there is no silent default.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace('-', '_').replace(' ', '_')
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"unknown vessel type: {value!r}")

    @property
    def label(self) -> str:
        return VESSEL_TYPE_LABELS[self.name]


class LatLng(NamedTuple):
    lat: float
    lng: float


@dataclass(frozen=True)
class Baseline:
    """Anchor position of one vessel for one playback session."""
    vessel_id: str
    lat: float
    lng: float

    @property
    def position(self) -> LatLng:
        return LatLng(self.lat, self.lng)


@dataclass
class VesselKinematics:
    """Host-side kinematic record for one vessel.

    ``course_degrees`` is a compass course (0 = north, clockwise) and
    ``speed_knots`` is speed over ground. The engine tolerates malformed
    numbers here; see ``tacsim.playback.resolver``.
    """
    id: str
    course_degrees: float
    speed_knots: float
    position: LatLng
    name: Optional[str] = None
    vessel_type: VesselType = VesselType.MERCHANT
    nationality: Optional[str] = None
    hull_number: Optional[str] = None
    extras: dict = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.position, Mapping):
            self.position = LatLng(self.position['lat'], self.position['lng'])
        elif not isinstance(self.position, LatLng):
            lat, lng = self.position
            self.position = LatLng(lat, lng)
        self.vessel_type = VesselType.parse(self.vessel_type)

    def moved_to(self, lat: float, lng: float) -> 'VesselKinematics':
        """Copy of this record at a new position (drag placement)."""
        return replace(self, position=LatLng(lat, lng))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'VesselKinematics':
        """Build from a loosely typed host record.

        Accepts ``course``/``course_degrees``, ``speed``/``speed_knots`` and a
        ``position`` given as ``{'lat', 'lng'}`` or a ``(lat, lng)`` pair.
        Numeric fields are neutralized rather than rejected.
        """
        pos = record.get('position') or {}
        if isinstance(pos, Mapping):
            lat, lng = pos.get('lat'), pos.get('lng')
        else:
            lat, lng = pos
        course = record.get('course_degrees', record.get('course'))
        speed = record.get('speed_knots', record.get('speed'))
        known = {'id', 'course', 'course_degrees', 'speed', 'speed_knots', 'position',
                 'name', 'type', 'vessel_type', 'nationality', 'hull_number', 'hullNumber'}
        return cls(
            id=str(record['id']),
            course_degrees=float(wrap_course(finite_or_zero(course))),
            speed_knots=non_negative(speed),
            position=LatLng(finite_or_zero(lat), finite_or_zero(lng)),
            name=record.get('name'),
            vessel_type=record.get('vessel_type', record.get('type', VesselType.MERCHANT)),
            nationality=record.get('nationality'),
            hull_number=record.get('hull_number', record.get('hullNumber')),
            extras={k: v for k, v in record.items() if k not in known},
        )

    @classmethod
    def from_catalog(cls, catalog_id: str, position, course_degrees: float = 0.0,
                     speed_knots: float = 0.0, vessel_id: Optional[str] = None) -> 'VesselKinematics':
        """Place a catalog platform on the chart.

        Speed is clipped to the platform's [min_speed, max_speed] band.
        """
        entry = VESSEL_CATALOG[catalog_id]
        speed = min(max(non_negative(speed_knots), entry['min_speed']), entry['max_speed'])
        return cls(
            id=vessel_id or catalog_id,
            course_degrees=float(wrap_course(finite_or_zero(course_degrees))),
            speed_knots=speed,
            position=position,
            name=entry['name'],
            vessel_type=entry['vessel_type'],
            nationality=entry['nationality'],
            hull_number=entry['hull_number'],
            extras={'catalog_id': catalog_id},
        )
