"""Stateful convenience wrapper around compute_fix.

    >>> calc = SolarPositionCalculator()
    >>> fix = calc.point_at("2008-06-20T23:59:00Z")
    >>> round(fix.latitude, 2)
    23.44
"""

from datetime import datetime, timezone
from typing import Optional

from .ephemeris import SunEphemeris
from .errors import StationUndefinedError
from .geometry.ellipsoid import Ellipsoid
from .geometry.resolver import (
    bearing_to,
    compute_fix,
    default_ephemeris,
    distance_to,
    to_utc,
)
from .models import GeodeticFix, Station


class SolarPositionCalculator:
    """Calculates the geodetic position of the Sun over the Earth.

    Holds a current instant (default: now, UTC at construction) and an
    optional observer station. Not safe for concurrent mutation; callers
    sharing an instance across threads must serialize set_instant/point.

    Args:
        instant: Initial instant (datetime, ISO-8601 string, Unix timestamp)
        station: Observer station as Station or (lat, lon[, alt]) tuple
        ellipsoid: Ellipsoid or PROJ ellipsoid name (default WGS84)
        sun: Solar ephemeris engine (default: shared DE421 engine)
    """

    def __init__(
        self,
        instant=None,
        station=None,
        ellipsoid: Optional[Ellipsoid | str] = None,
        sun: Optional[SunEphemeris] = None,
    ):
        self.instant = instant if instant is not None else datetime.now(timezone.utc)
        self.station = station
        self.ellipsoid = ellipsoid
        self.sun = sun

    @property
    def sun(self) -> SunEphemeris:
        return self._sun

    @sun.setter
    def sun(self, value: Optional[SunEphemeris]) -> None:
        if value is None:
            value = default_ephemeris()
        elif not isinstance(value, SunEphemeris):
            raise TypeError(f"sun must be a SunEphemeris, got {type(value).__name__}")
        self._sun = value

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @ellipsoid.setter
    def ellipsoid(self, value: Optional[Ellipsoid | str]) -> None:
        if value is None:
            value = Ellipsoid()
        elif isinstance(value, str):
            value = Ellipsoid(value)
        elif not isinstance(value, Ellipsoid):
            raise TypeError(
                f"ellipsoid must be an Ellipsoid or name, got {type(value).__name__}"
            )
        self._ellipsoid = value

    @property
    def instant(self) -> datetime:
        return self._instant

    @instant.setter
    def instant(self, value) -> None:
        self._instant = to_utc(value)

    @property
    def station(self) -> Optional[Station]:
        return self._station

    @station.setter
    def station(self, value) -> None:
        if value is not None and not isinstance(value, Station):
            value = Station(*value)
        self._station = value

    def set_instant(self, instant) -> "SolarPositionCalculator":
        """Set the current instant and return self for chaining.

        Raises:
            TimeParseError: If instant cannot be interpreted
        """
        self.instant = instant
        return self

    def set_station(self, station) -> "SolarPositionCalculator":
        """Set (or clear, with None) the observer station and return self."""
        self.station = station
        return self

    def point(self) -> GeodeticFix:
        """Return the sub-solar point for the current instant."""
        return compute_fix(self.instant, self.ellipsoid, self.sun)

    def point_at(self, instant) -> GeodeticFix:
        """Set the current instant, then return its sub-solar point."""
        return self.set_instant(instant).point()

    def _require_station(self) -> Station:
        if self.station is None:
            raise StationUndefinedError()
        return self.station

    def bearing(self) -> float:
        """Initial bearing in degrees [0, 360) from the station to the sub-solar point.

        Raises:
            StationUndefinedError: If no station is set
        """
        station = self._require_station()
        return bearing_to(station, self.point(), self.ellipsoid)

    def distance(self) -> float:
        """Geodesic distance in meters from the station to the sub-solar point.

        Raises:
            StationUndefinedError: If no station is set
        """
        station = self._require_station()
        return distance_to(station, self.point(), self.ellipsoid)
