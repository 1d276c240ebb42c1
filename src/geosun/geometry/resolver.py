import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

import numpy as np

from ..ephemeris import SunEphemeris
from ..errors import TimeParseError
from ..models import FixQuality, GeodeticFix, Station
from .ellipsoid import Ellipsoid

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0
SUN_HEADING_DEG = 270.0
FIX_SOURCE = "sun"


@lru_cache(maxsize=None)
def default_ephemeris() -> SunEphemeris:
    """Shared engine used when a caller does not supply one."""
    return SunEphemeris()


def _parse_iso_utc(utc_time: str) -> datetime:
    """
    Parse ISO-8601 timestamp into a datetime.

    Args:
        utc_time: ISO-8601 timestamp (e.g., "2008-06-20T23:59:00Z")

    Raises:
        TimeParseError: If utc_time cannot be parsed
    """
    text = utc_time.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise TimeParseError(utc_time)


def to_utc(instant) -> datetime:
    """
    Normalize an instant to an aware UTC datetime.

    Naive datetimes (and ISO strings without an offset) are read as UTC
    wall-clock time. Numbers are Unix timestamps in seconds.

    Args:
        instant: datetime, ISO-8601 string, or Unix timestamp

    Returns:
        datetime with tzinfo=timezone.utc

    Raises:
        TimeParseError: If instant cannot be interpreted
    """
    if isinstance(instant, str):
        instant = _parse_iso_utc(instant)
    elif isinstance(instant, (int, float)) and not isinstance(instant, bool):
        try:
            return datetime.fromtimestamp(instant, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise TimeParseError(instant)

    if not isinstance(instant, datetime):
        raise TimeParseError(instant)

    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def ground_speed(latitude_rad: float, ellipsoid: Ellipsoid) -> float:
    """
    Ground-track speed of the sub-solar point in m/s.

    Models the point as sweeping a circle of radius N(lat)*cos(lat) once per
    day, where N is the prime-vertical radius of curvature. This ignores the
    difference between solar and sidereal day.
    """
    radius = ellipsoid.n_rad(latitude_rad) * np.cos(latitude_rad)
    return float(abs(2.0 * np.pi * radius / SECONDS_PER_DAY))


def compute_fix(
    instant,
    ellipsoid: Optional[Ellipsoid] = None,
    ephemeris: Optional[SunEphemeris] = None,
) -> GeodeticFix:
    """
    Compute the geodetic position of the Sun over the Earth.

    Args:
        instant: datetime, ISO-8601 string, or Unix timestamp
        ellipsoid: Reference ellipsoid for the speed model (default WGS84)
        ephemeris: Solar ephemeris engine (default: shared DE421 engine)

    Returns:
        GeodeticFix for the point directly beneath the Sun

    Raises:
        TimeParseError: If instant cannot be interpreted
    """
    if ellipsoid is None:
        ellipsoid = Ellipsoid()
    if ephemeris is None:
        ephemeris = default_ephemeris()

    epoch = to_utc(instant).timestamp()
    position = ephemeris.universal(epoch)

    psi = position.latitude_rad
    speed = ground_speed(psi, ellipsoid)

    fix = GeodeticFix(
        time=position.epoch,
        latitude=float(np.degrees(psi)),
        longitude=float(np.degrees(position.longitude_rad)),
        altitude=position.height_km * 1000.0,
        speed=speed,
        heading=SUN_HEADING_DEG,
        fix_quality=FixQuality.FIX_3D,
        source=FIX_SOURCE,
    )
    logger.debug(
        "Sub-solar point at %.3f: lat=%.6f lon=%.6f",
        fix.time,
        fix.latitude,
        fix.longitude,
    )
    return fix


def _inverse(station: Station, fix: GeodeticFix, ellipsoid: Optional[Ellipsoid]):
    if ellipsoid is None:
        ellipsoid = Ellipsoid()
    return ellipsoid.inverse(
        station.latitude, station.longitude, fix.latitude, fix.longitude
    )


def bearing_to(
    station: Station, fix: GeodeticFix, ellipsoid: Optional[Ellipsoid] = None
) -> float:
    """Initial bearing in degrees [0, 360) along the geodesic from station to fix."""
    forward, _, _ = _inverse(station, fix, ellipsoid)
    bearing = forward % 360.0
    return 0.0 if bearing >= 360.0 else bearing


def distance_to(
    station: Station, fix: GeodeticFix, ellipsoid: Optional[Ellipsoid] = None
) -> float:
    """Geodesic distance in meters from station to the fix's ground point."""
    _, _, distance = _inverse(station, fix, ellipsoid)
    return distance
