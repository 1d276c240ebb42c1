"""Geodetic position of the Sun over the surface of the Earth."""

__version__ = "0.1.0"

from .calculator import SolarPositionCalculator
from .ephemeris import SunEphemeris
from .errors import (
    EllipsoidNotFoundError,
    GeoSunError,
    StationUndefinedError,
    TimeParseError,
)
from .geometry import Ellipsoid, bearing_to, compute_fix, distance_to
from .models import FixQuality, GeodeticFix, Station

__all__ = [
    "__version__",
    "SolarPositionCalculator",
    "SunEphemeris",
    "EllipsoidNotFoundError",
    "GeoSunError",
    "StationUndefinedError",
    "TimeParseError",
    "Ellipsoid",
    "bearing_to",
    "compute_fix",
    "distance_to",
    "FixQuality",
    "GeodeticFix",
    "Station",
]
