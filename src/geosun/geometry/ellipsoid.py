import math

import pyproj

from ..errors import EllipsoidNotFoundError

DEFAULT_ELLIPSOID = "WGS84"


def available_ellipsoids() -> list[str]:
    """Names accepted by Ellipsoid(), as known to PROJ."""
    return sorted(pyproj.get_ellps_map().keys())


class Ellipsoid:
    """Reference ellipsoid backed by pyproj.Geod.

    Args:
        name: PROJ ellipsoid name (e.g., 'WGS84', 'GRS80', 'clrk66')

    Raises:
        EllipsoidNotFoundError: If name is not a PROJ ellipsoid
    """

    def __init__(self, name: str = DEFAULT_ELLIPSOID):
        if name not in pyproj.get_ellps_map():
            raise EllipsoidNotFoundError(name, available_ellipsoids())
        self.name = name
        self.geod = pyproj.Geod(ellps=name)

    def __repr__(self) -> str:
        return f"Ellipsoid({self.name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ellipsoid):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def a(self) -> float:
        """Semi-major axis in meters."""
        return self.geod.a

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.geod.b

    @property
    def es(self) -> float:
        """First eccentricity squared."""
        return self.geod.es

    def n_rad(self, latitude_rad: float) -> float:
        """Prime-vertical radius of curvature at a geodetic latitude.

        Args:
            latitude_rad: Geodetic latitude in radians

        Returns:
            Radius of curvature in the east-west plane, meters
        """
        sin_lat = math.sin(latitude_rad)
        return self.a / math.sqrt(1.0 - self.es * sin_lat * sin_lat)

    def inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> tuple[float, float, float]:
        """Solve the inverse geodesic problem between two points in degrees.

        Returns:
            (forward_azimuth_deg, back_azimuth_deg, distance_m); azimuths
            are in (-180, 180] as returned by PROJ.
        """
        forward, back, distance = self.geod.inv(lon1, lat1, lon2, lat2)
        return float(forward), float(back), float(distance)
