from dataclasses import dataclass


@dataclass(frozen=True)
class SubSolarPosition:
    """Raw ephemeris output: geodetic angles in radians, height in km."""

    epoch: float
    latitude_rad: float
    longitude_rad: float
    height_km: float
