from .ellipsoid import DEFAULT_ELLIPSOID, Ellipsoid, available_ellipsoids
from .resolver import (
    SECONDS_PER_DAY,
    bearing_to,
    compute_fix,
    distance_to,
    ground_speed,
    to_utc,
)

__all__ = [
    "DEFAULT_ELLIPSOID",
    "Ellipsoid",
    "available_ellipsoids",
    "SECONDS_PER_DAY",
    "bearing_to",
    "compute_fix",
    "distance_to",
    "ground_speed",
    "to_utc",
]
