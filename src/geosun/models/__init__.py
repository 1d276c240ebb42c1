from .fix import FixQuality, GeodeticFix
from .position import SubSolarPosition
from .station import Station

__all__ = [
    "FixQuality",
    "GeodeticFix",
    "SubSolarPosition",
    "Station",
]
