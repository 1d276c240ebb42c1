from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum


class FixQuality(IntEnum):
    """GPS fix mode, numbered as in gpsd (None=1, 2D=2, 3D=3)."""

    NONE = 1
    FIX_2D = 2
    FIX_3D = 3


@dataclass(frozen=True)
class GeodeticFix:
    time: float
    latitude: float
    longitude: float
    altitude: float
    speed: float
    heading: float
    fix_quality: FixQuality
    source: str

    @property
    def utc_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.time, tz=timezone.utc)
