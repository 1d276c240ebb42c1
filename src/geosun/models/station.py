from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    latitude: float
    longitude: float
    altitude_m: float = 0.0

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude < 360.0:
            raise ValueError(
                f"longitude must be within [-180, 360), got {self.longitude}"
            )
