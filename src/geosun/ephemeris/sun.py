"""Geodetic position of the Sun from a JPL ephemeris kernel.

Thin wrapper around skyfield: the Sun is observed from the geocenter
(apparent place, so light-time and aberration are included) and the
resulting vector is converted to WGS-84 geodetic coordinates with
``skyfield.api.wgs84``.

The kernel is loaded lazily on the first query and cached on the
instance. Loading may download the kernel (~17 MB for DE421) into the
data directory.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from skyfield.api import Loader, load, wgs84

from ..models import SubSolarPosition

logger = logging.getLogger(__name__)

DEFAULT_KERNEL = "de421.bsp"


class SunEphemeris:
    """Solar ephemeris engine.

    Args:
        kernel_name: JPL ephemeris kernel filename (default: 'de421.bsp')
        data_dir: Directory for downloaded kernel files. When omitted,
            skyfield's default loader (current directory) is used.
    """

    def __init__(
        self,
        kernel_name: str = DEFAULT_KERNEL,
        data_dir: Optional[Path | str] = None,
    ):
        self.kernel_name = kernel_name
        self.data_dir = Path(data_dir) if data_dir is not None else None

        self._timescale: Any = None
        self._earth: Any = None
        self._sun: Any = None

    def _ensure_loaded(self) -> None:
        """Load ephemeris kernel and timescale, downloading if necessary."""
        if self._sun is not None:
            return

        if self.data_dir is None:
            loader = load
        else:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            loader = Loader(str(self.data_dir), verbose=False)

        logger.debug("Loading ephemeris kernel %s", self.kernel_name)
        ephemeris = loader(self.kernel_name)
        self._timescale = loader.timescale()
        self._earth = ephemeris["earth"]
        self._sun = ephemeris["sun"]

    def universal(self, epoch: float) -> SubSolarPosition:
        """Compute the point on the ellipsoid beneath the Sun.

        Args:
            epoch: Seconds since the Unix epoch, UTC

        Returns:
            SubSolarPosition with latitude/longitude in radians, height
            above the WGS-84 ellipsoid in kilometers, and the epoch as
            skyfield represents the queried instant.
        """
        self._ensure_loaded()

        t = self._timescale.from_datetime(
            datetime.fromtimestamp(epoch, tz=timezone.utc)
        )
        apparent = self._earth.at(t).observe(self._sun).apparent()

        latitude, longitude = wgs84.latlon_of(apparent)
        height = wgs84.height_of(apparent)

        return SubSolarPosition(
            epoch=t.utc_datetime().timestamp(),
            latitude_rad=float(latitude.radians),
            longitude_rad=float(longitude.radians),
            height_km=float(height.km),
        )
