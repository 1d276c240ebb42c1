from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..models.fix import GeodeticFix
    from ..models.station import Station


def _format_latlon(latitude: float, longitude: float) -> str:
    return (
        f"{abs(latitude):.4f}°{'N' if latitude >= 0 else 'S'}, "
        f"{abs(longitude):.4f}°{'E' if longitude >= 0 else 'W'}"
    )


def describe_fix(
    fix: "GeodeticFix",
    station: "Optional[Station]" = None,
    bearing: Optional[float] = None,
) -> str:
    """Generate a one-line description of a sub-solar fix.

    Args:
        fix: Sub-solar point
        station: Optional observer station the bearing was measured from
        bearing: Optional bearing in degrees from station to the fix

    Returns:
        Human-readable description string.
    """
    parts = [f"Sun overhead at {_format_latlon(fix.latitude, fix.longitude)}"]
    parts.append(f"at {fix.utc_datetime.strftime('%Y-%m-%d %H:%M:%S')} UTC")

    sentences = [" ".join(parts)]
    sentences.append(f"Ground speed {fix.speed:.1f} m/s")

    if bearing is not None:
        if station is not None:
            sentences.append(
                f"Bearing {bearing:.2f}° from "
                f"{_format_latlon(station.latitude, station.longitude)}"
            )
        else:
            sentences.append(f"Bearing {bearing:.2f}°")

    return ". ".join(sentences) + "."
