import argparse
import logging
import sys
from datetime import datetime, timezone

from . import __version__
from .caption.generator import describe_fix
from .ephemeris import DEFAULT_KERNEL, SunEphemeris
from .errors import GeoSunError, TimeParseError, handle_error
from .geometry.ellipsoid import DEFAULT_ELLIPSOID, Ellipsoid
from .geometry.resolver import bearing_to, compute_fix, distance_to
from .models import GeodeticFix, Station


def parse_station(text: str) -> Station:
    """Parse a 'LAT,LON' or 'LAT,LON,ALT' argument into a Station."""
    try:
        values = [float(part) for part in text.split(",")]
        if len(values) not in (2, 3):
            raise ValueError("expected LAT,LON or LAT,LON,ALT")
        return Station(*values)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid station '{text}': {e}")


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Calculate the geodetic position of the Sun over the Earth."
    )
    parser.add_argument(
        "--utc-time",
        type=str,
        default=None,
        help="ISO-8601 UTC timestamp (default: current time)",
    )
    parser.add_argument(
        "--station",
        type=parse_station,
        default=None,
        help="Observer station as LAT,LON[,ALT] in degrees (prints bearing and distance)",
    )
    parser.add_argument(
        "--ellipsoid",
        type=str,
        default=DEFAULT_ELLIPSOID,
        help=f"Reference ellipsoid name (default: {DEFAULT_ELLIPSOID})",
    )
    parser.add_argument(
        "--kernel",
        type=str,
        default=DEFAULT_KERNEL,
        help=f"JPL ephemeris kernel (default: {DEFAULT_KERNEL})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory for downloaded ephemeris kernels (default: current directory)",
    )
    parser.add_argument(
        "--caption",
        action="store_true",
        help="Print a one-line description to stdout",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print every fix field and enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"geosun {__version__}")
    return parser.parse_args(argv)


def print_verbose_info(fix: GeodeticFix, ellipsoid: Ellipsoid):
    """Print every field of a fix.

    Args:
        fix: Sub-solar point
        ellipsoid: Ellipsoid used for the speed model
    """
    print("=== VERBOSE: Fix ===")
    print(f"  Time: {fix.time:.6f} ({fix.utc_datetime.isoformat()})")
    print(f"  Latitude: {fix.latitude:.6f}°")
    print(f"  Longitude: {fix.longitude:.6f}°")
    print(f"  Altitude: {fix.altitude:.0f} m")
    print(f"  Speed: {fix.speed:.3f} m/s")
    print(f"  Heading: {fix.heading:.1f}°")
    print(f"  Fix quality: {fix.fix_quality.name}")
    print(f"  Source: {fix.source}")
    print(f"  Ellipsoid: {ellipsoid.name} (a={ellipsoid.a:.3f} m, es={ellipsoid.es:.9f})")
    print("=== END VERBOSE ===")
    print()


def locate_sun(
    utc_time: str | None = None,
    station: Station | None = None,
    ellipsoid_name: str = DEFAULT_ELLIPSOID,
    kernel_name: str = DEFAULT_KERNEL,
    data_dir: str | None = None,
    print_caption: bool = False,
    verbose: bool = False,
) -> int:
    """Compute and print the sub-solar point.

    Args:
        utc_time: ISO-8601 UTC timestamp (None for now)
        station: Optional observer station for bearing and distance
        ellipsoid_name: Reference ellipsoid name
        kernel_name: JPL ephemeris kernel filename
        data_dir: Directory for downloaded kernels
        print_caption: If True, print a one-line description
        verbose: If True, print every fix field

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        if utc_time is None:
            utc_time = datetime.now(timezone.utc).isoformat(timespec="seconds")

        try:
            ellipsoid = Ellipsoid(ellipsoid_name)
        except GeoSunError as e:
            return handle_error(e, "selecting the reference ellipsoid")

        ephemeris = SunEphemeris(kernel_name=kernel_name, data_dir=data_dir)

        try:
            fix = compute_fix(utc_time, ellipsoid, ephemeris)
        except TimeParseError as e:
            return handle_error(e, "parsing UTC time")

        if verbose:
            print_verbose_info(fix, ellipsoid)

        print("Sub-solar point")
        print(f"  UTC time: {fix.utc_datetime.isoformat(timespec='seconds')}")
        print(f"  Location: {fix.latitude:.6f}°, {fix.longitude:.6f}°")
        print(f"  Ground speed: {fix.speed:.1f} m/s")

        bearing = None
        if station is not None:
            bearing = bearing_to(station, fix, ellipsoid)
            distance = distance_to(station, fix, ellipsoid)
            print(f"  Bearing from station: {bearing:.2f}°")
            print(f"  Distance from station: {distance / 1000:.1f} km")
        print()

        if print_caption:
            print(describe_fix(fix, station, bearing))

        return 0

    except Exception as e:
        return handle_error(e, "calculating the position of the Sun")


def main(argv=None):
    """CLI entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    exit_code = locate_sun(
        utc_time=args.utc_time,
        station=args.station,
        ellipsoid_name=args.ellipsoid,
        kernel_name=args.kernel,
        data_dir=args.data_dir,
        print_caption=args.caption,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
