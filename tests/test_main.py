import argparse
from unittest.mock import patch

import pytest

from geosun.main import locate_sun, main, parse_args, parse_station
from geosun.models import FixQuality, GeodeticFix, Station


def _fix():
    return GeodeticFix(
        time=1214006340.0,
        latitude=23.4386,
        longitude=-179.5123,
        altitude=1.52e11,
        speed=425.78,
        heading=270.0,
        fix_quality=FixQuality.FIX_3D,
        source="sun",
    )


class TestParseStation:
    def test_lat_lon(self):
        assert parse_station("38.9,-77.0") == Station(38.9, -77.0)

    def test_lat_lon_alt(self):
        assert parse_station("38.9,-77.0,120") == Station(38.9, -77.0, 120.0)

    @pytest.mark.parametrize("text", ["38.9", "a,b", "1,2,3,4", "95,0"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError, match="invalid station"):
            parse_station(text)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.utc_time is None
    assert args.station is None
    assert args.ellipsoid == "WGS84"
    assert args.kernel == "de421.bsp"
    assert args.data_dir is None
    assert args.caption is False
    assert args.verbose is False


def test_parse_args_station():
    args = parse_args(["--station", "10,20", "--utc-time", "2008-06-20T23:59:00Z"])
    assert args.station == Station(10.0, 20.0)
    assert args.utc_time == "2008-06-20T23:59:00Z"


def test_parse_args_rejects_bad_station(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--station", "north"])
    assert "invalid station" in capsys.readouterr().err


@patch("geosun.main.compute_fix")
def test_locate_sun_prints_fix(mock_compute_fix, capsys):
    mock_compute_fix.return_value = _fix()

    exit_code = locate_sun(utc_time="2008-06-20T23:59:00Z")

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Location: 23.438600°, -179.512300°" in captured.out
    assert "Ground speed: 425.8 m/s" in captured.out
    assert "Bearing" not in captured.out
    mock_compute_fix.assert_called_once()
    assert mock_compute_fix.call_args.args[0] == "2008-06-20T23:59:00Z"


@patch("geosun.main.compute_fix")
def test_locate_sun_with_station_and_caption(mock_compute_fix, capsys):
    mock_compute_fix.return_value = _fix()

    exit_code = locate_sun(
        utc_time="2008-06-20T23:59:00Z",
        station=Station(38.9, -77.0),
        print_caption=True,
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Bearing from station:" in captured.out
    assert "Distance from station:" in captured.out
    assert "Sun overhead at 23.4386°N, 179.5123°W" in captured.out


@patch("geosun.main.compute_fix")
def test_locate_sun_verbose(mock_compute_fix, capsys):
    mock_compute_fix.return_value = _fix()

    assert locate_sun(utc_time="2008-06-20T23:59:00Z", verbose=True) == 0

    captured = capsys.readouterr()
    assert "=== VERBOSE: Fix ===" in captured.out
    assert "Fix quality: FIX_3D" in captured.out
    assert "Ellipsoid: WGS84" in captured.out


def test_locate_sun_bad_time(capsys):
    exit_code = locate_sun(utc_time="not a time")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Error while parsing UTC time:" in captured.err


def test_locate_sun_bad_ellipsoid(capsys):
    exit_code = locate_sun(utc_time="2008-06-20T23:59:00Z", ellipsoid_name="Bogus")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Unknown ellipsoid: 'Bogus'" in captured.err


@patch("geosun.main.compute_fix")
def test_locate_sun_unexpected_error(mock_compute_fix, capsys):
    mock_compute_fix.side_effect = RuntimeError("kernel missing")

    exit_code = locate_sun(utc_time="2008-06-20T23:59:00Z")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Error while calculating the position of the Sun:" in captured.err
    assert "kernel missing" in captured.err


@patch("geosun.main.locate_sun")
def test_main_exits_with_code(mock_locate_sun):
    mock_locate_sun.return_value = 0

    with pytest.raises(SystemExit) as exc_info:
        main(["--utc-time", "2008-06-20T23:59:00Z", "--caption"])

    assert exc_info.value.code == 0
    kwargs = mock_locate_sun.call_args.kwargs
    assert kwargs["utc_time"] == "2008-06-20T23:59:00Z"
    assert kwargs["print_caption"] is True
    assert kwargs["station"] is None
