from datetime import datetime, timezone

from geosun.caption.generator import describe_fix
from geosun.models import FixQuality, GeodeticFix, Station


def _fix(latitude=23.4386, longitude=-179.5123, speed=425.78):
    return GeodeticFix(
        time=datetime(2008, 6, 20, 23, 59, tzinfo=timezone.utc).timestamp(),
        latitude=latitude,
        longitude=longitude,
        altitude=1.52e11,
        speed=speed,
        heading=270.0,
        fix_quality=FixQuality.FIX_3D,
        source="sun",
    )


class TestHemispheres:
    def test_north_west(self):
        caption = describe_fix(_fix())
        assert "23.4386°N, 179.5123°W" in caption

    def test_south_east(self):
        caption = describe_fix(_fix(latitude=-23.4, longitude=2.25))
        assert "23.4000°S, 2.2500°E" in caption


def test_caption_contents():
    caption = describe_fix(_fix())
    assert caption.startswith("Sun overhead at")
    assert "at 2008-06-20 23:59:00 UTC" in caption
    assert "Ground speed 425.8 m/s" in caption
    assert caption.endswith(".")
    assert "Bearing" not in caption


def test_bearing_with_station():
    station = Station(latitude=38.9, longitude=-77.0)
    caption = describe_fix(_fix(), station, 301.456)
    assert "Bearing 301.46° from 38.9000°N, 77.0000°W" in caption


def test_bearing_without_station():
    caption = describe_fix(_fix(), bearing=12.0)
    assert "Bearing 12.00°." in caption
