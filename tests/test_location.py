"""Tests for location helpers."""

import pytest

from sat_viewer.core.location import MAP_SPAN_DEGREES, map_region, parse_coordinates, strip_coordinates


class TestParseCoordinates:
    def test_valid_pair(self):
        assert parse_coordinates("40.7", "-73.9") == (40.7, -73.9)

    @pytest.mark.parametrize(
        "lat,lon",
        [(None, "-73.9"), ("40.7", None), ("", "-73.9"), ("abc", "-73.9"), ("nan", "-73.9"), ("40.7", "inf")],
    )
    def test_unusable_values(self, lat, lon):
        assert parse_coordinates(lat, lon) is None


class TestStripCoordinates:
    def test_removes_trailing_pair(self):
        assert strip_coordinates("8 21st Avenue, Brooklyn NY 11214 (40.601989, -73.976288)") == (
            "8 21st Avenue, Brooklyn NY 11214"
        )

    def test_leaves_plain_address(self):
        assert strip_coordinates("456 White Plains Road, Bronx NY 10473") == "456 White Plains Road, Bronx NY 10473"

    def test_keeps_other_parentheses(self):
        assert strip_coordinates("1 Main St (Annex), Queens NY") == "1 Main St (Annex), Queens NY"


class TestMapRegion:
    def test_region_centred_on_school(self):
        region = map_region(40.0, -74.0)
        assert region["center"] == {"latitude": 40.0, "longitude": -74.0}
        assert region["latitude_delta"] == MAP_SPAN_DEGREES
        south, west, north, east = region["bbox"]
        assert south < 40.0 < north
        assert west < -74.0 < east
        assert north - south == pytest.approx(MAP_SPAN_DEGREES)
