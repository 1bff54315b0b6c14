"""School location helpers — coordinate parsing, map regions, address cleanup."""

from __future__ import annotations

import math
import re
from typing import Optional

# Degrees of latitude/longitude shown around a school on its map
MAP_SPAN_DEGREES = 0.025

# The directory appends "(lat, lon)" to the end of every address
_TRAILING_COORDS_RE = re.compile(r"\s*\(\s*-?\d+(?:\.\d+)?\s*,\s*-?\d+(?:\.\d+)?\s*\)\s*$")


def _parse_degrees(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_coordinates(latitude: Optional[str], longitude: Optional[str]) -> Optional[tuple[float, float]]:
    """Return (lat, lon) if both values are present and numeric, else None."""
    lat = _parse_degrees(latitude)
    lon = _parse_degrees(longitude)
    if lat is None or lon is None:
        return None
    return lat, lon


def strip_coordinates(location: str) -> str:
    """Drop the trailing "(lat, lon)" pair from a directory address."""
    return _TRAILING_COORDS_RE.sub("", location or "").strip()


def map_region(latitude: float, longitude: float, span: float = MAP_SPAN_DEGREES) -> dict:
    """Describe a small map region centred on a point.

    Returns the centre, the span, and the bounding box as
    (south, west, north, east) so any map widget can draw it.
    """
    half = span / 2
    return {
        "center": {"latitude": latitude, "longitude": longitude},
        "latitude_delta": span,
        "longitude_delta": span,
        "bbox": [latitude - half, longitude - half, latitude + half, longitude + half],
        "openstreetmap_url": (
            f"https://www.openstreetmap.org/?mlat={latitude}&mlon={longitude}"
            f"#map=15/{latitude}/{longitude}"
        ),
    }
