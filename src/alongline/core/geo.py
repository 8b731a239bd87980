"""
Geospatial helpers.

We keep a tiny spherical geometry layer here so the projection code can do
distance/bearing/destination calculations without pulling in heavier GIS dependencies.

All coordinates are `(lon, lat)` pairs in decimal degrees (GeoJSON order).
"""

from __future__ import annotations

from math import asin, atan2, cos, degrees, radians, sin, sqrt
from typing import Literal, Sequence

Units = Literal["degrees", "radians", "miles", "kilometers"]

# Sphere radius expressed in each unit.
EARTH_RADIUS: dict[str, float] = {
    "miles": 3960.0,
    "kilometers": 6373.0,
    "degrees": 57.2957795,
    "radians": 1.0,
}


def earth_radius(units: str) -> float:
    """Return the sphere radius for `units` (raises ValueError on unknown units)."""
    try:
        return EARTH_RADIUS[units]
    except KeyError:
        raise ValueError(f"Invalid unit: {units!r}") from None


def distance(a: Sequence[float], b: Sequence[float], units: str = "miles") -> float:
    """Compute great-circle (haversine) distance between two coordinates."""
    r = earth_radius(units)
    lon1, lat1 = radians(a[0]), radians(a[1])
    lon2, lat2 = radians(b[0]), radians(b[1])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h past 1 for antipodal pairs.
    h = min(1.0, h)
    return r * 2 * atan2(sqrt(h), sqrt(1 - h))


def bearing(a: Sequence[float], b: Sequence[float]) -> float:
    """Initial great-circle bearing from `a` to `b` in degrees (-180..180, 0 = north)."""
    lon1, lat1 = radians(a[0]), radians(a[1])
    lon2, lat2 = radians(b[0]), radians(b[1])
    x = sin(lon2 - lon1) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(lon2 - lon1)
    return degrees(atan2(x, y))


def destination(
    origin: Sequence[float], dist: float, bearing_deg: float, units: str = "miles"
) -> tuple[float, float]:
    """Return the coordinate reached by travelling `dist` from `origin` along `bearing_deg`."""
    lon1, lat1 = radians(origin[0]), radians(origin[1])
    theta = radians(bearing_deg)
    delta = dist / earth_radius(units)

    lat2 = asin(sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(theta))
    lon2 = lon1 + atan2(sin(theta) * sin(delta) * cos(lat1), cos(delta) - sin(lat1) * sin(lat2))
    return degrees(lon2), degrees(lat2)
