"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Point

EARTH_RADIUS_MILES = 3959.0
MINUTES_PER_MILE = 2.5
SERVICE_MINUTES_PER_STOP = 3.0
MILES_PER_DEGREE_LAT = 69.0


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula.

    Non-finite inputs yield NaN instead of raising.
    """

    if not all(math.isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        return math.nan

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push `a` just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_miles(a: Point, b: Point) -> float:
    return haversine_miles(a.lat, a.lng, b.lat, b.lng)


def travel_minutes(miles: float) -> float:
    """Drive time for a distance under the flat 2.5 min/mile model."""
    return miles * MINUTES_PER_MILE


def stop_minutes(miles: float) -> float:
    """Drive time to a stop plus the fixed handling time spent there."""
    return travel_minutes(miles) + SERVICE_MINUTES_PER_STOP


def is_valid_coordinate(point: Point) -> bool:
    """Return False for non-finite, out-of-range or (0, 0) placeholder coordinates."""

    if not (math.isfinite(point.lat) and math.isfinite(point.lng)):
        return False
    if not (-90 <= point.lat <= 90) or not (-180 <= point.lng <= 180):
        return False
    if abs(point.lat) < 1e-6 and abs(point.lng) < 1e-6:
        return False
    return True


def offset_point(origin: Point, distance: float, bearing_radians: float) -> Point:
    """Shift a point by roughly `distance` miles along a bearing (flat-earth approximation)."""

    lat_degrees_per_mile = 1 / MILES_PER_DEGREE_LAT
    lng_degrees_per_mile = 1 / (MILES_PER_DEGREE_LAT * math.cos(math.radians(origin.lat)))
    return Point(
        lat=origin.lat + distance * math.cos(bearing_radians) * lat_degrees_per_mile,
        lng=origin.lng + distance * math.sin(bearing_radians) * lng_degrees_per_mile,
    )
