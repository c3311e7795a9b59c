import math

import pytest

from dispatchdesk.models.domain import Point
from dispatchdesk.services.geospatial import (
    distance_miles,
    haversine_miles,
    is_valid_coordinate,
    offset_point,
    stop_minutes,
    travel_minutes,
)


def test_one_degree_of_latitude_is_about_69_miles():
    assert haversine_miles(0.0, 0.0, 1.0, 0.0) == pytest.approx(3959 * math.pi / 180)
    assert haversine_miles(0.0, 0.0, 1.0, 0.0) == pytest.approx(69.097, rel=1e-4)


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(41.5623, -72.6509), Point(41.57, -72.64)),
        (Point(0.0, 0.0), Point(10.0, 10.0)),
        (Point(-33.86, 151.21), Point(51.5, -0.12)),
    ],
)
def test_distance_is_symmetric(a: Point, b: Point):
    assert distance_miles(a, b) == distance_miles(b, a)


def test_distance_to_self_is_zero():
    point = Point(41.5623, -72.6509)
    assert distance_miles(point, point) == 0.0


@pytest.mark.parametrize(
    "lat1, lon1, lat2, lon2",
    [
        (float("nan"), 0.0, 1.0, 1.0),
        (float("inf"), 0.0, 1.0, 1.0),
        (0.0, 0.0, 1.0, float("-inf")),
    ],
)
def test_non_finite_coordinates_propagate(lat1: float, lon1: float, lat2: float, lon2: float):
    assert math.isnan(haversine_miles(lat1, lon1, lat2, lon2))


@pytest.mark.parametrize(
    "lat, lng",
    [
        (66.16849958870057, -92.19208432063249),
        (0.0, 0.0),
        (90.0, 0.0),
        (-45.5, 170.25),
    ],
)
def test_antipodal_points_are_half_the_circumference(lat: float, lng: float):
    distance = haversine_miles(lat, lng, -lat, lng + 180)

    assert distance == pytest.approx(3959 * math.pi, rel=1e-6)


def test_near_antipodal_sweep_never_raises():
    for step in range(-89, 90):
        lat = step + 0.16849958870057
        lng = -92.19208432063249 + step * 0.37
        distance = haversine_miles(lat, lng, -lat, lng + 180)
        assert 0.0 <= distance <= 3959 * math.pi + 1e-6


def test_travel_and_stop_minutes():
    assert travel_minutes(4.0) == 10.0
    assert stop_minutes(4.0) == 13.0
    assert stop_minutes(0.0) == 3.0


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(41.5623, -72.6509), True),
        (Point(0.0, 0.0), False),
        (Point(91.0, 10.0), False),
        (Point(10.0, -181.0), False),
        (Point(float("nan"), 10.0), False),
        (Point(10.0, float("inf")), False),
    ],
)
def test_is_valid_coordinate(point: Point, expected: bool):
    assert is_valid_coordinate(point) is expected


def test_offset_point_moves_roughly_the_requested_distance():
    origin = Point(41.5623, -72.6509)
    moved = offset_point(origin, 1.5, math.pi / 4)
    assert distance_miles(origin, moved) == pytest.approx(1.5, rel=0.01)
