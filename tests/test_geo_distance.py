import math

import pytest

from eventure.services.geo_distance import (
    EARTH_RADIUS_M,
    METERS_PER_MILE,
    Coordinate,
    distance_meters,
    is_within_radius,
    miles_to_meters,
)

from conftest import BOSTON, NEAR_PROVIDENCE, PROVIDENCE


def test_same_point_is_close_to_zero():
    # acos 인자가 1.0 근처에서 자릿수 손실 → 같은 점도 0.1m 안팎이 나옴 (구면 코사인 법칙의 정밀도 한계)
    p = Coordinate(*PROVIDENCE)
    assert distance_meters(p, p) == pytest.approx(0.0, abs=1.0)


def test_distance_is_symmetric():
    a, b = Coordinate(*PROVIDENCE), Coordinate(*BOSTON)
    assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


def test_providence_to_nearby_point_is_about_two_miles():
    miles = distance_meters(Coordinate(*PROVIDENCE), Coordinate(*NEAR_PROVIDENCE)) / METERS_PER_MILE
    assert miles == pytest.approx(2.0, abs=0.1)


def test_providence_to_boston_is_about_41_miles():
    miles = distance_meters(Coordinate(*PROVIDENCE), Coordinate(*BOSTON)) / METERS_PER_MILE
    assert 40 < miles < 42


def test_one_degree_of_latitude():
    meters = distance_meters(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
    assert meters == pytest.approx(EARTH_RADIUS_M * math.pi / 180, rel=1e-6)


def test_miles_to_meters():
    assert miles_to_meters(5) == pytest.approx(8046.7)


@pytest.mark.parametrize(
    "point, radius, expected",
    [
        (NEAR_PROVIDENCE, 5, True),
        (NEAR_PROVIDENCE, 1, False),
        (BOSTON, 40, False),
        (BOSTON, 50, True),
    ],
)
def test_is_within_radius(point, radius, expected):
    assert is_within_radius(Coordinate(*PROVIDENCE), Coordinate(*point), radius) is expected
