import math

import pytest

from cubcaster.geometry import (
    PI,
    TWO_PI,
    calculate_distance,
    fix_fisheye,
    normalize_angle,
)


def test_distance_of_right_triangle():
    assert calculate_distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_on_same_point():
    assert calculate_distance(1.5, -2, 7, 9) == pytest.approx(
        calculate_distance(7, 9, 1.5, -2)
    )
    assert calculate_distance(3, 3, 3, 3) == 0


def test_distance_matches_hypot():
    assert calculate_distance(10, 20, -5, 8) == pytest.approx(math.hypot(15, 12))


@pytest.mark.parametrize("angle", [-0.1, -PI, 0.0, 1.0, PI, TWO_PI + 0.2, TWO_PI + 3])
def test_normalize_lands_in_range(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= TWO_PI
    assert math.cos(result) == pytest.approx(math.cos(angle))


def test_normalize_keeps_in_range_value():
    assert normalize_angle(1.25) == 1.25


def test_fisheye_same_angle_keeps_distance():
    assert fix_fisheye(1.0, 1.0, 300.0) == pytest.approx(300.0)


def test_fisheye_is_symmetric():
    assert fix_fisheye(0.3, 0.1, 100) == pytest.approx(fix_fisheye(0.1, 0.3, 100))


def test_fisheye_shortens_off_axis_rays():
    assert fix_fisheye(0.0, 0.5, 100) < 100
    assert fix_fisheye(0.0, PI / 3, 200) == pytest.approx(200 * math.cos(PI / 3))