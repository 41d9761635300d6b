import math

import pytest

from emotionengine.polar import (
    PolarCoordinate,
    PolarCoordinateRange,
    angle_difference,
    cartesian_to_polar,
    interpolate,
    make_polar_coordinate,
    make_range,
    normalize_angle,
    polar_distance,
)


@pytest.mark.parametrize("angle", [-720.0, -359.5, -90.0, 0.0, 45.0, 359.9, 360.0, 1000.0])
def test_normalize_angle_in_range_and_periodic(angle):
    result = normalize_angle(angle)
    assert 0.0 <= result < 360.0
    assert normalize_angle(angle + 360.0) == pytest.approx(result, abs=1e-9)


def test_normalize_angle_negative():
    assert normalize_angle(-90.0) == pytest.approx(270.0)


def test_normalize_full_turn_is_zero():
    assert normalize_angle(720.0) == 0.0


def test_make_polar_coordinate_clamps_intensity_and_angle():
    coord = make_polar_coordinate(-360.0, -5.0)
    assert coord.intensity == 0.0
    assert coord.angle == 0.0


def test_make_polar_coordinate_default_intensity():
    assert make_polar_coordinate(30.0).intensity == 1.0


def test_to_cartesian_on_axis():
    x, y = PolarCoordinate(angle=0.0, intensity=1.0).to_cartesian()
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(0.0)


@pytest.mark.parametrize("angle", [0.0, 30.0, 135.0, 200.0, 359.0])
@pytest.mark.parametrize("intensity", [0.25, 1.0])
def test_cartesian_round_trip(angle, intensity):
    coord = PolarCoordinate(angle=angle, intensity=intensity)
    back = cartesian_to_polar(coord.to_cartesian())
    assert back.angle == pytest.approx(angle, abs=1e-6)
    assert back.intensity == pytest.approx(intensity)


def test_cartesian_to_polar_origin():
    coord = cartesian_to_polar((0.0, 0.0))
    assert coord.angle == 0.0
    assert coord.intensity == 0.0


def test_make_range_clamps_radii():
    r = make_range(-1.0, 2.0, 0.0, 90.0)
    assert r.min_radius == 0.0
    assert r.max_radius == 1.0


def test_make_range_max_not_below_min():
    r = make_range(0.8, 0.2, -90.0, 450.0)
    assert r.max_radius == r.min_radius == 0.8
    assert r.start_angle == normalize_angle(-90.0)
    assert r.end_angle == normalize_angle(450.0)


def test_contains_polar():
    r = make_range(0.0, 1.0, 0.0, 90.0)
    assert r.contains(PolarCoordinate(angle=45.0, intensity=0.5))
    assert not r.contains(PolarCoordinate(angle=180.0, intensity=0.5))
    assert not r.contains(PolarCoordinate(angle=45.0, intensity=1.5))


def test_contains_cartesian_matches_polar():
    r = make_range(0.2, 0.9, 10.0, 120.0)
    for angle in range(0, 360, 15):
        for intensity in (0.1, 0.5, 0.95):
            coord = PolarCoordinate(angle=float(angle), intensity=intensity)
            assert r.contains_cartesian(coord.to_cartesian()) == r.contains(coord)


def test_swapped_angles_are_reordered():
    r = PolarCoordinateRange(start_angle=90.0, end_angle=0.0)
    assert r.contains(PolarCoordinate(angle=45.0, intensity=0.5))


def test_strength_is_one_at_center_and_zero_outside():
    r = make_range(0.0, 1.0, 0.0, 90.0)
    center = r.center()
    assert r.strength_at(center.to_cartesian()) == pytest.approx(1.0)
    assert r.strength_at(PolarCoordinate(angle=200.0, intensity=0.5).to_cartesian()) == 0.0


def test_strength_bounded_and_decreasing_from_center():
    r = make_range(0.0, 1.0, 0.0, 90.0)
    for angle in range(0, 91, 10):
        for intensity in (0.0, 0.3, 0.5, 0.7, 1.0):
            value = r.strength_at(PolarCoordinate(angle=float(angle), intensity=intensity).to_cartesian())
            assert 0.0 <= value <= 1.0
    near = r.strength_at(PolarCoordinate(angle=45.0, intensity=0.6).to_cartesian())
    far = r.strength_at(PolarCoordinate(angle=45.0, intensity=0.9).to_cartesian())
    assert near > far


def test_center_lies_in_range():
    r = make_range(0.2, 0.6, 10.0, 50.0)
    assert r.contains(r.center())


def test_center_of_wrapped_range():
    r = PolarCoordinateRange(start_angle=300.0, end_angle=60.0)
    assert r.center().angle == pytest.approx(0.0)


def test_polar_distance():
    a = PolarCoordinate(angle=0.0, intensity=1.0)
    b = PolarCoordinate(angle=180.0, intensity=1.0)
    assert polar_distance(a, a) == pytest.approx(0.0)
    assert polar_distance(a, b) == pytest.approx(2.0)
    assert polar_distance(a, b) == pytest.approx(polar_distance(b, a))


def test_angle_difference_takes_short_path():
    a = PolarCoordinate(angle=10.0)
    b = PolarCoordinate(angle=350.0)
    assert angle_difference(a, b) == pytest.approx(20.0)
    assert angle_difference(a, b) == angle_difference(b, a)
    assert angle_difference(a, b) <= 180.0


def test_interpolate_endpoints_and_clamp():
    a = PolarCoordinate(angle=30.0, intensity=0.2)
    b = PolarCoordinate(angle=90.0, intensity=0.8)
    assert interpolate(a, b, 0.0) == a
    assert interpolate(a, b, 1.0).angle == pytest.approx(b.angle)
    assert interpolate(a, b, 1.0).intensity == pytest.approx(b.intensity)
    assert interpolate(a, b, -3.0) == interpolate(a, b, 0.0)
    assert interpolate(a, b, 5.0) == interpolate(a, b, 1.0)


def test_interpolate_across_wrap():
    a = PolarCoordinate(angle=350.0, intensity=1.0)
    b = PolarCoordinate(angle=10.0, intensity=1.0)
    mid = interpolate(a, b, 0.5)
    assert angle_difference(mid, PolarCoordinate(angle=0.0)) == pytest.approx(0.0, abs=1e-9)
    assert math.isclose(mid.intensity, 1.0)