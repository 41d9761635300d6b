import pytest

from emotionengine.polar import PolarCoordinate, make_range
from emotionengine.zone import EmotionZone


@pytest.fixture
def joy_zone():
    return EmotionZone(
        emotion_tag="Emotion.Core.Joy",
        coordinate_range=make_range(0.0, 1.0, 0.0, 90.0),
        description="happy",
    )


def test_contains_inside_and_outside(joy_zone):
    assert joy_zone.contains(PolarCoordinate(angle=45.0, intensity=0.5))
    assert not joy_zone.contains(PolarCoordinate(angle=225.0, intensity=0.5))
    assert not joy_zone.contains(PolarCoordinate(angle=45.0, intensity=1.5))


def test_contains_agrees_with_range(joy_zone):
    for angle in range(0, 360, 20):
        coord = PolarCoordinate(angle=float(angle), intensity=0.5)
        assert joy_zone.contains(coord) == joy_zone.coordinate_range.contains(coord)


def test_strength_at_center_and_outside(joy_zone):
    center = joy_zone.coordinate_range.center()
    assert joy_zone.strength_at(center) == pytest.approx(1.0)
    assert joy_zone.strength_at(PolarCoordinate(angle=180.0, intensity=0.5)) == 0.0


def test_strength_matches_range(joy_zone):
    coord = PolarCoordinate(angle=30.0, intensity=0.8)
    assert joy_zone.strength_at(coord) == joy_zone.coordinate_range.strength_at(coord.to_cartesian())


def test_defaults():
    zone = EmotionZone()
    assert zone.emotion_tag == ""
    assert zone.description == ""
    assert zone.coordinate_range.max_radius == 1.0