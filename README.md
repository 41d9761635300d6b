# emotionengine

A small library with no dependencies for placing emotions in a
valence-arousal plane. It has three modules:

- `emotionengine.polar` handles polar coordinates and ranges. A position is
  an angle in degrees plus an intensity. A `PolarCoordinateRange` is an
  annular sector. It can tell whether a point lies inside it and how central
  that point is.
- `emotionengine.zone` provides `EmotionZone`, which pairs an emotion tag
  name with a coordinate range.
- `emotionengine.tags` holds a fixed registry of dot-separated emotion tags,
  such as `Emotion.Core.Joy` or `Emotion.Range.High.Joy.Ecstasy`. Each tag is
  classified by `EmotionType`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Polar coordinates

```python
from emotionengine.polar import (
    PolarCoordinate,
    make_polar_coordinate,
    cartesian_to_polar,
    polar_distance,
    angle_difference,
    interpolate,
    normalize_angle,
)

normalize_angle(-90.0)              # 270.0

joy = make_polar_coordinate(30.0, 0.8)
x, y = joy.to_cartesian()

back = cartesian_to_polar((x, y))   # angle ~30, intensity ~0.8

a = make_polar_coordinate(350.0, 1.0)
b = make_polar_coordinate(10.0, 1.0)
angle_difference(a, b)              # 20.0, taking the shorter way round the circle
interpolate(a, b, 0.5)              # angle 0.0, crossing the 0/360 boundary
polar_distance(a, b)                # Euclidean distance in the plane
```

`PolarCoordinate` is a frozen dataclass with the fields `angle` (default
`0.0`) and `intensity` (default `1.0`). `make_polar_coordinate` normalizes
the angle into `[0, 360)` and clamps a negative intensity to zero.
`cartesian_to_polar` maps the origin to angle `0.0`. `interpolate` clamps
`alpha` to `[0, 1]`.

## Ranges

```python
from emotionengine.polar import make_range, make_polar_coordinate

sector = make_range(0.2, 0.8, 0.0, 90.0)   # radii clamped to [0, 1], angles normalized

sector.contains(make_polar_coordinate(45.0, 0.5))   # True
sector.contains_cartesian((0.3, 0.3))               # True
sector.strength_at((0.3, 0.3))   # 1.0 at the centre of the sector, lower toward its edges
sector.center()                  # PolarCoordinate(angle=45.0, intensity=0.5)
```

`PolarCoordinateRange` is a frozen dataclass with the fields `min_radius`,
`max_radius`, `start_angle` and `end_angle`. Its defaults cover the full
unit disc. When the start angle is larger than the end angle, the two are
swapped for the containment tests. `strength_at` returns `0.0` for a point
outside the range.

## Emotion zones

```python
from emotionengine.zone import EmotionZone
from emotionengine.polar import make_range, make_polar_coordinate

zone = EmotionZone(
    emotion_tag="Emotion.Core.Joy",
    coordinate_range=make_range(0.0, 1.0, 0.0, 45.0),
    description="Pleasant, energised",
)

point = make_polar_coordinate(20.0, 0.6)
zone.contains(point)       # True
zone.strength_at(point)    # a value between 0.0 and 1.0
```

## Emotion tags

```python
from emotionengine.tags import (
    EmotionTag,
    EmotionType,
    registered_tags,
    request_tag,
    is_registered,
    tag_type,
    children_of,
)

joy = request_tag("Emotion.Core.Joy")
tag_type(joy)                          # EmotionType.CORE
joy.parent()                           # EmotionTag(name='Emotion.Core')

ecstasy = request_tag("Emotion.Range.High.Joy.Ecstasy")
tag_type(ecstasy)                      # EmotionType.RANGED
ecstasy.matches("Emotion.Range.High")  # True: a tag matches itself and its ancestors

is_registered("Emotion.Core.Boredom")  # False
children_of("Emotion.Variation.Joy.Joyful")   # the Liberated and Ecstatic tags
```

- `registered_tags()` returns every registered tag in registration order.
- `is_registered`, `request_tag` and `children_of` also recognise the parent
  tags implied by the registered ones, such as `Emotion.Core`.
- `request_tag` raises `KeyError` for an unknown name.
- `tag_type` classifies a tag by its second segment (`Core`, `Combined`,
  `Range` or `Variation`). It raises `ValueError` when the tag has no such
  segment.
- `EmotionTag("")` is the empty, invalid tag. A name with an empty segment,
  such as `"Emotion..Joy"`, raises `ValueError`.

## What this package does not do

The package only provides geometry and naming. It does not:

- keep an emotional state over time, so there is no decay, blending or
  combining of active emotions;
- hold emotion definitions with coordinates or opposites;
- load or save emotion data from files;
- offer a command-line tool.