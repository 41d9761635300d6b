"""Named regions of the valence-arousal plane."""

from __future__ import annotations

from dataclasses import dataclass, field

from emotionengine.polar import PolarCoordinate, PolarCoordinateRange


@dataclass
class EmotionZone:
    """A region of the valence-arousal plane identified by an emotion tag."""

    emotion_tag: str = ""
    coordinate_range: PolarCoordinateRange = field(default_factory=PolarCoordinateRange)
    description: str = ""

    def contains(self, coordinate: PolarCoordinate) -> bool:
        """Whether ``coordinate`` lies inside this zone."""
        return self.coordinate_range.contains_cartesian(coordinate.to_cartesian())

    def strength_at(self, coordinate: PolarCoordinate) -> float:
        """How central ``coordinate`` is in this zone, from 0.0 to 1.0."""
        return self.coordinate_range.strength_at(coordinate.to_cartesian())