"""Polar coordinates and polar ranges in the valence-arousal plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]

_SMALL_NUMBER = 1e-8


def normalize_angle(angle: float) -> float:
    """Return ``angle`` folded into the range [0, 360)."""
    result = math.fmod(angle, 360.0)
    if result < 0.0:
        result += 360.0
    return result


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _lerp(a: float, b: float, alpha: float) -> float:
    return a + (b - a) * alpha


def _angle_of(point: Point) -> float:
    return normalize_angle(math.degrees(math.atan2(point[1], point[0])))


@dataclass(frozen=True)
class PolarCoordinate:
    """A point given by an angle in degrees and an intensity (radius)."""

    angle: float = 0.0
    intensity: float = 1.0

    def to_cartesian(self) -> Point:
        """Return the point as an ``(x, y)`` pair."""
        radians = math.radians(self.angle)
        return (math.cos(radians) * self.intensity, math.sin(radians) * self.intensity)


@dataclass(frozen=True)
class PolarCoordinateRange:
    """An annular sector bounded by two radii and two angles in degrees."""

    min_radius: float = 0.0
    max_radius: float = 1.0
    start_angle: float = 0.0
    end_angle: float = 360.0

    def _angle_bounds(self) -> tuple[float, float]:
        start = normalize_angle(self.start_angle)
        end = normalize_angle(self.end_angle)
        return (start, end) if start <= end else (end, start)

    def _radius_inside(self, radius: float) -> bool:
        return self.min_radius <= radius <= self.max_radius

    def contains_cartesian(self, point: Point) -> bool:
        """Whether the cartesian ``point`` lies inside the range."""
        if not self._radius_inside(math.hypot(*point)):
            return False
        start, end = self._angle_bounds()
        return start <= _angle_of(point) <= end

    def contains(self, coordinate: PolarCoordinate) -> bool:
        """Whether the polar ``coordinate`` lies inside the range."""
        if not self._radius_inside(coordinate.intensity):
            return False
        start, end = self._angle_bounds()
        return start <= normalize_angle(coordinate.angle) <= end

    def strength_at(self, point: Point) -> float:
        """Return 1.0 at the centre of the range, falling to 0.0 at its edge and outside."""
        if not self.contains_cartesian(point):
            return 0.0

        radius = math.hypot(*point)
        start, end = self._angle_bounds()
        angle = _angle_of(point)

        radius_range = self.max_radius - self.min_radius
        angle_range = end - start
        radius_center = (self.min_radius + self.max_radius) * 0.5
        angle_center = (start + end) * 0.5

        if radius_range > 0.0:
            radius_dist = _clamp(abs(radius - radius_center) / (radius_range * 0.5), 0.0, 1.0)
        else:
            radius_dist = 0.0

        angle_diff = abs(angle - angle_center)
        if angle_diff > 180.0:
            angle_diff = 360.0 - angle_diff
        if angle_range > 0.0:
            angle_dist = _clamp(angle_diff / (angle_range * 0.5), 0.0, 1.0)
        else:
            angle_dist = 0.0

        return 1.0 - (radius_dist + angle_dist) * 0.5

    def center(self) -> PolarCoordinate:
        """Return the centre point of the range, handling ranges that wrap past 360."""
        intensity = (self.min_radius + self.max_radius) * 0.5
        if self.start_angle <= self.end_angle:
            angle = (self.start_angle + self.end_angle) * 0.5
        else:
            angle = normalize_angle((self.start_angle + self.end_angle + 360.0) * 0.5)
        return PolarCoordinate(angle=angle, intensity=intensity)


def make_polar_coordinate(angle: float, intensity: float = 1.0) -> PolarCoordinate:
    """Build a coordinate with a normalized angle and a non-negative intensity."""
    return PolarCoordinate(angle=normalize_angle(angle), intensity=max(0.0, intensity))


def cartesian_to_polar(point: Point) -> PolarCoordinate:
    """Convert an ``(x, y)`` pair to a polar coordinate; the origin maps to angle 0."""
    intensity = math.hypot(*point)
    angle = _angle_of(point) if intensity > _SMALL_NUMBER else 0.0
    return PolarCoordinate(angle=angle, intensity=intensity)


def make_range(
    min_radius: float, max_radius: float, start_angle: float, end_angle: float
) -> PolarCoordinateRange:
    """Build a range with radii clamped to [0, 1] and normalized angles."""
    low = _clamp(min_radius, 0.0, 1.0)
    high = _clamp(max_radius, low, 1.0)
    return PolarCoordinateRange(
        min_radius=low,
        max_radius=high,
        start_angle=normalize_angle(start_angle),
        end_angle=normalize_angle(end_angle),
    )


def polar_distance(a: PolarCoordinate, b: PolarCoordinate) -> float:
    """Euclidean distance between two polar coordinates."""
    return math.dist(a.to_cartesian(), b.to_cartesian())


def angle_difference(a: PolarCoordinate, b: PolarCoordinate) -> float:
    """Shortest angular distance in degrees between two coordinates."""
    diff = abs(a.angle - b.angle)
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def interpolate(a: PolarCoordinate, b: PolarCoordinate, alpha: float) -> PolarCoordinate:
    """Interpolate intensity linearly and angle along the shorter arc."""
    alpha = _clamp(alpha, 0.0, 1.0)
    intensity = _lerp(a.intensity, b.intensity, alpha)
    angle_a, angle_b = a.angle, b.angle
    if abs(angle_a - angle_b) > 180.0:
        if angle_a < angle_b:
            angle_a += 360.0
        else:
            angle_b += 360.0
    return PolarCoordinate(
        angle=normalize_angle(_lerp(angle_a, angle_b, alpha)), intensity=intensity
    )