"""Valence-arousal emotion model: polar coordinate ranges, emotion zones and emotion tags."""

__version__ = "0.1.0"
__all__ = ["polar", "zone", "tags"]