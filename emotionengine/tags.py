"""Hierarchical emotion tags and the registry of known emotions."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache

_SEPARATOR = "."


class EmotionType(enum.Enum):
    """The kind of emotion a tag names."""

    CORE = "Core Emotion"
    COMBINED = "Combined Emotion"
    RANGED = "Range Emotion"
    VARIANT = "Variation Emotion"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class EmotionTag:
    """A dotted hierarchical name such as ``Emotion.Core.Joy``.

    The empty name stands for "no tag" and is never valid.
    """

    name: str = ""

    def __post_init__(self) -> None:
        if self.name and any(not part.strip() for part in self.name.split(_SEPARATOR)):
            raise ValueError(f"malformed emotion tag: {self.name!r}")

    def __str__(self) -> str:
        return self.name

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def is_valid(self) -> bool:
        return bool(self.name)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.name.split(_SEPARATOR)) if self.name else ()

    def parent(self) -> EmotionTag | None:
        """Return the tag one level up, or None for a top-level or empty tag."""
        head, sep, _ = self.name.rpartition(_SEPARATOR)
        return EmotionTag(head) if sep else None

    def ancestors(self) -> Iterator[EmotionTag]:
        """Yield every tag above this one, nearest first."""
        current = self.parent()
        while current is not None:
            yield current
            current = current.parent()

    def matches(self, other: EmotionTag | str) -> bool:
        """Whether this tag equals ``other`` or lies beneath it in the hierarchy."""
        other_tag = _as_tag(other)
        if not self.is_valid or not other_tag.is_valid:
            return False
        return self.name == other_tag.name or self.name.startswith(
            other_tag.name + _SEPARATOR
        )


_TAG_NAMES: tuple[str, ...] = (
    # Core emotions
    "Emotion.Core.Joy",
    "Emotion.Core.Trust",
    "Emotion.Core.Fear",
    "Emotion.Core.Surprise",
    "Emotion.Core.Sadness",
    "Emotion.Core.Disgust",
    "Emotion.Core.Anger",
    "Emotion.Core.Anticipation",
    # High intensity emotions
    "Emotion.Range.High.Joy.Ecstasy",
    "Emotion.Range.High.Trust.Admiration",
    "Emotion.Range.High.Fear.Terror",
    "Emotion.Range.High.Surprise.Amazement",
    "Emotion.Range.High.Sadness.Grief",
    "Emotion.Range.High.Disgust.Loathing",
    "Emotion.Range.High.Anger.Rage",
    "Emotion.Range.High.Anticipation.Vigilance",
    # Low intensity emotions
    "Emotion.Range.Low.Joy.Serenity",
    "Emotion.Range.Low.Trust.Acceptance",
    "Emotion.Range.Low.Fear.Apprehension",
    "Emotion.Range.Low.Surprise.Distraction",
    "Emotion.Range.Low.Sadness.Pensiveness",
    "Emotion.Range.Low.Disgust.Boredom",
    "Emotion.Range.Low.Anger.Annoyance",
    "Emotion.Range.Low.Anticipation.Interest",
    # Combined emotions
    "Emotion.Combined.Love",
    "Emotion.Combined.Guilt",
    "Emotion.Combined.Delight",
    "Emotion.Combined.Optimism",
    "Emotion.Combined.Morbidness",
    "Emotion.Combined.Submission",
    "Emotion.Combined.Sentimentality",
    "Emotion.Combined.Hope",
    "Emotion.Combined.Dominance",
    "Emotion.Combined.Awe",
    "Emotion.Combined.Anxiety",
    "Emotion.Combined.Despair",
    "Emotion.Combined.Shame",
    "Emotion.Combined.Disapproval",
    "Emotion.Combined.Unbelief",
    "Emotion.Combined.Outrage",
    "Emotion.Combined.Remorse",
    "Emotion.Combined.Envy",
    "Emotion.Combined.Pessimism",
    "Emotion.Combined.Contempt",
    "Emotion.Combined.Cynicism",
    "Emotion.Combined.Aggressiveness",
    # Combined emotion ranges
    "Emotion.Range.High.Love.Rapture",
    "Emotion.Range.Low.Love.Affection",
    "Emotion.Range.High.Guilt.Remorse",
    "Emotion.Range.Low.Guilt.Compunction",
    "Emotion.Range.High.Delight.Glee",
    "Emotion.Range.Low.Delight.Contentment",
    "Emotion.Range.High.Optimism.Exuberance",
    "Emotion.Range.Low.Optimism.Hopefulness",
    "Emotion.Range.High.Morbidness.Ghastliness",
    "Emotion.Range.Low.Morbidness.Somberness",
    "Emotion.Range.High.Submission.Servility",
    "Emotion.Range.Low.Submission.Acquiescence",
    "Emotion.Range.High.Sentimentality.Mawkishness",
    "Emotion.Range.Low.Sentimentality.Wishfulness",
    "Emotion.Range.High.Hope.Faith",
    "Emotion.Range.Low.Hope.Optimistic",
    "Emotion.Range.High.Dominance.Powerlust",
    "Emotion.Range.Low.Dominance.Authority",
    "Emotion.Range.High.Awe.Reverence",
    "Emotion.Range.Low.Awe.Curiosity",
    "Emotion.Range.High.Anxiety.Worry",
    "Emotion.Range.Low.Anxiety.Nervousness",
    "Emotion.Range.High.Despair.Dread",
    "Emotion.Range.Low.Despair.Gloom",
    "Emotion.Range.High.Sham.SelfLoathing",
    "Emotion.Range.Low.Sham.Embarassment",
    "Emotion.Range.High.Disapproval.Comdemnation",
    "Emotion.Range.Low.Disapproval.Doubt",
    "Emotion.Range.High.Unbelief.Incredulity",
    "Emotion.Range.Low.Unbelief.Dismissal",
    "Emotion.Range.High.Outrage.Indignation",
    "Emotion.Range.Low.Outrage.Irritation",
    "Emotion.Range.High.Remorse.Repentance",
    "Emotion.Range.Low.Remorse.Regret",
    "Emotion.Range.High.Envy.Spite",
    "Emotion.Range.Low.Envy.Jealousy",
    "Emotion.Range.High.Pessimism.Resignation",
    "Emotion.Range.Low.Pessimism.Discouragement",
    "Emotion.Range.High.Contempt.Scorn",
    "Emotion.Range.Low.Contempt.Disdain",
    "Emotion.Range.High.Cynicism.Misanthropy",
    "Emotion.Range.Low.Cynicism.Skepticism",
    "Emotion.Range.High.Aggressiveness.Ruthlessness",
    "Emotion.Range.Low.Aggressiveness.Contention",
    # Joy variations, secondary (intensity 35-75)
    "Emotion.Variation.Joy.Joyful",
    "Emotion.Variation.Joy.Interested",
    "Emotion.Variation.Joy.Proud",
    "Emotion.Variation.Joy.Accepted",
    "Emotion.Variation.Joy.Powerful",
    "Emotion.Variation.Joy.Peaceful",
    "Emotion.Variation.Joy.Intimate",
    "Emotion.Variation.Joy.Optimistic",
    # Joy variations, tertiary (intensity 0-35)
    "Emotion.Variation.Joy.Joyful.Liberated",
    "Emotion.Variation.Joy.Joyful.Ecstatic",
    "Emotion.Variation.Joy.Interested.Amused",
    "Emotion.Variation.Joy.Interested.Inquisitive",
    "Emotion.Variation.Joy.Proud.Important",
    "Emotion.Variation.Joy.Proud.Confidence",
    "Emotion.Variation.Joy.Powerful.Courageous",
    "Emotion.Variation.Joy.Powerful.Provocative",
    "Emotion.Variation.Joy.Accepted.Respected",
    "Emotion.Variation.Joy.Accepted.Fulfilled",
    "Emotion.Variation.Joy.Peaceful.Hopeful",
    "Emotion.Variation.Joy.Intimate.Playful",
    "Emotion.Variation.Joy.Intimate.Sensitive",
    "Emotion.Variation.Joy.Peaceful.Loving",
    "Emotion.Variation.Joy.Optimistic.Inspired",
    "Emotion.Variation.Joy.Optimistic.Open",
    # Surprise variations, secondary
    "Emotion.Variation.Surprise.Startled",
    "Emotion.Variation.Surprise.Confused",
    "Emotion.Variation.Surprise.Amazed",
    "Emotion.Variation.Surprise.Excited",
    # Surprise variations, tertiary
    "Emotion.Variation.Surprise.Startled.Shocked",
    "Emotion.Variation.Surprise.Startled.Dismayed",
    "Emotion.Variation.Surprise.Confused.Disillusioned",
    "Emotion.Variation.Surprise.Confused.Perplexed",
    "Emotion.Variation.Surprise.Amazed.Astonished",
    "Emotion.Variation.Surprise.Amazed.Awe",
    "Emotion.Variation.Surprise.Excited.Eager",
    "Emotion.Variation.Surprise.Excited.Energetic",
    # Trust variations, secondary
    "Emotion.Variation.Trust.Secure",
    "Emotion.Variation.Trust.Assured",
    "Emotion.Variation.Trust.Confident",
    "Emotion.Variation.Trust.Safe",
    "Emotion.Variation.Trust.Supported",
    # Trust variations, tertiary
    "Emotion.Variation.Trust.Appreciated",
    "Emotion.Variation.Trust.Valued",
    "Emotion.Variation.Trust.Reliable",
    "Emotion.Variation.Trust.Faithful",
    "Emotion.Variation.Trust.Dependable",
    "Emotion.Variation.Trust.Admired",
    "Emotion.Variation.Trust.Included",
    "Emotion.Variation.Trust.Protected",
    "Emotion.Variation.Trust.Comforted",
    "Emotion.Variation.Trust.Belonging",
    # Anticipation variations, secondary
    "Emotion.Variation.Anticipation.Expectant",
    "Emotion.Variation.Anticipation.Prepared",
    "Emotion.Variation.Anticipation.Alert",
    # Anticipation variations, tertiary
    "Emotion.Variation.Anticipation.Restless",
    "Emotion.Variation.Anticipation.Impatient",
    "Emotion.Variation.Anticipation.Thrilled",
    "Emotion.Variation.Anticipation.Fascinated",
    "Emotion.Variation.Anticipation.Attentive",
    "Emotion.Variation.Anticipation.Vigilant",
    # Fear variations, secondary
    "Emotion.Variation.Fear.Scared",
    "Emotion.Variation.Fear.Anxious",
    "Emotion.Variation.Fear.Insecure",
    "Emotion.Variation.Fear.Submissive",
    "Emotion.Variation.Fear.Rejected",
    "Emotion.Variation.Fear.Inadequate",
    "Emotion.Variation.Fear.Worried",
    "Emotion.Variation.Fear.Frightened",
    # Fear variations, tertiary
    "Emotion.Variation.Fear.Frightened.Terrified",
    "Emotion.Variation.Fear.Worried.Overwhelmed",
    "Emotion.Variation.Fear.Inadequate.Inferior",
    "Emotion.Variation.Fear.Inadequate.Worthless",
    "Emotion.Variation.Fear.Inadequate.Insignificant",
    "Emotion.Variation.Fear.Rejected.Alienated",
    "Emotion.Variation.Fear.Rejected.Humiliated",
    "Emotion.Variation.Fear.Rejected.Wounded",
    "Emotion.Variation.Fear.Insecure.Embarrassed",
    "Emotion.Variation.Fear.Insecure.Ridiculed",
    "Emotion.Variation.Fear.Insecure.Disrespected",
    # Anger variations, secondary
    "Emotion.Variation.Anger.Mad",
    "Emotion.Variation.Anger.Irritated",
    "Emotion.Variation.Anger.Frustrated",
    "Emotion.Variation.Anger.Distant",
    "Emotion.Variation.Anger.Critical",
    "Emotion.Variation.Anger.Hostile",
    "Emotion.Variation.Anger.Aggressive",
    "Emotion.Variation.Anger.Provoked",
    # Anger variations, tertiary
    "Emotion.Variation.Anger.Mad.Enraged",
    "Emotion.Variation.Anger.Hostile.Hateful",
    "Emotion.Variation.Anger.Provoked.Threatened",
    # Disgust variations, secondary
    "Emotion.Variation.Disgust.Disappointed",
    "Emotion.Variation.Disgust.Awful",
    "Emotion.Variation.Disgust.Avoidance",
    "Emotion.Variation.Disgust.Hesitant",
    "Emotion.Variation.Disgust.Judgmental",
    "Emotion.Variation.Disgust.Revolted",
    # Disgust variations, tertiary
    "Emotion.Variation.Disgust.Judgmental.Skeptical",
    "Emotion.Variation.Disgust.Judgmental.Suspicious",
    "Emotion.Variation.Disgust.Avoidance.Withdrawn",
    "Emotion.Variation.Disgust.Avoidance.Aversion",
    "Emotion.Variation.Disgust.Revolted.Repelled",
    "Emotion.Variation.Disgust.Revolted.Repugnant",
    "Emotion.Variation.Disgust.Loathing.Detestable",
    "Emotion.Variation.Disgust.Loathing.Revulsion",
    # Sad variations, secondary
    "Emotion.Variation.Sad.Lonely",
    "Emotion.Variation.Sad.Vulnerable",
    "Emotion.Variation.Sad.Depressed",
    "Emotion.Variation.Sad.Hurt",
    "Emotion.Variation.Sad.Guilty",
    "Emotion.Variation.Sad.Despair",
    "Emotion.Variation.Sad.Bored",
    "Emotion.Variation.Sad.Empty",
    # Sad variations, tertiary
    "Emotion.Variation.Sad.Lonely.Isolated",
    "Emotion.Variation.Sad.Lonely.Abandoned",
    "Emotion.Variation.Sad.Vulnerable.Powerless",
    "Emotion.Variation.Sad.Vulnerable.Victimized",
    "Emotion.Variation.Sad.Guilty.Ashamed",
    "Emotion.Variation.Sad.Guilty.Remorseful",
    "Emotion.Variation.Sad.Hurt.Ignored",
    "Emotion.Variation.Sad.Hurt.Diminished",
    "Emotion.Variation.Sad.Bored.Apathetic",
    "Emotion.Variation.Sad.Bored.Indifferent",
)

_TYPE_BY_BRANCH = {
    "Core": EmotionType.CORE,
    "Combined": EmotionType.COMBINED,
    "Range": EmotionType.RANGED,
    "Variation": EmotionType.VARIANT,
}


def _as_tag(tag: EmotionTag | str) -> EmotionTag:
    return tag if isinstance(tag, EmotionTag) else EmotionTag(tag)


@cache
def _explicit_tags() -> tuple[EmotionTag, ...]:
    return tuple(EmotionTag(name) for name in _TAG_NAMES)


@cache
def _all_nodes() -> dict[str, EmotionTag]:
    """Every registered tag plus its implied parents, parents first."""
    nodes: dict[str, EmotionTag] = {}
    for tag in _explicit_tags():
        for ancestor in reversed(list(tag.ancestors())):
            nodes.setdefault(ancestor.name, ancestor)
        nodes.setdefault(tag.name, tag)
    return nodes


def registered_tags() -> tuple[EmotionTag, ...]:
    """Return every explicitly registered emotion tag in declaration order."""
    return _explicit_tags()


def is_registered(name: EmotionTag | str) -> bool:
    """Whether ``name`` is a registered tag or a parent of one."""
    key = name.name if isinstance(name, EmotionTag) else name
    return key in _all_nodes()


def request_tag(name: str) -> EmotionTag:
    """Look up a known tag by name; raise KeyError if it is unknown."""
    try:
        return _all_nodes()[name]
    except KeyError:
        raise KeyError(f"unknown emotion tag: {name!r}") from None


def tag_type(tag: EmotionTag | str) -> EmotionType:
    """Return the kind of emotion the tag names, from its branch of the hierarchy."""
    segments = _as_tag(tag).segments
    if len(segments) < 2 or segments[1] not in _TYPE_BY_BRANCH:
        raise ValueError(f"tag does not name an emotion kind: {str(tag)!r}")
    return _TYPE_BY_BRANCH[segments[1]]


def children_of(tag: EmotionTag | str) -> list[EmotionTag]:
    """Return the known tags exactly one level beneath ``tag``."""
    parent = _as_tag(tag)
    return [node for node in _all_nodes().values() if node.parent() == parent]