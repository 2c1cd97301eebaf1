from collections.abc import Mapping
from dataclasses import dataclass

# Mood keys every card carries a weight for
CANONICAL_MOODS: tuple[str, ...] = (
    "anxious",
    "excited",
    "uncertain",
    "hopeful",
    "peaceful",
    "frustrated",
    "curious",
    "contemplative",
)


@dataclass(frozen=True, slots=True)
class Card:
    """
    A Major Arcana card.

    Attributes:
        id: Catalog key, 0 (The Fool) through 21 (The World)
        name: Card name, e.g. "The Fool"
        number: Roman numeral as printed on the card ("0" for The Fool)
        keywords: Hyphenated keywords matched against user questions
        archetypes: Archetypal figures the card embodies
        elements: Elemental affinities
        astrology: Astrological association
        traditional_meaning: Short meaning text, snapshotted into each draw
        shadow_aspects: Challenging expressions of the card
        light_aspects: Positive expressions of the card
        mood_weights: Multiplier per canonical mood, informally in [0.3, 1.4]
    """

    id: int
    name: str
    number: str
    keywords: tuple[str, ...]
    archetypes: tuple[str, ...]
    elements: tuple[str, ...]
    astrology: str
    traditional_meaning: str
    shadow_aspects: tuple[str, ...]
    light_aspects: tuple[str, ...]
    mood_weights: Mapping[str, float]
