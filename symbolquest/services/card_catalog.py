"""
Major Arcana card catalog.

The catalog is static reference data built once at import time and never
mutated. Lookups are safe from any number of concurrent callers.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from symbolquest.models.card import Card
from symbolquest.models.failure import CardNotFoundError

CATALOG_SIZE = 22

# fmt: off
_RAW_CARDS: list[dict[str, Any]] = [
    {
        "name": "The Fool",
        "number": "0",
        "keywords": ["new-beginnings", "innocence", "spontaneity", "faith", "potential"],
        "archetypes": ["innocent", "seeker", "beginner"],
        "elements": ["air"],
        "astrology": "Uranus",
        "traditional_meaning": "New beginnings, innocence, spontaneity, leap of faith",
        "shadow_aspects": ["recklessness", "naivety", "foolishness", "poor judgment"],
        "light_aspects": ["faith", "optimism", "adventure", "trust", "openness"],
        "mood_weights": {
            "anxious": 0.3, "excited": 1.2, "uncertain": 1.1, "hopeful": 1.3,
            "peaceful": 0.8, "frustrated": 0.7, "curious": 1.2, "contemplative": 0.9,
        },
    },
    {
        "name": "The Magician",
        "number": "I",
        "keywords": ["manifestation", "power", "skill", "concentration", "action"],
        "archetypes": ["creator", "magician", "alchemist"],
        "elements": ["fire", "air"],
        "astrology": "Mercury",
        "traditional_meaning": "Manifestation, resourcefulness, power, inspired action",
        "shadow_aspects": ["manipulation", "poor planning", "unused talents"],
        "light_aspects": ["willpower", "desire", "creation", "manifestation"],
        "mood_weights": {
            "anxious": 0.8, "excited": 1.3, "uncertain": 0.9, "hopeful": 1.2,
            "peaceful": 0.7, "frustrated": 1.1, "curious": 1.0, "contemplative": 0.8,
        },
    },
    {
        "name": "The High Priestess",
        "number": "II",
        "keywords": ["intuition", "sacred-knowledge", "divine-feminine", "subconscious"],
        "archetypes": ["wise-woman", "oracle", "mystic"],
        "elements": ["water"],
        "astrology": "Moon",
        "traditional_meaning": (
            "Intuition, sacred knowledge, divine feminine, the subconscious mind"
        ),
        "shadow_aspects": ["secrets", "withdrawn", "silence", "repressed-feelings"],
        "light_aspects": ["intuitive", "wise", "serene", "understanding"],
        "mood_weights": {
            "anxious": 1.1, "excited": 0.6, "uncertain": 1.2, "hopeful": 0.9,
            "peaceful": 1.3, "frustrated": 0.8, "curious": 1.1, "contemplative": 1.4,
        },
    },
    {
        "name": "The Empress",
        "number": "III",
        "keywords": ["fertility", "femininity", "beauty", "nature", "abundance"],
        "archetypes": ["mother", "creator", "nurturer"],
        "elements": ["earth"],
        "astrology": "Venus",
        "traditional_meaning": "Fertility, femininity, beauty, nature, abundance",
        "shadow_aspects": ["creative-block", "dependence", "smothering", "lack"],
        "light_aspects": ["motherhood", "fertility", "sensuality", "creativity"],
        "mood_weights": {
            "anxious": 0.7, "excited": 1.1, "uncertain": 0.8, "hopeful": 1.2,
            "peaceful": 1.3, "frustrated": 0.6, "curious": 0.9, "contemplative": 1.0,
        },
    },
    {
        "name": "The Emperor",
        "number": "IV",
        "keywords": ["authority", "father-figure", "structure", "control", "leadership"],
        "archetypes": ["ruler", "father", "leader"],
        "elements": ["fire"],
        "astrology": "Aries",
        "traditional_meaning": "Authority, father-figure, structure, control",
        "shadow_aspects": ["domination", "excessive-control", "rigidity", "lack-of-compassion"],
        "light_aspects": ["leadership", "logic", "stability", "security"],
        "mood_weights": {
            "anxious": 1.0, "excited": 0.8, "uncertain": 1.1, "hopeful": 1.0,
            "peaceful": 0.7, "frustrated": 1.2, "curious": 0.8, "contemplative": 0.9,
        },
    },
    {
        "name": "The Hierophant",
        "number": "V",
        "keywords": ["spiritual-wisdom", "religious-beliefs", "conformity", "tradition"],
        "archetypes": ["teacher", "guide", "traditionalist"],
        "elements": ["earth"],
        "astrology": "Taurus",
        "traditional_meaning": (
            "Spiritual wisdom, religious beliefs, conformity, tradition, institutions"
        ),
        "shadow_aspects": ["restriction", "challenging-the-status-quo", "personal-beliefs"],
        "light_aspects": ["education", "knowledge", "beliefs", "conformity"],
        "mood_weights": {
            "anxious": 1.0, "excited": 0.7, "uncertain": 1.1, "hopeful": 0.9,
            "peaceful": 1.2, "frustrated": 0.8, "curious": 1.0, "contemplative": 1.3,
        },
    },
    {
        "name": "The Lovers",
        "number": "VI",
        "keywords": ["love", "harmony", "relationships", "values-alignment", "choices"],
        "archetypes": ["lover", "partner", "chooser"],
        "elements": ["air"],
        "astrology": "Gemini",
        "traditional_meaning": "Love, harmony, relationships, values alignment",
        "shadow_aspects": ["disharmony", "imbalance", "misalignment-of-values", "indecision"],
        "light_aspects": ["love", "unity", "relationships", "partnerships"],
        "mood_weights": {
            "anxious": 0.9, "excited": 1.2, "uncertain": 1.3, "hopeful": 1.2,
            "peaceful": 1.1, "frustrated": 0.7, "curious": 1.0, "contemplative": 1.0,
        },
    },
    {
        "name": "The Chariot",
        "number": "VII",
        "keywords": ["control", "willpower", "success", "determination", "direction"],
        "archetypes": ["warrior", "victor", "driver"],
        "elements": ["water"],
        "astrology": "Cancer",
        "traditional_meaning": "Control, willpower, success, determination, direction",
        "shadow_aspects": ["lack-of-control", "lack-of-direction", "aggression"],
        "light_aspects": ["control", "willpower", "victory", "assertion"],
        "mood_weights": {
            "anxious": 0.8, "excited": 1.1, "uncertain": 0.9, "hopeful": 1.2,
            "peaceful": 0.6, "frustrated": 1.3, "curious": 0.9, "contemplative": 0.7,
        },
    },
    {
        "name": "Strength",
        "number": "VIII",
        "keywords": ["strength", "courage", "patience", "control", "compassion"],
        "archetypes": ["healer", "saint", "tamer"],
        "elements": ["fire"],
        "astrology": "Leo",
        "traditional_meaning": "Strength, courage, patience, control, compassion",
        "shadow_aspects": ["self-doubt", "lack-of-confidence", "inadequacy"],
        "light_aspects": ["strength", "courage", "patience", "control"],
        "mood_weights": {
            "anxious": 1.2, "excited": 1.0, "uncertain": 1.1, "hopeful": 1.1,
            "peaceful": 1.2, "frustrated": 1.3, "curious": 0.9, "contemplative": 1.0,
        },
    },
    {
        "name": "The Hermit",
        "number": "IX",
        "keywords": ["soul-searching", "seeking-inner-guidance", "looking-inward"],
        "archetypes": ["sage", "seeker", "guide"],
        "elements": ["earth"],
        "astrology": "Virgo",
        "traditional_meaning": "Soul searching, seeking inner guidance, looking inward",
        "shadow_aspects": ["isolation", "loneliness", "withdrawal", "paranoia"],
        "light_aspects": ["self-reflection", "introspection", "guidance", "solitude"],
        "mood_weights": {
            "anxious": 1.1, "excited": 0.5, "uncertain": 1.3, "hopeful": 0.8,
            "peaceful": 1.2, "frustrated": 1.0, "curious": 1.2, "contemplative": 1.4,
        },
    },
    {
        "name": "Wheel of Fortune",
        "number": "X",
        "keywords": ["change", "cycles", "fate", "turning-point", "luck"],
        "archetypes": ["gambler", "opportunist", "fatalist"],
        "elements": ["fire"],
        "astrology": "Jupiter",
        "traditional_meaning": "Change, cycles, fate, turning point, good luck",
        "shadow_aspects": ["lack-of-control", "clinging-to-the-past", "bad-luck"],
        "light_aspects": ["good-luck", "karma", "life-cycles", "destiny"],
        "mood_weights": {
            "anxious": 1.0, "excited": 1.2, "uncertain": 1.3, "hopeful": 1.2,
            "peaceful": 0.8, "frustrated": 1.1, "curious": 1.1, "contemplative": 1.0,
        },
    },
    {
        "name": "Justice",
        "number": "XI",
        "keywords": ["justice", "fairness", "truth", "cause-and-effect", "law"],
        "archetypes": ["judge", "arbiter", "seeker-of-truth"],
        "elements": ["air"],
        "astrology": "Libra",
        "traditional_meaning": "Justice, fairness, truth, cause and effect, law",
        "shadow_aspects": ["unfairness", "lack-of-accountability", "dishonesty"],
        "light_aspects": ["justice", "truth", "fairness", "integrity"],
        "mood_weights": {
            "anxious": 1.0, "excited": 0.8, "uncertain": 1.1, "hopeful": 1.0,
            "peaceful": 1.1, "frustrated": 1.2, "curious": 1.0, "contemplative": 1.2,
        },
    },
    {
        "name": "The Hanged Man",
        "number": "XII",
        "keywords": ["suspension", "restriction", "letting-go", "sacrifice"],
        "archetypes": ["martyr", "sacrificer", "suspended-one"],
        "elements": ["water"],
        "astrology": "Neptune",
        "traditional_meaning": "Suspension, restriction, letting go, sacrifice",
        "shadow_aspects": ["delays", "resistance", "stalling", "needless-sacrifice"],
        "light_aspects": ["letting-go", "surrendering", "new-perspective", "sacrifice"],
        "mood_weights": {
            "anxious": 1.2, "excited": 0.4, "uncertain": 1.3, "hopeful": 0.7,
            "peaceful": 1.1, "frustrated": 1.3, "curious": 1.1, "contemplative": 1.4,
        },
    },
    {
        "name": "Death",
        "number": "XIII",
        "keywords": ["endings", "beginnings", "change", "transformation", "transition"],
        "archetypes": ["transformer", "ender", "renewer"],
        "elements": ["water"],
        "astrology": "Scorpio",
        "traditional_meaning": "Endings, beginnings, change, transformation, transition",
        "shadow_aspects": ["resistance-to-change", "repeating-negative-patterns"],
        "light_aspects": ["transformation", "renewal", "metamorphosis", "release"],
        "mood_weights": {
            "anxious": 1.3, "excited": 0.6, "uncertain": 1.2, "hopeful": 0.8,
            "peaceful": 0.7, "frustrated": 1.1, "curious": 1.0, "contemplative": 1.3,
        },
    },
    {
        "name": "Temperance",
        "number": "XIV",
        "keywords": ["balance", "moderation", "patience", "purpose", "meaning"],
        "archetypes": ["alchemist", "angel", "mixer"],
        "elements": ["fire"],
        "astrology": "Sagittarius",
        "traditional_meaning": "Balance, moderation, patience, purpose",
        "shadow_aspects": ["imbalance", "excess", "self-indulgence", "clashing"],
        "light_aspects": ["balance", "moderation", "patience", "purpose"],
        "mood_weights": {
            "anxious": 1.1, "excited": 0.8, "uncertain": 1.0, "hopeful": 1.1,
            "peaceful": 1.3, "frustrated": 1.2, "curious": 1.0, "contemplative": 1.2,
        },
    },
    {
        "name": "The Devil",
        "number": "XV",
        "keywords": ["bondage", "addiction", "sexuality", "materialism", "playfulness"],
        "archetypes": ["shadow", "tempter", "bound-one"],
        "elements": ["earth"],
        "astrology": "Capricorn",
        "traditional_meaning": "Bondage, addiction, sexuality, materialism, playfulness",
        "shadow_aspects": ["addiction", "materialism", "playfulness", "powerlessness"],
        "light_aspects": ["humor", "sexuality", "passion", "commitment"],
        "mood_weights": {
            "anxious": 1.2, "excited": 1.1, "uncertain": 1.0, "hopeful": 0.6,
            "peaceful": 0.5, "frustrated": 1.3, "curious": 1.2, "contemplative": 1.0,
        },
    },
    {
        "name": "The Tower",
        "number": "XVI",
        "keywords": ["sudden-change", "upheaval", "chaos", "revelation", "awakening"],
        "archetypes": ["destroyer", "awakener", "revolutionary"],
        "elements": ["fire"],
        "astrology": "Mars",
        "traditional_meaning": "Sudden change, upheaval, chaos, revelation, awakening",
        "shadow_aspects": ["disaster", "upheaval", "trauma", "sudden-change"],
        "light_aspects": ["revelation", "awakening", "breakthrough", "disaster"],
        "mood_weights": {
            "anxious": 1.4, "excited": 0.8, "uncertain": 1.3, "hopeful": 0.5,
            "peaceful": 0.3, "frustrated": 1.2, "curious": 1.1, "contemplative": 1.0,
        },
    },
    {
        "name": "The Star",
        "number": "XVII",
        "keywords": ["hope", "faith", "purpose", "renewal", "spirituality"],
        "archetypes": ["star", "wisher", "hope-bringer"],
        "elements": ["air"],
        "astrology": "Aquarius",
        "traditional_meaning": "Hope, faith, purpose, renewal, spirituality",
        "shadow_aspects": ["lack-of-faith", "despair", "self-trust", "disconnection"],
        "light_aspects": ["hope", "faith", "purpose", "renewal"],
        "mood_weights": {
            "anxious": 0.8, "excited": 1.1, "uncertain": 0.9, "hopeful": 1.4,
            "peaceful": 1.3, "frustrated": 0.7, "curious": 1.0, "contemplative": 1.2,
        },
    },
    {
        "name": "The Moon",
        "number": "XVIII",
        "keywords": ["illusion", "fear", "anxiety", "subconscious", "intuition"],
        "archetypes": ["dreamer", "intuitive", "shadow-walker"],
        "elements": ["water"],
        "astrology": "Pisces",
        "traditional_meaning": "Illusion, fear, anxiety, subconscious, intuition",
        "shadow_aspects": ["fear", "anxiety", "confusion", "illusion"],
        "light_aspects": ["intuition", "dreams", "subconscious", "mystery"],
        "mood_weights": {
            "anxious": 1.4, "excited": 0.6, "uncertain": 1.3, "hopeful": 0.7,
            "peaceful": 0.8, "frustrated": 1.1, "curious": 1.2, "contemplative": 1.3,
        },
    },
    {
        "name": "The Sun",
        "number": "XIX",
        "keywords": ["joy", "success", "celebration", "positivity", "vitality"],
        "archetypes": ["child", "celebrant", "optimist"],
        "elements": ["fire"],
        "astrology": "Sun",
        "traditional_meaning": "Joy, success, celebration, positivity, vitality",
        "shadow_aspects": ["inner-child", "feeling-down", "lack-of-enthusiasm"],
        "light_aspects": ["joy", "success", "vitality", "enlightenment"],
        "mood_weights": {
            "anxious": 0.6, "excited": 1.4, "uncertain": 0.7, "hopeful": 1.3,
            "peaceful": 1.2, "frustrated": 0.5, "curious": 1.1, "contemplative": 0.8,
        },
    },
    {
        "name": "Judgement",
        "number": "XX",
        "keywords": ["judgement", "rebirth", "inner-calling", "forgiveness"],
        "archetypes": ["judge", "awakener", "caller"],
        "elements": ["fire"],
        "astrology": "Pluto",
        "traditional_meaning": "Judgement, rebirth, inner calling, forgiveness",
        "shadow_aspects": ["harsh-judgement", "self-doubt", "lack-of-self-awareness"],
        "light_aspects": ["judgement", "rebirth", "inner-calling", "forgiveness"],
        "mood_weights": {
            "anxious": 1.0, "excited": 1.1, "uncertain": 1.2, "hopeful": 1.1,
            "peaceful": 1.0, "frustrated": 1.0, "curious": 1.1, "contemplative": 1.3,
        },
    },
    {
        "name": "The World",
        "number": "XXI",
        "keywords": ["completion", "accomplishment", "travel", "success", "fulfillment"],
        "archetypes": ["achiever", "completion", "wholeness"],
        "elements": ["earth"],
        "astrology": "Saturn",
        "traditional_meaning": "Completion, accomplishment, travel, success, fulfillment",
        "shadow_aspects": ["incomplete", "no-closure", "stagnation", "failed-goals"],
        "light_aspects": ["completion", "accomplishment", "success", "fulfillment"],
        "mood_weights": {
            "anxious": 0.7, "excited": 1.2, "uncertain": 0.8, "hopeful": 1.2,
            "peaceful": 1.2, "frustrated": 0.6, "curious": 1.0, "contemplative": 1.1,
        },
    },
]
# fmt: on


def _build_card(card_id: int, raw: dict[str, Any]) -> Card:
    return Card(
        id=card_id,
        name=raw["name"],
        number=raw["number"],
        keywords=tuple(raw["keywords"]),
        archetypes=tuple(raw["archetypes"]),
        elements=tuple(raw["elements"]),
        astrology=raw["astrology"],
        traditional_meaning=raw["traditional_meaning"],
        shadow_aspects=tuple(raw["shadow_aspects"]),
        light_aspects=tuple(raw["light_aspects"]),
        mood_weights=MappingProxyType(dict(raw["mood_weights"])),
    )


MAJOR_ARCANA: Mapping[int, Card] = MappingProxyType(
    {card_id: _build_card(card_id, raw) for card_id, raw in enumerate(_RAW_CARDS)}
)


def get_card(card_id: int) -> Card:
    """
    Look up a card by catalog id.

    Raises:
        CardNotFoundError: If card_id is outside 0-21
    """
    card = MAJOR_ARCANA.get(card_id)
    if card is None:
        raise CardNotFoundError(card_id)
    return card


def all_cards() -> list[Card]:
    """All cards in ascending id order."""
    return [MAJOR_ARCANA[card_id] for card_id in range(CATALOG_SIZE)]
