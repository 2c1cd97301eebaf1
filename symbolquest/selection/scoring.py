"""
Card scoring for the daily draw.

A card starts at 1.0 and is multiplied by:
- its weight for the user's mood (case-insensitive, canonical moods only)
- 1.2 for every card keyword found in the question
- 1.1 for every traditional-meaning word longer than 3 characters found
  in the question

Matches compound multiplicatively. Scores are neither normalized nor
bounded; changing that would silently shift the selection distribution.
"""

from dataclasses import dataclass, field

from symbolquest.models.card import Card

KEYWORD_MATCH_FACTOR = 1.2
MEANING_WORD_MATCH_FACTOR = 1.1
MIN_MEANING_WORD_LENGTH = 4


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """
    A card's score with the factors that produced it.

    Factors are (reason, multiplier) pairs in application order.
    """

    card_id: int
    score: float
    factors: tuple[tuple[str, float], ...] = field(default_factory=tuple)


def explain_score(card: Card, mood: str, question: str) -> ScoreBreakdown:
    """
    Score a card against the user's mood and question, keeping the factors.

    Args:
        card: Card to score
        mood: Mood string; empty or unrecognized moods contribute nothing
        question: Free-text question; empty contributes nothing

    Returns:
        ScoreBreakdown whose score equals the product of its factors
    """
    score = 1.0
    factors: list[tuple[str, float]] = []

    weight = card.mood_weights.get(mood.lower()) if mood else None
    if weight is not None:
        score *= weight
        factors.append((f"mood:{mood.lower()}", weight))

    if question:
        question_lower = question.lower()

        for keyword in card.keywords:
            if keyword.lower() in question_lower:
                score *= KEYWORD_MATCH_FACTOR
                factors.append((f"keyword:{keyword}", KEYWORD_MATCH_FACTOR))

        # Punctuation stays attached: "faith," only matches "faith,"
        for word in card.traditional_meaning.lower().split():
            if len(word) >= MIN_MEANING_WORD_LENGTH and word in question_lower:
                score *= MEANING_WORD_MATCH_FACTOR
                factors.append((f"meaning:{word}", MEANING_WORD_MATCH_FACTOR))

    return ScoreBreakdown(card_id=card.id, score=score, factors=tuple(factors))


def score_card(card: Card, mood: str, question: str) -> float:
    """Desirability of a card for the given mood and question."""
    return explain_score(card, mood, question).score
