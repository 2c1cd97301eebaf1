"""
Daily card selector.

Picks the best-scoring card after applying per-candidate jitter, skipping
cards the user drew recently.

INVARIANTS:
- Candidates are visited in ascending id order
- Excluded ids are never returned unless every id is excluded
- Selection always yields a valid id in 0-21
"""

import logging
import random
from collections.abc import Collection

from symbolquest.config import JITTER_MAX, JITTER_MIN
from symbolquest.selection.scoring import score_card
from symbolquest.services.card_catalog import CATALOG_SIZE, MAJOR_ARCANA

logger = logging.getLogger(__name__)


def create_rng(seed: int | None = None) -> random.Random:
    """
    Create a randomness provider for the selector.

    Without a seed the generator is seeded from OS entropy, so separate
    instances never share a sequence.
    """
    return random.Random(seed)


def select_card(
    excluded_ids: Collection[int],
    mood: str,
    question: str,
    rng: random.Random,
) -> int:
    """
    Select a card id for the user's mood and question.

    Each non-excluded candidate gets `score * uniform(0.8, 1.2)`. The highest
    jittered score wins; the first candidate seen keeps a tie.

    If no candidate scores above zero (every id excluded), falls back to a
    uniform pick over the whole catalog, ignoring exclusions.

    Args:
        excluded_ids: Card ids to skip (the user's recent draws)
        mood: User mood, may be empty
        question: User question, may be empty
        rng: Randomness provider for jitter and fallback

    Returns:
        Selected card id in 0-21
    """
    excluded = set(excluded_ids)
    best_card_id = 0
    best_score = 0.0

    for card_id in range(CATALOG_SIZE):
        if card_id in excluded:
            continue

        jitter = rng.uniform(JITTER_MIN, JITTER_MAX)
        score = score_card(MAJOR_ARCANA[card_id], mood, question) * jitter

        if score > best_score:
            best_score = score
            best_card_id = card_id

    if best_score == 0.0:
        fallback_id = rng.randrange(CATALOG_SIZE)
        logger.info(
            "SELECTION_FALLBACK",
            extra={"excluded_count": len(excluded), "card_id": fallback_id},
        )
        return fallback_id

    return best_card_id
