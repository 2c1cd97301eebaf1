"""
Card selection for the daily draw.

Scoring weighs each card against the user's mood and question; the
selector adds jitter and skips recently drawn cards.
"""

from symbolquest.selection.scoring import (
    KEYWORD_MATCH_FACTOR,
    MEANING_WORD_MATCH_FACTOR,
    ScoreBreakdown,
    explain_score,
    score_card,
)
from symbolquest.selection.selector import create_rng, select_card

__all__ = [
    "KEYWORD_MATCH_FACTOR",
    "MEANING_WORD_MATCH_FACTOR",
    "ScoreBreakdown",
    "create_rng",
    "explain_score",
    "score_card",
    "select_card",
]
