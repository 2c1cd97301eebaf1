"""Tests for card scoring against mood and question."""

import pytest

from symbolquest.models.card import CANONICAL_MOODS
from symbolquest.selection.scoring import (
    KEYWORD_MATCH_FACTOR,
    MEANING_WORD_MATCH_FACTOR,
    explain_score,
    score_card,
)
from symbolquest.services.card_catalog import all_cards, get_card


class TestNeutralScore:
    def test_empty_mood_and_question_score_one(self) -> None:
        for card in all_cards():
            assert score_card(card, "", "") == 1.0

    def test_unknown_mood_contributes_nothing(self) -> None:
        assert score_card(get_card(0), "bored", "") == 1.0

    def test_question_without_matches_contributes_nothing(self) -> None:
        assert score_card(get_card(0), "", "what about lunch") == 1.0


class TestMoodWeight:
    def test_fool_excited(self) -> None:
        assert score_card(get_card(0), "excited", "") == 1.2

    def test_mood_is_case_insensitive(self) -> None:
        assert score_card(get_card(0), "EXCITED", "") == 1.2

    @pytest.mark.parametrize("mood", CANONICAL_MOODS)
    def test_score_equals_mood_weight(self, mood: str) -> None:
        card = get_card(9)
        assert score_card(card, mood, "") == card.mood_weights[mood]


class TestQuestionMatches:
    def test_keyword_and_meaning_word(self) -> None:
        """'faith' is both a Fool keyword and a word of its meaning."""
        assert score_card(get_card(0), "", "I need faith") == 1.2 * 1.1

    def test_matching_is_case_insensitive(self) -> None:
        assert score_card(get_card(0), "", "I NEED FAITH") == 1.2 * 1.1

    def test_keywords_compound(self) -> None:
        score = score_card(get_card(0), "", "new-beginnings innocence")
        assert score == KEYWORD_MATCH_FACTOR * KEYWORD_MATCH_FACTOR

    def test_meaning_words_keep_punctuation(self) -> None:
        """'innocence,' in the meaning only matches when the comma follows."""
        card = get_card(0)
        assert score_card(card, "", "innocence please") == 1.2
        assert score_card(card, "", "innocence, please") == 1.2 * 1.1

    def test_short_meaning_words_ignored(self) -> None:
        """Words of three letters or fewer ('new', 'of') never match."""
        assert score_card(get_card(0), "", "new of") == 1.0

    def test_keyword_matches_substring(self) -> None:
        assert score_card(get_card(0), "", "faithful") == KEYWORD_MATCH_FACTOR * 1.1

    def test_mood_and_question_compound(self) -> None:
        assert score_card(get_card(0), "excited", "I need faith") == 1.2 * 1.2 * 1.1

    def test_scores_are_unbounded(self) -> None:
        card = get_card(8)
        score = score_card(card, "", "strength courage patience control compassion")
        assert score == pytest.approx(KEYWORD_MATCH_FACTOR**5 * MEANING_WORD_MATCH_FACTOR)
        assert score > 1.4

    def test_more_matches_never_lower_score(self) -> None:
        card = get_card(17)
        fewer = score_card(card, "hopeful", "hope")
        more = score_card(card, "hopeful", "hope and faith, renewal")
        assert more >= fewer


class TestExplainScore:
    def test_factors_in_application_order(self) -> None:
        breakdown = explain_score(get_card(0), "Excited", "I need faith")

        assert breakdown.card_id == 0
        assert breakdown.factors == (
            ("mood:excited", 1.2),
            ("keyword:faith", KEYWORD_MATCH_FACTOR),
            ("meaning:faith", MEANING_WORD_MATCH_FACTOR),
        )

    def test_score_is_product_of_factors(self) -> None:
        breakdown = explain_score(get_card(8), "frustrated", "courage, patience")

        product = 1.0
        for _, factor in breakdown.factors:
            product *= factor
        assert breakdown.score == product

    def test_no_factors_for_neutral_input(self) -> None:
        breakdown = explain_score(get_card(3), "", "")
        assert breakdown.score == 1.0
        assert breakdown.factors == ()
