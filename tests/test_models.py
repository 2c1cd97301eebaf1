from datetime import date

import pytest

from symbolquest.models.draw import CardDraw, DrawResult, DrawStatus, SubscriptionTier


class TestSubscriptionTier:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("free", SubscriptionTier.FREE),
            ("premium", SubscriptionTier.PREMIUM),
            (" Premium ", SubscriptionTier.FREE),
            ("PREMIUM", SubscriptionTier.FREE),
            ("premium ", SubscriptionTier.FREE),
            ("gold", SubscriptionTier.FREE),
            ("", SubscriptionTier.FREE),
            (None, SubscriptionTier.FREE),
        ],
    )
    def test_parse(self, value: str | None, expected: SubscriptionTier) -> None:
        assert SubscriptionTier.parse(value) == expected


class TestDrawResult:
    def make_draw(self) -> CardDraw:
        return CardDraw(
            id=1,
            user_id="user-1",
            card_id=0,
            card_name="The Fool",
            draw_date=date(2026, 10, 16),
            interpretation_basic="New beginnings, innocence, spontaneity, leap of faith",
        )

    def test_created(self) -> None:
        result = DrawResult(status=DrawStatus.CREATED, draw=self.make_draw())
        assert result.created is True

    def test_already_completed(self) -> None:
        result = DrawResult(status=DrawStatus.ALREADY_COMPLETED, draw=self.make_draw())
        assert result.created is False

    def test_draw_defaults(self) -> None:
        draw = self.make_draw()
        assert draw.interpretation_enhanced is None
        assert draw.mood == ""
        assert draw.question == ""
        assert draw.created_at is None
