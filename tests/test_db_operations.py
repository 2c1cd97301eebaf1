"""Tests for database CRUD operations."""

from datetime import UTC, date, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from symbolquest.db.operations import (
    create_draw,
    draw_to_model,
    get_draw_for_date,
    get_draw_history,
    get_recent_card_ids,
    get_subscription_tier,
    get_usage_count,
    get_user_account,
    increment_usage,
    save_enhanced_interpretation,
    set_subscription_tier,
)
from symbolquest.models.db import CardDrawDB, UserAccountDB
from symbolquest.models.draw import SubscriptionTier
from symbolquest.services.card_catalog import get_card

TODAY = date(2026, 10, 16)


async def add_draw(
    session: AsyncSession,
    user_id: str,
    card_id: int,
    draw_date: date,
    created_at: datetime,
) -> CardDrawDB:
    """Insert a draw with an explicit creation time."""
    card = get_card(card_id)
    draw = CardDrawDB(
        user_id=user_id,
        card_id=card.id,
        card_name=card.name,
        draw_date=draw_date,
        interpretation_basic=card.traditional_meaning,
        created_at=created_at,
    )
    session.add(draw)
    await session.flush()
    return draw


class TestUserAccountOperations:
    async def test_missing_account(self, session: AsyncSession) -> None:
        """Unknown users have no account and no tier."""
        assert await get_user_account(session, "nobody") is None
        assert await get_subscription_tier(session, "nobody") is None

    async def test_set_subscription_tier_creates_account(self, session: AsyncSession) -> None:
        """Setting a tier creates the account if needed."""
        account = await set_subscription_tier(session, "user-1", SubscriptionTier.PREMIUM)
        await session.commit()

        assert account.id is not None
        assert await get_subscription_tier(session, "user-1") == SubscriptionTier.PREMIUM

    async def test_set_subscription_tier_updates_account(self, session: AsyncSession) -> None:
        """Setting a tier again updates the existing account."""
        await set_subscription_tier(session, "user-1", SubscriptionTier.PREMIUM)
        await set_subscription_tier(session, "user-1", SubscriptionTier.FREE)
        await session.commit()

        assert await get_subscription_tier(session, "user-1") == SubscriptionTier.FREE

    async def test_unknown_stored_tier_reads_as_free(self, session: AsyncSession) -> None:
        """Tier strings the engine does not know are treated as free."""
        session.add(UserAccountDB(user_id="user-1", subscription_tier="gold"))
        await session.commit()

        assert await get_subscription_tier(session, "user-1") == SubscriptionTier.FREE

    async def test_stored_tier_must_match_exactly(self, session: AsyncSession) -> None:
        """Only the exact string "premium" grants the premium tier."""
        session.add(UserAccountDB(user_id="user-1", subscription_tier="PREMIUM"))
        await session.commit()

        assert await get_subscription_tier(session, "user-1") == SubscriptionTier.FREE


class TestCardDrawOperations:
    async def test_create_draw_snapshots_meaning(self, session: AsyncSession) -> None:
        """A new draw stores the card name and traditional meaning."""
        draw = await create_draw(
            session, "user-1", get_card(17), TODAY, mood="hopeful", question="What next?"
        )
        await session.commit()

        assert draw.id is not None
        assert draw.card_id == 17
        assert draw.card_name == "The Star"
        assert draw.interpretation_basic == get_card(17).traditional_meaning
        assert draw.interpretation_enhanced is None
        assert draw.mood == "hopeful"
        assert draw.question == "What next?"
        assert draw.created_at is not None

    async def test_get_draw_for_date(self, session: AsyncSession) -> None:
        await create_draw(session, "user-1", get_card(3), TODAY)
        await session.commit()

        found = await get_draw_for_date(session, "user-1", TODAY)
        assert found is not None
        assert found.card_id == 3

        assert await get_draw_for_date(session, "user-1", TODAY - timedelta(days=1)) is None
        assert await get_draw_for_date(session, "user-2", TODAY) is None

    async def test_second_draw_same_day_violates_constraint(self, session: AsyncSession) -> None:
        """The (user, day) unique constraint rejects a second row."""
        await create_draw(session, "user-1", get_card(3), TODAY)
        await session.commit()

        with pytest.raises(IntegrityError):
            await create_draw(session, "user-1", get_card(4), TODAY)
        await session.rollback()

        found = await get_draw_for_date(session, "user-1", TODAY)
        assert found is not None
        assert found.card_id == 3

    async def test_same_day_different_users(self, session: AsyncSession) -> None:
        await create_draw(session, "user-1", get_card(3), TODAY)
        await create_draw(session, "user-2", get_card(3), TODAY)
        await session.commit()

        assert await get_draw_for_date(session, "user-2", TODAY) is not None

    async def test_draw_to_model(self, session: AsyncSession) -> None:
        db_draw = await create_draw(session, "user-1", get_card(0), TODAY)
        await session.commit()

        draw = draw_to_model(db_draw)

        assert draw.id == db_draw.id
        assert draw.card_name == "The Fool"
        assert draw.draw_date == TODAY
        assert draw.mood == ""
        assert draw.question == ""


class TestRecentCardIds:
    async def test_newest_first_limited(self, session: AsyncSession) -> None:
        """Only the most recent draws are returned, newest first."""
        base = datetime(2026, 10, 1, 8, 0, tzinfo=UTC)
        for offset, card_id in enumerate([10, 11, 12, 13, 14, 15, 16]):
            await add_draw(
                session,
                "user-1",
                card_id,
                TODAY - timedelta(days=7 - offset),
                base + timedelta(days=offset),
            )
        await session.commit()

        assert await get_recent_card_ids(session, "user-1", 5) == [16, 15, 14, 13, 12]

    async def test_no_history(self, session: AsyncSession) -> None:
        assert await get_recent_card_ids(session, "user-1") == []

    async def test_other_users_ignored(self, session: AsyncSession) -> None:
        await create_draw(session, "user-2", get_card(5), TODAY)
        await session.commit()

        assert await get_recent_card_ids(session, "user-1") == []


@pytest.fixture
async def history(session: AsyncSession) -> None:
    """Twenty-five daily draws for user-1, 2026-09-01 through 2026-09-25."""
    base = datetime(2026, 9, 1, 8, 0, tzinfo=UTC)
    for offset in range(25):
        await add_draw(
            session,
            "user-1",
            offset % 22,
            date(2026, 9, 1) + timedelta(days=offset),
            base + timedelta(days=offset),
        )
    await session.commit()


class TestDrawHistory:
    async def test_newest_first(self, session: AsyncSession, history: None) -> None:
        draws = await get_draw_history(session, "user-1", 3)

        assert [d.draw_date for d in draws] == [
            date(2026, 9, 25),
            date(2026, 9, 24),
            date(2026, 9, 23),
        ]

    @pytest.mark.parametrize("limit", [None, 0, -5])
    async def test_non_positive_limit_uses_default(
        self, session: AsyncSession, history: None, limit: int | None
    ) -> None:
        """Missing, zero and negative limits all return 20 draws."""
        draws = await get_draw_history(session, "user-1", limit)
        assert len(draws) == 20

    async def test_limit_larger_than_history(self, session: AsyncSession, history: None) -> None:
        draws = await get_draw_history(session, "user-1", 100)
        assert len(draws) == 25

    async def test_empty_history(self, session: AsyncSession) -> None:
        assert await get_draw_history(session, "nobody") == []


class TestEnhancedInterpretation:
    async def test_save_enhanced_interpretation(self, session: AsyncSession) -> None:
        await create_draw(session, "user-1", get_card(9), TODAY)
        await session.commit()

        saved = await save_enhanced_interpretation(session, "user-1", TODAY, "Look within.")
        await session.commit()

        assert saved is True
        draw = await get_draw_for_date(session, "user-1", TODAY)
        assert draw is not None
        assert draw.interpretation_enhanced == "Look within."
        assert draw.interpretation_basic == get_card(9).traditional_meaning

    async def test_save_without_draw(self, session: AsyncSession) -> None:
        """Saving onto a missing draw reports False."""
        assert await save_enhanced_interpretation(session, "user-1", TODAY, "text") is False

    async def test_save_replaces_previous(self, session: AsyncSession) -> None:
        await create_draw(session, "user-1", get_card(9), TODAY)
        await save_enhanced_interpretation(session, "user-1", TODAY, "first")
        await save_enhanced_interpretation(session, "user-1", TODAY, "second")
        await session.commit()

        draw = await get_draw_for_date(session, "user-1", TODAY)
        assert draw is not None
        assert draw.interpretation_enhanced == "second"


class TestUsageLedger:
    async def test_missing_counter_is_zero(self, session: AsyncSession) -> None:
        assert await get_usage_count(session, "user-1", TODAY) == 0

    async def test_increment_creates_counter(self, session: AsyncSession) -> None:
        assert await increment_usage(session, "user-1", TODAY) == 1
        await session.commit()

        assert await get_usage_count(session, "user-1", TODAY) == 1

    async def test_increment_accumulates(self, session: AsyncSession) -> None:
        """Repeated increments update the same row."""
        for expected in range(1, 4):
            assert await increment_usage(session, "user-1", TODAY) == expected
        await session.commit()

        assert await get_usage_count(session, "user-1", TODAY) == 3

    async def test_counters_are_per_day(self, session: AsyncSession) -> None:
        await increment_usage(session, "user-1", TODAY)
        await increment_usage(session, "user-1", TODAY + timedelta(days=1))
        await session.commit()

        assert await get_usage_count(session, "user-1", TODAY) == 1
        assert await get_usage_count(session, "user-1", TODAY + timedelta(days=1)) == 1

    async def test_counters_are_per_user(self, session: AsyncSession) -> None:
        await increment_usage(session, "user-1", TODAY)
        await session.commit()

        assert await get_usage_count(session, "user-2", TODAY) == 0
