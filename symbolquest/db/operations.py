"""
Database CRUD operations.

Provides async functions for user accounts, card draws and the daily
usage ledger.
"""

from datetime import date
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from symbolquest.config import HISTORY_DEFAULT_LIMIT, LOOKBACK_WINDOW
from symbolquest.models.card import Card
from symbolquest.models.db import CardDrawDB, DailyUsageDB, UserAccountDB
from symbolquest.models.draw import CardDraw, SubscriptionTier

# --- User Account Operations ---


async def get_user_account(session: AsyncSession, user_id: str) -> UserAccountDB | None:
    """
    Get a user's account by user_id.

    Returns None if no account exists for this user.
    """
    result = await session.execute(select(UserAccountDB).where(UserAccountDB.user_id == user_id))
    return result.scalar_one_or_none()


async def get_subscription_tier(session: AsyncSession, user_id: str) -> SubscriptionTier | None:
    """
    Get a user's subscription tier.

    Returns None if no account exists for this user.
    """
    account = await get_user_account(session, user_id)
    if account is None:
        return None
    return SubscriptionTier.parse(account.subscription_tier)


async def set_subscription_tier(
    session: AsyncSession, user_id: str, tier: SubscriptionTier
) -> UserAccountDB:
    """
    Set a user's subscription tier, creating the account if needed.

    Called by the billing side when a subscription starts or ends.
    """
    account = await get_user_account(session, user_id)
    if account is None:
        account = UserAccountDB(user_id=user_id, subscription_tier=tier.value)
        session.add(account)
    else:
        account.subscription_tier = tier.value

    await session.flush()
    return account


# --- Card Draw Operations ---


async def get_draw_for_date(
    session: AsyncSession, user_id: str, draw_date: date
) -> CardDrawDB | None:
    """Get a user's draw for a calendar day, or None."""
    result = await session.execute(
        select(CardDrawDB).where(
            CardDrawDB.user_id == user_id,
            CardDrawDB.draw_date == draw_date,
        )
    )
    return result.scalar_one_or_none()


async def create_draw(
    session: AsyncSession,
    user_id: str,
    card: Card,
    draw_date: date,
    mood: str = "",
    question: str = "",
) -> CardDrawDB:
    """
    Record a new draw with the card's traditional meaning as its snapshot.

    Raises IntegrityError if the user already has a draw for draw_date.
    """
    draw = CardDrawDB(
        user_id=user_id,
        card_id=card.id,
        card_name=card.name,
        draw_date=draw_date,
        interpretation_basic=card.traditional_meaning,
        mood=mood,
        question=question,
    )
    session.add(draw)
    await session.flush()
    return draw


async def get_recent_card_ids(
    session: AsyncSession, user_id: str, limit: int = LOOKBACK_WINDOW
) -> list[int]:
    """Card ids of the user's most recent draws, newest first."""
    result = await session.execute(
        select(CardDrawDB.card_id)
        .where(CardDrawDB.user_id == user_id)
        .order_by(CardDrawDB.created_at.desc(), CardDrawDB.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_draw_history(
    session: AsyncSession, user_id: str, limit: int | None = HISTORY_DEFAULT_LIMIT
) -> list[CardDrawDB]:
    """
    Get a user's draws, newest first.

    A missing or non-positive limit falls back to the default page size.
    """
    if limit is None or limit <= 0:
        limit = HISTORY_DEFAULT_LIMIT

    result = await session.execute(
        select(CardDrawDB)
        .where(CardDrawDB.user_id == user_id)
        .order_by(CardDrawDB.created_at.desc(), CardDrawDB.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def save_enhanced_interpretation(
    session: AsyncSession, user_id: str, draw_date: date, interpretation: str
) -> bool:
    """
    Attach an enhanced interpretation to a user's draw.

    Returns True if a draw was updated, False if none exists for that day.
    """
    result = await session.execute(
        update(CardDrawDB)
        .where(
            CardDrawDB.user_id == user_id,
            CardDrawDB.draw_date == draw_date,
        )
        .values(interpretation_enhanced=interpretation)
    )
    # rowcount is available on UPDATE results; type stubs incomplete for async
    return int(result.rowcount) > 0  # type: ignore[attr-defined]


def draw_to_model(db_draw: CardDrawDB) -> CardDraw:
    """Convert a database draw to a domain model."""
    return CardDraw(
        id=db_draw.id,
        user_id=db_draw.user_id,
        card_id=db_draw.card_id,
        card_name=db_draw.card_name,
        draw_date=db_draw.draw_date,
        interpretation_basic=db_draw.interpretation_basic,
        interpretation_enhanced=db_draw.interpretation_enhanced,
        mood=db_draw.mood or "",
        question=db_draw.question or "",
        created_at=db_draw.created_at,
    )


# --- Usage Ledger Operations ---


def _dialect_insert(session: AsyncSession) -> Any:
    """Dialect-specific INSERT construct supporting ON CONFLICT."""
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    msg = f"Usage ledger upsert not supported for dialect '{dialect}'"
    raise NotImplementedError(msg)


async def get_usage_count(session: AsyncSession, user_id: str, usage_date: date) -> int:
    """Draws recorded for a user on a day; 0 when no counter exists."""
    result = await session.execute(
        select(DailyUsageDB.draws_count).where(
            DailyUsageDB.user_id == user_id,
            DailyUsageDB.usage_date == usage_date,
        )
    )
    count = result.scalar_one_or_none()
    return count or 0


async def increment_usage(session: AsyncSession, user_id: str, usage_date: date) -> int:
    """
    Create-or-increment the usage counter in a single statement.

    Returns the counter value after the increment.
    """
    insert = _dialect_insert(session)
    stmt = (
        insert(DailyUsageDB)
        .values(user_id=user_id, usage_date=usage_date, draws_count=1)
        .on_conflict_do_update(
            index_elements=["user_id", "usage_date"],
            set_={"draws_count": DailyUsageDB.draws_count + 1},
        )
        .returning(DailyUsageDB.draws_count)
    )
    result = await session.execute(stmt)
    return int(result.scalar_one())
