"""
Daily Draw Orchestrator.

Issues one card draw per user per calendar day (UTC).

State per (user, day): NoDraw -> Drawn. Drawn is terminal for the day.

INVARIANTS:
- At most one draw per (user, day); the storage unique constraint decides
- A repeated draw request returns the existing draw, never an error
- Free tier: one draw per day, checked against the usage ledger
- Premium tier never consults the ledger for gating
- The draw insert and the ledger increment share one transaction
"""

import logging
import random
from collections.abc import Callable
from datetime import UTC, date, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from symbolquest.config import FREE_DAILY_DRAW_LIMIT, LOOKBACK_WINDOW
from symbolquest.db.operations import (
    create_draw,
    draw_to_model,
    get_draw_for_date,
    get_draw_history,
    get_recent_card_ids,
    get_subscription_tier,
    get_usage_count,
    increment_usage,
    save_enhanced_interpretation,
)
from symbolquest.models.draw import (
    CardDraw,
    DrawResult,
    DrawStatus,
    SubscriptionTier,
    TodayCard,
    TodayStatus,
)
from symbolquest.models.failure import DailyLimitReachedError, UserNotFoundError
from symbolquest.selection.selector import create_rng, select_card
from symbolquest.services.card_catalog import get_card

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(UTC).date()


class DailyDrawService:
    """
    Performs and reports daily draws for one database session.

    Args:
        session: Request-scoped database session
        rng: Randomness provider for selection; entropy-seeded if omitted
        clock: Returns the current draw date; UTC today if omitted
    """

    def __init__(
        self,
        session: AsyncSession,
        rng: random.Random | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.session = session
        self.rng = rng if rng is not None else create_rng()
        self.clock = clock if clock is not None else utc_today

    async def perform_daily_draw(
        self, user_id: str, mood: str = "", question: str = ""
    ) -> DrawResult:
        """
        Perform today's draw for a user.

        Returns:
            DrawResult with status CREATED and the new draw, or
            ALREADY_COMPLETED and the draw that already exists for today

        Raises:
            UserNotFoundError: If the user has no account
            DailyLimitReachedError: If a free-tier user has no draws left today
        """
        today = self.clock()

        existing = await get_draw_for_date(self.session, user_id, today)
        if existing is not None:
            logger.info(
                "DAILY_DRAW_ALREADY_COMPLETED",
                extra={"user_id": user_id, "draw_date": today.isoformat()},
            )
            return DrawResult(status=DrawStatus.ALREADY_COMPLETED, draw=draw_to_model(existing))

        tier = await get_subscription_tier(self.session, user_id)
        if tier is None:
            raise UserNotFoundError(user_id)

        if tier != SubscriptionTier.PREMIUM:
            draws_today = await get_usage_count(self.session, user_id, today)
            if draws_today >= FREE_DAILY_DRAW_LIMIT:
                logger.warning(
                    "DAILY_LIMIT_REACHED",
                    extra={
                        "user_id": user_id,
                        "draws_today": draws_today,
                        "limit": FREE_DAILY_DRAW_LIMIT,
                    },
                )
                raise DailyLimitReachedError(user_id, draws_today, FREE_DAILY_DRAW_LIMIT)

        recent_card_ids = await get_recent_card_ids(self.session, user_id, LOOKBACK_WINDOW)
        card = get_card(select_card(recent_card_ids, mood, question, self.rng))

        try:
            db_draw = await create_draw(
                self.session,
                user_id=user_id,
                card=card,
                draw_date=today,
                mood=mood,
                question=question,
            )
        except IntegrityError:
            # Lost a race with a concurrent draw for the same day. Nothing has
            # been written in this transaction yet, so a full rollback is safe.
            await self.session.rollback()
            winner = await get_draw_for_date(self.session, user_id, today)
            if winner is None:
                raise
            logger.info(
                "DRAW_INSERT_CONFLICT",
                extra={"user_id": user_id, "draw_date": today.isoformat()},
            )
            return DrawResult(status=DrawStatus.ALREADY_COMPLETED, draw=draw_to_model(winner))

        draws_today = await increment_usage(self.session, user_id, today)

        logger.info(
            "DAILY_DRAW_CREATED",
            extra={
                "user_id": user_id,
                "card_id": card.id,
                "tier": tier.value,
                "draws_today": draws_today,
                "excluded": len(recent_card_ids),
            },
        )
        return DrawResult(status=DrawStatus.CREATED, draw=draw_to_model(db_draw))

    async def get_draw_history(self, user_id: str, limit: int | None = None) -> list[CardDraw]:
        """A user's draws, newest first. Non-positive limits use the default."""
        draws = await get_draw_history(self.session, user_id, limit)
        return [draw_to_model(draw) for draw in draws]

    async def get_today_status(self, user_id: str) -> TodayStatus:
        """
        Report whether the user has drawn today.

        The reported limit is always the free-tier limit.
        """
        today = self.clock()
        existing = await get_draw_for_date(self.session, user_id, today)

        if existing is None:
            return TodayStatus(
                has_drawn=False,
                can_draw=True,
                card=None,
                draws_today=0,
                limit=FREE_DAILY_DRAW_LIMIT,
            )

        draws_today = await get_usage_count(self.session, user_id, today)
        card = get_card(existing.card_id)
        return TodayStatus(
            has_drawn=True,
            can_draw=False,
            card=TodayCard(
                id=existing.card_id,
                name=existing.card_name,
                traditional_meaning=card.traditional_meaning,
            ),
            draws_today=draws_today,
            limit=FREE_DAILY_DRAW_LIMIT,
        )

    async def save_enhanced_interpretation(
        self, user_id: str, draw_date: date, interpretation: str
    ) -> bool:
        """
        Attach an enhanced interpretation to the user's draw for draw_date.

        Returns False if the user has no draw that day.
        """
        saved = await save_enhanced_interpretation(
            self.session, user_id, draw_date, interpretation
        )
        if not saved:
            logger.warning(
                "ENHANCED_INTERPRETATION_NO_DRAW",
                extra={"user_id": user_id, "draw_date": draw_date.isoformat()},
            )
        return saved
