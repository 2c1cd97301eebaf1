"""
Daily draw API endpoints.

Performs the daily draw and exposes history, today's status and
enhanced interpretations.
"""

import logging
from datetime import date, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from symbolquest.db.database import get_session
from symbolquest.db.operations import get_subscription_tier
from symbolquest.models.draw import CardDraw, SubscriptionTier, TodayStatus
from symbolquest.models.failure import (
    ApiResponse,
    DrawNotFoundError,
    PremiumRequiredError,
    UserNotFoundError,
    create_already_completed,
    create_success,
)
from symbolquest.services.card_catalog import get_card
from symbolquest.services.daily_draw import DailyDrawService
from symbolquest.services.interpretation import generate_enhanced_interpretation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/draws", tags=["draws"])


def get_draw_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DailyDrawService:
    """Dependency that provides a draw service bound to the request session."""
    return DailyDrawService(session)


DrawService = Annotated[DailyDrawService, Depends(get_draw_service)]


class DailyDrawRequest(BaseModel):
    """Request model for the daily draw. Both fields are optional."""

    mood: str = Field(default="", max_length=50, examples=["curious"])
    question: str = Field(
        default="", max_length=1000, examples=["What should I focus on today?"]
    )


class CardDrawResponse(BaseModel):
    """Response model for a card draw."""

    id: int
    user_id: str
    card_id: int
    card_name: str
    draw_date: date
    interpretation_basic: str
    interpretation_enhanced: str | None = None
    mood: str = ""
    question: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_draw(cls, draw: CardDraw) -> "CardDrawResponse":
        return cls(
            id=draw.id,
            user_id=draw.user_id,
            card_id=draw.card_id,
            card_name=draw.card_name,
            draw_date=draw.draw_date,
            interpretation_basic=draw.interpretation_basic,
            interpretation_enhanced=draw.interpretation_enhanced,
            mood=draw.mood,
            question=draw.question,
            created_at=draw.created_at,
        )


class DrawHistoryResponse(BaseModel):
    """Response model for draw history."""

    user_id: str
    draws: list[CardDrawResponse] = Field(default_factory=list)
    count: int = 0


class TodayCardResponse(BaseModel):
    """The card drawn today."""

    id: int
    name: str
    traditional_meaning: str


class TodayStatusResponse(BaseModel):
    """Response model for today's draw status."""

    has_drawn: bool
    can_draw: bool
    card: TodayCardResponse | None = None
    draws_today: int = 0
    limit: int = Field(default=1, description="Free-tier daily limit, whatever the tier")

    @classmethod
    def from_status(cls, today: TodayStatus) -> "TodayStatusResponse":
        card = None
        if today.card is not None:
            card = TodayCardResponse(
                id=today.card.id,
                name=today.card.name,
                traditional_meaning=today.card.traditional_meaning,
            )
        return cls(
            has_drawn=today.has_drawn,
            can_draw=today.can_draw,
            card=card,
            draws_today=today.draws_today,
            limit=today.limit,
        )


class SaveInterpretationRequest(BaseModel):
    """Request model for attaching an enhanced interpretation."""

    interpretation: str = Field(..., min_length=1)


class SaveInterpretationResponse(BaseModel):
    """Response model for a saved interpretation."""

    user_id: str
    draw_date: date
    saved: bool


class InterpretationRequest(BaseModel):
    """Request model for generating an enhanced interpretation."""

    card_id: int
    mood: str = ""
    question: str = ""
    draw_date: date | None = Field(
        default=None,
        description="If set, the reading is saved onto the draw for this day",
    )


class InterpretationResponse(BaseModel):
    """Response model for a generated interpretation."""

    interpretation: str
    saved: bool = False


@router.post(
    "/{user_id}/daily",
    response_model=ApiResponse[CardDrawResponse],
    responses={409: {"model": ApiResponse[CardDrawResponse]}},
)
async def perform_daily_draw(
    user_id: str,
    response: Response,
    service: DrawService,
    request: DailyDrawRequest | None = None,
) -> ApiResponse[Any]:
    """
    Perform today's card draw.

    - 200 success: a new draw was recorded
    - 409 refusal (already_completed): today's draw exists and is returned as data
    - 403 refusal (limit_reached): free-tier daily limit used
    - 404 known_failure (not_found): no account for this user
    """
    body = request or DailyDrawRequest()
    result = await service.perform_daily_draw(user_id, mood=body.mood, question=body.question)
    payload = CardDrawResponse.from_draw(result.draw)

    if not result.created:
        response.status_code = status.HTTP_409_CONFLICT
        return create_already_completed(payload)

    return create_success(payload)


@router.get("/{user_id}/history", response_model=DrawHistoryResponse)
async def get_draw_history(
    user_id: str,
    service: DrawService,
    limit: Annotated[int | None, Query(description="Max draws; <= 0 means default")] = None,
) -> DrawHistoryResponse:
    """Get a user's draws, newest first."""
    draws = await service.get_draw_history(user_id, limit)
    return DrawHistoryResponse(
        user_id=user_id,
        draws=[CardDrawResponse.from_draw(draw) for draw in draws],
        count=len(draws),
    )


@router.get("/{user_id}/today", response_model=TodayStatusResponse)
async def get_today_status(user_id: str, service: DrawService) -> TodayStatusResponse:
    """Get whether the user has drawn today and which card."""
    return TodayStatusResponse.from_status(await service.get_today_status(user_id))


@router.put(
    "/{user_id}/{draw_date}/interpretation",
    response_model=SaveInterpretationResponse,
)
async def save_enhanced_interpretation(
    user_id: str,
    draw_date: date,
    request: SaveInterpretationRequest,
    service: DrawService,
) -> SaveInterpretationResponse:
    """Attach an enhanced interpretation to an existing draw."""
    saved = await service.save_enhanced_interpretation(
        user_id, draw_date, request.interpretation
    )
    if not saved:
        raise DrawNotFoundError(user_id, draw_date.isoformat())

    return SaveInterpretationResponse(user_id=user_id, draw_date=draw_date, saved=True)


@router.post("/{user_id}/interpretation", response_model=InterpretationResponse)
async def generate_interpretation(
    user_id: str,
    request: InterpretationRequest,
    service: DrawService,
) -> InterpretationResponse:
    """
    Generate an enhanced interpretation for a card. Premium users only.

    - 404 known_failure (not_found): no account for this user
    - 403 refusal (premium_required): the user is on the free tier

    When draw_date is given the reading is also saved onto that draw. A
    failed save is logged; the reading is still returned.
    """
    tier = await get_subscription_tier(service.session, user_id)
    if tier is None:
        raise UserNotFoundError(user_id)
    if tier != SubscriptionTier.PREMIUM:
        raise PremiumRequiredError(user_id, "Enhanced interpretation")

    card = get_card(request.card_id)
    # Blocking SDK call, kept off the event loop
    interpretation = await run_in_threadpool(
        generate_enhanced_interpretation, card, request.mood, request.question
    )

    saved = False
    if request.draw_date is not None:
        try:
            saved = await service.save_enhanced_interpretation(
                user_id, request.draw_date, interpretation
            )
        except SQLAlchemyError:
            logger.exception(
                "ENHANCED_INTERPRETATION_SAVE_FAILED",
                extra={"user_id": user_id, "draw_date": request.draw_date.isoformat()},
            )
            await service.session.rollback()

    return InterpretationResponse(interpretation=interpretation, saved=saved)
