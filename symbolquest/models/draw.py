from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class SubscriptionTier(str, Enum):
    """Subscription tier of a user account."""

    FREE = "free"
    PREMIUM = "premium"

    @classmethod
    def parse(cls, value: str | None) -> "SubscriptionTier":
        """
        Parse a stored tier string.

        Only the exact string "premium" is premium; anything else is free.
        """
        if value is None:
            return cls.FREE
        try:
            return cls(value)
        except ValueError:
            return cls.FREE


class DrawStatus(str, Enum):
    """Outcome of a daily draw request that did not fail."""

    CREATED = "created"
    ALREADY_COMPLETED = "already_completed"


@dataclass
class CardDraw:
    """
    A user's card draw for a single calendar day.

    Attributes:
        id: Storage identity
        user_id: Owner of the draw
        card_id: Catalog id of the drawn card (0-21)
        card_name: Card name at draw time
        draw_date: Calendar day the draw belongs to
        interpretation_basic: Traditional meaning snapshot taken at draw time
        interpretation_enhanced: Generated reading, attached later if at all
        mood: Mood supplied by the user (may be empty)
        question: Question supplied by the user (may be empty)
        created_at: When the draw was recorded
    """

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


@dataclass(frozen=True)
class DrawResult:
    """
    Result of performing the daily draw.

    ALREADY_COMPLETED carries the draw that already exists for the day.
    """

    status: DrawStatus
    draw: CardDraw

    @property
    def created(self) -> bool:
        """True if this call recorded a new draw."""
        return self.status == DrawStatus.CREATED


@dataclass(frozen=True)
class TodayCard:
    """Summary of the card drawn today."""

    id: int
    name: str
    traditional_meaning: str


@dataclass(frozen=True)
class TodayStatus:
    """
    Snapshot of a user's draw state for today.

    `limit` is always the free-tier daily limit, whatever the user's tier.
    """

    has_drawn: bool
    can_draw: bool
    card: TodayCard | None
    draws_today: int
    limit: int
