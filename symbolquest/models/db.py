"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import UTC, date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserAccountDB(Base):
    """
    A user account as seen by the draw engine.

    Only the subscription tier is read here; the billing side owns updates.
    """

    __tablename__ = "user_accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    subscription_tier: Mapped[str] = mapped_column(String(20), default="free")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<UserAccountDB(user_id={self.user_id}, tier={self.subscription_tier})>"


class CardDrawDB(Base):
    """
    A user's daily card draw.

    At most one row per user per calendar day; the unique constraint is
    what makes concurrent draws for the same day safe.
    """

    __tablename__ = "card_draws"
    __table_args__ = (UniqueConstraint("user_id", "draw_date", name="uq_draw_user_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True)
    card_id: Mapped[int] = mapped_column(Integer)
    card_name: Mapped[str] = mapped_column(String(100))
    draw_date: Mapped[date] = mapped_column(Date)

    # Traditional meaning at draw time, enhanced reading attached later
    interpretation_basic: Mapped[str] = mapped_column(Text)
    interpretation_enhanced: Mapped[str | None] = mapped_column(Text, nullable=True)

    mood: Mapped[str] = mapped_column(String(50), default="")
    question: Mapped[str] = mapped_column(Text, default="")

    # Set client-side so ordering survives second-resolution server clocks
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )

    def __repr__(self) -> str:
        return f"<CardDrawDB(user_id={self.user_id}, date={self.draw_date}, card={self.card_id})>"


class DailyUsageDB(Base):
    """
    Per-user-per-day draw counter used for free-tier quota checks.

    Incremented with a single upsert statement, never read-then-written.
    """

    __tablename__ = "daily_usage"
    __table_args__ = (UniqueConstraint("user_id", "usage_date", name="uq_usage_user_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True)
    usage_date: Mapped[date] = mapped_column(Date)
    draws_count: Mapped[int] = mapped_column(Integer, default=0)

    def __repr__(self) -> str:
        return f"<DailyUsageDB(user_id={self.user_id}, count={self.draws_count})>"
