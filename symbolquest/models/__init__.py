from symbolquest.models.card import CANONICAL_MOODS, Card
from symbolquest.models.draw import (
    CardDraw,
    DrawResult,
    DrawStatus,
    SubscriptionTier,
    TodayCard,
    TodayStatus,
)
from symbolquest.models.failure import (
    ApiResponse,
    CardNotFoundError,
    DailyLimitReachedError,
    DrawNotFoundError,
    FailureDetail,
    FailureKind,
    InterpretationGenerationError,
    InterpretationUnavailableError,
    KnownError,
    OutcomeType,
    PremiumRequiredError,
    UserNotFoundError,
    create_already_completed,
    create_success,
    create_unknown_failure,
    finalize_response,
)

__all__ = [
    "ApiResponse",
    "CANONICAL_MOODS",
    "Card",
    "CardDraw",
    "CardNotFoundError",
    "DailyLimitReachedError",
    "DrawNotFoundError",
    "DrawResult",
    "DrawStatus",
    "FailureDetail",
    "FailureKind",
    "InterpretationGenerationError",
    "InterpretationUnavailableError",
    "KnownError",
    "OutcomeType",
    "PremiumRequiredError",
    "SubscriptionTier",
    "TodayCard",
    "TodayStatus",
    "UserNotFoundError",
    "create_already_completed",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
]
