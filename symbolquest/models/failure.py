"""
Failure Explanation Envelope: unified response classification.

This module defines the response envelope that API endpoints use to
communicate non-trivial outcomes to clients. Every user-visible failure
must be classified and explained.

INVARIANT: No raw 500 errors may reach the client.

Response types:
- Success: Operation completed successfully
- Refusal: System chose not to proceed (policy, expected, explainable)
- KnownFailure: System knows why it failed
- UnknownFailure: System does not know why it failed

The daily draw adds one special case: a draw that was already completed
today is a refusal that ALSO carries the existing draw as data. It is the
only non-success response with data attached.

AUTHORITY BOUNDARY:
User-visible envelopes are validated by `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Resource failures
    NOT_FOUND = "not_found"

    # Daily draw policy
    LIMIT_REACHED = "limit_reached"
    ALREADY_COMPLETED = "already_completed"
    PREMIUM_REQUIRED = "premium_required"

    # Service failures
    SERVICE_UNAVAILABLE = "service_unavailable"
    EXTERNAL_API_ERROR = "external_api_error"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope.

    Every response is classified into one of four outcome types,
    ensuring no failure reaches the user unexplained.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success and on already-completed draws)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def refusal(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a refusal response.

        Use when the system chose not to proceed due to a policy.
        Example: Free-tier daily limit reached.
        """
        return cls(
            outcome=OutcomeType.REFUSAL,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: Card id outside the catalog.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


# Standard exception types that map to known failures


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class CardNotFoundError(KnownError):
    """Raised when a card id is outside the Major Arcana catalog."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="Card not found.",
            detail=f"No card with id {card_id}; valid ids are 0-21",
            status_code=404,
        )


class UserNotFoundError(KnownError):
    """Raised when no account exists for a user id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="User account not found.",
            detail=f"No account for user {user_id}",
            status_code=404,
        )


class DrawNotFoundError(KnownError):
    """Raised when a user has no draw for the requested day."""

    def __init__(self, user_id: str, draw_date: str):
        self.user_id = user_id
        self.draw_date = draw_date
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="No card draw found for that day.",
            detail=f"No draw for user {user_id} on {draw_date}",
            status_code=404,
        )


class DailyLimitReachedError(KnownError):
    """
    Raised when a free-tier user has used today's draw.

    This is a policy rejection, reported as a refusal. Never retried.
    """

    def __init__(self, user_id: str, draws_today: int, limit: int):
        self.user_id = user_id
        self.draws_today = draws_today
        self.limit = limit
        super().__init__(
            kind=FailureKind.LIMIT_REACHED,
            message="Daily limit reached. Upgrade to premium for unlimited draws.",
            detail=f"Daily draws: {draws_today}/{limit}",
            suggestion="Upgrade to premium, or come back tomorrow.",
            status_code=403,
        )

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a refusal ApiResponse."""
        return ApiResponse.refusal(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class PremiumRequiredError(KnownError):
    """Raised when a free-tier user asks for a premium-only feature."""

    def __init__(self, user_id: str, feature: str):
        self.user_id = user_id
        self.feature = feature
        super().__init__(
            kind=FailureKind.PREMIUM_REQUIRED,
            message="Premium subscription required.",
            detail=f"{feature} is available on the premium tier only",
            suggestion="Upgrade to premium to unlock enhanced interpretations.",
            status_code=403,
        )

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a refusal ApiResponse."""
        return ApiResponse.refusal(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InterpretationUnavailableError(KnownError):
    """Raised when enhanced interpretations are disabled or not configured."""

    def __init__(self, detail: str):
        super().__init__(
            kind=FailureKind.SERVICE_UNAVAILABLE,
            message="Enhanced interpretations are currently unavailable.",
            detail=detail,
            suggestion="The basic interpretation of your card is still available.",
            status_code=503,
        )


class InterpretationGenerationError(KnownError):
    """Raised when the text-generation service fails to produce a reading."""

    def __init__(self, detail: str):
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message="Failed to generate enhanced interpretation.",
            detail=detail,
            suggestion="Try again in a moment.",
            status_code=502,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================


# Fixed wording for unknown failures
UNKNOWN_FAILURE_MESSAGE = (
    "I failed and I don't know why. Try simplifying the request or retrying."
)
UNKNOWN_FAILURE_SUGGESTION = "If this persists, please report the issue."


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Validate a response at the authority boundary.

    A pure check with no side effects. Every response it returns is guaranteed to:
    1. Have a valid outcome classification
    2. Have failure details if not successful
    3. Carry data alongside a failure only for already-completed draws

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")
        if response.data is not None and response.failure.kind != FailureKind.ALREADY_COMPLETED:
            raise ValueError("Only already-completed responses may carry data on failure")

    return response


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=UNKNOWN_FAILURE_MESSAGE,
            detail=detail,
            suggestion=UNKNOWN_FAILURE_SUGGESTION,
        ),
    )

    return finalize_response(response)


def create_already_completed(data: T) -> ApiResponse[T]:
    """
    Create the already-completed response for a daily draw.

    A soft conflict: the request is refused, but the existing draw is returned.
    """
    response = ApiResponse[T](
        outcome=OutcomeType.REFUSAL,
        data=data,
        failure=FailureDetail(
            kind=FailureKind.ALREADY_COMPLETED,
            message="You have already drawn your card for today.",
            suggestion="Come back tomorrow for a new card.",
        ),
    )
    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    return finalize_response(response)
