"""
Card catalog endpoints.

Read-only access to the 22 Major Arcana cards.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from symbolquest.models.card import Card
from symbolquest.services.card_catalog import all_cards, get_card

router = APIRouter(prefix="/cards", tags=["cards"])


class CardResponse(BaseModel):
    """Response model for a single card."""

    id: int
    name: str
    number: str
    keywords: list[str] = Field(default_factory=list)
    archetypes: list[str] = Field(default_factory=list)
    elements: list[str] = Field(default_factory=list)
    astrology: str = ""
    traditional_meaning: str
    shadow_aspects: list[str] = Field(default_factory=list)
    light_aspects: list[str] = Field(default_factory=list)
    mood_weights: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            name=card.name,
            number=card.number,
            keywords=list(card.keywords),
            archetypes=list(card.archetypes),
            elements=list(card.elements),
            astrology=card.astrology,
            traditional_meaning=card.traditional_meaning,
            shadow_aspects=list(card.shadow_aspects),
            light_aspects=list(card.light_aspects),
            mood_weights=dict(card.mood_weights),
        )


class CardListResponse(BaseModel):
    """Response model for the full catalog."""

    cards: list[CardResponse]
    count: int


@router.get("", response_model=CardListResponse)
async def list_cards() -> CardListResponse:
    """List every card in ascending id order."""
    cards = [CardResponse.from_card(card) for card in all_cards()]
    return CardListResponse(cards=cards, count=len(cards))


@router.get("/{card_id}", response_model=CardResponse)
async def get_card_meaning(card_id: int) -> CardResponse:
    """
    Get a card's meaning.

    Returns 404 with a not_found envelope for ids outside 0-21.
    """
    return CardResponse.from_card(get_card(card_id))
