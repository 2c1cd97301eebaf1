"""
Enhanced interpretation generation.

Asks Claude for a personalized reading of a drawn card. The draw itself
never depends on this: generation or save failures leave the draw and its
basic interpretation untouched.
"""

import logging

import anthropic
from anthropic.types import TextBlock

from symbolquest.config import settings
from symbolquest.models.card import Card
from symbolquest.models.failure import (
    InterpretationGenerationError,
    InterpretationUnavailableError,
)

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a wise and compassionate tarot reader who provides personalized, "
    "insightful interpretations that blend traditional tarot wisdom with modern "
    "psychological insights. Your readings are supportive, empowering, and help "
    "people gain clarity and perspective."
)

READING_INSTRUCTIONS = """Please provide:
1. A personalized interpretation that connects the card's meaning to their mood and question
2. Practical guidance and actionable insights
3. How this card's energy can help them right now
4. A supportive message that empowers them

Keep the tone warm, wise, and encouraging. Focus on personal growth and positive \
transformation while being honest about any challenges the card might indicate.

Response should be 2-3 paragraphs, around 250-300 words total."""


def build_prompt(card: Card, mood: str = "", question: str = "") -> str:
    """Build the reading request for a card, mood and question."""
    lines = [
        "Please provide a personalized tarot interpretation for:",
        "",
        f"Card: {card.name} ({card.number})",
        f"Traditional Meaning: {card.traditional_meaning}",
        f"Keywords: {', '.join(card.keywords)}",
        f"Light Aspects: {', '.join(card.light_aspects)}",
        f"Shadow Aspects: {', '.join(card.shadow_aspects)}",
    ]
    if mood:
        lines.append(f"Current Mood: {mood}")
    if question:
        lines.append(f"Question Asked: {question}")

    return "\n".join(lines) + "\n\n" + READING_INSTRUCTIONS


def generate_enhanced_interpretation(
    card: Card,
    mood: str = "",
    question: str = "",
    client: anthropic.Anthropic | None = None,
) -> str:
    """
    Generate an enhanced interpretation for a drawn card.

    Raises:
        InterpretationUnavailableError: If disabled or no API key is configured
        InterpretationGenerationError: If the API call fails or returns no text
    """
    if not settings.llm_enabled:
        logger.warning("LLM_DISABLED", extra={"llm_enabled": False})
        raise InterpretationUnavailableError("LLM_ENABLED=false")

    if client is None:
        if not settings.anthropic_api_key:
            raise InterpretationUnavailableError("Anthropic API key not configured")
        client = anthropic.Anthropic(api_key=settings.anthropic_api_key)

    try:
        response = client.messages.create(
            model=settings.anthropic_model,
            max_tokens=settings.interpretation_max_tokens,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": build_prompt(card, mood, question)}],
        )
    except anthropic.APIError as e:
        logger.error("Enhanced interpretation failed for card %d: %s", card.id, e)
        raise InterpretationGenerationError(type(e).__name__) from e

    text = "".join(block.text for block in response.content if isinstance(block, TextBlock))
    if not text.strip():
        raise InterpretationGenerationError("Empty response from model")

    if response.usage:
        logger.info(
            "token_usage",
            extra={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
                "card_id": card.id,
            },
        )

    return text
