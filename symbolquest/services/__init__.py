"""
SymbolQuest services.

The card catalog lives here. The draw orchestrator and the interpretation
client are imported from their own modules (services.daily_draw,
services.interpretation) since they depend on selection, which depends on
the catalog.
"""

from symbolquest.services.card_catalog import (
    CATALOG_SIZE,
    MAJOR_ARCANA,
    all_cards,
    get_card,
)

__all__ = [
    "CATALOG_SIZE",
    "MAJOR_ARCANA",
    "all_cards",
    "get_card",
]
