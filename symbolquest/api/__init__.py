from symbolquest.api.cards import router as cards_router
from symbolquest.api.draws import router as draws_router
from symbolquest.api.health import router as health_router

__all__ = [
    "cards_router",
    "draws_router",
    "health_router",
]
