import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from symbolquest.api import cards_router, draws_router, health_router
from symbolquest.api.errors import register_error_handlers
from symbolquest.config import settings
from symbolquest.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()
    logger.info("Database initialized for %s", settings.app_name)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("symbolquest"),
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(draws_router)
app.include_router(health_router)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
