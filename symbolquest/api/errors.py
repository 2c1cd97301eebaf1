"""
Exception handlers that keep raw 500s away from clients.

- KnownError -> its classified envelope and status code
- Anything else -> fixed unknown-failure envelope, status 500, logged
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from symbolquest.models.failure import KnownError, create_unknown_failure, finalize_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the global exception handlers on the app."""

    @app.exception_handler(KnownError)
    async def known_error_handler(request: Request, exc: KnownError) -> JSONResponse:
        logger.info(
            "KNOWN_ERROR",
            extra={"kind": exc.kind.value, "path": request.url.path, "status": exc.status_code},
        )
        envelope = finalize_response(exc.to_response())
        return JSONResponse(status_code=exc.status_code, content=envelope.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def unknown_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s", request.url.path)
        envelope = create_unknown_failure(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope.model_dump(mode="json"),
        )
