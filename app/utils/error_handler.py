"""
Named error kinds raised by the store and the Top-100 importer, and the
FastAPI exception handlers that turn them into JSON error responses.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class GameNotFoundError(Exception):
    def __init__(self, game_id: int):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class StoreError(Exception):
    """A store operation failed (constraint violation, bad value, lost connection...)."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class FeedFetchError(Exception):
    """A Top-100 feed could not be fetched or was not a JSON array of entries."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.message = message
        self.url = url


async def game_not_found_handler(request: Request, exc: GameNotFoundError):
    logger.warning(f"{request.method} {request.url.path}: game {exc.game_id} not found")
    return JSONResponse(
        status_code=404,
        content={"error": "Game not found", "detail": {"id": exc.game_id}},
    )


async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"{request.method} {request.url.path}: {exc.message}: {exc.cause}")
    return JSONResponse(
        status_code=400,
        content={"error": exc.message, "detail": str(exc.cause) if exc.cause else None},
    )


async def feed_fetch_error_handler(request: Request, exc: FeedFetchError):
    logger.error(f"{request.method} {request.url.path}: {exc.message} ({exc.url})")
    return JSONResponse(
        status_code=502,
        content={"error": exc.message, "detail": exc.url},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path}: invalid request body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameNotFoundError, game_not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(FeedFetchError, feed_fetch_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
