import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flashdeck.exceptions import FlashcardAPIError

logger = logging.getLogger(__name__)


def log_request(method: str, path: str) -> None:
    """Simple request logging"""
    logger.info(f"{method} {path}")


def log_error(error: str, method: str, path: str) -> None:
    """Simple error logging"""
    logger.error(f"Error in {method} {path}: {error}")


def register_middlewares(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        log_request(request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(FlashcardAPIError)
    async def flashcard_api_error_handler(request: Request, exc: FlashcardAPIError):
        log_error(exc.message, request.method, request.url.path)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
