import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from flashdeck.config import get_settings
from flashdeck.db.factory import make_database
from flashdeck.middlewares import register_middlewares
from flashdeck.routers import flashcards, ping

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan for the API.
    """
    logger.info("Starting FlashDeck API...")

    app.state.settings = get_settings()

    database = make_database()
    app.state.database = database
    logger.info("Database connected")

    logger.info("API ready")
    yield

    # Cleanup
    database.teardown()
    logger.info("API shutdown complete")

app = FastAPI(
    title="FlashDeck",
    description="Flashcard study API with Markdown and LaTeX content.",
    version=settings.app_version,
    lifespan=lifespan,
)

register_middlewares(app)

app.include_router(ping.router, prefix=settings.api_prefix)
app.include_router(flashcards.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(app, port=8000, host="0.0.0.0")
