"""Router modules for the FlashDeck API."""

# Import all available routers
from . import flashcards, ping

__all__ = ["ping", "flashcards"]
