from flashdeck.schemas.api.flashcards import (
    BulkCreateResponse,
    ErrorResponse,
    FlashcardDTO,
    MessageResponse,
)
from flashdeck.schemas.api.health import PingResponse

__all__ = [
    "BulkCreateResponse",
    "ErrorResponse",
    "FlashcardDTO",
    "MessageResponse",
    "PingResponse",
]
