class FlashcardError(Exception):
    """Base exception for flashcard collection faults."""


class FlashcardNotFoundError(FlashcardError):
    """Raised when no flashcard exists for the requested id."""


class FlashcardValidationError(FlashcardError):
    """Raised when a request body is malformed or misses required fields."""


class StoreUnavailableError(FlashcardError):
    """Raised when the record store rejects or cannot serve a call."""


class FlashcardAPIError(Exception):
    """Rendered by the API as ``{"error": message}``."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
