from flashdeck.models.flashcard import Flashcard

__all__ = ["Flashcard"]
