import logging
from typing import Any, List, Optional, Union

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from flashdeck.exceptions import (
    FlashcardNotFoundError,
    FlashcardValidationError,
    StoreUnavailableError,
)
from flashdeck.models.flashcard import Flashcard
from flashdeck.repositories.flashcards import FlashcardsRepository
from flashdeck.schemas.flashcards import FlashcardCreate, FlashcardUpdate

logger = logging.getLogger(__name__)

_bulk_adapter = TypeAdapter(List[FlashcardCreate])

# flashcards.id is a 32-bit INTEGER column
MAX_CARD_ID = 2**31 - 1


def parse_card_id(raw: Union[str, int, None]) -> Optional[int]:
    """Coerce a path segment to an id; anything non-decimal or out of range becomes None."""
    if raw is None:
        return None
    if isinstance(raw, int):
        card_id = raw
    else:
        text = str(raw).strip()
        if text.startswith(("+", "-")):
            sign, digits = text[0], text[1:]
        else:
            sign, digits = "", text
        if not digits.isdecimal():
            return None
        card_id = int(sign + digits)
    if abs(card_id) > MAX_CARD_ID:
        return None
    return card_id


class FlashcardService:
    """Stateless operations over the flashcard collection."""

    def __init__(self, repo: FlashcardsRepository):
        self.repo = repo

    def list_cards(self) -> List[Flashcard]:
        """Return every flashcard, newest first."""
        try:
            return self.repo.get_all()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Listing flashcards failed: {e}") from e

    def create(self, payload: Any) -> Union[Flashcard, int]:
        """Create one card from a dict, or many from a list.

        :returns: the created record for a dict, the created count for a list
        """
        if isinstance(payload, list):
            return self._create_many(payload)
        if isinstance(payload, dict):
            return self._create_one(payload)
        raise FlashcardValidationError(
            f"Expected an object or an array, got {type(payload).__name__}"
        )

    def _create_one(self, payload: dict) -> Flashcard:
        try:
            data = FlashcardCreate.model_validate(payload)
        except ValidationError as e:
            raise FlashcardValidationError(str(e)) from e

        try:
            card = self.repo.create(data.model_dump())
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Insert failed: {e}") from e

        logger.info(f"Created flashcard {card.id}")
        return card

    def _create_many(self, payload: list) -> int:
        try:
            records = _bulk_adapter.validate_python(payload)
        except ValidationError as e:
            raise FlashcardValidationError(str(e)) from e

        try:
            count = self.repo.create_many([r.model_dump() for r in records])
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Bulk insert failed: {e}") from e

        logger.info(f"Bulk created {count} flashcards")
        return count

    def update(self, card_id: Optional[int], payload: Any) -> Flashcard:
        """Replace question, answer and category of an existing card."""
        if not isinstance(payload, dict):
            raise FlashcardValidationError("Update body must be an object")
        try:
            data = FlashcardUpdate.model_validate(payload)
        except ValidationError as e:
            raise FlashcardValidationError(str(e)) from e

        card = self._get_or_raise(card_id)
        try:
            card = self.repo.update(card, data.model_dump())
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Update of {card_id} failed: {e}") from e

        logger.info(f"Updated flashcard {card_id}")
        return card

    def delete(self, card_id: Optional[int]) -> None:
        card = self._get_or_raise(card_id)
        try:
            self.repo.delete(card)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Delete of {card_id} failed: {e}") from e
        logger.info(f"Deleted flashcard {card_id}")

    def delete_all(self) -> int:
        try:
            deleted = self.repo.delete_all()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Delete all failed: {e}") from e
        logger.info(f"Deleted all flashcards ({deleted} rows)")
        return deleted

    def _get_or_raise(self, card_id: Optional[int]) -> Flashcard:
        if card_id is None:
            raise FlashcardNotFoundError("Flashcard id is not a number")
        try:
            card = self.repo.get_by_id(card_id)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Lookup of {card_id} failed: {e}") from e
        if card is None:
            raise FlashcardNotFoundError(f"Flashcard {card_id} not found")
        return card
