import json
import logging
from typing import List, Union

from fastapi import APIRouter, Request, status

from flashdeck.dependencies import FlashcardsServiceDep
from flashdeck.exceptions import FlashcardAPIError, FlashcardError, FlashcardValidationError
from flashdeck.schemas.api.flashcards import (
    BulkCreateResponse,
    ErrorResponse,
    FlashcardDTO,
    MessageResponse,
)
from flashdeck.services.flashcards import parse_card_id

router = APIRouter(
    prefix="/flashcards",
    tags=["flashcards"],
    responses={500: {"model": ErrorResponse}},
)
logger = logging.getLogger(__name__)


def _to_dto(card) -> FlashcardDTO:
    return FlashcardDTO(
        id=card.id,
        question=card.question,
        answer=card.answer,
        category=card.category,
        created_at=card.created_at,
    )


def _fail(message: str, error: Exception) -> FlashcardAPIError:
    """Collapse any fault into the generic error body, keeping its kind in the log."""
    if isinstance(error, FlashcardError):
        logger.error(f"{message} [{type(error).__name__}]: {error}")
    else:
        logger.exception(f"{message}: {error}")
    return FlashcardAPIError(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def _read_json(request: Request):
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FlashcardValidationError(f"Malformed JSON body: {e}") from e


@router.get("", response_model=List[FlashcardDTO])
def list_flashcards(service: FlashcardsServiceDep):
    """Return all flashcards, newest first."""
    try:
        return [_to_dto(card) for card in service.list_cards()]
    except Exception as e:
        raise _fail("Failed to fetch flashcards", e) from e


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Union[FlashcardDTO, BulkCreateResponse],
)
async def create_flashcards(request: Request, service: FlashcardsServiceDep):
    """Create a single flashcard, or bulk import when the body is an array."""
    try:
        payload = await _read_json(request)
        result = service.create(payload)
        if isinstance(result, int):
            return BulkCreateResponse.for_count(result)
        return _to_dto(result)
    except Exception as e:
        raise _fail("Failed to create flashcard", e) from e


@router.delete("", response_model=MessageResponse)
def delete_all_flashcards(service: FlashcardsServiceDep):
    """Unconditionally remove every flashcard."""
    try:
        service.delete_all()
        return MessageResponse(message="All flashcards deleted successfully")
    except Exception as e:
        raise _fail("Failed to delete flashcards", e) from e


@router.put("/{card_id}", response_model=FlashcardDTO)
async def update_flashcard(card_id: str, request: Request, service: FlashcardsServiceDep):
    """Replace question, answer and category of one flashcard."""
    try:
        payload = await _read_json(request)
        card = service.update(parse_card_id(card_id), payload)
        return _to_dto(card)
    except Exception as e:
        raise _fail("Failed to update flashcard", e) from e


@router.delete("/{card_id}", response_model=MessageResponse)
def delete_flashcard(card_id: str, service: FlashcardsServiceDep):
    try:
        service.delete(parse_card_id(card_id))
        return MessageResponse(message="Deleted successfully")
    except Exception as e:
        raise _fail("Failed to delete flashcard", e) from e
