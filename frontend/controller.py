"""Client-side collection state and the transitions that drive the study page.

Every reducer takes a ``DeckState`` and returns a new one; nothing here touches
Streamlit or the network. ``DeckController`` is the only piece that talks to
the API, and it always reloads the full collection after a mutation instead
of patching local state.
"""

import json
import logging
import random
from typing import List, Optional

import requests
from pydantic import BaseModel, Field

from frontend import api as default_api
from frontend.config import ALL_CATEGORIES, UNCATEGORIZED

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON format"
NOT_AN_ARRAY_MESSAGE = "JSON must be an array of objects"
IMPORT_FAILED_MESSAGE = "Error importing flashcards"
IMPORT_DEFAULT_NOTICE = "Flashcards imported successfully!"


class BulkImportError(ValueError):
    """Raised when the bulk import buffer cannot be submitted."""


class CardDraft(BaseModel):
    question: str = ""
    answer: str = ""
    category: str = ""


class DeckState(BaseModel):
    collection: List[dict] = Field(default_factory=list)
    position: int = 0
    answer_visible: bool = False
    category_filter: str = ALL_CATEGORIES
    loading: bool = True

    show_add_form: bool = False
    show_bulk_form: bool = False
    confirm_delete_all: bool = False
    editing_id: Optional[int] = None

    new_card: CardDraft = Field(default_factory=CardDraft)
    edit_card: CardDraft = Field(default_factory=CardDraft)
    bulk_json: str = ""
    bulk_error: str = ""
    notice: str = ""


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------

def card_category(card: dict) -> str:
    return card.get("category") or UNCATEGORIZED


def filtered_view(state: DeckState) -> List[dict]:
    if state.category_filter == ALL_CATEGORIES:
        return state.collection
    return [c for c in state.collection if card_category(c) == state.category_filter]


def categories(state: DeckState) -> List[str]:
    """Distinct category labels in order of first appearance."""
    seen = []
    for card in state.collection:
        label = card_category(card)
        if label not in seen:
            seen.append(label)
    return seen


def current_card(state: DeckState) -> Optional[dict]:
    cards = filtered_view(state)
    if 0 <= state.position < len(cards):
        return cards[state.position]
    return None


# ---------------------------------------------------------------------------
# Reducers
# ---------------------------------------------------------------------------

def loaded(state: DeckState, cards: List[dict]) -> DeckState:
    return state.model_copy(update={"collection": list(cards), "loading": False})


def load_failed(state: DeckState) -> DeckState:
    return state.model_copy(update={"collection": [], "loading": False})


def next_card(state: DeckState) -> DeckState:
    total = len(filtered_view(state))
    if total == 0:
        return state
    return state.model_copy(
        update={"position": (state.position + 1) % total, "answer_visible": False}
    )


def previous_card(state: DeckState) -> DeckState:
    total = len(filtered_view(state))
    if total == 0:
        return state
    return state.model_copy(
        update={"position": (state.position - 1 + total) % total, "answer_visible": False}
    )


def flip(state: DeckState) -> DeckState:
    return state.model_copy(update={"answer_visible": not state.answer_visible})


def select_category(state: DeckState, category: str) -> DeckState:
    return state.model_copy(
        update={"category_filter": category, "position": 0, "answer_visible": False}
    )


def shuffle(state: DeckState, rng: Optional[random.Random] = None) -> DeckState:
    # Only the filtered cards survive until the next load.
    shuffled = list(filtered_view(state))
    (rng or random).shuffle(shuffled)
    return state.model_copy(
        update={"collection": shuffled, "position": 0, "answer_visible": False}
    )


def toggle_add_form(state: DeckState) -> DeckState:
    return state.model_copy(
        update={"show_add_form": not state.show_add_form, "show_bulk_form": False}
    )


def toggle_bulk_form(state: DeckState) -> DeckState:
    return state.model_copy(
        update={"show_bulk_form": not state.show_bulk_form, "show_add_form": False}
    )


def update_new_card(state: DeckState, **fields) -> DeckState:
    return state.model_copy(update={"new_card": state.new_card.model_copy(update=fields)})


def set_bulk_json(state: DeckState, raw: str) -> DeckState:
    return state.model_copy(update={"bulk_json": raw})


def card_added(state: DeckState) -> DeckState:
    return state.model_copy(update={"new_card": CardDraft(), "show_add_form": False})


def parse_bulk_import(raw: str) -> list:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BulkImportError(INVALID_JSON_MESSAGE) from e
    if not isinstance(parsed, list):
        raise BulkImportError(NOT_AN_ARRAY_MESSAGE)
    return parsed


def bulk_import_rejected(state: DeckState, message: str) -> DeckState:
    return state.model_copy(update={"bulk_error": message})


def bulk_imported(state: DeckState, result: Optional[dict]) -> DeckState:
    message = (result or {}).get("message") or IMPORT_DEFAULT_NOTICE
    return state.model_copy(
        update={
            "bulk_json": "",
            "bulk_error": "",
            "show_bulk_form": False,
            "notice": message,
        }
    )


def card_deleted(state: DeckState) -> DeckState:
    # Bound is the unfiltered, pre-reload length even while a filter is active.
    position = state.position
    if position >= len(state.collection) - 1:
        position = max(0, position - 1)
    return state.model_copy(update={"position": position, "answer_visible": False})


def request_delete_all(state: DeckState) -> DeckState:
    return state.model_copy(update={"confirm_delete_all": True})


def cancel_delete_all(state: DeckState) -> DeckState:
    return state.model_copy(update={"confirm_delete_all": False})


def all_deleted(state: DeckState) -> DeckState:
    return state.model_copy(
        update={"position": 0, "answer_visible": False, "confirm_delete_all": False}
    )


def start_edit(state: DeckState) -> DeckState:
    card = current_card(state)
    if card is None:
        return state
    draft = CardDraft(
        question=card.get("question") or "",
        answer=card.get("answer") or "",
        category=card.get("category") or "",
    )
    return state.model_copy(
        update={
            "editing_id": card["id"],
            "edit_card": draft,
            "show_add_form": False,
            "show_bulk_form": False,
        }
    )


def update_edit_card(state: DeckState, **fields) -> DeckState:
    return state.model_copy(update={"edit_card": state.edit_card.model_copy(update=fields)})


def cancel_edit(state: DeckState) -> DeckState:
    return state.model_copy(update={"editing_id": None, "edit_card": CardDraft()})


def card_updated(state: DeckState) -> DeckState:
    return cancel_edit(state)


def clear_notice(state: DeckState) -> DeckState:
    return state.model_copy(update={"notice": ""})


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class DeckController:
    """Applies reducers and performs the network side of each user action."""

    def __init__(self, state: Optional[DeckState] = None, api=default_api):
        self.state = state or DeckState()
        self.api = api

    def dispatch(self, reducer, *args, **kwargs) -> DeckState:
        self.state = reducer(self.state, *args, **kwargs)
        return self.state

    def load(self) -> DeckState:
        try:
            cards = self.api.list_flashcards()
        except requests.RequestException as e:
            logger.error(f"Error fetching flashcards: {e}")
            return self.dispatch(load_failed)
        return self.dispatch(loaded, cards)

    def add_card(self) -> DeckState:
        draft = self.state.new_card
        try:
            self.api.create_flashcard(draft.question, draft.answer, draft.category)
        except requests.RequestException as e:
            logger.error(f"Error adding flashcard: {e}")
            return self.state
        self.dispatch(card_added)
        return self.load()

    def bulk_import(self) -> DeckState:
        self.dispatch(bulk_import_rejected, "")
        try:
            cards = parse_bulk_import(self.state.bulk_json)
        except BulkImportError as e:
            logger.error(f"Error bulk importing: {e}")
            return self.dispatch(bulk_import_rejected, str(e))

        try:
            result = self.api.bulk_create_flashcards(cards)
        except requests.RequestException as e:
            logger.error(f"Error bulk importing: {e}")
            return self.dispatch(bulk_import_rejected, IMPORT_FAILED_MESSAGE)

        self.dispatch(bulk_imported, result)
        return self.load()

    def save_edit(self) -> DeckState:
        if self.state.editing_id is None:
            return self.state
        draft = self.state.edit_card
        try:
            self.api.update_flashcard(
                self.state.editing_id, draft.question, draft.answer, draft.category
            )
        except requests.RequestException as e:
            logger.error(f"Error updating flashcard {self.state.editing_id}: {e}")
            return self.state
        self.dispatch(card_updated)
        return self.load()

    def delete_current(self) -> DeckState:
        card = current_card(self.state)
        if card is None:
            return self.state
        try:
            self.api.delete_flashcard(card["id"])
        except requests.RequestException as e:
            logger.error(f"Error deleting flashcard: {e}")
            return self.state
        self.dispatch(card_deleted)
        return self.load()

    def delete_all(self, confirmed: bool) -> DeckState:
        if not confirmed:
            return self.dispatch(cancel_delete_all)
        try:
            self.api.delete_all_flashcards()
        except requests.RequestException as e:
            logger.error(f"Error deleting all flashcards: {e}")
            return self.dispatch(cancel_delete_all)
        self.dispatch(all_deleted)
        return self.load()
