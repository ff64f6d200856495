from typing import List, Optional

import requests

from frontend.config import API_BASE_URL, REQUEST_TIMEOUT


def _url(path: str = "") -> str:
    return f"{API_BASE_URL}/flashcards{path}"


def list_flashcards() -> List[dict]:
    response = requests.get(_url(), timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def create_flashcard(question: str, answer: str, category: Optional[str] = None) -> dict:
    payload = {"question": question, "answer": answer, "category": category or None}
    response = requests.post(_url(), json=payload, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def bulk_create_flashcards(cards: list) -> dict:
    """POST an array; the API answers with ``{message, count}``."""
    response = requests.post(_url(), json=cards, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def update_flashcard(card_id: int, question: str, answer: str, category: Optional[str] = None) -> dict:
    payload = {"question": question, "answer": answer, "category": category or None}
    response = requests.put(_url(f"/{card_id}"), json=payload, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def delete_flashcard(card_id: int) -> dict:
    response = requests.delete(_url(f"/{card_id}"), timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def delete_all_flashcards() -> dict:
    response = requests.delete(_url(), timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()
