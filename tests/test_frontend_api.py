from unittest.mock import MagicMock, patch

import pytest
import requests

from frontend import api
from frontend.config import API_BASE_URL


def _response(payload, status_code=200):
    response = MagicMock()
    response.json.return_value = payload
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    return response


@patch("frontend.api.requests.get")
def test_list_flashcards(mock_get):
    mock_get.return_value = _response([{"id": 1}])
    assert api.list_flashcards() == [{"id": 1}]
    assert mock_get.call_args.args[0] == f"{API_BASE_URL}/flashcards"


@patch("frontend.api.requests.post")
def test_create_flashcard_sends_null_for_empty_category(mock_post):
    mock_post.return_value = _response({"id": 1})
    api.create_flashcard("q", "a", "")
    assert mock_post.call_args.kwargs["json"] == {"question": "q", "answer": "a", "category": None}


@patch("frontend.api.requests.post")
def test_bulk_create_posts_array(mock_post):
    mock_post.return_value = _response({"message": "Successfully created 2 flashcards", "count": 2})
    cards = [{"question": "q1", "answer": "a1"}, {"question": "q2", "answer": "a2"}]
    assert api.bulk_create_flashcards(cards)["count"] == 2
    assert mock_post.call_args.kwargs["json"] == cards


@patch("frontend.api.requests.put")
def test_update_flashcard_targets_id(mock_put):
    mock_put.return_value = _response({"id": 7})
    api.update_flashcard(7, "q", "a", "Math")
    assert mock_put.call_args.args[0] == f"{API_BASE_URL}/flashcards/7"


@patch("frontend.api.requests.delete")
def test_delete_flashcard_raises_on_server_fault(mock_delete):
    mock_delete.return_value = _response({"error": "Failed to delete flashcard"}, status_code=500)
    with pytest.raises(requests.HTTPError):
        api.delete_flashcard(3)


@patch("frontend.api.requests.delete")
def test_delete_all(mock_delete):
    mock_delete.return_value = _response({"message": "All flashcards deleted successfully"})
    api.delete_all_flashcards()
    assert mock_delete.call_args.args[0] == f"{API_BASE_URL}/flashcards"
