import logging


URL = "/api/flashcards"


def _create(client, **card):
    response = client.post(URL, json=card)
    assert response.status_code == 201
    return response.json()


def test_ping(client):
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_empty(client):
    response = client.get(URL)
    assert response.status_code == 200
    assert response.json() == []


def test_create_single_returns_record(client):
    card = _create(client, question="**Bold** question", answer="$x^2$", category="Math")
    assert isinstance(card["id"], int)
    assert card["question"] == "**Bold** question"
    assert card["answer"] == "$x^2$"
    assert card["category"] == "Math"
    assert "createdAt" in card


def test_create_without_category(client):
    card = _create(client, question="q", answer="a")
    assert card["category"] is None


def test_list_is_newest_first(client):
    first = _create(client, question="first", answer="1")
    second = _create(client, question="second", answer="2")

    cards = client.get(URL).json()
    assert [c["id"] for c in cards] == [second["id"], first["id"]]


def test_bulk_create_returns_count(client, sample_cards):
    _create(client, question="existing", answer="x")

    response = client.post(URL, json=sample_cards)
    assert response.status_code == 201
    body = response.json()
    assert body["count"] == 3
    assert body["message"] == "Successfully created 3 flashcards"
    assert len(client.get(URL).json()) == 4


def test_bulk_create_empty_array(client):
    response = client.post(URL, json=[])
    assert response.status_code == 201
    assert response.json()["count"] == 0


def test_create_malformed_json(client):
    response = client.post(URL, content=b"{invalid json", headers={"Content-Type": "application/json"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create flashcard"}


def test_create_missing_answer(client):
    response = client.post(URL, json={"question": "only a question"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create flashcard"}
    assert client.get(URL).json() == []


def test_bulk_create_with_invalid_element_creates_nothing(client):
    response = client.post(URL, json=[{"question": "q", "answer": "a"}, {"question": "no answer"}])
    assert response.status_code == 500
    assert client.get(URL).json() == []


def test_create_rejects_scalar_body(client):
    response = client.post(URL, json="not an array")
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to create flashcard"


def test_update_replaces_all_fields(client):
    card = _create(client, question="old q", answer="old a", category="Old")

    response = client.put(f"{URL}/{card['id']}", json={"question": "new q", "answer": "new a", "category": "New"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["question"] == "new q"
    assert updated["answer"] == "new a"
    assert updated["category"] == "New"
    assert updated["id"] == card["id"]
    assert updated["createdAt"] == card["createdAt"]


def test_update_without_category_clears_it(client):
    card = _create(client, question="q", answer="a", category="Math")
    updated = client.put(f"{URL}/{card['id']}", json={"question": "q", "answer": "a"}).json()
    assert updated["category"] is None


def test_update_unknown_id(client):
    response = client.put(f"{URL}/9999", json={"question": "q", "answer": "a", "category": None})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update flashcard"}


def test_update_non_numeric_id(client):
    response = client.put(f"{URL}/abc", json={"question": "q", "answer": "a"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update flashcard"}


def test_update_malformed_body(client):
    card = _create(client, question="q", answer="a")
    response = client.put(f"{URL}/{card['id']}", content=b"nope", headers={"Content-Type": "application/json"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update flashcard"}


def test_delete_one(client):
    keep = _create(client, question="keep", answer="1")
    drop = _create(client, question="drop", answer="2")

    response = client.delete(f"{URL}/{drop['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Deleted successfully"}
    assert [c["id"] for c in client.get(URL).json()] == [keep["id"]]


def test_delete_absent_id_is_generic_fault(client):
    card = _create(client, question="q", answer="a")
    assert client.delete(f"{URL}/{card['id']}").status_code == 200

    response = client.delete(f"{URL}/{card['id']}")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete flashcard"}


def test_delete_non_numeric_id(client):
    response = client.delete(f"{URL}/not-a-number")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete flashcard"}


def test_delete_out_of_range_id_is_typed_not_found(client, caplog):
    with caplog.at_level(logging.ERROR, logger="flashdeck.routers.flashcards"):
        response = client.delete(f"{URL}/99999999999999999999999")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete flashcard"}
    records = [r for r in caplog.records if r.name == "flashdeck.routers.flashcards"]
    assert records
    assert "FlashcardNotFoundError" in records[0].getMessage()
    assert records[0].exc_info is None


def test_ids_are_not_reused(client):
    first = _create(client, question="q", answer="a")
    client.delete(f"{URL}/{first['id']}")
    second = _create(client, question="q", answer="a")
    assert second["id"] != first["id"]


def test_delete_all(client, sample_cards):
    client.post(URL, json=sample_cards)

    response = client.delete(URL)
    assert response.status_code == 200
    assert "message" in response.json()
    assert client.get(URL).json() == []
