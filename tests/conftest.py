import os

import pytest

os.environ.setdefault("POSTGRES_DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient

from flashdeck.db.interfaces.postgresql import PostgreSQLDatabase
from flashdeck.dependencies import get_database
from flashdeck.main import app
from flashdeck.repositories.flashcards import FlashcardsRepository
from flashdeck.services.flashcards import FlashcardService


@pytest.fixture
def database():
    db = PostgreSQLDatabase("sqlite://")
    db.create_tables()
    yield db
    db.teardown()


@pytest.fixture
def session(database):
    with database.get_session() as session:
        yield session


@pytest.fixture
def repo(session):
    return FlashcardsRepository(session)


@pytest.fixture
def service(repo):
    return FlashcardService(repo)


@pytest.fixture
def client(database):
    app.dependency_overrides[get_database] = lambda: database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_cards():
    return [
        {"question": "2+2?", "answer": "4"},
        {"question": "3+3?", "answer": "6", "category": "Math"},
        {"question": "What is $E = mc^2$?", "answer": "Mass-energy equivalence", "category": "Physics"},
    ]
