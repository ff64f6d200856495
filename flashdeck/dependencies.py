from typing import Annotated, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from flashdeck.db.interfaces.postgresql import PostgreSQLDatabase
from flashdeck.repositories.flashcards import FlashcardsRepository
from flashdeck.services.flashcards import FlashcardService


def get_database(request: Request) -> PostgreSQLDatabase:
    return request.app.state.database


def get_db_session(
    database: Annotated[PostgreSQLDatabase, Depends(get_database)],
) -> Generator[Session, None, None]:
    with database.get_session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db_session)]


def get_flashcard_service(session: SessionDep) -> FlashcardService:
    return FlashcardService(FlashcardsRepository(session))


FlashcardsServiceDep = Annotated[FlashcardService, Depends(get_flashcard_service)]
