from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flashdeck.models.flashcard import Flashcard


class FlashcardsRepository:
    """Data access layer for flashcards.

    Every write is committed on its own; a failed write is rolled back
    before the error propagates.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Flashcard]:
        stmt = select(Flashcard).order_by(
            Flashcard.created_at.desc(), Flashcard.id.desc())
        return list(self.session.scalars(stmt))

    def get_by_id(self, card_id: int) -> Optional[Flashcard]:
        return self.session.get(Flashcard, card_id)

    def create(self, data: dict) -> Flashcard:
        db_card = Flashcard(**data)
        self.session.add(db_card)
        self._commit()
        self.session.refresh(db_card)
        return db_card

    def create_many(self, records: List[dict]) -> int:
        """Insert all records in a single transaction."""
        if not records:
            return 0
        self.session.add_all([Flashcard(**record) for record in records])
        self._commit()
        return len(records)

    def update(self, card: Flashcard, data: dict) -> Flashcard:
        for key, value in data.items():
            setattr(card, key, value)
        self._commit()
        self.session.refresh(card)
        return card

    def delete(self, card: Flashcard) -> None:
        self.session.delete(card)
        self._commit()

    def delete_all(self) -> int:
        result = self.session.execute(delete(Flashcard))
        self._commit()
        return result.rowcount or 0

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
