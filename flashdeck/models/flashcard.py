from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from flashdeck.db.interfaces.postgresql import Base


class Flashcard(Base):
    __tablename__ = "flashcards"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Card content (Markdown + LaTeX)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(Text, nullable=True)

    # Sole sort key for listings
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Flashcard id={self.id} category={self.category!r}>"
