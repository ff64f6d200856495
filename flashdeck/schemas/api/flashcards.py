from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FlashcardDTO(BaseModel):
    """Serialized flashcard returned by the API/UI."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Store-assigned identifier")
    question: str = Field(..., description="Question text (Markdown & LaTeX)")
    answer: str = Field(..., description="Answer text (Markdown & LaTeX)")
    category: Optional[str] = Field(
        None, description="Optional grouping label, e.g. Math"
    )
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Creation timestamp; listings are newest first",
    )


class BulkCreateResponse(BaseModel):
    """Acknowledgement for an array POST."""

    message: str
    count: int

    @classmethod
    def for_count(cls, count: int) -> "BulkCreateResponse":
        return cls(message=f"Successfully created {count} flashcards", count=count)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
