from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FlashcardCreate(BaseModel):
    """Input for a single create; also each element of a bulk import."""

    model_config = ConfigDict(extra="ignore")

    question: str
    answer: str
    category: Optional[str] = None


class FlashcardUpdate(BaseModel):
    """Full replacement body: every field is written, category may be null."""

    model_config = ConfigDict(extra="ignore")

    question: str
    answer: str
    category: Optional[str] = Field(default=None)
