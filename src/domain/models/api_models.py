from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal
from typing import Optional
from datetime import datetime


class WireModel(BaseModel):
    """Base model for API payloads. JSON keys are PascalCase (`Id`, `Title`, ...)."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra='ignore')

    def to_dict(self):
        """Convert model to a JSON-ready dictionary using the wire keys."""
        return self.model_dump(by_alias=True, mode='json')


class QuizViewModel(WireModel):
    """
    Wire projection of a Quiz.

    Only Title, Description, Text and Notes are ever read from a client
    payload. Id is used to address an existing quiz on update. The
    timestamps are filled on read responses and ignored on writes; the
    author id is never part of this shape.
    """
    id: Optional[int] = Field(None, description="Store-assigned quiz identifier.")
    title: Optional[str] = Field(None, description="Quiz title, required on create.")
    description: Optional[str] = None
    text: Optional[str] = None
    notes: Optional[str] = None
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None


class AnswerViewModel(WireModel):
    """Wire shape of an answer to a question."""
    id: int
    question_id: int
    text: str
    created_date: datetime
    last_modified_date: datetime
