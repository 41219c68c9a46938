"""Question model definitions."""

from pydantic import BaseModel


class Option(BaseModel):
    id: str
    text: str


class Question(BaseModel):
    """Represents one multiple-choice quiz question."""

    id: int
    text: str
    options: list[Option]
