"""Attempt and recommendation result definitions."""

from typing import Any

from pydantic import BaseModel


class CareerResult(BaseModel):
    """A career recommendation embedded in an attempt."""

    careerPath: str
    confidenceScore: int
    explanation: str
    strengths: list[str]
    roadmap: list[str]


class Attempt(BaseModel):
    """Represents one completed quiz submission."""

    id: str
    userId: str
    answers: list[Any]
    result: CareerResult
    completedAt: str
