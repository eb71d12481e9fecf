"""Schemas for the financial literacy quiz."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["beginner", "intermediate", "advanced"]


class QuizQuestion(BaseModel):
    """Seed question; never mutated once defined."""

    model_config = ConfigDict(frozen=True)

    id: int
    question: str
    options: tuple[str, ...]
    correct: int
    explanation: str
    difficulty: Difficulty


class QuestionRead(BaseModel):
    id: int
    question: str
    options: list[str]


class Reveal(BaseModel):
    selected: int
    correct: int
    is_correct: bool
    explanation: str


class QuizResultRead(BaseModel):
    score: int
    total: int
    percent: float
    tier: str
    message: str


class QuizView(BaseModel):
    phase: str
    difficulty: Difficulty
    question_count: int
    current_index: int
    progress_percent: float
    score: int
    question: QuestionRead | None = None
    reveal: Reveal | None = None
    result: QuizResultRead | None = None
    can_start: bool
    can_answer: bool


class DifficultySelect(BaseModel):
    difficulty: Difficulty


class AnswerSubmission(BaseModel):
    option: int = Field(ge=0)
