"""
Domain models for the Grade Report pipeline.

Defines the validated student record and the fixed grade band table used to
derive letter grades. Records are immutable; the letter grade is computed on
demand and never stored.
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

from pydantic import BaseModel, Field


class GradeBand(NamedTuple):
    """Closed score interval mapped to a letter grade."""

    lower: int
    upper: int
    letter: str


GRADE_BANDS: Tuple[GradeBand, ...] = (
    GradeBand(80, 100, "A"),
    GradeBand(70, 79, "B"),
    GradeBand(60, 69, "C"),
    GradeBand(50, 59, "D"),
    GradeBand(0, 49, "F"),
)

GRADE_LETTERS: Tuple[str, ...] = tuple(band.letter for band in GRADE_BANDS)

MIN_SCORE = 0
MAX_SCORE = 100


def get_grade(score: int) -> str:
    """
    Map a score in [0, 100] to its letter grade.

    Raises
    ------
    ValueError
        If the score is not covered by any band.
    """
    for band in GRADE_BANDS:
        if band.lower <= score <= band.upper:
            return band.letter
    raise ValueError(f"Score {score} is out of valid range ({MIN_SCORE}-{MAX_SCORE})")


class StudentRecord(BaseModel):
    """
    A single validated line of the student input file.
    """

    id: int = Field(..., description="Student identifier (any integer).")
    full_name: str = Field(..., min_length=1, description="Student full name.")
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE, description="Score in [0, 100].")

    model_config = {
        "frozen": True,
        "strict": True,
    }

    @property
    def grade(self) -> str:
        return get_grade(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"


__all__ = [
    "GRADE_BANDS",
    "GRADE_LETTERS",
    "GradeBand",
    "MAX_SCORE",
    "MIN_SCORE",
    "StudentRecord",
    "get_grade",
]
