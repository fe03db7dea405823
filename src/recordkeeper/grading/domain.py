"""Grading domain: student record and the letter-grade scale."""
from __future__ import annotations

from recordkeeper.domain import Entity

# (minimum score, grade), checked top to bottom
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = ((80, "A"), (70, "B"), (60, "C"), (50, "D"))
FAILING_GRADE = "F"

MIN_SCORE = 0
MAX_SCORE = 100


def grade_for(score: int) -> str:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


class Student(Entity):
    def __init__(self, id: int, full_name: str, score: int) -> None:
        super().__init__(id)
        self.full_name = full_name
        self.score = score

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    def report_line(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, full_name={self.full_name!r}, score={self.score!r})"
