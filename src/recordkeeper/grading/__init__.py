from recordkeeper.grading.application import (
    LineResult,
    RosterResult,
    StudentResultProcessor,
    parse_line,
    parse_lines,
)
from recordkeeper.grading.domain import Student, grade_for
from recordkeeper.grading.module import generate_report, grading_module

__all__ = [
    "LineResult",
    "RosterResult",
    "Student",
    "StudentResultProcessor",
    "generate_report",
    "grade_for",
    "grading_module",
    "parse_line",
    "parse_lines",
]
