"""
Student roster processing: parse `id,fullName,score` lines, grade, write a report.

Each line is validated on its own. A bad line yields an error message instead of
a student and parsing continues with the next line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import structlog

from recordkeeper.domain import (
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MalformedRecordError,
    MissingFieldError,
)

from .domain import MAX_SCORE, MIN_SCORE, Student

logger = structlog.get_logger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")

EXPECTED_FIELDS = 3


@dataclass(frozen=True)
class LineResult:
    """Outcome of one roster line: a student or an error, never both."""

    line_number: int
    student: Optional[Student] = None
    error: Optional[MalformedRecordError] = None

    @property
    def ok(self) -> bool:
        return self.student is not None


@dataclass
class RosterResult:
    students: list[Student] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _parse_int(text: str) -> Optional[int]:
    return int(text) if _INTEGER.fullmatch(text) else None


def _parse_fields(line: str, line_number: int) -> Student:
    parts = line.split(",")
    if len(parts) < EXPECTED_FIELDS:
        raise MissingFieldError(
            f"Line {line_number}: Missing fields. Expected {EXPECTED_FIELDS}, got {len(parts)}."
        )

    id_text, full_name, score_text = (p.strip() for p in parts[:EXPECTED_FIELDS])
    if not id_text or not full_name or not score_text:
        raise MissingFieldError(f"Line {line_number}: One or more fields are empty.")

    student_id = _parse_int(id_text)
    if student_id is None:
        raise InvalidIdFormatError(f"Line {line_number}: Invalid ID format '{id_text}'.")

    score = _parse_int(score_text)
    if score is None:
        raise InvalidScoreFormatError(f"Line {line_number}: Invalid score format '{score_text}'.")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidScoreFormatError(
            f"Line {line_number}: Score {score} is out of valid range ({MIN_SCORE}-{MAX_SCORE})."
        )

    return Student(student_id, full_name, score)


def parse_line(line: str, line_number: int = 1) -> LineResult:
    try:
        return LineResult(line_number=line_number, student=_parse_fields(line, line_number))
    except MalformedRecordError as exc:
        return LineResult(line_number=line_number, error=exc)


def parse_lines(lines: Iterable[str]) -> RosterResult:
    result = RosterResult()
    for number, line in enumerate(lines, start=1):
        parsed = parse_line(line.rstrip("\r\n"), number)
        if parsed.student is not None:
            result.students.append(parsed.student)
        elif parsed.error is not None:
            logger.debug("roster_line_rejected", line=number, kind=parsed.error.kind.value)
            result.errors.append(parsed.error.message)
    return result


class StudentResultProcessor:
    def read_students(self, input_path: str | Path, error_log_path: str | Path) -> RosterResult:
        """
        Parse the roster at input_path.

        The error log is written only when at least one line was rejected.
        A leading BOM is skipped and undecodable bytes become U+FFFD, so encoding
        problems surface as ordinary field errors. FileNotFoundError and other
        OSErrors from opening the input propagate.
        """
        with Path(input_path).open("r", encoding="utf-8-sig", errors="replace") as fh:
            result = parse_lines(fh)

        if result.errors:
            Path(error_log_path).write_text("\n".join(result.errors) + "\n", encoding="utf-8")
            logger.info("roster_errors_written", path=str(error_log_path), count=len(result.errors))
        return result

    def write_report(self, students: Iterable[Student], output_path: str | Path) -> int:
        """Write one report line per student. Returns the number of lines written."""
        lines = [student.report_line() for student in students]
        with Path(output_path).open("w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
        return len(lines)
