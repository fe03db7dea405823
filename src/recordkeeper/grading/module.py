"""Grading program: roster file in, graded report and error log out."""
from __future__ import annotations

from pathlib import Path

import structlog
import typer

from recordkeeper.core import ProgramModule, Settings

from .application import StudentResultProcessor

logger = structlog.get_logger(__name__)


def generate_report(
    processor: StudentResultProcessor,
    input_path: Path,
    report_path: Path,
    error_log_path: Path,
) -> int:
    """Read, grade and report. Returns an exit code; file problems are printed, not raised."""
    try:
        result = processor.read_students(input_path, error_log_path)
        processor.write_report(result.students, report_path)
    except FileNotFoundError:
        typer.echo(f"Error: Input file '{input_path}' not found.")
        return 1
    except OSError as exc:
        logger.error("grading_failed", error=str(exc))
        typer.echo(f"An unexpected error occurred: {exc}")
        return 1

    typer.echo(f"Report successfully generated at '{report_path}'.")
    if result.errors:
        typer.echo(f"Some errors occurred. See '{error_log_path}' for details.")
    return 0


class RunGrading:
    def __init__(self, settings: Settings, processor: StudentResultProcessor):
        self._settings = settings
        self._processor = processor

    def __call__(self) -> int:
        s = self._settings
        return generate_report(self._processor, s.students_path, s.report_path, s.error_log_path)


grading_module = (
    ProgramModule("grading", "Student roster graded into a summary report")
    .bind(StudentResultProcessor)
    .entrypoint(RunGrading)
)
