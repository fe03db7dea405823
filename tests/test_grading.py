"""
Tests for roster parsing, grading and the report.
"""

import pytest

from recordkeeper.domain import (
    ErrorKind,
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
)
from recordkeeper.grading import StudentResultProcessor, grade_for, parse_line, parse_lines
from recordkeeper.main import create_app


class TestGradeScale:
    """Tests for grade_for."""

    @pytest.mark.parametrize(
        "score, grade",
        [(100, "A"), (80, "A"), (79, "B"), (70, "B"), (69, "C"), (60, "C"), (59, "D"), (50, "D"), (49, "F"), (0, "F")],
    )
    def test_thresholds(self, score, grade):
        assert grade_for(score) == grade


class TestParseLine:
    """Tests for parse_line."""

    def test_valid_line_with_spaces(self):
        result = parse_line("1, John Doe, 85")
        assert result.ok
        student = result.student
        assert (student.id, student.full_name, student.score, student.grade) == (1, "John Doe", 85, "A")

    def test_missing_field(self):
        result = parse_line("2,Jane", 4)
        assert result.student is None
        assert isinstance(result.error, MissingFieldError)
        assert result.error.kind is ErrorKind.MALFORMED_RECORD
        assert result.error.message == "Line 4: Missing fields. Expected 3, got 2."

    def test_empty_field(self):
        result = parse_line("2, ,70", 1)
        assert isinstance(result.error, MissingFieldError)
        assert "One or more fields are empty" in result.error.message

    def test_out_of_range_score(self):
        result = parse_line("3,Sam,150", 2)
        assert result.student is None
        assert isinstance(result.error, InvalidScoreFormatError)
        assert result.error.message == "Line 2: Score 150 is out of valid range (0-100)."

    def test_negative_score(self):
        assert isinstance(parse_line("3,Sam,-1").error, InvalidScoreFormatError)

    def test_non_numeric_score(self):
        result = parse_line("3,Sam,high")
        assert isinstance(result.error, InvalidScoreFormatError)
        assert "Invalid score format 'high'" in result.error.message

    def test_non_numeric_id(self):
        result = parse_line("x1,Sam,70")
        assert isinstance(result.error, InvalidIdFormatError)
        assert "Invalid ID format 'x1'" in result.error.message

    def test_decimal_score_rejected(self):
        assert isinstance(parse_line("4,Ann,70.5").error, InvalidScoreFormatError)

    def test_extra_fields_ignored(self):
        assert parse_line("5,Ann,70,extra").student.score == 70

    def test_blank_line_is_missing_fields(self):
        assert isinstance(parse_line("").error, MissingFieldError)


class TestParseLines:
    """Tests for parse_lines."""

    def test_bad_lines_do_not_stop_parsing(self):
        result = parse_lines(["1, John Doe, 85\n", "2,Jane\n", "3,Sam,150\n", "4,Mia,55\n"])
        assert [s.id for s in result.students] == [1, 4]
        assert len(result.errors) == 2
        assert result.errors[0].startswith("Line 2:")
        assert result.errors[1].startswith("Line 3:")


class TestStudentResultProcessor:
    """Tests for file-based processing."""

    def test_read_and_report(self, tmp_path):
        roster = tmp_path / "students.txt"
        roster.write_text("1, John Doe, 85\n2,Jane\n3,Sam,150\n4,Mia Wong,62\n")
        errors = tmp_path / "errors.txt"
        report = tmp_path / "report.txt"

        processor = StudentResultProcessor()
        result = processor.read_students(roster, errors)
        assert processor.write_report(result.students, report) == 2

        assert report.read_text().splitlines() == [
            "John Doe (ID: 1): Score = 85, Grade = A",
            "Mia Wong (ID: 4): Score = 62, Grade = C",
        ]
        assert errors.read_text().splitlines() == [
            "Line 2: Missing fields. Expected 3, got 2.",
            "Line 3: Score 150 is out of valid range (0-100).",
        ]

    def test_error_log_not_written_without_errors(self, tmp_path):
        roster = tmp_path / "students.txt"
        roster.write_text("1,Ann,90\n")
        errors = tmp_path / "errors.txt"
        result = StudentResultProcessor().read_students(roster, errors)
        assert result.errors == []
        assert not errors.exists()

    def test_bom_prefixed_roster_keeps_first_row(self, tmp_path):
        roster = tmp_path / "students.txt"
        roster.write_bytes("\ufeff1,Ann,90\n2,Bob,70\n".encode("utf-8"))
        errors = tmp_path / "errors.txt"

        result = StudentResultProcessor().read_students(roster, errors)

        assert [s.id for s in result.students] == [1, 2]
        assert result.errors == []
        assert not errors.exists()

    def test_missing_input_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StudentResultProcessor().read_students(tmp_path / "nope.txt", tmp_path / "e.txt")


class TestGradingProgram:
    """Tests for the grading program entrypoint."""

    def test_missing_input_is_reported(self, settings, capsys):
        assert create_app(settings).run("grading") == 1
        assert "Error: Input file" in capsys.readouterr().out

    def test_generates_report(self, settings, capsys):
        settings.students_path.write_text("1,Ann,90\n2,Bob\n")
        assert create_app(settings).run("grading") == 0
        out = capsys.readouterr().out
        assert "Report successfully generated" in out
        assert "Some errors occurred" in out
        assert settings.report_path.read_text() == "Ann (ID: 1): Score = 90, Grade = A\n"

    def test_non_utf8_roster_does_not_crash(self, settings, capsys):
        settings.students_path.write_bytes("1,Jos\xe9,90\n2,Bob,70\n".encode("latin-1"))

        assert create_app(settings).run("grading") == 0

        assert "Report successfully generated" in capsys.readouterr().out
        lines = settings.report_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Jos\ufffd (ID: 1): Score = 90, Grade = A"
        assert lines[1] == "Bob (ID: 2): Score = 70, Grade = B"
