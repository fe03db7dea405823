"""Errors raised by repositories and record parsers. Each carries an explicit ErrorKind."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MALFORMED_RECORD = "malformed_record"


class RecordKeeperError(Exception):
    """Base error; subclasses fix kind."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateKeyError(RecordKeeperError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {key} already exists.")
        self.key = key


class NotFoundError(RecordKeeperError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {key} not found.")
        self.key = key


class InvalidValueError(RecordKeeperError):
    """A value failed validation (e.g. negative quantity)."""

    kind = ErrorKind.INVALID_VALUE


class MalformedRecordError(RecordKeeperError):
    """An input line failed structural or range validation."""

    kind = ErrorKind.MALFORMED_RECORD


class MissingFieldError(MalformedRecordError):
    pass


class InvalidIdFormatError(MalformedRecordError):
    pass


class InvalidScoreFormatError(MalformedRecordError):
    pass
