"""Domain layer base classes: Entity, ValueObject, Repository, errors."""
from recordkeeper.domain.entity import Entity, Identified
from recordkeeper.domain.errors import (
    DuplicateKeyError,
    ErrorKind,
    InvalidIdFormatError,
    InvalidScoreFormatError,
    InvalidValueError,
    MalformedRecordError,
    MissingFieldError,
    NotFoundError,
    RecordKeeperError,
)
from recordkeeper.domain.repository import KeyedRepository, Repository
from recordkeeper.domain.value_object import ValueObject

__all__ = [
    "Entity",
    "Identified",
    "ValueObject",
    "Repository",
    "KeyedRepository",
    "ErrorKind",
    "RecordKeeperError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidValueError",
    "MalformedRecordError",
    "MissingFieldError",
    "InvalidIdFormatError",
    "InvalidScoreFormatError",
]
