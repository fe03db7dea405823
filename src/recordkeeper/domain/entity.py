"""Entity — identity-bearing object with a fixed integer id."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Identified(Protocol):
    """Anything a keyed repository can store: exposes an integer id."""

    @property
    def id(self) -> int:
        ...


class Entity:
    """Entity: equality by type and id. The id is set once and cannot be reassigned."""

    def __init__(self, id: int) -> None:
        self._id = id

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(other) is not type(self):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
