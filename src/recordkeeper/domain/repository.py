"""Repository — interface for keyed entity storage, plus the in-memory implementation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Optional, TypeVar

import structlog

from recordkeeper.domain.entity import Identified
from recordkeeper.domain.errors import DuplicateKeyError, InvalidValueError, NotFoundError

T = TypeVar("T", bound=Identified)

logger = structlog.get_logger(__name__)


class Repository(ABC, Generic[T]):
    """Repository interface: add new, get by id, remove, list all."""

    @abstractmethod
    def add(self, entity: T) -> None:
        ...

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        ...

    @abstractmethod
    def remove(self, id: int) -> None:
        ...

    @abstractmethod
    def get_all(self) -> list[T]:
        ...


class KeyedRepository(Repository[T]):
    """
    In-memory repository keyed by entity id.

    At most one entity per id. Insertion order is kept for display only.
    Not thread-safe: callers sharing an instance across threads must lock around it.
    """

    def __init__(self, entities: Iterable[T] = (), name: str | None = None) -> None:
        self._items: dict[int, T] = {}
        self._log = logger.bind(repository=name or type(self).__name__)
        for entity in entities:
            self.add(entity)

    def add(self, entity: T) -> None:
        """Insert entity. Raises DuplicateKeyError if its id is taken; the stored entity is kept."""
        if entity.id in self._items:
            self._log.debug("add_rejected_duplicate", id=entity.id)
            raise DuplicateKeyError(entity.id)
        self._items[entity.id] = entity
        self._log.debug("added", id=entity.id, size=len(self._items))

    def get_by_id(self, id: int) -> T:
        """Return the entity stored under id. Raises NotFoundError."""
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError(id) from None

    def remove(self, id: int) -> None:
        """Delete the entity stored under id. Raises NotFoundError."""
        if id not in self._items:
            raise NotFoundError(id)
        del self._items[id]
        self._log.debug("removed", id=id, size=len(self._items))

    def update_quantity(self, id: int, new_quantity: int) -> None:
        """
        Overwrite the quantity of the entity stored under id, in place.

        The value is validated before the lookup: a negative quantity raises
        InvalidValueError even for an unknown id; otherwise an unknown id raises NotFoundError.
        An entity without a writable quantity field raises InvalidValueError.
        """
        if new_quantity < 0:
            raise InvalidValueError("Quantity cannot be negative.")
        entity = self.get_by_id(id)
        if not hasattr(entity, "quantity"):
            raise InvalidValueError(f"Item with ID {id} has no quantity.")
        try:
            entity.quantity = new_quantity  # type: ignore[attr-defined]
        except AttributeError:
            raise InvalidValueError(f"Quantity of item with ID {id} cannot be changed.") from None
        self._log.debug("quantity_updated", id=id, quantity=new_quantity)

    def get_all(self) -> list[T]:
        """Snapshot of all entities; changing the list does not touch the repository."""
        return list(self._items.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First entity (in insertion order) matching predicate, or None."""
        return next((e for e in self._items.values() if predicate(e)), None)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items
