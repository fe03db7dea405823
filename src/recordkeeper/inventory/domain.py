"""Inventory domain: immutable inventory record."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from recordkeeper.domain import ValueObject


@dataclass(frozen=True)
class InventoryItem(ValueObject):
    id: int
    name: str
    quantity: int
    date_added: datetime

    def to_json(self) -> dict[str, Any]:
        data = self.to_dict()
        data["date_added"] = self.date_added.isoformat()
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> InventoryItem:
        """Build from a decoded JSON object. Raises KeyError, TypeError or ValueError on bad input."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")
        item_id, quantity = data["id"], data["quantity"]
        if not isinstance(item_id, int) or not isinstance(quantity, int):
            raise TypeError("id and quantity must be integers")
        return cls(
            id=item_id,
            name=str(data["name"]),
            quantity=quantity,
            date_added=datetime.fromisoformat(data["date_added"]),
        )

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, Added: {self.date_added:%Y-%m-%d %H:%M:%S}"
