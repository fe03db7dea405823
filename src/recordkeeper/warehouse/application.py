"""Warehouse application: stock levels for electronics and groceries."""
from __future__ import annotations

from datetime import date, timedelta
from typing import TypeVar

import structlog
import typer

from recordkeeper.domain import (
    DuplicateKeyError,
    ErrorKind,
    InvalidValueError,
    KeyedRepository,
    RecordKeeperError,
)

from .domain import ElectronicItem, GroceryItem, StockItem

S = TypeVar("S", bound=StockItem)

logger = structlog.get_logger(__name__)

_ERROR_LABELS = {
    ErrorKind.DUPLICATE_KEY: "Duplicate item",
    ErrorKind.NOT_FOUND: "Item not found",
    ErrorKind.INVALID_VALUE: "Invalid quantity",
}


def report_error(exc: RecordKeeperError) -> None:
    label = _ERROR_LABELS.get(exc.kind, "Unexpected error")
    logger.info("warehouse_operation_failed", kind=exc.kind.value, detail=exc.message)
    typer.echo(f"[Error] {label}: {exc.message}")


class WarehouseManager:
    def __init__(self) -> None:
        self.electronics: KeyedRepository[ElectronicItem] = KeyedRepository(name="electronics")
        self.groceries: KeyedRepository[GroceryItem] = KeyedRepository(name="groceries")

    def seed_data(self, today: date | None = None) -> None:
        today = today or date.today()
        try:
            self.electronics.add(ElectronicItem(1, "Smartphone", 50, "BrandA", 24))
            self.electronics.add(ElectronicItem(2, "Laptop", 30, "BrandB", 36))
            self.electronics.add(ElectronicItem(3, "Headphones", 150, "BrandC", 12))

            self.groceries.add(GroceryItem(101, "Milk", 200, today + timedelta(days=7)))
            self.groceries.add(GroceryItem(102, "Bread", 100, today + timedelta(days=3)))
            self.groceries.add(GroceryItem(103, "Eggs", 300, today + timedelta(days=14)))
        except DuplicateKeyError as exc:
            typer.echo(f"[SeedData Error]: {exc.message}")

    def print_all_items(self, repo: KeyedRepository[S]) -> None:
        items = repo.get_all()
        for item in items:
            typer.echo(str(item))
        if not items:
            typer.echo("No items found.")

    def increase_stock(self, repo: KeyedRepository[S], id: int, quantity_to_add: int) -> bool:
        """Add to an item's quantity. Errors are reported, not raised; returns whether stock changed."""
        try:
            item = repo.get_by_id(id)
            if quantity_to_add < 0:
                raise InvalidValueError("Increase quantity must be positive.")
            repo.update_quantity(id, item.quantity + quantity_to_add)
        except RecordKeeperError as exc:
            report_error(exc)
            return False
        typer.echo(f"Increased stock for item ID {id} by {quantity_to_add}. New quantity: {item.quantity}")
        return True

    def remove_item(self, repo: KeyedRepository[S], id: int) -> bool:
        try:
            repo.remove(id)
        except RecordKeeperError as exc:
            report_error(exc)
            return False
        typer.echo(f"Item with ID {id} removed successfully.")
        return True
