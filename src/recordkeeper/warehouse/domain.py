"""Warehouse domain: stock items. Quantity is the only field that changes after creation."""
from __future__ import annotations

from datetime import date

from recordkeeper.domain import Entity


class StockItem(Entity):
    def __init__(self, id: int, name: str, quantity: int) -> None:
        super().__init__(id)
        self.name = name
        self.quantity = quantity


class ElectronicItem(StockItem):
    def __init__(self, id: int, name: str, quantity: int, brand: str, warranty_months: int) -> None:
        super().__init__(id, name, quantity)
        self.brand = brand
        self.warranty_months = warranty_months

    def __str__(self) -> str:
        return (
            f"[Electronic] Id: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Brand: {self.brand}, WarrantyMonths: {self.warranty_months}"
        )


class GroceryItem(StockItem):
    def __init__(self, id: int, name: str, quantity: int, expiry_date: date) -> None:
        super().__init__(id, name, quantity)
        self.expiry_date = expiry_date

    def __str__(self) -> str:
        return (
            f"[Grocery] Id: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"ExpiryDate: {self.expiry_date:%Y-%m-%d}"
        )
