"""
Tests for warehouse stock management.
"""

from datetime import date

import pytest

from recordkeeper.domain import DuplicateKeyError, InvalidValueError
from recordkeeper.main import create_app
from recordkeeper.warehouse import ElectronicItem, GroceryItem, WarehouseManager

TODAY = date(2026, 10, 19)


@pytest.fixture
def manager():
    wm = WarehouseManager()
    wm.seed_data(today=TODAY)
    return wm


class TestWarehouseManager:
    """Tests for WarehouseManager."""

    def test_seed(self, manager):
        assert [i.name for i in manager.electronics.get_all()] == ["Smartphone", "Laptop", "Headphones"]
        assert manager.groceries.get_by_id(102).expiry_date == date(2026, 10, 22)

    def test_seed_twice_reports_duplicate(self, manager, capsys):
        manager.seed_data(today=TODAY)
        assert "[SeedData Error]: Item with ID 1 already exists." in capsys.readouterr().out
        assert len(manager.electronics) == 3

    def test_increase_stock(self, manager, capsys):
        assert manager.increase_stock(manager.groceries, 101, 25) is True
        assert manager.groceries.get_by_id(101).quantity == 225
        assert "New quantity: 225" in capsys.readouterr().out

    def test_increase_stock_unknown_item(self, manager, capsys):
        assert manager.increase_stock(manager.groceries, 999, 5) is False
        assert "[Error] Item not found: Item with ID 999 not found." in capsys.readouterr().out

    def test_increase_stock_negative_amount(self, manager, capsys):
        assert manager.increase_stock(manager.electronics, 1, -5) is False
        assert "[Error] Invalid quantity: Increase quantity must be positive." in capsys.readouterr().out
        assert manager.electronics.get_by_id(1).quantity == 50

    def test_remove_item(self, manager, capsys):
        assert manager.remove_item(manager.electronics, 3) is True
        assert 3 not in manager.electronics
        assert manager.remove_item(manager.electronics, 3) is False
        out = capsys.readouterr().out
        assert "Item with ID 3 removed successfully." in out
        assert "[Error] Item not found" in out

    def test_print_empty_repository(self, capsys):
        wm = WarehouseManager()
        wm.print_all_items(wm.groceries)
        assert "No items found." in capsys.readouterr().out

    def test_duplicate_add_keeps_original(self, manager):
        with pytest.raises(DuplicateKeyError):
            manager.electronics.add(ElectronicItem(1, "Tablet", 20, "BrandD", 18))
        assert manager.electronics.get_by_id(1).name == "Smartphone"

    def test_negative_update_keeps_quantity(self, manager):
        with pytest.raises(InvalidValueError):
            manager.groceries.update_quantity(101, -10)
        assert manager.groceries.get_by_id(101).quantity == 200

    def test_item_str(self):
        assert str(GroceryItem(1, "Milk", 2, TODAY)) == "[Grocery] Id: 1, Name: Milk, Quantity: 2, ExpiryDate: 2026-10-19"
        assert str(ElectronicItem(2, "Laptop", 3, "BrandB", 36)) == (
            "[Electronic] Id: 2, Name: Laptop, Quantity: 3, Brand: BrandB, WarrantyMonths: 36"
        )


class TestWarehouseProgram:
    """Tests for the warehouse program entrypoint."""

    def test_program(self, settings, capsys):
        assert create_app(settings).run("warehouse") == 0
        out = capsys.readouterr().out
        assert "--- Grocery Items ---" in out
        assert "DuplicateKeyError caught: Item with ID 1 already exists." in out
        assert "[Error] Item not found: Item with ID 999 not found." in out
        assert "InvalidValueError caught: Quantity cannot be negative." in out
        assert out.rstrip().endswith("Done.")
