"""Warehouse program: seed stock, list it, then walk through the failure cases."""
import typer

from recordkeeper.core import ProgramModule
from recordkeeper.domain import DuplicateKeyError, InvalidValueError

from .application import WarehouseManager
from .domain import ElectronicItem


class RunWarehouse:
    def __init__(self, manager: WarehouseManager):
        self._manager = manager

    def __call__(self) -> int:
        manager = self._manager

        typer.echo("Seeding data...")
        manager.seed_data()

        typer.echo("\n--- Grocery Items ---")
        manager.print_all_items(manager.groceries)

        typer.echo("\n--- Electronic Items ---")
        manager.print_all_items(manager.electronics)

        typer.echo("\n--- Testing Exception Scenarios ---")

        typer.echo("\nAdding duplicate item to electronics...")
        try:
            manager.electronics.add(ElectronicItem(1, "Tablet", 20, "BrandD", 18))
        except DuplicateKeyError as exc:
            typer.echo(f"DuplicateKeyError caught: {exc.message}")

        typer.echo("\nRemoving non-existent grocery item with ID 999...")
        manager.remove_item(manager.groceries, 999)

        typer.echo("\nUpdating grocery item quantity with invalid (negative) value...")
        try:
            manager.groceries.update_quantity(101, -10)
        except InvalidValueError as exc:
            typer.echo(f"InvalidValueError caught: {exc.message}")

        typer.echo("\nDone.")
        return 0


warehouse_module = (
    ProgramModule("warehouse", "Electronics and groceries stock with error handling")
    .bind(WarehouseManager)
    .entrypoint(RunWarehouse)
)
