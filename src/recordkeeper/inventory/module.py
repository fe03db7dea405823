"""Inventory program: log records, print them, persist to JSON."""
from __future__ import annotations

from datetime import datetime

import typer

from recordkeeper.core import ProgramModule, Settings

from .domain import InventoryItem
from .infrastructure import InventoryLogger


class RunInventory:
    def __init__(self, settings: Settings):
        self._logger = InventoryLogger(settings.inventory_path)

    def __call__(self) -> int:
        log = self._logger
        log.load_from_file()

        now = datetime.now()
        log.add(InventoryItem(id=1, name="Laptop", quantity=10, date_added=now))
        log.add(InventoryItem(id=2, name="Mouse", quantity=50, date_added=now))
        log.add(InventoryItem(id=3, name="Keyboard", quantity=25, date_added=now))

        typer.echo("Current inventory items:")
        for item in log.get_all():
            typer.echo(str(item))

        if log.save_to_file():
            typer.echo("Inventory saved to file.")
        return 0


inventory_module = (
    ProgramModule("inventory", "Inventory log persisted as JSON")
    .entrypoint(RunInventory)
)
