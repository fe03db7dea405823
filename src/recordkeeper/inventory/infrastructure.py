"""Infrastructure: inventory log kept in memory and persisted as a JSON file."""
from __future__ import annotations

import json
from pathlib import Path

import structlog
import typer

from .domain import InventoryItem

logger = structlog.get_logger(__name__)


class InventoryLogger:
    """
    Append-only log of inventory records backed by one JSON file.

    Loading is all-or-nothing: if any record in the file fails to decode,
    nothing is loaded and the in-memory log stays as it was.
    I/O problems are reported as messages; neither save nor load raises for them.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)
        self._log: list[InventoryItem] = []

    @property
    def file_path(self) -> Path:
        return self._file_path

    def add(self, item: InventoryItem) -> None:
        self._log.append(item)

    def get_all(self) -> list[InventoryItem]:
        return list(self._log)

    def save_to_file(self) -> bool:
        path = self._file_path
        try:
            payload = json.dumps([item.to_json() for item in self._log], indent=2)
            with path.open("w", encoding="utf-8") as fh:
                fh.write(payload)
        except PermissionError as exc:
            return self._report(f"Access denied when writing to file '{path}': {exc}")
        except OSError as exc:
            return self._report(f"I/O error when writing to file '{path}': {exc}")
        except (TypeError, ValueError) as exc:
            return self._report(f"Unexpected error when saving to file '{path}': {exc}")
        logger.info("inventory_saved", path=str(path), count=len(self._log))
        return True

    def load_from_file(self) -> bool:
        path = self._file_path
        if not path.exists():
            typer.echo(f"File '{path}' does not exist. No data loaded.")
            return False
        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh)
            if raw is None:
                typer.echo(f"No items found in file '{path}'.")
                return False
            if not isinstance(raw, list):
                raise TypeError(f"Expected a list of items, got {type(raw).__name__}")
            items = [InventoryItem.from_json(entry) for entry in raw]
        except PermissionError as exc:
            return self._report(f"Access denied when reading file '{path}': {exc}")
        except OSError as exc:
            return self._report(f"I/O error when reading file '{path}': {exc}")
        except (KeyError, TypeError, ValueError) as exc:
            return self._report(f"Data format error when reading file '{path}': {exc}")

        self._log = items
        typer.echo(f"Loaded {len(self._log)} items from '{path}'.")
        return True

    def _report(self, message: str) -> bool:
        logger.warning("inventory_file_error", detail=message)
        typer.echo(message)
        return False
