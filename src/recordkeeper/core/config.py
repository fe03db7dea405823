"""Single config object: passed to Application(config=...) and available via DI."""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class Config:
    """Helpers for building settings from the process environment."""

    @classmethod
    def load_from_env(cls, prefix: str = "RECORDKEEPER_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Settings(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass
class Settings:
    """
    File locations and log level for the programs.
    Relative file names are resolved against data_dir.
    """

    data_dir: Path = field(default_factory=lambda: Path("."))
    inventory_file: str = "inventory_log.json"
    students_file: str = "students.txt"
    report_file: str = "summary_report.txt"
    error_log_file: str = "error_log.txt"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)

    def path(self, name: str) -> Path:
        return self.data_dir / name

    @property
    def inventory_path(self) -> Path:
        return self.path(self.inventory_file)

    @property
    def students_path(self) -> Path:
        return self.path(self.students_file)

    @property
    def report_path(self) -> Path:
        return self.path(self.report_file)

    @property
    def error_log_path(self) -> Path:
        return self.path(self.error_log_file)


def load_settings(prefix: str = "RECORDKEEPER_", **defaults: Any) -> Settings:
    """Settings from env (RECORDKEEPER_DATA_DIR, RECORDKEEPER_LOG_LEVEL, ...); unknown keys are ignored."""
    known = {f.name for f in dataclasses.fields(Settings)}
    values = Config.load_from_env(prefix, **defaults)
    return Settings(**{k: v for k, v in values.items() if k in known})
