"""ValueObject — immutable record; equality by fields."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValueObject:
    """Value object: equality by all fields (via dataclass). Change by copying, never in place."""

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
