"""Module protocol: a named object with register_into(app) can be registered in the application."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from recordkeeper.core.app import Application


@runtime_checkable
class Module(Protocol):
    """Building block: configured externally, attached via app.register(module)."""

    name: str

    def register_into(self, app: Application) -> None:
        """Put services into app.container and, for a runnable module, add its program."""
        ...
