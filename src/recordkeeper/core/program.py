"""
ProgramModule — one object per console program.
Describes the services it needs and the entrypoint that drives it.
"""
from __future__ import annotations

from typing import Any, Callable, Type

from recordkeeper.core.app import Application
from recordkeeper.core.module import Module


class ProgramModule(Module):
    """
    One object = one program.
    .bind() .entrypoint()
    Register via app.register(module).
    """

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self._bindings: list[tuple[Any, Type[Any]]] = []
        self._entrypoint: Type[Any] | Callable[[], Any] | None = None

    def bind(self, interface: Any, impl: Type[Any] | None = None) -> ProgramModule:
        """Register a class (or interface -> implementation) built with container dependencies."""
        self._bindings.append((interface, impl or interface))
        return self

    def entrypoint(self, handler: Type[Any] | Callable[[], Any]) -> ProgramModule:
        """Handler class (resolved from the container, then called) or plain zero-argument function."""
        self._entrypoint = handler
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        # interface -> implementation
        for iface, impl in self._bindings:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        if self._entrypoint is None:
            return
        handler = self._entrypoint
        if isinstance(handler, type):
            container.register_class(handler, singleton=False)
            key: Any = handler
        else:
            key = f"program:{self.name}"
            container.register_instance(key, handler)
        app.add_program(self.name, key, self.description)
