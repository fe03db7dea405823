"""Application — composed from modules via app.register(module); runs console programs by name."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import structlog

from recordkeeper.core.container import Container
from recordkeeper.core.module import Module

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Program:
    """A runnable console program: entrypoint key in the container plus a one-line description."""

    name: str
    entrypoint: Any
    description: str = ""


class Application:
    """
    Application. Composed from modules via register(module).
    Each module contributes services to the container and, usually, one program.
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._programs: dict[str, Program] = {}
        self._container = Container()
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)

    def register(self, module: Module) -> Application:
        """Register a module (ProgramModule or any object with register_into). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        logger.debug("module_registered", module=module.name)
        return self

    def add_program(self, name: str, entrypoint: Any, description: str = "") -> None:
        """Expose a program. entrypoint is a container key resolving to a zero-argument callable."""
        if name in self._programs:
            raise ValueError(f"Program {name!r} is already registered")
        self._programs[name] = Program(name=name, entrypoint=entrypoint, description=description)

    @property
    def programs(self) -> list[Program]:
        """Registered programs in registration order."""
        return list(self._programs.values())

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    def run(self, name: str) -> int:
        """Run a program by name and return its exit code (None from the entrypoint counts as 0)."""
        program = self._programs.get(name)
        if program is None:
            raise KeyError(f"No program named {name!r}")
        log = logger.bind(program=name)
        log.debug("program_start")
        entry: Callable[[], Any] = self._container.resolve(program.entrypoint)
        result = entry()
        code = int(result) if result is not None else 0
        log.debug("program_finish", exit_code=code)
        return code
