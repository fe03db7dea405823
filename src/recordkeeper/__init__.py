"""
recordkeeper — small record-keeping programs over a keyed entity repository.
Application is composed from module objects via app.register(module).
"""
from recordkeeper.core import Application, Config, Container, Module, ProgramModule, Settings, load_settings
from recordkeeper.domain import KeyedRepository, Repository

__all__ = [
    "Application",
    "Config",
    "Container",
    "KeyedRepository",
    "Module",
    "ProgramModule",
    "Repository",
    "Settings",
    "load_settings",
]
