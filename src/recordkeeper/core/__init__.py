from recordkeeper.core.app import Application, Program
from recordkeeper.core.config import Config, Settings, load_settings
from recordkeeper.core.container import Container
from recordkeeper.core.log import configure_logging
from recordkeeper.core.module import Module
from recordkeeper.core.program import ProgramModule

__all__ = [
    "Application",
    "Program",
    "Container",
    "Module",
    "ProgramModule",
    "Config",
    "Settings",
    "load_settings",
    "configure_logging",
]
