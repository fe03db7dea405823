"""Shared fixtures for recordkeeper tests."""

import pytest

from recordkeeper.core import Settings, configure_logging


@pytest.fixture(autouse=True, scope="session")
def _logging():
    configure_logging("WARNING")


@pytest.fixture
def settings(tmp_path):
    """Settings with every data file under a temporary directory."""
    return Settings(data_dir=tmp_path)
