"""Shared test configuration and fixtures for bankshot."""

import logging
import os

import pytest

from bankshot.config import Config
from bankshot.core import ShotSolver, TableGeometry


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give every test a fresh Config singleton and no BANKSHOT_* overrides."""
    for name in list(os.environ):
        if name.startswith(Config.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture()
def table():
    """Standard 8-foot table."""
    return TableGeometry.standard()


@pytest.fixture()
def solver(table):
    """Solver for the standard table."""
    return ShotSolver(table)


@pytest.fixture()
def missing_config(tmp_path):
    """Path to a config file that does not exist (defaults apply)."""
    return tmp_path / "config.json"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
