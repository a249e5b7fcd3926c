"""Shared pytest fixtures."""

import logging
from unittest.mock import Mock

import pytest

from statelab.app_state.state import Store
from statelab.shared.core.configuration import ENV_MAP


@pytest.fixture
def page():
    """Stand-in for ``ft.Page``; only ``update`` is called by the widgets."""
    return Mock()


@pytest.fixture
def store():
    Store.reset()
    instance = Store.initialize()
    yield instance
    Store.reset()


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_MAP:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    root.handlers.extend(handlers)
    root.setLevel(level)
