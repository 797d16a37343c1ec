"""Pytest fixtures for haikunator tests."""

import logging

import pytest

from haikunator.core import settings
from haikunator.core.settings import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep user config files and HAIKUNATOR_* variables out of tests."""
    monkeypatch.setattr(settings, "CONFIG_LOCATIONS", [])
    for env_name in ENV_VARS:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture(autouse=True)
def reset_log_level():
    """Undo the level set by the CLI's setup_logging."""
    yield
    logging.getLogger("haikunator").setLevel(logging.NOTSET)
