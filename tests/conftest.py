"""Shared fixtures for the short id tests."""

import sys

import pytest
from loguru import logger

from shortid.default import reset_default
from shortid.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch: pytest.MonkeyPatch):
    """Run every test with default settings, no default generator and package logging off."""
    for var in ["SHORTID_WORKER", "SHORTID_SEED", "SHORTID_ALPHABET", "SHORTID_NORMALIZE_ALPHABET", "SHORTID_EPOCH", "SHORTID_LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    reset_default()
    logger.disable("shortid")
    yield
    get_settings.cache_clear()
    reset_default()
    # CLI runs install sinks on the runner's streams
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("shortid")
