"""Shared test fixtures for ccauth tests.

Most tests run against an in-memory environment store. Tests that exercise
the process environment use ``clean_process_env``, which removes every
variable ccauth reads or writes and lets monkeypatch restore them afterwards.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

from ccauth.auth.environment import MANAGED_AUTH_VARS
from ccauth.auth.storage.environment import ENV_MAP
from ccauth.config.settings import get_settings
from ccauth.core.env import MemoryEnvStore
from ccauth.core.logging import PACKAGE_LOGGER_NAME


AUTH_ENV_VARS = sorted(
    set(MANAGED_AUTH_VARS) | {name for names in ENV_MAP.values() for name in names}
)


@pytest.fixture(autouse=True)
def reset_logging_and_settings() -> Generator[None, None, None]:
    """Undo logging configuration and the settings cache after each test."""
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    get_settings.cache_clear()


@pytest.fixture
def env() -> MemoryEnvStore:
    """Empty in-memory environment store."""
    return MemoryEnvStore()


@pytest.fixture
def clean_process_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all auth-related variables from the process environment.

    Each variable is registered with monkeypatch before removal so that
    values written by the code under test are undone as well.
    """
    for name in AUTH_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
