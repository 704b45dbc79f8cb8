"""Shared fixtures: isolate settings and logging from the host environment."""

import logging
import os

import pytest

from core.config import AppSettings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Runs each test from an empty directory with no MEDIASCOPE_* variables and
    a per-test user config dir, so no real `.env` or exported setting leaks
    into AppSettings.
    """
    for key in list(os.environ):
        if key.startswith("MEDIASCOPE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    # env_file is fixed when AppSettings is defined; point the user .env at tmp too
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env", str(tmp_path / "xdg" / "mediascope" / ".env")))
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Removes handlers installed by configure_logging after each test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler.get_name() == "mediascope":
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
