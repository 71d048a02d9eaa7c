"""Shared fixtures for dotpath tests."""

import logging
import os

import platformdirs
import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config, ./config and DOTPATH_* variables of the host out of tests."""
    for key in list(os.environ):
        if key.startswith("DOTPATH_"):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *args, **kwargs: str(user_dir))
    monkeypatch.chdir(tmp_path)
    return user_dir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
