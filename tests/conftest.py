import logging

import pytest

from jwt_codec import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests independent of a local config/config.yaml and env vars."""
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv(config.ENV_MODE, raising=False)
    monkeypatch.delenv(config.ENV_VERBOSE, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
