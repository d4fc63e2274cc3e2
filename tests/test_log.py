"""Tests for logging setup."""

import logging

import pytest

from msvg.utils import log as log_mod


@pytest.fixture
def fresh_root(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(log_mod, "_LOGGER_CONFIGURED", False)
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(fresh_root):
    before = len(fresh_root.handlers)
    log_mod.setup_logging(level=logging.DEBUG)
    assert len(fresh_root.handlers) == before + 1
    assert fresh_root.level == logging.DEBUG


def test_file_handler(fresh_root, tmp_path):
    log_mod.setup_logging(tmp_path / "logs")
    log_mod.get_logger("msvg.test").warning("hola")
    for h in fresh_root.handlers:
        h.flush()
    assert "hola" in (tmp_path / "logs" / log_mod.LOG_FILE_NAME).read_text(encoding="utf-8")


def test_idempotent(fresh_root):
    log_mod.setup_logging()
    n = len(fresh_root.handlers)
    log_mod.setup_logging()
    assert len(fresh_root.handlers) == n
