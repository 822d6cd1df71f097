import logging

import pytest

from pairlisp import config
from pairlisp.builtin.env_builtin import global_environment
from pairlisp.interpreter import Interpreter
from pairlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, logging.WARNING),
        ("", logging.WARNING),
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("10", 10),
        ("not-a-level", logging.WARNING),
    ]
)
def test_log_level_from_env(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PAIRLISP_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("PAIRLISP_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, True),
        ("1", True),
        ("yes", True),
        ("0", False),
        ("false", False),
        ("OFF", False),
    ]
)
def test_bind_nil_flag(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PAIRLISP_BIND_NIL", raising=False)
    else:
        monkeypatch.setenv("PAIRLISP_BIND_NIL", raw)
    assert config.get_bind_nil() is expected
    assert (Symbol("nil") in global_environment()) is expected


def test_configure_logging_sets_package_level():
    logger = logging.getLogger(config.PACKAGE_LOGGER)
    original = logger.level
    try:
        config.configure_logging(logging.ERROR)
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(original)


def test_define_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger=config.PACKAGE_LOGGER):
        Interpreter().eval("(define z (list 1 2))")
    assert "defined z = (1 2)" in caplog.text


def test_interpreter_keeps_host_log_level(monkeypatch):
    monkeypatch.setenv("PAIRLISP_LOG_LEVEL", "ERROR")
    logger = logging.getLogger(config.PACKAGE_LOGGER)
    original = logger.level
    try:
        logger.setLevel(logging.DEBUG)
        Interpreter()
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original)
