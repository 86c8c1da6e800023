import logging
from unittest.mock import MagicMock

from library_menu import config
from library_menu.config import Settings, configure_logging
from library_menu.validators import NumberValidator


def test_env_flag(monkeypatch):
    monkeypatch.setenv("LIBRARY_SEED_DEMO", "no")
    assert config._env_flag("LIBRARY_SEED_DEMO", "True") is False
    monkeypatch.setenv("LIBRARY_SEED_DEMO", "YES")
    assert config._env_flag("LIBRARY_SEED_DEMO", "False") is True
    monkeypatch.delenv("LIBRARY_SEED_DEMO")
    assert config._env_flag("LIBRARY_SEED_DEMO", "True") is True


def test_configure_logging_levels(monkeypatch):
    basic_config = MagicMock()
    monkeypatch.setattr(config.logging, "basicConfig", basic_config)

    configure_logging(Settings(log_level="INFO", debug=False))
    assert basic_config.call_args.kwargs["level"] == logging.INFO

    configure_logging(Settings(log_level="INFO", debug=True))
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    configure_logging(Settings(log_level="NOT-A-LEVEL", debug=False))
    assert basic_config.call_args.kwargs["level"] == logging.WARNING


def test_parse_int():
    assert NumberValidator.parse_int(" 42 ") == 42
    assert NumberValidator.parse_int("4.2") is None
    assert NumberValidator.parse_int("abc") is None
    assert NumberValidator.parse_int("") is None
    assert NumberValidator.parse_int(None) is None


def test_parse_float():
    assert NumberValidator.parse_float("2.5") == 2.5
    assert NumberValidator.parse_float("2,5") == 2.5
    assert NumberValidator.parse_float("3") == 3.0
    assert NumberValidator.parse_float("mb") is None


def test_parse_float_rejects_non_finite():
    assert NumberValidator.parse_float("nan") is None
    assert NumberValidator.parse_float("-inf") is None
    assert NumberValidator.parse_float("1e400") is None
