"""
Тесты для Logging Config

Проверяет:
1. get_logger возвращает logger в иерархии пакета
2. setup_logging: уровень, формат, замену handler
3. Отказ для неизвестного имени уровня
"""

import io
import logging

import pytest

from src.core.logging_config import (
    DEFAULT_LOG_LEVEL,
    ROOT_LOGGER_NAME,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


def test_get_logger_uses_module_name():
    logger = get_logger("src.core.math.division")
    assert logger.name == "src.core.math.division"
    assert logger is logging.getLogger("src.core.math.division")


def test_setup_logging_default_level():
    root = setup_logging(stream=io.StringIO())
    assert root.name == ROOT_LOGGER_NAME
    assert root.level == DEFAULT_LOG_LEVEL == logging.WARNING


def test_setup_logging_accepts_level_name():
    root = setup_logging("debug", stream=io.StringIO())
    assert root.level == logging.DEBUG


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("TRACE")


def test_setup_logging_replaces_handler():
    first, second = io.StringIO(), io.StringIO()
    setup_logging(logging.INFO, stream=first)
    root = setup_logging(logging.INFO, stream=second)
    assert len(root.handlers) == 1

    get_logger("src.calculator.dispatcher").info("Session finished")
    assert first.getvalue() == ""
    assert "Session finished" in second.getvalue()


def test_log_format():
    stream = io.StringIO()
    setup_logging(logging.WARNING, stream=stream)

    get_logger("src.core.math.codec").warning("Rejected layout")
    line = stream.getvalue().strip()
    assert "[WARNING ]" in line
    assert "[src.core.math.codec]" in line
    assert line.endswith("Rejected layout")


def test_level_filters_records():
    stream = io.StringIO()
    setup_logging(logging.WARNING, stream=stream)

    get_logger("src.core.math.division").debug("long_div: 3 quotient groups")
    assert stream.getvalue() == ""
