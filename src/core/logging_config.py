"""
Logging Config — центральная настройка логирования

Библиотечные модули только получают logger через get_logger(__name__)
и никогда не настраивают handlers при импорте. Handlers ставит
точка входа (CLI) через setup_logging.

Использование:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("long_div: %d quotient groups", steps)
"""

import logging
import sys
from typing import Final, TextIO

ROOT_LOGGER_NAME: Final[str] = "src"

LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """
    Logger для модуля.

    Args:
        name: Обычно __name__ модуля (например, 'src.core.math.division')
    """
    return logging.getLogger(name)


def setup_logging(
    level: int | str = DEFAULT_LOG_LEVEL,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Настройка корневого logger пакета.

    Повторный вызов заменяет ранее установленный handler, а не добавляет
    второй.

    Args:
        level: Уровень (int или имя, например 'DEBUG')
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Корневой logger пакета
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
