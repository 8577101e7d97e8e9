"""Настройка логирования пакета langstore без вмешательства в логирование хоста."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER: Final[str] = "langstore"

# уровень выше CRITICAL глушит все дочерние логгеры пакета
SILENT_LEVEL: Final[int] = logging.CRITICAL + 1


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level


def configure_logging(
    log_dir: Path,
    *,
    log_file_name: str = "langstore.log",
    level_name: str = "INFO",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    console: bool = True,
) -> logging.Logger:
    """Вешает на логгер пакета ротацию файла логов и (опционально) вывод в stdout.

    Корневой логгер и обработчики хоста не трогаются; записи по-прежнему
    всплывают к корню.
    """

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)
    logger = get_logger(PACKAGE_LOGGER)
    _drop_handlers(logger)

    file_handler = RotatingFileHandler(
        log_dir / log_file_name,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    logger.setLevel(resolve_log_level(level_name))
    return logger


def silence_logging() -> None:
    """Отключает вывод всех логгеров пакета."""

    logger = get_logger(PACKAGE_LOGGER)
    _drop_handlers(logger)
    logger.setLevel(SILENT_LEVEL)


def reset_logging() -> None:
    """Возвращает логгер пакета в исходное состояние."""

    logger = get_logger(PACKAGE_LOGGER)
    _drop_handlers(logger)
    logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
