"""Точка входа для приложений: настройки, логирование и таблица переводов."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from langstore import __version__
from langstore.settings.registry import StoreSettings
from langstore.translation.table import TranslationTable
from langstore.utils.logger import configure_logging, silence_logging

LOGGER = logging.getLogger(__name__)


def initialize_settings(
    config_path: Optional[Path] = None, *, lang_folder: Optional[Path | str] = None
) -> StoreSettings:
    """Загружает настройки из файла; явно переданный каталог языков важнее файла."""

    settings = StoreSettings(config_path)
    settings.load_from_disk()
    if lang_folder is not None:
        settings.set_value("storage", "lang_folder", str(lang_folder))
    return settings


def setup_logging_from_settings(settings: StoreSettings) -> None:
    """Настраивает логгер пакета в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        silence_logging()
        return

    configure_logging(
        Path(logging_settings.get("log_dir")),
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def open_translation_table(
    config_path: Optional[Path] = None, *, lang_folder: Optional[Path | str] = None
) -> TranslationTable:
    """Готовит настройки и логирование и открывает таблицу переводов."""

    settings = initialize_settings(config_path, lang_folder=lang_folder)
    setup_logging_from_settings(settings)

    storage = settings.get_group("storage")
    LOGGER.info("langstore %s: opening %s", __version__, storage.get("lang_folder"))
    return TranslationTable(
        storage.get("lang_folder"),
        extension=storage.get("extension"),
        codec=settings.make_codec(),
    )
