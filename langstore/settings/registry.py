"""Реестр настроек хранилища, сохраняемый в JSON-файл."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from langstore.exceptions import SettingsNotFoundError, SettingsValidationError, TranslationIOError
from langstore.settings.groups import LoggingSettings, SettingsGroup, StorageSettings
from langstore.storage.codec import JsonCodec
from langstore.storage.file_store import read_json, write_json


class StoreSettings:
    """Набор групп настроек (storage, logging) с загрузкой и сохранением на диск."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._file_path = config_path
        self._groups: Dict[str, SettingsGroup] = {
            "storage": StorageSettings(),
            "logging": LoggingSettings(),
        }

    @property
    def config_path(self) -> Optional[Path]:
        """Путь к файлу конфигурации (None, если работаем только на дефолтах)."""

        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str) -> Any:
        return self.get_group(group).get(key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        self.get_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._groups[group]
        except KeyError:
            raise SettingsNotFoundError(group) from None

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: group.to_dict() for name, group in self._groups.items()}

    def validate(self) -> bool:
        """Перепроверяет все текущие значения."""

        for name, group in self._groups.items():
            for key in group.keys():
                value = group.get(key)
                is_valid, error = group.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(f"{name}.{key}", value, error)
        return True

    def reset_to_defaults(self) -> None:
        for group in self._groups.values():
            group.reset_to_defaults()

    def make_codec(self) -> JsonCodec:
        """Строит JSON-кодек по группе storage."""

        storage = self.get_group("storage")
        return JsonCodec(indent=storage.get("indent"), ensure_ascii=storage.get("ensure_ascii"))

    # ------------------------------------------------------------- persistence
    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Загружает конфигурацию; отсутствующий файл оставляет дефолты."""

        target = path or self._file_path
        if target is None:
            return
        content = read_json(target)
        if content is None:
            self._logger.info("Config file %s not found, using defaults.", target)
            return
        if not isinstance(content, dict):
            raise TranslationIOError(target, "config root must be a JSON object")
        for name, group in self._groups.items():
            group_data = content.get(name, {})
            if isinstance(group_data, dict):
                group.from_dict(group_data)
        self.validate()

    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        if target is None:
            raise TranslationIOError(Path("."), "no config path to save settings to")
        write_json(target, self.to_dict())
