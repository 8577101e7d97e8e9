"""Группы настроек хранилища переводов."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Tuple

from langstore.exceptions import SettingsNotFoundError, SettingsValidationError
from langstore.settings.validators import (
    EnumValidator,
    NonEmptyStringValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    ValidationResult,
    Validator,
)

EXTENSION_PATTERN = r"^[A-Za-z0-9]+$"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsGroup(ABC):
    """Именованный набор настроек с дефолтами и валидаторами."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = self._build_defaults()
        self._validators: Dict[str, Validator] = self._build_validators()
        self._values: Dict[str, Any] = {}
        self.reset_to_defaults()

    @abstractmethod
    def _build_defaults(self) -> Dict[str, Any]:
        """Возвращает значения по умолчанию."""

    @abstractmethod
    def _build_validators(self) -> Dict[str, Validator]:
        """Возвращает валидаторы по ключам."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults)

    def get(self, key: str) -> Any:
        self._require_key(key)
        return self._values[key]

    def validate(self, key: str, value: Any) -> ValidationResult:
        validator = self._validators.get(key)
        if validator is None:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        self._require_key(key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(f"{self.group_name}.{key}", value, error)
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Mapping[str, Any]) -> None:
        """Заполняет группу из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)

    def _require_key(self, key: str) -> None:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)


class StorageSettings(SettingsGroup):
    """Где лежат файлы языков и как они сериализуются."""

    group_name = "storage"

    def _build_defaults(self) -> Dict[str, Any]:
        return {
            "lang_folder": "./lang",
            "extension": "json",
            "indent": 2,
            "ensure_ascii": False,
        }

    def _build_validators(self) -> Dict[str, Validator]:
        return {
            "lang_folder": NonEmptyStringValidator(),
            "extension": RegexValidator(EXTENSION_PATTERN),
            "indent": RangeValidator(0, 8),
            "ensure_ascii": TypeValidator(bool),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования."""

    group_name = "logging"

    def _build_defaults(self) -> Dict[str, Any]:
        return {
            "enabled": True,
            "level": "INFO",
            "log_dir": "./logs",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _build_validators(self) -> Dict[str, Validator]:
        return {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(LOG_LEVELS),
            "log_dir": NonEmptyStringValidator(),
            "max_file_size_mb": RangeValidator(1, 1024),
            "max_archived_files": RangeValidator(1, 50),
        }
