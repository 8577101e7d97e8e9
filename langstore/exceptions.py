"""Пользовательские исключения хранилища переводов."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence

LOGGER = logging.getLogger(__name__)


class TranslationError(Exception):
    """Базовое исключение для любых ошибок хранилища с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, логируя ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class TranslationIOError(TranslationError):
    """Поднимается при ошибках чтения/записи файлов языков."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"I/O error with file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )


class LanguageNotFoundError(TranslationError, LookupError):
    """Возникает, когда язык отсутствует в памяти."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(
            f"Language '{language}' not found",
            context={"language": language},
        )


class TranslationKeyNotFoundError(TranslationError, LookupError):
    """Возникает, когда в языке нет нужного ключа."""

    def __init__(self, language: str, key: str) -> None:
        self.language = language
        self.key = key
        super().__init__(
            f"Translation '{language}.{key}' not found",
            context={"language": language, "key": key},
        )


class BulkTranslationError(TranslationIOError):
    """Агрегирует сбои записи при обновлении ключа сразу в нескольких языках."""

    def __init__(
        self,
        key: str,
        languages: Iterable[str],
        failures: Sequence[TranslationIOError],
    ) -> None:
        self.key = key
        self.languages = sorted(languages)
        self.failures = list(failures)
        reasons = "; ".join(failure.message for failure in self.failures)
        path = self.failures[0].path if self.failures else Path(".")
        super().__init__(
            path,
            f"failed to persist '{key}' for {', '.join(self.languages)}: {reasons}",
        )


class SettingsNotFoundError(TranslationError, LookupError):
    """Возникает, когда нужный ключ/группа настроек отсутствуют."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(TranslationError, ValueError):
    """Сигнализирует о некорректном значении настройки."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )


class InvalidNameError(TranslationError, ValueError):
    """Имя языка или расширение файла не годится для построения пути."""

    def __init__(self, kind: str, value: Any, reason: str) -> None:
        self.kind = kind
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid {kind} {value!r}: {reason}",
            context={"kind": kind, "value": value, "reason": reason},
        )
