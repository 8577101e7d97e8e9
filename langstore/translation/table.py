"""Таблица переводов: язык -> ключ -> строка, по JSON-файлу на язык."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from langstore.exceptions import (
    BulkTranslationError,
    InvalidNameError,
    LanguageNotFoundError,
    TranslationIOError,
    TranslationKeyNotFoundError,
)
from langstore.storage.codec import DEFAULT_CODEC, JsonCodec
from langstore.storage.file_store import list_file_base_names, read_json, write_json
from langstore.utils.paths import DEFAULT_LANG_FOLDER


class TranslationTable:
    """Держит переводы всех языков в памяти и синхронизирует их с каталогом языков."""

    def __init__(
        self,
        lang_folder: Path | str = DEFAULT_LANG_FOLDER,
        *,
        extension: str = "json",
        codec: JsonCodec = DEFAULT_CODEC,
    ) -> None:
        if not extension or "." in extension or "/" in extension:
            raise InvalidNameError(
                "extension", extension, "expected a non-empty suffix without dots"
            )
        self._lang_folder = Path(lang_folder)
        self._extension = extension
        self._codec = codec
        self._logger = logging.getLogger(__name__)
        self._translations: Dict[str, Dict[str, str]] = {}
        self.reload_all()

    @property
    def lang_folder(self) -> Path:
        """Каталог с файлами языков."""

        return self._lang_folder

    def languages(self) -> List[str]:
        """Возвращает отсортированный список загруженных языков."""

        return sorted(self._translations)

    def language_path(self, language: str) -> Path:
        _check_language(language)
        return self._lang_folder / f"{language}.{self._extension}"

    def __contains__(self, language: object) -> bool:
        return language in self._translations

    def __len__(self) -> int:
        return len(self._translations)

    # ------------------------------------------------------------- persistence --
    def reload_all(self) -> None:
        """Перечитывает все файлы языков из каталога."""

        names = list_file_base_names(self._lang_folder, self._extension)
        for language in names:
            self.reload_one(language)
        self._logger.info("Loaded %d language(s) from %s", len(names), self._lang_folder)

    def reload_one(self, language: str) -> None:
        """Перечитывает файл одного языка; пропавший файл убирает язык из памяти."""

        path = self.language_path(language)
        content = read_json(path, codec=self._codec)
        if content is None:
            if self._translations.pop(language, None) is not None:
                self._logger.info("Language file %s is gone, dropping '%s'", path, language)
            return
        if not isinstance(content, dict):
            raise TranslationIOError(path, f"expected a JSON object, got {type(content).__name__}")
        self._translations[language] = content

    def save_all(self) -> None:
        """Записывает все языки; уже записанные файлы при сбое не откатываются."""

        for language in list(self._translations):
            self.save_one(language)

    def save_one(self, language: str) -> None:
        """Записывает один язык в его файл."""

        try:
            mapping = self._translations[language]
        except KeyError:
            raise LanguageNotFoundError(language) from None
        write_json(self.language_path(language), mapping, codec=self._codec)

    # --------------------------------------------------------------------- API --
    def set_language(self, language: str, mapping: Mapping[str, str]) -> None:
        """Целиком заменяет переводы языка и синхронизирует его с диском."""

        _check_language(language)
        self._translations[language] = dict(mapping)
        self._persist(language)

    def get_language(self, language: str) -> Optional[Dict[str, str]]:
        """Возвращает копию переводов языка либо None."""

        mapping = self._translations.get(language)
        return dict(mapping) if mapping is not None else None

    def set_translation(self, language: str, key: str, value: str) -> None:
        """Проставляет перевод ключа, создавая язык при необходимости."""

        self._apply(language, key, value)
        self._persist(language)

    def set_translations(self, key: str, values_by_language: Mapping[str, str]) -> None:
        """Проставляет перевод одного ключа сразу в нескольких языках.

        Сначала меняется только память, затем выполняется один ``save_all`` и один
        ``reload_all``. Сбой записи поднимается как ``BulkTranslationError``.
        """

        for language in values_by_language:
            _check_language(language)
        for language, value in values_by_language.items():
            self._apply(language, key, value)
        try:
            self.save_all()
            self.reload_all()
        except TranslationIOError as exc:
            raise BulkTranslationError(key, values_by_language.keys(), [exc]) from exc
        self._logger.info("Updated '%s' in %d language(s)", key, len(values_by_language))

    def get_translation(self, language: str, key: str) -> str:
        """Возвращает перевод ключа."""

        try:
            mapping = self._translations[language]
        except KeyError:
            raise LanguageNotFoundError(language) from None
        try:
            return mapping[key]
        except KeyError:
            raise TranslationKeyNotFoundError(language, key) from None

    def find_translation(
        self, language: str, key: str, default: Optional[str] = None
    ) -> Optional[str]:
        """Как get_translation, но вместо исключения возвращает default."""

        mapping = self._translations.get(language)
        if mapping is None:
            return default
        return mapping.get(key, default)

    # ----------------------------------------------------------------- helpers --
    def _apply(self, language: str, key: str, value: str) -> None:
        _check_language(language)
        mapping = self._translations.get(language)
        if mapping is None:
            self._translations[language] = {key: value}
        else:
            mapping[key] = value

    def _persist(self, language: str) -> None:
        self.save_one(language)
        self.reload_one(language)


def _check_language(language: str) -> None:
    # имя языка должно вернуться из list_file_base_names без изменений
    if not language or "/" in language or "\\" in language:
        raise InvalidNameError("language", language, "expected a non-empty file base name")
