"""Тесты класса TranslationTable."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pytest

from langstore.exceptions import (
    BulkTranslationError,
    InvalidNameError,
    LanguageNotFoundError,
    TranslationIOError,
    TranslationKeyNotFoundError,
)
from langstore.storage.codec import JsonCodec
from langstore.translation.table import TranslationTable


def read_file(path: Path) -> Dict[str, str]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def lang_folder(tmp_path: Path) -> Path:
    return tmp_path / "lang"


@pytest.fixture
def table(lang_folder: Path) -> TranslationTable:
    return TranslationTable(lang_folder)


def test_loads_existing_languages(lang_folder: Path) -> None:
    lang_folder.mkdir()
    (lang_folder / "en.json").write_text(
        json.dumps({"greeting": "Hello", "farewell": "Goodbye"}), encoding="utf-8"
    )
    (lang_folder / "fr.json").write_text(json.dumps({"greeting": "Bonjour"}), encoding="utf-8")
    (lang_folder / "notes.txt").write_text("ignored", encoding="utf-8")

    table = TranslationTable(lang_folder)
    assert table.languages() == ["en", "fr"]
    assert table.get_translation("en", "farewell") == "Goodbye"
    assert table.get_translation("fr", "greeting") == "Bonjour"
    assert "notes" not in table


def test_missing_folder_gives_empty_table(table: TranslationTable, lang_folder: Path) -> None:
    assert len(table) == 0
    assert table.lang_folder == lang_folder
    assert not lang_folder.exists()


def test_set_translation_on_empty_table(table: TranslationTable, lang_folder: Path) -> None:
    table.set_translation("en", "hello", "Hi")
    assert table.get_translation("en", "hello") == "Hi"
    assert read_file(lang_folder / "en.json") == {"hello": "Hi"}


def test_set_translation_updates_existing_language(
    table: TranslationTable, lang_folder: Path
) -> None:
    table.set_translation("en", "hello", "Hi")
    table.set_translation("en", "bye", "Bye")
    table.set_translation("en", "hello", "Hello")
    assert table.get_language("en") == {"hello": "Hello", "bye": "Bye"}
    assert read_file(lang_folder / "en.json") == {"hello": "Hello", "bye": "Bye"}


def test_set_translations_across_languages(table: TranslationTable, lang_folder: Path) -> None:
    table.set_translation("en", "hello", "Hi")
    table.set_translations("greet", {"en": "Hi", "fr": "Salut"})

    assert table.get_translation("en", "greet") == "Hi"
    assert table.get_translation("fr", "greet") == "Salut"
    assert read_file(lang_folder / "en.json") == {"hello": "Hi", "greet": "Hi"}
    assert read_file(lang_folder / "fr.json") == {"greet": "Salut"}


def test_set_translations_failure_is_aggregated(tmp_path: Path) -> None:
    blocker = tmp_path / "lang"
    blocker.write_text("not a folder", encoding="utf-8")
    table = TranslationTable(blocker)

    with pytest.raises(BulkTranslationError) as exc_info:
        table.set_translations("greet", {"en": "Hi", "fr": "Salut"})
    error = exc_info.value
    assert isinstance(error, TranslationIOError)
    assert error.key == "greet"
    assert error.languages == ["en", "fr"]
    assert len(error.failures) == 1
    # память уже обновлена, диск нет
    assert table.get_translation("fr", "greet") == "Salut"


def test_set_language_then_reload_is_idempotent(table: TranslationTable) -> None:
    table.set_language("de", {"x": "y"})
    before = table.get_language("de")
    table.reload_all()
    assert table.get_language("de") == before == {"x": "y"}


def test_set_language_replaces_mapping(table: TranslationTable, lang_folder: Path) -> None:
    table.set_translation("de", "old", "alt")
    table.set_language("de", {"new": "neu"})
    assert table.get_language("de") == {"new": "neu"}
    assert read_file(lang_folder / "de.json") == {"new": "neu"}


def test_get_language_returns_copy(table: TranslationTable) -> None:
    source = {"x": "y"}
    table.set_language("de", source)
    source["x"] = "changed"
    returned = table.get_language("de")
    assert returned == {"x": "y"}
    returned["x"] = "changed"
    assert table.get_translation("de", "x") == "y"


def test_get_language_absent_returns_none(table: TranslationTable) -> None:
    assert table.get_language("xx") is None


def test_get_translation_missing_language(table: TranslationTable) -> None:
    with pytest.raises(LanguageNotFoundError) as exc_info:
        table.get_translation("xx", "hello")
    assert exc_info.value.language == "xx"


def test_get_translation_missing_key(table: TranslationTable) -> None:
    table.set_translation("en", "hello", "Hi")
    with pytest.raises(TranslationKeyNotFoundError) as exc_info:
        table.get_translation("en", "missing")
    assert exc_info.value.key == "missing"
    assert isinstance(exc_info.value, LookupError)


def test_find_translation_defaults(table: TranslationTable) -> None:
    table.set_translation("en", "hello", "Hi")
    assert table.find_translation("en", "hello") == "Hi"
    assert table.find_translation("en", "missing") is None
    assert table.find_translation("xx", "hello", default="?") == "?"


def test_save_one_unknown_language_raises(table: TranslationTable, lang_folder: Path) -> None:
    with pytest.raises(LanguageNotFoundError):
        table.save_one("xx")
    assert not (lang_folder / "xx.json").exists()


def test_save_all_writes_every_language(lang_folder: Path) -> None:
    lang_folder.mkdir()
    (lang_folder / "en.json").write_text(json.dumps({"a": "A"}), encoding="utf-8")
    (lang_folder / "fr.json").write_text(json.dumps({"a": "Á"}), encoding="utf-8")
    table = TranslationTable(lang_folder)

    (lang_folder / "en.json").unlink()
    (lang_folder / "fr.json").unlink()
    table.save_all()
    assert read_file(lang_folder / "en.json") == {"a": "A"}
    assert read_file(lang_folder / "fr.json") == {"a": "Á"}


def test_reload_one_drops_deleted_language(table: TranslationTable, lang_folder: Path) -> None:
    table.set_translation("en", "hello", "Hi")
    (lang_folder / "en.json").unlink()
    table.reload_one("en")
    assert "en" not in table
    assert table.get_language("en") is None


def test_reload_all_picks_up_external_changes(
    table: TranslationTable, lang_folder: Path
) -> None:
    table.set_translation("en", "hello", "Hi")
    (lang_folder / "en.json").write_text(json.dumps({"hello": "Hey"}), encoding="utf-8")
    (lang_folder / "es.json").write_text(json.dumps({"hello": "Hola"}), encoding="utf-8")
    table.reload_all()
    assert table.get_translation("en", "hello") == "Hey"
    assert table.get_translation("es", "hello") == "Hola"


def test_reload_non_object_json_raises(lang_folder: Path) -> None:
    lang_folder.mkdir()
    (lang_folder / "en.json").write_text(json.dumps(["a", "b"]), encoding="utf-8")
    with pytest.raises(TranslationIOError):
        TranslationTable(lang_folder)


def test_corrupt_file_fails_construction(lang_folder: Path) -> None:
    lang_folder.mkdir()
    (lang_folder / "en.json").write_text("{broken", encoding="utf-8")
    with pytest.raises(TranslationIOError):
        TranslationTable(lang_folder)


def test_custom_codec_and_extension(tmp_path: Path) -> None:
    folder = tmp_path / "i18n"
    table = TranslationTable(folder, extension="lang", codec=JsonCodec(indent=None))
    table.set_translation("en", "hello", "Hi")
    assert table.language_path("en") == folder / "en.lang"
    assert (folder / "en.lang").read_text(encoding="utf-8") == '{"hello": "Hi"}'
    assert TranslationTable(folder, extension="lang").get_language("en") == {"hello": "Hi"}


def test_unencodable_value_does_not_lose_saved_language(
    table: TranslationTable, lang_folder: Path
) -> None:
    table.set_translation("en", "hello", "Hi")
    with pytest.raises(TranslationIOError):
        table.set_translation("en", "bad", "\ud800")

    assert read_file(lang_folder / "en.json") == {"hello": "Hi"}
    assert TranslationTable(lang_folder).get_language("en") == {"hello": "Hi"}


@pytest.mark.parametrize("extension", ["", ".json", "tar.gz"])
def test_invalid_extension_rejected(lang_folder: Path, extension: str) -> None:
    with pytest.raises(InvalidNameError) as exc_info:
        TranslationTable(lang_folder, extension=extension)
    assert exc_info.value.kind == "extension"


def test_empty_language_rejected(table: TranslationTable, lang_folder: Path) -> None:
    with pytest.raises(InvalidNameError):
        table.set_translation("", "hello", "Hi")
    with pytest.raises(InvalidNameError):
        table.set_language("", {"hello": "Hi"})
    with pytest.raises(InvalidNameError):
        table.language_path("")
    assert len(table) == 0
    assert not (lang_folder / ".json").exists()


def test_set_translations_checks_languages_before_changing_memory(
    table: TranslationTable,
) -> None:
    with pytest.raises(InvalidNameError):
        table.set_translations("greet", {"en": "Hi", "sub/fr": "Salut"})
    assert table.get_language("en") is None
