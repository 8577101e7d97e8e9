"""Чтение и запись JSON-файлов, перечисление файлов каталога."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from langstore.exceptions import TranslationIOError
from langstore.storage.codec import DEFAULT_CODEC, JsonCodec

LOGGER = logging.getLogger(__name__)


def read_json(path: Path | str, *, codec: JsonCodec = DEFAULT_CODEC) -> Optional[Any]:
    """Читает JSON-документ целиком.

    Возвращает ``None``, если файла нет. Если файл существует, но его не удалось
    прочитать или разобрать, поднимает ``TranslationIOError``.
    """

    target = Path(path)
    if not target.exists():
        LOGGER.debug("File %s not found, nothing to read", target)
        return None
    try:
        content = target.read_text(encoding="utf-8")
        return codec.loads(content)
    except (OSError, ValueError) as exc:
        raise TranslationIOError(target, str(exc)) from exc


def write_json(path: Path | str, value: Any, *, codec: JsonCodec = DEFAULT_CODEC) -> None:
    """Сериализует значение и перезаписывает файл, создавая каталоги при необходимости."""

    target = Path(path)
    # кодируем до открытия файла: write_bytes сразу обрезает его
    try:
        data = codec.dumps(value).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise TranslationIOError(target, f"cannot serialize value: {exc}") from exc
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise TranslationIOError(target, str(exc)) from exc
    LOGGER.debug("Wrote %d bytes to %s", len(data), target)


def list_file_base_names(folder_path: Path | str, extension: Optional[str] = None) -> List[str]:
    """Возвращает имена файлов каталога без расширения.

    Несуществующий путь или путь не к каталогу дают пустой список. Подкаталоги
    пропускаются. Порядок соответствует порядку обхода файловой системы.
    """

    folder = Path(folder_path)
    if not folder.is_dir():
        return []

    suffix = f".{extension}" if extension else ""
    names: List[str] = []
    try:
        for entry in folder.iterdir():
            if not entry.is_file():
                continue
            file_name = entry.name
            if suffix and not file_name.endswith(suffix):
                continue
            dot_index = file_name.rfind(".")
            names.append(file_name[:dot_index] if dot_index > 0 else file_name)
    except OSError as exc:
        raise TranslationIOError(folder, str(exc)) from exc
    return names
