"""Доступ к JSON-файлам на диске."""

from .codec import DEFAULT_CODEC, JsonCodec
from .file_store import list_file_base_names, read_json, write_json

__all__ = [
    "DEFAULT_CODEC",
    "JsonCodec",
    "list_file_base_names",
    "read_json",
    "write_json",
]
