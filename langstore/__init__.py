"""Хранилище строк перевода на основе JSON-файлов."""

from langstore.exceptions import (
    BulkTranslationError,
    InvalidNameError,
    LanguageNotFoundError,
    TranslationError,
    TranslationIOError,
    TranslationKeyNotFoundError,
)
from langstore.translation.table import TranslationTable

__version__ = "1.0.0"

__all__ = [
    "BulkTranslationError",
    "InvalidNameError",
    "LanguageNotFoundError",
    "TranslationError",
    "TranslationIOError",
    "TranslationKeyNotFoundError",
    "TranslationTable",
    "__version__",
]
