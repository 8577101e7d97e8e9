"""Таблица переводов."""

from .table import TranslationTable

__all__ = ["TranslationTable"]
