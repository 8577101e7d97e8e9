"""Валидаторы значений настроек хранилища."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Pattern, Tuple

ValidationResult = Tuple[bool, str]

OK: ValidationResult = (True, "")


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Возвращает (True, \"\") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет тип значения; bool не принимается там, где ждут int."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_types: Tuple[type, ...] = (
            expected_type if isinstance(expected_type, tuple) else (expected_type,)
        )

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) and bool not in self.expected_types:
            return False, f"Expected value of type {self._names()}, got bool"
        if isinstance(value, self.expected_types):
            return OK
        return False, f"Expected value of type {self._names()}, got {type(value).__name__}"

    def _names(self) -> str:
        return ", ".join(t.__name__ for t in self.expected_types)


class RangeValidator(Validator):
    """Проверяет, что целое число лежит в заданных границах (включительно)."""

    def __init__(self, min_value: Optional[int] = None, max_value: Optional[int] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, int):
            return False, f"Expected an integer, got {type(value).__name__}"
        too_small = self.min_value is not None and value < self.min_value
        too_large = self.max_value is not None and value > self.max_value
        if too_small or too_large:
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return OK


class EnumValidator(Validator):
    """Допускает только значения из конечного набора."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> ValidationResult:
        if value in self.allowed_values:
            return OK
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class RegexValidator(Validator):
    """Сверяет строку с регулярным выражением целиком."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return False, "RegexValidator expects string values"
        if self.pattern.fullmatch(value) is None:
            return False, f"Value '{value}' does not match pattern {self.pattern.pattern!r}"
        return OK


class NonEmptyStringValidator(Validator):
    """Отклоняет пустые и состоящие из пробелов строки."""

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, str) and value.strip():
            return OK
        return False, "Expected a non-empty string"

