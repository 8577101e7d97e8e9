"""JSON-кодек без скрытого глобального состояния."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class JsonCodec:
    """Сериализует значения в JSON и обратно с фиксированными параметрами."""

    indent: Optional[int] = 2
    ensure_ascii: bool = False

    def dumps(self, value: Any) -> str:
        """Возвращает JSON-представление значения."""

        return json.dumps(value, indent=self.indent, ensure_ascii=self.ensure_ascii)

    def loads(self, text: str) -> Any:
        """Разбирает JSON-строку."""

        return json.loads(text)


DEFAULT_CODEC = JsonCodec()
