"""Централизованное описание путей по умолчанию."""

from __future__ import annotations

from pathlib import Path


# DEFAULT_LANG_FOLDER — каталог с файлами <язык>.json относительно рабочей директории
DEFAULT_LANG_FOLDER = Path("./lang")
