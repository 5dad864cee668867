# File: web_structure/utils.py
"""web_structure.utils: Утилиты для URL, текста и дедупликации."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Sequence
from urllib.parse import urlparse

__all__: Sequence[str] = (
    "is_valid_url",
    "is_same_domain",
    "collapse_whitespace",
    "remove_duplicates",
    "iso_timestamp",
)


def is_valid_url(url: str) -> bool:
    """Проверяет, что строка является абсолютным URL со схемой и хостом."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_same_domain(base_url: str, target_url: str) -> bool:
    """Сравнивает hostname двух URL (порт и схема не учитываются)."""
    try:
        base = urlparse(base_url).hostname
        target = urlparse(target_url).hostname
    except ValueError:
        return False
    return base is not None and base == target


def collapse_whitespace(text: str | None) -> str:
    """Обрезает края и схлопывает любые пробельные последовательности в один пробел."""
    if not text:
        return ""
    return " ".join(text.split())


def remove_duplicates(items: Iterable[str]) -> List[str]:
    """Удаляет дубликаты, сохраняя порядок первого вхождения."""
    return list(dict.fromkeys(items))


def iso_timestamp() -> str:
    """Текущее время UTC в формате ISO-8601 с миллисекундами и суффиксом Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
