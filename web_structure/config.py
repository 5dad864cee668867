# === FILE: web_structure/config.py ===
"""
Модуль для загрузки, слияния и валидации конфигурации скрапера.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from web_structure.errors import ConfigurationError

__all__ = (
    "MAX_DEEPEST_DEPTH",
    "DEFAULT_SELECTORS",
    "ScrapeConfig",
    "resolve_config",
    "merge_config",
    "load_config",
)

MAX_DEEPEST_DEPTH = 10

DEFAULT_SELECTORS: Dict[str, Union[str, List[str]]] = {
    "headings": ["h1", "h2", "h3", "h4", "h5"],
    "paragraphs": "p",
    "articles": "article",
    "spans": "span",
    "orderLists": "ol",
    "lists": "ul",
}

SelectorSpec = Union[str, List[str]]
ConfigInput = Union["ScrapeConfig", Mapping[str, Any], None]

# camelCase timeout keys carry milliseconds, as in the original option mappings
_MILLISECOND_ALIASES: Dict[str, str] = {
    "waitForSelectorTimeout": "wait_for_selector_timeout",
    "waitForPageLoadTimeout": "wait_for_page_load_timeout",
}


def _from_millis(data: Dict[str, Any]) -> Dict[str, Any]:
    """Переводит camelCase-таймауты из миллисекунд в секунды под snake_case-именем."""
    for alias, name in _MILLISECOND_ALIASES.items():
        if alias not in data:
            continue
        value = data.pop(alias)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = value / 1000.0
        data[name] = value
    return data


class ScrapeConfig(BaseModel):
    """Параметры одного запуска. Поля принимают и camelCase-алиасы (maxDepth, ...)."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    max_depth: int = Field(0, ge=0, le=MAX_DEEPEST_DEPTH, description="Глубина рекурсивного обхода.")
    selectors: Dict[str, SelectorSpec] = Field(
        default_factory=lambda: dict(DEFAULT_SELECTORS),
        description="Имя поля -> селектор или список селекторов.",
    )
    exclude_child_page: Optional[Callable[[str], bool]] = Field(
        None, description="Предикат для дочерних ссылок; без него обходится только свой hostname."
    )
    with_console: bool = Field(True, description="Выводить ли лог в консоль.")
    break_when_failed: bool = Field(False, description="Прерывать обход при первой ошибке.")
    retry_count: int = Field(3, ge=1, description="Число попыток извлечения поля.")
    retry_base_delay: float = Field(1.0, ge=0, description="Базовая задержка backoff (секунд).")
    wait_for_selector_timeout: float = Field(12.0, gt=0, description="Ожидание селектора (секунд).")
    wait_for_page_load_timeout: float = Field(12.0, gt=0, description="Загрузка страницы (секунд).")
    headless: bool = Field(True, description="Запускать браузер без окна.")

    @model_validator(mode="before")
    @classmethod
    def _millisecond_timeouts(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return _from_millis(dict(data))
        return data

    @field_validator("selectors")
    @classmethod
    def _check_selectors(cls, v: Dict[str, SelectorSpec]) -> Dict[str, SelectorSpec]:
        for name, spec in v.items():
            items = [spec] if isinstance(spec, str) else spec
            if not items:
                raise ValueError(f"field {name!r} has no selectors")
            if any(not s.strip() for s in items):
                raise ValueError(f"field {name!r} has an empty selector")
        return v


def _as_mapping(data: ConfigInput) -> Dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, ScrapeConfig):
        # only what the caller actually set, so defaults of the base are kept
        return {name: getattr(data, name) for name in data.model_fields_set}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"config must be a mapping, got {type(data).__name__}")
    return {k: v for k, v in data.items() if v is not None}


def merge_config(base: ScrapeConfig, overrides: ConfigInput) -> ScrapeConfig:
    """Накладывает overrides на base поле за полем и заново валидирует результат."""
    merged = {name: getattr(base, name) for name in base.model_fields_set}
    for key, value in _from_millis(_as_mapping(overrides)).items():
        merged[_field_name(key)] = value
    try:
        return ScrapeConfig(**merged)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def resolve_config(user: ConfigInput = None) -> ScrapeConfig:
    """Значения по умолчанию + пользовательские поля."""
    return merge_config(ScrapeConfig(), user)


def _field_name(key: str) -> str:
    if key in ScrapeConfig.model_fields:
        return key
    for name, info in ScrapeConfig.model_fields.items():
        if info.alias == key:
            return name
    # unknown keys are left to extra="forbid"
    return key


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScrapeConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScrapeConfig.
    Без пути берёт configs/default.yaml, а если его нет, значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScrapeConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ConfigurationError(f"Неподдерживаемый формат конфига: {suffix}")

    return resolve_config(data)
