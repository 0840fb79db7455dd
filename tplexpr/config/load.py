"""
Загрузчик конфигурации парсера выражений.

Строит ExpressionConfig из словаря (например, секции конфигурации хоста)
или из YAML-текста. Файлы не читаются: текст передаёт вызывающая сторона.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import ExpressionConfig, NumericOverflow, DEFAULT_CONFIG, char_set_problem
from ..errors import TplExprUserError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


class ConfigLoadError(TplExprUserError, ValueError):
    """Ошибка загрузки конфигурации с указанием пути поля."""
    pass


def _err(path: str, msg: str) -> ConfigLoadError:
    logger.debug("RAISE at %s: %s", path, msg)
    return ConfigLoadError(f"{path}: {msg}")


def _coerce_chars(val: Any, path: str) -> str:
    problem = char_set_problem(val)
    if problem:
        raise _err(path, problem)
    return val


def _coerce_overflow(val: Any, path: str) -> NumericOverflow:
    if isinstance(val, NumericOverflow):
        return val
    allowed = sorted(item.value for item in NumericOverflow)
    if isinstance(val, str):
        try:
            return NumericOverflow(val.lower())
        except ValueError:
            pass
    raise _err(path, f"expected one of {allowed}, got {val!r}")


_COERCERS = {
    "padding_chars": _coerce_chars,
    "delimiter_chars": _coerce_chars,
    "numeric_overflow": _coerce_overflow,
}


def load_config(data: Optional[Mapping[str, Any]], *, path: str = "$") -> ExpressionConfig:
    """
    Строит конфигурацию из словаря.

    Отсутствующие ключи получают значения по умолчанию.

    Args:
        data: Словарь настроек или None
        path: Путь секции в конфигурации хоста (для сообщений об ошибках)

    Returns:
        Провалидированная конфигурация

    Raises:
        ConfigLoadError: При неизвестных ключах или некорректных значениях
    """
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, Mapping):
        raise _err(path, f"expected mapping, got {type(data).__name__}")

    known = {f.name for f in fields(ExpressionConfig)}
    extras = set(data.keys()) - known
    if extras:
        raise _err(path, f"unknown key(s): {sorted(extras)}")

    kwargs = {
        name: _COERCERS[name](value, f"{path}.{name}")
        for name, value in data.items()
    }
    config = ExpressionConfig(**kwargs)
    logger.debug(f"Loaded expression config at {path}: {config!r}")
    return config


def load_config_yaml(text: str) -> ExpressionConfig:
    """
    Разбирает YAML-текст и строит конфигурацию.

    Пустой документ даёт конфигурацию по умолчанию.
    """
    try:
        raw = _yaml.load(text)
    except YAMLError as e:
        raise ConfigLoadError(f"$: invalid YAML: {e}") from e
    return load_config(raw)


__all__ = ["ConfigLoadError", "load_config", "load_config_yaml"]
