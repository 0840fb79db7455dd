"""
Конфигурация парсера выражений плейсхолдеров.
"""

from __future__ import annotations

from .model import ExpressionConfig, NumericOverflow, DEFAULT_CONFIG
from .load import ConfigLoadError, load_config, load_config_yaml

__all__ = [
    "ExpressionConfig",
    "NumericOverflow",
    "DEFAULT_CONFIG",
    "ConfigLoadError",
    "load_config",
    "load_config_yaml",
]
