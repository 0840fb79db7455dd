"""
Модель конфигурации парсера выражений.

Описывает, какие символы считаются пробельными вокруг выражения и между
применяемыми термами, а также политику обработки числовых литералов,
которые не удаётся преобразовать в значение.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# Символы, которые никогда не могут быть пробельными внутри выражения
_LINE_BREAKS = "\r\n"


class NumericOverflow(str, Enum):
    """Реакция на числовой литерал, прошедший грамматику, но не преобразуемый в значение."""
    ERROR = "error"      # структурированная ошибка разбора (ParseError)
    DEFECT = "defect"    # внутренний дефект (InvariantViolation)


def char_set_problem(value: Any) -> Optional[str]:
    """
    Проверяет набор пробельных символов.

    Returns:
        Описание проблемы или None, если набор корректен
    """
    if not isinstance(value, str):
        return f"expected str, got {type(value).__name__}"
    if not value:
        return "must not be empty"
    for ch in value:
        if ch in _LINE_BREAKS:
            return f"line breaks are not allowed, got {ch!r}"
        if not ch.isspace():
            return f"only whitespace characters are allowed, got {ch!r}"
    return None


@dataclass(frozen=True)
class ExpressionConfig:
    """
    Настройки разбора выражений плейсхолдеров.

    Attributes:
        padding_chars: Символы, пропускаемые в начале и конце выражения
        delimiter_chars: Символы, один или несколько из которых разделяют
                         применяемые друг к другу термы
        numeric_overflow: Политика для непреобразуемых числовых литералов
    """
    padding_chars: str = " \t"
    delimiter_chars: str = " \t"
    numeric_overflow: NumericOverflow = NumericOverflow.ERROR

    def __post_init__(self):
        """Валидация настроек: переводы строк никогда не входят в выражение."""
        for name in ("padding_chars", "delimiter_chars"):
            problem = char_set_problem(getattr(self, name))
            if problem:
                raise ValueError(f"{name}: {problem}")
        object.__setattr__(self, "numeric_overflow", NumericOverflow(self.numeric_overflow))

    def is_padding(self, ch: str) -> bool:
        return ch != "" and ch in self.padding_chars

    def is_delimiter(self, ch: str) -> bool:
        return ch != "" and ch in self.delimiter_chars


DEFAULT_CONFIG = ExpressionConfig()


__all__ = ["ExpressionConfig", "NumericOverflow", "DEFAULT_CONFIG", "char_set_problem"]
