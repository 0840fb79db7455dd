"""
Значения, в которые резолвер превращает дерево выражения.

Вместо генерации кода резолвер возвращает помеченные варианты, а слой,
потребляющий шаблон, сам решает, как их интерпретировать.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Optional, Union


class ResolvedType(Enum):
    """Типы разрешенных значений."""
    CONSTRUCTOR = "constructor"
    VARIABLE = "variable"
    INTEGER = "integer"
    RATIONAL = "rational"
    APPLICATION = "application"


@dataclass(frozen=True)
class ConstructorRef:
    """
    Ссылка на конструктор: имя начинается с заглавной буквы.

    module - путь модулей через точку или None для неквалифицированной ссылки.
    """
    name: str
    module: Optional[str] = None

    def get_type(self) -> ResolvedType:
        return ResolvedType.CONSTRUCTOR


@dataclass(frozen=True)
class VariableRef:
    """Ссылка на обычное значение."""
    name: str
    module: Optional[str] = None

    def get_type(self) -> ResolvedType:
        return ResolvedType.VARIABLE


@dataclass(frozen=True)
class IntegerLit:
    value: int

    def get_type(self) -> ResolvedType:
        return ResolvedType.INTEGER


@dataclass(frozen=True)
class RationalLit:
    value: Fraction

    def get_type(self) -> ResolvedType:
        return ResolvedType.RATIONAL


@dataclass(frozen=True)
class Application:
    """
    Применение разрешенной функции к разрешенному аргументу.

    Операнды могут быть и значениями из области видимости вызывающей стороны.
    """
    function: Any
    argument: Any

    def get_type(self) -> ResolvedType:
        return ResolvedType.APPLICATION


ResolvedValue = Union[
    ConstructorRef,
    VariableRef,
    IntegerLit,
    RationalLit,
    Application,
]

__all__ = [
    "ResolvedType",
    "ConstructorRef",
    "VariableRef",
    "IntegerLit",
    "RationalLit",
    "Application",
    "ResolvedValue",
]
