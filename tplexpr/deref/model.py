"""
Модели данных для выражений плейсхолдеров.

Содержит идентификатор и неизменяемое дерево выражения (Deref):
квалифицированная ссылка, локальная ссылка, целый и рациональный литералы,
применение одного выражения к другому.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Sequence, Tuple, Union

from ..errors import InvariantViolation


class DerefType(Enum):
    """Типы узлов дерева выражения."""
    QUALIFIED = "qualified"
    LOCAL = "local"
    INTEGER = "integer"
    RATIONAL = "rational"
    APPLY = "apply"


@dataclass(frozen=True)
class Ident:
    """
    Имя из выражения: буквы, цифры, подчёркивания и штрихи.

    Пустое имя грамматикой исключено, поэтому его появление считается дефектом.
    """
    name: str

    def __post_init__(self):
        if not self.name:
            raise InvariantViolation("Bad Ident: identifier must not be empty")

    def __str__(self) -> str:
        return self.name


def _as_ident(value: Union[Ident, str]) -> Ident:
    return value if isinstance(value, Ident) else Ident(value)


@dataclass(frozen=True)
class Deref(ABC):
    """Базовый абстрактный класс для всех узлов дерева выражения."""

    @abstractmethod
    def get_type(self) -> DerefType:
        """Возвращает тип узла."""
        pass

    def __str__(self) -> str:
        """Текст выражения, который разбирается обратно в то же дерево."""
        return self._to_string()

    @abstractmethod
    def _to_string(self) -> str:
        pass


@dataclass(frozen=True)
class QualifiedRef(Deref):
    """
    Имя, доступное через путь модулей: A.B.name

    Каждый сегмент модуля начинается с заглавной буквы.
    """
    modules: Tuple[str, ...]
    ident: Ident

    def __post_init__(self):
        object.__setattr__(self, "modules", tuple(self.modules))
        object.__setattr__(self, "ident", _as_ident(self.ident))
        if not self.modules:
            raise InvariantViolation("QualifiedRef requires at least one module segment")

    @property
    def module_name(self) -> str:
        return ".".join(self.modules)

    def get_type(self) -> DerefType:
        return DerefType.QUALIFIED

    def _to_string(self) -> str:
        return f"{self.module_name}.{self.ident}"


@dataclass(frozen=True)
class LocalRef(Deref):
    """Неквалифицированное имя: name"""
    ident: Ident

    def __post_init__(self):
        object.__setattr__(self, "ident", _as_ident(self.ident))

    def get_type(self) -> DerefType:
        return DerefType.LOCAL

    def _to_string(self) -> str:
        return self.ident.name


@dataclass(frozen=True)
class IntLiteral(Deref):
    """Целый литерал произвольной точности: 42, -7"""
    value: int

    def get_type(self) -> DerefType:
        return DerefType.INTEGER

    def _to_string(self) -> str:
        # str(int) ограничен по числу цифр, Decimal - нет
        return format(Decimal(self.value), "f")


@dataclass(frozen=True)
class RatLiteral(Deref):
    """
    Точный рациональный литерал: -3.50 хранится как Fraction(-7, 2).

    Значения из парсера всегда получены через float, поэтому при выводе
    используется кратчайшая десятичная запись этого float.
    """
    value: Fraction

    def __post_init__(self):
        object.__setattr__(self, "value", Fraction(self.value))

    def get_type(self) -> DerefType:
        return DerefType.RATIONAL

    def _to_string(self) -> str:
        text = format(Decimal(repr(float(self.value))), "f")
        if "." not in text:
            text += ".0"
        return text


@dataclass(frozen=True)
class Apply(Deref):
    """
    Применение функции к аргументу: f x

    Цепочка f a b хранится как Apply(Apply(f, a), b).
    """
    function: Deref
    argument: Deref

    def get_type(self) -> DerefType:
        return DerefType.APPLY

    def _to_string(self) -> str:
        # Левая цепочка f a b ... обходится циклом: длина не ограничена глубиной стека
        parts = []
        node: Deref = self
        while isinstance(node, Apply):
            arg = str(node.argument)
            if isinstance(node.argument, Apply):
                arg = f"({arg})"
            parts.append(arg)
            node = node.function
        parts.append(str(node))
        return " ".join(reversed(parts))


def is_upper(ch: str) -> bool:
    """Заглавная буква в смысле Unicode, включая титульные (например, ǅ)."""
    return ch.isupper() or ch.istitle()


def qualified_or_local(modules: Sequence[str], ident: Union[Ident, str]) -> Deref:
    """Создаёт QualifiedRef при наличии сегментов модулей, иначе LocalRef."""
    if modules:
        return QualifiedRef(tuple(modules), _as_ident(ident))
    return LocalRef(_as_ident(ident))


__all__ = [
    "DerefType",
    "Ident",
    "Deref",
    "QualifiedRef",
    "LocalRef",
    "IntLiteral",
    "RatLiteral",
    "Apply",
    "is_upper",
    "qualified_or_local",
]
