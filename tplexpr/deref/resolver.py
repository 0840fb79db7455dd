"""
Резолвер выражений плейсхолдеров.

Проходит по дереву выражения и превращает его в разрешенное значение,
сверяясь с областью видимости вызывающей стороны.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, cast

from .model import (
    Apply,
    Deref,
    DerefType,
    Ident,
    IntLiteral,
    LocalRef,
    QualifiedRef,
    RatLiteral,
    is_upper,
)
from .scope import Scope, EMPTY_SCOPE
from .values import Application, ConstructorRef, IntegerLit, RationalLit, VariableRef
from ..config.model import ExpressionConfig
from ..errors import InvariantViolation

logger = logging.getLogger(__name__)


class DerefResolver:
    """
    Резолвер дерева выражения.

    Принимает область видимости и возвращает для узла дерева разрешенное
    значение (ResolvedValue) либо значение, связанное в области видимости.
    """

    def __init__(self, scope: Optional[Scope] = None):
        """
        Инициализирует резолвер с областью видимости.

        Args:
            scope: Локальные привязки имен (по умолчанию - пустая область)
        """
        self.scope = scope if scope is not None else EMPTY_SCOPE

    def resolve(self, deref: Deref) -> Any:
        """
        Разрешает значение выражения.

        Args:
            deref: Корневой узел дерева выражения

        Returns:
            Разрешенное значение

        Raises:
            InvariantViolation: При пустом идентификаторе или неизвестном узле
        """
        deref_type = deref.get_type()

        if deref_type == DerefType.APPLY:
            return self._resolve_apply(cast(Apply, deref))
        elif deref_type == DerefType.QUALIFIED:
            return self._resolve_qualified(cast(QualifiedRef, deref))
        elif deref_type == DerefType.LOCAL:
            return self._resolve_local(cast(LocalRef, deref))
        elif deref_type == DerefType.INTEGER:
            return IntegerLit(cast(IntLiteral, deref).value)
        elif deref_type == DerefType.RATIONAL:
            return RationalLit(cast(RatLiteral, deref).value)
        else:
            raise InvariantViolation(f"Unknown deref type: {deref_type}")

    def _resolve_apply(self, deref: Apply) -> Application:
        """
        Функция и аргумент разрешаются независимо, функция первой.

        Левая цепочка f a b ... обходится циклом, а не рекурсией по функциям.
        """
        arguments: List[Deref] = []
        node: Deref = deref
        while isinstance(node, Apply):
            arguments.append(node.argument)
            node = node.function

        result = self.resolve(node)
        for argument in reversed(arguments):
            result = Application(result, self.resolve(argument))
        return result

    def _resolve_qualified(self, deref: QualifiedRef) -> Any:
        """Квалифицированные имена никогда не ищутся в области видимости."""
        return _reference(deref.ident, deref.module_name)

    def _resolve_local(self, deref: LocalRef) -> Any:
        """
        Локальное имя: сначала область видимости, затем ссылка по регистру.

        Связанное значение возвращается как есть, без правила регистра.
        """
        binding = self.scope.find(deref.ident)
        if binding is not None:
            logger.debug(f"Resolved '{deref.ident}' from scope")
            return binding[1]

        logger.debug(f"'{deref.ident}' not in scope, resolving as unqualified reference")
        return _reference(deref.ident, None)


def _reference(ident: Ident, module: Optional[str]) -> Any:
    """Ссылка на конструктор, если имя начинается с заглавной буквы, иначе на значение."""
    name = ident.name
    if not name:
        raise InvariantViolation("Bad Ident: empty identifier reached the resolver")
    if is_upper(name[0]):
        return ConstructorRef(name, module)
    return VariableRef(name, module)


def resolve(scope: Optional[Scope], deref: Deref) -> Any:
    """Разрешает выражение в указанной области видимости."""
    return DerefResolver(scope).resolve(deref)


def resolve_text(text: str, scope: Optional[Scope] = None, config: Optional[ExpressionConfig] = None) -> Any:
    """
    Удобная функция: разбор текста выражения и его резолвинг.

    Raises:
        ParseError: При ошибке разбора
    """
    from .parser import parse_expression

    deref = parse_expression(text, config=config)
    return DerefResolver(scope).resolve(deref)


__all__ = ["DerefResolver", "resolve", "resolve_text"]
