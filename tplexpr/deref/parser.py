"""
Парсер выражений плейсхолдеров с рекурсивным спуском и откатом.

Строит дерево выражения (Deref) прямо по символам исходного текста.
Неудачные попытки продолжить выражение откатываются к сохраненной позиции.

Грамматика:
deref     → pad* term (app)* pad*
term      → "(" deref ")" | numeric | ident
app       → delim "$" deref          -- после "$" разбор выражения завершается
          | delim term               -- термы накапливаются слева направо
delim     → delim_char+ | &"("       -- "(" проверяется без потребления
numeric   → "-"? digit+ ("." digit+)?
ident     → module* ident_char+
module    → upper (alnum | "_")* "."
"""

from __future__ import annotations

import logging
from decimal import Decimal
from fractions import Fraction
from functools import reduce
from typing import Callable, List, Optional, Tuple, TypeVar

from .cursor import TextCursor
from .model import Apply, Deref, Ident, IntLiteral, RatLiteral, is_upper, qualified_or_local
from ..config.model import ExpressionConfig, NumericOverflow, DEFAULT_CONFIG
from ..errors import TplExprUserError, InvariantViolation

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DIGITS = "0123456789"


class ParseError(TplExprUserError):
    """Ошибка разбора выражения в указанной позиции исходного текста."""

    # Фатальные ошибки не откатываются альтернативами
    fatal = False

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Parse error at position {position}: {message}")


class NumericLiteralError(ParseError):
    """Числовой литерал прошел грамматику, но не преобразуется в значение."""
    fatal = True


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in _DIGITS


def _is_module_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_" or ch == "'"


def _describe(ch: str) -> str:
    return "end of input" if ch == "" else repr(ch)


class DerefParser:
    """
    Парсер выражений плейсхолдеров.

    Работает над курсором, поэтому может вызываться из внешнего сканера
    шаблона с произвольной позиции и оставляет курсор сразу за выражением.
    """

    def __init__(self, text: str, position: int = 0, config: Optional[ExpressionConfig] = None):
        self.cursor = TextCursor(text, position)
        self.config = config or DEFAULT_CONFIG

    @property
    def position(self) -> int:
        return self.cursor.position

    def remaining(self) -> str:
        """Непрочитанный остаток текста."""
        return self.cursor.remaining()

    def parse_deref(self) -> Deref:
        """
        Парсит одно выражение с текущей позиции.

        Returns:
            Корневой узел дерева выражения

        Raises:
            ParseError: При синтаксической ошибке
            InvariantViolation: При непреобразуемом числе и политике "defect"
        """
        start = self.cursor.position
        self._skip_padding()
        first = self._parse_single()
        result = self._parse_continuation([first])
        self._skip_padding()
        logger.debug("Parsed deref at %d..%d", start, self.cursor.position)
        return result

    def _parse_continuation(self, terms: List[Deref]) -> Deref:
        """Накапливает применяемые термы, пока выражение продолжается."""
        while True:
            # "$" справа от разделителя: правая часть - целое выражение
            if self._attempt(self._parse_dollar_marker):
                lhs = self._fold(terms)
                rhs = self.parse_deref()
                return Apply(lhs, rhs)

            term = self._attempt(self._parse_delimited_single)
            if term is None:
                return self._fold(terms)
            terms.append(term)

    @staticmethod
    def _fold(terms: List[Deref]) -> Deref:
        """Свертка [t1, t2, t3] в Apply(Apply(t1, t2), t3)."""
        return reduce(lambda function, argument: Apply(function, argument), terms)

    def _parse_dollar_marker(self) -> bool:
        self._parse_delimiter()
        self._expect("$")
        return True

    def _parse_delimited_single(self) -> Deref:
        self._parse_delimiter()
        return self._parse_single()

    def _parse_delimiter(self) -> None:
        """Разделитель: пробельные символы или "(" без потребления."""
        if self.cursor.take_while(self.config.is_delimiter):
            return
        if self.cursor.current() == "(":
            return
        raise ParseError(
            f"Expected whitespace or '(' before argument, found {_describe(self.cursor.current())}",
            self.cursor.position,
        )

    def _parse_single(self) -> Deref:
        """Парсит один терм: группу в скобках, число или идентификатор."""
        ch = self.cursor.current()
        if ch == "(":
            return self._parse_parens()
        if ch == "-" or _is_digit(ch):
            return self._parse_numeric()
        return self._parse_ident()

    def _parse_parens(self) -> Deref:
        self._expect("(")
        inner = self.parse_deref()
        self._expect(")", "Expected ')' to close grouped expression")
        return inner

    def _parse_numeric(self) -> Deref:
        """Парсит целый или десятичный литерал."""
        start = self.cursor.position
        self.cursor.match("-")

        if not self.cursor.take_while(_is_digit):
            raise ParseError(
                f"Expected digit, found {_describe(self.cursor.current())}",
                self.cursor.position,
            )

        has_fraction = self.cursor.match(".")
        if has_fraction and not self.cursor.take_while(_is_digit):
            raise ParseError(
                f"Expected digit after '.', found {_describe(self.cursor.current())}",
                self.cursor.position,
            )

        text = self.cursor.text[start:self.cursor.position]
        try:
            if not has_fraction:
                # Через Decimal: без ограничения длины при преобразовании строки в int
                return IntLiteral(int(Decimal(text)))
            # Сначала float, затем точная дробь: округление как у двоичного представления
            return RatLiteral(Fraction(float(text)))
        except (ValueError, OverflowError) as e:
            kind = "Rational" if has_fraction else "Integral"
            if self.config.numeric_overflow == NumericOverflow.DEFECT:
                raise InvariantViolation(f"{kind} read failed: {text}") from e
            raise NumericLiteralError(f"Numeric literal out of range: {text}", start) from e

    def _parse_ident(self) -> Deref:
        """Парсит имя с необязательным путем модулей: A.B.name"""
        modules: List[str] = []
        while True:
            segment = self._attempt(self._parse_module_segment)
            if segment is None:
                break
            modules.append(segment)

        position = self.cursor.position
        name = self.cursor.take_while(_is_ident_char)
        if not name:
            if self.cursor.is_at_end():
                raise ParseError("Unexpected end of expression, expected identifier", position)
            raise ParseError(
                f"Unexpected character {_describe(self.cursor.current())}, expected identifier",
                position,
            )

        return qualified_or_local(modules, Ident(name))

    def _parse_module_segment(self) -> str:
        first = self.cursor.current()
        if not is_upper(first):
            raise ParseError("Expected module name", self.cursor.position)
        self.cursor.advance()
        rest = self.cursor.take_while(_is_module_char)
        self._expect(".")
        return first + rest

    # Вспомогательные методы

    def _attempt(self, rule: Callable[[], T]) -> Optional[T]:
        """
        Применяет правило, откатывая позицию при неудаче.

        Returns:
            Результат правила или None, если правило не сработало
        """
        self.cursor.save_position()
        try:
            result = rule()
        except ParseError as e:
            if e.fatal:
                self.cursor.discard_saved_position()
                raise
            self.cursor.restore_position()
            logger.debug(f"Rule '{rule.__name__}' backtracked to {self.cursor.position}: {e.message}")
            return None
        self.cursor.discard_saved_position()
        return result

    def _expect(self, ch: str, message: Optional[str] = None) -> None:
        """Потребляет ожидаемый символ или выбрасывает ошибку."""
        if self.cursor.match(ch):
            return
        found = _describe(self.cursor.current())
        raise ParseError(message or f"Expected '{ch}', found {found}", self.cursor.position)

    def _skip_padding(self) -> None:
        self.cursor.take_while(self.config.is_padding)


def parse_deref(text: str, config: Optional[ExpressionConfig] = None) -> Tuple[Deref, str]:
    """
    Парсит выражение в начале текста.

    Returns:
        Пара (дерево выражения, непрочитанный остаток текста)
    """
    parser = DerefParser(text, config=config)
    deref = parser.parse_deref()
    return deref, parser.remaining()


def parse_expression(text: str, config: Optional[ExpressionConfig] = None) -> Deref:
    """
    Парсит текст, который целиком должен быть одним выражением.

    Raises:
        ParseError: При синтаксической ошибке или лишних символах после выражения
    """
    parser = DerefParser(text, config=config)
    deref = parser.parse_deref()
    if not parser.cursor.is_at_end():
        raise ParseError(
            f"Unexpected character {_describe(parser.cursor.current())} after expression",
            parser.position,
        )
    return deref


__all__ = [
    "ParseError",
    "NumericLiteralError",
    "DerefParser",
    "parse_deref",
    "parse_expression",
]
