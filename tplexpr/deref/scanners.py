"""
Распознавание плейсхолдеров по символу-сигилу.

Обрабатывает конструкции вида:
- #{expr}, #\\ (экранирование), одиночный # в конце строки
- @{expr}, @?{expr}, @\\
- ^{expr}, ^\\

Каждый сканер либо возвращает разобранное выражение, либо сообщает,
какой литеральный текст нужно вывести вместо сигила.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .model import Deref
from .parser import DerefParser
from ..config.model import ExpressionConfig

logger = logging.getLogger(__name__)

_LINE_BREAKS = "\r\n"


@dataclass(frozen=True)
class Literal:
    """Сигил не начинает плейсхолдер: вместо него выводится этот текст."""
    text: str


@dataclass(frozen=True)
class Parsed:
    """
    Разобранный плейсхолдер.

    Attributes:
        deref: Выражение между фигурными скобками
        optional: Признак формы @?{...} (только для сигила @)
    """
    deref: Deref
    optional: bool = False


ScanResult = Union[Literal, Parsed]


class DelimiterScanner(DerefParser):
    """
    Парсер выражений, дополненный сканерами плейсхолдеров.

    Методы потребляют сигил в текущей позиции курсора; внешний сканер шаблона
    вызывает их при каждой встрече сигила в литеральном тексте.
    """

    def parse_hash(self) -> ScanResult:
        """Парсит #\\, #{expr} или одиночный #."""
        self._expect("#")
        if self.cursor.match("\\"):
            return Literal("#")
        if self.cursor.match("{"):
            return Parsed(self._parse_braced())

        # Одиночный # перед концом строки ничего не выводит
        ch = self.cursor.current()
        if ch == "" or ch in _LINE_BREAKS:
            logger.debug(f"Trailing '#' at {self.cursor.position} treated as empty text")
            return Literal("")
        return Literal("#")

    def parse_at(self) -> ScanResult:
        """Парсит @\\, @{expr}, @?{expr} или одиночный @ / @?."""
        self._expect("@")
        if self.cursor.match("\\"):
            return Literal("@")

        optional = self.cursor.match("?")
        if self.cursor.match("{"):
            return Parsed(self._parse_braced(), optional)

        literal = "@?" if optional else "@"
        logger.debug(f"No placeholder after '{literal}' at {self.cursor.position}")
        return Literal(literal)

    def parse_caret(self) -> ScanResult:
        """Парсит ^\\, ^{expr} или одиночный ^."""
        self._expect("^")
        if self.cursor.match("\\"):
            return Literal("^")
        if self.cursor.match("{"):
            return Parsed(self._parse_braced())
        return Literal("^")

    def _parse_braced(self) -> Deref:
        """Выражение после "{" и обязательная закрывающая "}" сразу за ним."""
        deref = self.parse_deref()
        self._expect("}", "Expected '}' to close placeholder")
        return deref


def parse_hash(text: str, config: Optional[ExpressionConfig] = None) -> Tuple[ScanResult, str]:
    """Сканирует #-плейсхолдер в начале текста; возвращает результат и остаток."""
    scanner = DelimiterScanner(text, config=config)
    return scanner.parse_hash(), scanner.remaining()


def parse_at(text: str, config: Optional[ExpressionConfig] = None) -> Tuple[ScanResult, str]:
    """Сканирует @-плейсхолдер в начале текста; возвращает результат и остаток."""
    scanner = DelimiterScanner(text, config=config)
    return scanner.parse_at(), scanner.remaining()


def parse_caret(text: str, config: Optional[ExpressionConfig] = None) -> Tuple[ScanResult, str]:
    """Сканирует ^-плейсхолдер в начале текста; возвращает результат и остаток."""
    scanner = DelimiterScanner(text, config=config)
    return scanner.parse_caret(), scanner.remaining()


__all__ = [
    "Literal",
    "Parsed",
    "ScanResult",
    "DelimiterScanner",
    "parse_hash",
    "parse_at",
    "parse_caret",
]
