"""
Язык выражений плейсхолдеров: модель, парсер, сканеры, резолвер.
"""

from __future__ import annotations

from .model import (
    DerefType,
    Ident,
    Deref,
    QualifiedRef,
    LocalRef,
    IntLiteral,
    RatLiteral,
    Apply,
)
from .cursor import TextCursor
from .parser import DerefParser, ParseError, NumericLiteralError, parse_deref, parse_expression
from .scanners import Literal, Parsed, ScanResult, DelimiterScanner, parse_hash, parse_at, parse_caret
from .scope import Scope, EMPTY_SCOPE
from .values import (
    ResolvedType,
    ResolvedValue,
    ConstructorRef,
    VariableRef,
    IntegerLit,
    RationalLit,
    Application,
)
from .resolver import DerefResolver, resolve, resolve_text
from .flatten import flatten_deref

__all__ = [
    "DerefType",
    "Ident",
    "Deref",
    "QualifiedRef",
    "LocalRef",
    "IntLiteral",
    "RatLiteral",
    "Apply",
    "TextCursor",
    "DerefParser",
    "ParseError",
    "NumericLiteralError",
    "parse_deref",
    "parse_expression",
    "Literal",
    "Parsed",
    "ScanResult",
    "DelimiterScanner",
    "parse_hash",
    "parse_at",
    "parse_caret",
    "Scope",
    "EMPTY_SCOPE",
    "ResolvedType",
    "ResolvedValue",
    "ConstructorRef",
    "VariableRef",
    "IntegerLit",
    "RationalLit",
    "Application",
    "DerefResolver",
    "resolve",
    "resolve_text",
    "flatten_deref",
]
