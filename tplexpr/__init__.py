"""
Выражения плейсхолдеров для текстовых шаблонов: #{expr}, @{expr}, @?{expr}, ^{expr}.

Переэкспортирует публичный API пакетов deref и config.
"""

from __future__ import annotations

from .version import tool_version
from .errors import TplExprUserError, InvariantViolation
from .config import ExpressionConfig, NumericOverflow, ConfigLoadError, load_config, load_config_yaml
from .deref import (
    Ident,
    Deref,
    DerefType,
    QualifiedRef,
    LocalRef,
    IntLiteral,
    RatLiteral,
    Apply,
    DerefParser,
    ParseError,
    parse_deref,
    parse_expression,
    Literal,
    Parsed,
    DelimiterScanner,
    parse_hash,
    parse_at,
    parse_caret,
    Scope,
    ResolvedType,
    ResolvedValue,
    ConstructorRef,
    VariableRef,
    IntegerLit,
    RationalLit,
    Application,
    DerefResolver,
    resolve,
    resolve_text,
    flatten_deref,
)

__version__ = tool_version()

__all__ = [
    "__version__",
    "tool_version",
    "TplExprUserError",
    "InvariantViolation",
    "ExpressionConfig",
    "NumericOverflow",
    "ConfigLoadError",
    "load_config",
    "load_config_yaml",
    "Ident",
    "Deref",
    "DerefType",
    "QualifiedRef",
    "LocalRef",
    "IntLiteral",
    "RatLiteral",
    "Apply",
    "DerefParser",
    "ParseError",
    "parse_deref",
    "parse_expression",
    "Literal",
    "Parsed",
    "DelimiterScanner",
    "parse_hash",
    "parse_at",
    "parse_caret",
    "Scope",
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
