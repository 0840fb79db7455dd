"""
Тесты загрузки конфигурации парсера выражений.
"""

import pytest

from tplexpr.config import (
    DEFAULT_CONFIG,
    ConfigLoadError,
    ExpressionConfig,
    NumericOverflow,
    load_config,
    load_config_yaml,
)
from tplexpr.deref.model import Apply, Ident, LocalRef
from tplexpr.deref.parser import NumericLiteralError, parse_deref
from tplexpr.errors import InvariantViolation, TplExprUserError


class TestExpressionConfig:

    def test_defaults(self):
        """Тест: по умолчанию пробелы и табуляции, ошибка для переполнения"""
        config = ExpressionConfig()

        assert config.padding_chars == " \t"
        assert config.delimiter_chars == " \t"
        assert config.numeric_overflow == NumericOverflow.ERROR
        assert config == DEFAULT_CONFIG

    def test_membership(self):
        assert DEFAULT_CONFIG.is_delimiter("\t")
        assert not DEFAULT_CONFIG.is_delimiter("\n")
        assert not DEFAULT_CONFIG.is_padding("")


class TestExpressionConfigValidation:

    @pytest.mark.parametrize("field", ["padding_chars", "delimiter_chars"])
    def test_newline_rejected_on_construction(self, field):
        """Тест: перевод строки нельзя сделать пробельным символом напрямую"""
        with pytest.raises(ValueError, match=f"{field}: line breaks are not allowed"):
            ExpressionConfig(**{field: "\n"})

    @pytest.mark.parametrize("value, message", [
        ("", "must not be empty"),
        ("x", "only whitespace"),
        (None, "expected str"),
    ])
    def test_bad_chars_on_construction(self, value, message):
        with pytest.raises(ValueError, match=message):
            ExpressionConfig(delimiter_chars=value)

    def test_overflow_policy_from_string(self):
        """Тест: строковая политика приводится к перечислению"""
        assert ExpressionConfig(numeric_overflow="defect").numeric_overflow is NumericOverflow.DEFECT

        with pytest.raises(ValueError):
            ExpressionConfig(numeric_overflow="ignore")


class TestLoadConfig:

    def test_none_gives_defaults(self):
        assert load_config(None) is DEFAULT_CONFIG

    def test_mapping(self):
        """Тест: значения из словаря, включая строковую политику"""
        config = load_config({"delimiter_chars": " ", "numeric_overflow": "DEFECT"})

        assert config.delimiter_chars == " "
        assert config.padding_chars == " \t"
        assert config.numeric_overflow == NumericOverflow.DEFECT

    def test_unknown_key(self):
        with pytest.raises(ConfigLoadError, match=r"\$: unknown key\(s\): \['spaces'\]"):
            load_config({"spaces": " "})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigLoadError, match="expected mapping"):
            load_config(["padding_chars"])

    def test_bad_overflow_value(self):
        """Тест: сообщение перечисляет допустимые значения"""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config({"numeric_overflow": "ignore"}, path="templates.expr")

        assert str(exc_info.value) == (
            "templates.expr.numeric_overflow: expected one of ['defect', 'error'], got 'ignore'"
        )

    @pytest.mark.parametrize("value, message", [
        ("", "must not be empty"),
        (" x", "only whitespace"),
        (" \n", "line breaks are not allowed"),
        (7, "expected str, got int"),
    ])
    def test_bad_chars(self, value, message):
        with pytest.raises(ConfigLoadError, match=message):
            load_config({"padding_chars": value})

    def test_error_is_user_error(self):
        with pytest.raises(TplExprUserError):
            load_config({"delimiter_chars": None})


class TestLoadConfigYaml:

    def test_empty_document(self):
        assert load_config_yaml("") is DEFAULT_CONFIG

    def test_document(self):
        config = load_config_yaml('delimiter_chars: " "\nnumeric_overflow: defect\n')

        assert config == ExpressionConfig(delimiter_chars=" ", numeric_overflow=NumericOverflow.DEFECT)

    def test_invalid_yaml(self):
        with pytest.raises(ConfigLoadError, match=r"\$: invalid YAML"):
            load_config_yaml("padding_chars: [\" \"")


class TestConfigEffect:

    def test_delimiters_follow_config(self):
        """Тест: табуляция не разделяет термы, если ее нет в настройках"""
        config = load_config_yaml('delimiter_chars: " "\n')

        assert parse_deref("f a", config=config) == (Apply(LocalRef(Ident("f")), LocalRef(Ident("a"))), "")
        assert parse_deref("f\ta", config=config) == (LocalRef(Ident("f")), "a")

    def test_overflow_policy_follows_config(self):
        text = "1" * 400 + ".0"

        with pytest.raises(NumericLiteralError):
            parse_deref(text, config=load_config({"numeric_overflow": "error"}))
        with pytest.raises(InvariantViolation):
            parse_deref(text, config=load_config({"numeric_overflow": "defect"}))
