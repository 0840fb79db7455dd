"""
Базовые исключения для выражений шаблонов.

Все ожидаемые ошибки, о которых нужно сообщить автору шаблона
(некорректный текст плейсхолдера, неверная конфигурация), наследуются
от TplExprUserError.

Внутренние дефекты (состояния, которые грамматика исключает) выбрасывают
InvariantViolation, и перехватывать их вызывающей стороне не следует.
"""

from __future__ import annotations


class TplExprUserError(Exception):
    """
    Базовый класс для всех пользовательских ошибок tplexpr.

    Такие ошибки автор шаблона может исправить сам: сломанный синтаксис
    плейсхолдера, неверные значения конфигурации и т.п.
    """
    pass


class InvariantViolation(AssertionError):
    """
    Нарушение внутреннего инварианта (ошибка в парсере, а не во входных данных).

    Например, пустой идентификатор или числовой литерал, прошедший грамматику,
    но не поддающийся преобразованию.
    """
    pass


__all__ = ["TplExprUserError", "InvariantViolation"]
