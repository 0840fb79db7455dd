"""
Посимвольный курсор для разбора выражений с откатом.

Предоставляет методы для навигации по тексту и стек позиций
для сохранения/восстановления при неудачных попытках разбора.
"""

from __future__ import annotations

from typing import Callable, List


class TextCursor:
    """
    Курсор над исходным текстом.

    Позиция всегда указывает на следующий непрочитанный символ.
    """

    def __init__(self, text: str, position: int = 0):
        if position < 0 or position > len(text):
            raise IndexError(f"Cursor position {position} is out of range 0..{len(text)}")
        self.text = text
        self.position = position
        self.length = len(text)

        # Стек для сохранения/восстановления позиции
        self._position_stack: List[int] = []

    def current(self) -> str:
        """Возвращает текущий символ или пустую строку в конце текста."""
        if self.position >= self.length:
            return ""
        return self.text[self.position]

    def peek(self, offset: int = 1) -> str:
        """Возвращает символ на указанном смещении от текущей позиции."""
        pos = self.position + offset
        if pos >= self.length:
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Продвигается к следующему символу и возвращает предыдущий."""
        current = self.current()
        if self.position < self.length:
            self.position += 1
        return current

    def is_at_end(self) -> bool:
        return self.position >= self.length

    def match(self, ch: str) -> bool:
        """Потребляет символ, если он совпадает с текущим."""
        if self.current() == ch and ch:
            self.position += 1
            return True
        return False

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Потребляет символы, пока выполняется предикат, и возвращает их."""
        start = self.position
        while self.position < self.length and predicate(self.text[self.position]):
            self.position += 1
        return self.text[start:self.position]

    def remaining(self) -> str:
        """Возвращает непрочитанный остаток текста."""
        return self.text[self.position:]

    def save_position(self) -> None:
        self._position_stack.append(self.position)

    def restore_position(self) -> None:
        """Возвращается к последней сохраненной позиции и снимает её со стека."""
        if self._position_stack:
            self.position = self._position_stack.pop()

    def discard_saved_position(self) -> None:
        """Снимает сохраненную позицию со стека без отката."""
        if self._position_stack:
            self._position_stack.pop()

    def __repr__(self) -> str:
        return f"TextCursor(pos={self.position}, rest={self.remaining()[:20]!r})"


__all__ = ["TextCursor"]
