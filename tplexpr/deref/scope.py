"""
Область видимости для резолвинга выражений.

Упорядоченный неизменяемый список пар (идентификатор, значение),
который вызывающая сторона передает резолверу.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from .model import Ident

Binding = Tuple[Ident, Any]


def _as_ident(key: Union[Ident, str]) -> Ident:
    return key if isinstance(key, Ident) else Ident(key)


@dataclass(frozen=True)
class Scope:
    """
    Локальные привязки имен к готовым значениям.

    Поиск линейный, побеждает первая найденная привязка: более поздние
    записи с тем же именем не перекрывают более ранние.
    """
    bindings: Tuple[Binding, ...] = ()

    @classmethod
    def of(cls, pairs: Iterable[Tuple[Union[Ident, str], Any]]) -> "Scope":
        """Создает область из пар, допуская строковые имена."""
        return cls(tuple((_as_ident(key), value) for key, value in pairs))

    def find(self, ident: Union[Ident, str]) -> Optional[Binding]:
        """
        Ищет первую привязку для имени.

        Returns:
            Пару (идентификатор, значение) или None, если имя не связано
        """
        ident = _as_ident(ident)
        for binding in self.bindings:
            if binding[0] == ident:
                return binding
        return None

    def lookup(self, ident: Union[Ident, str], default: Any = None) -> Any:
        binding = self.find(ident)
        return binding[1] if binding is not None else default

    def prepend(self, ident: Union[Ident, str], value: Any) -> "Scope":
        """Новая область, в которой эта привязка находится первой."""
        return Scope(((_as_ident(ident), value),) + self.bindings)

    def __contains__(self, ident: object) -> bool:
        if not isinstance(ident, (Ident, str)) or ident == "":
            return False
        return self.find(ident) is not None

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)


EMPTY_SCOPE = Scope()

__all__ = ["Scope", "Binding", "EMPTY_SCOPE"]
