"""
Извлечение цепочки имен из выражения вида "a b c".

Используется потребителями, которые особым образом обрабатывают
плейсхолдеры из одних только голых имен (например, маршрут с параметрами).
"""

from __future__ import annotations

from typing import List, Optional

from .model import Apply, Deref, LocalRef


def flatten_deref(deref: Deref) -> Optional[List[str]]:
    """
    Возвращает имена цепочки или None, если выражение другой формы.

    - LocalRef(x) дает [x]
    - Apply(LocalRef(x), y) дает flatten_deref(y) + [x], если y разворачивается
    - все остальное (квалифицированные имена, литералы, применение
      не к голому имени) дает None

    Внешнее имя добавляется в конец, а не в начало списка.
    """
    if isinstance(deref, LocalRef):
        return [deref.ident.name]
    if isinstance(deref, Apply) and isinstance(deref.function, LocalRef):
        rest = flatten_deref(deref.argument)
        if rest is None:
            return None
        return rest + [deref.function.ident.name]
    return None


__all__ = ["flatten_deref"]
