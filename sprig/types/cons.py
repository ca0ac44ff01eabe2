"""Cons pair: the building block of proper and improper lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sprig import LispValue
from sprig.types.nil import Nil


@dataclass(frozen=True, eq=True)
class Cons:
    head: LispValue
    tail: LispValue

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue]) -> LispValue:
        """Right-fold `items` into a Nil-terminated chain (Nil when empty)."""
        result: LispValue = Nil
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __str__(self) -> str:
        from sprig.printer import to_lisp
        return to_lisp(self)
