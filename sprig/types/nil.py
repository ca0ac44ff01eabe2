from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "#nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
