from __future__ import annotations

from qlisp.types.value import FALSE, Flag, Value


class NilType(Value):
    __slots__ = ()

    def __init__(self):
        super().__init__(Flag.EVALUATED)

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)


Nil = NilType()


def is_truthy(value: Value) -> bool:
    """Only nil and false are false."""
    return not (value is Nil or value is FALSE)
