from __future__ import annotations
import sys

from qlisp.types.value import Value


class Symbol(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        super().__init__()
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
