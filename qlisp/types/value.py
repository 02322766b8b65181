"""Tagged values manipulated by the reader and the evaluator.

Every datum is an instance of a `Value` subclass carrying a small flag set:

- EVALUATED: the value is in final form; evaluating it again returns it as-is.
- LIST_LITERAL: a quote-introduced list whose elements are evaluated in place
  instead of being treated as a call form.

Numbers, strings, booleans, nil and the reader sentinels are created already
EVALUATED. Symbols, lists and functions acquire the flag during evaluation.
"""

from __future__ import annotations

import enum


class Flag(enum.IntFlag):
    NONE = 0
    EVALUATED = enum.auto()
    LIST_LITERAL = enum.auto()


class Value:
    __slots__ = ("flags",)

    def __init__(self, flags: Flag = Flag.NONE):
        self.flags = flags

    @property
    def evaluated(self) -> bool:
        return Flag.EVALUATED in self.flags

    def mark_evaluated(self) -> None:
        self.flags |= Flag.EVALUATED


class Number(Value):
    __slots__ = ("value",)

    def __init__(self, value: int):
        super().__init__(Flag.EVALUATED)
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self):
        return f"Number({self.value!r})"


class String(Value):
    __slots__ = ("value",)

    def __init__(self, value: str):
        super().__init__(Flag.EVALUATED)
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("string", self.value))

    def __repr__(self):
        return f"String({self.value!r})"


class Bool(Value):
    """Two instances only: TRUE and FALSE."""

    __slots__ = ("value",)

    def __init__(self, value: bool):
        super().__init__(Flag.EVALUATED)
        self.value = value

    @staticmethod
    def of(value: bool) -> Bool:
        return TRUE if value else FALSE

    def __repr__(self):
        return "true" if self.value else "false"


TRUE = Bool(True)
FALSE = Bool(False)


class List(Value):
    __slots__ = ("items",)

    def __init__(self, items: list[Value] | None = None, flags: Flag = Flag.NONE):
        super().__init__(flags)
        self.items: list[Value] = items if items is not None else []

    @property
    def literal(self) -> bool:
        return Flag.LIST_LITERAL in self.flags

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other) -> bool:
        return isinstance(other, List) and self.items == other.items

    __hash__ = None  # mutable

    def __repr__(self):
        prefix = "'" if self.literal else ""
        return f"{prefix}List({self.items!r})"


class _Sentinel(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        super().__init__(Flag.EVALUATED)
        self.name = name

    def __repr__(self):
        return self.name


# `.` in parameter lists and call sites; introduces variadic binding.
Dot = _Sentinel(".")

# Bound to `else` in the global frame; always matches as a `cond` guard.
Else = _Sentinel("else")
