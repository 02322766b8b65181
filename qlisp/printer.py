"""Value-to-text rendering.

`to_source` produces text the reader accepts again (for numbers, strings
without double quotes, symbols and lists of those). `to_display` is what
`print` writes: identical except that a string shows its raw text.
"""

from __future__ import annotations

from io import StringIO

from qlisp.types.function import BuiltinFunction, UserFunction
from qlisp.types.nil import NilType
from qlisp.types.symbol import Symbol
from qlisp.types.value import Bool, List, Number, String, Value, _Sentinel


def _write(value: Value, buffer: StringIO) -> None:
    match value:
        case Number():
            buffer.write(str(value.value))
        case String():
            buffer.write(f'"{value.value}"')
        case Symbol():
            buffer.write(value.name)
        case NilType():
            buffer.write("nil")
        case Bool():
            buffer.write("true" if value.value else "false")
        case _Sentinel():
            buffer.write(value.name)
        case List():
            if value.literal:
                buffer.write("'")
            buffer.write("(")
            for i, item in enumerate(value.items):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case BuiltinFunction():
            buffer.write(f"<builtin {value.name}>")
        case UserFunction():
            buffer.write("<lambda>" if value.is_lambda else f"<function {value.name}>")
        case _:
            buffer.write(repr(value))


def to_source(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def to_display(value: Value) -> str:
    if isinstance(value, String):
        return value.value
    return to_source(value)
