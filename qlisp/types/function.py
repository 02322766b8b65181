"""Function values: native builtins and user-defined (defun/lambda) functions."""

from __future__ import annotations

from qlisp import BuiltinHandler
from qlisp.types.value import List, Value


class Function(Value):
    """Closed variant: either a BuiltinFunction or a UserFunction."""

    __slots__ = ()


class BuiltinFunction(Function):
    """A native operation receiving the unevaluated arguments of its call form."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: BuiltinHandler):
        super().__init__()
        self.name = name
        self.handler = handler

    def __repr__(self):
        return f"<builtin {self.name}>"


class UserFunction(Function):
    """A function built by `defun` (named) or `lambda` (anonymous).

    `params` holds the parameter names exactly as written, possibly including
    the `.` variadic marker; the defun name is not part of it.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, params: List, body: list[Value], name: str | None = None):
        super().__init__()
        self.name = name
        self.params = params
        self.body = body

    @property
    def is_lambda(self) -> bool:
        return self.name is None

    def __repr__(self):
        return "<lambda>" if self.is_lambda else f"<function {self.name}>"
