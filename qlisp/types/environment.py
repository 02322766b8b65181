"""Runtime environment for qlisp.

The Environment stores bindings of symbol names to values and supports
nested scopes via an `outer` link. The frame without an outer link is the
global frame: it holds the builtins and every top-level setq/defun binding.
Each user-function call creates one frame whose outer link is the frame
active at the call site.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from qlisp.types.errors import QLispTypeError
from qlisp.types.symbol import Symbol
from qlisp.types.value import Value


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise QLispTypeError(f"Cannot bind {name!r}: a symbol is required")


class Environment:
    """One frame of the scope chain: a name -> Value mapping plus its parent."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        # non-owning link; the parent outlives this frame
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` to `value` in this frame, replacing any previous binding."""
        self.vars[_key(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> Optional[Value]:
        """Raw binding of `name` (no evaluation), or None when unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
