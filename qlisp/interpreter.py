from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal

from qlisp import LispValue
from qlisp.builtin.env_builtin import register
from qlisp.config import get_max_call_depth
from qlisp.evaluation.evaluator import evaluate
from qlisp.host import Console, FileSourceLoader, SourceLoader, StdConsole, memory_usage
from qlisp.reader.parser import read_all
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.nil import Nil


class Interpreter:
    """
    Orchestrates reading and evaluating qlisp code.

    Startup: build the global frame, register every builtin, then load the
    bootstrap library through the same reader/evaluator pipeline as user code.
    Each instance owns its global frame and call stack.
    """

    def __init__(
        self,
        stdlib: str | None | Literal['auto'] = 'auto',
        *,
        console: Console | None = None,
        loader: SourceLoader | None = None,
        max_call_depth: int | None = None,
        memory_probe: Callable[[], int] | None = None,
    ):
        self.console: Console = console or StdConsole()
        self.loader: SourceLoader = loader or FileSourceLoader()
        self.ctx = RuntimeContext(
            max_call_depth=max_call_depth if max_call_depth is not None else get_max_call_depth(),
            console=self.console,
            memory_probe=memory_probe or memory_usage,
        )
        self.env: Environment = Environment()
        register(self.env)

        if stdlib is None:
            pass  # explicit: no bootstrap library
        elif stdlib == 'auto':
            # Lazy import to avoid circular imports
            from qlisp.modules.source_loader import load_stdlib
            load_stdlib(self)
        elif stdlib:
            self.eval_source(stdlib)

    def eval_source(self, code: str) -> None:
        for expr in read_all(code):
            evaluate(expr, self.env, self.ctx)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form of `code`, returning each result."""
        return [evaluate(expr, self.env, self.ctx) for expr in read_all(code)]

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form of `code` and return the last result."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = evaluate(expr, self.env, self.ctx)
        return result

    def load_file(self, path: str | Path) -> bool:
        from qlisp.modules.source_loader import load_source
        return load_source(self, path)
