"""Builtins that reach the host: console output, memory, clock and sleep."""
from __future__ import annotations

import time

from qlisp import EvaluatorFn, LispValue
from qlisp.printer import to_display, to_source
from qlisp.builtin.arity import expect_arity
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispTypeError
from qlisp.types.nil import Nil
from qlisp.types.value import Number, String, Value


def print_builtin(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Write every evaluated argument, unseparated, as one line; returns nil."""
    text = "".join(to_display(evaluate_fn(expr, env, ctx)) for expr in tail)
    ctx.console.write_line(text)
    return Nil


def memtotal(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    expect_arity("memtotal", tail, 0)
    return Number(ctx.memory_probe())


def timeit(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """(timeit expr) -> elapsed milliseconds as a string; the result of expr is discarded."""
    expect_arity("timeit", tail, 1)
    start = time.perf_counter()
    evaluate_fn(tail[0], env, ctx)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return String(f"{elapsed_ms:f}")


def sleep(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """(sleep ms) blocks the evaluation thread."""
    expect_arity("sleep", tail, 1)
    ms = evaluate_fn(tail[0], env, ctx)
    if not isinstance(ms, Number) or ms.value < 0:
        raise QLispTypeError(f"sleep expects a non-negative number of milliseconds, got {to_source(ms)}")
    time.sleep(ms.value / 1000.0)
    return Nil


HOST_BUILTINS = {
    "print": print_builtin,
    "memtotal": memtotal,
    "timeit": timeit,
    "sleep": sleep,
}
