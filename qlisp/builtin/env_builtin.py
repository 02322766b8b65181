"""Built-in functions for the qlisp global environment.

This module defines arithmetic, comparison and list decomposition builtins,
and `register`, which installs every builtin (special forms and host
operations included) plus the global constants into an environment.

All builtins share one calling convention: `(tail, env, ctx, evaluate_fn)`
where `tail` holds the unevaluated arguments of the call form.
"""
from __future__ import annotations

import operator
from typing import Callable

from qlisp import EvaluatorFn, LispValue
from qlisp.builtin.arity import expect_arity
from qlisp.builtin.host_builtin import HOST_BUILTINS
from qlisp.evaluation.special_forms import SPECIAL_FORMS
from qlisp.printer import to_source
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError, QLispDivisionByZero, QLispTypeError
from qlisp.types.function import BuiltinFunction
from qlisp.types.nil import Nil
from qlisp.types.value import FALSE, TRUE, Bool, Else, Flag, List, Number, String, Value


def _number(name: str, value: Value) -> int:
    if not isinstance(value, Number):
        raise QLispTypeError(f"{name} only operates on numbers, got {to_source(value)}")
    return value.value


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, op: Callable[[int, int], int]):
    def fold(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
        if len(tail) < 2:
            raise QLispArityError(f"{name} operator can't have less than two arguments")
        result = _number(name, evaluate_fn(tail[0], env, ctx))
        for expr in tail[1:]:
            result = op(result, _number(name, evaluate_fn(expr, env, ctx)))
        return Number(result)
    fold.__name__ = f"fold_{op.__name__}"
    return fold


add = _fold("+", operator.add)
sub = _fold("-", operator.sub)


def _binary(name: str, handler: Callable[[Value, Value], Value]):
    """Exactly two operands, both evaluated left to right."""
    def binary(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
        if len(tail) != 2:
            raise QLispArityError(f"{name} takes exactly 2 operands, {len(tail)} was given")
        left = evaluate_fn(tail[0], env, ctx)
        right = evaluate_fn(tail[1], env, ctx)
        return handler(left, right)
    binary.__name__ = f"binary_{handler.__name__}"
    return binary


def objects_mul(a: Value, b: Value) -> Value:
    return Number(_number("*", a) * _number("*", b))


def objects_div(a: Value, b: Value) -> Value:
    n, d = _number("/", a), _number("/", b)
    if d == 0:
        raise QLispDivisionByZero("Division by zero")
    # truncate toward zero
    q = abs(n) // abs(d)
    return Number(q if (n < 0) == (d < 0) else -q)


def objects_pow(a: Value, b: Value) -> Value:
    base, exp = _number("**", a), _number("**", b)
    if exp < 0:
        if base == 0:
            raise QLispDivisionByZero("Zero cannot be raised to a negative power")
        return Number(int(base ** exp))
    return Number(base ** exp)


# -------------------------------
# Comparison
# -------------------------------
def objects_equal(a: Value, b: Value) -> Value:
    return Bool.of(a == b)


def _ordered(name: str, op: Callable[[object, object], bool]):
    def compare(a: Value, b: Value) -> Value:
        if isinstance(a, Number) and isinstance(b, Number):
            return Bool.of(op(a.value, b.value))
        if isinstance(a, String) and isinstance(b, String):
            return Bool.of(op(a.value, b.value))
        raise QLispTypeError(
            f"{name} compares two numbers or two strings, got {to_source(a)} and {to_source(b)}"
        )
    compare.__name__ = f"objects_{op.__name__}"
    return compare


objects_gt = _ordered(">", operator.gt)
objects_lt = _ordered("<", operator.lt)


# -------------------------------
# List operations
# -------------------------------
def _list_argument(name: str, tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> List:
    expect_arity(name, tail, 1)
    value = evaluate_fn(tail[0], env, ctx)
    if not isinstance(value, List):
        raise QLispTypeError(f"{name} only operates on lists, got {to_source(value)}")
    return value


def car(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """First element of a list; nil for the empty list."""
    xs = _list_argument("car", tail, env, ctx, evaluate_fn)
    return xs.items[0] if xs.items else Nil


def cadr(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Second element of a list; nil when it has fewer than two."""
    xs = _list_argument("cadr", tail, env, ctx, evaluate_fn)
    return xs.items[1] if len(xs.items) > 1 else Nil


def cdr(tail: list[Value], env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """A new list of every element past the first.

    The empty list is returned as-is rather than copied.
    """
    xs = _list_argument("cdr", tail, env, ctx, evaluate_fn)
    if not xs.items:
        return xs
    return List(xs.items[1:], Flag.EVALUATED)


BUILTINS = {
    "+": add,
    "-": sub,
    "*": _binary("*", objects_mul),
    "/": _binary("/", objects_div),
    "**": _binary("**", objects_pow),
    "=": _binary("=", objects_equal),
    ">": _binary(">", objects_gt),
    "<": _binary("<", objects_lt),
    "car": car,
    "cdr": cdr,
    "cadr": cadr,
}


def register(env: Environment) -> None:
    """Install the global constants and every builtin into `env`."""
    env.update({
        "nil": Nil,
        "true": TRUE,
        "false": FALSE,
        "else": Else,
    })
    for table in (BUILTINS, SPECIAL_FORMS, HOST_BUILTINS):
        for name, handler in table.items():
            env.define(name, BuiltinFunction(name, handler))
