"""Core evaluator for the qlisp interpreter.

Evaluation rules, by value:

- anything flagged EVALUATED is returned unchanged;
- a Symbol resolves through the environment chain; the first evaluation of a
  binding is written back into the frame that holds it;
- a literal list evaluates its elements in place and becomes EVALUATED;
- a call form evaluates its operator; builtins receive the unevaluated
  arguments, user functions go through `call_function`;
- nil, booleans, numbers and strings are self-evaluating.

Recoverable errors raised while applying a call form are logged and replaced
by nil at that call form. Exhausting the host stack while applying one is
reported as a stack overflow, like exceeding the call limit.
"""

from __future__ import annotations

import logging

from qlisp.evaluation.apply import call_function
from qlisp.printer import to_source
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispEvalError, QLispNotCallable, QLispStackOverflow
from qlisp.types.function import BuiltinFunction, UserFunction
from qlisp.types.nil import Nil
from qlisp.types.symbol import Symbol
from qlisp.types.value import List, Value

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Environment, ctx: RuntimeContext) -> Value:
    if expr.evaluated:
        return expr

    match expr:
        case Symbol():
            return resolve_symbol(expr, env, ctx)
        case List() if expr.literal:
            items = expr.items
            for i, item in enumerate(items):
                items[i] = evaluate(item, env, ctx)
            expr.mark_evaluated()
            return expr
        case List():
            if not expr.items:
                return expr
            return apply_form(expr, env, ctx)

    # --- Atoms return as-is ---
    return expr


def resolve_symbol(sym: Symbol, env: Environment, ctx: RuntimeContext) -> Value:
    frame = env.find(sym)
    if frame is None:
        logger.warning('Symbol not found: "%s"', sym.name)
        return Nil
    value = frame.vars[sym.name]
    if not value.evaluated:
        value = evaluate(value, frame, ctx)
        value.mark_evaluated()
        frame.vars[sym.name] = value
    return value


def apply_form(form: List, env: Environment, ctx: RuntimeContext) -> Value:
    head, *tail = form.items
    try:
        fn = evaluate(head, env, ctx)
        match fn:
            case BuiltinFunction():
                return fn.handler(tail, env, ctx, evaluate)
            case UserFunction():
                return call_function(fn, tail, env, ctx, evaluate)
            case _:
                raise QLispNotCallable(f'"{to_source(fn)}" is not callable')
    except QLispEvalError as err:
        logger.error("%s", err)
        return Nil
    except RecursionError:
        # deep nesting inside bodies can exhaust the host stack before the call limit
        raise QLispStackOverflow(
            f"Max call stack size reached at depth {ctx.call_depth}: expression nesting too deep"
        ) from None
