"""Application of user-defined functions.

Binding rules for `(f a1 a2 ...)` against parameters `(p1 p2 ...)`:

- each parameter is bound to its positional argument, evaluated eagerly in
  the caller's environment; missing arguments bind to nil, extra ones are
  ignored unless a variadic parameter collects them;
- `. rest` as the last two parameters binds `rest` to a fresh list of all
  remaining (evaluated) arguments;
- `. xs` as the last two call-site arguments splices the elements of the
  list `xs` into that variadic list.

The new frame's parent is the environment of the call site.
"""

from __future__ import annotations

from qlisp import EvaluatorFn
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispMalformedVariadic, QLispStackOverflow, QLispTypeError
from qlisp.types.function import UserFunction
from qlisp.types.nil import Nil
from qlisp.types.symbol import Symbol
from qlisp.types.value import Dot, Flag, List, Value


def _display_name(fn: UserFunction) -> str:
    return "lambda" if fn.is_lambda else fn.name


def collect_variadic(
    fn: UserFunction,
    args: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> List:
    """Evaluate `args` into a new list, splicing a trailing `. xs` expansion."""
    items: list[Value] = []
    for i, arg in enumerate(args):
        if arg is Dot:
            if i != len(args) - 2:
                raise QLispMalformedVariadic(
                    f"Error while calling {_display_name(fn)}: dot notation on the caller side "
                    "must be followed by a list argument containing the variadic expansion list"
                )
            expansion = evaluate_fn(args[i + 1], env, ctx)
            if not isinstance(expansion, List):
                raise QLispMalformedVariadic(
                    "dot operator on caller side should always be followed by a list argument"
                )
            items.extend(expansion.items)
            break
        items.append(evaluate_fn(arg, env, ctx))
    return List(items, Flag.EVALUATED)


def bind_arguments(
    fn: UserFunction,
    args: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """Build the call frame for `fn` applied to the unevaluated `args`."""
    params = fn.params.items
    frame = Environment(outer=env)
    for i, param in enumerate(params):
        if param is Dot:
            if i != len(params) - 2:
                raise QLispMalformedVariadic(
                    "apply (.) operator in function definition incorrectly placed. "
                    "It should be at the pre-last position, followed by a vararg list argument name"
                )
            rest = params[i + 1]
            if not isinstance(rest, Symbol):
                raise QLispMalformedVariadic(f"Variadic parameter of {_display_name(fn)} must be a symbol")
            frame.define(rest, collect_variadic(fn, args[i:], env, ctx, evaluate_fn))
            return frame
        if not isinstance(param, Symbol):
            raise QLispTypeError(f"Parameters of {_display_name(fn)} must be symbols")
        if i >= len(args):
            frame.define(param, Nil)
            continue
        if args[i] is Dot:
            raise QLispMalformedVariadic(
                f"Error while calling {_display_name(fn)}: it takes no variadic arguments"
            )
        frame.define(param, evaluate_fn(args[i], env, ctx))
    return frame


def call_function(
    fn: UserFunction,
    args: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a user function to the unevaluated call-site `args`.

    Evaluates every body form in a fresh frame and returns the last result.
    Raises QLispStackOverflow once the call depth exceeds the configured
    maximum; the depth is restored on every exit path.
    """
    if ctx.call_depth > ctx.max_call_depth:
        raise QLispStackOverflow(
            f"Max call stack size reached ({ctx.max_call_depth}) while calling {_display_name(fn)}"
        )

    frame = bind_arguments(fn, args, env, ctx, evaluate_fn)

    result: Value = Nil
    ctx.call_depth += 1
    try:
        for expr in fn.body:
            result = evaluate_fn(expr, frame, ctx)
    finally:
        ctx.call_depth -= 1
    return result
