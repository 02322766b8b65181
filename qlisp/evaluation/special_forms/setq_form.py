from qlisp import EvaluatorFn
from qlisp import LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError, QLispTypeError
from qlisp.types.nil import Nil
from qlisp.types.symbol import Symbol
from qlisp.types.value import Value


def setq_form(
    tail: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(setq name value): binds in the current frame, never in an outer one."""
    if len(tail) != 2:
        raise QLispArityError(f"setq takes exactly two arguments, {len(tail)} were given")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise QLispTypeError("setq first argument must be a symbol")
    env.define(name, evaluate_fn(val_expr, env, ctx))
    return Nil
