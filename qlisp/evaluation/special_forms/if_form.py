from qlisp import EvaluatorFn
from qlisp import LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError
from qlisp.types.nil import is_truthy
from qlisp.types.value import Value


def if_form(
    tail: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise QLispArityError(
            "if takes exactly 3 arguments: condition, then, and else blocks. "
            f"The function was given {len(tail)} arguments instead"
        )
    condition, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(condition, env, ctx)):
        return evaluate_fn(then_expr, env, ctx)
    return evaluate_fn(else_expr, env, ctx)
