from qlisp import EvaluatorFn
from qlisp import LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError, QLispTypeError
from qlisp.types.nil import Nil, is_truthy
from qlisp.types.value import Else, List, Value


def cond_form(
    tail: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (guard consequent) ... (else consequent))
    Guards are evaluated in order; the first truthy one (or `else`) selects
    its consequent. Nil when no clause matches.
    """
    if not tail:
        raise QLispArityError("cond requires at least one condition pair argument")

    for clause in tail:
        if not isinstance(clause, List) or not clause.items:
            raise QLispTypeError("cond clauses must be (condition value) lists")
        guard = evaluate_fn(clause.items[0], env, ctx)
        if guard is Else or is_truthy(guard):
            if len(clause.items) < 2:
                return Nil
            return evaluate_fn(clause.items[1], env, ctx)
    return Nil
