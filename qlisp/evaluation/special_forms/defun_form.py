from qlisp import EvaluatorFn
from qlisp import LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError, QLispTypeError
from qlisp.types.function import UserFunction
from qlisp.types.symbol import Symbol
from qlisp.types.value import List, Value


def defun_form(
    tail: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun (name params...) body...)
    Binds `name` in the current frame and returns the function.
    """
    if len(tail) < 2:
        raise QLispArityError("Function should have an argument list and a body")

    signature = tail[0]
    if not isinstance(signature, List):
        raise QLispTypeError("Function definition list should be a list")
    if not signature.items or not isinstance(signature.items[0], Symbol):
        raise QLispTypeError("Function definition list should start with the function name")

    name, *params = signature.items
    fn = UserFunction(List(params), tail[1:], name=name.name)
    env.define(name, fn)
    return fn
