from qlisp import EvaluatorFn
from qlisp import LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.errors import QLispArityError, QLispTypeError
from qlisp.types.function import UserFunction
from qlisp.types.value import List, Value


def lambda_form(
    tail: list[Value],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) produces an anonymous function with no binding.
    if len(tail) < 2:
        raise QLispArityError("Lambdas should have an argument list and a body")

    params = tail[0]
    if not isinstance(params, List):
        raise QLispTypeError("First parameter of lambda should be a list")

    return UserFunction(List(list(params.items)), tail[1:])
