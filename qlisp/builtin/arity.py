from qlisp.types.errors import QLispArityError
from qlisp.types.value import Value


def expect_arity(name: str, tail: list[Value], n: int) -> None:
    if len(tail) != n:
        plural = "argument" if n == 1 else "arguments"
        raise QLispArityError(f"{name} takes exactly {n} {plural}, {len(tail)} were given")
