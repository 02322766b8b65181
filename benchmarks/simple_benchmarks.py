from timeit import timeit

from qlisp.interpreter import Interpreter
from qlisp.types.environment import Environment
from qlisp.types.value import Number

# Helpers to parse once, and to measure reading and evaluation separately
from qlisp.reader.parser import read_all, read_one
from qlisp.evaluation.evaluator import evaluate


def _parse_one(code: str):
    expr, _ = read_one(code)
    return expr


def time_reader(code: str, rounds: int) -> float:
    """Time the reader alone on the full program text."""
    return timeit(lambda: list(read_all(code)), number=rounds)


def time_evaluator(setup: str, code: str, rounds: int) -> float:
    """Time evaluation only: parses once and repeatedly evaluates the same
    call form. Call forms are never memoized, so every round does full work.
    """
    itp = Interpreter(stdlib=None)
    itp.eval(setup)
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, itp.env, itp.ctx)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env, itp.ctx), number=rounds)


# Micro-benchmark: environment lookup chain (does not involve the evaluator)

def bench_lookup_chain(n_envs: int = 200, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    root.define("answer", Number(42))
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup("answer")
    # Timed
    return timeit(lambda: env.lookup("answer"), number=n_lookups)


LAMBDA_APPLY = ("", "((lambda (x y) (+ x y)) 1 2)")

RECURSION = (
    "(defun (fact n) (if (= n 0) 1 (* n (fact (- n 1)))))",
    "(fact 100)",
)

ARITH_SUM = (
    "(defun (sum-n n acc) (if (< n 1) acc (sum-n (- n 1) (+ acc n))))",
    "(sum-n 200 0)",
)

VARIADIC = (
    "(defun (count . xs) (if (= xs '()) 0 (+ 1 (count . (cdr xs)))))",
    "(count 1 2 3 4 5 6 7 8 9 10)",
)


def _print_pair(name: str, program: tuple[str, str], rounds: int) -> None:
    setup, code = program
    tread = time_reader(setup + "\n" + code, rounds)
    teval = time_evaluator(setup, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  reader: {tread:.6f}s  |  evaluator: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    # Pure environment benchmark
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_pair("lambda application", LAMBDA_APPLY, rounds=20000)
    _print_pair("recursion (factorial)", RECURSION, rounds=500)
    _print_pair("arithmetic sum 1..200", ARITH_SUM, rounds=500)
    _print_pair("variadic splice", VARIADIC, rounds=2000)
