# Core type aliases for qlisp's data model.
# Unlike a host-typed Lisp, every datum here is a tagged `Value` subclass
# (see qlisp.types.value) so that per-object flags can be carried.
#
# Naming guidance:
# - LispValue: any evaluated or unevaluated qlisp Value.
# - EvaluatorFn: the evaluator entry point handed to builtins.
# - BuiltinHandler: native operation receiving the unevaluated call arguments.

from typing import Any, Callable

LispValue = Any

EvaluatorFn = Callable[..., LispValue]

BuiltinHandler = Callable[..., LispValue]
