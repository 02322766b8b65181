import pytest

from qlisp.evaluation.evaluator import evaluate
from qlisp.reader.parser import read_one
from qlisp.types.environment import Environment
from qlisp.types.function import BuiltinFunction
from qlisp.types.nil import Nil
from qlisp.types.symbol import Symbol
from qlisp.types.value import FALSE, TRUE, Dot, Flag, List, Number, String


def _read(source):
    return read_one(source)[0]


# -----------------------------------------------------
# Self-evaluating values
# -----------------------------------------------------

@pytest.mark.parametrize("value", [Number(1), String("s"), Nil, TRUE, FALSE, Dot])
def test_self_evaluating_values(interp, value):
    assert evaluate(value, interp.env, interp.ctx) is value


def test_evaluated_value_is_never_reevaluated(interp, caplog):
    already = List([Symbol("zzz")], Flag.EVALUATED)
    assert evaluate(already, interp.env, interp.ctx) is already
    assert already.items == [Symbol("zzz")]
    assert "Symbol not found" not in caplog.text


def test_empty_call_form_evaluates_to_itself(interp):
    form = _read("()")
    assert evaluate(form, interp.env, interp.ctx) is form


# -----------------------------------------------------
# Symbols
# -----------------------------------------------------

def test_symbol_lookup_and_shadowing(interp):
    interp.env.define("x", Number(1))
    child = Environment(outer=interp.env)
    child.define("x", Number(2))
    grandchild = Environment(outer=child)
    assert evaluate(Symbol("x"), grandchild, interp.ctx) == Number(2)
    assert evaluate(Symbol("x"), interp.env, interp.ctx) == Number(1)


def test_unbound_symbol_is_nil_with_warning(interp, caplog):
    assert interp.eval("undefined") is Nil
    assert 'Symbol not found: "undefined"' in caplog.text


def test_symbol_resolution_memoizes_the_binding_not_the_token(interp):
    interp.env.define("y", Number(5))
    interp.env.define("x", Symbol("y"))  # an unevaluated binding
    child = Environment(outer=interp.env)
    token = Symbol("x")

    result = evaluate(token, child, interp.ctx)

    assert result == Number(5)
    # written back into the frame where the binding was found
    assert interp.env.vars["x"] is result
    assert result.evaluated
    assert "x" not in child.vars
    # the symbol token itself is untouched
    assert not token.evaluated
    assert evaluate(token, child, interp.ctx) is result


def test_unevaluated_binding_resolves_in_the_frame_that_holds_it(interp):
    interp.env.define("y", Number(1))
    interp.env.define("x", Symbol("y"))
    child = Environment(outer=interp.env)
    child.define("y", Number(2))  # shadows y at the use site only

    assert evaluate(Symbol("x"), child, interp.ctx) == Number(1)
    assert interp.env.vars["x"] == Number(1)
    # the cached value stays consistent for other frames
    assert evaluate(Symbol("x"), Environment(outer=interp.env), interp.ctx) == Number(1)


def test_function_binding_is_marked_evaluated_on_first_lookup(interp):
    fn = interp.eval("(lambda (a) a)")
    interp.env.define("f", fn)
    assert not fn.evaluated
    assert interp.eval("f") is fn
    assert fn.evaluated


# -----------------------------------------------------
# Literal lists
# -----------------------------------------------------

def test_literal_list_evaluates_elements_in_place(interp):
    lst = _read("'(1 (+ 1 1) \"s\")")
    result = evaluate(lst, interp.env, interp.ctx)
    assert result is lst
    assert result == List([Number(1), Number(2), String("s")])
    assert result.evaluated


def test_literal_list_evaluation_is_idempotent(interp):
    interp.eval("(setq a 1)")
    lst = _read("'(a)")
    first = evaluate(lst, interp.env, interp.ctx)
    interp.eval("(setq a 2)")
    second = evaluate(lst, interp.env, interp.ctx)
    assert first is second
    assert second == List([Number(1)])


def test_literal_list_in_function_body_is_evaluated_once(interp):
    interp.eval("(defun (f x) '(x))")
    assert interp.eval("(f 1)") == List([Number(1)])
    assert interp.eval("(f 2)") == List([Number(1)])


def test_plain_list_inside_literal_is_a_call(interp):
    assert interp.eval("'((+ 1 2) 4)") == List([Number(3), Number(4)])


# -----------------------------------------------------
# Call forms
# -----------------------------------------------------

def test_not_callable_reports_and_yields_nil(interp, caplog):
    assert interp.eval("(1 2)") is Nil
    assert '"1" is not callable' in caplog.text
    assert interp.eval('("f")') is Nil
    assert '""f"" is not callable' in caplog.text


def test_builtins_receive_unevaluated_arguments(interp):
    seen = []

    def spy(tail, env, ctx, evaluate_fn):
        seen.extend(tail)
        return Number(len(tail))

    interp.env.define("spy", BuiltinFunction("spy", spy))
    assert interp.eval("(spy (+ 1 2) x)") == Number(2)
    assert isinstance(seen[0], List)
    assert seen[1] == Symbol("x")


def test_operator_position_is_evaluated(interp):
    assert interp.eval("(setq plus +) (plus 2 3)") == Number(5)
    assert interp.eval("((lambda (a) (* a a)) 4)") == Number(16)


def test_nested_error_recovers_at_innermost_call(interp, caplog):
    # car fails, yields nil; print still runs with the nil
    assert interp.eval("(print (car 5) \"!\")") is Nil
    assert interp.console.output == ["nil!"]
    assert "car only operates on lists, got 5" in caplog.text
