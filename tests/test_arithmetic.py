import pytest

from qlisp.types.nil import Nil
from qlisp.types.value import FALSE, TRUE, Number


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 3 5)", -2),
        ("(* 6 7)", 42),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ (- 0 7) 2)", -3),  # truncates toward zero
        ("(/ 0 5)", 0),
        ("(** 2 10)", 1024),
        ("(** 5 0)", 1),
        ("(** 2 (- 0 1))", 0),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 (* 2 (+ 3 4)))", 15),
    ],
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source) == Number(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", TRUE),
        ("(= 1 2)", FALSE),
        ('(= "a" "a")', TRUE),
        ('(= "a" 1)', FALSE),
        ("(= '(1 2) '(1 2))", TRUE),
        ("(= '(1 2) '(1 3))", FALSE),
        ("(= nil nil)", TRUE),
        ("(> 2 1)", TRUE),
        ("(> 1 2)", FALSE),
        ("(< 1 2)", TRUE),
        ("(< 2 2)", FALSE),
        ('(< "abc" "abd")', TRUE),
        ('(> "b" "a")', TRUE),
    ],
)
def test_comparison_returns_booleans(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1)", "can't have less than two arguments"),
        ("(- 1)", "can't have less than two arguments"),
        ("(+)", "can't have less than two arguments"),
        ("(* 1 2 3)", "* takes exactly 2 operands, 3 was given"),
        ("(/ 1)", "/ takes exactly 2 operands, 1 was given"),
        ("(** 2)", "** takes exactly 2 operands"),
        ("(= 1 1 1)", "= takes exactly 2 operands"),
        ("(> 1)", "> takes exactly 2 operands"),
        ("(/ 1 0)", "Division by zero"),
        ("(** 0 (- 0 1))", "negative power"),
        ('(+ 1 "a")', "+ only operates on numbers"),
        ("(* '(1) 2)", "* only operates on numbers"),
        ('(> 1 "a")', "> compares two numbers or two strings"),
    ],
)
def test_errors_are_reported_and_yield_nil(interp, caplog, source, message):
    assert interp.eval(source) is Nil
    assert message in caplog.text


def test_evaluation_continues_after_recoverable_error(interp):
    results = interp.eval_all("(+ 1) (+ 1 1)")
    assert results == [Nil, Number(2)]


def test_operands_evaluated_left_to_right(interp, console):
    interp.eval('(= (print "left") (print "right"))')
    assert console.output == ["left", "right"]
