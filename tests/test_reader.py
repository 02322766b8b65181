import string

import pytest
from hypothesis import given, strategies as st

from qlisp.printer import to_source
from qlisp.reader.parser import read_all, read_one
from qlisp.types.errors import (
    QLispInvalidCharacter,
    QLispNestingTooDeep,
    QLispNumberOutOfRange,
    QLispUnexpectedEof,
)
from qlisp.types.symbol import Symbol
from qlisp.types.value import Dot, Flag, List, Number, String


def _read(source):
    value, _ = read_one(source)
    return value


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", Number(42)),
        ("0", Number(0)),
        ("2147483647", Number(2147483647)),
        ('"hello world"', String("hello world")),
        ('""', String("")),
        ('"a\\nb"', String("a\\nb")),  # no escape processing
        ('"(; not a comment)"', String("(; not a comment)")),
        ("foo", Symbol("foo")),
        ("+", Symbol("+")),
        ("**", Symbol("**")),
        ("<=", Symbol("<=")),
        ("null?", Symbol("null?")),
        ("()", List([])),
        ("(a 1 \"s\")", List([Symbol("a"), Number(1), String("s")])),
        ("(+ (* 2 3) 4)", List([Symbol("+"), List([Symbol("*"), Number(2), Number(3)]), Number(4)])),
        ("  \r\n  7", Number(7)),
        ("; comment\n 7", Number(7)),
        ("(1 ; inner comment\n 2)", List([Number(1), Number(2)])),
    ],
)
def test_read_one_value(source, expected):
    assert _read(source) == expected


def test_quote_marks_list_literal():
    plain = _read("(1 2)")
    quoted = _read("'(1 2)")
    assert quoted == plain
    assert quoted.literal
    assert not plain.literal
    # nested lists keep their own flag
    nested = _read("'((1) '(2))")
    assert not nested.items[0].literal
    assert nested.items[1].literal


def test_literals_start_evaluated_symbols_and_lists_do_not():
    assert _read("1").evaluated
    assert _read('"s"').evaluated
    assert not _read("x").evaluated
    assert not _read("(x)").evaluated
    assert not _read("'(x)").evaluated


def test_dot_is_a_sentinel_not_a_symbol():
    value = _read("(f a . rest)")
    assert value.items[2] is Dot
    assert not isinstance(value.items[2], Symbol)
    assert _read(".") is Dot


def test_read_one_returns_position():
    text = "1 (a b)  \"c\""
    v1, pos = read_one(text)
    assert v1 == Number(1) and pos == 1
    v2, pos = read_one(text, pos)
    assert v2 == List([Symbol("a"), Symbol("b")]) and pos == 7
    v3, pos = read_one(text, pos)
    assert v3 == String("c") and pos == len(text)
    v4, pos = read_one(text, pos)
    assert v4 is None and pos == len(text)


@pytest.mark.parametrize("source", ["", "   ", "\n\r\n", "; only a comment", "; a\n; b\n"])
def test_blank_input_reads_nothing(source):
    value, pos = read_one(source)
    assert value is None
    assert pos == len(source)
    assert list(read_all(source)) == []


@pytest.mark.parametrize(
    "source, expected",
    [
        # numbers are unsigned; operators and identifiers are both symbols
        ("-5", [Symbol("-"), Number(5)]),
        ("x1", [Symbol("x"), Number(1)]),
        ("12abc", [Number(12), Symbol("abc")]),
        ("a.b", [Symbol("a"), Dot, Symbol("b")]),
        ("(a)(b)", [List([Symbol("a")]), List([Symbol("b")])]),
    ],
)
def test_token_boundaries(source, expected):
    assert list(read_all(source)) == expected


@pytest.mark.parametrize(
    "source, error",
    [
        ("(1 2", QLispUnexpectedEof),
        ("(1 (2 3)", QLispUnexpectedEof),
        ('"abc', QLispUnexpectedEof),
        ("'", QLispUnexpectedEof),
        ("#", QLispInvalidCharacter),
        (")", QLispInvalidCharacter),
        ("\t1", QLispInvalidCharacter),
        ("'a", QLispInvalidCharacter),
        ("' (a)", QLispInvalidCharacter),
        ("(a [b])", QLispInvalidCharacter),
        ("2147483648", QLispNumberOutOfRange),
    ],
)
def test_read_errors(source, error):
    with pytest.raises(error):
        list(read_all(source))


def test_read_error_reports_line_and_column():
    with pytest.raises(QLispInvalidCharacter) as info:
        list(read_all("(1\n  @)"))
    assert info.value.line == 2
    assert info.value.column == 3
    assert "line 2, column 3" in str(info.value)


@pytest.mark.parametrize("opener", ["(", "'("])
def test_excessive_nesting_is_a_read_error(opener):
    with pytest.raises(QLispNestingTooDeep, match="nested too deeply") as info:
        list(read_all(opener * 100_000))
    assert info.value.line == 1


# -------------------------------
# Round trip: render then re-read
# -------------------------------
SYMBOL_ALPHABET = string.ascii_letters + "+-=*/><?"

number_strat = st.integers(min_value=0, max_value=2**31 - 1).map(Number)
string_strat = st.text(
    st.characters(exclude_characters='"', exclude_categories=("Cs",)), max_size=20
).map(String)
symbol_strat = st.text(st.sampled_from(SYMBOL_ALPHABET), min_size=1, max_size=8).map(Symbol)


def _quoted(items):
    return List(items, Flag.LIST_LITERAL)


element_strat = st.recursive(
    st.one_of(number_strat, string_strat, symbol_strat),
    lambda children: st.lists(children, max_size=4).map(_quoted),
    max_leaves=12,
)
literal_strat = st.one_of(
    number_strat,
    string_strat,
    st.lists(element_strat, max_size=5).map(_quoted),
)


@given(literal_strat)
def test_render_then_read_round_trip(value):
    source = to_source(value)
    reread, pos = read_one(source)
    assert pos == len(source)
    assert reread == value
    assert to_source(reread) == source
