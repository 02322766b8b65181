"""
  qlisp Reader: lexer and parser fused into one recursive-descent pass.

Grammar, by leading character:

    space CR LF      skipped
    ;                comment to end of line, skipped
    (                list, read until the matching )
    '(               literal list (flagged LIST_LITERAL)
    "                string, raw copy up to the closing " (no escapes)
    0-9              number, consecutive digits, 32-bit signed range
    .                the variadic marker (Dot sentinel)
    letter + - = * / > < ?
                     symbol, consumed greedily over that alphabet

Anything else is an invalid character. Read errors are fatal.
"""

from __future__ import annotations

from typing import Iterator, Optional

from qlisp.types.errors import (
    QLispInvalidCharacter,
    QLispNestingTooDeep,
    QLispNumberOutOfRange,
    QLispUnexpectedEof,
)
from qlisp.types.symbol import Symbol
from qlisp.types.value import Dot, Flag, List, Number, String, Value

WHITESPACE = frozenset(" \r\n")
SYMBOL_PUNCTUATION = frozenset("+-=*/><?")
MAX_NUMBER = 2**31 - 1


def is_symbol_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalpha()) or ch in SYMBOL_PUNCTUATION


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Reader:
    """Cursor over one source text. Each instance is independent."""

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.pos = position
        self.n = len(text)

    # --- error positions ---
    def _line_col(self, pos: int) -> tuple[int, int]:
        line = self.text.count("\n", 0, pos) + 1
        col = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, col

    def _eof(self, what: str) -> QLispUnexpectedEof:
        return QLispUnexpectedEof(f"Unexpected end of input {what}", *self._line_col(self.pos))

    def _invalid(self, message: str) -> QLispInvalidCharacter:
        return QLispInvalidCharacter(message, *self._line_col(self.pos))

    def skip_whitespace_and_comments(self) -> None:
        text, n = self.text, self.n
        while self.pos < n:
            ch = text[self.pos]
            if ch in WHITESPACE:
                self.pos += 1
            elif ch == ";":
                end = text.find("\n", self.pos)
                self.pos = n if end < 0 else end + 1
            else:
                break

    def parse_expr(self) -> Optional[Value]:
        """Read the next value, or return None when only blanks remain."""
        self.skip_whitespace_and_comments()
        if self.pos >= self.n:
            return None

        ch = self.text[self.pos]
        if ch == "(":
            return self.read_list()
        if ch == "'":
            self.pos += 1
            if self.pos >= self.n:
                raise self._eof("after quote")
            if self.text[self.pos] != "(":
                raise self._invalid(f"Expected '(' after quote but found {self.text[self.pos]!r}")
            return self.read_list(literal=True)
        if ch == '"':
            return self.read_string()
        if ch == ".":
            self.pos += 1
            return Dot
        if is_digit(ch):
            return self.read_number()
        if is_symbol_char(ch):
            return self.read_symbol()
        raise self._invalid(f"Invalid character: {ch!r} ({ord(ch)})")

    def read_list(self, literal: bool = False) -> List:
        result = List(flags=Flag.LIST_LITERAL if literal else Flag.NONE)
        self.pos += 1  # consume (
        while True:
            self.skip_whitespace_and_comments()
            if self.pos >= self.n:
                raise self._eof("inside list")
            if self.text[self.pos] == ")":
                self.pos += 1
                return result
            try:
                result.items.append(self.parse_expr())
            except RecursionError:
                raise QLispNestingTooDeep(
                    "Lists nested too deeply", *self._line_col(self.pos)
                ) from None

    def read_string(self) -> String:
        start = self.pos + 1
        end = self.text.find('"', start)
        if end < 0:
            self.pos = self.n
            raise self._eof("inside string")
        self.pos = end + 1
        return String(self.text[start:end])

    def read_number(self) -> Number:
        start = self.pos
        while self.pos < self.n and is_digit(self.text[self.pos]):
            self.pos += 1
        value = int(self.text[start:self.pos])
        if value > MAX_NUMBER:
            self.pos = start
            raise QLispNumberOutOfRange(
                f"Number literal {value} does not fit in 32 bits", *self._line_col(start)
            )
        return Number(value)

    def read_symbol(self) -> Symbol:
        start = self.pos
        while self.pos < self.n and is_symbol_char(self.text[self.pos]):
            self.pos += 1
        return Symbol(self.text[start:self.pos])

    def parse_all(self) -> Iterator[Value]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read_one(text: str, position: int = 0) -> tuple[Optional[Value], int]:
    """Read one top-level value starting at `position`.

    Returns the value and the position just past it. The value is None when
    the rest of the text is whitespace or comments.
    """
    reader = Reader(text, position)
    value = reader.parse_expr()
    return value, reader.pos


def read_all(text: str) -> Iterator[Value]:
    """Yield every top-level value of `text` in order."""
    return Reader(text).parse_all()
