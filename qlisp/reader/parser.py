"""
  qlisp Reader: cursor + recursive-descent parser

- Character-level, no separate token pass: the Cursor tracks the byte offset
  plus line/column for diagnostics, and the Reader consumes exactly one
  expression per read_expression() call.
- Emits LispObjects:

    - (a b c)   -> LIST
    - '(a b c)  -> LIST with the LIST_LITERAL flag
    - "text"    -> STRING (taken literally, no escape sequences)
    - 123       -> NUMBER (maximal run of decimal digits)
    - .         -> the DOT sentinel
    - foo, +, ? -> SYMBOL (maximal run of letters and + - = * / > < ?)
    - ; ...     -> comment to end of line

Malformed input raises QlispSyntaxError. The reader is not resumable after an
error; callers treat it as fatal.
"""

from __future__ import annotations

import re
import string
from typing import Iterator

from qlisp.types.errors import QlispSyntaxError
from qlisp.types.objects import (
    LispObject,
    NIL,
    DOT,
    make_list,
    make_number,
    make_string,
    make_symbol,
)

DIGITS = frozenset(string.digits)
SYMBOL_CHARS = frozenset(string.ascii_letters + "+-=*/><?")
BLANKS = frozenset(" \n\r")

NUMBER_RE = re.compile(r"[0-9]+")
SYMBOL_RE = re.compile(r"[A-Za-z+\-=*/><?]+")


class Cursor:
    """Read position inside one source text. Valid for a single reader pass."""

    __slots__ = ("text", "file_name", "pos", "line", "col")

    def __init__(self, text: str, file_name: str = "<input>"):
        self.text = text
        self.file_name = file_name
        self.pos = 0
        self.line = 1
        self.col = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def advance(self, n: int = 1) -> None:
        self.pos += n
        self.col += n

    def newline(self) -> None:
        self.pos += 1
        self.line += 1
        self.col = 0

    def error(self, message: str) -> QlispSyntaxError:
        return QlispSyntaxError(message, self.file_name, self.line, self.col + 1)

    def __repr__(self):
        return f"Cursor({self.file_name}:{self.line}:{self.col + 1}, pos={self.pos})"


class Reader:
    def __init__(self, cursor: Cursor):
        self.cursor = cursor

    def _skip_blank(self) -> None:
        """Skip spaces, newlines and ; comments."""
        c = self.cursor
        while not c.at_end():
            ch = c.peek()
            if ch == "\n":
                c.newline()
            elif ch in BLANKS:
                c.advance()
            elif ch == ";":
                end = c.text.find("\n", c.pos)
                if end == -1:
                    # comment runs to end of input
                    c.advance(len(c.text) - c.pos)
                else:
                    c.advance(end - c.pos)
                    c.newline()
            else:
                break

    def read_expression(self) -> LispObject:
        """Consume one complete expression; NIL if the input is exhausted."""
        try:
            return self._read_expression()
        except RecursionError:
            raise self.cursor.error("expression nested too deeply") from None

    def _read_expression(self) -> LispObject:
        c = self.cursor
        self._skip_blank()
        if c.at_end():
            return NIL

        ch = c.peek()
        if ch == "(":
            return self._read_list()
        if ch == "'":
            c.advance()
            if c.at_end() or c.peek() != "(":
                found = "end of input" if c.at_end() else repr(c.peek())
                raise c.error(f"Expected ( after ' but found {found}")
            return self._read_list(literal=True)
        if ch == '"':
            return self._read_string()
        if ch == ".":
            c.advance()
            return DOT
        if ch in DIGITS:
            return self._read_number()
        if ch in SYMBOL_CHARS:
            return self._read_symbol()
        raise c.error(f"Invalid character: {ch!r} ({ord(ch)})")

    def _read_list(self, literal: bool = False) -> LispObject:
        c = self.cursor
        c.advance()  # consume (
        items: list[LispObject] = []
        while True:
            self._skip_blank()
            if c.at_end():
                raise c.error("Unexpected end of input: unterminated list")
            if c.peek() == ")":
                c.advance()
                break
            items.append(self._read_expression())
        return make_list(items, literal=literal)

    def _read_string(self) -> LispObject:
        c = self.cursor
        c.advance()  # consume opening quote
        end = c.text.find('"', c.pos)
        if end == -1:
            raise c.error("Unexpected end of input: unterminated string")
        value = c.text[c.pos:end]
        newlines = value.count("\n")
        if newlines:
            c.line += newlines
            c.col = len(value) - value.rfind("\n") - 1
            c.pos = end
        else:
            c.advance(end - c.pos)
        c.advance()  # consume closing quote
        return make_string(value)

    def _read_number(self) -> LispObject:
        c = self.cursor
        m = NUMBER_RE.match(c.text, c.pos)
        c.advance(m.end() - c.pos)
        return make_number(int(m.group()))

    def _read_symbol(self) -> LispObject:
        c = self.cursor
        m = SYMBOL_RE.match(c.text, c.pos)
        c.advance(m.end() - c.pos)
        return make_symbol(m.group())

    def read_all(self) -> Iterator[LispObject]:
        """Yield top-level expressions until the text is exhausted."""
        while True:
            self._skip_blank()
            if self.cursor.at_end():
                break
            yield self.read_expression()


def parse(source: str, file_name: str = "<input>") -> list[LispObject]:
    """Read every top-level expression of `source`."""
    return list(Reader(Cursor(source, file_name)).read_all())


def parse_one(source: str, file_name: str = "<input>") -> LispObject:
    """Read the first expression of `source` (NIL for blank input)."""
    return Reader(Cursor(source, file_name)).read_expression()
