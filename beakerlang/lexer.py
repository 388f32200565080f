"""Character input with line tracking, and the lexer that produces tokens."""

from __future__ import annotations

import string
import sys

from .location import Line, LineMap, Location
from .strings import StringBuilder, is_decimal_digit, is_newline, is_space, string_to_int
from .symbol import IdentifierSymbol, IntegerSymbol, SymbolTable
from .tokens import Token, TokenKind, TokenStream

__all__ = ["InputBuffer", "Lexer"]


class InputBuffer:
    """A character stream over source text that records where lines start."""

    def __init__(self, text: str, file: str | None = None) -> None:
        self.file = file
        self.lines = LineMap()
        self._text = text
        self._pos = 0
        self._last = 0

    @property
    def offset(self) -> int:
        """The offset of the current character."""
        return self._pos

    @property
    def line_no(self) -> int:
        """The current line number, counting from 1."""
        return len(self.lines) + 1

    @property
    def column_no(self) -> int:
        """The current column, counting from 0."""
        return self._pos - self._last

    def eof(self) -> bool:
        """Return True if every character has been read."""
        return self._pos >= len(self._text)

    def peek(self) -> str:
        """Return the current character, or an empty string at the end."""
        return "" if self.eof() else self._text[self._pos]

    def get(self) -> str:
        """Return the current character and advance past it."""
        if self.eof():
            return ""
        c = self._text[self._pos]
        if c == "\n":
            self.lines.add(self._pos, Line(len(self.lines) + 1, self._last, self._pos))
            self._last = self._pos + 1
        self._pos += 1
        return c

    def location(self) -> Location:
        """Return the location of the current character."""
        return Location(self.file, self.line_no, self.column_no)


_SINGLE = frozenset("{}(),:;+*%")
_MAYBE_EQUAL = frozenset("=!<>")
_DOUBLED = frozenset("&|")
_LETTERS = frozenset(string.ascii_letters)


def _is_letter(c: str) -> bool:
    return c in _LETTERS


class Lexer:
    """Turns the characters of an input buffer into tokens."""

    def __init__(self, symbols: SymbolTable, buffer: InputBuffer) -> None:
        self._symbols = symbols
        self._in = buffer
        self._build = StringBuilder()
        self._loc = Location()
        self._done = False
        self._failed = False
        self.diagnostics: list[str] = []

    @property
    def done(self) -> bool:
        """True once the end of the input has been reached."""
        return self._done

    @property
    def failed(self) -> bool:
        """True if an invalid symbol was encountered."""
        return self._failed

    def lex(self, stream: TokenStream) -> bool:
        """Scan the whole input into ``stream``; return True if no errors occurred."""
        while not self._done:
            tok = self.scan()
            if tok:
                stream.put(tok)
        return not self._failed

    def scan(self) -> Token:
        """Return the next token, or the (false) error token at the end or on error."""
        while True:
            self._space()
            self._loc = self._in.location()
            c = self._in.peek()

            if not c:
                self._done = True
                return Token()
            if c in _SINGLE:
                return self._symbol1()
            if c == "/":
                self._get()
                if self._in.peek() == "/":
                    self._comment()
                    continue
                return self._on_token()
            if c == "-":
                self._get()
                return self._symbol1() if self._in.peek() == ">" else self._on_token()
            if c in _MAYBE_EQUAL:
                self._get()
                return self._symbol1() if self._in.peek() == "=" else self._on_token()
            if c in _DOUBLED:
                self._get()
                return self._symbol1() if self._in.peek() == c else self._error()
            if is_decimal_digit(c):
                return self._integer()
            if _is_letter(c):
                return self._word()
            return self._error()

    # Character handling

    def _get(self) -> str:
        c = self._in.get()
        self._build.put(c)
        return c

    def _ignore(self) -> None:
        self._in.get()

    def _space(self) -> None:
        while True:
            c = self._in.peek()
            if is_space(c) or is_newline(c):
                self._ignore()
            else:
                break

    def _comment(self) -> None:
        while True:
            c = self._in.peek()
            if not c or is_newline(c):
                break
            self._ignore()
        self._build.clear()

    # Token construction

    def _symbol1(self) -> Token:
        self._get()
        return self._on_token()

    def _on_token(self) -> Token:
        sym = self._symbols.get(self._build.take())
        return Token(self._loc, sym.token, sym)

    def _word(self) -> Token:
        self._get()
        while True:
            c = self._in.peek()
            if not (_is_letter(c) or is_decimal_digit(c)):
                break
            self._get()
        text = self._build.take()
        sym = self._symbols.get(text)
        if sym is None:
            sym = self._symbols.put(IdentifierSymbol, text, TokenKind.IDENTIFIER)
        return Token(self._loc, sym.token, sym)

    def _integer(self) -> Token:
        while is_decimal_digit(self._in.peek()):
            self._get()
        text = self._build.take()
        value = string_to_int(text, 10)
        sym = self._symbols.put(IntegerSymbol, text, TokenKind.INTEGER, value)
        return Token(self._loc, TokenKind.INTEGER, sym)

    def _error(self) -> Token:
        self._failed = True
        self._get()
        message = f"error:{self._loc}: invalid symbol '{self._build.take()}'"
        self.diagnostics.append(message)
        print(message, file=sys.stderr)
        return Token()