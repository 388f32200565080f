"""Token kinds, tokens, token streams and the language's reserved symbols."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .location import Location
from .symbol import BooleanSymbol, Symbol, SymbolTable

__all__ = ["TokenKind", "spelling", "Token", "TokenStream", "init_symbols"]


class TokenKind(enum.IntEnum):
    """The classification of tokens."""

    ERROR = -1

    LBRACE = 0
    RBRACE = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    COMMA = enum.auto()
    COLON = enum.auto()
    SEMICOLON = enum.auto()
    EQUAL = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PERCENT = enum.auto()
    EQ = enum.auto()
    NE = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    LE = enum.auto()
    GE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    NOT = enum.auto()
    ARROW = enum.auto()

    BOOL_KW = enum.auto()
    BREAK_KW = enum.auto()
    CONTINUE_KW = enum.auto()
    DEF_KW = enum.auto()
    ELSE_KW = enum.auto()
    IF_KW = enum.auto()
    INT_KW = enum.auto()
    RETURN_KW = enum.auto()
    STRUCT_KW = enum.auto()
    VAR_KW = enum.auto()
    WHILE_KW = enum.auto()

    BOOLEAN = enum.auto()
    INTEGER = enum.auto()
    IDENTIFIER = enum.auto()


_PUNCTUATORS = {
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.COMMA: ",",
    TokenKind.COLON: ":",
    TokenKind.SEMICOLON: ";",
    TokenKind.EQUAL: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.PERCENT: "%",
    TokenKind.EQ: "==",
    TokenKind.NE: "!=",
    TokenKind.LT: "<",
    TokenKind.GT: ">",
    TokenKind.LE: "<=",
    TokenKind.GE: ">=",
    TokenKind.AND: "&&",
    TokenKind.OR: "||",
    TokenKind.NOT: "!",
    TokenKind.ARROW: "->",
}

_KEYWORDS = {
    TokenKind.BOOL_KW: "bool",
    TokenKind.BREAK_KW: "break",
    TokenKind.CONTINUE_KW: "continue",
    TokenKind.DEF_KW: "def",
    TokenKind.ELSE_KW: "else",
    TokenKind.IF_KW: "if",
    TokenKind.INT_KW: "int",
    TokenKind.RETURN_KW: "return",
    TokenKind.STRUCT_KW: "struct",
    TokenKind.VAR_KW: "var",
    TokenKind.WHILE_KW: "while",
}

_SPELLINGS = {**_PUNCTUATORS, **_KEYWORDS}

_UNSPECIFIED = "<unspecified>"


def spelling(kind: int) -> str:
    """Return the fixed spelling of a token kind, or ``<unspecified>``."""
    return _SPELLINGS.get(kind, _UNSPECIFIED)


@dataclass(frozen=True)
class Token:
    """A classified symbol at a source location.

    The default token is the error token, which is false.
    """

    location: Location = field(default_factory=Location)
    kind: int = TokenKind.ERROR
    symbol: Symbol | None = None

    def __bool__(self) -> bool:
        return self.kind != TokenKind.ERROR

    @property
    def spelling(self) -> str:
        """The spelling of the token's symbol, or of its kind if it has none."""
        if self.symbol is not None:
            return self.symbol.spelling
        return _SPELLINGS.get(self.kind, _UNSPECIFIED)


class TokenStream:
    """A readable and appendable sequence of tokens."""

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._pos = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def eof(self) -> bool:
        """Return True if every token has been read."""
        return self._pos >= len(self._tokens)

    def peek(self) -> Token:
        """Return the current token, or the error token at the end."""
        return Token() if self.eof() else self._tokens[self._pos]

    def get(self) -> Token:
        """Return the current token and advance past it."""
        if self.eof():
            return Token()
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def put(self, token: Token) -> None:
        """Append ``token`` to the end of the stream."""
        self._tokens.append(token)

    def location(self) -> Location:
        """Return the source location of the current token."""
        return self.peek().location


def init_symbols(symbols: SymbolTable) -> None:
    """Install the punctuators, keywords and boolean literals in ``symbols``."""
    for kind, text in _SPELLINGS.items():
        symbols.put(Symbol, text, kind)
    symbols.put(BooleanSymbol, "true", TokenKind.BOOLEAN, True)
    symbols.put(BooleanSymbol, "false", TokenKind.BOOLEAN, False)