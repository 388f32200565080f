"""Symbols of the language and the table that interns them."""

from __future__ import annotations

from typing import Iterator

__all__ = [
    "Symbol",
    "BooleanSymbol",
    "IntegerSymbol",
    "IdentifierSymbol",
    "SymbolRedefinitionError",
    "SymbolTable",
]


class Symbol:
    """A unique spelling together with its token classification."""

    def __init__(self, spelling: str, token: int) -> None:
        self.spelling = spelling
        self.token = token

    def __str__(self) -> str:
        return self.spelling

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.spelling!r}, {self.token!r})"


class BooleanSymbol(Symbol):
    """The symbols ``true`` and ``false``."""

    def __init__(self, spelling: str, token: int, value: bool) -> None:
        super().__init__(spelling, token)
        self.value = value


class IntegerSymbol(Symbol):
    """An integer literal symbol."""

    def __init__(self, spelling: str, token: int, value: int) -> None:
        super().__init__(spelling, token)
        self.value = value


class IdentifierSymbol(Symbol):
    """An identifier symbol."""


class SymbolRedefinitionError(RuntimeError):
    """Raised when a spelling is re-inserted as a different kind of symbol."""


class SymbolTable:
    """Maps spellings to their unique symbols."""

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {}

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def put(self, cls: type[Symbol], spelling: str, token: int, *args) -> Symbol:
        """Insert a symbol of class ``cls`` unless ``spelling`` is present.

        Returns the symbol for ``spelling``. Raises SymbolRedefinitionError
        if the existing symbol is of a different class.
        """
        existing = self._symbols.get(spelling)
        if existing is not None:
            if type(existing) is not cls:
                raise SymbolRedefinitionError("redefinition of symbol")
            return existing
        sym = cls(spelling, token, *args)
        self._symbols[spelling] = sym
        return sym

    def get(self, spelling: str) -> Symbol | None:
        """Return the symbol spelled ``spelling``, or None."""
        return self._symbols.get(spelling)