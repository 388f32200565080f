"""Values produced by evaluation."""

from __future__ import annotations

import enum
from typing import Any

from .syntax import FunctionDecl

__all__ = ["ValueKind", "Value"]


class ValueKind(enum.Enum):
    """The kinds of value."""

    ERROR = enum.auto()
    INTEGER = enum.auto()
    FUNCTION = enum.auto()
    REFERENCE = enum.auto()


class Value:
    """An error, integer, function or reference value.

    ``Value()`` is the error value; an ``int`` makes an integer, a
    FunctionDecl a function and another Value a reference to it.
    References to references are not permitted.
    """

    __slots__ = ("kind", "_data")

    def __init__(self, data: Any = None) -> None:
        if data is None:
            self.kind, self._data = ValueKind.ERROR, None
        elif isinstance(data, Value):
            if data.is_reference():
                raise ValueError("reference to a reference")
            self.kind, self._data = ValueKind.REFERENCE, data
        elif isinstance(data, FunctionDecl):
            self.kind, self._data = ValueKind.FUNCTION, data
        elif isinstance(data, int):
            self.kind, self._data = ValueKind.INTEGER, int(data)
        else:
            raise TypeError(f"cannot make a value from {data!r}")

    def _referent_kind(self) -> ValueKind:
        if self.kind is ValueKind.REFERENCE:
            return self._data.kind
        return self.kind

    def is_integer(self) -> bool:
        """True for an integer or a reference to one."""
        return self._referent_kind() is ValueKind.INTEGER

    def is_function(self) -> bool:
        """True for a function or a reference to one."""
        return self._referent_kind() is ValueKind.FUNCTION

    def is_reference(self) -> bool:
        """True for a reference."""
        return self.kind is ValueKind.REFERENCE

    def get_integer(self) -> int:
        """Return the integer, dereferencing a reference."""
        if self.kind is ValueKind.REFERENCE:
            return self._data.get_integer()
        if self.kind is not ValueKind.INTEGER:
            raise TypeError(f"{self.kind.name.lower()} value is not an integer")
        return self._data

    def get_function(self) -> FunctionDecl:
        """Return the function, dereferencing a reference."""
        if self.kind is ValueKind.REFERENCE:
            return self._data.get_function()
        if self.kind is not ValueKind.FUNCTION:
            raise TypeError(f"{self.kind.name.lower()} value is not a function")
        return self._data

    def get_reference(self) -> Value:
        """Return the referenced value."""
        if self.kind is not ValueKind.REFERENCE:
            raise TypeError(f"{self.kind.name.lower()} value is not a reference")
        return self._data

    def __str__(self) -> str:
        if self.kind is ValueKind.ERROR:
            return "<error>"
        if self.kind is ValueKind.INTEGER:
            return str(self._data)
        if self.kind is ValueKind.FUNCTION:
            return self._data.name.spelling
        return f"{self._data}@{id(self._data):#x}"

    def __repr__(self) -> str:
        return f"Value<{self.kind.name.lower()}>({self})"