"""Types of the language, their canonical construction and ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

__all__ = [
    "Type",
    "IdType",
    "BooleanType",
    "IntegerType",
    "FunctionType",
    "ReferenceType",
    "RecordType",
    "get_id_type",
    "get_boolean_type",
    "get_integer_type",
    "get_function_type",
    "get_function_type_from_decls",
    "get_reference_type",
    "get_record_type",
    "is_less",
]


class Type:
    """Base of all types. Types are immutable and mostly canonical."""

    def ref(self) -> Type:
        """Return the reference type for this type."""
        return get_reference_type(self)

    def nonref(self) -> Type:
        """Return this type with any reference removed."""
        return self


@dataclass(frozen=True, eq=False)
class IdType(Type):
    """A type named by an identifier, to be resolved later."""

    symbol: Any


class BooleanType(Type):
    """The type ``bool``."""


class IntegerType(Type):
    """The type ``int``."""


@dataclass(frozen=True, eq=False)
class FunctionType(Type):
    """The type ``(t1, ..., tn) -> t``."""

    parameter_types: tuple
    return_type: Type


@dataclass(frozen=True, eq=False)
class ReferenceType(Type):
    """The type of an expression that refers to an object."""

    type: Type

    def ref(self) -> Type:
        return self

    def nonref(self) -> Type:
        return self.type


@dataclass(frozen=True, eq=False)
class RecordType(Type):
    """The type introduced by a record declaration."""

    declaration: Any


def _key(t: Type) -> tuple:
    """Return a key whose ordering and equality define type equivalence."""
    if isinstance(t, IdType):
        return (0, id(t.symbol))
    if isinstance(t, BooleanType):
        return (1,)
    if isinstance(t, IntegerType):
        return (2,)
    if isinstance(t, FunctionType):
        return (3, tuple(_key(p) for p in t.parameter_types), _key(t.return_type))
    if isinstance(t, ReferenceType):
        return (4, _key(t.type))
    if isinstance(t, RecordType):
        return (5, id(t.declaration))
    raise TypeError(f"not a type: {t!r}")


def is_less(a: Type, b: Type) -> bool:
    """Strict ordering of types: by kind first, then structurally."""
    return _key(a) < _key(b)


_BOOLEAN = BooleanType()
_INTEGER = IntegerType()
_function_types: dict[tuple, FunctionType] = {}
_reference_types: dict[tuple, ReferenceType] = {}
_record_types: dict[tuple, RecordType] = {}


def get_id_type(symbol: Any) -> IdType:
    """Return a new (non-canonical) type naming ``symbol``."""
    return IdType(symbol)


def get_boolean_type() -> BooleanType:
    """Return the unique ``bool`` type."""
    return _BOOLEAN


def get_integer_type() -> IntegerType:
    """Return the unique ``int`` type."""
    return _INTEGER


def get_function_type(parameter_types: Iterable[Type], return_type: Type) -> FunctionType:
    """Return the canonical function type over the given types."""
    candidate = FunctionType(tuple(parameter_types), return_type)
    return _function_types.setdefault(_key(candidate), candidate)


def get_function_type_from_decls(decls: Iterable[Any], return_type: Type) -> FunctionType:
    """Return the canonical function type whose parameters are the decls' types."""
    return get_function_type((d.type for d in decls), return_type)


def get_reference_type(type_: Type) -> ReferenceType:
    """Return the canonical reference type to ``type_``."""
    candidate = ReferenceType(type_)
    return _reference_types.setdefault(_key(candidate), candidate)


def get_record_type(decl: Any) -> RecordType:
    """Return the canonical record type for the declaration ``decl``."""
    candidate = RecordType(decl)
    return _record_types.setdefault(_key(candidate), candidate)