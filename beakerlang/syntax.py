"""Abstract syntax: expressions, declarations and statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Expr",
    "LiteralExpr",
    "IdExpr",
    "AddExpr",
    "SubExpr",
    "MulExpr",
    "DivExpr",
    "RemExpr",
    "NegExpr",
    "PosExpr",
    "EqExpr",
    "NeExpr",
    "LtExpr",
    "GtExpr",
    "LeExpr",
    "GeExpr",
    "AndExpr",
    "OrExpr",
    "NotExpr",
    "CallExpr",
    "ValueConv",
    "DefaultInit",
    "CopyInit",
    "Decl",
    "VariableDecl",
    "FunctionDecl",
    "ParameterDecl",
    "RecordDecl",
    "FieldDecl",
    "ModuleDecl",
    "Stmt",
    "EmptyStmt",
    "BlockStmt",
    "AssignStmt",
    "ReturnStmt",
    "IfThenStmt",
    "IfElseStmt",
    "WhileStmt",
    "BreakStmt",
    "ContinueStmt",
    "ExpressionStmt",
    "DeclarationStmt",
]


# Nodes compare by identity: locations and canonical types are keyed on it.
_node = dataclass(eq=False)


# Expressions


class Expr:
    """Base of all expressions."""


@_node
class LiteralExpr(Expr):
    """A boolean or integer literal."""

    symbol: Any

    @property
    def spelling(self) -> str:
        return self.symbol.spelling


@_node
class IdExpr(Expr):
    """A reference to a declaration by name."""

    symbol: Any

    @property
    def spelling(self) -> str:
        return self.symbol.spelling


@_node
class _BinaryExpr(Expr):
    left: Expr
    right: Expr


@_node
class _UnaryExpr(Expr):
    operand: Expr


class AddExpr(_BinaryExpr):
    """``e1 + e2``."""


class SubExpr(_BinaryExpr):
    """``e1 - e2``."""


class MulExpr(_BinaryExpr):
    """``e1 * e2``."""


class DivExpr(_BinaryExpr):
    """``e1 / e2``."""


class RemExpr(_BinaryExpr):
    """``e1 % e2``."""


class NegExpr(_UnaryExpr):
    """``-e``."""


class PosExpr(_UnaryExpr):
    """``+e``."""


class EqExpr(_BinaryExpr):
    """``e1 == e2``."""


class NeExpr(_BinaryExpr):
    """``e1 != e2``."""


class LtExpr(_BinaryExpr):
    """``e1 < e2``."""


class GtExpr(_BinaryExpr):
    """``e1 > e2``."""


class LeExpr(_BinaryExpr):
    """``e1 <= e2``."""


class GeExpr(_BinaryExpr):
    """``e1 >= e2``."""


class AndExpr(_BinaryExpr):
    """``e1 && e2``."""


class OrExpr(_BinaryExpr):
    """``e1 || e2``."""


class NotExpr(_UnaryExpr):
    """``!e``."""


@_node
class CallExpr(Expr):
    """``f(a1, ..., an)``."""

    target: Expr
    arguments: list = field(default_factory=list)


@_node
class ValueConv(Expr):
    """Conversion of a reference expression to the value of ``target``."""

    source: Expr
    target: Any


@_node
class DefaultInit(Expr):
    """Default initialization of an object of ``type``."""

    type: Any


@_node
class CopyInit(Expr):
    """Initialization of an object of ``type`` from ``value``."""

    type: Any
    value: Expr


# Declarations


class Decl:
    """Base of all declarations."""


@_node
class VariableDecl(Decl):
    """``var n : T = e;``."""

    name: Any
    type: Any
    init: Expr


@_node
class FunctionDecl(Decl):
    """``def n(params) -> T { body }``."""

    name: Any
    type: Any
    parameters: list
    body: Any


@_node
class ParameterDecl(Decl):
    """A function parameter ``n : T``."""

    name: Any
    type: Any


@_node
class RecordDecl(Decl):
    """``struct n { fields }``."""

    name: Any
    fields: list = field(default_factory=list)


@_node
class FieldDecl(Decl):
    """A record field ``n : T;``."""

    name: Any
    type: Any


@_node
class ModuleDecl(Decl):
    """A translation unit: a named sequence of declarations."""

    name: Any
    declarations: list = field(default_factory=list)


# Statements


class Stmt:
    """Base of all statements."""


@_node
class EmptyStmt(Stmt):
    """``;``."""


@_node
class BlockStmt(Stmt):
    """``{ s1 ... sn }``."""

    statements: list = field(default_factory=list)


@_node
class AssignStmt(Stmt):
    """``e1 = e2;``."""

    object: Expr
    value: Expr


@_node
class ReturnStmt(Stmt):
    """``return e;``."""

    value: Expr


@_node
class IfThenStmt(Stmt):
    """``if (e) s``."""

    condition: Expr
    body: Stmt


@_node
class IfElseStmt(Stmt):
    """``if (e) s1 else s2``."""

    condition: Expr
    true_branch: Stmt
    false_branch: Stmt


@_node
class WhileStmt(Stmt):
    """``while (e) s``."""

    condition: Expr
    body: Stmt


@_node
class BreakStmt(Stmt):
    """``break;``."""


@_node
class ContinueStmt(Stmt):
    """``continue;``."""


@_node
class ExpressionStmt(Stmt):
    """``e;``."""

    expression: Expr


@_node
class DeclarationStmt(Stmt):
    """A declaration appearing as a statement."""

    declaration: Decl