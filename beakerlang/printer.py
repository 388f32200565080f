"""Textual rendering of types and expressions."""

from __future__ import annotations

from . import syntax as ast
from .typesys import (
    BooleanType,
    FunctionType,
    IdType,
    IntegerType,
    RecordType,
    ReferenceType,
    Type,
)

__all__ = ["format_type", "format_expr"]


def format_type(type_: Type) -> str:
    """Return the written form of a type."""
    if isinstance(type_, IdType):
        return f"unresolved:{type_.symbol}"
    if isinstance(type_, BooleanType):
        return "bool"
    if isinstance(type_, IntegerType):
        return "int"
    if isinstance(type_, FunctionType):
        params = ",".join(format_type(p) for p in type_.parameter_types)
        return f"({params}) -> {format_type(type_.return_type)}"
    if isinstance(type_, ReferenceType):
        return f"ref {format_type(type_.type)}"
    if isinstance(type_, RecordType):
        return str(type_.declaration.name)
    raise TypeError(f"not a type: {type_!r}")


def _format_any(node) -> str:
    if isinstance(node, Type):
        return format_type(node)
    return format_expr(node)


_SILENT = (
    ast.AddExpr, ast.SubExpr, ast.MulExpr, ast.DivExpr, ast.RemExpr,
    ast.NegExpr, ast.PosExpr, ast.EqExpr, ast.NeExpr, ast.LtExpr,
    ast.GtExpr, ast.LeExpr, ast.GeExpr, ast.AndExpr, ast.OrExpr,
    ast.NotExpr, ast.CallExpr,
)


def format_expr(expr: ast.Expr) -> str:
    """Return the written form of an expression.

    Literals and identifiers print their spelling; initializers and
    conversions print as pseudo-calls; operators and calls print nothing.
    """
    if isinstance(expr, (ast.LiteralExpr, ast.IdExpr)):
        return expr.spelling
    if isinstance(expr, _SILENT):
        return ""
    if isinstance(expr, ast.ValueConv):
        return f"__to_value({format_expr(expr.source)},{_format_any(expr.target)})"
    if isinstance(expr, ast.DefaultInit):
        return f"__default_init({format_type(expr.type)})"
    if isinstance(expr, ast.CopyInit):
        return f"__copy_init({format_type(expr.type)},{format_expr(expr.value)})"
    raise TypeError(f"not an expression: {expr!r}")