import pytest

from beakerlang import syntax as ast
from beakerlang.printer import format_expr, format_type
from beakerlang.symbol import IdentifierSymbol, IntegerSymbol
from beakerlang.tokens import TokenKind
from beakerlang.typesys import (
    get_boolean_type,
    get_function_type,
    get_id_type,
    get_integer_type,
    get_record_type,
    get_reference_type,
)


def _ident(name):
    return IdentifierSymbol(name, TokenKind.IDENTIFIER)


def _int(n):
    return ast.LiteralExpr(IntegerSymbol(str(n), TokenKind.INTEGER, n))


def test_basic_types():
    assert format_type(get_boolean_type()) == "bool"
    assert format_type(get_integer_type()) == "int"


def test_id_type_is_unresolved():
    assert format_type(get_id_type(_ident("T"))) == "unresolved:T"


def test_function_type():
    t = get_function_type([get_integer_type(), get_boolean_type()], get_integer_type())
    assert format_type(t) == "(int,bool) -> int"


def test_reference_type_prefixes_ref():
    inner = get_boolean_type()
    assert format_type(get_reference_type(inner)) == "ref " + format_type(inner)


def test_record_type_prints_declaration_name():
    decl = ast.RecordDecl(_ident("point"), [])
    assert format_type(get_record_type(decl)) == "point"


def test_literal_and_id_print_spelling():
    assert format_expr(_int(17)) == "17"
    assert format_expr(ast.IdExpr(_ident("y"))) == "y"


@pytest.mark.parametrize(
    "expr",
    [
        ast.AddExpr(_int(1), _int(2)),
        ast.NotExpr(_int(1)),
        ast.CallExpr(ast.IdExpr(_ident("f")), [_int(1)]),
    ],
)
def test_operators_print_nothing(expr):
    assert format_expr(expr) == ""


def test_initializers():
    t = get_integer_type()
    assert format_expr(ast.DefaultInit(t)) == "__default_init(int)"
    assert format_expr(ast.CopyInit(t, _int(5))) == "__copy_init(int,5)"


def test_value_conversion():
    conv = ast.ValueConv(ast.IdExpr(_ident("x")), get_integer_type())
    assert format_expr(conv) == "__to_value(x,int)"


def test_non_nodes_are_rejected():
    with pytest.raises(TypeError):
        format_type(42)
    with pytest.raises(TypeError):
        format_expr("x")