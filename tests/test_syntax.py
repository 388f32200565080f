import pytest

from beakerlang import syntax as ast
from beakerlang.symbol import IdentifierSymbol, IntegerSymbol
from beakerlang.tokens import TokenKind
from beakerlang.typesys import get_function_type_from_decls, get_integer_type


def _int(n):
    return ast.LiteralExpr(IntegerSymbol(str(n), TokenKind.INTEGER, n))


def _id(name):
    return ast.IdExpr(IdentifierSymbol(name, TokenKind.IDENTIFIER))


def test_literal_and_id_spelling_come_from_symbol():
    assert _int(42).spelling == "42"
    assert _id("x").spelling == "x"


@pytest.mark.parametrize(
    "cls",
    [
        ast.AddExpr, ast.SubExpr, ast.MulExpr, ast.DivExpr, ast.RemExpr,
        ast.EqExpr, ast.NeExpr, ast.LtExpr, ast.GtExpr, ast.LeExpr,
        ast.GeExpr, ast.AndExpr, ast.OrExpr,
    ],
)
def test_binary_expressions_keep_operands(cls):
    a, b = _int(1), _int(2)
    e = cls(a, b)
    assert e.left is a
    assert e.right is b
    assert isinstance(e, ast.Expr)


@pytest.mark.parametrize("cls", [ast.NegExpr, ast.PosExpr, ast.NotExpr])
def test_unary_expressions_keep_operand(cls):
    a = _int(3)
    assert cls(a).operand is a


def test_call_keeps_target_and_arguments():
    f = _id("f")
    args = [_int(1), _int(2)]
    call = ast.CallExpr(f, args)
    assert call.target is f
    assert call.arguments == args


def test_nodes_compare_by_identity():
    a = _int(1)
    n1, n2 = ast.NegExpr(a), ast.NegExpr(a)
    assert n1.operand is n2.operand
    assert (n1 == n2) is False
    assert len({n1, n2}) == 2
    e = ast.EmptyStmt()
    table = {e: "empty"}
    assert table[e] == "empty"
    assert (ast.EmptyStmt() in table) is False


def test_copy_init_and_default_init():
    t = get_integer_type()
    v = _int(5)
    c = ast.CopyInit(t, v)
    assert c.type is t and c.value is v
    assert ast.DefaultInit(t).type is t


def test_function_decl_type_from_parameters():
    t = get_integer_type()
    p = ast.ParameterDecl(IdentifierSymbol("a", TokenKind.IDENTIFIER), t)
    ft = get_function_type_from_decls([p], t)
    body = ast.BlockStmt([ast.ReturnStmt(ast.IdExpr(p.name))])
    fn = ast.FunctionDecl(IdentifierSymbol("f", TokenKind.IDENTIFIER), ft, [p], body)
    assert fn.type.parameter_types == (t,)
    assert fn.type.return_type is t
    assert fn.body.statements[0].value.symbol is p.name


def test_record_and_module_decls():
    t = get_integer_type()
    fld = ast.FieldDecl(IdentifierSymbol("x", TokenKind.IDENTIFIER), t)
    rec = ast.RecordDecl(IdentifierSymbol("p", TokenKind.IDENTIFIER), [fld])
    mod = ast.ModuleDecl(IdentifierSymbol("m", TokenKind.IDENTIFIER), [rec])
    assert mod.declarations == [rec]
    assert rec.fields[0].type is t
    assert ast.BlockStmt().statements == []


def test_statement_fields():
    c = _id("c")
    s1, s2 = ast.BreakStmt(), ast.ContinueStmt()
    ie = ast.IfElseStmt(c, s1, s2)
    assert (ie.condition, ie.true_branch, ie.false_branch) == (c, s1, s2)
    w = ast.WhileStmt(c, s1)
    assert w.condition is c and w.body is s1
    it = ast.IfThenStmt(c, s2)
    assert it.body is s2
    a = ast.AssignStmt(c, _int(1))
    assert a.object is c
    assert ast.ExpressionStmt(c).expression is c
    d = ast.VariableDecl(IdentifierSymbol("v", TokenKind.IDENTIFIER), None, None)
    assert ast.DeclarationStmt(d).declaration is d