"""Recursive-descent parser from a token stream to abstract syntax."""

from __future__ import annotations

import sys
from typing import Callable

from . import syntax as ast
from .lexer import InputBuffer, Lexer
from .location import Location, LocationMap
from .symbol import SymbolTable
from .tokens import Token, TokenKind, TokenStream, init_symbols, spelling
from .typesys import (
    Type,
    get_boolean_type,
    get_function_type,
    get_function_type_from_decls,
    get_id_type,
    get_integer_type,
)

__all__ = ["ParseError", "Parser", "parse_module"]


class ParseError(Exception):
    """A syntax error at a source location."""

    def __init__(self, location: Location, message: str) -> None:
        super().__init__(f"{location}: {message}")
        self.location = location
        self.message = message


_UNARY = {
    TokenKind.PLUS: ast.PosExpr,
    TokenKind.MINUS: ast.NegExpr,
    TokenKind.NOT: ast.NotExpr,
}

_MULTIPLICATIVE = {
    TokenKind.STAR: ast.MulExpr,
    TokenKind.SLASH: ast.DivExpr,
    TokenKind.PERCENT: ast.RemExpr,
}

_ADDITIVE = {
    TokenKind.PLUS: ast.AddExpr,
    TokenKind.MINUS: ast.SubExpr,
}

_ORDERING = {
    TokenKind.LT: ast.LtExpr,
    TokenKind.GT: ast.GtExpr,
    TokenKind.LE: ast.LeExpr,
    TokenKind.GE: ast.GeExpr,
}

_EQUALITY = {
    TokenKind.EQ: ast.EqExpr,
    TokenKind.NE: ast.NeExpr,
}

_LOGICAL_AND = {TokenKind.AND: ast.AndExpr}

_LOGICAL_OR = {TokenKind.OR: ast.OrExpr}


class Parser:
    """Builds syntax trees from a token stream.

    Errors raise ParseError. Block and module parsing recover from
    errors in their elements: the error is reported, tokens are skipped
    through the current statement terminator and parsing continues.
    """

    def __init__(
        self,
        symbols: SymbolTable,
        stream: TokenStream,
        locations: LocationMap | None = None,
    ) -> None:
        self._symbols = symbols
        self._ts = stream
        self.locations = locations if locations is not None else LocationMap()
        self.errors: list[ParseError] = []
        self._term: int = TokenKind.LBRACE

    @property
    def ok(self) -> bool:
        """True if no syntax errors have been found."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok

    # Expressions

    def primary_expr(self) -> ast.Expr:
        """primary-expr -> literal | identifier | '(' expr ')'"""
        if tok := self._match_if(TokenKind.IDENTIFIER):
            return self._located(ast.IdExpr(tok.symbol), tok)
        if tok := self._match_if(TokenKind.BOOLEAN):
            return self._located(ast.LiteralExpr(tok.symbol), tok)
        if tok := self._match_if(TokenKind.INTEGER):
            return ast.LiteralExpr(tok.symbol)
        if self._match_if(TokenKind.LPAREN):
            e = self.expr()
            self._match(TokenKind.RPAREN)
            return e
        self._error("expected primary expression")

    def postfix_expr(self) -> ast.Expr:
        """postfix-expr -> postfix-expr '(' argument-list ')' | primary-expr"""
        e = self.primary_expr()
        while self._match_if(TokenKind.LPAREN):
            args = []
            while self._lookahead() != TokenKind.RPAREN:
                args.append(self.expr())
                if not self._match_if(TokenKind.COMMA):
                    break
            self._match(TokenKind.RPAREN)
            e = ast.CallExpr(e, args)
        return e

    def unary_expr(self) -> ast.Expr:
        """unary-expr -> ('+' | '-' | '!') unary-expr | postfix-expr"""
        cls = _UNARY.get(self._lookahead())
        if cls is not None:
            self._ts.get()
            return cls(self.unary_expr())
        return self.postfix_expr()

    def multiplicative_expr(self) -> ast.Expr:
        """Left-associative '*', '/' and '%' over unary expressions."""
        return self._binary(self.unary_expr, _MULTIPLICATIVE)

    def additive_expr(self) -> ast.Expr:
        """Left-associative '+' and '-' over multiplicative expressions."""
        return self._binary(self.multiplicative_expr, _ADDITIVE)

    def ordering_expr(self) -> ast.Expr:
        """Left-associative '<', '>', '<=' and '>=' over additive expressions."""
        return self._binary(self.additive_expr, _ORDERING)

    def equality_expr(self) -> ast.Expr:
        """Left-associative '==' and '!=' over ordering expressions."""
        return self._binary(self.ordering_expr, _EQUALITY)

    def logical_and_expr(self) -> ast.Expr:
        """Left-associative '&&' over equality expressions."""
        return self._binary(self.equality_expr, _LOGICAL_AND)

    def logical_or_expr(self) -> ast.Expr:
        """Left-associative '||' over logical-and expressions."""
        return self._binary(self.logical_and_expr, _LOGICAL_OR)

    def expr(self) -> ast.Expr:
        """Parse an expression."""
        return self.logical_or_expr()

    # Types

    def type(self) -> Type:
        """type -> 'bool' | 'int' | '(' type-list ')' '->' type | identifier"""
        if tok := self._match_if(TokenKind.IDENTIFIER):
            t = get_id_type(tok.symbol)
            self.locations.record(t, tok.location)
            return t
        if self._match_if(TokenKind.BOOL_KW):
            return get_boolean_type()
        if self._match_if(TokenKind.INT_KW):
            return get_integer_type()
        if self._match_if(TokenKind.LPAREN):
            params = [self.type()]
            while self._match_if(TokenKind.COMMA):
                params.append(self.type())
            self._match(TokenKind.RPAREN)
            self._match(TokenKind.ARROW)
            return get_function_type(params, self.type())
        self._error("invalid type")

    # Declarations

    def decl(self) -> ast.Decl:
        """decl -> variable-decl | function-decl | record-decl"""
        kind = self._lookahead()
        if kind == TokenKind.VAR_KW:
            return self.variable_decl()
        if kind == TokenKind.DEF_KW:
            return self.function_decl()
        if kind == TokenKind.STRUCT_KW:
            return self.record_decl()
        self._error("invalid declaration")

    def variable_decl(self) -> ast.VariableDecl:
        """variable-decl -> 'var' identifier ':' type (';' | '=' expr ';')"""
        self._require(TokenKind.VAR_KW)
        name = self._match(TokenKind.IDENTIFIER)
        self._match(TokenKind.COLON)
        t = self.type()
        if self._match_if(TokenKind.SEMICOLON):
            return ast.VariableDecl(name.symbol, t, ast.DefaultInit(t))
        self._match(TokenKind.EQUAL)
        e = self.expr()
        self._match(TokenKind.SEMICOLON)
        return ast.VariableDecl(name.symbol, t, ast.CopyInit(t, e))

    def parameter_decl(self) -> ast.ParameterDecl:
        """parameter-decl -> identifier ':' type"""
        name = self._match(TokenKind.IDENTIFIER)
        self._match(TokenKind.COLON)
        return ast.ParameterDecl(name.symbol, self.type())

    def function_decl(self) -> ast.FunctionDecl:
        """function-decl -> 'def' identifier '(' [parameter-list] ')' '->' type block-stmt"""
        self._require(TokenKind.DEF_KW)
        name = self._match(TokenKind.IDENTIFIER)
        self._match(TokenKind.LPAREN)
        params = []
        while self._lookahead() != TokenKind.RPAREN:
            params.append(self.parameter_decl())
            if not self._match_if(TokenKind.COMMA):
                break
        self._match(TokenKind.RPAREN)
        self._match(TokenKind.ARROW)
        ret = self.type()
        body = self.block_stmt()
        ftype = get_function_type_from_decls(params, ret)
        return ast.FunctionDecl(name.symbol, ftype, params, body)

    def record_decl(self) -> ast.RecordDecl:
        """record-decl -> 'struct' identifier '{' field-decl* '}'"""
        self._require(TokenKind.STRUCT_KW)
        name = self._match(TokenKind.IDENTIFIER)
        self._match(TokenKind.LBRACE)
        fields = []
        while self._lookahead() != TokenKind.RBRACE:
            fields.append(self.field_decl())
        self._match(TokenKind.RBRACE)
        return ast.RecordDecl(name.symbol, fields)

    def field_decl(self) -> ast.FieldDecl:
        """field-decl -> identifier ':' type ';'"""
        name = self._match(TokenKind.IDENTIFIER)
        self._match(TokenKind.COLON)
        t = self.type()
        self._match(TokenKind.SEMICOLON)
        return ast.FieldDecl(name.symbol, t)

    # Statements

    def stmt(self) -> ast.Stmt:
        """Parse a statement, chosen by its first token."""
        kind = self._lookahead()
        if kind == TokenKind.SEMICOLON:
            self._require(TokenKind.SEMICOLON)
            return ast.EmptyStmt()
        if kind == TokenKind.LBRACE:
            return self.block_stmt()
        if kind == TokenKind.RETURN_KW:
            return self._return_stmt()
        if kind == TokenKind.IF_KW:
            return self._if_stmt()
        if kind == TokenKind.WHILE_KW:
            return self._while_stmt()
        if kind == TokenKind.BREAK_KW:
            self._require(TokenKind.BREAK_KW)
            self._match(TokenKind.SEMICOLON)
            return ast.BreakStmt()
        if kind == TokenKind.CONTINUE_KW:
            self._require(TokenKind.CONTINUE_KW)
            self._match(TokenKind.SEMICOLON)
            return ast.ContinueStmt()
        if kind in (TokenKind.VAR_KW, TokenKind.DEF_KW):
            return ast.DeclarationStmt(self.decl())
        return self._expression_stmt()

    def block_stmt(self) -> ast.BlockStmt:
        """block-stmt -> '{' stmt* '}', recovering from errors in statements."""
        self._require(TokenKind.LBRACE)
        stmts = []
        while self._lookahead() != TokenKind.RBRACE and not self._ts.eof():
            try:
                stmts.append(self.stmt())
            except ParseError as err:
                self._diagnose(err)
                self._consume_thru(self._term)
        self._term = TokenKind.RBRACE
        self._match(TokenKind.RBRACE)
        return ast.BlockStmt(stmts)

    def _return_stmt(self) -> ast.ReturnStmt:
        self._term = TokenKind.SEMICOLON
        self._require(TokenKind.RETURN_KW)
        e = self.expr()
        self._match(TokenKind.SEMICOLON)
        return ast.ReturnStmt(e)

    def _if_stmt(self) -> ast.Stmt:
        self._require(TokenKind.IF_KW)
        self._match(TokenKind.LPAREN)
        cond = self.expr()
        self._match(TokenKind.RPAREN)
        then = self.stmt()
        if self._match_if(TokenKind.ELSE_KW):
            return ast.IfElseStmt(cond, then, self.stmt())
        return ast.IfThenStmt(cond, then)

    def _while_stmt(self) -> ast.WhileStmt:
        self._require(TokenKind.WHILE_KW)
        self._match(TokenKind.LPAREN)
        cond = self.expr()
        self._match(TokenKind.RPAREN)
        return ast.WhileStmt(cond, self.stmt())

    def _expression_stmt(self) -> ast.Stmt:
        self._term = TokenKind.SEMICOLON
        e1 = self.expr()
        if self._match_if(TokenKind.EQUAL):
            e2 = self.expr()
            self._match(TokenKind.SEMICOLON)
            return ast.AssignStmt(e1, e2)
        self._match(TokenKind.SEMICOLON)
        return ast.ExpressionStmt(e1)

    # Top level

    def module(self) -> ast.ModuleDecl:
        """module -> decl*, recovering from errors in declarations."""
        decls = []
        while not self._ts.eof():
            try:
                decls.append(self.decl())
            except ParseError as err:
                self._diagnose(err)
                self._consume_thru(self._term)
        return ast.ModuleDecl(self._symbols.get("<input>"), decls)

    # Support

    def _binary(
        self, operand: Callable[[], ast.Expr], operators: dict
    ) -> ast.Expr:
        e = operand()
        while (cls := operators.get(self._lookahead())) is not None:
            self._ts.get()
            e = cls(e, operand())
        return e

    def _located(self, node, tok: Token):
        self.locations.record(node, tok.location)
        return node

    def _lookahead(self) -> int:
        return self._ts.peek().kind

    def _match(self, kind: int) -> Token:
        if self._lookahead() == kind:
            return self._ts.get()
        self._error(
            f"expected '{spelling(kind)}' but got '{self._ts.peek().spelling}'"
        )

    def _match_if(self, kind: int) -> Token:
        if self._lookahead() == kind:
            return self._ts.get()
        return Token()

    def _require(self, kind: int) -> Token:
        assert self._lookahead() == kind, f"required '{spelling(kind)}'"
        return self._ts.get()

    def _consume_until(self, kind: int) -> None:
        while not self._ts.eof() and self._lookahead() != kind:
            self._ts.get()

    def _consume_thru(self, kind: int) -> None:
        self._consume_until(kind)
        if not self._ts.eof():
            self._ts.get()

    def _error(self, message: str):
        err = ParseError(self._ts.location(), message)
        self.errors.append(err)
        raise err

    @staticmethod
    def _diagnose(err: ParseError) -> None:
        print(f"error:{err}", file=sys.stderr)


def parse_module(text: str, symbols: SymbolTable | None = None) -> ast.ModuleDecl:
    """Lex and parse ``text`` as a module.

    ``symbols`` must already hold the language's symbols; a fresh table
    is made when it is omitted. Raises ParseError on any lexical or
    syntax error.
    """
    if symbols is None:
        symbols = SymbolTable()
        init_symbols(symbols)
    stream = TokenStream()
    lexer = Lexer(symbols, InputBuffer(text))
    if not lexer.lex(stream):
        raise ParseError(Location(), lexer.diagnostics[0])
    parser = Parser(symbols, stream)
    module = parser.module()
    if not parser.ok:
        raise parser.errors[0]
    return module