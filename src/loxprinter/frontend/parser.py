from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Transformer, Tree
from lark import Token as LarkToken
from lark.exceptions import VisitError

from .ast_expressions import (
    Assign,
    Binary,
    Call,
    Expression,
    Get,
    Grouping,
    Literal,
    Logical,
    Set,
    Super,
    This,
    Unary,
    Variable,
)
from .ast_statements import (
    Block,
    ClassDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    If,
    Print,
    Return,
    Statement,
    VariableDeclaration,
    While,
)
from .tokens import Token, TokenType

MAX_ARGUMENTS = 255


class ParseError(ValueError):
    """Raised when source is well-formed for the grammar but not valid Lox."""


class AstTransformer(Transformer[LarkToken, object]):
    def __default_token__(self, token: LarkToken) -> Token:
        kind = TokenType[token.type]
        lexeme = str(token)
        literal: Any = None
        if kind is TokenType.NUMBER:
            literal = float(lexeme)
        elif kind is TokenType.STRING:
            literal = lexeme[1:-1]
        return Token(kind=kind, lexeme=lexeme, literal=literal, line=token.line or 0)

    def start(self, children: list[object]) -> list[Statement]:
        return [self._as_statement(child) for child in children]

    # ===== Declarations =====
    def class_decl(self, children: list[object]) -> ClassDeclaration:
        [name, superclass, *methods] = children
        assert isinstance(name, Token)
        assert superclass is None or isinstance(superclass, Variable)
        functions: list[FunctionDeclaration] = []
        for method in methods:
            assert isinstance(method, FunctionDeclaration)
            functions.append(method)
        return ClassDeclaration(name=name, superclass=superclass, methods=functions)

    def superclass(self, children: list[object]) -> Variable:
        # The "<" may or may not be kept depending on how lark names it.
        name = children[-1]
        assert isinstance(name, Token)
        return Variable(name)

    def function(self, children: list[object]) -> FunctionDeclaration:
        [name, params_value, body] = children
        assert isinstance(name, Token)
        assert isinstance(body, Block)
        params: list[Token] = []
        if params_value is not None:
            assert isinstance(params_value, list)
            params = cast(list[Token], params_value)
        return FunctionDeclaration(name=name, params=params, body=body.statements)

    def parameters(self, children: list[object]) -> list[Token]:
        if len(children) > MAX_ARGUMENTS:
            raise ParseError(f"Can't have more than {MAX_ARGUMENTS} parameters.")
        params: list[Token] = []
        for child in children:
            assert isinstance(child, Token)
            params.append(child)
        return params

    def var_decl(self, children: list[object]) -> VariableDeclaration:
        [name, initializer] = children
        assert isinstance(name, Token)
        return VariableDeclaration(
            name=name,
            initializer=None if initializer is None else self._as_expression(initializer),
        )

    # ===== Statements =====
    def expr_stmt(self, children: list[object]) -> ExpressionStatement:
        [expr] = children
        return ExpressionStatement(expression=self._as_expression(expr))

    def print_stmt(self, children: list[object]) -> Print:
        [expr] = children
        return Print(expression=self._as_expression(expr))

    def return_stmt(self, children: list[object]) -> Return:
        [value] = children
        if value is None:
            return Return(value=None)
        return Return(value=self._as_expression(value))

    def block(self, children: list[object]) -> Block:
        return Block(statements=[self._as_statement(child) for child in children])

    def if_stmt(self, children: list[object]) -> If:
        [condition, then_branch, else_branch] = children
        return If(
            condition=self._as_expression(condition),
            then_branch=self._as_statement(then_branch),
            else_branch=None
            if else_branch is None
            else self._as_statement(else_branch),
        )

    def while_stmt(self, children: list[object]) -> While:
        [condition, body] = children
        return While(
            condition=self._as_expression(condition),
            body=self._as_statement(body),
        )

    def for_initializer(self, children: list[object]) -> Statement | None:
        if not children:
            return None
        [initializer] = children
        return self._as_statement(initializer)

    # There is no loop node of its own: `for` becomes a `while` wrapped in blocks.
    def for_stmt(self, children: list[object]) -> Statement:
        [initializer, condition, increment, body_value] = children
        body = self._as_statement(body_value)

        if increment is not None:
            body = Block(
                statements=[
                    body,
                    ExpressionStatement(expression=self._as_expression(increment)),
                ]
            )

        loop_condition = (
            Literal(True) if condition is None else self._as_expression(condition)
        )
        body = While(condition=loop_condition, body=body)

        if initializer is not None:
            body = Block(statements=[self._as_statement(initializer), body])

        return body

    # ===== Expressions =====
    def assign(self, children: list[object]) -> Expression:
        [target, value] = children
        assigned = self._as_expression(value)

        if isinstance(target, Variable):
            return Assign(name=target.name, value=assigned)

        if isinstance(target, Get):
            return Set(object=target.object, name=target.name, value=assigned)

        raise ParseError("Invalid assignment target.")

    def logic_or(self, children: list[object]) -> Expression:
        return self._fold(children, Logical)

    def logic_and(self, children: list[object]) -> Expression:
        return self._fold(children, Logical)

    def equality(self, children: list[object]) -> Expression:
        return self._fold(children, Binary)

    def comparison(self, children: list[object]) -> Expression:
        return self._fold(children, Binary)

    def term(self, children: list[object]) -> Expression:
        return self._fold(children, Binary)

    def factor(self, children: list[object]) -> Expression:
        return self._fold(children, Binary)

    def unary(self, children: list[object]) -> Unary:
        [operator, right] = children
        assert isinstance(operator, Token)
        return Unary(operator=operator, right=self._as_expression(right))

    def call(self, children: list[object]) -> Call:
        [callee, args_value] = children
        args: list[Expression] = []
        if args_value is not None:
            assert isinstance(args_value, list)
            args = cast(list[Expression], args_value)
        return Call(callee=self._as_expression(callee), arguments=args)

    def arguments(self, children: list[object]) -> list[Expression]:
        if len(children) > MAX_ARGUMENTS:
            raise ParseError(f"Can't have more than {MAX_ARGUMENTS} arguments.")
        return [self._as_expression(child) for child in children]

    def get(self, children: list[object]) -> Get:
        [obj, name] = children
        assert isinstance(name, Token)
        return Get(object=self._as_expression(obj), name=name)

    def number(self, children: list[object]) -> Literal:
        [number] = children
        assert isinstance(number, Token)
        return Literal(number.literal)

    def string(self, children: list[object]) -> Literal:
        [value] = children
        assert isinstance(value, Token)
        return Literal(value.literal)

    def true(self, children: list[object]) -> Literal:
        return Literal(True)

    def false(self, children: list[object]) -> Literal:
        return Literal(False)

    def nil(self, children: list[object]) -> Literal:
        return Literal(None)

    def this(self, children: list[object]) -> This:
        return This()

    def variable(self, children: list[object]) -> Variable:
        [name] = children
        assert isinstance(name, Token)
        return Variable(name)

    def grouping(self, children: list[object]) -> Grouping:
        [expr] = children
        return Grouping(self._as_expression(expr))

    def super_expr(self, children: list[object]) -> Super:
        [method] = children
        assert isinstance(method, Token)
        return Super(method)

    def _fold(
        self, children: list[object], node_type: type[Binary] | type[Logical]
    ) -> Expression:
        # [operand, operator, operand, operator, operand, ...], left-associative
        expr = self._as_expression(children[0])
        for index in range(1, len(children), 2):
            operator = children[index]
            assert isinstance(operator, Token)
            right = self._as_expression(children[index + 1])
            expr = node_type(expr, operator, right)
        return expr

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value

    def _as_statement(self, value: object) -> Statement:
        assert isinstance(
            value,
            (
                ExpressionStatement,
                Print,
                Return,
                VariableDeclaration,
                Block,
                If,
                While,
                FunctionDeclaration,
                ClassDeclaration,
            ),
        )
        return value


def _load_grammar_text() -> str:
    grammar_file = files("loxprinter.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(source: str) -> Tree[LarkToken]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[LarkToken], tree)


def parse_program(source: str) -> list[Statement]:
    parsed = parse_tree(source)
    try:
        statements = AstTransformer().transform(parsed)
    except VisitError as error:
        # lark wraps exceptions raised inside transformer callbacks.
        if isinstance(error.orig_exc, ParseError):
            raise error.orig_exc from None
        raise
    assert isinstance(statements, list)
    return cast(list[Statement], statements)
