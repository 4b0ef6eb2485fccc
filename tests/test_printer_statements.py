from loxprinter.ast_programs import build_greeter_class, build_nested_blocks
from loxprinter.frontend.ast_expressions import Binary, Call, Literal, Variable
from loxprinter.frontend.ast_statements import (
    Block,
    ClassDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    If,
    Print,
    Return,
    VariableDeclaration,
    While,
)
from loxprinter.frontend.tokens import Token, TokenType
from loxprinter.printer import print_ast


def identifier(name: str) -> Token:
    return Token(TokenType.IDENTIFIER, name)


# ===== Simple Statements =====
def test_expression_statement_uses_semicolon_head() -> None:
    stmt = ExpressionStatement(Call(Variable(identifier("f")), []))
    assert print_ast(stmt) == "(; (call f))"


def test_print_statement() -> None:
    assert print_ast(Print(Literal("hi"))) == "(print hi)"


def test_return_without_value() -> None:
    assert print_ast(Return(None)) == "(return)"


def test_return_with_value() -> None:
    assert print_ast(Return(Literal(1))) == "(return 1)"


# ===== Variable Declarations =====
def test_var_without_initializer() -> None:
    assert print_ast(VariableDeclaration(identifier("x"), None)) == "(var x)"


def test_var_with_initializer() -> None:
    initializer = Binary(Literal(1), Token(TokenType.PLUS, "+"), Literal(2))
    stmt = VariableDeclaration(identifier("x"), initializer)
    assert print_ast(stmt) == f"(var x = {print_ast(initializer)})"


# ===== Blocks =====
def test_block_with_single_statement() -> None:
    assert print_ast(Block([Print(Literal("hi"))])) == "(block (print hi))"


def test_block_statements_are_concatenated() -> None:
    assert print_ast(build_nested_blocks()) == "(block (block (print 1))(print 2))"


def test_empty_block() -> None:
    assert print_ast(Block([])) == "(block )"


# ===== Control Flow =====
def test_if_without_else_prints_then_only_form() -> None:
    stmt = If(Variable(identifier("ok")), Print(Literal(1)), None)
    assert print_ast(stmt) == "(if ok (print 1))"


def test_if_with_else() -> None:
    stmt = If(Variable(identifier("ok")), Print(Literal(1)), Print(Literal(2)))
    assert print_ast(stmt) == "(if-else ok (print 1) (print 2))"


def test_while_statement() -> None:
    stmt = While(Literal(True), Block([]))
    assert print_ast(stmt) == "(while true (block ))"


# ===== Functions =====
def test_function_with_parameters() -> None:
    a, b = identifier("a"), identifier("b")
    stmt = FunctionDeclaration(
        identifier("add"),
        [a, b],
        [Return(Binary(Variable(a), Token(TokenType.PLUS, "+"), Variable(b)))],
    )
    assert print_ast(stmt) == "(fun add(a b) (return (+ a b)))"


def test_function_without_parameters_or_body() -> None:
    stmt = FunctionDeclaration(identifier("noop"), [], [])
    assert print_ast(stmt) == "(fun noop() )"


def test_function_body_is_concatenated() -> None:
    stmt = FunctionDeclaration(
        identifier("twice"), [], [Print(Literal(1)), Print(Literal(2))]
    )
    assert print_ast(stmt) == "(fun twice() (print 1)(print 2))"


# ===== Classes =====
def test_empty_class_has_no_space_after_keyword() -> None:
    stmt = ClassDeclaration(identifier("Foo"), None, [])
    assert print_ast(stmt) == "(classFoo)"


def test_class_with_superclass_and_method() -> None:
    assert print_ast(build_greeter_class()) == (
        "(classGreeter < Base "
        "(fun greet(name) (if-else name (print name) (print stranger))(return)))"
    )


def test_class_methods_are_space_prefixed() -> None:
    stmt = ClassDeclaration(
        identifier("Pair"),
        None,
        [
            FunctionDeclaration(identifier("first"), [], []),
            FunctionDeclaration(identifier("second"), [], []),
        ],
    )
    assert print_ast(stmt) == "(classPair (fun first() ) (fun second() ))"
