from .frontend.ast_expressions import Binary, Grouping, Literal, Unary, Variable
from .frontend.ast_statements import (
    Block,
    ClassDeclaration,
    FunctionDeclaration,
    If,
    Print,
    Return,
)
from .frontend.tokens import Token, TokenType


def build_arithmetic_expression() -> Binary:
    # Pseudo-code:
    # -123 * (45.67)
    return Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123)),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(Literal(45.67)),
    )


def build_greeter_class() -> ClassDeclaration:
    # Pseudo-code:
    # class Greeter < Base {
    #   greet(name) {
    #     if (name) print name; else print "stranger";
    #     return;
    #   }
    # }
    name = Token(TokenType.IDENTIFIER, "name", None, 3)
    return ClassDeclaration(
        name=Token(TokenType.IDENTIFIER, "Greeter", None, 1),
        superclass=Variable(Token(TokenType.IDENTIFIER, "Base", None, 1)),
        methods=[
            FunctionDeclaration(
                name=Token(TokenType.IDENTIFIER, "greet", None, 2),
                params=[name],
                body=[
                    If(
                        Variable(name),
                        Print(Variable(name)),
                        Print(Literal("stranger")),
                    ),
                    Return(None),
                ],
            )
        ],
    )


def build_nested_blocks() -> Block:
    # Pseudo-code:
    # { { print 1; } print 2; }
    return Block([Block([Print(Literal(1))]), Print(Literal(2))])
