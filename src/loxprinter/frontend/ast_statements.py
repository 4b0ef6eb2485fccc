from dataclasses import dataclass

from .ast_expressions import Expression, Variable
from .tokens import Token


# An expression evaluated only for its side effects.
# Examples:
# - counter.increment();
# - x = x + 1;
@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True, slots=True)
class Print:
    expression: Expression


@dataclass(frozen=True, slots=True)
class Return:
    value: Expression | None


@dataclass(frozen=True, slots=True)
class VariableDeclaration:
    name: Token
    initializer: Expression | None


@dataclass(frozen=True, slots=True)
class Block:
    statements: list["Statement"]


@dataclass(frozen=True, slots=True)
class If:
    condition: Expression
    then_branch: "Statement"
    else_branch: "Statement | None"


@dataclass(frozen=True, slots=True)
class While:
    condition: Expression
    body: "Statement"


@dataclass(frozen=True, slots=True)
class FunctionDeclaration:
    name: Token
    params: list[Token]
    body: list["Statement"]


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    name: Token
    superclass: Variable | None
    methods: list[FunctionDeclaration]


Statement = (
    ExpressionStatement
    | Print
    | Return
    | VariableDeclaration
    | Block
    | If
    | While
    | FunctionDeclaration
    | ClassDeclaration
)
