from dataclasses import dataclass
from typing import Any

from .tokens import Token


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Binary(Expression):
    left: Expression
    operator: Token
    right: Expression


@dataclass(frozen=True, slots=True)
class Grouping(Expression):
    expression: Expression


# `None` stands for nil.
@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: Any


@dataclass(frozen=True, slots=True)
class Unary(Expression):
    operator: Token
    right: Expression


@dataclass(frozen=True, slots=True)
class Variable(Expression):
    name: Token


@dataclass(frozen=True, slots=True)
class Assign(Expression):
    name: Token
    value: Expression


@dataclass(frozen=True, slots=True)
class Logical(Expression):
    left: Expression
    operator: Token
    right: Expression


@dataclass(frozen=True, slots=True)
class Call(Expression):
    callee: Expression
    arguments: list[Expression]


@dataclass(frozen=True, slots=True)
class Get(Expression):
    object: Expression
    name: Token


@dataclass(frozen=True, slots=True)
class Set(Expression):
    object: Expression
    name: Token
    value: Expression


@dataclass(frozen=True, slots=True)
class Super(Expression):
    method: Token


@dataclass(frozen=True, slots=True)
class This(Expression):
    pass
