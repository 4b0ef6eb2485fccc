"""Render Lox syntax trees as fully parenthesized Lisp forms.

The output is meant for reading and for golden-file comparisons, not for
re-parsing: ``-123 * (45.67)`` prints as ``(* (- 123) (group 45.67))``.
"""

from typing import Any, Callable, Sequence, Union, get_args

from .frontend import ast_expressions
from .frontend.ast_expressions import (
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
from .frontend.ast_statements import (
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
from .frontend.tokens import Token

Node = Union[Expression, Statement]
Part = Union[Node, Token, Sequence["Part"], str, int, float, bool]


class MalformedTreeError(TypeError):
    """Raised when a tree holds something other than the Lox node shapes."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        # Enclosing variants, outermost first.
        self.path: list[str] = []

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{' > '.join(self.path)}: {self.message}"


def print_ast(node: Node) -> str:
    render = _renderers.get(type(node))
    if render is None:
        raise MalformedTreeError(
            f"expected an expression or statement node, got {type(node).__name__}"
        )

    try:
        return render(node)
    except MalformedTreeError as error:
        error.path.insert(0, type(node).__name__)
        raise


def parenthesize(head: str, *parts: Part) -> str:
    builder = ["(", head]
    _transform(builder, parts)
    builder.append(")")
    return "".join(builder)


def _transform(builder: list[str], parts: Sequence[Part]) -> None:
    for part in parts:
        # Sequences are spliced into the enclosing form.
        if isinstance(part, (list, tuple)):
            _transform(builder, part)
            continue

        builder.append(" ")
        builder.append(_render_part(part))


def _render_part(part: Any) -> str:
    if isinstance(part, (Expression, *_statement_types)):
        return print_ast(part)

    if isinstance(part, Token):
        return part.lexeme

    if isinstance(part, (str, int, float)):
        return _stringify(part)

    if part is None:
        raise MalformedTreeError("missing a required child")

    raise MalformedTreeError(f"cannot render a {type(part).__name__} part")


def _stringify(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise MalformedTreeError(f"unsupported literal value: {value!r}")


def _lexeme(token: Any) -> str:
    if not isinstance(token, Token):
        raise MalformedTreeError(f"expected a token, got {type(token).__name__}")
    return token.lexeme


# ===== Expressions =====
def _binary(expr: Binary) -> str:
    return parenthesize(_lexeme(expr.operator), expr.left, expr.right)


def _grouping(expr: Grouping) -> str:
    return parenthesize("group", expr.expression)


def _literal(expr: Literal) -> str:
    return _stringify(expr.value)


def _unary(expr: Unary) -> str:
    return parenthesize(_lexeme(expr.operator), expr.right)


def _variable(expr: Variable) -> str:
    return _lexeme(expr.name)


def _assign(expr: Assign) -> str:
    return parenthesize("=", _lexeme(expr.name), expr.value)


def _logical(expr: Logical) -> str:
    return parenthesize(_lexeme(expr.operator), expr.left, expr.right)


def _call(expr: Call) -> str:
    return parenthesize("call", expr.callee, expr.arguments)


def _get(expr: Get) -> str:
    return parenthesize(".", expr.object, _lexeme(expr.name))


def _set(expr: Set) -> str:
    return parenthesize("=", expr.object, _lexeme(expr.name), expr.value)


def _super(expr: Super) -> str:
    return parenthesize("super", _lexeme(expr.method))


def _this(expr: This) -> str:
    return "this"


# ===== Statements =====
def _expression_statement(stmt: ExpressionStatement) -> str:
    return parenthesize(";", stmt.expression)


def _print(stmt: Print) -> str:
    return parenthesize("print", stmt.expression)


def _return(stmt: Return) -> str:
    if stmt.value is None:
        return "(return)"
    return parenthesize("return", stmt.value)


def _variable_declaration(stmt: VariableDeclaration) -> str:
    if stmt.initializer is None:
        return parenthesize("var", _lexeme(stmt.name))
    return parenthesize("var", _lexeme(stmt.name), "=", stmt.initializer)


def _block(stmt: Block) -> str:
    body = "".join(print_ast(statement) for statement in stmt.statements)
    return f"(block {body})"


def _if(stmt: If) -> str:
    if stmt.else_branch is None:
        return parenthesize("if", stmt.condition, stmt.then_branch)
    return parenthesize(
        "if-else", stmt.condition, stmt.then_branch, stmt.else_branch
    )


def _while(stmt: While) -> str:
    return parenthesize("while", stmt.condition, stmt.body)


def _function_declaration(stmt: FunctionDeclaration) -> str:
    params = " ".join(_lexeme(param) for param in stmt.params)
    body = "".join(print_ast(statement) for statement in stmt.body)
    return f"(fun {_lexeme(stmt.name)}({params}) {body})"


def _class_declaration(stmt: ClassDeclaration) -> str:
    # No space between "class" and the name.
    builder = [f"(class{_lexeme(stmt.name)}"]

    if stmt.superclass is not None:
        if not isinstance(stmt.superclass, Variable):
            raise MalformedTreeError(
                f"superclass must be a Variable, got {type(stmt.superclass).__name__}"
            )
        builder.append(f" < {print_ast(stmt.superclass)}")

    for method in stmt.methods:
        if not isinstance(method, FunctionDeclaration):
            raise MalformedTreeError(
                f"method must be a FunctionDeclaration, got {type(method).__name__}"
            )
        builder.append(f" {print_ast(method)}")

    builder.append(")")
    return "".join(builder)


_renderers: dict[type, Callable[[Any], str]] = {
    Binary: _binary,
    Grouping: _grouping,
    Literal: _literal,
    Unary: _unary,
    Variable: _variable,
    Assign: _assign,
    Logical: _logical,
    Call: _call,
    Get: _get,
    Set: _set,
    Super: _super,
    This: _this,
    ExpressionStatement: _expression_statement,
    Print: _print,
    Return: _return,
    VariableDeclaration: _variable_declaration,
    Block: _block,
    If: _if,
    While: _while,
    FunctionDeclaration: _function_declaration,
    ClassDeclaration: _class_declaration,
}

_statement_types: tuple[type, ...] = get_args(Statement)

# Module-level bindings only: dataclass(slots=True) leaves the unslotted
# originals behind in Expression.__subclasses__().
_expression_types = {
    value
    for value in vars(ast_expressions).values()
    if isinstance(value, type)
    and issubclass(value, Expression)
    and value is not Expression
}

_unhandled = {*_expression_types, *_statement_types} - _renderers.keys()
if _unhandled:
    raise TypeError(
        f"no printer rule for: {sorted(cls.__name__ for cls in _unhandled)}"
    )
