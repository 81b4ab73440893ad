"""Expression model: the closed set of literal and operator nodes."""

from __future__ import annotations

from typing import Any

from typedexpr.nodes import Node


class IntLiteralOne(Node[int], tag="one"):
    """The integer literal 1."""


class IntLiteralZero(Node[int], tag="zero"):
    """The integer literal 0."""


class BoolLiteralTrue(Node[bool], tag="true"):
    """The boolean literal true."""


class BoolLiteralFalse(Node[bool], tag="false"):
    """The boolean literal false."""


class Add(Node[int], tag="add"):
    """Integer addition: left + right."""

    left: Expr
    right: Expr


class Multiply(Node[int], tag="multiply"):
    """Integer multiplication: left * right."""

    left: Expr
    right: Expr


class Or(Node[bool], tag="or"):
    """Boolean disjunction: left || right."""

    left: Expr
    right: Expr


class And(Node[bool], tag="and"):
    """Boolean conjunction: left && right."""

    left: Expr
    right: Expr


type Literal = IntLiteralOne | IntLiteralZero | BoolLiteralTrue | BoolLiteralFalse
type BinaryOp = Add | Multiply | Or | And
type Expr = Literal | BinaryOp

SYMBOLS: dict[type[BinaryOp], str] = {
    Add: "+",
    Multiply: "*",
    Or: "||",
    And: "&&",
}


def render(expr: Node[Any]) -> str:
    """Render an expression in its surface form, e.g. ``(1 + (true && false))``.

    Rendering is purely structural and works for ill-typed expressions too,
    so diagnostics can always show the offending tree.

    Raises:
        NotImplementedError: If ``expr`` is not one of the expression nodes

    """
    match expr:
        case IntLiteralOne():
            return "1"
        case IntLiteralZero():
            return "0"
        case BoolLiteralTrue():
            return "true"
        case BoolLiteralFalse():
            return "false"
        case (
            Add(left=l, right=r)
            | Multiply(left=l, right=r)
            | Or(left=l, right=r)
            | And(left=l, right=r)
        ):
            return f"({render(l)} {SYMBOLS[type(expr)]} {render(r)})"
        case _:
            msg = f"Unknown node: {type(expr).__name__}"
            raise NotImplementedError(msg)
