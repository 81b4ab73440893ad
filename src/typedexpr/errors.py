"""Error types for type checking and evaluation.

Errors are plain data. The checker and the evaluator return them inside
their results instead of raising, and the first failure found is passed up
unchanged to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from typedexpr.expression import SYMBOLS, render

if TYPE_CHECKING:
    from typedexpr.evaluate import RuntimeValue
    from typedexpr.nodes import Node
    from typedexpr.types import Type


@dataclass(frozen=True)
class TypeCheckError:
    """Base class for type checking errors.

    All errors carry the sub-expression that failed and a human-readable message.
    """

    expr: Node[Any]
    message: str

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Format the error together with the offending expression."""
        return f"'{render(self.expr)}': {self.message}"


@dataclass(frozen=True)
class OperandMismatchError(TypeCheckError):
    """An operator was applied to operands of the wrong type.

    ``left`` and ``right`` are the operand types that were found, at least one
    of which differs from ``expected``.
    """

    operator: str
    expected: Type
    left: Type
    right: Type

    def format(self) -> str:
        """Format the mismatch with expected and found operand types."""
        symbol = SYMBOLS[type(self.expr)]
        return (
            f"{super().format()}\n"
            f"  Expected: {self.expected} {symbol} {self.expected}\n"
            f"  Actual:   {self.left} {symbol} {self.right}"
        )


@dataclass(frozen=True)
class EvalError:
    """Base class for evaluation errors."""

    expr: Node[Any]
    message: str

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Format the error together with the offending expression."""
        return f"'{render(self.expr)}': {self.message}"


@dataclass(frozen=True)
class IncompatibleOperandsError(EvalError):
    """An operator received runtime values of the wrong kind."""

    operator: str
    expected: Type
    left: RuntimeValue
    right: RuntimeValue


def operand_mismatch(
    expr: Node[Any], expected: Type, left: Type, right: Type
) -> OperandMismatchError:
    """Build the error for an operator whose operands are not both ``expected``."""
    operator = type(expr).__name__
    return OperandMismatchError(
        expr=expr,
        message=f"{operator} expression expects {expected.tag} types on both sides",
        operator=operator,
        expected=expected,
        left=left,
        right=right,
    )


def incompatible_operands(
    expr: Node[Any], expected: Type, left: RuntimeValue, right: RuntimeValue
) -> IncompatibleOperandsError:
    """Build the error for an operator applied to values of the wrong kind."""
    operator = type(expr).__name__
    return IncompatibleOperandsError(
        expr=expr,
        message=(
            f"Incompatible types: {operator} expects {expected.tag} values "
            "on both sides"
        ),
        operator=operator,
        expected=expected,
        left=left,
        right=right,
    )
