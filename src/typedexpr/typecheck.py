"""Syntax-directed type checking for expressions.

Each node's type is computed from the types of its children, left child first.
The first failure stops the walk: once the left operand fails, the right one
is never visited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from typedexpr.errors import TypeCheckError, operand_mismatch
from typedexpr.expression import (
    Add,
    And,
    BoolLiteralFalse,
    BoolLiteralTrue,
    IntLiteralOne,
    IntLiteralZero,
    Multiply,
    Or,
    render,
)
from typedexpr.interpreter import Interpreter
from typedexpr.types import BoolType, IntType, Type

if TYPE_CHECKING:
    from typedexpr.nodes import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeCheckResult:
    """Result of type checking: either a type or the first error found."""

    type: Type | None = None
    error: TypeCheckError | None = None

    @property
    def is_valid(self) -> bool:
        """Return True if the expression is well typed."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if self.error is None:
            return f"TypeCheckResult: {self.type}"
        return f"TypeCheckResult: error\n  {self.error.format()}"


class TypeChecker(Interpreter[None, Type | TypeCheckError]):
    """Assigns a type to every node of an expression, or the first error."""

    def eval(self, node: Node[Any]) -> Type | TypeCheckError:
        match node:
            case IntLiteralOne() | IntLiteralZero():
                return IntType()

            case BoolLiteralTrue() | BoolLiteralFalse():
                return BoolType()

            case Add(left=l, right=r) | Multiply(left=l, right=r):
                return self._check_operands(node, l, r, IntType())

            case Or(left=l, right=r) | And(left=l, right=r):
                return self._check_operands(node, l, r, BoolType())

            case _:
                msg = f"Unknown node: {type(node).__name__}"
                raise NotImplementedError(msg)

    def _check_operands(
        self,
        node: Node[Any],
        left: Node[Any],
        right: Node[Any],
        expected: Type,
    ) -> Type | TypeCheckError:
        left_type = self.eval(left)
        if isinstance(left_type, TypeCheckError):
            return left_type

        right_type = self.eval(right)
        if isinstance(right_type, TypeCheckError):
            return right_type

        if left_type != expected or right_type != expected:
            return operand_mismatch(node, expected, left_type, right_type)
        return expected


def typecheck(expr: Node[Any]) -> TypeCheckResult:
    """Type check an expression.

    Args:
        expr: Root of the expression tree

    Returns:
        A valid result holding the expression's type, or an invalid one
        holding the first error found

    Raises:
        NotImplementedError: If the tree contains a node that is not an
            expression node

    Example:
        >>> typecheck(Or(BoolLiteralTrue(), BoolLiteralFalse())).type
        BoolType()

    """
    outcome = TypeChecker(expr).run(None)
    if isinstance(outcome, TypeCheckError):
        logger.debug("Type error in '%s': %s", render(expr), outcome)
        return TypeCheckResult(error=outcome)
    return TypeCheckResult(type=outcome)
