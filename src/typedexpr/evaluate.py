"""Evaluation of expressions to runtime values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from typedexpr.errors import EvalError, incompatible_operands
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
from typedexpr.types import BoolType, IntType

if TYPE_CHECKING:
    from typedexpr.nodes import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntValue:
    """Integer runtime value."""

    value: int

    @property
    def value_type(self) -> IntType:
        return IntType()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolValue:
    """Boolean runtime value."""

    value: bool

    @property
    def value_type(self) -> BoolType:
        return BoolType()

    def __str__(self) -> str:
        return "true" if self.value else "false"


type RuntimeValue = IntValue | BoolValue


@dataclass(frozen=True)
class EvalOptions:
    """Evaluator settings.

    Attributes:
        legacy_multiply: Evaluate the left operand of ``Multiply`` twice and
            ignore the right one, computing ``left * left``, as earlier
            releases did. Off by default, which gives ``left * right``.

    """

    legacy_multiply: bool = False


@dataclass(frozen=True)
class EvalResult:
    """Result of evaluation: either a value or the first error found."""

    value: RuntimeValue | None = None
    error: EvalError | None = None

    @property
    def is_valid(self) -> bool:
        """Return True if evaluation produced a value."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if self.error is None:
            return f"EvalResult: {self.value}"
        return f"EvalResult: error\n  {self.error.format()}"


class Evaluator(Interpreter[EvalOptions, RuntimeValue | EvalError]):
    """Reduces an expression to a runtime value, or the first error."""

    def eval(self, node: Node[Any]) -> RuntimeValue | EvalError:  # noqa: C901, PLR0911
        match node:
            case IntLiteralOne():
                return IntValue(1)
            case IntLiteralZero():
                return IntValue(0)
            case BoolLiteralTrue():
                return BoolValue(True)  # noqa: FBT003
            case BoolLiteralFalse():
                return BoolValue(False)  # noqa: FBT003

            case Add(left=l, right=r):
                match self._operands(l, r):
                    case IntValue(a), IntValue(b):
                        return IntValue(a + b)
                    case (EvalError() as err, _) | (_, EvalError() as err):
                        return err
                    case a, b:
                        return incompatible_operands(node, IntType(), a, b)

            case Multiply(left=l, right=r):
                # Legacy mode reads the left operand twice.
                second = l if self.ctx.legacy_multiply else r
                match self._operands(l, second):
                    case IntValue(a), IntValue(b):
                        return IntValue(a * b)
                    case (EvalError() as err, _) | (_, EvalError() as err):
                        return err
                    case a, b:
                        return incompatible_operands(node, IntType(), a, b)

            case Or(left=l, right=r):
                match self._operands(l, r):
                    case BoolValue(a), BoolValue(b):
                        return BoolValue(a or b)
                    case (EvalError() as err, _) | (_, EvalError() as err):
                        return err
                    case a, b:
                        return incompatible_operands(node, BoolType(), a, b)

            case And(left=l, right=r):
                match self._operands(l, r):
                    case BoolValue(a), BoolValue(b):
                        return BoolValue(a and b)
                    case (EvalError() as err, _) | (_, EvalError() as err):
                        return err
                    case a, b:
                        return incompatible_operands(node, BoolType(), a, b)

            case _:
                msg = f"Unknown node: {type(node).__name__}"
                raise NotImplementedError(msg)

    def _operands(
        self, left: Node[Any], right: Node[Any]
    ) -> tuple[RuntimeValue | EvalError, RuntimeValue | EvalError]:
        """Evaluate both operands left to right, skipping the right on failure."""
        left_value = self.eval(left)
        if isinstance(left_value, EvalError):
            return left_value, left_value
        return left_value, self.eval(right)


def evaluate(expr: Node[Any], options: EvalOptions | None = None) -> EvalResult:
    """Evaluate an expression.

    Evaluation does not require the expression to be well typed; operators
    applied to the wrong kind of value produce an error result instead.

    Args:
        expr: Root of the expression tree
        options: Evaluator settings, defaults to ``EvalOptions()``

    Returns:
        A valid result holding the value, or an invalid one holding the
        first error found

    Raises:
        NotImplementedError: If the tree contains a node that is not an
            expression node

    """
    outcome = Evaluator(expr).run(options or EvalOptions())
    if isinstance(outcome, EvalError):
        logger.debug("Evaluation error in '%s': %s", render(expr), outcome)
        return EvalResult(error=outcome)
    return EvalResult(value=outcome)
