"""Demonstration driver: type checks and evaluates a fixed set of examples."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from typedexpr.evaluate import evaluate
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
from typedexpr.typecheck import typecheck

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typedexpr.expression import Expr

ONE, ZERO = IntLiteralOne(), IntLiteralZero()
TRUE, FALSE = BoolLiteralTrue(), BoolLiteralFalse()

EXAMPLES: dict[str, list[Expr]] = {
    "Valid Expressions": [
        TRUE,
        Or(TRUE, FALSE),
        And(FALSE, FALSE),
    ],
    "Invalid Expressions": [
        And(And(ONE, ZERO), Multiply(ONE, ONE)),
    ],
    "Expressions from lecture": [
        Add(ONE, TRUE),
        Or(FALSE, TRUE),
        Or(FALSE, ONE),
        Or(TRUE, ONE),
    ],
}


def report(expr: Expr) -> list[str]:
    """Type check one expression and describe the outcome, one line per entry."""
    rendered = render(expr)
    result = typecheck(expr)
    if result.error is not None:
        return [f"Type Error when checking '{rendered}': {result.error}"]

    # A well-typed expression always evaluates.
    return [
        f"Successfully checked '{rendered}': {result.type}",
        f"Evaluated '{rendered}': {evaluate(expr).value}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print the results."""
    parser = argparse.ArgumentParser(
        prog="typedexpr-demo",
        description="Type check and evaluate the built-in example expressions.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    for index, (title, expressions) in enumerate(EXAMPLES.items()):
        if index:
            print()
        print(f"{title}:")
        for expr in expressions:
            for line in report(expr):
                print(line)
    return 0
