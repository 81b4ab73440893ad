"""Base class for recursive walks over expression trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typedexpr.nodes import Node


class Interpreter[Ctx, R](ABC):
    """Base class for expression interpreters.

    Subclass and implement `eval` with pattern matching on node types. The
    type checker and the evaluator are both interpreters: they share the same
    post-order, left-then-right traversal and differ only in what each node
    reduces to.

    Type Parameters:
        Ctx: Type of evaluation context (use None if no context needed)
        R: Return type of run()

    Interpreters are reusable across multiple runs with different contexts,
    but a single instance must not be shared between threads while running.
    """

    def __init__(self, root: Node[Any]) -> None:
        """Initialize the interpreter with the root of an expression tree."""
        self.root = root

    def run(self, ctx: Ctx) -> R:
        """Run the interpreter over the whole tree with the given context.

        Args:
            ctx: The evaluation context (options, environment, etc.)

        Returns:
            The result of interpreting the root node

        """
        self.ctx = ctx
        return self.eval(self.root)

    @abstractmethod
    def eval(self, node: Node[Any]) -> R:
        """Interpret a node. Implement with pattern matching on node types.

        Type Notes:
            The signature uses Node[Any] because operands of an ill-typed
            expression may not produce the sort their parent expects. Checking
            that is the job of the interpreter, not of the node classes.

        """
        ...
