"""JSON interchange for expression trees.

Expressions are dumped as tagged objects, one per node, for example
``{"tag": "add", "left": {"tag": "one"}, "right": {"tag": "zero"}}``.
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from typedexpr.expression import (
    Add,
    And,
    BoolLiteralFalse,
    BoolLiteralTrue,
    Expr,
    IntLiteralOne,
    IntLiteralZero,
    Multiply,
    Or,
)
from typedexpr.nodes import Node

_EXPRESSION_CLASSES: tuple[type[Node[Any]], ...] = (
    IntLiteralOne,
    IntLiteralZero,
    BoolLiteralTrue,
    BoolLiteralFalse,
    Add,
    Multiply,
    Or,
    And,
)


def _expression_tags() -> list[str]:
    return [cls.tag for cls in _EXPRESSION_CLASSES]


def to_dict(expr: Node[Any]) -> dict[str, Any]:
    """Serialize an expression to a dictionary.

    Args:
        expr: Root of the expression tree

    Returns:
        Dictionary with a 'tag' key and one key per child

    Raises:
        ValueError: If the tree contains a node that is not an expression node

    """
    if not isinstance(expr, _EXPRESSION_CLASSES):
        msg = f"Cannot serialize object of type {type(expr).__name__}"
        raise ValueError(msg)
    data: dict[str, Any] = {"tag": expr.tag}
    for f in fields(expr):
        data[f.name] = to_dict(getattr(expr, f.name))
    return data


def from_dict(data: dict[str, Any]) -> Expr:
    """Deserialize an expression from a dictionary.

    Args:
        data: Dictionary produced by `to_dict`

    Returns:
        The rebuilt expression tree

    Raises:
        KeyError: If the 'tag' field or a child field is missing
        ValueError: If a tag is not recognized or a child is not an object

    """
    if "tag" not in data:
        msg = "Missing required 'tag' field in data"
        raise KeyError(msg)

    tag = data["tag"]
    if not isinstance(tag, str):
        msg = f"Field 'tag' must be a string, got {type(tag).__name__}"
        raise ValueError(msg)

    cls = Node.registry.get(tag)
    if cls is None or cls not in _EXPRESSION_CLASSES:
        msg = f"Unknown tag '{tag}'. Available expression tags: {_expression_tags()}"
        raise ValueError(msg)

    children: dict[str, Expr] = {}
    for f in fields(cls):
        if f.name not in data:
            msg = f"Missing required '{f.name}' field for '{tag}'"
            raise KeyError(msg)
        child = data[f.name]
        if not isinstance(child, dict):
            msg = (
                f"Field '{f.name}' of '{tag}' must be a tagged object, "
                f"got {type(child).__name__}"
            )
            raise ValueError(msg)
        children[f.name] = from_dict(child)
    return cls(**children)


def to_json(expr: Node[Any], *, indent: int | None = 2) -> str:
    """Serialize an expression to a JSON string.

    Args:
        expr: Root of the expression tree
        indent: JSON indentation level (default 2, None for compact)

    """
    return json.dumps(to_dict(expr), indent=indent)


def from_json(s: str) -> Expr:
    """Deserialize an expression from a JSON string.

    Raises:
        json.JSONDecodeError: If string is not valid JSON
        KeyError: If required fields are missing
        ValueError: If the JSON is not a tagged object or a tag is unknown

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'tag' field"
        raise ValueError(msg)
    return from_dict(data)
