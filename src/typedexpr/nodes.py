"""Base class for expression tree nodes.

Every node class is a frozen dataclass and is registered under a short tag
(``one``, ``add``, ...). The JSON interchange format writes that tag and uses
the registry to find the class again when loading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, dataclass_transform


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class Node[T]:
    """Immutable expression node. T is the sort the node yields when well typed.

    Nodes never store a type; the checker derives it from the tree's shape.
    """

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[Node[Any]]]] = {}

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Freeze the subclass and register it under its tag.

        The tag defaults to the lower-cased class name. A tag can belong to
        one class only.
        """
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__.lower()

        existing = Node.registry.get(cls.tag)
        if existing is not None and existing is not cls:
            msg = f"Node tag '{cls.tag}' is already used by {existing.__name__}"
            raise ValueError(msg)
        Node.registry[cls.tag] = cls

    def __str__(self) -> str:
        from typedexpr.expression import render  # noqa: PLC0415

        return render(self)
