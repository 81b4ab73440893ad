"""Static types of the expression language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, dataclass_transform


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class TypeDef:
    """Base for type definitions. Instances of the same class compare equal."""

    tag: ClassVar[str]

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Make the subclass a frozen dataclass and derive its tag."""
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__.lower().removesuffix("type")

    def __str__(self) -> str:
        return type_name(self)


class IntType(TypeDef, tag="int"):
    """Integer type."""


class BoolType(TypeDef, tag="bool"):
    """Boolean type."""


type Type = IntType | BoolType

IntegerType = IntType
BooleanType = BoolType


def type_name(typedef: TypeDef) -> str:
    """Get the display name for a type, e.g. ``IntType``."""
    return type(typedef).__name__
