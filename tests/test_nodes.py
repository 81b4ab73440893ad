"""Tests for typedexpr.nodes module."""

import dataclasses

import pytest

from typedexpr.expression import Add, IntLiteralOne, IntLiteralZero, Or
from typedexpr.nodes import Node


class TestNodeBasics:
    """Test basic Node functionality."""

    def test_node_subclass_becomes_dataclass(self) -> None:
        """Test that Node subclasses are automatically converted to dataclasses."""
        assert dataclasses.is_dataclass(Add)
        assert [f.name for f in dataclasses.fields(Add)] == ["left", "right"]

    def test_node_is_frozen(self) -> None:
        """Test that Node instances are immutable."""
        node = Add(IntLiteralOne(), IntLiteralZero())
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.left = IntLiteralZero()  # type: ignore[misc]

    def test_nodes_have_value_equality(self) -> None:
        """Test that structurally equal trees compare and hash equal."""
        a = Add(IntLiteralOne(), IntLiteralZero())
        b = Add(IntLiteralOne(), IntLiteralZero())
        assert a == b
        assert hash(a) == hash(b)
        assert a != Add(IntLiteralZero(), IntLiteralOne())

    def test_str_renders_expression(self) -> None:
        """Test that str() of a node gives its rendering."""
        assert str(Add(IntLiteralOne(), IntLiteralZero())) == "(1 + 0)"
        assert f"{IntLiteralOne()}" == "1"


class TestNodeTags:
    """Test Node tag generation and registration."""

    def test_expression_tags(self) -> None:
        """Test the tags of the built-in expression nodes."""
        assert IntLiteralOne.tag == "one"
        assert Add.tag == "add"
        assert Or.tag == "or"

    def test_automatic_tag_uses_lowercase_class_name(self) -> None:
        """Test that the tag defaults to the lower-cased class name."""

        class AutoTaggedNode(Node[int]):
            value: int

        assert AutoTaggedNode.tag == "autotaggednode"

    def test_registry_maps_tag_to_class(self) -> None:
        """Test that subclasses are registered by tag."""
        assert Node.registry["multiply"].__name__ == "Multiply"

        class RegisteredNode(Node[int], tag="registered_node_test"):
            pass

        assert Node.registry["registered_node_test"] is RegisteredNode

    def test_duplicate_tag_raises(self) -> None:
        """Test that reusing a tag for a different class is rejected."""
        with pytest.raises(ValueError, match="already used by Add"):

            class Clash(Node[int], tag="add"):
                pass
