"""Tests for typedexpr.types module."""

from typedexpr.types import BooleanType, BoolType, IntegerType, IntType, type_name


class TestTypes:
    """Test the two static types."""

    def test_instances_compare_equal(self) -> None:
        """Test that types have value equality."""
        assert IntType() == IntType()
        assert BoolType() == BoolType()
        assert IntType() != BoolType()

    def test_aliases(self) -> None:
        """Test the long-form aliases."""
        assert IntegerType is IntType
        assert BooleanType is BoolType

    def test_tags(self) -> None:
        """Test the short tags used in messages."""
        assert IntType.tag == "int"
        assert BoolType.tag == "bool"

    def test_display_names(self) -> None:
        """Test type_name and str()."""
        assert type_name(IntType()) == "IntType"
        assert type_name(BoolType()) == "BoolType"
        assert str(IntType()) == "IntType"
        assert f"{BoolType()}" == "BoolType"
