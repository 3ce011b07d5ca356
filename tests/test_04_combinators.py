"""Test AnyOf, Optional and Any combinators."""

import pytest

from dyncheck import (
    MISSING, Any, AnyOf, ArrayOf, Boolean, Number, Optional, String, matches,
)


@pytest.mark.matching
@pytest.mark.unit
class TestAnyOf:
    """Test union specs."""

    def test_members(self):
        """Test each member is accepted."""
        spec = AnyOf(Number, String)
        assert matches(5, spec)
        assert matches("5", spec)
        assert not matches(True, spec)

    def test_short_circuit(self):
        """Test members are tried left to right and stop at the first match."""
        seen = []

        def first(value):
            seen.append("first")
            return value

        def second(value):
            seen.append("second")
            return value

        assert matches(1, AnyOf(first, second))
        assert seen == ["first"]

    def test_or_extends(self):
        """Test | appends a member."""
        spec = AnyOf(Number) | String
        assert spec == AnyOf(Number, String)

    def test_subscript_form(self):
        assert AnyOf[Number, String] == AnyOf(Number, String)

    def test_absent_with_optional_member(self):
        """Test absence passes only when some member tolerates it."""
        assert matches(MISSING, AnyOf(Optional(Number), String))
        assert matches(MISSING, AnyOf(String, Optional(Number)))
        assert not matches(MISSING, AnyOf(Number, String))
        assert not matches(MISSING, AnyOf(Any, String))

    def test_requires_member(self):
        with pytest.raises(TypeError):
            AnyOf()

    def test_repr(self):
        assert repr(AnyOf(Number, ArrayOf(String))) == "AnyOf(Number, ArrayOf(String))"


@pytest.mark.matching
@pytest.mark.unit
class TestOptional:
    """Test Optional specs."""

    def test_absent(self):
        """Test absence passes."""
        assert matches(MISSING, Optional(Boolean))

    def test_present(self):
        """Test present values delegate to the inner spec."""
        assert matches(False, Optional(Boolean))
        assert not matches(5, Optional(Boolean))

    def test_none_is_present(self):
        """Test None is a supplied value, not absence."""
        assert not matches(None, Optional(Boolean))

    def test_repr(self):
        assert repr(Optional[Number]) == "Optional(Number)"


@pytest.mark.matching
@pytest.mark.unit
class TestAny:
    """Test the Any spec."""

    @pytest.mark.parametrize("value", [0, "", None, [], {}, len, object()])
    def test_any_present_value(self, value):
        assert matches(value, Any)

    def test_absent(self):
        assert not matches(MISSING, Any)

    def test_repr(self):
        assert repr(Any) == "Any"
