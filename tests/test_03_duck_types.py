"""Test duck-typed record specs."""

from types import SimpleNamespace

import pytest

from dyncheck import DuckType, Number, Optional, String, as_spec, matches


@pytest.mark.matching
@pytest.mark.unit
class TestDuckTypes:
    """Test structural record matching."""

    def test_nested_record(self, greeting_spec):
        """Test a fully matching nested record."""
        value = {"hello": "hi", "info": {"age": 5, "color": "red"}}
        assert matches(value, greeting_spec)

    def test_missing_nested_field(self, greeting_spec):
        """Test removing a nested field fails."""
        value = {"hello": "hi", "info": {"age": 5}}
        assert not matches(value, greeting_spec)

    def test_wrong_nested_kind(self, greeting_spec):
        """Test text where a number is expected fails."""
        value = {"hello": "hi", "info": {"age": "5", "color": "red"}}
        assert not matches(value, greeting_spec)

    def test_extra_fields_ignored(self, point_like):
        """Test unlisted fields are permitted."""
        assert matches({"x": 1, "y": 2, "label": "origin"}, point_like)

    def test_present_none_field(self):
        """Test a field present with None is present but fails its spec."""
        assert not matches({"name": None}, {"name": String})

    def test_absent_field_fails_even_for_optional(self):
        """Test an absent key fails a record regardless of the nested spec."""
        assert not matches({}, {"name": Optional(String)})
        assert matches({"name": "x"}, {"name": Optional(String)})

    def test_object_attributes(self, point_cls, point_like):
        """Test instances are read by attribute."""
        assert matches(point_cls(3, 4), point_like)
        assert matches(SimpleNamespace(x=1.5, y=2), point_like)
        assert not matches(SimpleNamespace(x=1), point_like)

    def test_methods_as_fields(self, point_cls):
        """Test method attributes satisfy Function-kind fields."""
        from dyncheck import Function
        assert matches(point_cls(1, 1), {"distance": Function})

    def test_none_value(self, point_like):
        """Test None never matches a record."""
        assert not matches(None, point_like)

    def test_deep_nesting(self):
        """Test arbitrary nesting depth."""
        spec = {"a": {"b": {"c": {"d": Number}}}}
        assert matches({"a": {"b": {"c": {"d": 1}}}}, spec)
        assert not matches({"a": {"b": {"c": {}}}}, spec)

    def test_normalized_spec(self, point_like):
        """Test dict literals normalize to DuckType."""
        spec = as_spec(point_like)
        assert isinstance(spec, DuckType)
        assert repr(spec) == "{x: Number, y: Number}"
        assert matches({"x": 1, "y": 2}, spec)

    def test_spec_is_immutable(self, point_like):
        """Test later edits to the literal do not affect the built spec."""
        spec = as_spec(point_like)
        point_like["z"] = Number
        assert matches({"x": 1, "y": 2}, spec)
        with pytest.raises(AttributeError):
            spec.fields = ()

    def test_non_string_field_name(self):
        """Test field names must be strings."""
        with pytest.raises(TypeError):
            as_spec({1: Number})
