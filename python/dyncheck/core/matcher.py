"""Structural matching of runtime values against type specs."""

from collections.abc import Mapping

from ..types.spec import (
    MISSING,
    AnyOfSpec,
    AnySpec,
    ArrayOfSpec,
    ClassConstructor,
    DuckType,
    NativeKind,
    ObjectOfSpec,
    OptionalSpec,
    Predicate,
    TypeSpec,
    as_spec,
)


def matches(value, spec) -> bool:
    """
    Test whether ``value`` satisfies ``spec``.

    Never raises for a well-formed spec and never mutates the value.
    ``spec`` may be anything ``as_spec`` accepts.

    Example:
        matches({"age": 5}, {"age": Number})   # True
        matches([5], ArrayOf(String))          # False
    """
    if not isinstance(spec, TypeSpec):
        spec = as_spec(spec)

    if isinstance(spec, OptionalSpec):
        return value is MISSING or matches(value, spec.inner)

    # Absence reaches AnyOf members so an Optional member can accept it
    if isinstance(spec, AnyOfSpec):
        return any(matches(value, s) for s in spec.specs)

    if value is MISSING:
        return False

    if isinstance(spec, AnySpec):
        return True

    if isinstance(spec, NativeKind):
        return kind_of(value) is spec

    if isinstance(spec, ClassConstructor):
        return isinstance(value, spec.cls)

    if isinstance(spec, Predicate):
        try:
            return spec.func(value) is value
        except Exception:
            return False

    if isinstance(spec, DuckType):
        if value is None:
            return False
        for name, field_spec in spec.fields:
            field = _get_field(value, name)
            if field is MISSING or not matches(field, field_spec):
                return False
        return True

    if isinstance(spec, ArrayOfSpec):
        if kind_of(value) is not NativeKind.Array:
            return False
        return all(matches(item, spec.element) for item in value)

    if isinstance(spec, ObjectOfSpec):
        if kind_of(value) is not NativeKind.Object:
            return False
        return all(matches(item, spec.value) for item in value.values())

    return False


def kind_of(value):
    """Return the NativeKind tag of ``value``, or None if it has none."""
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return NativeKind.Boolean
    if isinstance(value, (int, float)):
        return NativeKind.Number
    if isinstance(value, str):
        return NativeKind.String
    if isinstance(value, (list, tuple)):
        return NativeKind.Array
    if isinstance(value, Mapping):
        return NativeKind.Object
    if callable(value):
        return NativeKind.Function
    return None


def describe_kind(value) -> str:
    """Human-readable kind of ``value`` for error messages."""
    if value is MISSING:
        return "missing"
    if value is None:
        return "null"
    kind = kind_of(value)
    if kind is not None:
        return kind.value
    return type(value).__name__


def _get_field(value, name):
    if isinstance(value, Mapping):
        return value[name] if name in value else MISSING
    # A property that raises counts as absent
    try:
        return getattr(value, name)
    except Exception:
        return MISSING
