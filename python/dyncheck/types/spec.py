"""TypeSpec model: the closed set of shapes a value can be checked against."""

import enum
import inspect
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple


class _Missing:
    """Marker for an argument that was not supplied at the call site."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class TypeSpec:
    """Base class for every spec variant."""

    __slots__ = ()


class NativeKind(TypeSpec, enum.Enum):
    """Recognized native kinds, checked by the value's runtime kind tag."""

    Number = "number"
    String = "string"
    Boolean = "boolean"
    Function = "function"
    Array = "array"
    Object = "object"

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__


@dataclass(frozen=True)
class Predicate(TypeSpec):
    """User predicate following the fixed-point convention: f(v) is v."""

    func: Callable

    def __repr__(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))


@dataclass(frozen=True)
class ClassConstructor(TypeSpec):
    """Instances of ``cls``, subclasses included."""

    cls: type

    def __repr__(self) -> str:
        return self.cls.__name__


@dataclass(frozen=True)
class DuckType(TypeSpec):
    """Structural record: every declared field must exist and match."""

    fields: Tuple[Tuple[str, TypeSpec], ...]

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}: {spec!r}" for name, spec in self.fields)
        return "{" + inner + "}"


@dataclass(frozen=True)
class AnyOfSpec(TypeSpec):
    specs: Tuple[TypeSpec, ...]

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(repr(s) for s in self.specs)})"


@dataclass(frozen=True)
class ArrayOfSpec(TypeSpec):
    element: TypeSpec

    def __repr__(self) -> str:
        return f"ArrayOf({self.element!r})"


@dataclass(frozen=True)
class ObjectOfSpec(TypeSpec):
    value: TypeSpec

    def __repr__(self) -> str:
        return f"ObjectOf({self.value!r})"


@dataclass(frozen=True)
class OptionalSpec(TypeSpec):
    inner: TypeSpec

    def __repr__(self) -> str:
        return f"Optional({self.inner!r})"


@dataclass(frozen=True)
class AnySpec(TypeSpec):
    """Any supplied value; fails only on absence."""

    def __repr__(self) -> str:
        return "Any"


def as_spec(obj) -> TypeSpec:
    """
    Normalize user input into a TypeSpec.

    Accepted forms:
        - an existing TypeSpec (returned as is)
        - a class, e.g. ``Point`` (instance check)
        - a dict literal, e.g. ``{"x": Number, "y": Number}`` (duck type)
        - any other callable (fixed-point predicate)

    Raises:
        TypeError: for anything else, including None
    """
    if isinstance(obj, TypeSpec):
        return obj
    if inspect.isclass(obj):
        return ClassConstructor(obj)
    if isinstance(obj, dict):
        return duck(obj.items())
    if callable(obj):
        return Predicate(obj)
    raise TypeError(f"Cannot use {obj!r} as a type spec")


def duck(fields: Iterable[Tuple[str, object]]) -> DuckType:
    """Build a DuckType from (name, spec) pairs, normalizing nested specs."""
    normalized = []
    for name, spec in fields:
        if not isinstance(name, str):
            raise TypeError(f"Duck type field names must be str, got {name!r}")
        normalized.append((name, as_spec(spec)))
    return DuckType(tuple(normalized))


__all__ = [
    "MISSING",
    "TypeSpec",
    "NativeKind",
    "Predicate",
    "ClassConstructor",
    "DuckType",
    "AnyOfSpec",
    "ArrayOfSpec",
    "ObjectOfSpec",
    "OptionalSpec",
    "AnySpec",
    "as_spec",
    "duck",
]
