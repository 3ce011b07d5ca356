"""Type spec model and combinators."""

from .spec import (
    MISSING,
    TypeSpec,
    NativeKind,
    Predicate,
    ClassConstructor,
    DuckType,
    AnyOfSpec,
    ArrayOfSpec,
    ObjectOfSpec,
    OptionalSpec,
    AnySpec,
    as_spec,
    duck,
)
from .constructs import AnyOf, ArrayOf, ObjectOf, Optional, Any

# Native kind shortcuts
Number = NativeKind.Number
String = NativeKind.String
Boolean = NativeKind.Boolean
Function = NativeKind.Function
Array = NativeKind.Array
Object = NativeKind.Object

__all__ = [
    # Absence marker
    "MISSING",
    # Spec model
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
    # Combinators
    "AnyOf",
    "ArrayOf",
    "ObjectOf",
    "Optional",
    "Any",
    # Native kinds
    "Number",
    "String",
    "Boolean",
    "Function",
    "Array",
    "Object",
]
