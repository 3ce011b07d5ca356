"""dyncheck: runtime structural type checking and memoization for Python callables."""

from dyncheck.decorators import param, returns, memoize
from dyncheck.core import (
    Runtime, configure, get_runtime,
    matches, describe_kind,
    Signature, SignatureContribution, build_param_spec, build_return_spec,
    TypeMismatchError, TypeMismatchWarning, wrap_with_validation,
    MemoCache, make_key, wrap_with_memo,
    parse_spec,
)
from dyncheck.types import (
    # Absence marker
    MISSING,
    # Spec model
    TypeSpec, NativeKind, Predicate, ClassConstructor, DuckType, as_spec,
    # Combinators
    AnyOf, ArrayOf, ObjectOf, Optional, Any,
    # Native kinds
    Number, String, Boolean, Function, Array, Object,
)

__version__ = "0.1.0"

__all__ = [
    # Decorators
    "param",
    "returns",
    "memoize",
    # Runtime
    "Runtime",
    "configure",
    "get_runtime",
    # Matching
    "matches",
    "describe_kind",
    # Signatures and wrapping
    "Signature",
    "SignatureContribution",
    "build_param_spec",
    "build_return_spec",
    "wrap_with_validation",
    "wrap_with_memo",
    "MemoCache",
    "make_key",
    # Errors
    "TypeMismatchError",
    "TypeMismatchWarning",
    # Parsing
    "parse_spec",
    # Spec model
    "MISSING",
    "TypeSpec",
    "NativeKind",
    "Predicate",
    "ClassConstructor",
    "DuckType",
    "as_spec",
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
