"""Core runtime functionality."""

from .runtime import Runtime, _runtime, configure, get_runtime
from .matcher import matches, kind_of, describe_kind
from .signature import Signature, SignatureContribution, build_param_spec, build_return_spec
from .validator import TypeMismatchError, TypeMismatchWarning, wrap_with_validation
from .memo import MemoCache, CacheInfo, make_key, wrap_with_memo
from .spec_parser import parse_spec, SpecParser

__all__ = [
    "Runtime", "_runtime", "configure", "get_runtime",
    "matches", "kind_of", "describe_kind",
    "Signature", "SignatureContribution", "build_param_spec", "build_return_spec",
    "TypeMismatchError", "TypeMismatchWarning", "wrap_with_validation",
    "MemoCache", "CacheInfo", "make_key", "wrap_with_memo",
    "parse_spec", "SpecParser",
]
