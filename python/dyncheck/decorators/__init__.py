"""Function decorators for validation and memoization."""

from .param import param, returns
from .memoize import memoize

__all__ = ["param", "returns", "memoize"]
