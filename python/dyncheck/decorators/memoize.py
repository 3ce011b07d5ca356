"""Memoization decorator."""

from typing import Any, Callable, Optional, TypeVar

from ..core.memo import wrap_with_memo

F = TypeVar('F', bound=Callable[..., Any])


def memoize(func: Optional[F] = None, *, maxsize: Optional[int] = None):
    """
    Cache results by argument value.

    Usable bare or with options. The cache is unbounded unless ``maxsize``
    is set. Placed below ``param``/``returns``, every call is still
    validated; placed above them, cache hits skip validation.

    Example:
        @memoize
        def fib(n):
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        @memoize(maxsize=256)
        def lookup(key):
            ...
    """
    def decorator(f: F) -> F:
        return wrap_with_memo(f, maxsize=maxsize)

    if func is not None:
        return decorator(func)
    return decorator
