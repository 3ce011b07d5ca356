"""Decorators attaching parameter and return specs to a function."""

import inspect
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar

from ..core.runtime import _runtime
from ..core.signature import (
    Signature, SignatureContribution, build_param_spec, build_return_spec,
)
from ..core.validator import validation_layer, wrap_with_validation
from ..types.spec import TypeSpec, as_spec

F = TypeVar('F', bound=Callable[..., Any])


def param(*specs: Any, start: Optional[int] = None,
          strict: Optional[bool] = None) -> Callable[[F], F]:
    """
    Declare specs for consecutive parameters.

    Without ``start``, stacked ``param`` decorators fill parameter slots
    top to bottom, skipping slots placed explicitly. With ``start`` the
    specs are pinned to positions ``start``, ``start + 1``, ...
    A leading ``self`` or ``cls`` parameter is not counted. Stacks with
    ``returns`` in any order.

    Example:
        @param(Number)
        @param(String)
        def repeat(times, text):
            return text * times

        @param({"x": Number, "y": Number})
        @returns(Number)
        def distance_to(self, other):
            ...

        @param(Optional(Boolean), start=2)
        def fetch(url, timeout, verbose=False):
            ...
    """
    if not specs:
        raise TypeError("param() requires at least one spec")
    if start is None:
        placed: Tuple[SignatureContribution, ...] = ()
        pending: Tuple[Tuple[TypeSpec, ...], ...] = (tuple(as_spec(s) for s in specs),)
    else:
        placed = tuple(build_param_spec(start + i, spec) for i, spec in enumerate(specs))
        pending = ()

    def decorator(func: F) -> F:
        return _attach(func, placed, pending, strict)

    return decorator


def returns(spec: Any, *, strict: Optional[bool] = None) -> Callable[[F], F]:
    """
    Declare the spec the return value must satisfy.

    Example:
        @returns(ArrayOf(String))
        def names():
            return ["a", "b"]
    """
    contribution = build_return_spec(spec)

    def decorator(func: F) -> F:
        return _attach(func, (contribution,), (), strict)

    return decorator


def _attach(func: F, placed: Tuple[SignatureContribution, ...],
            pending: Tuple[Tuple[TypeSpec, ...], ...], strict: Optional[bool]) -> F:
    """Merge declarations into the function's single validation layer.

    ``placed`` holds contributions with fixed positions. ``pending`` holds
    groups of specs still to be given slots, in decoration order.
    """
    if not _runtime.enabled:
        return func

    layer = validation_layer(func)
    if layer is not None:
        target, sig, offset, layer_strict = layer
        explicit, auto = getattr(func, "__dyncheck_layout__", None) or (_contributions(sig), ())
        if strict is None:
            strict = layer_strict
    else:
        target, offset = func, _method_offset(func)
        explicit, auto = (), ()

    explicit = explicit + placed
    auto = auto + pending

    wrapper = wrap_with_validation(target, _layout(explicit, auto), offset=offset, strict=strict)
    wrapper.__dyncheck_layout__ = (explicit, auto)
    return wrapper


def _layout(explicit: Sequence[SignatureContribution],
            auto: Sequence[Tuple[TypeSpec, ...]]) -> Signature:
    """Build the signature, giving unplaced groups the lowest free slots.

    Decorators apply bottom up, so the last group applied is the topmost
    and takes the first free slots.
    """
    sig = Signature.of(explicit)
    taken = set(sig.params)
    cursor = 0
    for group in reversed(auto):
        for spec in group:
            while cursor in taken:
                cursor += 1
            sig = sig.extend(SignatureContribution(cursor, spec))
            taken.add(cursor)
    return sig


def _contributions(sig: Signature) -> Tuple[SignatureContribution, ...]:
    """Fixed-position contributions equivalent to an existing signature."""
    contributions = tuple(build_param_spec(pos, spec) for pos, spec in sig.params.items())
    if sig.returns is not None:
        contributions += (build_return_spec(sig.returns),)
    return contributions


def _method_offset(func: Callable) -> int:
    """1 if the first parameter is ``self`` or ``cls``, else 0."""
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        return 0
    return 1 if params and params[0] in ("self", "cls") else 0
