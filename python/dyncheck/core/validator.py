"""Call validation: parameter checks before the call, return check after it."""

import functools
import inspect
import logging
import warnings
from typing import Any, Callable, Optional, TypeVar, cast

from ..types.spec import MISSING, TypeSpec
from .matcher import describe_kind, matches
from .runtime import _runtime
from .signature import Signature

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class TypeMismatchError(TypeError):
    """Raised when an argument or return value does not satisfy its spec."""

    def __init__(self, function: str, position: Optional[int], expected: TypeSpec,
                 actual: str, param_name: Optional[str] = None):
        self.function = function
        self.position = position
        self.param_name = param_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{function}() {self.location}: expected {expected!r}, got {actual}"
        )

    @property
    def location(self) -> str:
        if self.position is None:
            return "return value"
        if self.param_name:
            return f"parameter '{self.param_name}' (position {self.position})"
        return f"parameter {self.position}"


class TypeMismatchWarning(UserWarning):
    """Issued instead of raising when validation runs in non-strict mode."""


def wrap_with_validation(func: F, signature: Signature, *, offset: int = 0,
                         strict: Optional[bool] = None) -> F:
    """
    Wrap ``func`` so every call is checked against ``signature``.

    Args:
        func: Callable to wrap
        signature: Parameter and return specs
        offset: Leading parameters not counted by positions (1 for methods)
        strict: Raise on violation (True) or warn (False); None defers to
            the global runtime setting at call time

    Example:
        sig = Signature.of([build_param_spec(0, Number), build_return_spec(Number)])
        double = wrap_with_validation(lambda x: x * 2, sig)
        double("a")  # raises TypeMismatchError
    """
    name = getattr(func, "__qualname__", None) or repr(func)
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        params = []

    def param_at(index: int) -> Optional[inspect.Parameter]:
        if index < len(params):
            return params[index]
        return None

    def argument(index: int, args: tuple, kwargs: dict) -> Any:
        if index < len(args):
            return args[index]
        param = param_at(index)
        if param is not None and param.kind in (
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        ):
            return kwargs.get(param.name, MISSING)
        return MISSING

    def report(error: TypeMismatchError) -> None:
        logger.debug("validation failed: %s", error)
        is_strict = _runtime.strict if strict is None else strict
        if is_strict:
            raise error
        warnings.warn(str(error), TypeMismatchWarning, stacklevel=3)

    checks = sorted(signature.params.items())

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Validate arguments
        for position, spec in checks:
            index = position + offset
            value = argument(index, args, kwargs)
            if not matches(value, spec):
                param = param_at(index)
                report(TypeMismatchError(
                    name, position, spec, describe_kind(value),
                    param.name if param is not None else None,
                ))

        # Call function
        result = func(*args, **kwargs)

        # Validate return type
        if signature.returns is not None and not matches(result, signature.returns):
            report(TypeMismatchError(name, None, signature.returns, describe_kind(result)))

        return result

    wrapper.__dyncheck_signature__ = signature
    wrapper.__dyncheck_target__ = func
    wrapper.__dyncheck_offset__ = offset
    wrapper.__dyncheck_strict__ = strict
    wrapper.__dyncheck_wrapper__ = wrapper

    return cast(F, wrapper)


def validation_layer(func) -> Optional[tuple]:
    """Return (target, signature, offset, strict) if ``func`` is a validation wrapper."""
    if getattr(func, "__dyncheck_wrapper__", None) is not func:
        return None
    return (
        func.__dyncheck_target__,
        func.__dyncheck_signature__,
        func.__dyncheck_offset__,
        func.__dyncheck_strict__,
    )
