"""Runtime configuration for validation and memoization."""

import logging

logger = logging.getLogger(__name__)


class Runtime:
    """Process-wide switches read by the wrappers and decorators."""

    def __init__(self, *, strict: bool = True, enabled: bool = True):
        self.strict = strict
        self.enabled = enabled

    def configure(self, **options) -> "Runtime":
        """Update settings in place. Unknown options raise TypeError."""
        for name, value in options.items():
            if name not in ("strict", "enabled"):
                raise TypeError(f"Unknown runtime option: {name!r}")
            setattr(self, name, bool(value))
        logger.debug("runtime configured: strict=%s enabled=%s", self.strict, self.enabled)
        return self

    def __repr__(self) -> str:
        return f"Runtime(strict={self.strict}, enabled={self.enabled})"


# Global runtime instance
_runtime = Runtime()


def configure(**options) -> Runtime:
    """
    Configure the global runtime.

    Options:
        strict: raise TypeMismatchError on violations (True) or warn (False)
        enabled: when False, param and returns leave functions unwrapped

    Example:
        configure(strict=False)
    """
    return _runtime.configure(**options)


def get_runtime() -> Runtime:
    return _runtime
