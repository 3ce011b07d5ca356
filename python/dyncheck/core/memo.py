"""Argument-keyed memoization."""

import enum
import functools
import inspect
import logging
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Any, Callable, Dict, NamedTuple, Optional, TypeVar, cast

from ..types.spec import MISSING

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: Optional[int]
    currsize: int


class MemoCache:
    """
    Result cache private to one memoized callable.

    Unbounded unless ``maxsize`` is given, in which case the least recently
    used entry is evicted once the cache is full.
    """

    def __init__(self, maxsize: Optional[int] = None):
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be a positive int or None, got {maxsize!r}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._data: "OrderedDict[tuple, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._key_locks: Dict[tuple, list] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: tuple) -> bool:
        return key in self._data

    def fetch(self, key: tuple) -> Any:
        """Return the cached result for ``key`` or MISSING. Counts hits."""
        with self._lock:
            if key not in self._data:
                return MISSING
            self.hits += 1
            if self.maxsize is not None:
                self._data.move_to_end(key)
            return self._data[key]

    def store(self, key: tuple, result: Any) -> None:
        """Record a freshly computed result. Counts a miss."""
        with self._lock:
            self.misses += 1
            self._data[key] = result
            if self.maxsize is not None and len(self._data) > self.maxsize:
                evicted, _ = self._data.popitem(last=False)
                logger.debug("memo evicted key %r", evicted)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def info(self) -> CacheInfo:
        return CacheInfo(self.hits, self.misses, self.maxsize, len(self._data))

    @contextmanager
    def locked(self, key: tuple):
        """Serialize computation per key; reentrant within one thread."""
        with self._lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = [threading.RLock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._lock:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._key_locks[key]


class _Ref:
    """Identity handle for an unhashable value; keeps the value alive."""

    __slots__ = ("obj",)

    def __init__(self, obj):
        self.obj = obj

    def __eq__(self, other):
        return isinstance(other, _Ref) and other.obj is self.obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __repr__(self) -> str:
        return f"<ref {type(self.obj).__name__}>"


def make_key(args: tuple, kwargs: Optional[dict] = None) -> tuple:
    """
    Encode an argument list as a hashable key.

    Equal argument lists give equal keys. Leaves are tagged with their type
    so that ``1``, ``1.0``, ``True`` and ``"1"`` stay apart, and containers
    are tagged so that ``[1]`` and ``(1,)`` differ. Hashable values with
    their own equality (``Decimal``, ``date``, frozen dataclasses) are kept
    as themselves. The key holds a reference to every value it identifies
    by identity, so an id is never reused while the key exists.
    """
    key: tuple = tuple(_encode(arg, set()) for arg in args)
    if kwargs:
        key += (
            "kwargs",
            frozenset((name, _encode(value, set())) for name, value in kwargs.items()),
        )
    return key


def _has_own_eq(value) -> bool:
    return type(value).__eq__ is not object.__eq__


def _hashable(value) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _state(value) -> Optional[dict]:
    """Attribute state of an object from ``__slots__`` and ``__dict__``."""
    state = {}
    has_state = False
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            has_state = True
            try:
                state[slot] = getattr(value, slot)
            except AttributeError:
                continue
    if hasattr(value, "__dict__"):
        has_state = True
        state.update(vars(value))
    return state if has_state else None


def _encode(value, active: set):
    if isinstance(value, enum.Enum):
        return ("leaf", type(value), value)
    if callable(value) or inspect.ismodule(value):
        # Functions and classes compare by identity
        return ("leaf", type(value), value) if _hashable(value) else _Ref(value)
    if _has_own_eq(value) and _hashable(value) and not isinstance(value, (tuple, frozenset)):
        return ("leaf", type(value), value)

    marker = id(value)
    if marker in active:
        return ("cycle", _Ref(value))
    active.add(marker)
    try:
        return _encode_composite(value, active)
    finally:
        active.discard(marker)


def _encode_composite(value, active: set):
    if isinstance(value, (list, tuple)):
        return (type(value).__name__, tuple(_encode(item, active) for item in value))
    if isinstance(value, (set, frozenset)):
        return (type(value).__name__, frozenset(_encode(item, active) for item in value))
    if isinstance(value, dict):
        return ("dict", frozenset(
            (_encode(k, active), _encode(v, active)) for k, v in value.items()
        ))
    if isinstance(value, bytearray):
        return ("bytearray", bytes(value))
    state = _state(value)
    if state is not None:
        return ("object", type(value), _encode(state, active)[1])
    if _hashable(value):
        return ("leaf", type(value), value)
    return _Ref(value)


def wrap_with_memo(func: F, *, maxsize: Optional[int] = None) -> F:
    """
    Wrap ``func`` with a result cache keyed by its arguments.

    The body runs at most once per distinct argument key; later calls with
    equal arguments return the stored result. Exceptions are not cached.

    Example:
        slow_square = wrap_with_memo(lambda n: n * n)
        slow_square(4)  # computed
        slow_square(4)  # cached
    """
    cache = MemoCache(maxsize)
    name = getattr(func, "__qualname__", None) or repr(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        key = make_key(args, kwargs)
        result = cache.fetch(key)
        if result is not MISSING:
            logger.debug("memo hit for %s", name)
            return result

        with cache.locked(key):
            # Another thread may have filled the entry while we waited
            result = cache.fetch(key)
            if result is not MISSING:
                logger.debug("memo hit for %s", name)
                return result
            logger.debug("memo miss for %s", name)
            result = func(*args, **kwargs)
            cache.store(key, result)
        return result

    wrapper.cache = cache
    wrapper.cache_info = cache.info
    wrapper.cache_clear = cache.clear

    return cast(F, wrapper)
