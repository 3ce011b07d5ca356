"""Global pytest configuration for the dyncheck test suite.

Provides shared fixtures: sample classes, duck-type specs, a call recorder
for observing side effects, and a guard that restores runtime settings.
"""

import math

import pytest

from dyncheck import Number, String
from dyncheck.core import get_runtime


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "matching: tests the spec matcher")
    config.addinivalue_line("markers", "validation: tests call validation")
    config.addinivalue_line("markers", "memo: tests memoization")
    config.addinivalue_line("markers", "cli: tests the command line")


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def distance(self):
        return math.hypot(self.x, self.y)


class Point3D(Point):
    def __init__(self, x, y, z):
        super().__init__(x, y)
        self.z = z


class Recorder:
    """Callable that records each invocation."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def point_cls():
    return Point


@pytest.fixture
def point3d_cls():
    return Point3D


@pytest.fixture
def point_like():
    """Duck-type spec for anything with numeric x and y."""
    return {"x": Number, "y": Number}


@pytest.fixture
def greeting_spec():
    return {"hello": String, "info": {"age": Number, "color": String}}


@pytest.fixture
def recorder():
    return Recorder


@pytest.fixture(autouse=True)
def restore_runtime():
    """Reset global runtime switches after each test."""
    runtime = get_runtime()
    saved = (runtime.strict, runtime.enabled)
    yield runtime
    runtime.strict, runtime.enabled = saved
