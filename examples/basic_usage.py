"""
Example demonstrating structural checks and memoization on a small geometry model.

This example showcases:
- Duck-typed parameter specs
- Return value checks
- Optional and Any parameters
- Collection combinators
- Memoization composed with validation
"""

import math

from dyncheck import (
    param, returns, memoize, matches,
    TypeMismatchError,
    Number, String, Boolean, Any, AnyOf, ArrayOf, ObjectOf, Optional,
)


# ==============================================================================
# 1. DUCK-TYPED PARAMETERS
# ==============================================================================

print("=" * 80)
print("DUCK TYPES")
print("=" * 80)

PointLike = {"x": Number, "y": Number}


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @param(PointLike)
    @returns(Number)
    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)


origin = Point(0, 0)
print(f"distance to (3, 4): {origin.distance_to(Point(3, 4))}")

try:
    origin.distance_to("somewhere")
except TypeMismatchError as e:
    print(f"Caught: {e}")


# ==============================================================================
# 2. COMBINATORS
# ==============================================================================

print("\n" + "=" * 80)
print("COMBINATORS")
print("=" * 80)

Tagged = {"name": String, "tags": ArrayOf(String), "flags": ObjectOf(Boolean)}

samples = [
    {"name": "a", "tags": ["x", "y"], "flags": {"on": True}},
    {"name": "b", "tags": ["x", 1], "flags": {}},
    {"name": "c", "tags": [], "flags": {"on": None}},
]
for sample in samples:
    print(f"{sample['name']}: {matches(sample, Tagged)}")

print(f"AnyOf(Number, String) accepts '5': {matches('5', AnyOf(Number, String))}")


# ==============================================================================
# 3. OPTIONAL AND ANY
# ==============================================================================

print("\n" + "=" * 80)
print("OPTIONAL AND ANY")
print("=" * 80)


@param(Any, Optional(Boolean))
def describe(value, verbose=False):
    text = type(value).__name__
    return f"{text}: {value!r}" if verbose else text


print(describe(42))
print(describe(42, True))

try:
    describe()
except TypeMismatchError as e:
    print(f"Caught: {e}")


# ==============================================================================
# 4. MEMOIZATION
# ==============================================================================

print("\n" + "=" * 80)
print("MEMOIZATION")
print("=" * 80)


@param(Number)
@memoize
def fib(n):
    return n if n < 2 else fib(n - 1) + fib(n - 2)


print(f"fib(80) = {fib(80)}")
print(f"cache: {fib.cache_info()}")
