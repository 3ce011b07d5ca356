"""Combinators that build composite type specs."""

from .spec import (
    AnyOfSpec,
    AnySpec,
    ArrayOfSpec,
    ObjectOfSpec,
    OptionalSpec,
    as_spec,
)


class AnyOf(AnyOfSpec):
    """AnyOf(A, B): value must match A or B, tried left to right."""

    def __init__(self, *specs):
        if not specs:
            raise TypeError("AnyOf requires at least one spec")
        super().__init__(tuple(as_spec(s) for s in specs))

    def __or__(self, other) -> "AnyOf":
        return AnyOf(*self.specs, other)

    @classmethod
    def __class_getitem__(cls, params):
        """Make AnyOf subscriptable: AnyOf[Number, String]"""
        if not isinstance(params, tuple):
            params = (params,)
        return cls(*params)


class ArrayOf(ArrayOfSpec):
    """ArrayOf(S): list or tuple whose every element matches S."""

    def __init__(self, element):
        super().__init__(as_spec(element))

    @classmethod
    def __class_getitem__(cls, param):
        return cls(param)


class ObjectOf(ObjectOfSpec):
    """ObjectOf(S): mapping whose every value matches S. Keys are free."""

    def __init__(self, value):
        super().__init__(as_spec(value))

    @classmethod
    def __class_getitem__(cls, param):
        return cls(param)


class Optional(OptionalSpec):
    """Optional(S): the argument may be omitted; if supplied it must match S."""

    def __init__(self, inner):
        super().__init__(as_spec(inner))

    @classmethod
    def __class_getitem__(cls, param):
        """Make Optional subscriptable: Optional[Number]"""
        return cls(param)


Any = AnySpec()


__all__ = ["AnyOf", "ArrayOf", "ObjectOf", "Optional", "Any"]
