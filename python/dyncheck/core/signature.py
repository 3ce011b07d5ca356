"""Signatures: per-position parameter specs plus an optional return spec."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..types.spec import TypeSpec, as_spec


@dataclass(frozen=True)
class SignatureContribution:
    """One declared annotation. ``position`` is None for the return value."""
    position: Optional[int]
    spec: TypeSpec

    @property
    def is_return(self) -> bool:
        return self.position is None

    def __repr__(self) -> str:
        where = "return" if self.is_return else f"param {self.position}"
        return f"<{where}: {self.spec!r}>"


@dataclass(frozen=True)
class Signature:
    """Immutable collection of parameter and return specs for one callable."""
    params: Mapping[int, TypeSpec] = field(default_factory=dict)
    returns: Optional[TypeSpec] = None

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.params.items())), self.returns))

    def extend(self, contribution: SignatureContribution) -> "Signature":
        """Return a new Signature with ``contribution`` added.

        Raises ValueError if the position (or the return) is already declared.
        """
        if contribution.is_return:
            if self.returns is not None:
                raise ValueError(f"Return spec already declared as {self.returns!r}")
            return Signature(dict(self.params), contribution.spec)

        if contribution.position in self.params:
            raise ValueError(
                f"Parameter {contribution.position} already declared as "
                f"{self.params[contribution.position]!r}"
            )
        params = dict(self.params)
        params[contribution.position] = contribution.spec
        return Signature(params, self.returns)

    @classmethod
    def of(cls, contributions: Iterable[SignatureContribution]) -> "Signature":
        """Build a Signature from contributions in any order."""
        sig = cls()
        for contribution in contributions:
            sig = sig.extend(contribution)
        return sig

    def __repr__(self) -> str:
        if self.params:
            width = max(self.params) + 1
            params_str = ", ".join(
                repr(self.params[i]) if i in self.params else "_" for i in range(width)
            )
        else:
            params_str = ""
        returns_str = f" -> {self.returns!r}" if self.returns is not None else ""
        return f"({params_str}){returns_str}"


def build_param_spec(position: int, spec) -> SignatureContribution:
    """Contribution for the parameter at ``position`` (0-based)."""
    if isinstance(position, bool) or not isinstance(position, int) or position < 0:
        raise ValueError(f"Parameter position must be a non-negative int, got {position!r}")
    return SignatureContribution(position, as_spec(spec))


def build_return_spec(spec) -> SignatureContribution:
    """Contribution for the return value."""
    return SignatureContribution(None, as_spec(spec))
