from enum import Enum
from functools import total_ordering
from typing import Any

from pydantic import BaseModel, model_validator


class BoundaryKind(str, Enum):
    NEGATIVE_INFINITY = "negative_infinity"
    EXCLUSIVE_UPPER = "exclusive_upper"
    INCLUSIVE = "inclusive"
    EXCLUSIVE_LOWER = "exclusive_lower"
    INFINITY = "infinity"


_INFINITE_KINDS = frozenset(
    {BoundaryKind.NEGATIVE_INFINITY, BoundaryKind.INFINITY}
)
# Rank of a finite marker relative to the point at the same value.
_POINT_OFFSET = {
    BoundaryKind.EXCLUSIVE_UPPER: -1,
    BoundaryKind.INCLUSIVE: 0,
    BoundaryKind.EXCLUSIVE_LOWER: 1,
}


@total_ordering
class Boundary(BaseModel):
    """Ordinal marker for one edge of an interval.

    Finite markers sit on a value of the ordered domain and are ranked by
    value first, then by kind: ``exclusive_upper(v) < inclusive(v) <
    exclusive_lower(v)``. The infinite markers rank below and above every
    finite marker. Equality is kind-sensitive, so ``inclusive(v)`` and
    ``exclusive_upper(v)`` are different boundaries.
    """

    model_config = {"frozen": True}

    kind: BoundaryKind
    value: Any = None

    @model_validator(mode="after")
    def validate_value(self) -> "Boundary":
        if self.kind in _INFINITE_KINDS:
            if self.value is not None:
                raise ValueError(f"{self.kind.value} boundary takes no value")
        elif self.value is None:
            raise ValueError(f"{self.kind.value} boundary requires a value")
        return self

    @classmethod
    def inclusive(cls, value: Any) -> "Boundary":
        return cls(kind=BoundaryKind.INCLUSIVE, value=value)

    @classmethod
    def exclusive_upper(cls, value: Any) -> "Boundary":
        return cls(kind=BoundaryKind.EXCLUSIVE_UPPER, value=value)

    @classmethod
    def exclusive_lower(cls, value: Any) -> "Boundary":
        return cls(kind=BoundaryKind.EXCLUSIVE_LOWER, value=value)

    @property
    def is_finite(self) -> bool:
        return self.kind not in _INFINITE_KINDS

    def _rank(self) -> tuple[Any, ...]:
        if self.kind == BoundaryKind.NEGATIVE_INFINITY:
            return (0,)
        if self.kind == BoundaryKind.INFINITY:
            return (2,)
        return (1, self.value, _POINT_OFFSET[self.kind])

    def abuts(self, other: "Boundary") -> bool:
        """Whether ``other`` follows this boundary with no point between.

        This holds for ``exclusive_upper(v)`` then ``inclusive(v)``, and for
        ``inclusive(v)`` then ``exclusive_lower(v)``.
        """
        if not (self.is_finite and other.is_finite):
            return False
        if self.value != other.value:
            return False
        return _POINT_OFFSET[other.kind] - _POINT_OFFSET[self.kind] == 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Boundary):
            return NotImplemented
        return self._rank() == other._rank()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Boundary):
            return NotImplemented
        return self._rank() < other._rank()

    def __hash__(self) -> int:
        return hash(self._rank())


NEGATIVE_INFINITY = Boundary(kind=BoundaryKind.NEGATIVE_INFINITY)
INFINITY = Boundary(kind=BoundaryKind.INFINITY)
