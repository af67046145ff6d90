from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

from rangecomp.boundary import INFINITY, NEGATIVE_INFINITY, Boundary
from rangecomp.comp import RangeComp


class BoundaryMode(str, Enum):
    CLOSED_CLOSED = "closed_closed"
    CLOSED_OPEN = "closed_open"
    OPEN_CLOSED = "open_closed"
    OPEN_OPEN = "open_open"

    @property
    def lower_closed(self) -> bool:
        return self in (BoundaryMode.CLOSED_CLOSED, BoundaryMode.CLOSED_OPEN)

    @property
    def upper_closed(self) -> bool:
        return self in (BoundaryMode.CLOSED_CLOSED, BoundaryMode.OPEN_CLOSED)

    @classmethod
    def from_closed(
        cls, lower_closed: bool, upper_closed: bool
    ) -> "BoundaryMode":
        if lower_closed:
            return cls.CLOSED_CLOSED if upper_closed else cls.CLOSED_OPEN
        return cls.OPEN_CLOSED if upper_closed else cls.OPEN_OPEN


class Interval(BaseModel, RangeComp):
    """Interval over an ordered domain.

    A ``None`` endpoint is unbounded on that side; ``boundary_mode`` only
    applies to finite endpoints.
    """

    model_config = {"frozen": True}

    start: Any = None
    end: Any = None
    boundary_mode: BoundaryMode = BoundaryMode.CLOSED_OPEN

    @model_validator(mode="after")
    def validate_endpoints(self) -> "Interval":
        if self.start is None or self.end is None:
            return self
        try:
            reversed_endpoints = self.start > self.end
        except TypeError as err:
            raise ValueError(
                f"start ({self.start!r}) and end ({self.end!r}) "
                "are not comparable"
            ) from err
        if reversed_endpoints:
            raise ValueError(
                f"start ({self.start!r}) must be <= end ({self.end!r})"
            )
        return self

    @classmethod
    def closed_open(cls, start: Any, end: Any) -> "Interval":
        return cls(
            start=start, end=end, boundary_mode=BoundaryMode.CLOSED_OPEN
        )

    @classmethod
    def closed(cls, start: Any, end: Any) -> "Interval":
        return cls(
            start=start, end=end, boundary_mode=BoundaryMode.CLOSED_CLOSED
        )

    @classmethod
    def open_closed(cls, start: Any, end: Any) -> "Interval":
        return cls(
            start=start, end=end, boundary_mode=BoundaryMode.OPEN_CLOSED
        )

    @classmethod
    def open(cls, start: Any, end: Any) -> "Interval":
        return cls(
            start=start, end=end, boundary_mode=BoundaryMode.OPEN_OPEN
        )

    @classmethod
    def up_to(cls, end: Any) -> "Interval":
        return cls(end=end, boundary_mode=BoundaryMode.CLOSED_OPEN)

    @classmethod
    def up_to_inclusive(cls, end: Any) -> "Interval":
        return cls(end=end, boundary_mode=BoundaryMode.CLOSED_CLOSED)

    @classmethod
    def starting_at(cls, start: Any) -> "Interval":
        return cls(start=start, boundary_mode=BoundaryMode.CLOSED_OPEN)

    @classmethod
    def full(cls) -> "Interval":
        return cls()

    def start_boundary(self) -> Boundary:
        if self.start is None:
            return NEGATIVE_INFINITY
        if self.boundary_mode.lower_closed:
            return Boundary.inclusive(self.start)
        return Boundary.exclusive_lower(self.start)

    def end_boundary(self) -> Boundary:
        if self.end is None:
            return INFINITY
        if self.boundary_mode.upper_closed:
            return Boundary.inclusive(self.end)
        return Boundary.exclusive_upper(self.end)


class BoundaryPair(BaseModel, RangeComp):
    """Interval given directly by its two boundaries, taken as is."""

    model_config = {"frozen": True}

    start: Boundary
    end: Boundary

    def start_boundary(self) -> Boundary:
        return self.start

    def end_boundary(self) -> Boundary:
        return self.end
