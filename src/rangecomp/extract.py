from typing import Any, Protocol, runtime_checkable

from rangecomp.boundary import Boundary

Edges = tuple[Boundary, Boundary]


@runtime_checkable
class RangeLike(Protocol):
    """Anything that can report where it starts and where it ends."""

    def start_boundary(self) -> Boundary: ...

    def end_boundary(self) -> Boundary: ...


def _is_boundary_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(item, Boundary) for item in value)
    )


def boundaries(value: Any) -> Edges:
    """Return the ``(start, end)`` boundaries of an interval-like value.

    Accepts ``RangeLike`` objects, a ``(Boundary, Boundary)`` tuple taken
    as given, and ``range`` objects with step 1, read as ``[start, stop)``.
    """
    if isinstance(value, range):
        if value.step != 1:
            raise ValueError(
                f"range with step {value.step} is not an interval"
            )
        return (
            Boundary.inclusive(value.start),
            Boundary.exclusive_upper(value.stop),
        )
    if _is_boundary_pair(value):
        return value[0], value[1]
    if isinstance(value, RangeLike):
        return value.start_boundary(), value.end_boundary()
    raise TypeError(
        f"Cannot extract boundaries from {type(value).__name__}: expected "
        "a range, a (Boundary, Boundary) pair, or an object with "
        "start_boundary()/end_boundary()"
    )
