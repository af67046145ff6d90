import random
from collections.abc import Iterator, Sequence
from typing import Any

from rangecomp.extract import boundaries
from rangecomp.models import BoundaryMode, Interval


def is_non_degenerate(value: Any) -> bool:
    """Whether the start boundary ranks strictly below the end boundary."""
    start, end = boundaries(value)
    return start < end


def iter_intervals(values: Sequence[Any]) -> Iterator[Interval]:
    """Yield every interval shape whose finite endpoints come from values.

    Covers all four boundary modes for bounded intervals, both sides
    unbounded, and the full domain. Degenerate intervals such as ``[3, 3)``
    are included; filter with ``is_non_degenerate`` where needed.
    """
    ordered = sorted(set(values))
    for i, start in enumerate(ordered):
        for end in ordered[i:]:
            for mode in BoundaryMode:
                yield Interval(start=start, end=end, boundary_mode=mode)
    for value in ordered:
        # Modes differ only in the closedness of the finite side.
        yield Interval(start=value, boundary_mode=BoundaryMode.CLOSED_OPEN)
        yield Interval(start=value, boundary_mode=BoundaryMode.OPEN_OPEN)
        yield Interval(end=value, boundary_mode=BoundaryMode.CLOSED_OPEN)
        yield Interval(end=value, boundary_mode=BoundaryMode.CLOSED_CLOSED)
    yield Interval.full()


def sample_interval(
    endpoint_range: tuple[int, int],
    rng: random.Random,
    unbounded_prob: float = 0.1,
) -> Interval:
    """Sample a random non-degenerate interval with integer endpoints."""
    lo, hi = endpoint_range
    if lo >= hi:
        raise ValueError(
            f"endpoint_range is malformed: low ({lo}) must be < high ({hi})"
        )
    if not 0.0 <= unbounded_prob <= 1.0:
        raise ValueError(
            f"unbounded_prob must be within [0.0, 1.0], got {unbounded_prob}"
        )
    while True:
        a = rng.randint(lo, hi)
        b = rng.randint(lo, hi)
        start: int | None = min(a, b)
        end: int | None = max(a, b)
        if rng.random() < unbounded_prob:
            start = None
        if rng.random() < unbounded_prob:
            end = None
        interval = Interval(
            start=start,
            end=end,
            boundary_mode=rng.choice(list(BoundaryMode)),
        )
        if is_non_degenerate(interval):
            return interval
