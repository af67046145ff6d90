"""Allen interval relations defined over interval boundaries.

Every predicate takes two interval-like values (see ``extract.boundaries``)
and compares their four boundaries: ``ls``/``le`` for the left interval and
``rs``/``re`` for the right one. Reciprocal relations call their base
relation with the arguments swapped, so ``after(a, b) == before(b, a)``
holds by construction.

For well-formed, non-degenerate intervals (start boundary strictly below
end boundary) exactly one of the thirteen Allen relations holds. Results
for intervals whose start ranks above their end are unspecified.
"""

from typing import Any

from rangecomp.extract import boundaries


def intersects(left: Any, right: Any) -> bool:
    """The intervals share at least one point."""
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls <= re and rs <= le


def overlaps(left: Any, right: Any) -> bool:
    """Left starts first and ends inside right, past right's start."""
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls < rs and rs < le and le < re


def meets(left: Any, right: Any) -> bool:
    le = boundaries(left)[1]
    rs = boundaries(right)[0]
    # [1, 10) meets [10, 20) through abutting boundaries.
    return le == rs or le.abuts(rs)


def before(left: Any, right: Any) -> bool:
    le = boundaries(left)[1]
    rs = boundaries(right)[0]
    return le < rs and not le.abuts(rs)


def starts(left: Any, right: Any) -> bool:
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls == rs and le < re


def during(left: Any, right: Any) -> bool:
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls > rs and le < re


def finishes(left: Any, right: Any) -> bool:
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls > rs and le == re


def equals(left: Any, right: Any) -> bool:
    ls, le = boundaries(left)
    rs, re = boundaries(right)
    return ls == rs and le == re


def disjoint(left: Any, right: Any) -> bool:
    return not intersects(left, right)


def anyinteracts(left: Any, right: Any) -> bool:
    return intersects(left, right)


def after(left: Any, right: Any) -> bool:
    return before(right, left)


def overlappedby(left: Any, right: Any) -> bool:
    return overlaps(right, left)


def metby(left: Any, right: Any) -> bool:
    return meets(right, left)


def startedby(left: Any, right: Any) -> bool:
    return starts(right, left)


def contains(left: Any, right: Any) -> bool:
    return during(right, left)


def finishedby(left: Any, right: Any) -> bool:
    return finishes(right, left)
