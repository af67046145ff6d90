"""rangecomp: Allen interval relations over boundary-aware intervals."""

from rangecomp.boundary import (
    INFINITY,
    NEGATIVE_INFINITY,
    Boundary,
    BoundaryKind,
)
from rangecomp.comp import RangeComp
from rangecomp.dispatch import (
    ALLEN_RELATIONS,
    Relation,
    UnknownRelationError,
    parse_relation,
    query,
    relations_between,
)
from rangecomp.extract import RangeLike, boundaries
from rangecomp.models import BoundaryMode, BoundaryPair, Interval
from rangecomp.notation import (
    IntervalSyntaxError,
    format_interval,
    parse_interval,
)
from rangecomp.relations import (
    after,
    anyinteracts,
    before,
    contains,
    disjoint,
    during,
    equals,
    finishedby,
    finishes,
    intersects,
    meets,
    metby,
    overlappedby,
    overlaps,
    startedby,
    starts,
)

__all__ = [
    "ALLEN_RELATIONS",
    "INFINITY",
    "NEGATIVE_INFINITY",
    "Boundary",
    "BoundaryKind",
    "BoundaryMode",
    "BoundaryPair",
    "Interval",
    "IntervalSyntaxError",
    "RangeComp",
    "RangeLike",
    "Relation",
    "UnknownRelationError",
    "after",
    "anyinteracts",
    "before",
    "boundaries",
    "contains",
    "disjoint",
    "during",
    "equals",
    "finishedby",
    "finishes",
    "format_interval",
    "intersects",
    "meets",
    "metby",
    "overlappedby",
    "overlaps",
    "parse_interval",
    "parse_relation",
    "query",
    "relations_between",
    "startedby",
    "starts",
]
