import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from rangecomp import relations

logger = logging.getLogger(__name__)


class Relation(str, Enum):
    INTERSECTS = "intersects"
    DISJOINT = "disjoint"
    BEFORE = "before"
    AFTER = "after"
    MEETS = "meets"
    METBY = "metby"
    OVERLAPS = "overlaps"
    OVERLAPPEDBY = "overlappedby"
    STARTS = "starts"
    STARTEDBY = "startedby"
    DURING = "during"
    CONTAINS = "contains"
    FINISHES = "finishes"
    FINISHEDBY = "finishedby"
    EQUALS = "equals"


ALLEN_RELATIONS: tuple[Relation, ...] = (
    Relation.BEFORE,
    Relation.AFTER,
    Relation.MEETS,
    Relation.METBY,
    Relation.OVERLAPS,
    Relation.OVERLAPPEDBY,
    Relation.STARTS,
    Relation.STARTEDBY,
    Relation.DURING,
    Relation.CONTAINS,
    Relation.FINISHES,
    Relation.FINISHEDBY,
    Relation.EQUALS,
)

_PREDICATES: dict[Relation, Callable[[Any, Any], bool]] = {
    Relation.INTERSECTS: relations.intersects,
    Relation.DISJOINT: relations.disjoint,
    Relation.BEFORE: relations.before,
    Relation.AFTER: relations.after,
    Relation.MEETS: relations.meets,
    Relation.METBY: relations.metby,
    Relation.OVERLAPS: relations.overlaps,
    Relation.OVERLAPPEDBY: relations.overlappedby,
    Relation.STARTS: relations.starts,
    Relation.STARTEDBY: relations.startedby,
    Relation.DURING: relations.during,
    Relation.CONTAINS: relations.contains,
    Relation.FINISHES: relations.finishes,
    Relation.FINISHEDBY: relations.finishedby,
    Relation.EQUALS: relations.equals,
}

_KEYWORDS: dict[str, Relation] = {
    **{relation.value: relation for relation in Relation},
    "anyinteracts": Relation.INTERSECTS,
    # Misspelling accepted by earlier callers.
    "meeets": Relation.MEETS,
}


class UnknownRelationError(ValueError):
    """Raised when a relation name matches no known keyword."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown relation keyword: {name!r}")
        self.name = name


def parse_relation(name: str | Relation) -> Relation:
    """Resolve a relation name to a ``Relation``.

    Matching is case-insensitive and only the text after the last
    underscore counts, so ``"range_Intersects"`` resolves like
    ``"intersects"``.
    """
    if isinstance(name, Relation):
        return name
    keyword = name.lower().rsplit("_", 1)[-1]
    relation = _KEYWORDS.get(keyword)
    if relation is None:
        raise UnknownRelationError(name)
    logger.debug("Resolved relation name %r to %s", name, relation.value)
    return relation


def query(left: Any, right: Any, relation: str | Relation) -> bool:
    return _PREDICATES[parse_relation(relation)](left, right)


def relations_between(left: Any, right: Any) -> list[Relation]:
    """List the Allen relations that hold from ``left`` to ``right``."""
    return [
        relation
        for relation in ALLEN_RELATIONS
        if _PREDICATES[relation](left, right)
    ]
