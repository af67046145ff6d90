from abc import ABC, abstractmethod
from typing import Any

from rangecomp import relations
from rangecomp.boundary import Boundary
from rangecomp.dispatch import Relation, query, relations_between


class RangeComp(ABC):
    """Mixin giving interval types the relation predicates as methods.

    Subclasses implement ``start_boundary`` and ``end_boundary``.
    """

    @abstractmethod
    def start_boundary(self) -> Boundary: ...

    @abstractmethod
    def end_boundary(self) -> Boundary: ...

    def intersects(self, other: Any) -> bool:
        return relations.intersects(self, other)

    def anyinteracts(self, other: Any) -> bool:
        return relations.anyinteracts(self, other)

    def disjoint(self, other: Any) -> bool:
        return relations.disjoint(self, other)

    def overlaps(self, other: Any) -> bool:
        return relations.overlaps(self, other)

    def overlappedby(self, other: Any) -> bool:
        return relations.overlappedby(self, other)

    def before(self, other: Any) -> bool:
        return relations.before(self, other)

    def after(self, other: Any) -> bool:
        return relations.after(self, other)

    def meets(self, other: Any) -> bool:
        return relations.meets(self, other)

    def metby(self, other: Any) -> bool:
        return relations.metby(self, other)

    def starts(self, other: Any) -> bool:
        return relations.starts(self, other)

    def startedby(self, other: Any) -> bool:
        return relations.startedby(self, other)

    def during(self, other: Any) -> bool:
        return relations.during(self, other)

    def contains(self, other: Any) -> bool:
        return relations.contains(self, other)

    def finishes(self, other: Any) -> bool:
        return relations.finishes(self, other)

    def finishedby(self, other: Any) -> bool:
        return relations.finishedby(self, other)

    def equals(self, other: Any) -> bool:
        return relations.equals(self, other)

    def op(self, other: Any, relation: str | Relation) -> bool:
        return query(self, other, relation)

    def relate(self, other: Any) -> list[Relation]:
        return relations_between(self, other)
