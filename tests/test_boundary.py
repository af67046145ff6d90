from datetime import datetime

import pytest
from pydantic import ValidationError

from rangecomp.boundary import (
    INFINITY,
    NEGATIVE_INFINITY,
    Boundary,
    BoundaryKind,
)


class TestOrdering:
    def test_infinities_bracket_finite_markers(self) -> None:
        for marker in (
            Boundary.inclusive(0),
            Boundary.exclusive_upper(-(10**9)),
            Boundary.exclusive_lower(10**9),
        ):
            assert NEGATIVE_INFINITY < marker < INFINITY
        assert NEGATIVE_INFINITY < INFINITY

    def test_same_value_orders_by_kind(self) -> None:
        assert (
            Boundary.exclusive_upper(5)
            < Boundary.inclusive(5)
            < Boundary.exclusive_lower(5)
        )

    def test_exclusive_upper_ranks_above_smaller_values(self) -> None:
        assert Boundary.inclusive(4) < Boundary.exclusive_upper(5)
        assert Boundary.exclusive_lower(4) < Boundary.exclusive_upper(5)

    def test_exclusive_lower_ranks_below_larger_values(self) -> None:
        assert Boundary.exclusive_lower(5) < Boundary.inclusive(6)
        assert Boundary.exclusive_lower(5) < Boundary.exclusive_upper(6)

    def test_value_dominates_kind(self) -> None:
        assert Boundary.exclusive_lower(1) < Boundary.exclusive_upper(2)
        assert Boundary.inclusive(1.5) > Boundary.exclusive_lower(1)

    def test_datetime_values(self) -> None:
        early = Boundary.inclusive(datetime(2020, 1, 1))
        late = Boundary.exclusive_upper(datetime(2020, 2, 1))
        assert early < late
        assert late <= Boundary.inclusive(datetime(2020, 2, 1))

    def test_sorting_mixed_markers(self) -> None:
        markers = [
            INFINITY,
            Boundary.exclusive_lower(2),
            Boundary.inclusive(2),
            NEGATIVE_INFINITY,
            Boundary.exclusive_upper(2),
            Boundary.inclusive(1),
        ]
        assert sorted(markers) == [
            NEGATIVE_INFINITY,
            Boundary.inclusive(1),
            Boundary.exclusive_upper(2),
            Boundary.inclusive(2),
            Boundary.exclusive_lower(2),
            INFINITY,
        ]


class TestEquality:
    def test_equal_kind_and_value(self) -> None:
        assert Boundary.inclusive(3) == Boundary.inclusive(3)
        assert Boundary.inclusive(3) == Boundary.inclusive(3.0)
        assert Boundary.inclusive(3) <= Boundary.inclusive(3)
        assert Boundary.inclusive(3) >= Boundary.inclusive(3)

    def test_kind_is_part_of_equality(self) -> None:
        assert Boundary.inclusive(3) != Boundary.exclusive_upper(3)
        assert Boundary.inclusive(3) != Boundary.exclusive_lower(3)

    def test_infinities_equal_themselves(self) -> None:
        assert Boundary(kind=BoundaryKind.INFINITY) == INFINITY
        assert NEGATIVE_INFINITY != INFINITY

    def test_hash_matches_equality(self) -> None:
        markers = {
            Boundary.inclusive(3),
            Boundary.inclusive(3),
            Boundary.exclusive_upper(3),
            Boundary(kind=BoundaryKind.INFINITY),
            INFINITY,
        }
        assert len(markers) == 3

    def test_comparison_with_other_types_is_unsupported(self) -> None:
        assert Boundary.inclusive(3) != 3
        with pytest.raises(TypeError):
            _ = Boundary.inclusive(3) < 3


class TestAbuts:
    def test_exclusive_upper_abuts_inclusive(self) -> None:
        assert Boundary.exclusive_upper(10).abuts(Boundary.inclusive(10))

    def test_inclusive_abuts_exclusive_lower(self) -> None:
        assert Boundary.inclusive(10).abuts(Boundary.exclusive_lower(10))

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (Boundary.inclusive(10), Boundary.exclusive_upper(10)),
            (Boundary.exclusive_upper(10), Boundary.exclusive_lower(10)),
            (Boundary.inclusive(10), Boundary.inclusive(10)),
            (Boundary.exclusive_upper(10), Boundary.inclusive(11)),
            (NEGATIVE_INFINITY, Boundary.inclusive(0)),
            (Boundary.inclusive(0), INFINITY),
        ],
    )
    def test_non_abutting_pairs(
        self, first: Boundary, second: Boundary
    ) -> None:
        assert not first.abuts(second)


class TestModel:
    def test_finite_kind_requires_value(self) -> None:
        with pytest.raises(ValidationError, match="requires a value"):
            Boundary(kind=BoundaryKind.INCLUSIVE)

    def test_infinite_kind_rejects_value(self) -> None:
        with pytest.raises(ValidationError, match="takes no value"):
            Boundary(kind=BoundaryKind.INFINITY, value=1)

    def test_frozen(self) -> None:
        marker = Boundary.inclusive(1)
        with pytest.raises(ValidationError):
            marker.value = 2  # type: ignore[misc]

    def test_model_dump_validates_back(self) -> None:
        marker = Boundary.exclusive_upper(7)
        assert marker.model_dump() == {"kind": "exclusive_upper", "value": 7}
        assert Boundary.model_validate(marker.model_dump()) == marker

    def test_is_finite(self) -> None:
        assert Boundary.inclusive(0).is_finite
        assert not INFINITY.is_finite
        assert not NEGATIVE_INFINITY.is_finite
