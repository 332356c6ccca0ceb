"""Tests for status conditions and the status set."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from initiative_tracker.models import (
    BLINDED,
    POISONED,
    PRONE,
    ConditionKind,
    StatusCondition,
    StatusSet,
)


class TestStatusCondition:
    """Tests for StatusCondition."""

    def test_equality_by_kind(self) -> None:
        """Unit conditions are equal by name."""
        assert StatusCondition(kind=ConditionKind.BLINDED) == BLINDED
        assert BLINDED != POISONED

    def test_equality_includes_payload(self) -> None:
        """Payload-carrying conditions compare their payload."""
        grappler = uuid4()

        assert StatusCondition.grappled(grappler) == StatusCondition.grappled(grappler)
        assert StatusCondition.grappled(grappler) != StatusCondition.grappled(uuid4())
        assert StatusCondition.exhaustion(1) != StatusCondition.exhaustion(2)

    def test_hashable(self) -> None:
        """Conditions can be used in sets."""
        assert len({BLINDED, BLINDED, StatusCondition.exhaustion(2)}) == 2

    def test_payload_required(self) -> None:
        """Exhaustion needs a level and grappled needs a grappler."""
        with pytest.raises(ValidationError):
            StatusCondition(kind=ConditionKind.EXHAUSTION)
        with pytest.raises(ValidationError):
            StatusCondition(kind=ConditionKind.GRAPPLED)

    def test_payload_rejected_on_unit_conditions(self) -> None:
        """Unit conditions carry no payload."""
        with pytest.raises(ValidationError):
            StatusCondition(kind=ConditionKind.PRONE, level=2)
        with pytest.raises(ValidationError):
            StatusCondition(kind=ConditionKind.BLINDED, grappler=uuid4())

    @pytest.mark.parametrize("level", [0, 7])
    def test_exhaustion_level_bounds(self, level: int) -> None:
        """Exhaustion levels run from 1 to 6."""
        with pytest.raises(ValidationError):
            StatusCondition.exhaustion(level)

    def test_labels(self) -> None:
        """Test display labels."""
        assert POISONED.label == "Poisoned"
        assert str(StatusCondition.exhaustion(3)) == "Exhaustion (3)"
        assert StatusCondition.grappled(uuid4()).label == "Grappled"


class TestStatusSet:
    """Tests for StatusSet."""

    def test_add_is_idempotent(self) -> None:
        """Adding an equal condition twice keeps one entry."""
        statuses = StatusSet()

        assert statuses.add(BLINDED) is True
        assert statuses.add(BLINDED) is False
        assert len(statuses) == 1

    def test_insertion_order(self) -> None:
        """Conditions keep the order they were applied."""
        statuses = StatusSet()
        for condition in (PRONE, BLINDED, POISONED):
            statuses.add(condition)

        assert statuses.as_tuple() == (PRONE, BLINDED, POISONED)
        assert list(statuses) == [PRONE, BLINDED, POISONED]

    def test_remove_reports_presence(self) -> None:
        """Removal signals whether the condition was there."""
        statuses = StatusSet()
        statuses.add(BLINDED)

        assert statuses.remove(BLINDED) is True
        assert BLINDED not in statuses
        assert statuses.remove(BLINDED) is False

    def test_remove_matches_payload(self) -> None:
        """Only the matching grapple is removed."""
        first, second = uuid4(), uuid4()
        statuses = StatusSet()
        statuses.add(StatusCondition.grappled(first))
        statuses.add(StatusCondition.grappled(second))

        assert statuses.remove(StatusCondition.grappled(first)) is True
        assert statuses.as_tuple() == (StatusCondition.grappled(second),)

    def test_clear(self) -> None:
        """Clearing empties the set unconditionally."""
        statuses = StatusSet()
        statuses.clear()
        statuses.add(POISONED)
        statuses.clear()

        assert len(statuses) == 0

    def test_validation_drops_duplicates(self) -> None:
        """Loading serialized data keeps set semantics."""
        statuses = StatusSet.model_validate(
            [{"kind": "blinded"}, {"kind": "poisoned"}, {"kind": "blinded"}]
        )

        assert statuses.as_tuple() == (BLINDED, POISONED)

    def test_round_trip(self) -> None:
        """Dumped statuses validate back to the same set."""
        statuses = StatusSet()
        statuses.add(StatusCondition.exhaustion(2))
        statuses.add(StatusCondition.grappled(uuid4()))

        assert StatusSet.model_validate(statuses.model_dump(mode="json")) == statuses
