"""Unit tests for utils.ordering module."""

import pytest

from nostrsign.models import Event
from nostrsign.utils import insert_event_into_ascending_list, insert_event_into_descending_list


def _event(created_at: int, event_id: str | None = None) -> Event:
    return Event(
        kind=1,
        created_at=created_at,
        pubkey="a" * 64,
        id=event_id or f"id-{created_at}",
        sig="",
    )


def _timestamps(events) -> list[int]:
    return [e.created_at for e in events]


@pytest.fixture
def descending() -> list[Event]:
    return [_event(30), _event(20), _event(10)]


@pytest.fixture
def ascending() -> list[Event]:
    return [_event(10), _event(20), _event(30)]


class TestDescending:
    def test_empty(self):
        event = _event(1)
        assert insert_event_into_descending_list([], event) == [event]

    def test_middle(self, descending):
        result = insert_event_into_descending_list(descending, _event(25))
        assert _timestamps(result) == [30, 25, 20, 10]

    def test_newest_goes_first(self, descending):
        result = insert_event_into_descending_list(descending, _event(40))
        assert _timestamps(result) == [40, 30, 20, 10]

    def test_oldest_goes_last(self, descending):
        result = insert_event_into_descending_list(descending, _event(5))
        assert _timestamps(result) == [30, 20, 10, 5]

    def test_input_not_mutated(self, descending):
        before = list(descending)
        result = insert_event_into_descending_list(descending, _event(15))
        assert descending == before
        assert result is not descending

    @pytest.mark.parametrize("created_at", [30, 20, 10])
    def test_duplicate_returns_same_list(self, descending, created_at):
        duplicate = _event(created_at)
        assert insert_event_into_descending_list(descending, duplicate) is descending

    def test_equal_timestamp_different_id_inserted(self, descending):
        result = insert_event_into_descending_list(descending, _event(20, "other"))
        assert len(result) == 4
        assert _timestamps(result) == [30, 20, 20, 10]
        assert "other" in [e.id for e in result]

    def test_builds_sorted_timeline(self):
        timeline: list[Event] = []
        for created_at in [5, 50, 20, 35, 1, 99, 42]:
            timeline = insert_event_into_descending_list(timeline, _event(created_at))
        assert _timestamps(timeline) == [99, 50, 42, 35, 20, 5, 1]

    def test_tuple_input(self):
        result = insert_event_into_descending_list((_event(3), _event(1)), _event(2))
        assert _timestamps(result) == [3, 2, 1]


class TestAscending:
    def test_empty(self):
        event = _event(1)
        assert insert_event_into_ascending_list([], event) == [event]

    def test_middle(self, ascending):
        result = insert_event_into_ascending_list(ascending, _event(25))
        assert _timestamps(result) == [10, 20, 25, 30]

    def test_newest_goes_last(self, ascending):
        result = insert_event_into_ascending_list(ascending, _event(40))
        assert _timestamps(result) == [10, 20, 30, 40]

    def test_oldest_goes_first(self, ascending):
        result = insert_event_into_ascending_list(ascending, _event(5))
        assert _timestamps(result) == [5, 10, 20, 30]

    def test_input_not_mutated(self, ascending):
        before = list(ascending)
        insert_event_into_ascending_list(ascending, _event(15))
        assert ascending == before

    @pytest.mark.parametrize("created_at", [10, 20, 30])
    def test_duplicate_returns_same_list(self, ascending, created_at):
        assert insert_event_into_ascending_list(ascending, _event(created_at)) is ascending

    def test_builds_sorted_timeline(self):
        timeline: list[Event] = []
        for created_at in [5, 50, 20, 35, 1, 99, 42]:
            timeline = insert_event_into_ascending_list(timeline, _event(created_at))
        assert _timestamps(timeline) == [1, 5, 20, 35, 42, 50, 99]

    def test_no_signature_check(self, ascending):
        unsigned = Event(kind=1, created_at=15, pubkey="bad", id="x", sig="bad")
        result = insert_event_into_ascending_list(ascending, unsigned)
        assert result[1] is unsigned
