"""Tests for the timeline aggregator: derivation pass and date queries."""

import datetime as _dt
import logging

import pytest

from kennel_py.events.event_types import CalendarEvent, EventKind
from kennel_py.models import Dog, HeatCycle, Litter, StudJob
from kennel_py.services.timeline import (
    derive_events,
    group_by_day,
    is_prediction_relevant,
    query_day,
    query_lookahead,
    query_range,
    relevant_predictions,
)


def _event(day: _dt.date, kind: EventKind = EventKind.BREEDING, dog_id: str = "dog-1") -> CalendarEvent:
    return CalendarEvent(date=day, kind=kind, title=kind.value, subject_dog_id=dog_id, subject_dog_name="Dog")


@pytest.fixture
def kennel_events(dogs, pregnant_litter, completed_stud_job):
    return derive_events(dogs, [pregnant_litter], [completed_stud_job])


# ===========================================================================
# derive_events
# ===========================================================================

class TestDeriveEvents:

    def test_all_sources_contribute(self, kennel_events):
        kinds = {e.kind for e in kennel_events}
        assert kinds == {
            EventKind.HEAT_STARTED,
            EventKind.BREEDING,
            EventKind.EXPECTED_HEAT,
            EventKind.DUE_DATE,
            EventKind.STUD_BREEDING,
            EventKind.PREGNANCY_CHECK,
            EventKind.LITTER_SIZE_CHECK,
        }

    def test_one_prediction_per_female(self, kennel_events):
        expected = [e for e in kennel_events if e.kind == EventKind.EXPECTED_HEAT]
        assert len(expected) == 1
        # 2024-07-28 + 200 day interval
        assert expected[0].date == _dt.date(2025, 2, 13)

    def test_males_contribute_no_heat_events(self):
        male = Dog(id="m", name="Rex", sex="male", heatCycles=[HeatCycle(startDate="2024-01-01")])
        assert derive_events([male], [], []) == []

    def test_litter_with_unknown_dam_is_skipped(self, dogs, caplog):
        orphan = Litter(id="l-x", damId="ghost", status="pregnant", expectedDateOfBirth="2025-03-10")
        with caplog.at_level(logging.WARNING):
            events = derive_events(dogs, [orphan], [])
        assert not [e for e in events if e.litter_id == "l-x"]
        assert "l-x" in caplog.text

    def test_stud_job_with_unknown_stud_is_skipped(self, dogs, completed_stud_job, caplog):
        completed_stud_job.studId = "ghost"
        with caplog.at_level(logging.WARNING):
            events = derive_events(dogs, [], [completed_stud_job])
        assert not [e for e in events if e.stud_job_id == "job-1"]
        assert "job-1" in caplog.text

    def test_empty_snapshots(self):
        assert derive_events([], [], []) == []

    def test_recomputed_each_call(self, dogs, pregnant_litter, completed_stud_job):
        first = derive_events(dogs, [pregnant_litter], [completed_stud_job])
        second = derive_events(dogs, [pregnant_litter], [completed_stud_job])
        assert first == second
        assert first is not second


# ===========================================================================
# Queries
# ===========================================================================

class TestQueryRange:

    def test_inclusive_and_sorted(self, kennel_events):
        result = query_range(kennel_events, _dt.date(2025, 1, 1), _dt.date(2025, 3, 10))
        dates = [e.date for e in result]
        assert dates == sorted(dates)
        assert dates[0] == _dt.date(2025, 1, 1)
        assert dates[-1] == _dt.date(2025, 3, 10)

    def test_subset_of_derived_events(self, kennel_events):
        start, end = _dt.date(2024, 8, 1), _dt.date(2025, 2, 28)
        result = query_range(kennel_events, start, end)
        assert all(e in kennel_events for e in result)
        assert len(result) == len([e for e in kennel_events if start <= e.date <= end])

    def test_idempotent(self, kennel_events):
        start, end = _dt.date(2024, 1, 1), _dt.date(2025, 12, 31)
        once = query_range(kennel_events, start, end)
        assert query_range(once, start, end) == once
        assert query_range(kennel_events, start, end) == once

    def test_monotonic_in_range(self, kennel_events):
        narrow = query_range(kennel_events, _dt.date(2025, 1, 1), _dt.date(2025, 1, 31))
        wide = query_range(kennel_events, _dt.date(2024, 12, 1), _dt.date(2025, 3, 31))
        assert all(e in wide for e in narrow)

    def test_inverted_range_is_empty(self, kennel_events):
        assert query_range(kennel_events, _dt.date(2025, 3, 1), _dt.date(2025, 1, 1)) == []

    def test_same_day_keeps_derivation_order(self):
        day = _dt.date(2025, 1, 5)
        events = [_event(day, dog_id="a"), _event(_dt.date(2025, 1, 1)), _event(day, dog_id="b")]
        result = query_range(events, day, day)
        assert [e.subject_dog_id for e in result] == ["a", "b"]


class TestQueryLookahead:

    def test_default_thirty_days_inclusive(self):
        today = _dt.date(2025, 1, 1)
        events = [
            _event(_dt.date(2024, 12, 31)),
            _event(today),
            _event(_dt.date(2025, 1, 31)),
            _event(_dt.date(2025, 2, 1)),
        ]
        result = query_lookahead(events, today)
        assert [e.date for e in result] == [today, _dt.date(2025, 1, 31)]

    def test_custom_window(self):
        today = _dt.date(2025, 1, 1)
        events = [_event(_dt.date(2025, 1, 8)), _event(_dt.date(2025, 1, 9))]
        assert len(query_lookahead(events, today, days=7)) == 1

    def test_zero_days_is_today_only(self):
        today = _dt.date(2025, 1, 1)
        events = [_event(today), _event(_dt.date(2025, 1, 2))]
        assert [e.date for e in query_lookahead(events, today, days=0)] == [today]

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError):
            query_lookahead([], _dt.date(2025, 1, 1), days=-1)


class TestQueryDay:

    def test_exact_day_only(self, kennel_events):
        result = query_day(kennel_events, _dt.date(2025, 1, 1))
        assert [e.kind for e in result] == [EventKind.STUD_BREEDING]

    def test_empty_day(self, kennel_events):
        assert query_day(kennel_events, _dt.date(2030, 1, 1)) == []


class TestGroupByDay:

    def test_overflow_beyond_limit(self):
        day = _dt.date(2025, 1, 5)
        events = [_event(day, dog_id=str(i)) for i in range(5)] + [_event(_dt.date(2025, 1, 6))]
        groups = group_by_day(events, limit=3)
        assert [g.day for g in groups] == [day, _dt.date(2025, 1, 6)]
        assert len(groups[0].events) == 3
        assert groups[0].overflow == 2
        assert groups[0].total == 5
        assert groups[1].overflow == 0


# ===========================================================================
# Prediction relevance
# ===========================================================================

class TestPredictionRelevance:

    @pytest.mark.parametrize(
        "offset,relevant",
        [(-31, False), (-30, True), (0, True), (60, True), (61, False)],
    )
    def test_window_bounds(self, today, offset, relevant):
        event = _event(today + _dt.timedelta(days=offset), kind=EventKind.EXPECTED_HEAT)
        assert is_prediction_relevant(event, today) is relevant

    def test_only_expected_heats_are_judged(self, today):
        assert is_prediction_relevant(_event(today, kind=EventKind.HEAT_STARTED), today) is False

    def test_relevant_predictions_independent_of_lookahead(self, today):
        far = _event(today + _dt.timedelta(days=45), kind=EventKind.EXPECTED_HEAT)
        assert query_lookahead([far], today) == []
        assert relevant_predictions([far], today) == [far]
