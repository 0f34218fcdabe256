"""
Timeline Service

Merges every derived and predicted event into one collection and answers
the calendar's query shapes: date range, lookahead from today and single day.

Key principles:
- Events are recomputed from the supplied snapshots on every call
- Results are ordered by date; events sharing a date keep derivation order
- Foreign keys are not validated - a litter or stud job whose dog cannot be
  found contributes no events and is reported in the log
"""

import logging
import datetime as _dt
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..config import (
    LOOKAHEAD_DAYS,
    PREDICTION_WINDOW_PAST_DAYS,
    PREDICTION_WINDOW_FUTURE_DAYS,
    DAY_EVENT_DISPLAY_LIMIT,
)
from ..events.event_types import CalendarEvent, EventKind
from ..models import Dog, Litter, StudJob
from .dates import add_days
from .event_derivation import events_from_heat_cycles, events_from_litter, events_from_stud_job
from .heat_prediction import predict_next_heat

logger = logging.getLogger(__name__)


@dataclass
class DayEvents:
    """Events of one calendar day, capped for display"""
    day: _dt.date
    events: List[CalendarEvent]
    overflow: int = 0  # Events beyond the display cap ("+N more")

    @property
    def total(self) -> int:
        return len(self.events) + self.overflow


def _sort_by_date(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    # sorted() is stable, so same-day events keep derivation order
    return sorted(events, key=lambda e: e.date)


# =============================================================================
# DERIVATION
# =============================================================================

def derive_events(
    dogs: List[Dog],
    litters: List[Litter],
    stud_jobs: List[StudJob],
    default_cycle_length: Optional[int] = None,
) -> List[CalendarEvent]:
    """Run every derivation rule and the heat predictor over the snapshots.

    Female dogs contribute heat cycle events and one predicted heat, litters
    are attributed to their dam and stud jobs to their stud.
    """
    dogs_by_id: Dict[str, Dog] = {dog.id: dog for dog in dogs}
    events: List[CalendarEvent] = []

    for dog in dogs:
        if dog.sex != 'female':
            continue
        events.extend(events_from_heat_cycles(dog))
        expected = predict_next_heat(dog, default_cycle_length)
        if expected is not None:
            events.append(expected)

    skipped_litters = 0
    for litter in litters:
        dam = dogs_by_id.get(litter.damId) if litter.damId else None
        if dam is None:
            skipped_litters += 1
            logger.warning(f"Skipping litter {litter.id}: dam {litter.damId} not found")
            continue
        events.extend(events_from_litter(litter, dam))

    skipped_jobs = 0
    for job in stud_jobs:
        stud = dogs_by_id.get(job.studId) if job.studId else None
        if stud is None:
            skipped_jobs += 1
            logger.warning(f"Skipping stud job {job.id}: stud {job.studId} not found")
            continue
        events.extend(events_from_stud_job(job, stud))

    logger.info(
        f"Derived {len(events)} events from {len(dogs)} dogs, {len(litters)} litters "
        f"and {len(stud_jobs)} stud jobs ({skipped_litters} litters, {skipped_jobs} stud jobs skipped)"
    )
    return events


# =============================================================================
# QUERIES
# =============================================================================

def query_range(events: List[CalendarEvent], start: _dt.date, end: _dt.date) -> List[CalendarEvent]:
    """Events dated within [start, end] inclusive, ascending by date"""
    return _sort_by_date(e for e in events if start <= e.date <= end)


def query_lookahead(events: List[CalendarEvent], today: _dt.date, days: int = LOOKAHEAD_DAYS) -> List[CalendarEvent]:
    """Events dated within [today, today + days] inclusive, ascending by date"""
    if days < 0:
        raise ValueError(f"Lookahead days must be zero or positive, got {days}")
    return query_range(events, today, add_days(today, days))


def query_day(events: List[CalendarEvent], day: _dt.date) -> List[CalendarEvent]:
    """Events dated exactly on day"""
    return [e for e in events if e.date == day]


def group_by_day(events: List[CalendarEvent], limit: int = DAY_EVENT_DISPLAY_LIMIT) -> List[DayEvents]:
    """Bucket events per day, keeping at most limit events per bucket"""
    buckets: Dict[_dt.date, List[CalendarEvent]] = {}
    for event in _sort_by_date(events):
        buckets.setdefault(event.date, []).append(event)

    return [
        DayEvents(day=day, events=day_events[:limit], overflow=max(0, len(day_events) - limit))
        for day, day_events in buckets.items()
    ]


# =============================================================================
# PREDICTION RELEVANCE
# =============================================================================

def in_prediction_window(
    day: _dt.date,
    today: _dt.date,
    past_days: int = PREDICTION_WINDOW_PAST_DAYS,
    future_days: int = PREDICTION_WINDOW_FUTURE_DAYS,
) -> bool:
    """Whether day lies within [today - past_days, today + future_days]"""
    return add_days(today, -past_days) <= day <= add_days(today, future_days)


def is_prediction_relevant(
    event: CalendarEvent,
    today: _dt.date,
    past_days: int = PREDICTION_WINDOW_PAST_DAYS,
    future_days: int = PREDICTION_WINDOW_FUTURE_DAYS,
) -> bool:
    """Whether a predicted heat is close enough to today to surface.

    Only ExpectedHeat events are judged; this window is independent of the
    lookahead window.
    """
    if event.kind != EventKind.EXPECTED_HEAT:
        return False
    return in_prediction_window(event.date, today, past_days, future_days)


def relevant_predictions(events: List[CalendarEvent], today: _dt.date) -> List[CalendarEvent]:
    """Predicted heats inside the relevance window, ascending by date"""
    return _sort_by_date(e for e in events if is_prediction_relevant(e, today))
