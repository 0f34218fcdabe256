"""
Heat Cycle Prediction Service
Estimates the onset of a female dog's next heat from her recorded heat cycles
"""

import logging
import datetime as _dt
from dataclasses import dataclass
from typing import List, Optional

from ..config import DEFAULT_CYCLE_LENGTH_DAYS
from ..events.event_types import CalendarEvent, EventKind, EVENT_LABELS
from ..models import Dog
from .dates import parse_date, add_days, days_between

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeatPrediction:
    """Projected next heat for one dog"""
    dog_id: str
    dog_name: str
    last_heat: _dt.date
    cycle_length: int
    next_expected: _dt.date
    cycles_used: int


def cycle_start_dates(dog: Dog) -> List[_dt.date]:
    """Start dates of the dog's heat cycles, most recent first.

    Cycles without a usable start date are left out.
    """
    starts = [parse_date(hc.startDate) for hc in dog.heatCycles or []]
    return sorted((d for d in starts if d is not None), reverse=True)


def average_cycle_length(start_dates: List[_dt.date], default: int = DEFAULT_CYCLE_LENGTH_DAYS) -> int:
    """Mean interval in days between adjacent cycle starts, rounded half up.

    start_dates must be sorted most recent first. With fewer than two dates
    there is no interval to average and the default is returned.
    """
    if len(start_dates) < 2:
        return default

    intervals = [
        days_between(previous, current)
        for current, previous in zip(start_dates, start_dates[1:])
    ]
    total = sum(intervals)
    count = len(intervals)
    # Integer form of floor(total / count + 0.5)
    return (2 * total + count) // (2 * count)


def predict_heat(dog: Dog, default_cycle_length: Optional[int] = None) -> Optional[HeatPrediction]:
    """Predict the next heat onset for a dog, or None without any usable cycle"""
    if default_cycle_length is None:
        default_cycle_length = DEFAULT_CYCLE_LENGTH_DAYS

    start_dates = cycle_start_dates(dog)
    if not start_dates:
        return None

    last_heat = start_dates[0]
    cycle_length = average_cycle_length(start_dates, default_cycle_length)

    return HeatPrediction(
        dog_id=dog.id,
        dog_name=dog.name or "",
        last_heat=last_heat,
        cycle_length=cycle_length,
        next_expected=add_days(last_heat, cycle_length),
        cycles_used=len(start_dates),
    )


def predict_next_heat(dog: Dog, default_cycle_length: Optional[int] = None) -> Optional[CalendarEvent]:
    """Build the ExpectedHeat event for a dog's predicted next heat.

    The predicted date is not bounded; windowing is left to the caller.
    """
    prediction = predict_heat(dog, default_cycle_length)
    if prediction is None:
        return None

    logger.debug(
        f"Predicted heat for dog {dog.id} on {prediction.next_expected} "
        f"({prediction.cycle_length} day cycle from {prediction.cycles_used} records)"
    )

    return CalendarEvent(
        date=prediction.next_expected,
        kind=EventKind.EXPECTED_HEAT,
        title=EVENT_LABELS[EventKind.EXPECTED_HEAT],
        subject_dog_id=dog.id,
        subject_dog_name=dog.name or "",
        detail=f"~{prediction.cycle_length} day cycle",
    )
