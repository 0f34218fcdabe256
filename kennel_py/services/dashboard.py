"""
Dashboard Service
Upcoming heat and litter summaries shown on the kennel dashboard
"""

import logging
import datetime as _dt
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config import DASHBOARD_LIST_LIMIT
from ..models import Dog, Litter
from .dates import parse_date, days_between
from .heat_prediction import predict_heat
from .timeline import in_prediction_window

logger = logging.getLogger(__name__)

UPCOMING_LITTER_STATUSES = ('planned', 'pregnant')


@dataclass
class UpcomingHeat:
    dog_id: str
    dog_name: str
    last_heat: _dt.date
    next_expected: _dt.date
    cycle_length: int
    days_until: int

    def to_dict(self) -> Dict:
        return {
            'dogId': self.dog_id,
            'dogName': self.dog_name,
            'lastHeat': self.last_heat.isoformat(),
            'nextExpected': self.next_expected.isoformat(),
            'cycleLength': self.cycle_length,
            'daysUntil': self.days_until,
        }


@dataclass
class UpcomingLitter:
    litter_id: str
    litter_name: Optional[str]
    dam_name: Optional[str]
    sire_name: Optional[str]
    expected_date: _dt.date
    days_until: int

    def to_dict(self) -> Dict:
        return {
            'litterId': self.litter_id,
            'litterName': self.litter_name,
            'damName': self.dam_name,
            'sireName': self.sire_name,
            'expectedDate': self.expected_date.isoformat(),
            'daysUntil': self.days_until,
        }


def _is_breeding_female(dog: Dog) -> bool:
    return dog.sex == 'female' and not dog.isDeceased and dog.breedingStatus != 'retired'


def upcoming_heats(
    dogs: List[Dog],
    today: _dt.date,
    limit: int = DASHBOARD_LIST_LIMIT,
    default_cycle_length: Optional[int] = None,
) -> List[UpcomingHeat]:
    """Predicted heats of active breeding females, soonest first.

    A prediction is listed when it falls between PREDICTION_WINDOW_PAST_DAYS
    ago and PREDICTION_WINDOW_FUTURE_DAYS ahead; overdue heats stay visible
    for a while so they can be recorded.
    """
    results: List[UpcomingHeat] = []

    for dog in dogs:
        if not _is_breeding_female(dog):
            continue

        prediction = predict_heat(dog, default_cycle_length)
        if prediction is None:
            continue

        if not in_prediction_window(prediction.next_expected, today):
            continue

        results.append(UpcomingHeat(
            dog_id=dog.id,
            dog_name=dog.name or "",
            last_heat=prediction.last_heat,
            next_expected=prediction.next_expected,
            cycle_length=prediction.cycle_length,
            days_until=days_between(today, prediction.next_expected),
        ))

    results.sort(key=lambda h: h.days_until)
    return results[:limit]


def upcoming_litters(
    litters: List[Litter],
    dogs: List[Dog],
    today: _dt.date,
    limit: int = DASHBOARD_LIST_LIMIT,
) -> List[UpcomingLitter]:
    """Planned or pregnant litters with an expected birth date, soonest first"""
    dogs_by_id: Dict[str, Dog] = {dog.id: dog for dog in dogs}
    results: List[UpcomingLitter] = []

    for litter in litters:
        if litter.status not in UPCOMING_LITTER_STATUSES:
            continue

        expected = parse_date(litter.expectedDateOfBirth)
        if expected is None:
            continue

        dam = dogs_by_id.get(litter.damId) if litter.damId else None
        sire = dogs_by_id.get(litter.sireId) if litter.sireId else None
        results.append(UpcomingLitter(
            litter_id=litter.id,
            litter_name=litter.litterName,
            dam_name=dam.name if dam else None,
            sire_name=sire.name if sire else None,
            expected_date=expected,
            days_until=days_between(today, expected),
        ))

    results.sort(key=lambda l: l.days_until)
    logger.debug(f"{len(results)} upcoming litters, returning {min(len(results), limit)}")
    return results[:limit]
