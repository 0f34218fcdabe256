"""
Event Derivation Service

Turns one upstream record (a dog's heat cycles, a litter, a stud job) into
zero or more canonical calendar events, including the follow-up checks that
are scheduled after a completed stud breeding.

Every function here is pure: the input records are never modified and
nothing is read or written outside the arguments. A record missing the date
an event needs simply yields no event for it.
"""

import logging
from typing import Dict, List

from ..config import PREGNANCY_CHECK_DAYS, LITTER_SIZE_CHECK_DAYS
from ..events.event_types import CalendarEvent, EventKind, EVENT_LABELS
from ..models import Dog, Litter, StudJob, StudJobBreeding
from .dates import parse_date, add_days

logger = logging.getLogger(__name__)


BREEDING_METHOD_LABELS: Dict[str, str] = {
    'natural': "Natural",
    'ai': "AI",
    'surgical_ai': "Surgical AI",
}

BREEDING_STATUS_SUFFIXES: Dict[str, str] = {
    'completed': " (Done)",
    'scheduled': " (Scheduled)",
    'cancelled': " (Cancelled)",
}

STUD_JOB_STATUS_SUFFIXES: Dict[str, str] = {
    'pending': " (Pending)",
    'confirmed': " (Confirmed)",
}


def _breeding_detail(job: StudJob, breeding: StudJobBreeding) -> str:
    """'<female> - <method>', leaving out whichever part is not recorded"""
    method_label = BREEDING_METHOD_LABELS.get(breeding.method, breeding.method) if breeding.method else None
    return " - ".join(part for part in (job.femaleDogName, method_label) if part)


# =============================================================================
# HEAT CYCLES
# =============================================================================

def events_from_heat_cycles(dog: Dog) -> List[CalendarEvent]:
    """HeatStarted and Breeding events for every recorded heat cycle of a dog"""
    events: List[CalendarEvent] = []

    for hc in dog.heatCycles or []:
        start = parse_date(hc.startDate)
        if start is None:
            logger.debug(f"Skipping heat cycle {hc.id} of dog {dog.id}: no start date")
        else:
            events.append(CalendarEvent(
                date=start,
                kind=EventKind.HEAT_STARTED,
                title=EVENT_LABELS[EventKind.HEAT_STARTED],
                subject_dog_id=dog.id,
                subject_dog_name=dog.name or "",
                detail="Bred" if hc.bred else None,
                heat_cycle_id=hc.id,
                end_date=parse_date(hc.endDate),
            ))

        for raw_date in hc.breedingDates or []:
            breeding_date = parse_date(raw_date)
            if breeding_date is None:
                continue
            events.append(CalendarEvent(
                date=breeding_date,
                kind=EventKind.BREEDING,
                title=EVENT_LABELS[EventKind.BREEDING],
                subject_dog_id=dog.id,
                subject_dog_name=dog.name or "",
                heat_cycle_id=hc.id,
            ))

    return events


# =============================================================================
# LITTERS
# =============================================================================

def events_from_litter(litter: Litter, dam: Dog) -> List[CalendarEvent]:
    """DueDate and PuppiesReady events for a litter, attributed to its dam"""
    events: List[CalendarEvent] = []

    due_date = parse_date(litter.expectedDateOfBirth)
    if litter.status == 'pregnant' and due_date is not None:
        events.append(CalendarEvent(
            date=due_date,
            kind=EventKind.DUE_DATE,
            title=EVENT_LABELS[EventKind.DUE_DATE],
            subject_dog_id=dam.id,
            subject_dog_name=dam.name or "",
            detail=litter.litterName or None,
            status=litter.status,
            litter_id=litter.id,
        ))

    pickup_date = parse_date(litter.pickupReadyDate)
    if pickup_date is not None:
        events.append(CalendarEvent(
            date=pickup_date,
            kind=EventKind.PUPPIES_READY,
            title=EVENT_LABELS[EventKind.PUPPIES_READY],
            subject_dog_id=dam.id,
            subject_dog_name=dam.name or "",
            detail=litter.litterName or None,
            status=litter.status,
            litter_id=litter.id,
        ))

    return events


# =============================================================================
# STUD JOBS
# =============================================================================

def _follow_up_events(job: StudJob, stud: Dog, breeding: StudJobBreeding, breeding_date) -> List[CalendarEvent]:
    """Pregnancy and litter size checks scheduled after a completed breeding"""
    follow_ups = [
        (EventKind.PREGNANCY_CHECK, PREGNANCY_CHECK_DAYS),
        (EventKind.LITTER_SIZE_CHECK, LITTER_SIZE_CHECK_DAYS),
    ]
    return [
        CalendarEvent(
            date=add_days(breeding_date, offset),
            kind=kind,
            title=EVENT_LABELS[kind],
            subject_dog_id=stud.id,
            subject_dog_name=stud.name or "",
            detail=" - ".join(part for part in (job.femaleDogName, f"{offset} days post-breeding") if part),
            status=breeding.status,
            stud_job_id=job.id,
        )
        for kind, offset in follow_ups
    ]


def events_from_stud_job(job: StudJob, stud: Dog) -> List[CalendarEvent]:
    """StudBreeding events (plus follow-ups) or a single legacy StudService event.

    Jobs with breeding sub-records get one event per dated breeding, numbered
    by the breeding's position within the job. Jobs without sub-records fall
    back to their scheduled date.
    """
    events: List[CalendarEvent] = []

    if job.breedings:
        for index, breeding in enumerate(job.breedings, start=1):
            breeding_date = parse_date(breeding.date)
            if breeding_date is None:
                logger.debug(f"Skipping breeding #{index} of stud job {job.id}: no date")
                continue

            suffix = BREEDING_STATUS_SUFFIXES.get(breeding.status or "", "")
            events.append(CalendarEvent(
                date=breeding_date,
                kind=EventKind.STUD_BREEDING,
                title=f"{EVENT_LABELS[EventKind.STUD_BREEDING]} #{index}{suffix}",
                subject_dog_id=stud.id,
                subject_dog_name=stud.name or "",
                detail=_breeding_detail(job, breeding),
                status=breeding.status,
                stud_job_id=job.id,
            ))

            if breeding.status == 'completed':
                events.extend(_follow_up_events(job, stud, breeding, breeding_date))

        return events

    scheduled = parse_date(job.scheduledDate)
    if scheduled is None:
        return events

    suffix = STUD_JOB_STATUS_SUFFIXES.get(job.status or "", "")
    events.append(CalendarEvent(
        date=scheduled,
        kind=EventKind.STUD_SERVICE,
        title=f"{EVENT_LABELS[EventKind.STUD_SERVICE]}{suffix}",
        subject_dog_id=stud.id,
        subject_dog_name=stud.name or "",
        detail=job.femaleDogName or None,
        status=job.status,
        stud_job_id=job.id,
    ))
    return events
