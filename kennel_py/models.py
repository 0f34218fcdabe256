from pydantic import BaseModel
from typing import Optional, List

from .events.event_types import EventKind


# =============================================================================
# UPSTREAM RECORDS (read-only snapshots supplied by the caller)
# =============================================================================
# Dates are kept as the strings the document store holds; services.dates
# normalizes them. A record whose relevant date is missing or unparseable
# contributes no event. Any field but id may arrive as null; services read a
# null list as empty and a null name as blank.

class HeatCycle(BaseModel):
    id: str | None = None
    startDate: str | None = None
    endDate: str | None = None
    bred: bool | None = False
    breedingDates: List[str | None] | None = None

    class Config:
        extra = "ignore"


class Dog(BaseModel):
    id: str
    name: str | None = ""
    sex: str | None = None
    heatCycles: List[HeatCycle] | None = []
    isDeceased: bool | None = False
    breedingStatus: str | None = None

    class Config:
        extra = "ignore"


class Litter(BaseModel):
    id: str
    litterName: str | None = None
    damId: str | None = None
    sireId: str | None = None
    status: str | None = None
    expectedDateOfBirth: str | None = None
    pickupReadyDate: str | None = None

    class Config:
        extra = "ignore"


class StudJobBreeding(BaseModel):
    id: str | None = None
    date: str | None = None
    method: str | None = None
    status: str | None = None

    class Config:
        extra = "ignore"


class StudJob(BaseModel):
    id: str
    studId: str | None = None
    femaleDogName: str | None = ""
    status: str | None = None
    scheduledDate: str | None = None
    breedings: List[StudJobBreeding] | None = []

    class Config:
        extra = "ignore"


# =============================================================================
# REQUEST BODIES
# =============================================================================

class CalendarSnapshotBody(BaseModel):
    dogs: List[Dog] | None = []
    litters: List[Litter] | None = []
    studJobs: List[StudJob] | None = []


class EventBody(BaseModel):
    date: str
    kind: EventKind
    title: str
    subjectDogId: str
    subjectDogName: str = ""
    detail: str | None = None
    status: str | None = None
    litterId: str | None = None
    studJobId: str | None = None
    heatCycleId: str | None = None
    endDate: str | None = None

    class Config:
        extra = "ignore"


class EventActionsBody(BaseModel):
    event: EventBody

