"""
Calendar Event Type Definitions

This module defines the canonical event taxonomy of the breeding calendar.
Every event shown on the calendar, the dashboard or in an export is one of
these kinds, whatever upstream record (dog, litter, stud job) it came from.

Key principles:
- The set of kinds is closed - a derivation rule may only emit a kind listed here
- Events are derived, never stored - they are recomputed from upstream records on every read
- Events are immutable once built
"""

from enum import Enum
from typing import Dict, List, Optional, Any
from dataclasses import dataclass
import datetime as _dt


class EventKind(str, Enum):
    """
    Canonical calendar event kinds.

    Values are the names exposed to API clients.
    """

    # ==========================================================================
    # HEAT CYCLE EVENTS (female dogs)
    # ==========================================================================

    HEAT_STARTED = "HeatStarted"
    EXPECTED_HEAT = "ExpectedHeat"  # Predicted, see services.heat_prediction
    BREEDING = "Breeding"

    # ==========================================================================
    # LITTER EVENTS
    # ==========================================================================

    DUE_DATE = "DueDate"
    PUPPIES_READY = "PuppiesReady"

    # ==========================================================================
    # STUD JOB EVENTS (male dogs)
    # ==========================================================================

    STUD_SERVICE = "StudService"  # Legacy jobs without breeding sub-records
    STUD_BREEDING = "StudBreeding"

    # Follow-ups derived from completed breedings
    PREGNANCY_CHECK = "PregnancyCheck"
    LITTER_SIZE_CHECK = "LitterSizeCheck"


# Kinds that belong to a heat cycle (offer the heat cycle view)
HEAT_CYCLE_EVENTS: List[EventKind] = [
    EventKind.HEAT_STARTED,
    EventKind.EXPECTED_HEAT,
    EventKind.BREEDING,
]


# =============================================================================
# DISPLAY METADATA
# =============================================================================

EVENT_LABELS: Dict[EventKind, str] = {
    EventKind.HEAT_STARTED: "Heat Started",
    EventKind.EXPECTED_HEAT: "Expected Heat",
    EventKind.BREEDING: "Breeding",
    EventKind.DUE_DATE: "Expected Due Date",
    EventKind.PUPPIES_READY: "Puppies Ready",
    EventKind.STUD_SERVICE: "Stud Service",
    EventKind.STUD_BREEDING: "Stud Breeding",
    EventKind.PREGNANCY_CHECK: "Pregnancy Check",
    EventKind.LITTER_SIZE_CHECK: "Litter Size Check",
}

EVENT_COLORS: Dict[EventKind, str] = {
    EventKind.HEAT_STARTED: "pink-500",
    EventKind.EXPECTED_HEAT: "pink-300",
    EventKind.BREEDING: "purple-500",
    EventKind.DUE_DATE: "blue-500",
    EventKind.PUPPIES_READY: "green-500",
    EventKind.STUD_SERVICE: "amber-500",
    EventKind.STUD_BREEDING: "amber-600",
    EventKind.PREGNANCY_CHECK: "indigo-500",
    EventKind.LITTER_SIZE_CHECK: "cyan-500",
}


@dataclass(frozen=True)
class CalendarEvent:
    """
    A single canonical calendar event.

    The back-references (litter_id, stud_job_id, heat_cycle_id) are what
    decides which follow-up actions are offered for the event, not the kind.
    """
    # Required fields
    date: _dt.date
    kind: EventKind
    title: str
    subject_dog_id: str
    subject_dog_name: str

    # Context
    detail: Optional[str] = None
    status: Optional[str] = None

    # Back-references
    litter_id: Optional[str] = None
    stud_job_id: Optional[str] = None
    heat_cycle_id: Optional[str] = None

    # Last day of a heat cycle (exports only)
    end_date: Optional[_dt.date] = None

    @property
    def color(self) -> str:
        return EVENT_COLORS[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            'date': self.date.isoformat(),
            'kind': self.kind.value,
            'title': self.title,
            'subjectDogId': self.subject_dog_id,
            'subjectDogName': self.subject_dog_name,
            'detail': self.detail,
            'status': self.status,
            'litterId': self.litter_id,
            'studJobId': self.stud_job_id,
            'heatCycleId': self.heat_cycle_id,
            'endDate': self.end_date.isoformat() if self.end_date else None,
            'color': self.color,
        }
