from dataclasses import dataclass
from typing import Dict, List

from ..events.event_types import CalendarEvent, HEAT_CYCLE_EVENTS

VIEW_DOG = "view_dog"
VIEW_STUD_JOB = "view_stud_job"
VIEW_LITTER = "view_litter"
VIEW_HEAT_CYCLES = "view_heat_cycles"


@dataclass(frozen=True)
class EventAction:
    """A navigation offered for a selected calendar event"""
    action: str
    label: str
    target_id: str

    def to_dict(self) -> Dict:
        return {"action": self.action, "label": self.label, "targetId": self.target_id}


def resolve_actions(event: CalendarEvent) -> List[EventAction]:
    """List the follow-up actions for an event.

    The subject dog is always offered; the stud job and litter only when the
    event carries a reference to them, heat cycles for heat-related kinds.
    """
    dog_name = event.subject_dog_name or "Dog"
    actions = [EventAction(VIEW_DOG, f"View {dog_name}", event.subject_dog_id)]

    if event.stud_job_id:
        actions.append(EventAction(VIEW_STUD_JOB, "View Stud Job", event.stud_job_id))

    if event.litter_id:
        actions.append(EventAction(VIEW_LITTER, "View Litter", event.litter_id))

    if event.kind in HEAT_CYCLE_EVENTS:
        actions.append(EventAction(VIEW_HEAT_CYCLES, "View Heat Cycles", event.subject_dog_id))

    return actions
