"""
Calendar Events Module

This module contains the canonical event taxonomy of the breeding calendar.
Events are derived from dog, litter and stud job records and never stored.
"""

from .event_types import (
    EventKind,
    CalendarEvent,
    HEAT_CYCLE_EVENTS,
    EVENT_LABELS,
    EVENT_COLORS,
)

__all__ = [
    'EventKind',
    'CalendarEvent',
    'HEAT_CYCLE_EVENTS',
    'EVENT_LABELS',
    'EVENT_COLORS',
]
