"""
Calendar Routes

API endpoints for the breeding calendar. The caller posts the current dog,
litter and stud job snapshots; events are derived on every request and
nothing is stored.
"""

import datetime as _dt
from fastapi import APIRouter, HTTPException, Query, Response
from typing import Dict, List

from ..config import LOOKAHEAD_DAYS, DAY_EVENT_DISPLAY_LIMIT
from ..events.event_types import CalendarEvent
from ..models import CalendarSnapshotBody, EventActionsBody, EventBody
from ..services.dates import parse_date, require_date
from ..services.event_actions import resolve_actions
from ..services.ical_export import build_ical
from ..services.timeline import (
    derive_events,
    group_by_day,
    query_day,
    query_lookahead,
    query_range,
    relevant_predictions,
)

router = APIRouter(prefix="/calendar", tags=["calendar"])


def parse_query_date(value: str | None, field_name: str) -> _dt.date:
    """Parse a date query parameter, defaulting to today when omitted"""
    if value is None:
        return _dt.date.today()
    try:
        return require_date(value, field_name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _derive(body: CalendarSnapshotBody) -> List[CalendarEvent]:
    return derive_events(body.dogs or [], body.litters or [], body.studJobs or [])


def _event_from_body(body: EventBody) -> CalendarEvent:
    try:
        event_date = require_date(body.date, "date")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CalendarEvent(
        date=event_date,
        kind=body.kind,
        title=body.title,
        subject_dog_id=body.subjectDogId,
        subject_dog_name=body.subjectDogName,
        detail=body.detail,
        status=body.status,
        litter_id=body.litterId,
        stud_job_id=body.studJobId,
        heat_cycle_id=body.heatCycleId,
        end_date=parse_date(body.endDate),
    )


def _events_response(events: List[CalendarEvent]) -> Dict:
    return {"count": len(events), "events": [e.to_dict() for e in events]}


@router.post("/events")
def list_calendar_events(body: CalendarSnapshotBody):
    """
    Get every derived and predicted event, ordered by date.
    """
    events = _derive(body)
    return _events_response(sorted(events, key=lambda e: e.date))


@router.post("/range")
def get_events_in_range(
    body: CalendarSnapshotBody,
    start: str = Query(..., description="First day of the range (YYYY-MM-DD)"),
    end: str = Query(..., description="Last day of the range, inclusive (YYYY-MM-DD)"),
):
    """
    Get events dated between start and end inclusive, ordered by date.

    Used by the month and year calendar views.
    """
    start_date = parse_query_date(start, "start")
    end_date = parse_query_date(end, "end")
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start must not be after end")

    events = query_range(_derive(body), start_date, end_date)
    return {
        "start": start_date.isoformat(),
        "end": end_date.isoformat(),
        **_events_response(events),
    }


@router.post("/upcoming")
def get_upcoming_events(
    body: CalendarSnapshotBody,
    today: str | None = Query(None, description="Reference day (defaults to the server's date)"),
    days: int = Query(LOOKAHEAD_DAYS, ge=0, le=365, description="Number of days to look ahead"),
):
    """
    Get events from today through the next `days` days, ordered by date.

    `predictions` lists the expected heats near today regardless of `days`,
    so an overdue heat is still shown.
    """
    today_date = parse_query_date(today, "today")
    all_events = _derive(body)
    try:
        events = query_lookahead(all_events, today_date, days)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "today": today_date.isoformat(),
        "days": days,
        **_events_response(events),
        "predictions": [e.to_dict() for e in relevant_predictions(all_events, today_date)],
    }


@router.post("/day")
def get_day_events(
    body: CalendarSnapshotBody,
    day: str = Query(..., description="Day to look up (YYYY-MM-DD)"),
    limit: int = Query(DAY_EVENT_DISPLAY_LIMIT, ge=1, le=100, description="Maximum events to return"),
):
    """
    Get the events of a single day.

    At most `limit` events are returned; `overflow` counts the rest.
    """
    day_date = parse_query_date(day, "day")
    groups = group_by_day(query_day(_derive(body), day_date), limit)
    shown = groups[0].events if groups else []
    overflow = groups[0].overflow if groups else 0

    return {
        "day": day_date.isoformat(),
        "total": len(shown) + overflow,
        "overflow": overflow,
        **_events_response(shown),
    }


@router.post("/actions")
def get_event_actions(body: EventActionsBody):
    """
    Get the navigation actions available for a selected event.
    """
    actions = resolve_actions(_event_from_body(body.event))
    return {
        "count": len(actions),
        "actions": [a.to_dict() for a in actions],
    }


@router.post("/export.ics")
def export_calendar(body: CalendarSnapshotBody):
    """
    Export every event as an iCalendar file.
    """
    events = sorted(_derive(body), key=lambda e: e.date)
    ical = build_ical(events)
    filename = f"breeding-calendar-{_dt.date.today().isoformat()}.ics"
    return Response(
        content=ical,
        media_type="text/calendar",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
