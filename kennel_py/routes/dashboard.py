"""
Dashboard Routes

Upcoming heats and litters for the kennel dashboard, computed from the
posted snapshots.
"""

from fastapi import APIRouter, Query

from ..config import DASHBOARD_LIST_LIMIT
from ..models import CalendarSnapshotBody
from ..services.dashboard import upcoming_heats, upcoming_litters
from .calendar import parse_query_date

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.post("/upcoming-heats")
def get_upcoming_heats(
    body: CalendarSnapshotBody,
    today: str | None = Query(None, description="Reference day (defaults to the server's date)"),
    limit: int = Query(DASHBOARD_LIST_LIMIT, ge=1, le=50, description="Maximum dogs to return"),
):
    """
    Get predicted heats of active breeding females, soonest first.

    Overdue predictions remain listed for a while so they can be recorded.
    """
    today_date = parse_query_date(today, "today")
    heats = upcoming_heats(body.dogs or [], today_date, limit)
    return {
        "today": today_date.isoformat(),
        "count": len(heats),
        "heats": [h.to_dict() for h in heats],
    }


@router.post("/upcoming-litters")
def get_upcoming_litters(
    body: CalendarSnapshotBody,
    today: str | None = Query(None, description="Reference day (defaults to the server's date)"),
    limit: int = Query(DASHBOARD_LIST_LIMIT, ge=1, le=50, description="Maximum litters to return"),
):
    """
    Get planned and pregnant litters with an expected birth date, soonest first.
    """
    today_date = parse_query_date(today, "today")
    litters = upcoming_litters(body.litters or [], body.dogs or [], today_date, limit)
    return {
        "today": today_date.isoformat(),
        "count": len(litters),
        "litters": [l.to_dict() for l in litters],
    }
