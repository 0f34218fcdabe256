"""
iCalendar Export Service

Renders calendar events as an RFC 5545 calendar for Google / Apple Calendar
subscriptions. Every event is an all-day entry; heat cycles span until their
recorded end date, or HEAT_CYCLE_DEFAULT_LENGTH_DAYS when none is recorded.
"""

import io
import logging
import datetime as _dt
from typing import Dict, List, Optional

from ..config import HEAT_CYCLE_DEFAULT_LENGTH_DAYS
from ..events.event_types import CalendarEvent, EventKind
from .dates import add_days

logger = logging.getLogger(__name__)

PRODID = "-//Kennel Calendar//Breeding Calendar Export//EN"
CALENDAR_NAME = "Breeding Calendar"
CRLF = "\r\n"
MAX_LINE_OCTETS = 75


def escape_text(text: str) -> str:
    """Escape a TEXT value (backslash, semicolon, comma, newline)"""
    return (
        text.replace('\\', '\\\\')
        .replace(';', '\\;')
        .replace(',', '\\,')
        .replace('\r\n', '\\n')
        .replace('\n', '\\n')
    )


def _format_date(day: _dt.date) -> str:
    return day.strftime("%Y%m%d")


def _format_timestamp(moment: _dt.datetime) -> str:
    return moment.strftime("%Y%m%dT%H%M%SZ")


def _event_end(event: CalendarEvent) -> _dt.date:
    """Exclusive DTEND for an all-day event"""
    if event.kind == EventKind.HEAT_STARTED:
        if event.end_date is not None and event.end_date >= event.date:
            return add_days(event.end_date, 1)
        return add_days(event.date, HEAT_CYCLE_DEFAULT_LENGTH_DAYS)
    return add_days(event.date, 1)


def _event_uid(event: CalendarEvent) -> str:
    """UID built from the event's own identity, not its position in the export"""
    parts = [event.kind.value, event.subject_dog_id]
    source_id = event.heat_cycle_id or event.litter_id or event.stud_job_id
    if source_id:
        parts.append(source_id)
    parts.append(_format_date(event.date))
    return "-".join(parts)


def fold_line(line: str) -> str:
    """Fold a content line at 75 octets; continuation lines start with a space"""
    if len(line.encode("utf-8")) <= MAX_LINE_OCTETS:
        return line

    chunks = []
    current = ""
    current_octets = 0
    for char in line:
        char_octets = len(char.encode("utf-8"))
        if current_octets + char_octets > MAX_LINE_OCTETS:
            chunks.append(current)
            current = " "
            current_octets = 1
        current += char
        current_octets += char_octets
    chunks.append(current)
    return CRLF.join(chunks)


def build_ical(events: List[CalendarEvent], generated_at: Optional[_dt.datetime] = None) -> str:
    """Render events as a VCALENDAR document.

    UIDs are built from the event's kind, dog, source record and date, so an
    event keeps its UID across exports. Identical events get a numeric suffix
    in list order.
    """
    if generated_at is None:
        generated_at = _dt.datetime.now(_dt.timezone.utc)
    stamp = _format_timestamp(generated_at)

    buf = io.StringIO()

    def write(line: str) -> None:
        buf.write(fold_line(line) + CRLF)

    write("BEGIN:VCALENDAR")
    write("VERSION:2.0")
    write(f"PRODID:{PRODID}")
    write("CALSCALE:GREGORIAN")
    write("METHOD:PUBLISH")
    write(f"X-WR-CALNAME:{CALENDAR_NAME}")

    seen_uids: Dict[str, int] = {}
    for event in events:
        uid = _event_uid(event)
        seen_uids[uid] = seen_uids.get(uid, 0) + 1
        if seen_uids[uid] > 1:
            uid = f"{uid}-{seen_uids[uid]}"

        summary = f"{event.subject_dog_name} - {event.title}" if event.subject_dog_name else event.title
        write("BEGIN:VEVENT")
        write(f"UID:{uid}@kennel")
        write(f"DTSTAMP:{stamp}")
        write(f"DTSTART;VALUE=DATE:{_format_date(event.date)}")
        write(f"DTEND;VALUE=DATE:{_format_date(_event_end(event))}")
        write(f"SUMMARY:{escape_text(summary)}")
        write(f"DESCRIPTION:{escape_text(event.detail or event.title)}")
        write(f"CATEGORIES:{event.kind.value}")
        write("END:VEVENT")

    write("END:VCALENDAR")

    logger.info(f"Exported {len(events)} events to iCalendar")
    return buf.getvalue()
