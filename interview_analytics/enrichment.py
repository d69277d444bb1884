"""
Enrichment: derive calendar, time-slot and status attributes per record.

The reference date ("today") is always passed in; nothing here reads the
clock, so a run is reproducible for a fixed reference date.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence

from interview_analytics.domain.errors import InvalidDate, InvalidTime
from interview_analytics.domain.models import (
    DAY_NAMES,
    WEEKEND_DAYS,
    EnrichedRecord,
    RawRecord,
    Status,
    TimeSlot,
)

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str, position: Optional[int] = None) -> date:
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDate(value, position) from exc


def parse_hour(value: str, position: Optional[int] = None) -> int:
    """Return the integer before the first colon of a time range like `16:00 - 17:00`."""
    head = value.split(":", 1)[0].strip()
    try:
        hour = int(head)
    except ValueError as exc:
        raise InvalidTime(value, position) from exc
    if not 0 <= hour <= 23:
        raise InvalidTime(value, position)
    return hour


def time_slot_for(hour: int) -> TimeSlot:
    if hour < 12:
        return "Morning"
    if hour < 16:
        return "Afternoon"
    if hour < 20:
        return "Evening"
    return "Night"


def resolve_status(cancelled: bool, interview_date: date, today: date) -> Status:
    """
    Cancelled wins over everything; otherwise interviews strictly before
    `today` are completed and the rest (today included) are upcoming.
    """
    if cancelled:
        return "cancelled"
    return "completed" if interview_date < today else "upcoming"


def enrich_record(raw: RawRecord, today: date, position: Optional[int] = None) -> EnrichedRecord:
    """
    Build the enriched view of one raw record.

    Parameters
    ----------
    raw : RawRecord
        Parsed and validated record.
    today : date
        Reference date for the completed/upcoming split.
    position : int, optional
        1-based record number, only used in error messages.

    Raises
    ------
    InvalidDate
        If `raw.date_text` is not a YYYY-MM-DD date.
    InvalidTime
        If `raw.time_text` does not start with an hour in 0-23.
    """
    interview_date = parse_date(raw.date_text, position)
    hour = parse_hour(raw.time_text, position)
    day_of_week = DAY_NAMES[interview_date.weekday()]

    return EnrichedRecord(
        id=raw.id,
        date_text=raw.date_text,
        time_text=raw.time_text,
        cancelled=raw.cancelled,
        date=interview_date,
        day_of_week=day_of_week,
        is_weekend=day_of_week in WEEKEND_DAYS,
        hour=hour,
        time_slot=time_slot_for(hour),
        status=resolve_status(raw.cancelled, interview_date, today),
    )


def enrich_records(records: Sequence[RawRecord], today: date) -> List[EnrichedRecord]:
    return [enrich_record(raw, today, position) for position, raw in enumerate(records, start=1)]


__all__ = [
    "enrich_record",
    "enrich_records",
    "parse_date",
    "parse_hour",
    "resolve_status",
    "time_slot_for",
]
