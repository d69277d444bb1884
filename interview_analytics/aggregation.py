"""
Aggregation of enriched interview records into named summary tables.

Each builder reads the full record collection and returns an independent
`AggregateTable`; nothing is cached or mutated. Buckets carry the indices of
their contributing records for drill-down.

Table names are stable and used by the CLI `--drill` option:

- `status`           completed / upcoming / cancelled
- `weekday_weekend`  weekday / weekend
- `day_of_week`      Monday ... Sunday (always 7 buckets)
- `time_slot`        Morning / Afternoon / Evening / Night (always 4 buckets)
- `monthly_trend`    YYYY-MM keys in first-appearance order
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from interview_analytics.domain.errors import NoRecordsFound
from interview_analytics.domain.models import (
    DAY_NAMES,
    STATUSES,
    TIME_SLOTS,
    EnrichedRecord,
)
from interview_analytics.domain.results import AggregateTable, Bucket, Insights

STATUS_TABLE = "status"
WEEKDAY_WEEKEND_TABLE = "weekday_weekend"
DAY_OF_WEEK_TABLE = "day_of_week"
TIME_SLOT_TABLE = "time_slot"
MONTHLY_TREND_TABLE = "monthly_trend"

TABLE_NAMES: Tuple[str, ...] = (
    STATUS_TABLE,
    WEEKDAY_WEEKEND_TABLE,
    DAY_OF_WEEK_TABLE,
    TIME_SLOT_TABLE,
    MONTHLY_TREND_TABLE,
)

# English abbreviations so monthly labels do not depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _percentage(count: int, total: int) -> float:
    return count / total * 100 if total else 0.0


def _require_records(records: Sequence[EnrichedRecord]) -> int:
    if not records:
        raise NoRecordsFound("Cannot aggregate an empty record collection")
    return len(records)


def _table(
    name: str,
    title: str,
    records: Sequence[EnrichedRecord],
    keys: Iterable[Tuple[str, str]],
    key_of: Callable[[EnrichedRecord], str],
) -> AggregateTable:
    """
    Bucket records by `key_of` over a fixed list of (key, label) pairs.

    Keys with no matching record are kept with a zero count.
    """
    total = _require_records(records)
    members: Dict[str, List[int]] = {}
    for index, record in enumerate(records):
        members.setdefault(key_of(record), []).append(index)

    buckets = []
    for key, label in keys:
        indices = members.get(key, [])
        buckets.append(
            Bucket(
                key=key,
                label=label,
                count=len(indices),
                percentage=_percentage(len(indices), total),
                record_indices=tuple(indices),
            )
        )
    return AggregateTable(name=name, title=title, total=total, buckets=tuple(buckets))


def status_counts(records: Sequence[EnrichedRecord]) -> AggregateTable:
    return _table(
        STATUS_TABLE,
        "Interview Status",
        records,
        [(status, status.capitalize()) for status in STATUSES],
        lambda r: r.status,
    )


def weekday_weekend_split(records: Sequence[EnrichedRecord]) -> AggregateTable:
    return _table(
        WEEKDAY_WEEKEND_TABLE,
        "Weekdays vs Weekends",
        records,
        [("weekday", "Weekdays"), ("weekend", "Weekends")],
        lambda r: "weekend" if r.is_weekend else "weekday",
    )


def day_of_week_histogram(records: Sequence[EnrichedRecord]) -> AggregateTable:
    return _table(
        DAY_OF_WEEK_TABLE,
        "Day of Week Distribution",
        records,
        [(day, day[:3]) for day in DAY_NAMES],
        lambda r: r.day_of_week,
    )


def time_slot_histogram(records: Sequence[EnrichedRecord]) -> AggregateTable:
    return _table(
        TIME_SLOT_TABLE,
        "Time Slot Distribution",
        records,
        [(slot, slot) for slot in TIME_SLOTS],
        lambda r: r.time_slot,
    )


def month_label(month_key: str) -> str:
    """`2025-07` -> `Jul 2025`."""
    year, month = month_key.split("-")
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {year}"


def monthly_trend(records: Sequence[EnrichedRecord]) -> AggregateTable:
    """
    Count records per calendar month.

    Months appear in the order they are first seen in the input, not in
    chronological order.
    """
    seen: Dict[str, None] = {}
    for record in records:
        seen.setdefault(record.month_key, None)
    return _table(
        MONTHLY_TREND_TABLE,
        "Monthly Interview Trend",
        records,
        [(key, month_label(key)) for key in seen],
        lambda r: r.month_key,
    )


def build_tables(records: Sequence[EnrichedRecord]) -> Dict[str, AggregateTable]:
    """Compute every aggregate table, keyed by its stable name."""
    _require_records(records)
    tables = (
        status_counts(records),
        weekday_weekend_split(records),
        day_of_week_histogram(records),
        time_slot_histogram(records),
        monthly_trend(records),
    )
    return {table.name: table for table in tables}


def top_bucket(table: AggregateTable) -> Optional[Bucket]:
    """
    Bucket with the highest count; ties go to the earliest bucket in table
    order. Returns None for a table without buckets.
    """
    best: Optional[Bucket] = None
    for bucket in table.buckets:
        if best is None or bucket.count > best.count:
            best = bucket
    return best


def build_insights(
    records: Sequence[EnrichedRecord],
    tables: Optional[Dict[str, AggregateTable]] = None,
) -> Insights:
    """
    Derive the headline facts (rates, preferred slot, busiest day, span).

    `tables` may be passed to reuse tables already built from the same records.
    """
    total = _require_records(records)
    tables = tables if tables is not None else build_tables(records)

    status = tables[STATUS_TABLE].counts()
    weekend_count = tables[WEEKDAY_WEEKEND_TABLE].bucket("weekend").count
    slot = top_bucket(tables[TIME_SLOT_TABLE])
    day = top_bucket(tables[DAY_OF_WEEK_TABLE])
    months = len(tables[MONTHLY_TREND_TABLE].buckets)
    if slot is None or day is None:
        raise NoRecordsFound("Cannot derive insights without time-slot and day buckets")

    return Insights(
        total=total,
        completed_count=status["completed"],
        completion_rate=_percentage(status["completed"], total),
        preferred_time_slot=slot.key,
        preferred_time_slot_count=slot.count,
        preferred_time_slot_percentage=slot.percentage,
        weekend_count=weekend_count,
        weekend_rate=_percentage(weekend_count, total),
        cancelled_count=status["cancelled"],
        cancellation_rate=_percentage(status["cancelled"], total),
        no_cancellations=status["cancelled"] == 0,
        busiest_day=day.key,
        busiest_day_count=day.count,
        activity_span_months=months if months >= 2 else None,
    )


__all__ = [
    "DAY_OF_WEEK_TABLE",
    "MONTHLY_TREND_TABLE",
    "STATUS_TABLE",
    "TABLE_NAMES",
    "TIME_SLOT_TABLE",
    "WEEKDAY_WEEKEND_TABLE",
    "build_insights",
    "build_tables",
    "day_of_week_histogram",
    "month_label",
    "monthly_trend",
    "status_counts",
    "time_slot_histogram",
    "top_bucket",
    "weekday_weekend_split",
]
