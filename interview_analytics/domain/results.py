"""
Result containers produced by the aggregation step.

Every `Bucket` keeps the positions of the records that contributed to it, so
a consumer can ask for "the records behind this bucket" without re-running
any classification logic.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from interview_analytics.domain.models import DayName, EnrichedRecord, Status, TimeSlot


class Bucket(BaseModel):
    """One row of an aggregate table."""

    key: str
    label: str
    count: int = Field(..., ge=0)
    percentage: float = Field(..., description="Exact count / total * 100; rounded only for display.")
    record_indices: Tuple[int, ...] = Field(default=())

    model_config = {"frozen": True}


class AggregateTable(BaseModel):
    """A named, ordered set of buckets computed over the full record collection."""

    name: str
    title: str
    total: int
    buckets: Tuple[Bucket, ...]

    model_config = {"frozen": True}

    def keys(self) -> List[str]:
        return [b.key for b in self.buckets]

    def counts(self) -> Dict[str, int]:
        return {b.key: b.count for b in self.buckets}

    def bucket(self, key: str) -> Bucket:
        for candidate in self.buckets:
            if candidate.key == key:
                return candidate
        raise KeyError(f"Unknown bucket '{key}' in table '{self.name}'. Available: {', '.join(self.keys())}")


class Highlight(BaseModel):
    """A human-readable insight line."""

    key: str
    title: str
    message: str

    model_config = {"frozen": True}


class Insights(BaseModel):
    """
    Derived facts over the record collection.

    Rates are percentages (0-100) kept at full precision.
    """

    total: int
    completed_count: int
    completion_rate: float
    preferred_time_slot: TimeSlot
    preferred_time_slot_count: int
    preferred_time_slot_percentage: float
    weekend_count: int
    weekend_rate: float
    cancelled_count: int
    cancellation_rate: float
    no_cancellations: bool
    busiest_day: DayName
    busiest_day_count: int
    activity_span_months: Optional[int] = Field(
        None, description="Distinct months with activity; only set when at least two."
    )

    model_config = {"frozen": True}

    def highlights(self) -> List[Highlight]:
        """
        Render the facts worth showing, in dashboard order.

        Completion and weekend lines are omitted when their count is zero and
        the activity span only appears once it covers two or more months.
        """
        lines: List[Highlight] = []
        if self.completed_count > 0:
            lines.append(
                Highlight(
                    key="completion_rate",
                    title="Completion Rate",
                    message=f"{self.completion_rate:.1f}% of interviews completed successfully",
                )
            )
        if self.preferred_time_slot_count > 0:
            lines.append(
                Highlight(
                    key="time_preference",
                    title="Time Preference",
                    message=(
                        f"{self.preferred_time_slot} slots are most preferred "
                        f"({self.preferred_time_slot_percentage:.1f}%)"
                    ),
                )
            )
        if self.weekend_count > 0:
            lines.append(
                Highlight(
                    key="weekend_activity",
                    title="Weekend Activity",
                    message=f"{self.weekend_rate:.1f}% of interviews happen on weekends",
                )
            )
        if self.no_cancellations:
            cancellation = "No cancellations"
        else:
            cancellation = (
                f"{self.cancellation_rate:.1f}% cancellation rate "
                f"({self.cancelled_count} out of {self.total})"
            )
        lines.append(Highlight(key="cancellation_rate", title="Cancellation Rate", message=cancellation))
        if self.busiest_day_count > 0:
            lines.append(
                Highlight(
                    key="busiest_day",
                    title="Busiest Day",
                    message=f"{self.busiest_day} with {self.busiest_day_count} interviews",
                )
            )
        if self.activity_span_months is not None:
            lines.append(
                Highlight(
                    key="activity_span",
                    title="Activity Span",
                    message=f"{self.activity_span_months} months of interview activity tracked",
                )
            )
        return lines


class AnalysisResult(BaseModel):
    """
    Everything one pipeline run produces: the enriched records, the named
    aggregate tables and the derived insights.
    """

    reference_date: dt.date
    records: Tuple[EnrichedRecord, ...]
    tables: Dict[str, AggregateTable]
    insights: Insights

    model_config = {"frozen": True}

    @property
    def total(self) -> int:
        return len(self.records)

    def table(self, name: str) -> AggregateTable:
        try:
            return self.tables[name]
        except KeyError:
            raise KeyError(
                f"Unknown table '{name}'. Available: {', '.join(self.tables)}"
            ) from None

    def drill_down(self, table_name: str, bucket_key: str) -> Tuple[EnrichedRecord, ...]:
        """Return the records that contributed to one bucket, in input order."""
        bucket = self.table(table_name).bucket(bucket_key)
        return tuple(self.records[i] for i in bucket.record_indices)

    def records_with_status(self, status: Status) -> Tuple[EnrichedRecord, ...]:
        return tuple(r for r in self.records if r.status == status)

    def upcoming(self) -> Tuple[EnrichedRecord, ...]:
        return self.records_with_status("upcoming")

    def next_upcoming(self) -> Optional[EnrichedRecord]:
        upcoming = self.upcoming()
        return upcoming[0] if upcoming else None


__all__ = [
    "AggregateTable",
    "AnalysisResult",
    "Bucket",
    "Highlight",
    "Insights",
]
