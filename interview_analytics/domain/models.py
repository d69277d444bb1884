"""
Domain models for Interview Analytics.

`RawRecord` is what the parser extracts from one `Candidate ID:` block;
`EnrichedRecord` adds the calendar and classification attributes derived by
the enricher. Both are frozen so downstream aggregation can only read them.
"""
from __future__ import annotations

import datetime as dt
from typing import Literal, Tuple

from pydantic import BaseModel, Field

Status = Literal["completed", "upcoming", "cancelled"]
TimeSlot = Literal["Morning", "Afternoon", "Evening", "Night"]
DayName = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

# Fixed category orders; histograms and tie-breaks follow them.
STATUSES: Tuple[Status, ...] = ("completed", "upcoming", "cancelled")
TIME_SLOTS: Tuple[TimeSlot, ...] = ("Morning", "Afternoon", "Evening", "Night")
DAY_NAMES: Tuple[DayName, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKEND_DAYS = frozenset({"Saturday", "Sunday"})


class RawRecord(BaseModel):
    """
    One interview block as it appeared in the input text.
    """

    id: str = Field("", description="Candidate identifier.")
    date_text: str = Field("", description="Date text, expected as YYYY-MM-DD.")
    time_text: str = Field("", description="Time range text with the IST marker removed.")
    cancelled: bool = Field(False, description="Whether a cancellation marker was seen.")

    model_config = {
        "frozen": True,
    }


class EnrichedRecord(RawRecord):
    """
    A raw record plus derived calendar, time-slot and status attributes.
    """

    date: dt.date = Field(..., description="Parsed interview date.")
    day_of_week: DayName = Field(..., description="Full English weekday name.")
    is_weekend: bool = Field(..., description="True on Saturday and Sunday.")
    hour: int = Field(..., ge=0, le=23, description="Start hour (0-23).")
    time_slot: TimeSlot = Field(..., description="Hour bucket of the start time.")
    status: Status = Field(..., description="Resolved status relative to the reference date.")

    @property
    def month_key(self) -> str:
        """Stable `YYYY-MM` key of the interview month."""
        return f"{self.date.year:04d}-{self.date.month:02d}"


__all__ = [
    "DAY_NAMES",
    "STATUSES",
    "TIME_SLOTS",
    "WEEKEND_DAYS",
    "DayName",
    "EnrichedRecord",
    "RawRecord",
    "Status",
    "TimeSlot",
]
