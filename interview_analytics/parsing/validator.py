"""
Required-field validation for parsed interview records.
"""

from __future__ import annotations

from typing import List, Sequence

from interview_analytics.domain.errors import MissingRequiredField, NoRecordsFound
from interview_analytics.domain.models import RawRecord

# Record attribute -> label used in the input format.
REQUIRED_FIELDS = (
    ("id", "Candidate ID"),
    ("date_text", "Date"),
    ("time_text", "Time"),
)


def validate_records(records: Sequence[RawRecord]) -> List[RawRecord]:
    """
    Check that there is at least one record and every record has an ID, a
    date and a time. The cancellation flag does not exempt a record.

    Returns the records unchanged as a list; raises on the first offending
    record (1-based position).
    """
    if not records:
        raise NoRecordsFound()

    for position, record in enumerate(records, start=1):
        missing = [label for attr, label in REQUIRED_FIELDS if not getattr(record, attr).strip()]
        if missing:
            raise MissingRequiredField(position, missing)

    return list(records)


__all__ = ["REQUIRED_FIELDS", "validate_records"]
