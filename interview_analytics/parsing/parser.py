"""
Line-oriented parser for pasted interview schedules.

Expected layout, repeated per interview:

    Candidate ID: C14954072
    Date: 2025-05-21
    Time:   16:00 - 17:00  IST
    Cancelled

Rules:
- `Candidate ID:` closes the record under construction (if any) and opens a
  new one.
- `Date:` and `Time:` fill fields of the record under construction.
- Any line containing "cancel" (any case) marks the record under construction
  as cancelled; it never opens or closes a record.
- Everything else is ignored.

The parser only extracts text. Date and time formats are checked by the
enricher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from interview_analytics.domain.errors import NoRecordsFound
from interview_analytics.domain.models import RawRecord

ID_LABEL = "Candidate ID:"
DATE_LABEL = "Date:"
TIME_LABEL = "Time:"
CANCEL_MARKER = "cancel"
TIMEZONE_MARKER = "IST"


@dataclass
class _Draft:
    """Mutable accumulator for the record under construction."""

    id: str
    date_text: str = ""
    time_text: str = ""
    cancelled: bool = False

    def build(self) -> RawRecord:
        return RawRecord(
            id=self.id,
            date_text=self.date_text,
            time_text=self.time_text,
            cancelled=self.cancelled,
        )


def _after_first_colon(line: str) -> str:
    return line.split(":", 1)[1].strip()


def parse_records(text: str) -> List[RawRecord]:
    """
    Split raw text into interview records.

    Parameters
    ----------
    text : str
        The pasted schedule. Leading/trailing blank lines are ignored.

    Returns
    -------
    List[RawRecord]
        Records in input order.

    Raises
    ------
    NoRecordsFound
        If no `Candidate ID:` line was seen.
    """
    records: List[RawRecord] = []
    current: Optional[_Draft] = None

    for raw_line in text.strip().splitlines():
        line = raw_line.strip()

        if line.startswith(ID_LABEL):
            if current is not None:
                records.append(current.build())
            current = _Draft(id=_after_first_colon(line))
        elif current is None:
            # Field lines before the first Candidate ID have no record to fill.
            continue
        elif line.startswith(DATE_LABEL):
            current.date_text = _after_first_colon(line)
        elif line.startswith(TIME_LABEL):
            value = line.split(TIME_LABEL, 1)[1]
            current.time_text = value.replace(TIMEZONE_MARKER, "").strip()
        elif CANCEL_MARKER in line.lower():
            current.cancelled = True

    if current is not None:
        records.append(current.build())

    if not records:
        raise NoRecordsFound()
    return records


__all__ = ["parse_records"]
