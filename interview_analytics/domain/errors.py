"""
Error taxonomy for the interview analysis pipeline.

Every failure the pipeline can raise derives from `InterviewDataError`, so the
caller needs a single `except` clause to surface the message and ask for
corrected input. Positions are 1-based record numbers in input order.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class InterviewDataError(ValueError):
    """Base class for input data problems detected by the pipeline."""


class NoRecordsFound(InterviewDataError):
    """The input text did not contain a single interview record."""

    def __init__(self, message: str = "No valid interview data found") -> None:
        super().__init__(message)


class MissingRequiredField(InterviewDataError):
    """A record lacks a Candidate ID, Date or Time value."""

    def __init__(self, position: int, fields: Sequence[str]) -> None:
        self.position = position
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(
            f"Missing required fields (Candidate ID, Date, or Time) in record {position}: "
            + ", ".join(self.fields)
        )


def _where(position: Optional[int]) -> str:
    return f" in record {position}" if position is not None else ""


class InvalidDate(InterviewDataError):
    """The date text could not be parsed as YYYY-MM-DD."""

    def __init__(self, value: str, position: Optional[int] = None) -> None:
        self.value = value
        self.position = position
        super().__init__(f"Invalid date {value!r}{_where(position)} (expected YYYY-MM-DD)")


class InvalidTime(InterviewDataError):
    """The time text does not start with a valid 0-23 hour."""

    def __init__(self, value: str, position: Optional[int] = None) -> None:
        self.value = value
        self.position = position
        super().__init__(f"Invalid time {value!r}{_where(position)} (expected HH:MM - HH:MM)")


__all__ = [
    "InterviewDataError",
    "NoRecordsFound",
    "MissingRequiredField",
    "InvalidDate",
    "InvalidTime",
]
