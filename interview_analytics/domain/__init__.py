"""
Domain package for Interview Analytics.

Exports the record models, the aggregate result containers and the error
taxonomy shared by the parser, enricher, aggregator and CLI.
"""

from interview_analytics.domain.errors import (
    InterviewDataError,
    InvalidDate,
    InvalidTime,
    MissingRequiredField,
    NoRecordsFound,
)
from interview_analytics.domain.models import (
    DAY_NAMES,
    STATUSES,
    TIME_SLOTS,
    EnrichedRecord,
    RawRecord,
)
from interview_analytics.domain.results import (
    AggregateTable,
    AnalysisResult,
    Bucket,
    Highlight,
    Insights,
)

__all__ = [
    # Records
    "DAY_NAMES",
    "STATUSES",
    "TIME_SLOTS",
    "EnrichedRecord",
    "RawRecord",
    # Results
    "AggregateTable",
    "AnalysisResult",
    "Bucket",
    "Highlight",
    "Insights",
    # Errors
    "InterviewDataError",
    "InvalidDate",
    "InvalidTime",
    "MissingRequiredField",
    "NoRecordsFound",
]
