"""
Interview Analytics - summary statistics for pasted interview schedules.

This package turns a loosely formatted, line-oriented interview log into:

- validated raw records (parser + validator),
- enriched records with weekday, time slot and completed/upcoming/cancelled
  status relative to an explicit reference date,
- named aggregate tables (status, weekday/weekend, day of week, time slot,
  monthly trend) whose buckets can be drilled down to their records,
- derived insights (completion rate, preferred slot, busiest day, ...).

The pipeline is pure and synchronous; the CLI and rich reporter are thin
shells around it.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from interview_analytics.aggregation import TABLE_NAMES, build_insights, build_tables
from interview_analytics.config import Settings, get_settings
from interview_analytics.domain import (
    AggregateTable,
    AnalysisResult,
    Bucket,
    EnrichedRecord,
    Insights,
    InterviewDataError,
    InvalidDate,
    InvalidTime,
    MissingRequiredField,
    NoRecordsFound,
    RawRecord,
)
from interview_analytics.enrichment import enrich_record, enrich_records
from interview_analytics.parsing import parse_records, validate_records
from interview_analytics.pipeline import analyze
from interview_analytics.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Pipeline
    "analyze",
    "parse_records",
    "validate_records",
    "enrich_record",
    "enrich_records",
    "build_tables",
    "build_insights",
    "TABLE_NAMES",
    # Models
    "RawRecord",
    "EnrichedRecord",
    "AggregateTable",
    "Bucket",
    "Insights",
    "AnalysisResult",
    # Errors
    "InterviewDataError",
    "NoRecordsFound",
    "MissingRequiredField",
    "InvalidDate",
    "InvalidTime",
    # Logging
    "configure_logging",
    "get_logger",
]
