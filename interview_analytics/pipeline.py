"""
Pipeline for analyzing a pasted interview schedule.

Runs parse -> validate -> enrich -> aggregate over one text blob and returns
a single immutable `AnalysisResult`. A failure in any stage propagates as an
`InterviewDataError` subclass and no partial result is produced.

Usage:
    from datetime import date
    from interview_analytics.pipeline import analyze

    result = analyze(text, today=date(2025, 10, 17))
    evening = result.drill_down("time_slot", "Evening")
"""

from __future__ import annotations

from datetime import date

from interview_analytics.aggregation import build_insights, build_tables
from interview_analytics.domain.results import AnalysisResult
from interview_analytics.enrichment import enrich_records
from interview_analytics.parsing.parser import parse_records
from interview_analytics.parsing.validator import validate_records
from interview_analytics.utils.logging import get_logger

log = get_logger(__name__)


def analyze(text: str, today: date) -> AnalysisResult:
    """
    Run the full pipeline over `text`.

    Parameters
    ----------
    text : str
        Raw schedule text.
    today : date
        Reference date for the completed/upcoming split. Passed explicitly so
        runs are reproducible.

    Returns
    -------
    AnalysisResult
        Enriched records, aggregate tables keyed by name, and insights.

    Raises
    ------
    InterviewDataError
        NoRecordsFound, MissingRequiredField, InvalidDate or InvalidTime.
    """
    raw_records = parse_records(text)
    log.debug("[PARSE] Extracted records", extra={"records": len(raw_records)})

    validated = validate_records(raw_records)
    log.debug("[VALIDATE] All required fields present", extra={"records": len(validated)})

    enriched = enrich_records(validated, today)
    log.debug("[ENRICH] Derived calendar attributes", extra={"today": today.isoformat()})

    tables = build_tables(enriched)
    insights = build_insights(enriched, tables)
    log.debug("[AGGREGATE] Built summary tables", extra={"tables": sorted(tables)})

    result = AnalysisResult(
        reference_date=today,
        records=tuple(enriched),
        tables=tables,
        insights=insights,
    )
    log.info(
        "[PIPELINE COMPLETE] Analyzed %d interview(s)",
        result.total,
        extra={
            "records": result.total,
            "completed": insights.completed_count,
            "cancelled": insights.cancelled_count,
            "reference_date": today.isoformat(),
        },
    )
    return result


__all__ = ["analyze"]
