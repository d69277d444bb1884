from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from interview_analytics.aggregation import MONTH_ABBREVIATIONS
from interview_analytics.domain.models import EnrichedRecord
from interview_analytics.domain.results import AggregateTable, AnalysisResult

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

STATUS_STYLES = {
    "completed": "green",
    "upcoming": "blue",
    "cancelled": "red",
}


def _round_float(value: float, decimals: int = 1) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _long_date(record: EnrichedRecord) -> str:
    # e.g. "Wednesday, May 21, 2025"; built from fields so it ignores the locale.
    month = MONTH_NAMES[record.date.month - 1]
    return f"{record.day_of_week}, {month} {record.date.day}, {record.date.year}"


def build_payload(result: AnalysisResult) -> Dict[str, Any]:
    """
    JSON-serializable view of an analysis run.

    Percentages and rates are rounded to one decimal; counts stay exact.
    """
    tables: Dict[str, Any] = {}
    for name, table in result.tables.items():
        tables[name] = {
            "title": table.title,
            "total": table.total,
            "buckets": [
                {
                    "key": b.key,
                    "label": b.label,
                    "count": b.count,
                    "percentage": _round_float(b.percentage),
                    "record_ids": [result.records[i].id for i in b.record_indices],
                }
                for b in table.buckets
            ],
        }

    insights = result.insights.model_dump(mode="json")
    for key, value in insights.items():
        if isinstance(value, float):
            insights[key] = _round_float(value)
    insights["highlights"] = [h.model_dump() for h in result.insights.highlights()]

    return {
        "reference_date": result.reference_date.isoformat(),
        "total": result.total,
        "records": [r.model_dump(mode="json") for r in result.records],
        "tables": tables,
        "insights": insights,
    }


def _metrics_table(result: AnalysisResult) -> Table:
    status = result.table("status")
    table = Table(title="Key Metrics", box=box.ROUNDED)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")
    table.add_column("Notes", style="dim")

    next_up = result.next_upcoming()
    table.add_row("Total Interviews", str(result.total), f"as of {result.reference_date.isoformat()}")
    table.add_row("Completed", str(status.bucket("completed").count), "")
    table.add_row(
        "Upcoming",
        str(status.bucket("upcoming").count),
        f"Next: {MONTH_ABBREVIATIONS[next_up.date.month - 1]} {next_up.date.day}" if next_up else "",
    )
    table.add_row(
        "Cancelled",
        str(status.bucket("cancelled").count),
        f"{result.insights.cancellation_rate:.1f}% cancellation rate",
    )
    return table


def _aggregate_table(aggregate: AggregateTable) -> Table:
    table = Table(title=aggregate.title, box=box.ROUNDED, caption=f"drill-down key: {aggregate.name}")
    table.add_column("Bucket", style="cyan", no_wrap=True)
    table.add_column("Key", style="dim")
    table.add_column("Count", justify="right", style="magenta")
    table.add_column("%", justify="right", style="green")
    for bucket in aggregate.buckets:
        table.add_row(bucket.label, bucket.key, str(bucket.count), f"{bucket.percentage:.1f}")
    return table


def _records_table(records: Sequence[EnrichedRecord], title: str) -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"Showing {len(records)} interview{'s' if len(records) != 1 else ''}",
    )
    table.add_column("Candidate ID", style="cyan", no_wrap=True)
    table.add_column("Date")
    table.add_column("Time", style="yellow")
    table.add_column("Time Slot")
    table.add_column("Type")
    table.add_column("Status")
    for record in records:
        style = STATUS_STYLES.get(record.status, "")
        table.add_row(
            record.id,
            _long_date(record),
            record.time_text,
            record.time_slot,
            "Weekend" if record.is_weekend else "Weekday",
            f"[{style}]{record.status.capitalize()}[/{style}]",
        )
    return table


def print_records(
    records: Sequence[EnrichedRecord], title: str, console: Optional[Console] = None
) -> None:
    """Render a list of records, e.g. the contents of one drill-down bucket."""
    console = console or Console()
    if not records:
        console.print(f"[yellow]No interviews in {title}.[/yellow]")
        return
    console.print(_records_table(records, title))


def print_report(result: AnalysisResult, console: Optional[Console] = None) -> None:
    """
    Render an analysis run as rich tables: key metrics, every aggregate
    table, the upcoming interviews and the key insights.
    """
    console = console or Console()

    console.print(_metrics_table(result))
    for aggregate in result.tables.values():
        console.print(_aggregate_table(aggregate))

    upcoming = result.upcoming()
    if upcoming:
        console.print(_records_table(upcoming, "Upcoming Interviews"))

    insights = Table(title="Key Insights", box=box.ROUNDED, show_header=False)
    insights.add_column("Insight", style="bold cyan", no_wrap=True)
    insights.add_column("Detail")
    for highlight in result.insights.highlights():
        insights.add_row(highlight.title, highlight.message)
    console.print(insights)


__all__ = ["build_payload", "print_records", "print_report"]
