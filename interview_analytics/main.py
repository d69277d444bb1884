from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console

from interview_analytics.config import get_settings
from interview_analytics.domain.errors import InterviewDataError
from interview_analytics.pipeline import analyze as run_pipeline
from interview_analytics.reporter import build_payload, print_records, print_report
from interview_analytics.sample import SAMPLE_SCHEDULE
from interview_analytics.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Interview Analytics CLI: summarize a pasted interview schedule.")

log = get_logger(__name__)


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint="--today") from None


def _parse_drill(value: Optional[str]) -> Optional[Tuple[str, str]]:
    if value is None:
        return None
    table, sep, key = value.partition(":")
    if not sep or not table or not key:
        raise typer.BadParameter(f"expected TABLE:KEY, got {value!r}", param_hint="--drill")
    return table, key


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    reference = settings.reference_date.isoformat() if settings.reference_date else "wall clock"
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"reference_date={reference}"
    )


@app.command()
def sample() -> None:
    """
    Print the built-in sample schedule (pipe it back into `analyze`).
    """
    typer.echo(SAMPLE_SCHEDULE, nl=False)


@app.command()
def analyze(
    source: str = typer.Argument(
        "-",
        help="Schedule text file to analyze; '-' or omitted reads stdin.",
    ),
    today: Optional[str] = typer.Option(
        None,
        "--today",
        "-t",
        help="Reference date (YYYY-MM-DD) for completed/upcoming. Defaults to REFERENCE_DATE or the current date.",
    ),
    use_sample: bool = typer.Option(
        False,
        "--sample",
        help="Analyze the built-in sample schedule instead of SOURCE.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print a JSON payload instead of tables.",
    ),
    drill: Optional[str] = typer.Option(
        None,
        "--drill",
        "-d",
        help="Only list the records behind one bucket, e.g. time_slot:Evening or status:upcoming.",
    ),
) -> None:
    """
    Parse, enrich and aggregate an interview schedule and print the summary.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    reference = settings.resolve_today(_parse_today(today))
    drill_target = _parse_drill(drill)

    if use_sample:
        text = SAMPLE_SCHEDULE
    else:
        try:
            text = _read_source(source)
        except OSError as exc:
            typer.echo(f"Error: cannot read {source}: {exc.strerror or exc}", err=True)
            raise typer.Exit(code=1)

    log.info("Analyzing schedule", extra={"source": "sample" if use_sample else source})
    try:
        result = run_pipeline(text, today=reference)
    except InterviewDataError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if drill_target is not None:
        table_name, bucket_key = drill_target
        try:
            records = result.drill_down(table_name, bucket_key)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="--drill") from None
        if as_json:
            typer.echo(json.dumps([r.model_dump(mode="json") for r in records], indent=2))
        else:
            table = result.table(table_name)
            title = f"{table.title} - {table.bucket(bucket_key).label}"
            print_records(records, title, console=Console())
        return

    if as_json:
        typer.echo(json.dumps(build_payload(result), indent=2))
    else:
        print_report(result, console=Console())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
