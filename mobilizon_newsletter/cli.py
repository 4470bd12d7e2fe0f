"""
Command-line interface for the newsletter generator.

Uses Typer to provide a CLI taking the instance URL and the target month,
with options overriding the most common configuration settings.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .core.dates import month_start, resolve_timezone
from .core.types import reporting_intervals
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    url: str = typer.Argument(..., help="Mobilizon instance URL, e.g. https://mobilizon.example."),
    year: int | None = typer.Option(None, "--year", min=1, max=9999, help="Target year."),
    month: int | None = typer.Option(None, "--month", min=1, max=12, help="Target month (1-12)."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output HTML file."),
    locale: str | None = typer.Option(None, "--locale", help="Locale for dates, e.g. nl or en."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Compile Mobilizon posts and events into a newsletter.

    Lists the events of the target month and the posts of the month
    before it. Year and month default to the current month.

    Args:
        url: Base URL of the Mobilizon instance
        year: Target year
        month: Target month
        config: Optional path to YAML config file
        output: Output file, overrides the configured path
        locale: Locale for weekday, month and time names
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if output is not None:
        cfg.output.path = str(output)
    if locale:
        cfg.format.locale = locale
    if log_level:
        cfg.logging.level = log_level

    tz = resolve_timezone(cfg.format)
    today = datetime.now(tz)
    year = year if year is not None else today.year
    month = month if month is not None else today.month
    try:
        reporting_intervals(month_start(year, month, tz))
    except ValueError as exc:
        raise typer.BadParameter(
            f"no reporting period for {year}-{month:02d}: {exc}", param_hint="--year/--month"
        ) from exc

    output_path = run_pipeline(
        url,
        year,
        month,
        cfg,
        console=console,
    )
    console.print(f"Newsletter generated: {output_path}")


if __name__ == "__main__":
    app()
