"""
Time Log Report Commands
-------------------------

Commands reading the weekly time log.

Commands:
    - time-calc: Print totals and write TOTAL.md / time.csv
    - show: Print the parsed weeks as YAML
"""
from __future__ import annotations

import click
import yaml
from pathlib import Path

from worktools.core.cli import ParseStats, ReportStats
from worktools.core.cli_options import (
    check_week_selection,
    input_option,
    latest_option,
    weeks_option,
)
from worktools.core.config import Settings
from worktools.core.logging_manager import WorkToolsLogger, handle_cli_error
from worktools.pipeline.report import (
    build_summaries,
    clean_reports,
    format_console_summary,
    select_weeks,
    write_csv_report,
    write_total_report,
)
from worktools.pipeline.time_usage_parser import parse_time_usage


@click.command("time-calc")
@input_option()
@latest_option
@weeks_option
@click.option(
    "-c", "--clean",
    is_flag=True,
    help="Delete all generated files (TOTAL.md, time.csv)",
)
@click.option(
    "--total",
    "total_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Markdown totals report (default: from configuration)",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="CSV export (default: from configuration)",
)
@click.option("--no-write", is_flag=True, help="Only print totals, write no files")
@click.pass_context
def time_calc(
    ctx: click.Context,
    input_path: str,
    latest: bool,
    weeks_count: int,
    clean: bool,
    total_path: str,
    csv_path: str,
    no_write: bool,
) -> None:
    """
    Summarise the time log.

    Prints per-day and per-task totals for the selected weeks and writes
    them to TOTAL.md and time.csv.
    """
    logger: WorkToolsLogger = ctx.obj["logger"]
    settings: Settings = ctx.obj["settings"]

    check_week_selection(latest, weeks_count)
    if clean and (latest or weeks_count or no_write):
        raise click.UsageError("--clean cannot be combined with other report options")

    source = Path(input_path) if input_path else settings.time_usage
    total_report = Path(total_path) if total_path else settings.total_report
    csv_report = Path(csv_path) if csv_path else settings.csv_report
    stats = ReportStats()

    try:
        if clean:
            removed = clean_reports([total_report, csv_report], logger)
            for path in removed:
                click.echo(f"Removing {path}")
            if not removed:
                click.echo("Nothing to clean")
            stats.files_removed = len(removed)
            logger.log_operation("clean_complete", {"stats": stats.summary()})
            return

        parse_stats = ParseStats()
        weeks = parse_time_usage(source, logger=logger, stats=parse_stats)
        if weeks is None:
            click.echo(f"No week header found in {source}")
            return

        selected = select_weeks(weeks, latest=latest, count=weeks_count)
        stats.weeks_reported = len(selected)

        for line in format_console_summary(build_summaries(selected, weeks)):
            click.echo(line)

        if no_write:
            return

        write_total_report(selected, total_report, logger, all_weeks=weeks)
        write_csv_report(selected, csv_report, logger, all_weeks=weeks)
        stats.files_written = 2

        click.echo(f"\n✅ Wrote {total_report} and {csv_report}")
        if ctx.obj.get("verbose"):
            click.echo(f"  Parsed: {parse_stats.summary()}")
        logger.log_operation("time_calc_complete", {"stats": stats.summary()})

    except Exception as e:
        handle_cli_error(ctx, e, "time_calc", additional_context={"input": str(source)})


@click.command()
@input_option()
@latest_option
@weeks_option
@click.pass_context
def show(ctx: click.Context, input_path: str, latest: bool, weeks_count: int) -> None:
    """Print the parsed time log as YAML."""
    logger: WorkToolsLogger = ctx.obj["logger"]
    settings: Settings = ctx.obj["settings"]

    check_week_selection(latest, weeks_count)
    source = Path(input_path) if input_path else settings.time_usage

    try:
        weeks = parse_time_usage(source, logger=logger)
        if weeks is None:
            click.echo(f"No week header found in {source}")
            return

        selected = select_weeks(weeks, latest=latest, count=weeks_count)
        click.echo(
            yaml.safe_dump(
                [week.to_dict() for week in selected],
                sort_keys=False,
                allow_unicode=True,
            ),
            nl=False,
        )

    except Exception as e:
        handle_cli_error(ctx, e, "show", additional_context={"input": str(source)})


__all__ = ["time_calc", "show"]
