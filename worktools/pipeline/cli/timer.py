"""
Work Timer Command
-------------------

Stopwatch for work sessions.

Commands:
    - work-timer: Run until Ctrl+C, then append the session to the time log
"""
from __future__ import annotations

import click
from datetime import datetime, timedelta
from pathlib import Path

from worktools.core.cli_options import output_option
from worktools.core.config import Settings
from worktools.core.logging_manager import WorkToolsLogger, handle_cli_error
from worktools.pipeline.work_timer import (
    append_summary_row,
    format_hhmmss,
    format_summary_row,
    run_timer,
)

LABEL_WIDTH = 12


def _show_start(start: datetime) -> None:
    click.echo(f"{'Start:':<{LABEL_WIDTH}}{start:%Y-%m-%d %H:%M:%S}")


def _show_elapsed(elapsed: timedelta) -> None:
    click.echo(
        f"\r{'Duration:':<{LABEL_WIDTH}}{format_hhmmss(elapsed)}", nl=False, err=True
    )


@click.command("work-timer")
@output_option(help_text="Time log to append the session row to (default: from configuration)")
@click.pass_context
def work_timer(ctx: click.Context, output: str) -> None:
    """
    Time a work session.

    Shows the elapsed time until interrupted with Ctrl+C, then appends a
    row with the start time and duration (rounded to quarter hours) to
    the time log.
    """
    logger: WorkToolsLogger = ctx.obj["logger"]
    settings: Settings = ctx.obj["settings"]
    log_path = Path(output) if output else settings.timer_log

    start, end = run_timer(on_start=_show_start, on_tick=_show_elapsed)

    click.echo(f"\r{'End:':<{LABEL_WIDTH}}{end:%Y-%m-%d %H:%M:%S}")
    click.echo(f"{'Duration:':<{LABEL_WIDTH}}{format_hhmmss(end - start)}")

    try:
        row = format_summary_row(start, end)
        append_summary_row(log_path, row, logger)
        click.echo(f"Logged to {log_path}: {row}")
    except Exception as e:
        handle_cli_error(ctx, e, "work_timer", additional_context={"output": str(log_path)})


__all__ = ["work_timer"]
