#!/usr/bin/env python3
"""
worktools CLI
-------------

Command-line interface for the weekly time log.

Commands:
    - time-calc: Summarise the log, write TOTAL.md and time.csv
    - show: Print the parsed log as YAML
    - work-timer: Stopwatch that appends the session to the log

Usage:
    # Totals for every week
    worktools time-calc

    # Only the latest week / the last 3 weeks
    worktools time-calc --latest
    worktools time-calc -W 3

    # Remove generated reports
    worktools time-calc --clean

    # Inspect what the parser sees
    worktools show --latest

    # Time a work session
    worktools work-timer
"""
from __future__ import annotations

import click
from pathlib import Path

from worktools.core.cli import setup_logger
from worktools.core.cli_options import log_dir_option, verbose_option
from worktools.core.config import load_settings
from worktools.core.exceptions import ConfigError
from worktools.core.logging_manager import handle_cli_error
from worktools.core.paths import CONFIG_FILE


@click.group()
@log_dir_option
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_FILE),
    show_default=True,
    help="YAML configuration file (ignored when missing)",
)
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, config_path: str, verbose: bool) -> None:
    """Weekly time log tools"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        settings = load_settings(Path(config_path))
    except ConfigError as e:
        handle_cli_error(ctx, e, "load_settings", {"config": config_path})

    resolved_log_dir = Path(log_dir) if log_dir else settings.log_dir
    ctx.obj["settings"] = settings
    ctx.obj["log_dir"] = resolved_log_dir
    ctx.obj["logger"] = setup_logger(resolved_log_dir, "worktools")
    ctx.obj["logger"].log_debug("Settings loaded", settings.to_dict())


# Import and register commands from submodules
from .time_calc import show, time_calc
from .timer import work_timer

# Register commands
cli.add_command(time_calc)
cli.add_command(show)
cli.add_command(work_timer)


if __name__ == "__main__":
    cli(obj={})
