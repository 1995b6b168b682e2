#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from worktools.core.cli_options import input_option, latest_option, weeks_option

    @click.command()
    @input_option()
    @latest_option
    @weeks_option
    def my_command(input_path, latest, weeks_count):
        pass
"""
import click


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files (default: from configuration)"
)


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS (FACTORIES)
# ═══════════════════════════════════════════════════════════════════════════

def input_option(help_text="Time log to read (default: from configuration)"):
    """
    Factory function for the time log input option.

    Existence is not validated here: a missing log is reported by the
    parser as InputUnavailableError.

    Args:
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-i", "--input", "input_path",
        type=click.Path(dir_okay=False),
        default=None,
        help=help_text
    )


def output_option(help_text="Output file (default: from configuration)"):
    """
    Factory function for an output file option.

    Args:
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-o", "--output",
        type=click.Path(dir_okay=False),
        default=None,
        help=help_text
    )


# ═══════════════════════════════════════════════════════════════════════════
# WEEK SELECTION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

latest_option = click.option(
    "-l", "--latest",
    is_flag=True,
    help="Only include the latest week"
)

weeks_option = click.option(
    "-W", "--weeks", "weeks_count",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Only include the last N weeks (0 for all)"
)


def check_week_selection(latest: bool, weeks_count: int) -> None:
    """
    Reject --latest combined with --weeks.

    Raises:
        click.UsageError: If both are given
    """
    if latest and weeks_count:
        raise click.UsageError("--latest cannot be combined with --weeks")
