"""
worktools
=========

Tools for a hand-written weekly time log.

The time log is a markdown document with one section per week and
pipe-delimited tables of time entries:

    ## Week 25.5 - 30.5

    | 19.5 18:50 | 1h | 2. |
    | 20:00      | 0.5h | meet |

    2. Write report

This package parses it into Week / Day / Hours records and builds totals
reports and CSV exports from them. A stopwatch appends timed sessions to
the log in the same table format.

Main Components:
    - pipeline: Parser (classifier, extractor, accumulator), reports, timer, CLI
    - dataclasses: Week / Day / Hours model
    - core: Logging, configuration, exceptions, paths
    - utils: Compiled line patterns

Primary Interfaces:
    - worktools.pipeline.cli: Command-line interface (``worktools``)
    - worktools.pipeline.time_usage_parser.parse_time_usage: Parse a log file

Example Usage:
    >>> from pathlib import Path
    >>> from worktools import parse_time_usage
    >>> weeks = parse_time_usage(Path("TIME_USAGE.md"))
    >>> weeks[0].label
    'Week 25.5'

Version: 0.1.0
"""

__version__ = "0.1.0"

# Expose primary interfaces for convenience
from worktools.dataclasses.time_usage import Day, Hours, Week
from worktools.pipeline.time_usage_parser import parse_lines, parse_text, parse_time_usage

__all__ = [
    "Day",
    "Hours",
    "Week",
    "parse_lines",
    "parse_text",
    "parse_time_usage",
]
