#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the worktools project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    ├── TimeUsageParseError - Base for all time log parsing errors
    │   ├── InputUnavailableError - Time log cannot be opened or read
    │   ├── DecodeFailureError - A line of the time log is not valid text
    │   └── MalformedTableTaskError - Task definition inside a table row
    ├── ReportError - TOTAL.md / time.csv generation or cleanup errors
    ├── TimerLogError - Stopwatch summary could not be appended
    ├── ConfigError - Invalid configuration file
    └── TemporalFileError - Temporary file management errors

Usage:
    from worktools.core.exceptions import TimeUsageParseError

    try:
        weeks = parse_time_usage(path)
    except TimeUsageParseError as e:
        logger.error(f"Cannot parse time log: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class TimeUsageParseError(Exception):
    """
    Base exception for time log parsing errors.

    Parsing is a one-shot batch operation: any of these errors aborts the
    whole parse and no partial model is returned.

    Attributes:
        message: Error description
        path: Source file, when parsing from a file
        line_number: 1-based line where the error was detected, if known

    Examples:
        >>> raise TimeUsageParseError("Invalid format for task in date table")

    See Also:
        InputUnavailableError, DecodeFailureError, MalformedTableTaskError
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} (line {self.line_number})"


class InputUnavailableError(TimeUsageParseError):
    """
    Exception for time logs that cannot be opened.

    Raised when the input path does not exist, is a directory, or cannot be
    read because of permissions.

    Examples:
        >>> raise InputUnavailableError("File TIME_USAGE.md not found")
    """

    pass


class DecodeFailureError(TimeUsageParseError):
    """
    Exception for lines that are not valid UTF-8 text.

    Examples:
        >>> raise DecodeFailureError("Line is not valid UTF-8", line_number=12)
    """

    pass


class MalformedTableTaskError(TimeUsageParseError):
    """
    Exception for a task definition found inside a table row.

    A line that is both a day/time row and starts with ``N. `` cannot be
    attributed to either shape.

    Examples:
        >>> raise MalformedTableTaskError("Invalid format for task in date table")
    """

    pass


class ReportError(Exception):
    """
    Exception for report generation failures.

    Raised when writing TOTAL.md or time.csv fails, or when removing
    previously generated reports fails.

    Examples:
        >>> raise ReportError("Cannot write TOTAL.md: permission denied")
    """

    pass


class TimerLogError(Exception):
    """
    Exception for stopwatch summary failures.

    Raised when the work timer cannot append its summary row to the
    time log.

    Examples:
        >>> raise TimerLogError("File could not be written")
    """

    pass


class ConfigError(Exception):
    """
    Exception for configuration file errors.

    Raised for invalid YAML, non-mapping content, unknown keys or values
    of the wrong type.

    Examples:
        >>> raise ConfigError("Unknown configuration key: 'totals'")
    """

    pass


class TemporalFileError(Exception):
    """
    Exception for temporary file management errors.

    Examples:
        >>> raise TemporalFileError("Cannot create temp file: /tmp not writable")
    """

    pass
