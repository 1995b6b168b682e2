#!/usr/bin/env python3
"""
line_classifier.py
-------------------
Decide which shape a single time log line has.

Shapes are tested in a fixed order and the first match wins:

1. WEEK_HEADER   ``## Week 25.5 - 30.5``
2. TABLE_ROW     ``| 19.5 18:50 | 1h | 2. |`` or ``| 10 - 30 | 2h | |``
3. TASK          ``2. Write report`` or a row holding only a task cell
4. UNRECOGNIZED  anything else

A line is never classified twice: a week header that also contains pipes
is a week header, a table row with a task cell is a table row.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from enum import Enum
from typing import Match, Optional

# --- Local imports ---
from worktools.utils.patterns import DEFAULT_PATTERNS, TimeUsagePatterns


class LineKind(str, Enum):
    """Shape of a time log line."""

    WEEK_HEADER = "week_header"
    TABLE_ROW = "table_row"
    TASK = "task"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A line together with the match that decided its shape.

    Attributes:
        kind: Recognised shape
        text: The raw line
        match: Match of the deciding pattern, None when unrecognised
    """

    kind: LineKind
    text: str
    match: Optional[Match[str]] = None


def classify_line(
    line: str, patterns: TimeUsagePatterns = DEFAULT_PATTERNS
) -> ClassifiedLine:
    """
    Classify one line of the time log.

    Args:
        line: Line without its trailing newline
        patterns: Compiled pattern set

    Returns:
        ClassifiedLine with the first matching shape

    Examples:
        >>> classify_line("## Week 25.5 - 30.5").kind
        <LineKind.WEEK_HEADER: 'week_header'>
        >>> classify_line("| 20:00 | 5.25h | 3. |").kind
        <LineKind.TABLE_ROW: 'table_row'>
        >>> classify_line("3. Fix the build").kind
        <LineKind.TASK: 'task'>
        >>> classify_line("Some notes").kind
        <LineKind.UNRECOGNIZED: 'unrecognized'>
    """
    week = patterns.week.search(line)
    if week:
        return ClassifiedLine(LineKind.WEEK_HEADER, line, week)

    row = patterns.day_and_time.search(line)
    if row:
        return ClassifiedLine(LineKind.TABLE_ROW, line, row)

    task = patterns.task.search(line)
    if task:
        return ClassifiedLine(LineKind.TASK, line, task)

    return ClassifiedLine(LineKind.UNRECOGNIZED, line)
