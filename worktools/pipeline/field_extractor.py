#!/usr/bin/env python3
"""
field_extractor.py
-------------------
Pull the semantic fields out of a classified time log line.

Week headers yield their label, table rows yield date / time / day range,
duration and task cell, and standalone task lines yield the definition
text used to resolve numeric task ids.

Programmatic API:
    from worktools.pipeline.field_extractor import extract_row

    classified = classify_line("| 19.5 18:50 | 1h | 2. |")
    fields = extract_row(classified.match, classified.text)
    fields.date, fields.time, fields.duration, fields.task.text
    # ('19.5', '18:50', 1.0, '2')
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from enum import Enum
from typing import Match, Optional

# --- Local imports ---
from worktools.core.exceptions import MalformedTableTaskError
from worktools.dataclasses.time_usage import CONTINUE_TASK, MEETING_TASK
from worktools.utils.patterns import DEFAULT_PATTERNS, TimeUsagePatterns


class TaskKind(str, Enum):
    """
    Outcome of reading the task part of a line.

    - TASK_STRING: Standalone ``N. description`` line
    - TASK_NUMBER: ``| N. |`` cell, an id resolved later by a definition
    - MEETING: ``| meet |`` cell
    - TASK_CONTINUE: ``| ... |`` cell, same task as the previous entry
    - NONE: No task found
    """

    TASK_STRING = "task_string"
    TASK_NUMBER = "task_number"
    MEETING = "meeting"
    TASK_CONTINUE = "task_continue"
    NONE = "none"


@dataclass(frozen=True)
class TaskCell:
    """
    Task found on a line.

    Attributes:
        kind: Which task shape matched
        text: Definition text, task id, "Meetting", "..." or "" for NONE
    """

    kind: TaskKind = TaskKind.NONE
    text: str = ""


@dataclass(frozen=True)
class RowFields:
    """
    Fields of a day/time or day range table row.

    Attributes:
        date: Date token when the row opens a new day ("19.5")
        time: Clock time of the entry ("18:50")
        day_range: Day range token ("10 - 30"), exclusive with date and time
        duration: Hours from the first ``Nh`` cell, 0.0 when absent
        task: Task cell of the row
    """

    date: Optional[str] = None
    time: Optional[str] = None
    day_range: Optional[str] = None
    duration: float = 0.0
    task: TaskCell = field(default_factory=TaskCell)


def extract_week_label(match: Match[str]) -> str:
    """Week label of a header match, e.g. 'Week 25.5'."""
    return match.group("label")


def extract_duration(line: str, patterns: TimeUsagePatterns = DEFAULT_PATTERNS) -> float:
    """
    Read the first ``N[.N]h`` duration on the line.

    Examples:
        >>> extract_duration("| 20:00 | 1.25h | 3. |")
        1.25
        >>> extract_duration("| 20:00 | | 3. |")
        0.0
    """
    match = patterns.duration.search(line)
    if match is None:
        return 0.0

    return float(match.group("hours"))


def extract_task(line: str, patterns: TimeUsagePatterns = DEFAULT_PATTERNS) -> TaskCell:
    """
    Read the task part of a line.

    Examples:
        >>> extract_task("2. Write report")
        TaskCell(kind=<TaskKind.TASK_STRING: 'task_string'>, text='2. Write report')
        >>> extract_task("| 19.5 18:50 | 1h | 2. |").text
        '2'
        >>> extract_task("| 9:00 | 1h | meet |").text
        'Meetting'
    """
    match = patterns.task.search(line)
    if match is None:
        return TaskCell()

    if match.group("definition") is not None:
        return TaskCell(TaskKind.TASK_STRING, match.group("definition"))
    if match.group("number") is not None:
        return TaskCell(TaskKind.TASK_NUMBER, match.group("number"))
    if match.group("meeting") is not None:
        return TaskCell(TaskKind.MEETING, MEETING_TASK)
    return TaskCell(TaskKind.TASK_CONTINUE, CONTINUE_TASK)


def extract_task_definition(
    line: str, patterns: TimeUsagePatterns = DEFAULT_PATTERNS
) -> Optional[str]:
    """
    Return the full ``N. description`` text of a standalone task line.

    Returns None for lines that only hold a task cell.
    """
    task = extract_task(line, patterns)
    if task.kind is TaskKind.TASK_STRING:
        return task.text
    return None


def extract_row(
    match: Match[str],
    line: str,
    patterns: TimeUsagePatterns = DEFAULT_PATTERNS,
    line_number: Optional[int] = None,
) -> RowFields:
    """
    Extract the fields of a table row.

    Args:
        match: day_and_time match from the classifier
        line: The full row; duration and task are searched on all of it
        patterns: Compiled pattern set
        line_number: Position in the input, for error reporting

    Returns:
        RowFields for the row

    Raises:
        MalformedTableTaskError: If the row is also a standalone task
            definition (e.g. ``1. note | 10:00 |``)
    """
    task = extract_task(line, patterns)
    if task.kind is TaskKind.TASK_STRING:
        raise MalformedTableTaskError(
            "Invalid format for task in date table", line_number=line_number
        )

    return RowFields(
        date=match.group("date"),
        time=match.group("time"),
        day_range=match.group("range"),
        duration=extract_duration(line, patterns),
        task=task,
    )
