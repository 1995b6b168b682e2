#!/usr/bin/env python3
"""
time_usage.py
-------------------

Defines the dataclasses of the time log model produced by the parser in
worktools.pipeline.time_usage_parser.

    Week
    └── days: List[Day]
        └── hours: List[Hours]

Each Week is opened by a ``## Week 25.5 - 30.5`` header, each Day by a
dated table row (``| 19.5 18:50 | ...``) or a day range row
(``| 10 - 30 | ...``), and each Hours entry by a timed row.

The parser owns the model while it is being built. Once returned, reports
and exports treat it as read-only.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from typing import Any, Dict, List


# ----- Constants -----
RANGE_TIME = "*"
"""Time marker of the single entry created for a day range row."""

MEETING_TASK = "Meetting"
"""Task text recorded for ``| meet |`` cells, spelled as in existing logs."""

CONTINUE_TASK = "..."
"""Task text for ``| ... |`` cells: same task as the previous entry."""


# ----- Dataclasses -----
@dataclass
class Hours:
    """
    A single time entry.

    Attributes:
        time (str): Clock time ("18:50"), or "*" for a day range entry.
        duration (float): Hours spent; 0.0 when the row had no duration cell.
        task (str): Task id, "Meetting", "...", the resolved task
            description, or "" when the row had no task cell.
    """

    time: str
    duration: float = 0.0
    task: str = ""

    @property
    def is_range(self) -> bool:
        return self.time == RANGE_TIME

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "duration": self.duration, "task": self.task}


@dataclass
class Day:
    """
    A day of a week with its time entries in document order.

    Attributes:
        date (str): Date token as written ("19.5") or a day range ("10 - 30").
        hours (List[Hours]): Entries logged for the day.
    """

    date: str
    hours: List[Hours] = field(default_factory=list)

    def total_duration(self) -> float:
        """Sum of all entry durations for the day."""
        return sum(entry.duration for entry in self.hours)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "hours": [entry.to_dict() for entry in self.hours],
        }


@dataclass
class Week:
    """
    A week section of the time log.

    Attributes:
        label (str): Week start descriptor from the header ("Week 25.5").
        days (List[Day]): Days of the week in document order.
    """

    label: str
    days: List[Day] = field(default_factory=list)

    def total_duration(self) -> float:
        """Sum of all entry durations for the week."""
        return sum(day.total_duration() for day in self.days)

    def entry_count(self) -> int:
        return sum(len(day.hours) for day in self.days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "days": [day.to_dict() for day in self.days],
        }
