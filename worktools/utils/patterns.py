#!/usr/bin/env python3
"""
patterns.py
--------------------
Regular expressions recognising the line shapes of a weekly time log.

    ## Week 25.5 - 30.5            <- week header
    | 19.5 18:50 | 1h   | 2.   |   <- dated row: new day + entry
    | 20:00      | 5.25h| 3.   |   <- timed row: entry on the last day
    | 10 - 30    | 2h   | meet |   <- day range row: day with one entry
    2. Write report                <- task definition for id 2

All patterns are compiled once at import into DEFAULT_PATTERNS, which is
never mutated afterwards. Callers wanting different shapes can build their
own TimeUsagePatterns and pass it to the parser explicitly.

Usage:
    from worktools.utils.patterns import DEFAULT_PATTERNS

    match = DEFAULT_PATTERNS.week.search("## Week 25.5 - 30.5")
    match.group("label")  # 'Week 25.5'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from typing import Pattern


# ----- Pattern sources -----
# A date is day.month with an optional two digit year: 25.5, 5.05.23
_DATE = r"\d\d?\.\d\d?(?:\.\d\d)?"

WEEK_PATTERN = rf"^## (?P<label>Week {_DATE})(?: *- *{_DATE})"
"""Week header; the `- date` end of the range is mandatory."""

DAY_AND_TIME_PATTERN = (
    r"(?:\|\s*?(?:(?P<date>\d\d?\.\d\d?)(?!\d*h) +)?(?P<time>\d\d?:\d\d)\s*?\|)"
    r"|(?:\|\s*?(?P<range>\d+\s*?-\s*?\d+)\s*?\|)"
)
"""Table cell holding `[date ]time` or a day range `N - N`."""

DURATION_PATTERN = r"(?P<hours>\d+(?:\.\d*)?)h"
"""First number followed by `h` anywhere in the line."""

TASK_PATTERN = (
    r"^(?P<definition>\d+\. .*)$"
    r"|(?:\|[ \t]*(?:(?P<number>\d+)\.|(?P<meeting>meet)|(?P<continue>\.{3}))[ \t]*\|)"
)
"""Standalone `N. text` definition, or a `N.` / `meet` / `...` table cell."""

TASK_NUMBER_PATTERN = r"[+-]?\d+"
"""Task text that still holds an unresolved numeric id."""


@dataclass(frozen=True)
class TimeUsagePatterns:
    """
    Compiled pattern set used by the classifier and extractor.

    Attributes:
        week: Week header, group `label`
        day_and_time: Table row, groups `date`, `time`, `range`
        duration: Duration cell, group `hours`
        task: Task line or cell, groups `definition`, `number`,
            `meeting`, `continue`
        task_number: Full-match test for an unresolved task id
    """

    week: Pattern[str]
    day_and_time: Pattern[str]
    duration: Pattern[str]
    task: Pattern[str]
    task_number: Pattern[str]

    @classmethod
    def compile(
        cls,
        week: str = WEEK_PATTERN,
        day_and_time: str = DAY_AND_TIME_PATTERN,
        duration: str = DURATION_PATTERN,
        task: str = TASK_PATTERN,
        task_number: str = TASK_NUMBER_PATTERN,
    ) -> TimeUsagePatterns:
        """
        Compile a pattern set.

        Overridden patterns must keep the group names of the defaults.

        Raises:
            re.error: If any pattern is not a valid regular expression
        """
        return cls(
            week=re.compile(week),
            day_and_time=re.compile(day_and_time),
            duration=re.compile(duration),
            task=re.compile(task),
            task_number=re.compile(task_number),
        )


# Compiled at import, read-only for the process lifetime
DEFAULT_PATTERNS = TimeUsagePatterns.compile()
