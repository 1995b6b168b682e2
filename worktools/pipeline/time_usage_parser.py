#!/usr/bin/env python3
"""
time_usage_parser.py
-------------------
Parse a hand-written weekly time log (TIME_USAGE.md) into Week / Day /
Hours records.

    ## Week 25.5 - 30.5

    | Start      | Time  | Task |
    | ---------- | ----- | ---- |
    | 19.5 18:50 | 1h    | 2.   |
    | 20:00      | 0.5h  | ...  |
    | 10 - 30    | 2h    | meet |

    2. Write report

The log is read once, line by line. Every line is classified, its fields
extracted, and the accumulated model updated before the next line is read:

- a week header opens a new Week
- a dated row opens a new Day in the current week and adds its entry
- a timed row adds an entry to the last Day of the current week
- a day range row adds a Day holding a single ``*`` entry
- a ``N. description`` line replaces the first unresolved task id N
  found anywhere in the log with the description

Rows before the first week header are dropped. Lines of any other shape
are ignored.

Programmatic API:
    from worktools.pipeline.time_usage_parser import parse_time_usage
    weeks = parse_time_usage(Path("TIME_USAGE.md"), logger=logger)
    if weeks is None:
        ...  # no week header in the log
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import io
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Match, Optional, Union

# --- Local imports ---
from worktools.core.cli import ParseStats
from worktools.core.exceptions import (
    DecodeFailureError,
    InputUnavailableError,
    TimeUsageParseError,
)
from worktools.core.logging_manager import WorkToolsLogger, safe_logger
from worktools.dataclasses.time_usage import RANGE_TIME, Day, Hours, Week
from worktools.pipeline.field_extractor import (
    extract_row,
    extract_task_definition,
    extract_week_label,
)
from worktools.pipeline.line_classifier import LineKind, classify_line
from worktools.utils.patterns import DEFAULT_PATTERNS, TimeUsagePatterns


# ----- Constants -----
TASK_MARKER_LENGTH = 3
"""Characters dropped from a definition when it replaces a task id ("2. ")."""

_TASK_NUMBER_MIN = -(2**31)
_TASK_NUMBER_MAX = 2**31 - 1


class TimeUsageAccumulator:
    """
    Builds the week model from classified lines.

    The accumulator owns every Week, Day and Hours it creates. The current
    week is always the last week, and the current day the last day of
    that week.

    Attributes:
        weeks: Weeks accumulated so far, in document order
        patterns: Compiled pattern set used for classification
        stats: Parse statistics updated as lines are fed
    """

    def __init__(
        self,
        patterns: Optional[TimeUsagePatterns] = None,
        logger: Optional[WorkToolsLogger] = None,
        stats: Optional[ParseStats] = None,
    ) -> None:
        self.weeks: List[Week] = []
        self.patterns = patterns or DEFAULT_PATTERNS
        self.logger = logger
        self.stats = stats if stats is not None else ParseStats()

    # ---- Feeding ----
    def feed(self, line: str, line_number: Optional[int] = None) -> LineKind:
        """
        Update the model with one line.

        Args:
            line: Line without its trailing newline
            line_number: 1-based position in the input, for error reporting

        Returns:
            The shape the line was classified as

        Raises:
            MalformedTableTaskError: If a table row is also a task definition
        """
        self.stats.lines_read += 1
        classified = classify_line(line, self.patterns)

        if classified.kind is LineKind.WEEK_HEADER:
            self._add_week(extract_week_label(classified.match))
        elif classified.kind is LineKind.TABLE_ROW:
            self._add_row(classified.match, line, line_number)
        elif classified.kind is LineKind.TASK:
            definition = extract_task_definition(line, self.patterns)
            if definition is not None:
                self._resolve_task(definition)
        else:
            self.stats.lines_skipped += 1

        return classified.kind

    def result(self) -> Optional[List[Week]]:
        """The accumulated weeks, or None when no week header was seen."""
        if not self.weeks:
            return None
        return self.weeks

    # ---- Model updates ----
    def _add_week(self, label: str) -> None:
        self.weeks.append(Week(label))
        self.stats.weeks += 1
        safe_logger(self.logger).log_debug(f"Week found: {label}")

    def _add_row(
        self, match: Match[str], line: str, line_number: Optional[int]
    ) -> None:
        if not self.weeks:
            self.stats.rows_dropped += 1
            safe_logger(self.logger).log_debug(
                "Table row before first week header dropped",
                {"line": line_number},
            )
            return

        fields = extract_row(match, line, self.patterns, line_number)
        current_week = self.weeks[-1]

        if fields.date is not None:
            current_week.days.append(Day(fields.date))
            self.stats.days += 1
        elif fields.day_range is not None:
            day = Day(fields.day_range)
            day.hours.append(Hours(RANGE_TIME, fields.duration, fields.task.text))
            current_week.days.append(day)
            self.stats.days += 1
            self.stats.hours += 1
            return

        if fields.time is not None and current_week.days:
            current_week.days[-1].hours.append(
                Hours(fields.time, fields.duration, fields.task.text)
            )
            self.stats.hours += 1

    def _resolve_task(self, definition: str) -> Optional[Hours]:
        """
        Replace the first unresolved task id contained in ``definition``.

        Only the first match in document order is updated, even when
        several entries share the same id. Containment is textual, so id
        "1" also matches the definition "12. ...".

        Returns:
            The updated entry, or None when nothing matched
        """
        for week in self.weeks:
            for day in week.days:
                for entry in day.hours:
                    if self._is_task_number(entry.task) and entry.task in definition:
                        entry.task = definition[TASK_MARKER_LENGTH:]
                        self.stats.tasks_resolved += 1
                        safe_logger(self.logger).log_debug(
                            "Task resolved", {"day": day.date, "task": entry.task}
                        )
                        return entry
        return None

    def _is_task_number(self, task: str) -> bool:
        if not self.patterns.task_number.fullmatch(task):
            return False
        return _TASK_NUMBER_MIN <= int(task) <= _TASK_NUMBER_MAX


# ----- Parsing -----
def parse_lines(
    lines: Iterable[str],
    patterns: Optional[TimeUsagePatterns] = None,
    logger: Optional[WorkToolsLogger] = None,
    stats: Optional[ParseStats] = None,
) -> Optional[List[Week]]:
    """
    Parse time log lines into weeks.

    Args:
        lines: Lines of the log; trailing newlines are stripped
        patterns: Compiled pattern set (defaults to DEFAULT_PATTERNS)
        logger: Optional logger for operation tracking
        stats: Optional stats object to fill in

    Returns:
        List of weeks, or None when the log has no week header

    Raises:
        TimeUsageParseError: On a malformed table task or undecodable line.
            No partial result is returned.
    """
    accumulator = TimeUsageAccumulator(patterns, logger, stats)

    try:
        for line_number, line in enumerate(lines, start=1):
            accumulator.feed(line.rstrip("\r\n"), line_number)
    except TimeUsageParseError as e:
        safe_logger(logger).log_error(e, {"operation": "parse_lines", "line": e.line_number})
        raise

    return accumulator.result()


def parse_text(
    text: str,
    patterns: Optional[TimeUsagePatterns] = None,
    logger: Optional[WorkToolsLogger] = None,
    stats: Optional[ParseStats] = None,
) -> Optional[List[Week]]:
    """
    Parse a whole time log held in memory. See parse_lines().

    Lines are split on line feeds only, as when reading a file, so separators
    such as U+2028 stay inside their line.
    """
    return parse_lines(io.StringIO(text, newline="\n"), patterns, logger, stats)


def parse_time_usage(
    path: Union[str, Path],
    patterns: Optional[TimeUsagePatterns] = None,
    logger: Optional[WorkToolsLogger] = None,
    stats: Optional[ParseStats] = None,
) -> Optional[List[Week]]:
    """
    Parse a time log file into weeks.

    The file is decoded as UTF-8 line by line, so a decoding failure
    reports the offending line.

    Args:
        path: Time log to read
        patterns: Compiled pattern set (defaults to DEFAULT_PATTERNS)
        logger: Optional logger for operation tracking
        stats: Optional stats object to fill in

    Returns:
        List of weeks, or None when the log has no week header

    Raises:
        InputUnavailableError: If the file cannot be opened
        DecodeFailureError: If a line is not valid UTF-8
        MalformedTableTaskError: If a table row is also a task definition
    """
    path = Path(path)
    stats = stats if stats is not None else ParseStats()

    safe_logger(logger).log_operation("parse_start", {"input": str(path)})

    try:
        handle = path.open("rb")
    except OSError as e:
        error = InputUnavailableError(f"File {path} not found", path=path)
        safe_logger(logger).log_error(error, {"operation": "open", "reason": str(e)})
        raise error from e

    with handle:
        try:
            weeks = parse_lines(_decode_lines(handle, path), patterns, logger, stats)
        except TimeUsageParseError as e:
            e.path = path
            raise

    stats.files_processed = 1
    safe_logger(logger).log_operation(
        "parse_complete", {"input": str(path), "stats": stats.summary()}
    )

    return weeks


# --- Helper ---
def _decode_lines(handle: BinaryIO, path: Path) -> Iterator[str]:
    """Yield decoded lines, failing on the first line that is not UTF-8."""
    for line_number, raw in enumerate(handle, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailureError(
                f"Line is not valid UTF-8 text: {e.reason}",
                path=path,
                line_number=line_number,
            ) from e
