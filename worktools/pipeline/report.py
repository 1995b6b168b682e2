#!/usr/bin/env python3
"""
report.py
-------------------
Totals reports for a parsed time log.

Reads the Week / Day / Hours model without modifying it and produces:

- a console summary (colored with click.style)
- TOTAL.md, a markdown report with per-day and per-task totals per week
- time.csv, one row per time entry

    ./
    ├── TIME_USAGE.md   <- parsed
    ├── TOTAL.md        <- render_markdown() / write_total_report()
    └── time.csv        <- write_csv_report()

Reports are staged in a temporary file next to their destination and moved
into place when complete.

Programmatic API:
    from worktools.pipeline.report import select_weeks, write_total_report
    weeks = select_weeks(parse_time_usage(path), latest=True)
    write_total_report(weeks, Path("TOTAL.md"), logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

# --- Third party imports ---
import click

# --- Local imports ---
from worktools.core.exceptions import ReportError, TemporalFileError
from worktools.core.logging_manager import WorkToolsLogger, safe_logger
from worktools.core.temporal_files import TemporalFileManager
from worktools.dataclasses.time_usage import CONTINUE_TASK, Day, Hours, Week


# ----- Constants -----
CSV_FIELDS = ["week", "date", "time", "duration", "task"]
NO_TASK_LABEL = "(no task)"


# ----- Selection -----
def select_weeks(
    weeks: Sequence[Week], latest: bool = False, count: int = 0
) -> List[Week]:
    """
    Pick the weeks to report on.

    Args:
        weeks: Parsed weeks in document order
        latest: Only the last week
        count: Only the last ``count`` weeks; 0 means all weeks

    Returns:
        Selected weeks in document order

    Raises:
        ValueError: If count is negative, or combined with latest

    Examples:
        >>> [w.label for w in select_weeks(weeks, count=2)]
        ['Week 1.6', 'Week 8.6']
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if latest and count:
        raise ValueError("latest and count are mutually exclusive")

    if latest:
        return list(weeks[-1:])
    if count:
        return list(weeks[-count:])
    return list(weeks)


# ----- Aggregation -----
def effective_tasks(
    weeks: Iterable[Week], selected: Optional[Sequence[Week]] = None
) -> Iterator[Tuple[Week, Day, Hours, str]]:
    """
    Walk all entries, resolving ``...`` to the task of the entry before it.

    A continuation with no entry before it keeps the ``...`` text.

    Args:
        weeks: Every parsed week, so a continuation at the start of a
            selected week still sees the entry before it
        selected: Only yield entries of these weeks (default: all)

    Yields:
        (week, day, entry, task) in document order
    """
    wanted = None if selected is None else {id(week) for week in selected}
    previous: Optional[str] = None
    for week in weeks:
        for day in week.days:
            for entry in day.hours:
                task = entry.task
                if task == CONTINUE_TASK and previous is not None:
                    task = previous
                previous = task
                if wanted is None or id(week) in wanted:
                    yield week, day, entry, task


@dataclass
class WeekSummary:
    """
    Totals for one week.

    Attributes:
        label: Week label ("Week 25.5")
        total: Sum of all durations in the week
        day_totals: (date, hours) per day in document order
        task_totals: Hours per task, in order of first appearance
    """

    label: str
    total: float = 0.0
    day_totals: List[Tuple[str, float]] = field(default_factory=list)
    task_totals: Dict[str, float] = field(default_factory=dict)


def build_summaries(
    weeks: Sequence[Week], all_weeks: Optional[Sequence[Week]] = None
) -> List[WeekSummary]:
    """
    Compute per-week, per-day and per-task totals.

    Args:
        weeks: Weeks to summarise
        all_weeks: Full parsed log the weeks were selected from, used to
            resolve continuations (default: weeks)
    """
    summaries: Dict[int, WeekSummary] = {}
    for week in weeks:
        summary = WeekSummary(label=week.label, total=week.total_duration())
        summary.day_totals = [(day.date, day.total_duration()) for day in week.days]
        summaries[id(week)] = summary

    for week, _day, entry, task in effective_tasks(all_weeks or weeks, weeks):
        task_totals = summaries[id(week)].task_totals
        task_totals[task] = task_totals.get(task, 0.0) + entry.duration

    return [summaries[id(week)] for week in weeks]


def format_hours(value: float) -> str:
    """Hours with two decimals, e.g. 1.25 -> '1.25', 1.0 -> '1.00'."""
    return f"{value:.2f}"


def _cell(text: str) -> str:
    """Make text safe for a markdown table cell."""
    if not text:
        return NO_TASK_LABEL
    return text.replace("|", "\\|")


# ----- Rendering -----
def render_markdown(summaries: Sequence[WeekSummary]) -> str:
    """
    Render TOTAL.md content.

    One section per week with a day table, a task table and the week
    total, followed by the grand total of all reported weeks.
    """
    lines: List[str] = ["# Total", ""]

    for summary in summaries:
        lines.extend([f"## {summary.label}", ""])

        lines.extend(["| Day | Hours |", "| --- | ----: |"])
        for date, hours in summary.day_totals:
            lines.append(f"| {_cell(date)} | {format_hours(hours)} |")
        lines.append("")

        lines.extend(["| Task | Hours |", "| ---- | ----: |"])
        for task, hours in summary.task_totals.items():
            lines.append(f"| {_cell(task)} | {format_hours(hours)} |")
        lines.append("")

        lines.extend([f"**Total:** {format_hours(summary.total)}h", ""])

    grand_total = sum(summary.total for summary in summaries)
    lines.append(f"**Grand total:** {format_hours(grand_total)}h")

    return "\n".join(lines) + "\n"


def format_console_summary(summaries: Sequence[WeekSummary]) -> List[str]:
    """Colored summary lines for terminal output."""
    out: List[str] = []
    for summary in summaries:
        out.append(click.style(summary.label, fg="cyan", bold=True))
        for date, hours in summary.day_totals:
            out.append(f"  {date:<12}{format_hours(hours):>8}h")
        for task, hours in summary.task_totals.items():
            out.append(
                f"  {click.style(task or NO_TASK_LABEL, fg='yellow')}: "
                f"{format_hours(hours)}h"
            )
        out.append(
            "  " + click.style(f"Total: {format_hours(summary.total)}h", fg="green")
        )

    grand_total = sum(summary.total for summary in summaries)
    out.append(
        click.style(f"Grand total: {format_hours(grand_total)}h", fg="green", bold=True)
    )
    return out


# ----- Writing -----
def write_total_report(
    weeks: Sequence[Week],
    output_path: Path,
    logger: Optional[WorkToolsLogger] = None,
    all_weeks: Optional[Sequence[Week]] = None,
) -> Path:
    """
    Write TOTAL.md for the given weeks.

    ``all_weeks`` is the full parsed log, see build_summaries().

    Raises:
        ReportError: If the report cannot be written
    """
    content = render_markdown(build_summaries(weeks, all_weeks))

    try:
        with TemporalFileManager(output_path.parent) as temp_manager:
            staged = temp_manager.create_temp_file(suffix=".md")
            staged.write_text(content, encoding="utf-8")
            temp_manager.commit(staged, output_path)
    except (OSError, TemporalFileError) as e:
        safe_logger(logger).log_error(e, {"operation": "write_total_report"})
        raise ReportError(f"Cannot write {output_path}: {e}") from e

    safe_logger(logger).log_operation(
        "total_report_written", {"output": str(output_path), "weeks": len(weeks)}
    )
    return output_path


def write_csv_report(
    weeks: Sequence[Week],
    output_path: Path,
    logger: Optional[WorkToolsLogger] = None,
    all_weeks: Optional[Sequence[Week]] = None,
) -> Path:
    """
    Write time.csv with one row per time entry.

    The task column holds the effective task (``...`` resolved against
    ``all_weeks`` when given, so the entry before a selection counts).

    Raises:
        ReportError: If the export cannot be written
    """
    rows = 0
    try:
        with TemporalFileManager(output_path.parent) as temp_manager:
            staged = temp_manager.create_temp_file(suffix=".csv")
            with open(staged, "w", newline="", encoding="utf-8") as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDS)
                writer.writeheader()
                for week, day, entry, task in effective_tasks(all_weeks or weeks, weeks):
                    writer.writerow(
                        {
                            "week": week.label,
                            "date": day.date,
                            "time": entry.time,
                            "duration": f"{entry.duration:g}",
                            "task": task,
                        }
                    )
                    rows += 1
            temp_manager.commit(staged, output_path)
    except (OSError, TemporalFileError) as e:
        safe_logger(logger).log_error(e, {"operation": "write_csv_report"})
        raise ReportError(f"Cannot write {output_path}: {e}") from e

    safe_logger(logger).log_operation(
        "csv_report_written", {"output": str(output_path), "rows": rows}
    )
    return output_path


def clean_reports(
    paths: Iterable[Path], logger: Optional[WorkToolsLogger] = None
) -> List[Path]:
    """
    Remove generated report files that exist.

    Returns:
        The paths that were removed

    Raises:
        ReportError: If an existing report cannot be removed
    """
    removed: List[Path] = []
    for path in paths:
        if not path.exists():
            continue
        try:
            path.unlink()
        except OSError as e:
            safe_logger(logger).log_error(e, {"operation": "clean", "file": str(path)})
            raise ReportError(f"Cannot remove {path}: {e}") from e
        removed.append(path)
        safe_logger(logger).log_info(f"Removed {path}")
    return removed
