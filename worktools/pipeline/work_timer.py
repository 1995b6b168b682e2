#!/usr/bin/env python3
"""
work_timer.py
-------------------
A stopwatch that logs the session to the time log.

The timer runs in the foreground, showing elapsed time, until interrupted
with Ctrl+C. It then appends a single table row to the time log:

    | 19.5 18:45 | 1.25h | |

The start time is rounded to the nearest quarter hour and the duration to
the nearest quarter of an hour, so the row has the same shape as
hand-written rows and is read back by the parser as a dated entry. The
task cell is left empty to be filled in by hand.

Programmatic API:
    from worktools.pipeline.work_timer import run_timer, format_summary_row
    start, end = run_timer()
    append_summary_row(Path("TIME_USAGE.md"), format_summary_row(start, end))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, Tuple

# --- Local imports ---
from worktools.core.exceptions import TimerLogError
from worktools.core.logging_manager import WorkToolsLogger, safe_logger


# ----- Formatting -----
def format_hhmmss(elapsed: timedelta) -> str:
    """
    Format elapsed time as HH:MM:SS.

    Examples:
        >>> format_hhmmss(timedelta(hours=1, minutes=2, seconds=3))
        '01:02:03'
    """
    total = max(int(elapsed.total_seconds()), 0)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def quarter_time(moment: datetime) -> str:
    """
    Clock time rounded to the nearest quarter hour.

    Minutes past 52 roll over to the next hour (23 wraps to 0).

    Examples:
        >>> quarter_time(datetime(2023, 5, 19, 18, 50))
        '18:45'
        >>> quarter_time(datetime(2023, 5, 19, 9, 53))
        '10:00'
    """
    minute = int((moment.minute + 7.5) / 15) * 15 % 60
    hour = moment.hour
    if moment.minute > 52:
        hour = 0 if hour == 23 else hour + 1
    return f"{hour}:{minute:02d}"


def nearest_quarter_hour(minutes: int) -> int:
    """
    Minutes past the hour rounded to a quarter, in hundredths of an hour.

    Returns one of 0, 25, 50, 75, 100.
    """
    fraction = (minutes % 60) / 60
    quarters = int((fraction + 0.125) * 4)
    return quarters * 100 // 4


def rounded_duration(minutes: int) -> str:
    """
    Duration cell for a number of minutes.

    Examples:
        >>> rounded_duration(60)
        '1h'
        >>> rounded_duration(90)
        '1.50h'
        >>> rounded_duration(20)
        '0.25h'
    """
    hundredths = nearest_quarter_hour(minutes)
    whole = minutes // 60 + hundredths // 100
    if hundredths % 100 == 0:
        return f"{whole}h"
    return f"{whole}.{hundredths % 100}h"


def format_summary_row(start: datetime, end: datetime) -> str:
    """
    Time log row for a timer session.

    Examples:
        >>> format_summary_row(datetime(2023, 5, 19, 18, 50), datetime(2023, 5, 19, 20, 5))
        '| 19.5 18:45 | 1.25h | |'
    """
    minutes = int((end - start).total_seconds() // 60)
    first_cell = f"{start.day}.{start.month} {quarter_time(start)}"
    return f"| {first_cell} | {rounded_duration(minutes)} | |"


# ----- Time log -----
def _ends_with_newline(path: Path) -> bool:
    with open(path, "rb") as f:
        f.seek(-1, 2)
        return f.read(1) == b"\n"


def append_summary_row(
    path: Path, row: str, logger: Optional[WorkToolsLogger] = None
) -> Path:
    """
    Append a row to the time log, creating the file if needed.

    A newline is inserted first when the file does not end with one, so
    the row always starts on its own line.

    Raises:
        TimerLogError: If the file cannot be written
    """
    try:
        needs_newline = (
            path.exists() and path.stat().st_size > 0 and not _ends_with_newline(path)
        )
        with open(path, "a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(f"{row}\n")
    except OSError as e:
        safe_logger(logger).log_error(e, {"operation": "append_summary_row", "file": str(path)})
        raise TimerLogError(f"File {path} could not be written: {e}") from e

    safe_logger(logger).log_operation("timer_row_appended", {"file": str(path), "row": row})
    return path


# ----- Stopwatch -----
def run_timer(
    clock: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], None] = time.sleep,
    on_start: Optional[Callable[[datetime], None]] = None,
    on_tick: Optional[Callable[[timedelta], None]] = None,
    interval: float = 1.0,
) -> Tuple[datetime, datetime]:
    """
    Run until interrupted with Ctrl+C.

    Args:
        clock: Source of the current time
        sleep: Called with ``interval`` between ticks
        on_start: Called once with the start time
        on_tick: Called with the elapsed time on every tick
        interval: Seconds between ticks

    Returns:
        (start, end) of the session
    """
    start = clock()
    if on_start is not None:
        on_start(start)
    try:
        while True:
            if on_tick is not None:
                on_tick(clock() - start)
            sleep(interval)
    except KeyboardInterrupt:
        pass
    return start, clock()
