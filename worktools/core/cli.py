#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for worktools commands.

Functions:
    setup_logger: Initialize WorkToolsLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ParseStats: For time log parsing
    ReportStats: For report generation (TOTAL.md, time.csv)

Usage:
    from worktools.core.cli import setup_logger, ParseStats

    logger = setup_logger(log_dir, "time_calc")
    stats = ParseStats()
    weeks = parse_time_usage(path, logger=logger, stats=stats)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# --- Local imports ---
from worktools.core.logging_manager import WorkToolsLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> WorkToolsLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a WorkToolsLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'time_calc')

    Returns:
        Configured WorkToolsLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return WorkToolsLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )


@dataclass
class ParseStats(OperationStats):
    """
    Statistics for time log parsing.

    Attributes:
        lines_read: Lines consumed from the input
        weeks: Week headers recognised
        days: Days appended
        hours: Hours entries appended
        tasks_resolved: Numeric task placeholders replaced by a definition
        lines_skipped: Lines that matched no known shape
        rows_dropped: Table rows seen before any week header
    """
    lines_read: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    tasks_resolved: int = 0
    lines_skipped: int = 0
    rows_dropped: int = 0

    def summary(self) -> str:
        """Get formatted summary with parse metrics."""
        parts = [
            f"{self.lines_read} lines read",
            f"{self.weeks} weeks",
            f"{self.days} days",
            f"{self.hours} entries",
            f"{self.tasks_resolved} tasks resolved",
        ]
        if self.rows_dropped:
            parts.append(f"{self.rows_dropped} rows dropped")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)


@dataclass
class ReportStats(OperationStats):
    """
    Statistics for report generation.

    Attributes:
        weeks_reported: Weeks included in the report
        files_written: Report files written
        files_removed: Report files removed by --clean
    """
    weeks_reported: int = 0
    files_written: int = 0
    files_removed: int = 0

    def summary(self) -> str:
        """Get formatted summary with report metrics."""
        return (
            f"{self.weeks_reported} weeks reported, "
            f"{self.files_written} files written, "
            f"{self.files_removed} files removed, "
            f"{self.duration():.2f}s"
        )
