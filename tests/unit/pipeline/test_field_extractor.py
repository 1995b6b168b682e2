"""
test_field_extractor.py
-----------------------
Unit tests for field extraction from classified lines.
"""
import pytest

from worktools.core.exceptions import MalformedTableTaskError
from worktools.pipeline.field_extractor import (
    RowFields,
    TaskCell,
    TaskKind,
    extract_duration,
    extract_row,
    extract_task,
    extract_task_definition,
    extract_week_label,
)
from worktools.pipeline.line_classifier import classify_line


def _row(line, line_number=None):
    classified = classify_line(line)
    return extract_row(classified.match, line, line_number=line_number)


class TestExtractWeekLabel:
    """Test week label extraction."""

    @pytest.mark.parametrize(
        "line, label",
        [
            ("## Week 25.5 - 30.5", "Week 25.5"),
            ("## Week 5.5.23 - 11.5.23", "Week 5.5.23"),
        ],
    )
    def test_label(self, line, label):
        """Test label excludes marker and range end."""
        assert extract_week_label(classify_line(line).match) == label


class TestExtractDuration:
    """Test duration extraction."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("| 20:00 | 1.25h | 3. |", 1.25),
            ("| 20:00 | 1h | 3. |", 1.0),
            ("| 20:00 | 10.5h | |", 10.5),
            ("| 20:00 | 2.h | |", 2.0),
            ("| 20:00 | | 3. |", 0.0),
            ("", 0.0),
        ],
    )
    def test_duration(self, line, expected):
        """Test first h-suffixed number, 0.0 when absent."""
        assert extract_duration(line) == expected

    def test_first_duration_wins(self):
        """Test only the first duration on the line counts."""
        assert extract_duration("| 9:00 | 1h | 2h |") == 1.0

    def test_matched_number_always_converts(self):
        """Test every shape the duration cell accepts reads as a float."""
        for cell, expected in (("3h", 3.0), ("3.h", 3.0), ("3.75h", 3.75), ("03h", 3.0)):
            assert extract_duration(f"| 9:00 | {cell} | |") == expected

    def test_idempotent(self):
        """Test repeated extraction yields the same value."""
        line = "| 20:00 | 1.25h | 3. |"
        assert extract_duration(line) == extract_duration(line) == 1.25


class TestExtractTask:
    """Test task cell extraction."""

    def test_definition(self):
        """Test standalone definition."""
        assert extract_task("2. Write report") == TaskCell(
            TaskKind.TASK_STRING, "2. Write report"
        )

    def test_number(self):
        """Test numeric cell keeps the id only."""
        assert extract_task("| 19.5 18:50 | 1h | 12. |") == TaskCell(
            TaskKind.TASK_NUMBER, "12"
        )

    def test_meeting(self):
        """Test meeting cell keeps the recorded spelling."""
        assert extract_task("| 9:00 | 1h | meet |") == TaskCell(TaskKind.MEETING, "Meetting")

    def test_continue(self):
        """Test continuation cell."""
        assert extract_task("| 9:00 | 1h | ... |") == TaskCell(TaskKind.TASK_CONTINUE, "...")

    def test_none(self):
        """Test rows without a task cell."""
        assert extract_task("| 9:00 | 1h | |") == TaskCell(TaskKind.NONE, "")

    def test_definition_only_for_task_string(self):
        """Test extract_task_definition ignores cells."""
        assert extract_task_definition("3. Fix build") == "3. Fix build"
        assert extract_task_definition("| | | 3. |") is None
        assert extract_task_definition("notes") is None


class TestExtractRow:
    """Test table row extraction."""

    def test_dated_row(self):
        """Test date, time, duration and task of a dated row."""
        assert _row("| 19.5 18:50 | 1h | 2. |") == RowFields(
            date="19.5",
            time="18:50",
            day_range=None,
            duration=1.0,
            task=TaskCell(TaskKind.TASK_NUMBER, "2"),
        )

    def test_timed_row(self):
        """Test timed row has no date."""
        fields = _row("| 20:00 | 5.25h | meet |")
        assert fields.date is None
        assert fields.time == "20:00"
        assert fields.duration == 5.25
        assert fields.task.text == "Meetting"

    def test_range_row(self):
        """Test day range excludes date and time."""
        fields = _row("| 10 - 30 | 2h | ... |")
        assert fields.day_range == "10 - 30"
        assert fields.date is None
        assert fields.time is None
        assert fields.duration == 2.0
        assert fields.task.kind is TaskKind.TASK_CONTINUE

    def test_row_without_duration_or_task(self):
        """Test defaults for missing cells."""
        fields = _row("| 20:00 | | |")
        assert fields.duration == 0.0
        assert fields.task == TaskCell()

    def test_definition_in_row_raises(self):
        """Test a row that is also a definition is rejected."""
        with pytest.raises(MalformedTableTaskError) as exc_info:
            _row("1. note | 10:00 |", line_number=7)
        assert exc_info.value.line_number == 7
        assert "Invalid format for task in date table" in str(exc_info.value)
