"""
test_patterns.py
----------------
Unit tests for the compiled time log patterns.

Each pattern is checked against the line shapes it must accept and the
near misses it must reject.
"""
import re

import pytest

from worktools.utils.patterns import DEFAULT_PATTERNS, TimeUsagePatterns


class TestWeekPattern:
    """Test the week header pattern."""

    @pytest.mark.parametrize(
        "line, label",
        [
            ("## Week 25.5 - 30.5", "Week 25.5"),
            ("## Week 5.5.23 - 30.5.23", "Week 5.5.23"),
            ("## Week 25.05.23 - 30.5", "Week 25.05.23"),
            ("## Week 1.6-7.6", "Week 1.6"),
        ],
    )
    def test_valid_headers(self, line, label):
        """Test label captured without heading marker or range end."""
        match = DEFAULT_PATTERNS.week.search(line)
        assert match is not None
        assert match.group("label") == label

    @pytest.mark.parametrize(
        "line",
        [
            "## Week 2.5",
            "## Week 25.5.23",
            "## Week 5.05.23",
            "# Week 25.5 - 30.5",
            "Notes ## Week 25.5 - 30.5",
            "## week 25.5 - 30.5",
        ],
    )
    def test_invalid_headers(self, line):
        """Test headers missing the range end or the marker are rejected."""
        assert DEFAULT_PATTERNS.week.search(line) is None


class TestDayAndTimePattern:
    """Test the table row pattern."""

    def test_date_and_time(self):
        """Test dated row captures date and time."""
        match = DEFAULT_PATTERNS.day_and_time.search("| 19.5 18:50 | 1h | 2. |")
        assert match.group("date") == "19.5"
        assert match.group("time") == "18:50"
        assert match.group("range") is None

    def test_time_only(self):
        """Test timed row without date."""
        match = DEFAULT_PATTERNS.day_and_time.search("| 20:00 | 5.25h | 3. |")
        assert match.group("time") == "20:00"
        assert match.group("date") is None
        assert match.group("range") is None

    def test_single_digit_hour(self):
        """Test 1-digit hour is accepted."""
        match = DEFAULT_PATTERNS.day_and_time.search("| 15.5 9:00 | 2h | |")
        assert match.group("date") == "15.5"
        assert match.group("time") == "9:00"

    def test_day_range(self):
        """Test day range row."""
        match = DEFAULT_PATTERNS.day_and_time.search("| 10 - 30 |  |")
        assert match.group("range") == "10 - 30"
        assert match.group("date") is None
        assert match.group("time") is None

    def test_empty_row(self):
        """Test empty cells are not a row."""
        assert DEFAULT_PATTERNS.day_and_time.search("|  |  |  |") is None

    def test_duration_is_not_a_date(self):
        """Test a duration in front of the time is rejected."""
        assert DEFAULT_PATTERNS.day_and_time.search("| 12.5h 18:30 | | |") is None

    def test_single_digit_minute_rejected(self):
        """Test minutes must have two digits."""
        assert DEFAULT_PATTERNS.day_and_time.search("| 9:5 | 1h | |") is None


class TestDurationPattern:
    """Test the duration pattern."""

    @pytest.mark.parametrize(
        "text, hours",
        [
            ("| 1h |", "1"),
            ("|1.5h|", "1.5"),
            ("|    1.25h|", "1.25"),
            ("100h", "100"),
            ("10.25h", "10.25"),
        ],
    )
    def test_matches(self, text, hours):
        """Test hours captured."""
        assert DEFAULT_PATTERNS.duration.search(text).group("hours") == hours

    @pytest.mark.parametrize("text", ["| h |", ""])
    def test_no_match(self, text):
        """Test no number before h."""
        assert DEFAULT_PATTERNS.duration.search(text) is None


class TestTaskPattern:
    """Test the task pattern."""

    def test_definition(self):
        """Test standalone definition captured whole."""
        match = DEFAULT_PATTERNS.task.search("1. test")
        assert match.group("definition") == "1. test"

    def test_number_cell(self):
        """Test numeric task cell."""
        assert DEFAULT_PATTERNS.task.search("| 92. |").group("number") == "92"

    def test_meeting_cell(self):
        """Test meeting cell."""
        assert DEFAULT_PATTERNS.task.search("| meet|").group("meeting") == "meet"

    def test_continue_cell(self):
        """Test continuation cell."""
        assert DEFAULT_PATTERNS.task.search("|  ...  |").group("continue") == "..."

    @pytest.mark.parametrize("text", ["...", "| 1. ", "Some random text", " 1. indented"])
    def test_no_match(self, text):
        """Test bare markers and unclosed cells are rejected."""
        assert DEFAULT_PATTERNS.task.search(text) is None


class TestTimeUsagePatterns:
    """Test pattern set construction."""

    def test_default_patterns_compiled(self):
        """Test every default pattern is compiled."""
        for pattern in (
            DEFAULT_PATTERNS.week,
            DEFAULT_PATTERNS.day_and_time,
            DEFAULT_PATTERNS.duration,
            DEFAULT_PATTERNS.task,
            DEFAULT_PATTERNS.task_number,
        ):
            assert isinstance(pattern, re.Pattern)

    def test_patterns_are_frozen(self):
        """Test the shared pattern set cannot be reassigned."""
        with pytest.raises(AttributeError):
            DEFAULT_PATTERNS.week = re.compile("x")

    def test_custom_week_pattern(self):
        """Test overriding one pattern keeps the others."""
        patterns = TimeUsagePatterns.compile(week=r"^### (?P<label>Sprint \d+)")
        assert patterns.week.search("### Sprint 4").group("label") == "Sprint 4"
        assert patterns.duration.pattern == DEFAULT_PATTERNS.duration.pattern

    def test_invalid_pattern_raises(self):
        """Test invalid regex is reported."""
        with pytest.raises(re.error):
            TimeUsagePatterns.compile(week="(unclosed")
