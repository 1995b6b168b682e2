"""
test_work_timer.py
------------------
Unit tests for the work timer: rounding, summary rows and the stopwatch loop.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from worktools.core.exceptions import TimerLogError
from worktools.pipeline.time_usage_parser import parse_time_usage
from worktools.pipeline.work_timer import (
    append_summary_row,
    format_hhmmss,
    format_summary_row,
    nearest_quarter_hour,
    quarter_time,
    rounded_duration,
    run_timer,
)


def _at(hour, minute, day=19, month=5):
    return datetime(2023, month, day, hour, minute)


class TestFormatting:
    """Test time formatting helpers."""

    @pytest.mark.parametrize(
        "elapsed, expected",
        [
            (timedelta(0), "00:00:00"),
            (timedelta(seconds=59), "00:00:59"),
            (timedelta(hours=1, minutes=2, seconds=3), "01:02:03"),
            (timedelta(hours=26), "26:00:00"),
        ],
    )
    def test_format_hhmmss(self, elapsed, expected):
        """Test elapsed display."""
        assert format_hhmmss(elapsed) == expected

    @pytest.mark.parametrize(
        "moment, expected",
        [
            (_at(18, 50), "18:45"),
            (_at(9, 0), "9:00"),
            (_at(9, 7), "9:00"),
            (_at(9, 8), "9:15"),
            (_at(9, 37), "9:30"),
            (_at(9, 52), "9:45"),
            (_at(9, 53), "10:00"),
            (_at(23, 58), "0:00"),
        ],
    )
    def test_quarter_time(self, moment, expected):
        """Test rounding to the nearest quarter hour."""
        assert quarter_time(moment) == expected

    @pytest.mark.parametrize(
        "minutes, expected",
        [(0, 0), (7, 0), (8, 25), (20, 25), (30, 50), (45, 75), (53, 100), (75, 25)],
    )
    def test_nearest_quarter_hour(self, minutes, expected):
        """Test minutes past the hour in hundredths."""
        assert nearest_quarter_hour(minutes) == expected

    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (60, "1h"),
            (90, "1.50h"),
            (20, "0.25h"),
            (75, "1.25h"),
            (55, "1h"),
            (0, "0h"),
            (165, "2.75h"),
        ],
    )
    def test_rounded_duration(self, minutes, expected):
        """Test duration cells."""
        assert rounded_duration(minutes) == expected


class TestSummaryRow:
    """Test the row appended to the time log."""

    def test_format_summary_row(self):
        """Test date, rounded start and rounded duration."""
        assert format_summary_row(_at(18, 50), _at(20, 5)) == "| 19.5 18:45 | 1.25h | |"

    def test_row_parses_as_dated_entry(self, write_log):
        """Test the row is read back by the parser."""
        row = format_summary_row(_at(9, 2, day=2, month=6), _at(11, 0, day=2, month=6))
        path = write_log(f"## Week 1.6 - 7.6\n{row}\n")

        (week,) = parse_time_usage(path)
        (day,) = week.days
        assert day.date == "2.6"
        assert day.hours[0].time == "9:00"
        assert day.hours[0].duration == 2.0
        assert day.hours[0].task == ""


class TestAppendSummaryRow:
    """Test appending to the time log."""

    def test_creates_file(self, tmp_path):
        """Test a missing log is created."""
        path = tmp_path / "TIME_USAGE.md"
        append_summary_row(path, "| 19.5 18:45 | 1h | |")
        assert path.read_text(encoding="utf-8") == "| 19.5 18:45 | 1h | |\n"

    def test_appends_after_newline(self, write_log):
        """Test rows are appended at the end."""
        path = write_log("## Week 25.5 - 30.5\n")
        append_summary_row(path, "| 25.5 9:00 | 1h | |")
        assert path.read_text(encoding="utf-8") == "## Week 25.5 - 30.5\n| 25.5 9:00 | 1h | |\n"

    def test_inserts_missing_newline(self, write_log):
        """Test the row starts on its own line."""
        path = write_log("## Week 25.5 - 30.5")
        append_summary_row(path, "| 25.5 9:00 | 1h | |")
        assert path.read_text(encoding="utf-8") == "## Week 25.5 - 30.5\n| 25.5 9:00 | 1h | |\n"

    def test_empty_file(self, write_log):
        """Test an empty log gets no leading newline."""
        path = write_log("")
        append_summary_row(path, "| 25.5 9:00 | 1h | |")
        assert path.read_text(encoding="utf-8") == "| 25.5 9:00 | 1h | |\n"

    def test_unwritable_path(self, tmp_path):
        """Test write failures raise TimerLogError."""
        with pytest.raises(TimerLogError, match="could not be written"):
            append_summary_row(tmp_path / "missing" / "TIME_USAGE.md", "| 1.1 9:00 | 1h | |")

    def test_logs_appended_row(self, tmp_path):
        """Test the appended row is logged."""
        logger = MagicMock()
        append_summary_row(tmp_path / "TIME_USAGE.md", "| 1.1 9:00 | 1h | |", logger)
        logger.log_operation.assert_called_once()


class TestRunTimer:
    """Test the stopwatch loop."""

    def test_runs_until_interrupted(self):
        """Test start and end come from the clock."""
        start, tick, end = _at(9, 0), _at(9, 0), _at(10, 30)
        clock = MagicMock(side_effect=[start, tick, end])
        sleep = MagicMock(side_effect=KeyboardInterrupt)

        assert run_timer(clock=clock, sleep=sleep) == (start, end)
        sleep.assert_called_once_with(1.0)

    def test_callbacks(self):
        """Test on_start and on_tick receive start and elapsed time."""
        times = [_at(9, 0), _at(9, 0), _at(9, 1), _at(9, 2)]
        clock = MagicMock(side_effect=times + [_at(9, 2)])
        sleep = MagicMock(side_effect=[None, None, KeyboardInterrupt])
        on_start = MagicMock()
        on_tick = MagicMock()

        run_timer(clock=clock, sleep=sleep, on_start=on_start, on_tick=on_tick, interval=0.5)

        on_start.assert_called_once_with(times[0])
        assert [c.args[0] for c in on_tick.call_args_list] == [
            timedelta(0),
            timedelta(minutes=1),
            timedelta(minutes=2),
        ]
        assert sleep.call_count == 3

    def test_interrupt_during_tick(self):
        """Test Ctrl+C inside the display callback also stops the timer."""
        clock = MagicMock(side_effect=[_at(9, 0), _at(9, 0), _at(9, 5)])
        on_tick = MagicMock(side_effect=KeyboardInterrupt)

        start, end = run_timer(clock=clock, on_tick=on_tick)
        assert end - start == timedelta(minutes=5)
