"""
conftest.py
-----------
Shared pytest fixtures for worktools tests.

Provides fixtures for:
- Sample time log files
- Temporary working directories
- Click test runner
"""
import pytest
from pathlib import Path

from click.testing import CliRunner


# ----- Path Fixtures -----

@pytest.fixture
def test_data_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_log_path(test_data_dir):
    """Two-week time log with numeric tasks, meetings, continuations and a day range."""
    return test_data_dir / "TIME_USAGE.md"


@pytest.fixture
def write_log(tmp_path):
    """Factory writing time log content to a temporary file."""
    def _write(content: str, name: str = "TIME_USAGE.md") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# ----- Sample Content Fixtures -----

@pytest.fixture
def minimal_log_content():
    """Single week, single dated row, task defined after use."""
    return "## Week 25.5 - 30.5\n| 19.5 18:50 | 1h | 2. |\n2. Write report\n"


# ----- CLI Fixtures -----

@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def cli_base_args(tmp_path):
    """Global CLI options isolating logs and configuration in tmp_path."""
    return [
        "--log-dir", str(tmp_path / "logs"),
        "--config", str(tmp_path / "worktools.yaml"),
    ]
