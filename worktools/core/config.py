#!/usr/bin/env python3
"""
config.py
--------------------
Configuration loading for the worktools commands.

Settings default to the constants in worktools.core.paths and can be
overridden by an optional YAML file (worktools.yaml by default):

    time_usage: notes/TIME_USAGE.md
    total_report: reports/TOTAL.md
    csv_report: reports/time.csv
    timer_log: notes/TIME_USAGE.md
    log_dir: ~/.cache/worktools/logs

Relative paths in the file are kept relative, so they resolve against the
directory the command runs in. A leading ``~`` is expanded.

Usage:
    from worktools.core.config import load_settings

    settings = load_settings(Path("worktools.yaml"))
    weeks = parse_time_usage(settings.time_usage)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from worktools.core.exceptions import ConfigError
from worktools.core.paths import (
    CONFIG_FILE,
    CSV_FILE,
    LOG_DIR,
    TIME_USAGE_FILE,
    TIMER_LOG_FILE,
    TOTAL_FILE,
)


@dataclass(frozen=True)
class Settings:
    """
    Resolved file locations used by the commands.

    Attributes:
        time_usage: Time log read by time-calc and show
        total_report: Markdown totals report written by time-calc
        csv_report: CSV export written by time-calc
        timer_log: File the work timer appends its summary row to
        log_dir: Base directory for log files
    """

    time_usage: Path = TIME_USAGE_FILE
    total_report: Path = TOTAL_FILE
    csv_report: Path = CSV_FILE
    timer_log: Path = TIMER_LOG_FILE
    log_dir: Path = LOG_DIR

    @classmethod
    def keys(cls) -> list[str]:
        """Configuration keys accepted in the YAML file."""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, str]:
        return {key: str(getattr(self, key)) for key in self.keys()}


def _coerce_overrides(data: Dict[Any, Any], source: Path) -> Dict[str, Path]:
    """Validate raw YAML content and convert values to paths."""
    allowed = Settings.keys()
    overrides: Dict[str, Path] = {}

    for key, value in data.items():
        if key not in allowed:
            raise ConfigError(
                f"Unknown configuration key {key!r} in {source} "
                f"(expected one of: {', '.join(allowed)})"
            )
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(
                f"Configuration key {key!r} in {source} must be a non-empty path string"
            )
        overrides[key] = Path(value.strip()).expanduser()

    return overrides


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML file, falling back to defaults.

    Args:
        path: Configuration file. Defaults to worktools.yaml in the
            working directory. A missing file yields default settings.

    Returns:
        Settings with file overrides applied

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, is not a
            mapping, or contains unknown keys or non-string values
    """
    config_path = Path(path) if path is not None else CONFIG_FILE

    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    # Empty file
    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {config_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )

    return replace(Settings(), **_coerce_overrides(data, config_path))
