#!/usr/bin/env python3
"""
paths.py
-------------------
Default path constants for the worktools commands.

The tools operate on a time log kept in the current working directory,
next to the reports they generate:

    ./
    ├── TIME_USAGE.md      # Hand-written weekly time log
    ├── TOTAL.md           # Generated totals report
    ├── time.csv           # Generated CSV export
    ├── worktools.yaml     # Optional configuration overrides
    └── .worktools/
        └── logs/          # Application logs

All paths are relative so they resolve against the directory the command
runs in. Any of them can be overridden through worktools.yaml or command
options (see worktools.core.config).
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- Time log -----
TIME_USAGE_FILE = Path("TIME_USAGE.md")

# ----- Generated reports -----
TOTAL_FILE = Path("TOTAL.md")
CSV_FILE = Path("time.csv")

# ----- Work timer -----
TIMER_LOG_FILE = TIME_USAGE_FILE

# ----- Configuration & Logs -----
CONFIG_FILE = Path("worktools.yaml")
LOG_DIR = Path(".worktools") / "logs"
