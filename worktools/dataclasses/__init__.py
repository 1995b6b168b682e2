"""
dataclasses package
-------------------
Dataclass definitions for the weekly time log model.

- Week: A ``## Week ...`` section with its days
- Day: A dated (or day range) table row with its entries
- Hours: A single time entry with duration and task
"""
from worktools.dataclasses.time_usage import Day, Hours, Week

__all__ = ["Day", "Hours", "Week"]
