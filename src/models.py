"""Data models for the deadline tracker.

Only exposes the Task dataclass. Tasks are stored one per line as
"<name> <remaining_days>", so a name never contains whitespace.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# about a century; keeps the deadline curve in floating-point range
MAX_DAYS = 36500

@dataclass
class Task:
    """A single tracked task.

    Fields:
        name: Non-empty, whitespace-free name. Not unique; "done" removes
            every task sharing the name.
        remaining_days: Days until due. Never negative; 0 means due today
            or overdue.
    """
    name: str
    remaining_days: int = 0

    @classmethod
    def from_line(cls, line: str) -> Optional["Task"]:
        """Parse one stored line. Returns None when the line is malformed."""
        parts = line.split()
        if len(parts) != 2:
            return None
        name, raw_days = parts
        try:
            days = int(raw_days)
        except ValueError:
            return None
        if days > MAX_DAYS:
            return None
        return cls(name=name, remaining_days=days)

    def to_line(self) -> str:
        return f"{self.name} {self.remaining_days}"

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(name={self.name}, remaining_days={self.remaining_days})"
