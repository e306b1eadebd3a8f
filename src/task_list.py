"""Task list logic: ordered task sequence, mutation and rendering.

Insertion order is the display order. Names are not unique keys for
storage, but removal matches by exact name and drops every match.
"""
from typing import Iterable, Iterator, List, Optional
from models import MAX_DAYS, Task
from theme import color, NAME_COLOR, DUE_COLOR, DAYS_COLOR, EMPTY_COLOR, BOLD


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- queries --------------------
    def all_tasks(self) -> List[Task]:
        return list(self.tasks)

    def min_remaining(self) -> Optional[int]:
        return min((t.remaining_days for t in self.tasks), default=None)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # -------------------- task operations --------------------
    def add_task(self, name: str, remaining_days: int) -> Task:
        name = name.strip()
        if not name:
            raise ValueError("Task name required.")
        if any(ch.isspace() for ch in name):
            raise ValueError("Task name must not contain spaces.")
        if remaining_days < 0:
            raise ValueError("Days remaining must not be negative.")
        if remaining_days > MAX_DAYS:
            raise ValueError(f"Days remaining must be at most {MAX_DAYS}.")
        task = Task(name=name, remaining_days=remaining_days)
        self.tasks.append(task)
        return task

    def remove_task(self, name: str) -> int:
        """Remove every task named ``name``; return how many were removed."""
        kept = [t for t in self.tasks if t.name != name]
        removed = len(self.tasks) - len(kept)
        self.tasks = kept
        return removed

    # -------------------- display --------------------
    def display(self) -> None:
        if not self.tasks:
            print(color("No tasks.", EMPTY_COLOR))
            return
        print(color("Tasks:", BOLD))
        width = max(len(t.name) for t in self.tasks)
        for task in self.tasks:
            print(self._format_task(task, width))

    @staticmethod
    def _format_task(task: Task, width: int) -> str:
        name = color(task.name.ljust(width), NAME_COLOR)
        if task.remaining_days == 0:
            days = color("due", DUE_COLOR, BOLD)
        else:
            unit = "day" if task.remaining_days == 1 else "days"
            days = color(f"{task.remaining_days} {unit} left", DAYS_COLOR)
        return f"  {name}  {days}"

    def __str__(self) -> str:
        return f'{len(self.tasks)} tasks'
