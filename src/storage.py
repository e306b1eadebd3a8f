"""Persistence helpers for tasks, the last-seen date and the task-file path.

Every path comes from the Settings object handed to Storage. Loading never
raises: missing or unreadable files load as an empty list, "today", or no
path, with a warning for anything other than a missing file. Failed writes
raise StorageError.
"""
from datetime import date
from pathlib import Path
from typing import List, Optional
import logging

from dates import format_date, parse_date
from models import Task
from settings import Settings

logger = logging.getLogger(__name__)


class StorageError(OSError):
    """A state file could not be written."""


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as exc:
        raise StorageError(f"cannot write {path}: {exc.strerror or exc}") from exc


def _read_lines(path: Path) -> List[bytes]:
    """Raw lines of ``path``; empty, with a warning, when it cannot be read."""
    try:
        with open(path, 'rb') as f:
            return f.readlines()
    except OSError as exc:
        logger.warning("cannot read %s: %s", path, exc.strerror or exc)
        return []


def _decode(path: Path, lineno: int, raw: bytes) -> Optional[str]:
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        logger.warning("%s:%d: skipping line that is not valid UTF-8", path, lineno)
        return None


def _read_first_line(path: Path) -> str:
    if not path.exists():
        return ''
    lines = _read_lines(path)
    if not lines:
        return ''
    return (_decode(path, 1, lines[0]) or '').strip()


class Storage:
    def __init__(self, settings: Settings):
        self.settings = settings

    # -------------------- tasks --------------------
    def load_tasks(self) -> List[Task]:
        """Load tasks in file order.

        Missing file -> empty list. Malformed or undecodable lines are
        skipped with a warning; negative deadlines are clamped to 0.
        """
        path = self.settings.tasks_file
        tasks: List[Task] = []
        if path is None or not path.exists():
            logger.debug("no task file at %s", path)
            return tasks
        for lineno, raw in enumerate(_read_lines(path), start=1):
            line = _decode(path, lineno, raw)
            if line is None or not line.strip():
                continue
            task = Task.from_line(line)
            if task is None:
                logger.warning("%s:%d: skipping malformed task line %r", path, lineno, line.rstrip('\r\n'))
                continue
            if task.remaining_days < 0:
                logger.warning("%s:%d: negative deadline for %s clamped to 0", path, lineno, task.name)
                task.remaining_days = 0
            tasks.append(task)
        return tasks

    def save_tasks(self, tasks: List[Task]) -> None:
        """Rewrite the whole task file."""
        path = self.settings.tasks_file
        if path is None:
            raise StorageError("no task file configured")
        _write_text(path, ''.join(task.to_line() + '\n' for task in tasks))

    # -------------------- last-seen date --------------------
    def load_last_date(self, today: date) -> date:
        """Stored date, or ``today`` when absent or unreadable."""
        raw = _read_first_line(self.settings.date_file)
        if not raw:
            return today
        parsed = parse_date(raw)
        if parsed is None:
            logger.warning("unreadable date %r in %s; assuming today", raw, self.settings.date_file)
            return today
        return parsed

    def save_date(self, d: date) -> None:
        _write_text(self.settings.date_file, format_date(d))

    # -------------------- task-file path --------------------
    def load_tasks_path(self) -> Optional[Path]:
        raw = _read_first_line(self.settings.path_config_file)
        return Path(raw).expanduser() if raw else None

    def save_tasks_path(self, path: Path) -> None:
        _write_text(self.settings.path_config_file, str(path))
