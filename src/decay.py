"""Deadline decay: subtract elapsed days from every task, floored at zero."""
from dataclasses import dataclass, field
from typing import List, MutableSequence, Tuple
import logging

from models import Task

logger = logging.getLogger(__name__)


@dataclass
class DecayReport:
    """Outcome of one decay pass.

    ``changes`` lists every task's (name, new remaining_days) in display
    order; it is empty when nothing was updated.
    """
    updated: bool
    elapsed_days: int
    changes: List[Tuple[str, int]] = field(default_factory=list)


def apply_decay(tasks: MutableSequence[Task], elapsed_days: int) -> DecayReport:
    """Decrement every task by ``elapsed_days`` in place.

    A zero or negative delta (same day, or the clock moved backward) is a
    no-op rather than an error.
    """
    if elapsed_days <= 0:
        logger.debug("no decay applied (elapsed_days=%d)", elapsed_days)
        return DecayReport(updated=False, elapsed_days=elapsed_days)
    report = DecayReport(updated=True, elapsed_days=elapsed_days)
    for task in tasks:
        task.remaining_days = max(0, task.remaining_days - elapsed_days)
        report.changes.append((task.name, task.remaining_days))
    logger.debug("decayed %d task(s) by %d day(s)", len(tasks), elapsed_days)
    return report
