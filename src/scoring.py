"""Completion health score.

Two logistic sub-scores, each strictly inside (0, 100):

- count score: falls as open tasks pile up, ~50 at COUNT_MIDPOINT tasks.
- deadline score: rises with the most urgent task's remaining days,
  ~50 at DEADLINE_MIDPOINT days. An empty list scores exactly 100.

The overall score is their weighted geometric mean, deadline weighted
DEADLINE_WEIGHT and count weighted 1 - DEADLINE_WEIGHT.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional
import math

from models import MAX_DAYS, Task

COUNT_STEEPNESS = 0.8
COUNT_MIDPOINT = 5.0
DEADLINE_STEEPNESS = 1.5
DEADLINE_MIDPOINT = 2.0
DEADLINE_WEIGHT = 0.7
EMPTY_DEADLINE_SCORE = 100.0

GOOD_THRESHOLD = 80.0
PASSABLE_THRESHOLD = 60.0
SCORE_PRECISION = 1

TIER_MESSAGES: Dict[str, str] = {
    "good": "Looking good, you can relax.",
    "passable": "Passable, but handle your tasks soon.",
    "poor": "Not good, handle your tasks immediately.",
}


_LOG_100 = math.log(100.0)


def _softplus(t: float) -> float:
    """log(1 + e**t) without overflow for large |t|."""
    if t > 0:
        return t + math.log1p(math.exp(-t))
    return math.log1p(math.exp(t))


def _log_logistic(x: float) -> float:
    """log(100 / (1 + e**-x))."""
    return _LOG_100 - _softplus(-x)


def _log_count_score(n: int) -> float:
    return _log_logistic(-COUNT_STEEPNESS * (n - COUNT_MIDPOINT))


def _log_deadline_score(min_deadline: Optional[int]) -> float:
    if min_deadline is None:
        return _LOG_100
    days = min(min_deadline, MAX_DAYS)
    return _log_logistic(DEADLINE_STEEPNESS * (days - DEADLINE_MIDPOINT))


def _combine(log_deadline: float, log_count: float) -> float:
    w = DEADLINE_WEIGHT
    return math.exp(w * log_deadline + (1 - w) * log_count)


def count_score(n: int) -> float:
    return math.exp(_log_count_score(n))


def deadline_score(min_deadline: Optional[int]) -> float:
    """Score the most urgent remaining-days value; None means no tasks."""
    if min_deadline is None:
        return EMPTY_DEADLINE_SCORE
    return math.exp(_log_deadline_score(min_deadline))


def overall_score(deadline: float, count: float) -> float:
    """Weighted geometric mean of two strictly positive sub-scores."""
    return _combine(math.log(deadline), math.log(count))


def tier_for(score: float) -> str:
    if score >= GOOD_THRESHOLD:
        return "good"
    if score >= PASSABLE_THRESHOLD:
        return "passable"
    return "poor"


def format_score(score: float) -> str:
    return f"{score:.{SCORE_PRECISION}f}"


@dataclass(frozen=True)
class ScoreReport:
    count: float
    deadline: float
    overall: float

    @property
    def tier(self) -> str:
        return tier_for(self.overall)

    @property
    def message(self) -> str:
        return TIER_MESSAGES[self.tier]


def evaluate(tasks: Iterable[Task]) -> ScoreReport:
    """Score a task collection."""
    task_list = list(tasks)
    min_deadline = min((t.remaining_days for t in task_list), default=None)
    log_c = _log_count_score(len(task_list))
    log_d = _log_deadline_score(min_deadline)
    return ScoreReport(
        count=math.exp(log_c),
        deadline=deadline_score(min_deadline),
        overall=_combine(log_d, log_c),
    )
