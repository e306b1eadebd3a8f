from __future__ import annotations

import math
import unittest

from models import Task
from scoring import (
    ScoreReport,
    TIER_MESSAGES,
    count_score,
    deadline_score,
    evaluate,
    format_score,
    overall_score,
    tier_for,
)


class TestScoring(unittest.TestCase):
    def test_count_score_inflection_and_bounds(self) -> None:
        self.assertAlmostEqual(50.0, count_score(5), places=9)
        self.assertAlmostEqual(98.2014, count_score(0), places=3)
        self.assertLess(count_score(50), 1e-10)
        self.assertGreater(count_score(50), 0.0)

    def test_count_score_strictly_decreasing(self) -> None:
        scores = [count_score(n) for n in range(30)]
        for earlier, later in zip(scores, scores[1:]):
            self.assertGreater(earlier, later)

    def test_deadline_score_inflection_and_monotone(self) -> None:
        self.assertAlmostEqual(50.0, deadline_score(2), places=9)
        scores = [deadline_score(d) for d in range(0, 20)]
        for earlier, later in zip(scores, scores[1:]):
            self.assertLess(earlier, later)
        self.assertLess(deadline_score(10), 100.0)

    def test_deadline_score_without_tasks_is_exactly_100(self) -> None:
        self.assertEqual(100.0, deadline_score(None))
        self.assertEqual(100.0, evaluate([]).deadline)

    def test_overall_is_weighted_geometric_mean(self) -> None:
        expected = 40.0 ** 0.7 * 90.0 ** 0.3
        self.assertAlmostEqual(expected, overall_score(40.0, 90.0), places=9)

    def test_empty_list_end_to_end(self) -> None:
        report = evaluate([])
        self.assertAlmostEqual(count_score(0), report.count)
        expected = math.exp(0.7 * math.log(100.0) + 0.3 * math.log(count_score(0)))
        self.assertAlmostEqual(expected, report.overall, places=9)
        self.assertEqual("99.5", format_score(report.overall))
        self.assertEqual("good", report.tier)
        self.assertEqual(TIER_MESSAGES["good"], report.message)

    def test_evaluate_uses_most_urgent_task(self) -> None:
        tasks = [Task("a", 10), Task("b", 1), Task("c", 7)]
        report = evaluate(tasks)
        self.assertAlmostEqual(deadline_score(1), report.deadline)
        self.assertAlmostEqual(count_score(3), report.count)

    def test_overall_monotone_in_count_and_deadline(self) -> None:
        by_count = [evaluate([Task(f"t{i}", 4) for i in range(n)]).overall for n in range(1, 12)]
        for earlier, later in zip(by_count, by_count[1:]):
            self.assertGreaterEqual(earlier, later)

        by_deadline = [evaluate([Task("a", d), Task("b", 20)]).overall for d in range(0, 12)]
        for earlier, later in zip(by_deadline, by_deadline[1:]):
            self.assertLessEqual(earlier, later)

    def test_tiers(self) -> None:
        self.assertEqual("good", tier_for(80.0))
        self.assertEqual("passable", tier_for(79.99))
        self.assertEqual("passable", tier_for(60.0))
        self.assertEqual("poor", tier_for(59.99))
        self.assertEqual("poor", ScoreReport(count=1.0, deadline=1.0, overall=1.0).tier)

    def test_overdue_task_scores_poor(self) -> None:
        report = evaluate([Task("late", 0)])
        self.assertEqual("poor", report.tier)

    def test_many_tasks_do_not_overflow(self) -> None:
        for n in (900, 5000):
            report = evaluate([Task(f"t{i}", 3) for i in range(n)])
            self.assertGreaterEqual(report.count, 0.0)
            self.assertLess(report.count, 1e-100)
            self.assertLess(report.overall, 1e-30)
            self.assertEqual("poor", report.tier)
        self.assertLess(count_score(10 ** 6), 1e-300)

    def test_huge_deadline_does_not_overflow(self) -> None:
        self.assertAlmostEqual(100.0, deadline_score(10 ** 400), places=9)
        report = evaluate([Task("far", 10 ** 400)])
        self.assertAlmostEqual(100.0, report.deadline, places=9)
        self.assertEqual("good", report.tier)


if __name__ == "__main__":
    unittest.main()
