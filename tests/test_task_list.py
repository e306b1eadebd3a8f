from __future__ import annotations

from contextlib import redirect_stdout
import io
import unittest

from models import MAX_DAYS, Task
from task_list import TaskList


class TestTaskList(unittest.TestCase):
    def test_add_appends_in_order(self) -> None:
        task_list = TaskList()
        task_list.add_task("first", 3)
        task_list.add_task(" second ", 0)

        self.assertEqual([Task("first", 3), Task("second", 0)], task_list.all_tasks())
        self.assertEqual(0, task_list.min_remaining())

    def test_add_rejects_invalid_input(self) -> None:
        task_list = TaskList()
        for name, days in (("", 1), ("two words", 1), ("ok", -1)):
            with self.assertRaises(ValueError):
                task_list.add_task(name, days)
        self.assertEqual(0, len(task_list))
        self.assertIsNone(task_list.min_remaining())

    def test_add_rejects_days_beyond_limit(self) -> None:
        task_list = TaskList()
        task_list.add_task("century", MAX_DAYS)
        with self.assertRaises(ValueError):
            task_list.add_task("forever", MAX_DAYS + 1)
        with self.assertRaises(ValueError):
            task_list.add_task("forever", 10 ** 400)
        self.assertEqual([Task("century", MAX_DAYS)], task_list.all_tasks())

    def test_from_line_rejects_days_beyond_limit(self) -> None:
        self.assertEqual(Task("a", MAX_DAYS), Task.from_line(f"a {MAX_DAYS}\n"))
        self.assertIsNone(Task.from_line(f"a {MAX_DAYS + 1}"))
        self.assertIsNone(Task.from_line("a " + "9" * 400))

    def test_remove_drops_every_match(self) -> None:
        task_list = TaskList([Task("x", 1), Task("y", 2), Task("x", 3)])

        self.assertEqual(2, task_list.remove_task("x"))
        self.assertEqual([Task("y", 2)], task_list.all_tasks())

    def test_remove_unknown_leaves_list(self) -> None:
        task_list = TaskList([Task("x", 1)])

        self.assertEqual(0, task_list.remove_task("X"))
        self.assertEqual([Task("x", 1)], task_list.all_tasks())

    def test_display(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            TaskList().display()
            TaskList([Task("essay", 1), Task("lab", 0), Task("exam", 4)]).display()
        text = out.getvalue()

        self.assertIn("No tasks.", text)
        self.assertIn("1 day left", text)
        self.assertIn("4 days left", text)
        self.assertIn("due", text)


if __name__ == "__main__":
    unittest.main()
