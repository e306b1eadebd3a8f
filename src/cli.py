"""Command-line interface loop for the deadline tracker.

Every mutating command rewrites the task file before the next prompt.
"""
import logging
from typing import List
from scoring import evaluate, format_score
from storage import Storage, StorageError
from task_list import TaskList
from theme import color, TIER_COLOR, BOLD

logger = logging.getLogger(__name__)

HELP_LINES = (
    "Commands:",
    "  list                List all tasks",
    "  add                 Add a task (prompts for name and days remaining)",
    "  add <name> <days>   Shorthand add (e.g., add report 3)",
    "  <name> done         Remove every task with that name (e.g., report done)",
    "  score               Show the completion score",
    "  help                Show this help",
    "  exit                Quit",
)


def show_score(task_list: TaskList, detailed: bool = False) -> None:
    report = evaluate(task_list)
    print(f"\nCompletion score: {color(format_score(report.overall), BOLD)}")
    if detailed:
        print(f"  deadline score: {format_score(report.deadline)}")
        print(f"  task count score: {format_score(report.count)}")
    print(color(report.message, TIER_COLOR[report.tier]))


class CLI:
    def __init__(self, task_list: TaskList, storage: Storage):
        self.task_list: TaskList = task_list
        self.storage: Storage = storage

    def run(self) -> None:
        """Main REPL loop; returns on 'exit', EOF or Ctrl-C."""
        self._help()
        try:
            while True:
                line = input("\nCommand: ").strip()
                if not line:
                    continue
                if line.lower() == 'exit':
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            print()
        print("Goodbye.")

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        cmd = tokens[0].lower()
        if len(tokens) == 2 and tokens[1] == 'done':
            self._done(tokens[0])
        elif cmd == 'list' and len(tokens) == 1:
            self.task_list.display()
        elif cmd == 'score' and len(tokens) == 1:
            show_score(self.task_list, detailed=True)
        elif cmd == 'help' and len(tokens) == 1:
            self._help()
        elif cmd == 'add':
            self._cmd_add(tokens)
        else:
            print("Unknown command. Type 'help' for instructions.")

    # ---- individual command helpers ----
    def _cmd_add(self, tokens: List[str]) -> None:
        if len(tokens) == 1:
            self._add()
        elif len(tokens) == 3:
            self._add_task(tokens[1], tokens[2])
        else:
            print("Usage: add <name> <days>")

    def _done(self, name: str) -> None:
        removed = self.task_list.remove_task(name)
        if not removed:
            print(f'Task "{name}" not found.')
            return
        if self._persist():
            suffix = '' if removed == 1 else f' ({removed} entries)'
            print(f'Task "{name}" removed{suffix}.')

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print()
        for line in HELP_LINES:
            print(line)

    def _add(self) -> None:
        name = input("Task name: ").strip()
        raw_days = input("Days until due: ").strip()
        self._add_task(name, raw_days)

    def _add_task(self, name: str, raw_days: str) -> None:
        try:
            days = int(raw_days)
        except ValueError:
            print("Days must be a whole number.")
            return
        try:
            self.task_list.add_task(name, days)
        except ValueError as exc:
            print(exc)
            return
        if self._persist():
            print(f'Task "{name.strip()}" added.')

    def _persist(self) -> bool:
        try:
            self.storage.save_tasks(self.task_list.all_tasks())
        except StorageError as exc:
            logger.error("save failed: %s", exc)
            print(f"Could not save tasks: {exc}")
            return False
        return True
