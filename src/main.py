"""Main entry point for the deadline tracker.

Startup: resolve settings, apply elapsed-day decay, restamp the last-seen
date, show the score, then hand over to the command loop.
"""
from datetime import date
from pathlib import Path
from typing import Optional, Tuple
import logging
import sys

import click

from cli import CLI, show_score
from dates import current_date, days_between
from decay import DecayReport, apply_decay
from settings import Settings
from storage import Storage, StorageError
from task_list import TaskList

logger = logging.getLogger(__name__)


def resolve_tasks_file(settings: Settings, storage: Storage) -> Path:
    """Fill in settings.tasks_file, prompting on first run."""
    if settings.tasks_file is None:
        settings.tasks_file = storage.load_tasks_path()
    if settings.tasks_file is None:
        click.echo("First run: choose where to keep your task file.")
        raw = click.prompt("Task file path", default=str(settings.default_tasks_file))
        settings.tasks_file = Path(raw).expanduser()
        try:
            storage.save_tasks_path(settings.tasks_file)
        except StorageError as exc:
            logger.error("%s", exc)
            click.echo(f"Could not save task file path: {exc}")
    logger.debug("using task file %s", settings.tasks_file)
    return settings.tasks_file


def start(settings: Settings, storage: Storage, today: Optional[date] = None) -> Tuple[TaskList, DecayReport]:
    """Load tasks, decay them by the days elapsed since the last run, persist.

    The last-seen date is restamped on every run, decayed or not, and is
    written before the tasks so a failed task write never decays twice.
    """
    today = today or current_date()
    tasks = storage.load_tasks()
    elapsed = days_between(storage.load_last_date(today), today)
    logger.debug("%d day(s) since last run", elapsed)
    report = apply_decay(tasks, elapsed)
    try:
        storage.save_date(today)
    except StorageError as exc:
        logger.error("%s", exc)
        print(f"Could not save state: {exc}")
        return TaskList(tasks), report
    if report.updated:
        try:
            storage.save_tasks(tasks)
        except StorageError as exc:
            logger.error("%s", exc)
            print(f"Could not save tasks: {exc}")
    return TaskList(tasks), report


def print_decay_report(report: DecayReport) -> None:
    if not report.updated:
        print("Date unchanged or moved backward; deadlines not updated.")
        return
    unit = "day" if report.elapsed_days == 1 else "days"
    print(f"{report.elapsed_days} {unit} passed, updating deadlines...")
    for name, remaining in report.changes:
        print(f"  {name}: {remaining} left")


@click.command()
@click.option('--home', type=click.Path(file_okay=False, path_type=Path),
              help='Directory for the last-seen date and task-file path.')
@click.option('--tasks-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Task file to use (skips the first-run prompt).')
@click.option('-v', '--verbose', is_flag=True, help='Debug logging on stderr.')
def main(home: Optional[Path], tasks_file: Optional[Path], verbose: bool) -> None:
    """Track task deadlines and a completion health score."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    settings = Settings.resolve(home=home, tasks_file=tasks_file)
    storage = Storage(settings)
    resolve_tasks_file(settings, storage)
    task_list, report = start(settings, storage)
    print_decay_report(report)
    show_score(task_list)
    CLI(task_list, storage).run()

if __name__ == "__main__":
    main()
