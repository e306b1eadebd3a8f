"""Runtime settings, built once at startup and passed to storage and the CLI.

Resolution priority for every value: explicit argument > real env var >
working directory .env file > default.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)

ENV_FILE = Path('.env')
HOME_ENV = 'DDL_TRACKER_HOME'
TASKS_FILE_ENV = 'DDL_TRACKER_TASKS_FILE'
DEFAULT_HOME = Path.home() / '.ddl-tracker'

DATE_FILE_NAME = 'date.txt'
PATH_CONFIG_FILE_NAME = 'tasks_file_path.txt'
DEFAULT_TASKS_FILE_NAME = 'tasks.txt'


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines; comments, blanks and lines without '=' are skipped."""
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as exc:
        logger.warning("ignoring unreadable %s: %s", path, exc)
        return values
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        values[k.strip()] = v.strip().strip('"').strip("'")
    return values


@dataclass
class Settings:
    """Where state lives.

    Fields:
        home: Directory holding the last-seen date and the path-config file.
        tasks_file: Task storage file; None until configured or prompted for.
    """
    home: Path
    tasks_file: Optional[Path] = None

    @property
    def date_file(self) -> Path:
        return self.home / DATE_FILE_NAME

    @property
    def path_config_file(self) -> Path:
        return self.home / PATH_CONFIG_FILE_NAME

    @property
    def default_tasks_file(self) -> Path:
        return self.home / DEFAULT_TASKS_FILE_NAME

    @classmethod
    def resolve(
        cls,
        home: Optional[Path] = None,
        tasks_file: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Path = ENV_FILE,
    ) -> "Settings":
        env = os.environ if environ is None else environ
        dotenv = read_env_file(env_file)

        def lookup(key: str) -> Optional[str]:
            return env.get(key) or dotenv.get(key) or None

        if home is None:
            raw_home = lookup(HOME_ENV)
            home = Path(raw_home).expanduser() if raw_home else DEFAULT_HOME
        if tasks_file is None:
            raw_tasks = lookup(TASKS_FILE_ENV)
            tasks_file = Path(raw_tasks).expanduser() if raw_tasks else None
        logger.debug("settings: home=%s tasks_file=%s", home, tasks_file)
        return cls(home=home, tasks_file=tasks_file)
