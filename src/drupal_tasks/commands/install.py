"""install:database -- reload the site database from a SQL dump."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..collection import TaskCollection
from ..errors import ConfigError
from ..models import Command
from .checkup import init_drush

if TYPE_CHECKING:
    from ..config import ProjectConfig

log = logger.bind(task="install")


def resolve_dump_file(dump_file: str | Path, config: ProjectConfig) -> Path:
    """Find the dump as given, falling back to the backups directory.

    Raises ConfigError if neither location has it.
    """
    candidate = Path(dump_file).expanduser()
    if candidate.is_file():
        return candidate.resolve()
    if not candidate.is_absolute():
        in_backups = config.backups_dir / candidate
        if in_backups.is_file():
            log.debug(f"Using dump from backups dir: {in_backups}")
            return in_backups.resolve()
    raise ConfigError(
        f"Database dump not found: {dump_file} (also looked in {config.backups_dir})"
    )


def build_database(config: ProjectConfig, dump_file: str | Path, **kwargs) -> TaskCollection:
    dump = resolve_dump_file(dump_file, config)
    collection = TaskCollection(Command.INSTALL_DATABASE)
    collection.add_task_list(
        {
            "sqlDrop": init_drush(config).drush("sql:drop"),
            "sqlCli": init_drush(config).drush("sql:cli", stdin_file=dump),
            "cacheClear": init_drush(config).clear_cache(),
        }
    )
    return collection
