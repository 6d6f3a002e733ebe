"""scaffold -- build settings.php and settings.local.php from templates.

Files under scaffold/:
    tpl.settings.local.php -- copied verbatim to sites/<site>/settings.local.php
    tpl.settings.php       -- appended to the pristine settings.php
    origin.settings.php    -- pristine copy of the site's settings.php, taken
                              on the first run so reruns never append twice
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..collection import TaskCollection
from ..models import (
    SETTINGS_READONLY_MODE,
    SETTINGS_WRITABLE_MODE,
    SITE_DIR_MODE,
    Command,
)
from ..tasks import ChmodTask, ConcatTask, CopyTask

if TYPE_CHECKING:
    from ..config import ProjectConfig

log = logger.bind(task="scaffold")

NO_SITE_WARNING = "No website found! You have to copy Drupal codebase in /web folder."


def build(config: ProjectConfig, dry_run: bool = False, **kwargs) -> TaskCollection | None:
    """Return the scaffold collection, or None when there is no site directory."""
    base = config.site_dir
    scaffold = config.scaffold_dir

    if not base.exists():
        log.warning(NO_SITE_WARNING)
        return None

    settings_local_source = scaffold / "tpl.settings.local.php"
    settings_origin_copy = scaffold / "origin.settings.php"
    settings_local_destination = base / "settings.local.php"
    settings_file = base / "settings.php"
    settings_source_append = scaffold / "tpl.settings.php"

    if not settings_origin_copy.exists():
        # Taken now, before settings.php gets rewritten by the collection
        code = CopyTask(settings_file, settings_origin_copy).run(dry_run=dry_run)
        if code != 0:
            log.warning(f"Could not keep a pristine copy of {settings_file}")

    collection = TaskCollection(Command.SCAFFOLD)
    collection.add_task_list(
        {
            "add-settings-local-php": CopyTask(
                settings_local_source, settings_local_destination
            ),
            "set-permission-default": ChmodTask(base, SITE_DIR_MODE),
            "write-permission-settings-php": ChmodTask(
                settings_file, SETTINGS_WRITABLE_MODE
            ),
            "append-settings-php": ConcatTask(
                [settings_origin_copy, settings_source_append], settings_file
            ),
            "read-permission-settings-php": ChmodTask(
                settings_file, SETTINGS_READONLY_MODE
            ),
        }
    )
    return collection
