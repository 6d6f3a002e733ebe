"""Checkup commands -- security updates and the hacked/security_review modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..collection import TaskCollection
from ..drush import DrushStack
from ..models import Command
from ..tasks import RemoveTask

if TYPE_CHECKING:
    from ..config import ProjectConfig


def init_drush(config: ProjectConfig) -> DrushStack:
    """Drush pointed at the project's Drupal root and site."""
    return DrushStack(config.drush_bin, config.drupal_root, config.site)


def build_modules(config: ProjectConfig, **kwargs) -> TaskCollection:
    collection = TaskCollection(Command.CHECKUP_MODULES)
    collection.add_task_list(
        {
            "securityUpdates": init_drush(config)
            .option("security-only")
            .drush("ups"),
            "listEnabledModules": init_drush(config)
            .option("status", "enabled")
            .drush("pml"),
            "listDisabledModules": init_drush(config)
            .option("status", "disabled,not installed")
            .drush("pml"),
            "enableModules": init_drush(config)
            .args(config.checkup_modules)
            .drush("en"),
        }
    )
    return collection


def build_security(config: ProjectConfig, **kwargs) -> TaskCollection:
    collection = TaskCollection(Command.CHECKUP_SECURITY)
    collection.add_task_list(
        {
            "cacheClear": init_drush(config).clear_cache(),
            "downloadModules": init_drush(config)
            .args(config.checkup_modules)
            .drush("dl"),
            "enableModules": init_drush(config)
            .args(config.checkup_modules)
            .drush("en"),
            "hacked": init_drush(config).option("force-rebuild").drush("hlp"),
            "securityReview": init_drush(config)
            .option("full")
            .option("store")
            .drush("secrev", stdout_file=config.security_report),
        }
    )
    return collection


def build_uninstall(config: ProjectConfig, **kwargs) -> TaskCollection:
    collection = TaskCollection(Command.CHECKUP_UNINSTALL)
    collection.add_task_list(
        {
            "disableModules": None,
            "uninstallModules": init_drush(config)
            .args(config.checkup_modules)
            .drush("pm:uninstall"),
            "deleteModules": RemoveTask(
                [config.contrib_modules_dir / m for m in config.checkup_modules]
            ),
            "cacheRebuild": init_drush(config).drush("cache:rebuild"),
        }
    )
    return collection
