"""analyze:php -- static analysis of custom modules through phpqa."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..collection import TaskCollection
from ..models import Command
from ..tasks import ExecTask

if TYPE_CHECKING:
    from ..config import ProjectConfig


def phpqa_argv(config: ProjectConfig) -> list[str]:
    return [
        config.phpqa_bin,
        "--analyzedDirs", config.phpqa_analyzed_dirs,
        "--buildDir", config.phpqa_build_dir,
        "--ignoredFiles", config.phpqa_ignored_files,
        "--tools", config.phpqa_tools,
        "--execution", config.phpqa_execution,
        "--report",
    ]


def build_php(config: ProjectConfig, **kwargs) -> TaskCollection:
    collection = TaskCollection(Command.ANALYZE_PHP)
    collection.add("phpqa", ExecTask(phpqa_argv(config), cwd=config.project_dir))
    return collection
