"""Task collection -- runs named steps in order, stopping on first failure."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from loguru import logger

from .errors import TaskCollectionError
from .models import CollectionResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .tasks import Task

log = logger.bind(task="collection")


class TaskCollection:
    """Ordered, named steps for one command.

    A step registered as None is a declared placeholder: it shows up in
    names() and in the result's skipped list but never runs.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._steps: dict[str, Task | None] = {}

    def add(self, name: str, task: Task | None) -> TaskCollection:
        if name in self._steps:
            raise TaskCollectionError(f"Duplicate step '{name}' in {self.name}")
        self._steps[name] = task
        return self

    def add_task_list(self, tasks: Mapping[str, Task | None]) -> TaskCollection:
        for name, task in tasks.items():
            self.add(name, task)
        return self

    def names(self) -> list[str]:
        return list(self._steps)

    def get(self, name: str) -> Task | None:
        return self._steps[name]

    def __len__(self) -> int:
        return len(self._steps)

    def run(self, dry_run: bool = False) -> CollectionResult:
        """Run every step in order.

        The first step returning a non-zero exit code (or raising OSError)
        ends the run; later steps are left untouched.
        """
        result = CollectionResult()
        prefix = " (dry-run)" if dry_run else ""
        log.info(f"Starting {self.name}{prefix}: {len(self)} steps")

        for step, task in self._steps.items():
            step_log = log.bind(task=step)
            if task is None:
                step_log.debug("No task declared, skipping")
                result.skipped.append(step)
                click.echo(f"  SKIP {step}")
                continue

            step_log.debug(task.describe())
            try:
                code = task.run(dry_run=dry_run)
            except OSError as e:
                step_log.error(f"{step} raised: {e}")
                code = 1

            if code != 0:
                result.failed = step
                result.exit_code = code
                click.echo(f"  FAIL {step} (exit {code})")
                remaining = len(self) - len(result.completed) - len(result.skipped) - 1
                if remaining:
                    log.warning(f"Aborting {self.name}: {remaining} steps not run")
                return result

            result.completed.append(step)
            click.echo(f"  OK {step}{prefix}")

        log.info(f"Finished {self.name}: {len(result.completed)} steps completed")
        return result
