"""Base class shared by all task primitives."""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger


class Task(ABC):
    """A single step: describe() for logs, run() returns an exit code."""

    name: str = "task"

    @abstractmethod
    def describe(self) -> str: ...

    @abstractmethod
    def execute(self) -> int: ...

    def run(self, dry_run: bool = False) -> int:
        if dry_run:
            logger.bind(task=self.name).info(f"[DRY-RUN] {self.describe()}")
            return 0
        return self.execute()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"
