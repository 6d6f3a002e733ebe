"""Drush command builder.

DrushStack mirrors how drush is invoked for this project: every command is
pointed at the Drupal root and site URI, answers yes to prompts, and takes
options/arguments queued just before it.

    >>> stack = DrushStack("/usr/local/bin/drush", Path("/srv/web"), "default")
    >>> stack.option("security-only").drush("ups").argv
    ['/usr/local/bin/drush', 'ups', '--yes', '--root=/srv/web', '--uri=default', '--security-only']
"""

from __future__ import annotations

from pathlib import Path

from .tasks.exec import ExecTask


class DrushStack:
    def __init__(self, executable: str, drupal_root: Path, uri: str = "default") -> None:
        self.executable = executable
        self.drupal_root = drupal_root
        self.uri = uri
        self._options: list[str] = []
        self._args: list[str] = []

    def option(self, name: str, value: str | None = None) -> DrushStack:
        """Queue ``--name`` or ``--name=value`` for the next command."""
        name = name.lstrip("-")
        self._options.append(f"--{name}" if value is None else f"--{name}={value}")
        return self

    def arg(self, value: str) -> DrushStack:
        """Queue a positional argument for the next command."""
        self._args.append(value)
        return self

    def args(self, values: list[str]) -> DrushStack:
        for value in values:
            self.arg(value)
        return self

    def drush(self, command: str, assume_yes: bool = True, **task_kwargs) -> ExecTask:
        """Build the task for ``drush <command>`` and reset queued options.

        Extra keyword arguments (stdin_file, stdout_file) go to ExecTask.
        """
        argv = [self.executable, command, *self._args]
        if assume_yes:
            argv.append("--yes")
        argv.extend([f"--root={self.drupal_root}", f"--uri={self.uri}"])
        argv.extend(self._options)
        self._options = []
        self._args = []
        return ExecTask(argv, name=f"drush {command}", **task_kwargs)

    def clear_cache(self) -> ExecTask:
        # Drupal 8+ only knows a full rebuild
        return self.drush("cache:rebuild")
