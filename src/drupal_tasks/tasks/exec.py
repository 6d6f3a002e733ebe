"""Subprocess step -- runs drush, phpqa and friends without a shell."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

import click
from loguru import logger

from ..models import EXIT_NOT_FOUND
from .base import Task

log = logger.bind(task="exec")


class ExecTask(Task):
    """Run ``argv`` and report its exit code.

    Stdout is echoed once the process exits; stderr stays captured so the
    tail can be logged on failure.

    ``stdin_file`` is opened and fed to the process, which is how a dump
    gets into ``drush sql:cli``. ``stdout_file`` receives stdout instead of
    the captured buffer; parent directories are created on demand.
    """

    def __init__(
        self,
        argv: list[str],
        name: str | None = None,
        cwd: Path | None = None,
        stdin_file: Path | None = None,
        stdout_file: Path | None = None,
    ) -> None:
        if not argv:
            raise ValueError("ExecTask needs at least an executable")
        self.argv = list(argv)
        self.name = name or Path(argv[0]).name
        self.cwd = cwd
        self.stdin_file = stdin_file
        self.stdout_file = stdout_file
        self.stdout = ""
        self.stderr = ""

    def describe(self) -> str:
        cmd = shlex.join(self.argv)
        if self.stdin_file is not None:
            cmd += f" < {self.stdin_file}"
        if self.stdout_file is not None:
            cmd += f" > {self.stdout_file}"
        return cmd

    def execute(self) -> int:
        if self.stdin_file is not None and not self.stdin_file.is_file():
            log.error(f"Input file not found: {self.stdin_file}")
            return 1

        if self.cwd is not None and not Path(self.cwd).is_dir():
            log.error(f"Working directory not found: {self.cwd}")
            return 1

        log.info(f"Running: {self.describe()}")
        stdin = open(self.stdin_file, "rb") if self.stdin_file else None
        try:
            if self.stdout_file is not None:
                self.stdout_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self.stdout_file, "w") as out:
                    result = subprocess.run(
                        self.argv,
                        cwd=self.cwd,
                        stdin=stdin,
                        stdout=out,
                        stderr=subprocess.PIPE,
                        text=True,
                    )
            else:
                result = subprocess.run(
                    self.argv,
                    cwd=self.cwd,
                    stdin=stdin,
                    capture_output=True,
                    text=True,
                )
        except FileNotFoundError:
            log.error(f"Executable not found: {self.argv[0]}")
            return EXIT_NOT_FOUND
        finally:
            if stdin is not None:
                stdin.close()

        self.stdout = result.stdout or ""
        self.stderr = result.stderr or ""

        if self.stdout and self.stdout_file is None:
            click.echo(self.stdout, nl=False)

        if result.returncode != 0:
            log.error(
                f"{self.name} exited with code {result.returncode}: "
                f"{self.stderr[-500:]}"
            )
        return result.returncode
