"""Filesystem steps used by the scaffold and uninstall commands."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from loguru import logger

from .base import Task

log = logger.bind(task="filesystem")


class CopyTask(Task):
    name = "copy"

    def __init__(self, src: Path, dst: Path, overwrite: bool = True) -> None:
        self.src = Path(src)
        self.dst = Path(dst)
        self.overwrite = overwrite

    def describe(self) -> str:
        return f"copy {self.src} -> {self.dst}"

    def execute(self) -> int:
        if not self.src.is_file():
            log.error(f"Cannot copy, source not found: {self.src}")
            return 1
        if self.dst.exists() and not self.overwrite:
            log.debug(f"Keeping existing {self.dst}")
            return 0
        self.dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(self.src, self.dst)
        log.debug(f"Copied {self.src} -> {self.dst}")
        return 0


class ChmodTask(Task):
    name = "chmod"

    def __init__(self, path: Path, mode: int) -> None:
        self.path = Path(path)
        self.mode = mode

    def describe(self) -> str:
        return f"chmod {self.mode:o} {self.path}"

    def execute(self) -> int:
        if not self.path.exists():
            log.error(f"Cannot chmod, path not found: {self.path}")
            return 1
        os.chmod(self.path, self.mode)
        log.debug(f"Changed mode of {self.path} to {self.mode:o}")
        return 0


class ConcatTask(Task):
    """Write the contents of ``sources`` back to back into ``dst``."""

    name = "concat"

    def __init__(self, sources: list[Path], dst: Path) -> None:
        self.sources = [Path(s) for s in sources]
        self.dst = Path(dst)

    def describe(self) -> str:
        joined = " + ".join(str(s) for s in self.sources)
        return f"concat {joined} -> {self.dst}"

    def execute(self) -> int:
        missing = [s for s in self.sources if not s.is_file()]
        if missing:
            log.error(f"Cannot concat, missing: {', '.join(map(str, missing))}")
            return 1
        # Read everything first; dst may also be one of the sources
        content = b"".join(s.read_bytes() for s in self.sources)
        self.dst.write_bytes(content)
        log.debug(f"Wrote {len(content)} bytes to {self.dst}")
        return 0


class RemoveTask(Task):
    """Remove files or directory trees. Missing paths are not an error."""

    name = "remove"

    def __init__(self, paths: list[Path]) -> None:
        self.paths = [Path(p) for p in paths]

    def describe(self) -> str:
        return f"remove {' '.join(str(p) for p in self.paths)}"

    def execute(self) -> int:
        for path in self.paths:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
                log.debug(f"Removed directory {path}")
            elif path.exists() or path.is_symlink():
                path.unlink()
                log.debug(f"Removed file {path}")
            else:
                log.debug(f"Nothing to remove at {path}")
        return 0
