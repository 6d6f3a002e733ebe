"""Task primitives -- the steps a TaskCollection runs in order.

Tasks:
    exec       -- ExecTask runs an external binary (drush, phpqa) without a
                  shell. Optional stdin_file replaces "< dump.sql" shell
                  redirection, optional stdout_file captures a report.
                  Missing executable maps to exit code 127.
    filesystem -- CopyTask, ChmodTask, ConcatTask and RemoveTask for the
                  scaffold and uninstall commands. Each checks its inputs
                  exist before touching anything and reports exit code 1
                  when they don't.

Every task returns an exit code from run(); 0 is success. In dry-run mode
a task only logs what it would do.
"""

from .base import Task
from .exec import ExecTask
from .filesystem import ChmodTask, ConcatTask, CopyTask, RemoveTask

__all__ = [
    "ChmodTask",
    "ConcatTask",
    "CopyTask",
    "ExecTask",
    "RemoveTask",
    "Task",
]
