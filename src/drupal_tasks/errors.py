"""Exception hierarchy for the Drupal task runner.

Step failures are reported as exit codes on the collection result; these
exceptions are reserved for misconfiguration.
"""


class DrupalTasksError(Exception):
    """Base exception for all task runner errors."""


class ConfigError(DrupalTasksError):
    """Invalid or missing configuration (paths, dump files, settings)."""


class TaskCollectionError(DrupalTasksError):
    """A task collection was built inconsistently."""
