"""Command registry -- maps Command enum values to collection builders.

Commands:
    checkup:modules   -- Lists pending security updates, enabled and
                         disabled/not installed modules, then enables the
                         checkup modules.
    checkup:security  -- Rebuilds caches, downloads and enables the checkup
                         modules (hacked, security_review), rebuilds the
                         hacked report and stores a full security review
                         in checkup/security.out.
    checkup:uninstall -- Uninstalls the checkup modules, deletes their
                         contrib directories and rebuilds caches. The
                         disable step is a declared placeholder since
                         Drupal 8+ has no disabled state.
    install:database  -- Drops the site database, pipes a SQL dump into
                         drush sql:cli and rebuilds caches. Bare dump file
                         names are looked up in backups/.
    analyze:php       -- Runs the phpqa aggregator over custom modules.
    scaffold          -- Creates settings.local.php from a template and
                         rebuilds settings.php from its pristine copy plus
                         an appended template, fixing permissions around
                         the write. Warns and does nothing when the site
                         directory is missing.

Each builder takes a ProjectConfig and returns a TaskCollection (scaffold
may return None).
"""

from ..models import Command


def get_command_builder(command: Command):
    """Return the collection builder for a given command."""
    if command == Command.CHECKUP_MODULES:
        from .checkup import build_modules

        return build_modules

    if command == Command.CHECKUP_SECURITY:
        from .checkup import build_security

        return build_security

    if command == Command.CHECKUP_UNINSTALL:
        from .checkup import build_uninstall

        return build_uninstall

    if command == Command.INSTALL_DATABASE:
        from .install import build_database

        return build_database

    if command == Command.ANALYZE_PHP:
        from .analyze import build_php

        return build_php

    if command == Command.SCAFFOLD:
        from .scaffold import build

        return build

    raise NotImplementedError(f"Command '{command}' has no builder")
