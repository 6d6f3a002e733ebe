"""Core enums, constants, and result types for the task runner.

Enums:
    Command -- Task pipeline exposed on the CLI (checkup:modules ... scaffold).
"""

from dataclasses import dataclass, field
from enum import StrEnum


class Command(StrEnum):
    CHECKUP_MODULES = "checkup:modules"
    CHECKUP_SECURITY = "checkup:security"
    CHECKUP_UNINSTALL = "checkup:uninstall"
    INSTALL_DATABASE = "install:database"
    ANALYZE_PHP = "analyze:php"
    SCAFFOLD = "scaffold"


# Step names each command runs, in order
COMMAND_STEPS: dict[Command, list[str]] = {
    Command.CHECKUP_MODULES: [
        "securityUpdates",
        "listEnabledModules",
        "listDisabledModules",
        "enableModules",
    ],
    Command.CHECKUP_SECURITY: [
        "cacheClear",
        "downloadModules",
        "enableModules",
        "hacked",
        "securityReview",
    ],
    Command.CHECKUP_UNINSTALL: [
        "disableModules",
        "uninstallModules",
        "deleteModules",
        "cacheRebuild",
    ],
    Command.INSTALL_DATABASE: [
        "sqlDrop",
        "sqlCli",
        "cacheClear",
    ],
    Command.ANALYZE_PHP: [
        "phpqa",
    ],
    Command.SCAFFOLD: [
        "add-settings-local-php",
        "set-permission-default",
        "write-permission-settings-php",
        "append-settings-php",
        "read-permission-settings-php",
    ],
}

# Permission bits applied by the scaffold command
SITE_DIR_MODE = 0o755
SETTINGS_WRITABLE_MODE = 0o644
SETTINGS_READONLY_MODE = 0o444

# Exit code reported when an executable cannot be found (shell convention)
EXIT_NOT_FOUND = 127


@dataclass
class CollectionResult:
    """Result summary from running a task collection."""

    completed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: str | None = None
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.failed is None and self.exit_code == 0
