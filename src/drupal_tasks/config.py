"""Project configuration via pydantic-settings (.env + env vars)."""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | {extra[task]:<12} | {message}"


class ProjectConfig(BaseSettings):
    """All task configuration with layered resolution:
    .env file < environment variables < constructor kwargs.

    Environment variables use the DRUPAL_TASKS_ prefix, e.g.
    DRUPAL_TASKS_SITE=example.com.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DRUPAL_TASKS_",
        extra="ignore",
    )

    # -- Project layout --
    project_dir: Path = Field(default_factory=Path.cwd)
    site: str = "default"

    # -- Drush --
    drush_bin: str = "/usr/local/bin/drush"
    checkup_modules: list[str] = ["hacked", "security_review"]

    # -- phpqa --
    phpqa_bin: str = "vendor/bin/phpqa"
    phpqa_analyzed_dirs: str = "web/modules/custom"
    phpqa_build_dir: str = "reports"
    phpqa_ignored_files: str = r"*\\.css,*\\.md,*\\.txt,*\\.info,*\\.yml"
    phpqa_tools: str = (
        "phpcpd:0,phpcs:0,phpmd:0,phpmetrics,phploc,pdepend,"
        "security-checker,phpstan"
    )
    phpqa_execution: str = "no-parallel"

    # -- Behavior --
    dry_run: bool = False
    log_dir: Path = Path.home() / ".local/state/drupal-tasks"
    log_level: str = "INFO"

    @property
    def drupal_root(self) -> Path:
        """Drupal docroot inside the project."""
        return self.project_dir / "web"

    @property
    def backups_dir(self) -> Path:
        """Where database dumps are looked up by bare file name."""
        return self.project_dir / "backups"

    @property
    def checkup_dir(self) -> Path:
        return self.project_dir / "checkup"

    @property
    def security_report(self) -> Path:
        """Output file of the security review step."""
        return self.checkup_dir / "security.out"

    @property
    def scaffold_dir(self) -> Path:
        return self.project_dir / "scaffold"

    @property
    def site_dir(self) -> Path:
        return self.drupal_root / "sites" / self.site

    @property
    def contrib_modules_dir(self) -> Path:
        return self.drupal_root / "modules" / "contrib"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "drupal-tasks.log"

    def setup_logging(self) -> None:
        """Route loguru to stderr at log_level and to a rotating debug file.

        Replaces any handlers already installed; records without a bound
        task show an empty column.
        """
        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger.configure(
            handlers=[
                {
                    "sink": sys.stderr,
                    "format": LOG_FORMAT,
                    "level": self.log_level.upper(),
                },
                {
                    "sink": str(self.log_file),
                    "format": LOG_FORMAT,
                    "level": "DEBUG",
                    "rotation": "10 MB",
                    "retention": "30 days",
                },
            ],
            extra={"task": ""},
        )
