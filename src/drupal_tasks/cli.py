"""CLI entry point for the Drupal task runner."""

from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError
from pydantic_settings import SettingsError

from .commands import get_command_builder
from .config import ProjectConfig
from .errors import ConfigError
from .models import COMMAND_STEPS, Command

log = logger.bind(task="cli")


def _find_config_file(project_dir: Path | None = None) -> Path | None:
    """Look for .env in the project directory or in cwd."""
    candidates = [Path.cwd() / ".env"]
    if project_dir is not None:
        candidates.insert(0, project_dir / ".env")
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _make_config(ctx: click.Context) -> ProjectConfig:
    opts = ctx.obj
    env_file = opts["config_file"] or _find_config_file(opts["project_dir"])

    # Pass CLI flags as kwargs to avoid env pollution
    config_kwargs: dict = {}
    if opts["dry_run"]:
        config_kwargs["dry_run"] = True
    if opts["verbose"]:
        config_kwargs["log_level"] = "DEBUG"
    if opts["site"]:
        config_kwargs["site"] = opts["site"]
    if opts["project_dir"]:
        config_kwargs["project_dir"] = opts["project_dir"]

    try:
        config = ProjectConfig(_env_file=env_file, **config_kwargs)  # type: ignore[arg-type]
    except (ValidationError, SettingsError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e
    config.setup_logging()
    if env_file:
        log.debug(f"Loaded env from {env_file}")
    else:
        log.debug("No .env found")
    return config


def _exit_status(code: int) -> int:
    """Shell-style exit status; a step killed by signal N maps to 128 + N."""
    if code < 0:
        return 128 - code
    return code


def _run_command(ctx: click.Context, command: Command, **kwargs) -> None:
    """Build the collection for ``command``, run it and exit with its code."""
    config = _make_config(ctx)
    builder = get_command_builder(command)

    try:
        collection = builder(config, dry_run=config.dry_run, **kwargs)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    if collection is None:
        log.info(f"{command}: nothing to do")
        return

    click.echo(f"{command}: {len(collection)} steps")
    if config.dry_run:
        click.echo("[DRY-RUN] No changes will be made")

    result = collection.run(dry_run=config.dry_run)
    if not result.ok:
        log.error(f"{command} failed at step '{result.failed}' (exit {result.exit_code})")
        ctx.exit(_exit_status(result.exit_code))


@click.group()
@click.option(
    "--dry-run", is_flag=True, help="Show what would run without doing it."
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to .env file.",
)
@click.option("--site", default=None, help="Drupal site directory / URI (default: default).")
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root holding web/, backups/ and scaffold/ (default: cwd).",
)
@click.pass_context
def main(
    ctx: click.Context,
    dry_run: bool,
    verbose: bool,
    config_file: Path | None,
    site: str | None,
    project_dir: Path | None,
) -> None:
    """Drush-based maintenance tasks for a Drupal project."""
    ctx.ensure_object(dict)
    ctx.obj.update(
        dry_run=dry_run,
        verbose=verbose,
        config_file=config_file,
        site=site,
        project_dir=project_dir.resolve() if project_dir else None,
    )


@main.command("checkup:modules")
@click.pass_context
def checkup_modules(ctx: click.Context) -> None:
    """Run modules checkup."""
    _run_command(ctx, Command.CHECKUP_MODULES)


@main.command("checkup:security")
@click.pass_context
def checkup_security(ctx: click.Context) -> None:
    """Run security checkup."""
    _run_command(ctx, Command.CHECKUP_SECURITY)


@main.command("checkup:uninstall")
@click.pass_context
def checkup_uninstall(ctx: click.Context) -> None:
    """Uninstall checkup's modules."""
    _run_command(ctx, Command.CHECKUP_UNINSTALL)


@main.command("install:database")
@click.argument("dump_file")
@click.pass_context
def install_database(ctx: click.Context, dump_file: str) -> None:
    """Setup from database DUMP_FILE (path, or name inside backups/)."""
    _run_command(ctx, Command.INSTALL_DATABASE, dump_file=dump_file)


@main.command("analyze:php")
@click.pass_context
def analyze_php(ctx: click.Context) -> None:
    """Compute various metrics."""
    _run_command(ctx, Command.ANALYZE_PHP)


@main.command("scaffold")
@click.pass_context
def scaffold(ctx: click.Context) -> None:
    """Scaffold settings.php and settings.local.php for Drupal."""
    _run_command(ctx, Command.SCAFFOLD)


@main.command("list")
def list_commands() -> None:
    """Show every command with its steps in run order."""
    for command, steps in COMMAND_STEPS.items():
        click.echo(command.value)
        for step in steps:
            click.echo(f"  {step}")
