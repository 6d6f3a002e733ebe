"""Tests for cli.py -- Click CLI interface."""

import subprocess
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from drupal_tasks.cli import main
from drupal_tasks.models import Command


@pytest.fixture(autouse=True)
def _use_tmp_dirs(tmp_path, monkeypatch):
    """Point logging and the project to tmp_path so tests don't touch $HOME."""
    monkeypatch.setenv("DRUPAL_TASKS_LOG_DIR", str(tmp_path / "logs"))
    for var in ("DRUPAL_TASKS_PROJECT_DIR", "DRUPAL_TASKS_SITE", "DRUPAL_TASKS_DRY_RUN"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _no_env_file(monkeypatch):
    """Prevent CLI from loading a stray .env file."""
    monkeypatch.setattr("drupal_tasks.cli._find_config_file", lambda project_dir=None: None)


def _ok(stdout: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


class TestHelpOutput:
    def test_help_lists_commands(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in Command:
            assert command.value in result.output
        assert "--dry-run" in result.output

    def test_list_shows_steps(self):
        result = CliRunner().invoke(main, ["list"])
        assert result.exit_code == 0
        assert "checkup:security" in result.output
        assert "  securityReview" in result.output
        assert "  append-settings-php" in result.output


class TestDryRun:
    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_dry_run_spawns_nothing(self, mock_run, tmp_path):
        result = CliRunner().invoke(main, ["--dry-run", "checkup:security"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        assert "[DRY-RUN]" in result.output
        assert "OK securityReview (dry-run)" in result.output
        mock_run.assert_not_called()

    @patch("drupal_tasks.cli.get_command_builder")
    def test_dry_run_reaches_config(self, mock_get, tmp_path):
        result = CliRunner().invoke(main, ["--dry-run", "analyze:php"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        config = mock_get.return_value.call_args.args[0]
        assert config.dry_run is True
        assert mock_get.return_value.call_args.kwargs["dry_run"] is True


class TestRun:
    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_runs_steps_in_order(self, mock_run, tmp_path):
        mock_run.return_value = _ok()
        result = CliRunner().invoke(main, ["checkup:modules"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        commands = [c.args[0][1] for c in mock_run.call_args_list]
        assert commands == ["ups", "pml", "pml", "en"]

    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_exit_code_of_failing_step(self, mock_run, tmp_path):
        mock_run.side_effect = [
            _ok(),
            subprocess.CompletedProcess(args=[], returncode=7, stdout="", stderr="nope"),
        ]
        result = CliRunner().invoke(main, ["checkup:security"])
        assert result.exit_code == 7
        assert "FAIL downloadModules" in result.output
        assert mock_run.call_count == 2

    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_site_and_project_dir(self, mock_run, tmp_path):
        mock_run.return_value = _ok()
        project = tmp_path / "project"
        project.mkdir()
        result = CliRunner().invoke(
            main, ["--project-dir", str(project), "--site", "example.com", "checkup:uninstall"]
        )
        assert result.exit_code == 0, result.output + str(result.exception or "")
        argv = mock_run.call_args_list[0].args[0]
        assert f"--root={project.resolve() / 'web'}" in argv
        assert "--uri=example.com" in argv

    def test_config_file_option(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("DRUPAL_TASKS_SITE=fromfile\n")
        with patch("drupal_tasks.cli.get_command_builder") as mock_get:
            result = CliRunner().invoke(main, ["-c", str(env_file), "checkup:modules"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        config = mock_get.return_value.call_args.args[0]
        assert config.site == "fromfile"


class TestInstallDatabase:
    def test_missing_dump_is_usage_error(self, tmp_path):
        result = CliRunner().invoke(main, ["install:database", "missing.sql"])
        assert result.exit_code == 2
        assert "Database dump not found" in result.output

    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_dump_from_backups(self, mock_run, tmp_path):
        mock_run.return_value = _ok()
        (tmp_path / "backups").mkdir()
        (tmp_path / "backups" / "latest.sql").write_text("SELECT 1;\n")
        result = CliRunner().invoke(main, ["install:database", "latest.sql"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        commands = [c.args[0][1] for c in mock_run.call_args_list]
        assert commands == ["sql:drop", "sql:cli", "cache:rebuild"]


class TestScaffold:
    def test_missing_site_exits_cleanly(self, tmp_path):
        result = CliRunner().invoke(main, ["scaffold"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        assert "append-settings-php" not in result.output


class TestStepOutput:
    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_drush_stdout_reaches_console(self, mock_run, tmp_path):
        mock_run.side_effect = lambda argv, **kwargs: _ok(f"MODULE-LIST-FOR-{argv[1]}\n")
        result = CliRunner().invoke(main, ["checkup:modules"])
        assert result.exit_code == 0, result.output + str(result.exception or "")
        assert "MODULE-LIST-FOR-ups" in result.output
        assert "MODULE-LIST-FOR-pml" in result.output

    @patch("drupal_tasks.tasks.exec.subprocess.run")
    def test_signal_killed_step_maps_to_128_plus_signal(self, mock_run, tmp_path):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=-9, stdout="", stderr="",
        )
        result = CliRunner().invoke(main, ["checkup:modules"])
        assert result.exit_code == 137


class TestBadConfiguration:
    def test_malformed_module_list_is_usage_error(self, monkeypatch):
        monkeypatch.setenv("DRUPAL_TASKS_CHECKUP_MODULES", "hacked security_review")
        result = CliRunner().invoke(main, ["checkup:modules"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output

    def test_invalid_value_in_env_file_is_usage_error(self, tmp_path):
        env_file = tmp_path / "bad.env"
        env_file.write_text("DRUPAL_TASKS_DRY_RUN=maybe\n")
        result = CliRunner().invoke(main, ["-c", str(env_file), "analyze:php"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
