"""Integration tests for the composition root.

These tests verify that the bootstrap process correctly loads configuration,
instantiates adapters, wires the scheduler, and runs commands.
"""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from kubecron.config import Settings, load_settings
from kubecron.core.cronjob_scheduler import CronJobScheduler
from kubecron.core.models import ImagePullPolicy, RestartPolicy
from kubecron.main import bootstrap, build_scheduler, execute, main, parse_command_line
from kubecron.tests.fakes import FakeCronJobClientPort

# Env vars that would leak host configuration into settings tests.
_CLEAN_ENV = {
    "KUBERNETES_NAMESPACE": "",
    "KUBECRON_NAMESPACE": "",
    "KUBECRON_IMAGE_PULL_POLICY": "",
    "KUBECRON_RESTART_POLICY": "",
}


@pytest.fixture
def clean_env():
    """Remove kubecron and namespace variables from the environment."""
    with patch.dict(os.environ, {}, clear=False):
        for key in _CLEAN_ENV:
            os.environ.pop(key, None)
        yield


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self, clean_env) -> None:
        """Load settings with default values."""
        settings = load_settings()
        assert settings.image_pull_policy == ImagePullPolicy.IF_NOT_PRESENT
        assert settings.restart_policy == RestartPolicy.NEVER
        assert settings.namespace == "default"
        assert settings.in_cluster is None
        assert settings.log_level == "INFO"

    def test_namespace_from_kubernetes_namespace(self, clean_env) -> None:
        """KUBERNETES_NAMESPACE supplies the default namespace."""
        with patch.dict(os.environ, {"KUBERNETES_NAMESPACE": "batch-jobs"}):
            assert load_settings().namespace == "batch-jobs"

    def test_prefixed_namespace_overrides(self, clean_env) -> None:
        """KUBECRON_NAMESPACE wins over KUBERNETES_NAMESPACE."""
        with patch.dict(
            os.environ,
            {"KUBERNETES_NAMESPACE": "batch-jobs", "KUBECRON_NAMESPACE": "tasks"},
        ):
            assert load_settings().namespace == "tasks"

    def test_load_settings_from_env(self, clean_env) -> None:
        """Load policies from environment variables."""
        with patch.dict(
            os.environ,
            {
                "KUBECRON_IMAGE_PULL_POLICY": "Always",
                "KUBECRON_RESTART_POLICY": "OnFailure",
                "KUBECRON_LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.image_pull_policy == ImagePullPolicy.ALWAYS
            assert settings.restart_policy == RestartPolicy.ON_FAILURE
            assert settings.log_level == "DEBUG"

    def test_unknown_policy_rejected(self, clean_env) -> None:
        """Policies outside the enumeration fail validation."""
        with patch.dict(os.environ, {"KUBECRON_RESTART_POLICY": "Sometimes"}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_blank_namespace_rejected(self, clean_env) -> None:
        """A blank namespace fails validation."""
        with pytest.raises(ValidationError):
            Settings(namespace="  ")

    def test_load_settings_from_env_file(self, clean_env, tmp_path) -> None:
        """Settings can be read from an explicit .env file."""
        env_file = tmp_path / "kubecron.env"
        env_file.write_text("KUBECRON_IMAGE_PULL_POLICY=Never\nKUBECRON_NAMESPACE=ops\n")

        settings = load_settings(str(env_file))

        assert settings.image_pull_policy == ImagePullPolicy.NEVER
        assert settings.namespace == "ops"


class TestWiring:
    """Test that adapters and core are wired from settings."""

    def test_build_scheduler_applies_settings(self) -> None:
        """The scheduler gets the client and configured policies."""
        settings = Settings(
            namespace="tasks",
            image_pull_policy=ImagePullPolicy.ALWAYS,
            restart_policy=RestartPolicy.ON_FAILURE,
        )
        fake_client = FakeCronJobClientPort(namespace="tasks")

        with patch(
            "kubecron.main.KubernetesCronJobClient.from_settings",
            return_value=fake_client,
        ) as from_settings:
            scheduler = build_scheduler(settings)

        from_settings.assert_called_once_with(settings)
        assert isinstance(scheduler, CronJobScheduler)
        assert scheduler.client is fake_client
        assert scheduler.image_pull_policy == ImagePullPolicy.ALWAYS
        assert scheduler.restart_policy == RestartPolicy.ON_FAILURE


class TestCommandExecution:
    """Test command-line parsing and execution."""

    def test_parse_command_line(self) -> None:
        """Command name is lower-cased and args parsed as JSON."""
        command, args = parse_command_line('LIST {"format": "text"}')
        assert command == "list"
        assert args == {"format": "text"}

    def test_parse_command_line_without_args(self) -> None:
        """Commands without JSON get empty args."""
        assert parse_command_line("list") == ("list", {})

    @pytest.mark.parametrize("line", ["", "list {not json}", "list [1, 2]"])
    def test_parse_command_line_invalid(self, line: str) -> None:
        """Empty lines, bad JSON and non-object args are rejected."""
        with pytest.raises(ValueError):
            parse_command_line(line)

    def test_execute_never_raises(self) -> None:
        """execute() turns exceptions into error results."""
        scheduler = CronJobScheduler(client=FakeCronJobClientPort())

        assert execute(scheduler, "bogus")["status"] == "error"
        assert execute(scheduler, "list {oops")["status"] == "error"

    def test_bootstrap_runs_single_command(self, clean_env, capsys) -> None:
        """bootstrap() runs one command and returns its exit code."""
        fake_client = FakeCronJobClientPort()

        with patch(
            "kubecron.main.KubernetesCronJobClient.from_settings",
            return_value=fake_client,
        ):
            code = bootstrap(
                [
                    "schedule",
                    json.dumps(
                        {
                            "schedule_name": "job-a",
                            "task_definition_name": "mytask",
                            "cron": "8 16 ? * *",
                            "resource": "docker:repo/img:latest",
                        }
                    ),
                ]
            )

        assert code == 0
        assert "job-a" in fake_client.cronjobs
        output = json.loads(capsys.readouterr().out)
        assert output["status"] == "success"

    def test_bootstrap_failed_command_exit_code(self, clean_env, capsys) -> None:
        """A failing command yields exit code 1."""
        with patch(
            "kubecron.main.KubernetesCronJobClient.from_settings",
            return_value=FakeCronJobClientPort(),
        ):
            code = bootstrap(["unschedule", '{"schedule_name": "nonexistent"}'])

        assert code == 1
        assert json.loads(capsys.readouterr().out)["status"] == "error"

    def test_bootstrap_help_skips_cluster(self, clean_env, capsys) -> None:
        """help does not need a cluster connection."""
        with patch("kubecron.main.build_scheduler") as build:
            assert bootstrap(["help"]) == 0

        build.assert_not_called()
        assert "unschedule" in capsys.readouterr().out

    def test_main_exits_with_error_on_bootstrap_failure(self) -> None:
        """Fatal errors exit with code 1."""
        with patch("kubecron.main.bootstrap", side_effect=RuntimeError("no cluster")):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
