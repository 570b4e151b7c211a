"""Composition root for the kubecron scheduler adapter.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (single command or interactive CLI)
"""

import json
import logging
import sys
from typing import Any

from kubecron.adapters.cli.commands import run_command
from kubecron.adapters.kubernetes.client import KubernetesCronJobClient
from kubecron.config import Settings, load_settings
from kubecron.core.cronjob_scheduler import CronJobScheduler
from kubecron.core.ports import SchedulerPort

logger = logging.getLogger(__name__)

HELP_TEXT = """
Available Commands (JSON format):

  schedule
    Create a CronJob running a task definition on a cron schedule.
    Required: schedule_name, task_definition_name, cron, resource
    Optional: args (list of container arguments)

    Example: schedule {"schedule_name": "job-a", "task_definition_name": "mytask",
                       "cron": "8 16 * * *", "resource": "docker:repo/img:latest"}

  unschedule
    Delete a CronJob by schedule name.
    Required: schedule_name

    Example: unschedule {"schedule_name": "job-a"}

  list
    List schedules, optionally for one task definition.
    Optional: task_definition_name, format (json, text)

    Example: list {"task_definition_name": "mytask", "format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
"""


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so command results on stdout stay parseable.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_scheduler(settings: Settings) -> CronJobScheduler:
    """Wire the Kubernetes client and the CronJob scheduler.

    Args:
        settings: Loaded settings.

    Returns:
        CronJobScheduler bound to the configured namespace.

    Raises:
        ConfigException: If no Kubernetes configuration can be loaded.
    """
    client = KubernetesCronJobClient.from_settings(settings)
    logger.info(f"Kubernetes client: namespace {settings.namespace}")

    return CronJobScheduler(
        client=client,
        image_pull_policy=settings.image_pull_policy,
        restart_policy=settings.restart_policy,
    )


def parse_command_line(command_line: str) -> tuple[str, dict[str, Any]]:
    """Split a command line into a command name and JSON arguments.

    Raises:
        ValueError: If the line is empty or the arguments are not a JSON object.
    """
    parts = command_line.strip().split(maxsplit=1)
    if not parts:
        raise ValueError("Empty command")

    command = parts[0].lower()
    args_str = parts[1] if len(parts) > 1 else ""

    try:
        args = json.loads(args_str) if args_str else {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e.msg}") from e

    if not isinstance(args, dict):
        raise ValueError("Arguments must be a JSON object")

    return command, args


def execute(scheduler: SchedulerPort, command_line: str) -> dict[str, Any]:
    """Parse and run a single command, never raising.

    Returns:
        Command result dictionary; ``status`` is ``"error"`` on any failure.
    """
    try:
        command, args = parse_command_line(command_line)
        return run_command(scheduler, command, args)
    except Exception as e:
        logger.error(f"Command execution error: {e}", exc_info=True)
        return {"status": "error", "message": str(e)}


def run_interactive(scheduler: SchedulerPort) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for schedule commands.

    Args:
        scheduler: SchedulerPort used to execute commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("kubecron> ").strip()
        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue

        if not command_line:
            continue

        if command_line.lower() == "exit":
            logger.info("Exiting CLI")
            break

        if command_line.lower() == "help":
            print(HELP_TEXT)
            continue

        result = execute(scheduler, command_line)
        print(json.dumps(result, indent=2, default=str))


def bootstrap(argv: list[str]) -> int:
    """Load configuration, wire adapters, and run the requested command.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the Kubernetes client and scheduler
    4. Run one command from argv, or the interactive CLI

    Args:
        argv: Command-line arguments without the program name.

    Returns:
        Process exit code.
    """
    # Step 1: Load configuration
    settings = load_settings()

    # Step 2: Configure logging
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Loading kubecron scheduler...")

    if argv and argv[0] in ("help", "--help", "-h"):
        print(HELP_TEXT)
        return 0

    # Step 3: Instantiate adapters and core
    scheduler = build_scheduler(settings)

    # Step 4: Run
    if not argv:
        run_interactive(scheduler)
        return 0

    result = execute(scheduler, " ".join(argv))
    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("status") == "success" else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Command succeeded
        1: Command failed or fatal bootstrap error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        sys.exit(bootstrap(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
