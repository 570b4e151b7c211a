"""CLI command implementations for kubecron schedule management.

This adapter maps CLI commands (schedule, unschedule, list) to SchedulerPort
operations. It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from kubecron.core.errors import PlatformError, SchedulerError
from kubecron.core.models import AppDefinition, ScheduleRequest, SchedulerPropertyKeys
from kubecron.core.ports import SchedulerPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to SchedulerPort.

    Every command returns a result dictionary with a ``status`` of
    ``"success"`` or ``"error"``; scheduler failures never escape as
    exceptions.
    """

    def __init__(self, scheduler: SchedulerPort):
        """Initialize the CLI command handler.

        Args:
            scheduler: SchedulerPort implementation to execute commands.
        """
        self.scheduler = scheduler

    def schedule(
        self,
        schedule_name: str,
        task_definition_name: str,
        cron: str,
        resource: str,
        args: list[str] | None = None,
    ) -> dict[str, Any]:
        """Create a schedule via CLI.

        Args:
            schedule_name: Name of the CronJob to create.
            task_definition_name: Task definition the schedule runs.
            cron: Cron expression.
            resource: Artifact reference, e.g. ``docker:repo/img:latest``.
            args: Optional container arguments.

        Returns:
            Dictionary with status and message.
        """
        try:
            request = ScheduleRequest(
                definition=AppDefinition(name=task_definition_name),
                schedule_name=schedule_name,
                scheduler_properties={SchedulerPropertyKeys.CRON_EXPRESSION: cron},
                resource=resource,
                command_line_args=tuple(args or ()),
            )
            self.scheduler.schedule(request)
        except (SchedulerError, ValueError) as e:
            logger.error(f"Failed to schedule {schedule_name}: {e}")
            return {
                "status": "error",
                "operation": "schedule",
                "schedule_name": schedule_name,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "schedule",
            "schedule_name": schedule_name,
            "task_definition_name": task_definition_name,
            "message": f"Schedule {schedule_name} created",
        }

    def unschedule(self, schedule_name: str) -> dict[str, Any]:
        """Delete a schedule via CLI.

        Args:
            schedule_name: Name of the CronJob to delete.

        Returns:
            Dictionary with status and message.
        """
        try:
            self.scheduler.unschedule(schedule_name)
        except SchedulerError as e:
            logger.error(f"Failed to unschedule {schedule_name}: {e}")
            return {
                "status": "error",
                "operation": "unschedule",
                "schedule_name": schedule_name,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "unschedule",
            "schedule_name": schedule_name,
            "message": f"Schedule {schedule_name} deleted",
        }

    def list_schedules(
        self, task_definition_name: str | None = None, format: str = "json"
    ) -> dict[str, Any]:
        """List schedules via CLI.

        Args:
            task_definition_name: Optional task definition to filter on.
            format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the schedules or status/message on error.
        """
        if format not in ("json", "text"):
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {format}",
            }

        try:
            infos = self.scheduler.list_schedules(task_definition_name)
        except (SchedulerError, PlatformError) as e:
            logger.error(f"Failed to list schedules: {e}")
            return {
                "status": "error",
                "operation": "list",
                "message": str(e),
            }

        data = [info.to_dict() for info in infos]

        if format == "text":
            return {
                "status": "success",
                "operation": "list",
                "count": len(data),
                "data": self._format_schedules_as_text(data),
            }

        return {
            "status": "success",
            "operation": "list",
            "count": len(data),
            "data": data,
        }

    def _format_schedules_as_text(self, schedules: list[dict[str, Any]]) -> str:
        """Format schedules as a human-readable table.

        Args:
            schedules: Schedule dictionaries as produced by ScheduleInfo.to_dict.

        Returns:
            Formatted text string.
        """
        if not schedules:
            return "No schedules found."

        rows = [("SCHEDULE", "TASK", "CRON")]
        for schedule in schedules:
            rows.append(
                (
                    schedule["schedule_name"],
                    schedule["task_definition_name"] or "<none>",
                    schedule["schedule_properties"].get(
                        SchedulerPropertyKeys.CRON_EXPRESSION, ""
                    ),
                )
            )

        widths = [max(len(row[i]) for row in rows) for i in range(2)]
        lines = [
            f"{name.ljust(widths[0])}  {task.ljust(widths[1])}  {cron}"
            for name, task, cron in rows
        ]
        return "\n".join(lines)


def run_command(
    scheduler: SchedulerPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        scheduler: SchedulerPort implementation.
        command: Command name ('schedule', 'unschedule', 'list').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument
            is missing.
    """
    handler = CLICommandHandler(scheduler)

    if command == "schedule":
        missing = [
            key
            for key in ("schedule_name", "task_definition_name", "cron", "resource")
            if key not in args
        ]
        if missing:
            raise ValueError(f"Missing required parameter(s): {', '.join(missing)}")
        return handler.schedule(
            args["schedule_name"],
            args["task_definition_name"],
            args["cron"],
            args["resource"],
            args.get("args"),
        )

    elif command == "unschedule":
        if "schedule_name" not in args:
            raise ValueError("Missing required parameter: schedule_name")
        return handler.unschedule(args["schedule_name"])

    elif command == "list":
        return handler.list_schedules(
            args.get("task_definition_name"),
            args.get("format", "json"),
        )

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
