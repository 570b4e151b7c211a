"""Domain models for the kubecron scheduler adapter.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class SchedulerPropertyKeys:
    """Well-known keys inside a request's scheduler properties."""

    CRON_EXPRESSION = "spring.cloud.scheduler.cron.expression"


class ImagePullPolicy(Enum):
    """Container image pull policies accepted by Kubernetes."""

    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


class RestartPolicy(Enum):
    """Pod restart policies accepted by Kubernetes."""

    ALWAYS = "Always"
    ON_FAILURE = "OnFailure"
    NEVER = "Never"


def _freeze(value: Mapping[str, Any] | None) -> MappingProxyType[str, Any]:
    """Copy a mapping into a read-only proxy."""
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True)
class AppDefinition:
    """The upstream task definition a schedule executes."""

    name: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the name and freeze properties."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        object.__setattr__(self, "properties", _freeze(self.properties))


@dataclass(frozen=True)
class ScheduleRequest:
    """A request to run a task definition on a recurring schedule.

    The cron expression travels in ``scheduler_properties`` under
    ``SchedulerPropertyKeys.CRON_EXPRESSION``. ``resource`` is a URI-like
    reference to the executable artifact, e.g. ``docker:repo/img:latest``.
    """

    definition: AppDefinition
    schedule_name: str
    scheduler_properties: Mapping[str, str]
    resource: str
    command_line_args: tuple[str, ...] = ()
    deployment_properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze mappings and normalize args to a tuple."""
        object.__setattr__(
            self, "scheduler_properties", _freeze(self.scheduler_properties)
        )
        object.__setattr__(
            self, "deployment_properties", _freeze(self.deployment_properties)
        )
        object.__setattr__(self, "command_line_args", tuple(self.command_line_args))

    @property
    def task_definition_name(self) -> str:
        return self.definition.name

    @property
    def cron_expression(self) -> str | None:
        return self.scheduler_properties.get(SchedulerPropertyKeys.CRON_EXPRESSION)


@dataclass(frozen=True)
class ScheduleInfo:
    """A schedule as observed on the platform."""

    schedule_name: str
    task_definition_name: str | None
    schedule_properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Convert schedule properties to a read-only proxy."""
        object.__setattr__(
            self, "schedule_properties", _freeze(self.schedule_properties)
        )

    @property
    def cron_expression(self) -> str | None:
        return self.schedule_properties.get(SchedulerPropertyKeys.CRON_EXPRESSION)

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain dictionary for CLI output."""
        return {
            "schedule_name": self.schedule_name,
            "task_definition_name": self.task_definition_name,
            "schedule_properties": dict(self.schedule_properties),
        }


CRONJOB_API_VERSION = "batch/v1"


@dataclass(frozen=True)
class CronJobResource:
    """Platform-neutral picture of a Kubernetes CronJob.

    This is what the scheduler submits to and reads back from a
    CronJobClientPort. It covers only the fields the adapter owns; the
    platform fills in the rest (status, uid, history limits, ...).
    """

    name: str
    labels: Mapping[str, str]
    schedule: str
    image: str
    image_pull_policy: ImagePullPolicy
    restart_policy: RestartPolicy
    args: tuple[str, ...] = ()
    api_version: str = CRONJOB_API_VERSION

    def __post_init__(self) -> None:
        """Freeze labels and normalize args to a tuple."""
        object.__setattr__(self, "labels", _freeze(self.labels))
        object.__setattr__(self, "args", tuple(self.args))

    def to_manifest(self) -> dict[str, Any]:
        """Render the CronJob as a Kubernetes manifest dictionary."""
        container: dict[str, Any] = {
            "name": self.name,
            "image": self.image,
            "imagePullPolicy": self.image_pull_policy.value,
        }
        if self.args:
            container["args"] = list(self.args)

        return {
            "apiVersion": self.api_version,
            "kind": "CronJob",
            "metadata": {
                "name": self.name,
                "labels": dict(self.labels),
            },
            "spec": {
                "schedule": self.schedule,
                "jobTemplate": {
                    "spec": {
                        "template": {
                            "spec": {
                                "containers": [container],
                                "restartPolicy": self.restart_policy.value,
                            }
                        }
                    }
                },
            },
        }
