"""Identity labeling for CronJobs created by kubecron.

A CronJob's own name identifies the schedule, not the task. The task
definition a CronJob runs is recorded only in the label below, so every
lookup from CronJob to task definition goes through these helpers.
"""

import re
from collections.abc import Mapping

# Label whose value is the originating task-definition name.
IDENTITY_LABEL_KEY = "spring-crontab-id"

# DNS-1123 label; CronJob names are further capped at 52 characters because
# the controller appends an 11 character suffix to spawned Job names.
RESOURCE_NAME_PATTERN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
MAX_CRONJOB_NAME_LENGTH = 52

# Qualified label value; anything else is rejected inside a label selector.
LABEL_VALUE_PATTERN = re.compile(r"^(([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9])?$")
MAX_LABEL_VALUE_LENGTH = 63


def identity_labels(task_definition_name: str) -> dict[str, str]:
    """Build the label set marking a CronJob as owned by a task definition."""
    return {IDENTITY_LABEL_KEY: task_definition_name}


def task_definition_of(labels: Mapping[str, str] | None) -> str | None:
    """Return the task-definition name recorded in a label set, if any."""
    if not labels:
        return None
    return labels.get(IDENTITY_LABEL_KEY)


def task_selector(task_definition_name: str) -> str:
    """Label selector matching CronJobs of a single task definition."""
    return f"{IDENTITY_LABEL_KEY}={task_definition_name}"


def is_valid_label_value(value: str) -> bool:
    """Whether ``value`` can appear as a non-empty label value in a selector."""
    return (
        0 < len(value) <= MAX_LABEL_VALUE_LENGTH
        and LABEL_VALUE_PATTERN.fullmatch(value) is not None
    )


def resource_name_violation(name: str) -> str | None:
    """Explain why ``name`` is not a valid CronJob name.

    Returns:
        A human readable reason, or None if the name is valid.
    """
    if not name:
        return "name must not be empty"
    if len(name) > MAX_CRONJOB_NAME_LENGTH:
        return (
            f"name must be no more than {MAX_CRONJOB_NAME_LENGTH} characters, "
            f"got {len(name)}"
        )
    if not RESOURCE_NAME_PATTERN.match(name):
        return (
            "name must consist of lower case alphanumeric characters or '-', "
            "and must start and end with an alphanumeric character"
        )
    return None


def is_valid_resource_name(name: str) -> bool:
    return resource_name_violation(name) is None
