"""Core domain logic for the kubecron scheduler adapter.

This package contains zero external dependencies and represents
the pure translation logic of the application. The Kubernetes API
client and the CLI are handled by the adapters package.
"""

from .errors import (
    CreateScheduleError,
    InvalidScheduleRequestError,
    PlatformError,
    ResourceResolutionError,
    SchedulerError,
    UnscheduleError,
)
from .models import (
    AppDefinition,
    CronJobResource,
    ImagePullPolicy,
    RestartPolicy,
    ScheduleInfo,
    ScheduleRequest,
    SchedulerPropertyKeys,
)

__all__ = [
    "AppDefinition",
    "CreateScheduleError",
    "CronJobResource",
    "ImagePullPolicy",
    "InvalidScheduleRequestError",
    "PlatformError",
    "ResourceResolutionError",
    "RestartPolicy",
    "ScheduleInfo",
    "ScheduleRequest",
    "SchedulerError",
    "SchedulerPropertyKeys",
    "UnscheduleError",
]
