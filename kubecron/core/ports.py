"""Port interfaces for the kubecron scheduler adapter.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driving Ports** (upstream systems call into core)
   - SchedulerPort: Create, delete and list recurring task schedules

2. **Driven Ports** (core calls out to adapters)
   - CronJobClientPort: Namespace-scoped access to native CronJob resources
"""

from abc import ABC, abstractmethod

from .models import CronJobResource, ScheduleInfo, ScheduleRequest


# ============================================================================
# DRIVING PORTS (Upstream calls into core)
# ============================================================================


class SchedulerPort(ABC):
    """Platform-agnostic scheduler contract.

    Any orchestration backend able to run a container on a cron schedule
    can implement this port. Implementations hold no local state: every
    query reflects the backend at the time of the call.
    """

    @abstractmethod
    def schedule(self, request: ScheduleRequest) -> None:
        """Create a recurring schedule for a task definition.

        Args:
            request: Task definition, schedule name, cron expression
                and artifact reference.

        Raises:
            CreateScheduleError: If the backend rejects or fails the creation.
            ResourceResolutionError: If the artifact reference cannot be
                resolved to an image.
            InvalidScheduleRequestError: If the request lacks a cron expression.
        """

    @abstractmethod
    def unschedule(self, schedule_name: str) -> None:
        """Delete a schedule by name.

        Args:
            schedule_name: Name the schedule was created with.

        Raises:
            UnscheduleError: If the schedule does not exist or deletion
                could not be confirmed.
        """

    @abstractmethod
    def list_schedules(
        self, task_definition_name: str | None = None
    ) -> list[ScheduleInfo]:
        """List schedules, optionally only those of one task definition.

        Args:
            task_definition_name: Exact task-definition name to filter on.
                If None, every schedule is returned.

        Returns:
            ScheduleInfo entries in backend order. Empty list if none.

        Raises:
            PlatformError: If the backend read fails.
        """


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class CronJobClientPort(ABC):
    """Port for namespace-scoped CronJob operations.

    Adapters implementing this port talk to the orchestration platform
    (or an in-memory stand-in). The namespace is fixed when the adapter
    is constructed.
    """

    @abstractmethod
    def create(self, resource: CronJobResource) -> None:
        """Submit a new CronJob.

        Args:
            resource: CronJob to create.

        Raises:
            PlatformError: If the platform rejects the resource (name
                collision, invalid name, quota) or is unreachable.
        """

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Delete a CronJob by name.

        Args:
            name: CronJob name.

        Returns:
            True if the CronJob existed and was deleted, False if it
            was not found.

        Raises:
            PlatformError: If the platform fails for any other reason.
        """

    @abstractmethod
    def list_cronjobs(
        self, label_selector: str | None = None
    ) -> list[CronJobResource]:
        """Read CronJobs in the namespace.

        Args:
            label_selector: Optional Kubernetes label selector
                (e.g. ``"key=value"``). Implementations may ignore it;
                callers must not rely on it for correctness.

        Returns:
            CronJobs in platform order.

        Raises:
            PlatformError: If the platform read fails.
        """
