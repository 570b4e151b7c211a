"""CronJob scheduler: implements SchedulerPort on top of CronJobClientPort.

Translates schedule requests into CronJob resources and CronJob resources
back into schedule descriptors. The task definition a CronJob belongs to
is tracked through the identity label only.
"""

import logging

from .errors import (
    CreateScheduleError,
    InvalidScheduleRequestError,
    PlatformError,
    UnscheduleError,
)
from .labels import (
    identity_labels,
    is_valid_label_value,
    resource_name_violation,
    task_definition_of,
    task_selector,
)
from .models import (
    CronJobResource,
    ImagePullPolicy,
    RestartPolicy,
    ScheduleInfo,
    ScheduleRequest,
    SchedulerPropertyKeys,
)
from .ports import CronJobClientPort, SchedulerPort
from .resources import resolve_image

logger = logging.getLogger(__name__)


class CronJobScheduler(SchedulerPort):
    """Core implementation of SchedulerPort backed by CronJobs.

    Stateless: each operation is a single call against the client and
    nothing is cached between calls.
    """

    def __init__(
        self,
        client: CronJobClientPort,
        image_pull_policy: ImagePullPolicy = ImagePullPolicy.IF_NOT_PRESENT,
        restart_policy: RestartPolicy = RestartPolicy.NEVER,
    ):
        """Initialize the scheduler.

        Args:
            client: CronJobClientPort scoped to the target namespace.
            image_pull_policy: Pull policy applied to every container.
            restart_policy: Restart policy applied to every pod template.
        """
        self.client = client
        self.image_pull_policy = image_pull_policy
        self.restart_policy = restart_policy

    def schedule(self, request: ScheduleRequest) -> None:
        """Create a CronJob for the request.

        Raises:
            InvalidScheduleRequestError: If the cron expression is missing.
            ResourceResolutionError: If the image cannot be resolved.
            CreateScheduleError: If the name is invalid or the platform
                rejects the CronJob.
        """
        resource = self.build_resource(request)

        violation = resource_name_violation(resource.name)
        if violation is not None:
            raise CreateScheduleError(
                f"Failed to create schedule {resource.name}: {violation}",
                schedule_name=resource.name,
            ) from ValueError(violation)

        try:
            self.client.create(resource)
        except PlatformError as e:
            logger.error(f"Failed to create schedule {resource.name}: {e}")
            raise CreateScheduleError(
                f"Failed to create schedule {resource.name}",
                schedule_name=resource.name,
            ) from e

        logger.info(
            f"Created schedule {resource.name} for task "
            f"{request.task_definition_name} ({resource.schedule})"
        )

    def build_resource(self, request: ScheduleRequest) -> CronJobResource:
        """Translate a schedule request into a CronJob resource.

        Args:
            request: The schedule request.

        Returns:
            CronJobResource ready to be submitted.

        Raises:
            InvalidScheduleRequestError: If the cron expression is missing.
            ResourceResolutionError: If the image cannot be resolved.
        """
        cron_expression = request.cron_expression
        if cron_expression is None or not cron_expression.strip():
            raise InvalidScheduleRequestError(
                f"Schedule {request.schedule_name} has no "
                f"'{SchedulerPropertyKeys.CRON_EXPRESSION}' property",
                schedule_name=request.schedule_name,
            )

        image = resolve_image(request.resource)

        return CronJobResource(
            name=request.schedule_name,
            labels=identity_labels(request.task_definition_name),
            schedule=cron_expression,
            image=image,
            image_pull_policy=self.image_pull_policy,
            restart_policy=self.restart_policy,
            args=request.command_line_args,
        )

    def unschedule(self, schedule_name: str) -> None:
        """Delete the CronJob named ``schedule_name``.

        Raises:
            UnscheduleError: If the CronJob does not exist or the platform
                fails the deletion.
        """
        try:
            deleted = self.client.delete(schedule_name)
        except PlatformError as e:
            raise UnscheduleError(
                f"Failed to unschedule schedule {schedule_name}",
                schedule_name=schedule_name,
            ) from e

        if not deleted:
            raise UnscheduleError(
                f"Failed to unschedule schedule {schedule_name} does not exist.",
                schedule_name=schedule_name,
            )

        logger.info(f"Deleted schedule {schedule_name}")

    def list_schedules(
        self, task_definition_name: str | None = None
    ) -> list[ScheduleInfo]:
        """List schedules, optionally restricted to one task definition.

        The label selector is only a hint to the client; the exact filter
        is always applied here. Names that are not valid label values
        cannot be expressed as a selector, so those list everything.
        """
        if task_definition_name is None or not is_valid_label_value(
            task_definition_name
        ):
            resources = self.client.list_cronjobs()
        else:
            resources = self.client.list_cronjobs(
                label_selector=task_selector(task_definition_name)
            )

        infos = [self.to_schedule_info(resource) for resource in resources]

        if task_definition_name is not None:
            infos = [
                info
                for info in infos
                if info.task_definition_name == task_definition_name
            ]

        logger.debug(f"Listed {len(infos)} schedules")
        return infos

    @staticmethod
    def to_schedule_info(resource: CronJobResource) -> ScheduleInfo:
        """Translate a CronJob resource into a schedule descriptor."""
        return ScheduleInfo(
            schedule_name=resource.name,
            task_definition_name=task_definition_of(resource.labels),
            schedule_properties={
                SchedulerPropertyKeys.CRON_EXPRESSION: resource.schedule,
            },
        )
