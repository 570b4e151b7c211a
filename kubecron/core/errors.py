"""Exception hierarchy for the kubecron scheduler adapter."""


class SchedulerError(Exception):
    """Base class for all scheduler failures.

    Attributes:
        schedule_name: Schedule the failure relates to, if any.
    """

    def __init__(self, message: str, schedule_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.schedule_name = schedule_name


class CreateScheduleError(SchedulerError):
    """The platform rejected or could not perform schedule creation.

    The underlying failure is chained as ``__cause__``.
    """


class UnscheduleError(SchedulerError):
    """A schedule could not be deleted, usually because it does not exist."""


class ResourceResolutionError(SchedulerError, ValueError):
    """A request's resource reference could not produce an image identifier."""

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource


class InvalidScheduleRequestError(SchedulerError, ValueError):
    """A schedule request is missing data the platform needs."""


class PlatformError(Exception):
    """Failure reported by a CronJobClientPort implementation.

    Attributes:
        status: HTTP-like status code from the platform, if known.
        reason: Short reason phrase from the platform.
    """

    def __init__(self, message: str, status: int | None = None, reason: str | None = None):
        super().__init__(message)
        self.status = status
        self.reason = reason

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_conflict(self) -> bool:
        return self.status == 409


__all__ = [
    "CreateScheduleError",
    "InvalidScheduleRequestError",
    "PlatformError",
    "ResourceResolutionError",
    "SchedulerError",
    "UnscheduleError",
]
