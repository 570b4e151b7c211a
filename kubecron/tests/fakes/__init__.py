"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without a Kubernetes cluster:

- FakeCronJobClientPort: In-memory namespace of CronJobs
- FakeSchedulerPort: Captured scheduler operations for CLI tests
"""

from .cronjob_client import FakeCronJobClientPort
from .scheduler import FakeSchedulerPort

__all__ = [
    "FakeCronJobClientPort",
    "FakeSchedulerPort",
]
