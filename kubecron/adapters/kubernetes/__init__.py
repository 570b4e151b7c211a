"""Kubernetes adapters.

- client: CronJobClientPort backed by the batch/v1 CronJob API
"""

from .client import KubernetesCronJobClient, load_cluster_config

__all__ = ["KubernetesCronJobClient", "load_cluster_config"]
