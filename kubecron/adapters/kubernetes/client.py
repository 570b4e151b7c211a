"""Kubernetes CronJob client adapter.

Implements CronJobClientPort on top of the official kubernetes Python
client (BatchV1Api). All calls are scoped to the namespace given at
construction time.
"""

import logging
from enum import Enum
from typing import Any, TypeVar

import urllib3
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from kubecron.config import Settings
from kubecron.core.errors import PlatformError
from kubecron.core.models import (
    CRONJOB_API_VERSION,
    CronJobResource,
    ImagePullPolicy,
    RestartPolicy,
)
from kubecron.core.ports import CronJobClientPort

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def load_cluster_config(
    in_cluster: bool | None = None,
    kubeconfig: str | None = None,
    context: str | None = None,
) -> None:
    """Load Kubernetes client configuration.

    Args:
        in_cluster: True to require in-cluster config, False to require a
            kubeconfig file, None to try in-cluster then kubeconfig.
        kubeconfig: Explicit kubeconfig path.
        context: kubeconfig context name.

    Raises:
        ConfigException: If no usable configuration is found.
    """
    if in_cluster is not False:
        try:
            config.load_incluster_config()
            logger.info("Using in-cluster Kubernetes configuration")
            return
        except config.ConfigException:
            if in_cluster:
                logger.error("In-cluster Kubernetes configuration not available")
                raise
            logger.debug("Not running in a cluster, falling back to kubeconfig")

    try:
        config.load_kube_config(config_file=kubeconfig, context=context)
        logger.info("Using kubeconfig file")
    except config.ConfigException as e:
        logger.error(f"Failed to load Kubernetes configuration: {e}")
        raise


def _enum_or_default(enum_cls: type[E], value: str | None, default: E) -> E:
    """Map a raw policy string onto an enum, tolerating unknown values."""
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} '{value}', using {default.value}")
        return default


class KubernetesCronJobClient(CronJobClientPort):
    """CronJobClientPort backed by the Kubernetes batch/v1 API."""

    def __init__(self, batch_api: client.BatchV1Api, namespace: str):
        """Initialize the client.

        Args:
            batch_api: Configured BatchV1Api instance.
            namespace: Namespace every call is scoped to.
        """
        self.batch_api = batch_api
        self.namespace = namespace

    @classmethod
    def from_settings(cls, settings: Settings) -> "KubernetesCronJobClient":
        """Load cluster configuration and build a client for the settings' namespace."""
        load_cluster_config(
            in_cluster=settings.in_cluster,
            kubeconfig=settings.kubeconfig,
            context=settings.kube_context,
        )
        return cls(client.BatchV1Api(), settings.namespace)

    def create(self, resource: CronJobResource) -> None:
        """Create a CronJob in the namespace.

        Raises:
            PlatformError: If the API server rejects the CronJob or is
                unreachable.
        """
        body = self.to_v1_cron_job(resource)
        try:
            self.batch_api.create_namespaced_cron_job(
                namespace=self.namespace,
                body=body,
            )
        except ApiException as e:
            raise PlatformError(
                f"Kubernetes rejected CronJob {resource.name}: {e.reason}",
                status=e.status,
                reason=e.reason,
            ) from e
        except urllib3.exceptions.HTTPError as e:
            raise PlatformError(
                f"Kubernetes API unreachable creating CronJob {resource.name}: {e}"
            ) from e

        logger.debug(f"Created CronJob {resource.name} in namespace {self.namespace}")

    def delete(self, name: str) -> bool:
        """Delete a CronJob and, in the background, the Jobs it spawned.

        Returns:
            True if the CronJob was deleted, False if it did not exist.

        Raises:
            PlatformError: For any API failure other than not-found.
        """
        try:
            self.batch_api.delete_namespaced_cron_job(
                name=name,
                namespace=self.namespace,
                propagation_policy="Background",
            )
        except ApiException as e:
            if e.status == 404:
                logger.debug(f"CronJob {name} not found in namespace {self.namespace}")
                return False
            raise PlatformError(
                f"Failed to delete CronJob {name}: {e.reason}",
                status=e.status,
                reason=e.reason,
            ) from e
        except urllib3.exceptions.HTTPError as e:
            raise PlatformError(
                f"Kubernetes API unreachable deleting CronJob {name}: {e}"
            ) from e

        logger.debug(f"Deleted CronJob {name} from namespace {self.namespace}")
        return True

    def list_cronjobs(
        self, label_selector: str | None = None
    ) -> list[CronJobResource]:
        """List CronJobs in the namespace.

        Raises:
            PlatformError: If the API read fails.
        """
        kwargs: dict[str, Any] = {"namespace": self.namespace}
        if label_selector:
            kwargs["label_selector"] = label_selector

        try:
            cron_job_list = self.batch_api.list_namespaced_cron_job(**kwargs)
        except ApiException as e:
            raise PlatformError(
                f"Failed to list CronJobs in namespace {self.namespace}: {e.reason}",
                status=e.status,
                reason=e.reason,
            ) from e
        except urllib3.exceptions.HTTPError as e:
            raise PlatformError(
                f"Kubernetes API unreachable listing CronJobs: {e}"
            ) from e

        return [self.from_v1_cron_job(item) for item in cron_job_list.items or []]

    @staticmethod
    def to_v1_cron_job(resource: CronJobResource) -> client.V1CronJob:
        """Build the V1CronJob body for a CronJobResource."""
        container = client.V1Container(
            name=resource.name,
            image=resource.image,
            image_pull_policy=resource.image_pull_policy.value,
            args=list(resource.args) or None,
        )
        return client.V1CronJob(
            api_version=resource.api_version,
            kind="CronJob",
            metadata=client.V1ObjectMeta(
                name=resource.name,
                labels=dict(resource.labels),
            ),
            spec=client.V1CronJobSpec(
                schedule=resource.schedule,
                job_template=client.V1JobTemplateSpec(
                    spec=client.V1JobSpec(
                        template=client.V1PodTemplateSpec(
                            spec=client.V1PodSpec(
                                containers=[container],
                                restart_policy=resource.restart_policy.value,
                            )
                        )
                    )
                ),
            ),
        )

    @staticmethod
    def from_v1_cron_job(cron_job: client.V1CronJob) -> CronJobResource:
        """Read a V1CronJob returned by the API into a CronJobResource.

        CronJobs not created by kubecron may lack containers or use
        values kubecron never sets; those fields fall back to defaults.
        """
        metadata = cron_job.metadata
        spec = cron_job.spec

        pod_spec = None
        if spec is not None and spec.job_template and spec.job_template.spec:
            template = spec.job_template.spec.template
            pod_spec = template.spec if template is not None else None

        container = pod_spec.containers[0] if pod_spec and pod_spec.containers else None

        return CronJobResource(
            name=metadata.name,
            labels=metadata.labels or {},
            schedule=spec.schedule if spec is not None else "",
            image=(container.image or "") if container is not None else "",
            image_pull_policy=_enum_or_default(
                ImagePullPolicy,
                container.image_pull_policy if container is not None else None,
                ImagePullPolicy.IF_NOT_PRESENT,
            ),
            restart_policy=_enum_or_default(
                RestartPolicy,
                pod_spec.restart_policy if pod_spec is not None else None,
                RestartPolicy.NEVER,
            ),
            args=tuple(container.args or ()) if container is not None else (),
            api_version=cron_job.api_version or CRONJOB_API_VERSION,
        )
