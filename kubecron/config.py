"""Configuration loading for the kubecron scheduler adapter.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kubecron.core.models import ImagePullPolicy, RestartPolicy

NAMESPACE_ENV_VAR = "KUBERNETES_NAMESPACE"
DEFAULT_NAMESPACE = "default"


def _default_namespace() -> str:
    """Namespace from the environment, falling back to ``default``."""
    return os.environ.get(NAMESPACE_ENV_VAR) or DEFAULT_NAMESPACE


class Settings(BaseSettings):
    """Scheduler configuration loaded from environment.

    Every setting can be overridden with a ``KUBECRON_`` prefixed
    environment variable (e.g. ``KUBECRON_RESTART_POLICY=OnFailure``).
    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_prefix="KUBECRON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # CronJob defaults
    image_pull_policy: ImagePullPolicy = Field(
        default=ImagePullPolicy.IF_NOT_PRESENT,
        description="Image pull policy applied to every scheduled container",
    )
    restart_policy: RestartPolicy = Field(
        default=RestartPolicy.NEVER,
        description="Restart policy applied to every scheduled pod",
    )
    namespace: str = Field(
        default_factory=_default_namespace,
        description="Namespace all CronJobs are created, listed and deleted in",
    )

    # Cluster connection
    kubeconfig: str | None = Field(
        default=None,
        description="Path to a kubeconfig file (defaults to ~/.kube/config)",
    )
    kube_context: str | None = Field(
        default=None,
        description="kubeconfig context to use",
    )
    in_cluster: bool | None = Field(
        default=None,
        description="Force in-cluster (True) or kubeconfig (False) configuration; "
        "None tries in-cluster first",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Ensure namespace is a non-empty string."""
        v = v.strip()
        if not v:
            raise ValueError("namespace must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load scheduler settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails, including policy
            values outside the accepted enumerations.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
