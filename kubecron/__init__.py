"""kubecron: a scheduler contract realized as Kubernetes CronJobs."""

__version__ = "0.1.0"
