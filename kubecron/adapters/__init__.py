"""External adapters for the kubecron scheduler adapter.

This package contains all external dependencies (the kubernetes client,
the command-line interface) and provides implementations of the core
port interfaces.

Adapter Organization:

- kubernetes/: CronJobClientPort backed by the Kubernetes API
- cli/: Command-line interface mapping commands to SchedulerPort
"""
