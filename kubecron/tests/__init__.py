"""Test suite for the kubecron scheduler adapter.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Kubernetes client against a mocked BatchV1Api
   - CLI command handler against a fake scheduler

3. fakes/: Port implementations for testing
   - In-memory implementations of CronJobClientPort and SchedulerPort
"""
