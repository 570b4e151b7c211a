"""Tests for adapter implementations.

The Kubernetes client is exercised against a mocked BatchV1Api.
"""
