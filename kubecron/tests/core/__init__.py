"""Unit tests for core domain logic.

Tests use in-memory fakes for ports.
"""
