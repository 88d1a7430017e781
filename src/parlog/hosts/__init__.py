"""Integrations binding execution contexts to test frameworks."""

from .common import build_host_settings, context_from_test

__all__ = ["build_host_settings", "context_from_test"]
