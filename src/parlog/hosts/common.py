"""Shared helpers for test-framework integrations."""

import importlib

from ..context import ExecutionContext
from ..settings import ParlogSettings


def require_dependency(module_name, display_name):
    """Import a dependency or raise a clear error."""
    try:
        return importlib.import_module(module_name)
    except Exception as exc:
        raise ImportError(
            f"{display_name} support requires '{module_name}'. Install it to use this module."
        ) from exc


def build_host_settings(overrides=None):
    """Build settings from the environment with optional overrides."""
    settings = ParlogSettings.from_env()
    if isinstance(overrides, dict):
        for key, value in overrides.items():
            if hasattr(settings, key):
                setattr(settings, key, value)
    return settings


def context_from_test(name, params=None):
    """Create the execution context for one test invocation."""
    if isinstance(params, dict):
        params = params.values()
    return ExecutionContext(name, params=params or ())
