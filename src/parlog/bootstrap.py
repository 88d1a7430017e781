"""Helpers for building configured delegate loggers."""

import logging

from .core import DelegateLogger
from .settings import ParlogSettings

_log = logging.getLogger(__name__)


def build_delegate(settings=None, logger_factory=None, namer=None):
    """Create a delegate logger, reading settings from the environment when omitted."""
    if settings is None:
        settings = ParlogSettings.from_env()
    instance = DelegateLogger(settings=settings, logger_factory=logger_factory, namer=namer)
    _log.debug("built %r from %r", instance, settings)
    return instance
