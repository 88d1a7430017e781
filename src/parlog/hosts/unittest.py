"""unittest support: one execution context per test method."""

from ..context import reset_current_context, set_current_context
from ..core import DelegateLogger
from ..logger import logger
from .common import build_host_settings, context_from_test


class DelegateLoggingMixin:
    """Mixin for ``unittest.TestCase`` making each test's context current.

    Set ``delegate_logger`` on the class to use a specific DelegateLogger, or
    ``delegate_overrides`` to build one from the environment settings with
    those overrides. Otherwise the process-wide one is used.
    """
    delegate_logger = None
    delegate_overrides = None

    def setUp(self):
        super().setUp()
        self.execution_context = context_from_test(self.id())
        token = set_current_context(self.execution_context)
        self.addCleanup(reset_current_context, token)
        self.addCleanup(self._delegate_source().release, self.execution_context)

    @classmethod
    def _delegate_source(cls):
        if cls.delegate_logger is None and cls.delegate_overrides:
            cls.delegate_logger = DelegateLogger(build_host_settings(cls.delegate_overrides))
        return logger if cls.delegate_logger is None else cls.delegate_logger

    @property
    def log(self):
        return self._delegate_source().delegate(self.execution_context)
