"""Delegate logger cache and per-test report capture."""

import logging

from .context import get_current_context
from .settings import ParlogSettings
from .slots import Slot, SlotState

_log = logging.getLogger(__name__)


def default_namer(context, prefix):
    """Build a logger name from the test label and the context's unique id."""
    label = context.label.replace(".", "_")
    return f"{prefix}.{label}#{context.context_id}"


class ReportHandler(logging.Handler):
    """Append formatted records to the owning context's report output."""
    def __init__(self, context, fmt=None):
        super().__init__()
        self.context = context
        if fmt is not None:
            self.setFormatter(logging.Formatter(fmt))

    def emit(self, record):
        try:
            self.context.output.append(self.format(record))
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


class DelegateLogger:
    """Hand out one named logger per execution context.

    The logger for a context is created on first use and cached in a slot on
    that context, so later calls from the same test get the same object.
    A slot holding anything other than a logger is overwritten with a fresh
    one.
    """
    def __init__(self, settings=None, logger_factory=None, namer=None, handle_type=None):
        self._settings = settings if settings is not None else ParlogSettings()
        self._logger_factory = logger_factory or logging.getLogger
        self._namer = namer or default_namer
        self._slot = Slot(self._settings.slot_name, handle_type or logging.Logger)

    @property
    def settings(self):
        return self._settings

    @property
    def slot(self):
        return self._slot

    def delegate(self, context=None):
        """Return the logger bound to ``context`` or the current context."""
        if context is None:
            context = get_current_context()
        found = self._slot.lookup(context)
        if found.state is SlotState.VALID:
            return found.value
        if found.state is SlotState.INVALID:
            _log.debug(
                "replacing %s value in slot %r of %r",
                type(found.value).__name__, self._slot.name, context,
            )
        handle = self._create(context)
        self._slot.store(context, handle)
        return handle

    def _create(self, context):
        """Build and configure a new logger for ``context``."""
        name = self._namer(context, self._settings.prefix)
        handle = self._logger_factory(name)
        if isinstance(handle, logging.Logger):
            if self._settings.level is not None:
                handle.setLevel(self._settings.level)
            handle.propagate = self._settings.propagate
            if self._settings.capture:
                handle.addHandler(ReportHandler(context, self._settings.report_format))
        _log.debug("created delegate logger %r", name)
        return handle

    def release(self, context):
        """Detach report capture from the logger of ``context`` and empty its slot."""
        found = self._slot.lookup(context)
        if found.state is SlotState.VALID and isinstance(found.value, logging.Logger):
            for handler in list(found.value.handlers):
                if isinstance(handler, ReportHandler) and handler.context is context:
                    found.value.removeHandler(handler)
                    handler.close()
        self._slot.clear(context)

    def debug(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().debug(message, *args, **kwargs)

    def info(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().info(message, *args, **kwargs)

    def warning(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().warning(message, *args, **kwargs)

    def error(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().error(message, *args, **kwargs)

    def exception(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().exception(message, *args, **kwargs)

    def critical(self, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().critical(message, *args, **kwargs)

    def log(self, level, message, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        self.delegate().log(level, message, *args, **kwargs)

    def __repr__(self):
        return f"<DelegateLogger prefix={self._settings.prefix!r} slot={self._slot.name!r}>"
