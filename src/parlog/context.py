"""Execution contexts and the ambient current test."""

import itertools
import os
from contextlib import contextmanager
from contextvars import ContextVar

_current: ContextVar["ExecutionContext | None"] = ContextVar("parlog_context", default=None)
_ids = itertools.count(1)


def new_context_id() -> str:
    """Return a token unique to one execution context."""
    return f"{os.getpid()}-{next(_ids)}"


class ExecutionContext:
    """Handle for one running test with its own attribute store."""
    def __init__(self, name, params=(), context_id=None):
        self.name = name
        self.params = tuple(params)
        self.context_id = context_id or new_context_id()
        self.output = []
        self._attributes = {}

    @property
    def label(self):
        """Test name with its invocation parameters, if any."""
        if not self.params:
            return self.name
        return f"{self.name}({', '.join(str(p) for p in self.params)})"

    def get_attribute(self, key, default=None):
        return self._attributes.get(key, default)

    def set_attribute(self, key, value):
        self._attributes[key] = value

    def remove_attribute(self, key):
        return self._attributes.pop(key, None)

    def has_attribute(self, key):
        return key in self._attributes

    def attribute_names(self):
        return set(self._attributes)

    def __repr__(self):
        return f"<ExecutionContext {self.label!r} id={self.context_id}>"


def set_current_context(context):
    """Make a context current and return the token to restore the previous one."""
    return _current.set(context)


def reset_current_context(token):
    """Restore the context that was current before ``set_current_context``."""
    _current.reset(token)


def get_current_context() -> ExecutionContext:
    """Return the current context or raise LookupError when none is active."""
    context = _current.get()
    if context is None:
        raise LookupError("no execution context is active")
    return context


@contextmanager
def use_context(context):
    """Run a block with ``context`` as the current one."""
    token = _current.set(context)
    try:
        yield context
    finally:
        _current.reset(token)
