"""Lazy proxy deferring construction of the process-wide delegate."""

import threading


class LazyDelegate:
    """Proxy that builds its target on first attribute access."""
    def __init__(self, factory):
        self._factory = factory
        self._lock = threading.Lock()
        self._target = None

    @property
    def initialized(self):
        return self._target is not None

    def resolve(self):
        """Return the target, creating it exactly once across threads."""
        if self._target is None:
            with self._lock:
                if self._target is None:
                    self._target = self._factory()
        return self._target

    def __getattr__(self, name):
        return getattr(self.resolve(), name)

    def __repr__(self):
        return f"<LazyDelegate initialized={self.initialized}>"
