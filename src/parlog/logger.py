from .bootstrap import build_delegate
from .lazy import LazyDelegate

logger = LazyDelegate(build_delegate)
