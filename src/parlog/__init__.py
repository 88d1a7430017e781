from .logger import logger
from .core import DelegateLogger, ReportHandler
from .context import ExecutionContext, get_current_context, use_context
from .settings import ParlogSettings
from .slots import Slot, SlotLookup, SlotState

__all__ = [
    "logger",
    "DelegateLogger",
    "ReportHandler",
    "ExecutionContext",
    "get_current_context",
    "use_context",
    "ParlogSettings",
    "Slot",
    "SlotLookup",
    "SlotState",
]
