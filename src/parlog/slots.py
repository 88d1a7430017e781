"""Typed attribute slots on execution contexts."""

import enum
from dataclasses import dataclass
from typing import Any

_MISSING = object()


class SlotState(enum.Enum):
    VALID = "valid"
    ABSENT = "absent"
    INVALID = "invalid"


@dataclass(frozen=True)
class SlotLookup:
    """Outcome of reading a slot; ``value`` holds the raw entry unless absent."""
    state: SlotState
    value: Any = None


@dataclass(frozen=True)
class Slot:
    """Typed key for one attribute on an execution context."""
    name: str
    expected_type: type

    def lookup(self, context) -> SlotLookup:
        raw = context.get_attribute(self.name, _MISSING)
        if raw is _MISSING:
            return SlotLookup(SlotState.ABSENT)
        if isinstance(raw, self.expected_type):
            return SlotLookup(SlotState.VALID, raw)
        return SlotLookup(SlotState.INVALID, raw)

    def store(self, context, value):
        context.set_attribute(self.name, value)

    def clear(self, context):
        context.remove_attribute(self.name)
