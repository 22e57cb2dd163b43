from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .errors import SLOTS

ErrorConfig = Dict[str, Dict[str, Any]]

# reason codes are the upper-cased slot names
DEFAULT_ERRORS: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    slot: MappingProxyType({"reason": slot.upper()}) for slot in SLOTS
})


def resolve_errors(overrides: Mapping[str, Mapping[str, Any]] | None = None) -> ErrorConfig:
    """Merge caller overrides over the defaults, slot by slot.

    Always returns a fresh dict; ``DEFAULT_ERRORS`` is never touched.
    Slots not present in the defaults are kept as given.

    Override fields land in every record raised for their slot, but the
    context the engine attaches (``data``, ``schema``, ``field_key``,
    ``field``, ...) wins over an override field of the same name.
    """
    resolved: ErrorConfig = {slot: dict(record) for slot, record in DEFAULT_ERRORS.items()}
    for slot, record in (overrides or {}).items():
        if not isinstance(record, Mapping):
            raise TypeError(f"Error override for {slot!r} must be a mapping, got {type(record).__name__}")
        resolved[slot] = {**resolved.get(slot, {}), **record}
    return resolved
