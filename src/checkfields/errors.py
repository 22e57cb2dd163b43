from __future__ import annotations
from typing import Any, Mapping

DATA_FIELD_INVALID_TYPE = "data_field_invalid_type"
DATA_FIELDS_MISSING = "data_fields_missing"
DATA_FIELDS_OVERLOAD = "data_fields_overload"
DATA_NOT_DEFINED = "data_not_defined"
SCHEMA_INVALID = "schema_invalid"
SCHEMA_INVALID_TYPE = "schema_invalid_type"
SCHEMA_NOT_DEFINED = "schema_not_defined"

SLOTS = (
    DATA_FIELD_INVALID_TYPE,
    DATA_FIELDS_MISSING,
    DATA_FIELDS_OVERLOAD,
    DATA_NOT_DEFINED,
    SCHEMA_INVALID,
    SCHEMA_INVALID_TYPE,
    SCHEMA_NOT_DEFINED,
)


class CheckFieldsError(Exception):
    """Raised on the first mismatch between data and schema.

    The error record is kept as plain data on ``record``; callers are
    expected to branch on ``reason``.
    """

    def __init__(self, slot: str, record: Mapping[str, Any]):
        self.slot = slot
        self.record = dict(record)
        super().__init__(self._message())

    @property
    def reason(self) -> str | None:
        return self.record.get("reason")

    def __getitem__(self, key: str) -> Any:
        return self.record[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.record.get(key, default)

    def _message(self) -> str:
        key = self.record.get("field_key")
        if key is None:
            key = (self.record.get("field") or self.record.get("schema_field") or {}).get("key")
        if key is None:
            return f"{self.reason} ({self.slot})"
        return f"{self.reason} ({self.slot}) at field {key!r}"


class SchemaError(CheckFieldsError):
    pass

class DataError(CheckFieldsError):
    pass


def error_for(slot: str, record: Mapping[str, Any]) -> CheckFieldsError:
    if slot.startswith("schema_"):
        return SchemaError(slot, record)
    return DataError(slot, record)
