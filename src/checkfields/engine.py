from __future__ import annotations
from typing import Any, Mapping

from .config import ErrorConfig, resolve_errors
from .errors import (
    DATA_FIELD_INVALID_TYPE,
    DATA_FIELDS_MISSING,
    DATA_FIELDS_OVERLOAD,
    DATA_NOT_DEFINED,
    SCHEMA_INVALID,
    SCHEMA_INVALID_TYPE,
    SCHEMA_NOT_DEFINED,
    error_for,
)
from .typeof import (
    ACCEPTABLE_TYPES,
    KINDS,
    UNDEFINED,
    is_array,
    is_not_array,
    is_not_object,
    is_object,
    is_string,
    is_truthy,
    is_undefined,
    kind_of,
)

CONTAINER_TYPES = ("object", "array")


def _field_count(value: Any) -> int:
    if is_object(value) or is_array(value) or is_string(value):
        return len(value)
    return 0

def _lookup(value: Any, key: str) -> Any:
    if is_object(value):
        return value.get(key, UNDEFINED)
    return UNDEFINED


class CheckFields:
    """Validate ``data`` against ``schema``.

    Two phases: ``prepare()`` makes sure both arguments were supplied at all,
    ``check()`` compares them. The first mismatch raises a
    :class:`~checkfields.errors.CheckFieldsError`; a clean run returns None.

    Every schema key must be present in the data. The ``required`` flag of a
    descriptor is stored by the builder but not read here. When data and
    schema have the same number of keys but different names, only the schema
    key missing from the data is reported; the extra data key is not.
    """

    def __init__(self, data: Any = UNDEFINED, schema: Any = UNDEFINED,
                 errors: Mapping[str, Mapping[str, Any]] | None = None,
                 *, _resolved: ErrorConfig | None = None):
        self.data = data
        self.schema = schema
        self.errors: ErrorConfig = _resolved if _resolved is not None else resolve_errors(errors)

    def fail(self, slot: str, **context: Any):
        raise error_for(slot, {**self.errors[slot], **context})

    def prepare(self) -> "CheckFields":
        if is_undefined(self.schema):
            self.fail(SCHEMA_NOT_DEFINED, data=self.data, schema=self.schema)
        if is_undefined(self.data):
            self.fail(DATA_NOT_DEFINED, data=self.data, schema=self.schema)
        return self

    def check(self) -> None:
        self.check_defined()
        self.check_length()
        self.check_required_fields()

    def check_defined(self) -> None:
        if not is_truthy(self.data) or not is_truthy(self.schema):
            self.fail(DATA_FIELDS_MISSING, data=self.data, schema=self.schema)
        if is_not_object(self.schema):
            self.fail(
                SCHEMA_INVALID,
                expected_type="object",
                received_type=kind_of(self.schema),
                schema=self.schema,
            )

    def check_length(self) -> None:
        data_fields_length = _field_count(self.data)
        schema_fields_length = _field_count(self.schema)
        if data_fields_length == schema_fields_length:
            return
        slot = DATA_FIELDS_MISSING if data_fields_length < schema_fields_length else DATA_FIELDS_OVERLOAD
        self.fail(
            slot,
            data_fields_length=data_fields_length,
            schema_fields_length=schema_fields_length,
            data=self.data,
            schema=self.schema,
        )

    def check_required_fields(self) -> None:
        for key, descriptor in self.schema.items():
            if is_object(descriptor):
                field_type = descriptor.get("type", UNDEFINED)
                field_value = descriptor.get("value", UNDEFINED)
            else:
                field_type, field_value = UNDEFINED, UNDEFINED

            self.check_schema_type(key, field_type)
            self.check_schema(key, field_type, field_value)

            data_value = _lookup(self.data, key)
            if is_undefined(data_value):
                self.fail(
                    DATA_FIELDS_MISSING,
                    field_is_undefined=True,
                    field_key=key,
                    data=self.data,
                    schema=self.schema,
                )

            self.check_data_type(key, data_value, field_type)

            if is_truthy(field_value):
                self.check_nested(field_value, data_value)

    def check_schema_type(self, key: str, field_type: Any) -> None:
        if is_string(field_type) and field_type in ACCEPTABLE_TYPES:
            return
        self.fail(
            SCHEMA_INVALID_TYPE,
            schema_field={"key": key, "type": field_type},
            acceptable_types=list(ACCEPTABLE_TYPES),
            schema=self.schema,
        )

    def check_schema(self, key: str, field_type: str, field_value: Any) -> None:
        """Check that a descriptor's nested ``value`` agrees with its ``type``."""
        expected_type = None
        if field_type in CONTAINER_TYPES:
            if not is_truthy(field_value):
                expected_type = "object | array"
            elif field_type == "object" and is_not_object(field_value):
                expected_type = "object"
            elif field_type == "array" and is_not_array(field_value):
                expected_type = "array"
        elif is_truthy(field_value):
            # primitives never carry a nested schema, not even {} or []
            expected_type = "object | array"

        if expected_type is None:
            return
        self.fail(
            SCHEMA_INVALID,
            schema_field={"key": key, "type": field_type, "value": field_value},
            expected_type=expected_type,
            received_type=kind_of(field_value),
            schema=self.schema,
        )

    def check_data_type(self, key: str, data_value: Any, field_type: str) -> None:
        if KINDS[field_type](data_value):
            return
        self.fail(
            DATA_FIELD_INVALID_TYPE,
            field={
                "expected_type": field_type,
                "received_type": kind_of(data_value),
                "key": key,
                "value": data_value,
            },
            data=self.data,
            schema=self.schema,
        )

    def check_nested(self, field_value: Any, data_value: Any) -> None:
        if is_object(field_value):
            self.check_object_fields(data_value, field_value)
        elif is_array(field_value):
            self.check_array_fields(data_value, field_value[0] if len(field_value) else {})

    def check_object_fields(self, data: Any, schema: Any) -> None:
        CheckFields(data, schema, _resolved=self.errors).prepare().check()

    def check_array_fields(self, items: Any, schema: Any) -> None:
        for item in items:
            CheckFields(item, schema, _resolved=self.errors).prepare().check()


def validate(data: Any = UNDEFINED, schema: Any = UNDEFINED,
             errors: Mapping[str, Mapping[str, Any]] | None = None) -> None:
    """Raise on the first mismatch between ``data`` and ``schema``."""
    CheckFields(data, schema, errors).prepare().check()
