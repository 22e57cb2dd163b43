from __future__ import annotations
from typing import Any, Dict

FieldDescriptor = Dict[str, Any]


class FieldBuilder:
    """Fluent construction of a single field descriptor.

    Nothing is validated here; a bad ``type`` or a ``value`` that does not
    fit it is reported by the engine when the schema is used.
    """

    def __init__(self) -> None:
        self._required = True
        self._type: Any = "object"
        self._value: Any = None
        self._has_value = False

    def type(self, type_: Any) -> "FieldBuilder":
        self._type = type_
        return self

    def value(self, value: Any) -> "FieldBuilder":
        self._value = value
        self._has_value = True
        return self

    def required(self) -> "FieldBuilder":
        self._required = True
        return self

    def optional(self) -> "FieldBuilder":
        self._required = False
        return self

    def build(self) -> FieldDescriptor:
        descriptor: FieldDescriptor = {"required": self._required, "type": self._type}
        # an unset value is left out, an empty {} or [] is kept
        if self._has_value:
            descriptor["value"] = self._value
        return descriptor


def field_maker() -> FieldBuilder:
    return FieldBuilder()
