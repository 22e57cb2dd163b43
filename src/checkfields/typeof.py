from __future__ import annotations
import math
from collections.abc import Mapping
from typing import Any, Callable, Literal

Kind = Literal["string", "boolean", "number", "array", "object"]

ACCEPTABLE_TYPES: tuple[Kind, ...] = ("string", "boolean", "number", "array", "object")


class _Undefined:
    """Marker for a value that was never supplied."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED

def is_string(value: Any) -> bool:
    return isinstance(value, str)

def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)

def is_number(value: Any) -> bool:
    if isinstance(value, bool): return False
    return isinstance(value, (int, float))

def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))

def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)

def is_not_object(value: Any) -> bool:
    return not is_object(value)

def is_not_array(value: Any) -> bool:
    return not is_array(value)


def is_truthy(value: Any) -> bool:
    # containers count as present even when empty
    if value is UNDEFINED or value is None: return False
    if isinstance(value, bool): return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str): return value != ""
    return True


KINDS: dict[str, Callable[[Any], bool]] = {
    "string": is_string,
    "boolean": is_boolean,
    "number": is_number,
    "array": is_array,
    "object": is_object,
}


def kind_of(value: Any) -> str:
    if value is UNDEFINED: return "undefined"
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if isinstance(value, (int, float)): return "number"
    if isinstance(value, str): return "string"
    if is_array(value): return "array"
    if is_object(value): return "object"
    return type(value).__name__
