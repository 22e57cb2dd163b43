from .builder import FieldBuilder, field_maker
from .config import DEFAULT_ERRORS, resolve_errors
from .engine import CheckFields, validate
from .errors import CheckFieldsError, DataError, SchemaError
from .typeof import ACCEPTABLE_TYPES, UNDEFINED

__all__ = [
    "ACCEPTABLE_TYPES",
    "CheckFields",
    "CheckFieldsError",
    "DataError",
    "DEFAULT_ERRORS",
    "FieldBuilder",
    "SchemaError",
    "UNDEFINED",
    "field_maker",
    "resolve_errors",
    "validate",
]
