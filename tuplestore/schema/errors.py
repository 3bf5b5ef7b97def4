"""
Error types raised by schema descriptors and their helpers.

Every error derives from SchemaError and from the closest builtin exception,
so callers may catch either.
"""


class SchemaError(Exception):
    """Base class for all schema descriptor errors."""


class ConstructionError(SchemaError, ValueError):
    """Raised when a descriptor is built from an empty or mismatched type/name list."""


class FieldIndexError(SchemaError, IndexError):
    """Raised by positional accessors when the index is outside [0, field_count())."""

    def __init__(self, index: int, field_count: int):
        self.index = index
        self.field_count = field_count
        super().__init__(f"Field index {index} out of range for {field_count} fields")


class FieldNotFoundError(SchemaError, LookupError):
    """Raised by name lookup when the name is None or no field carries it."""

    def __init__(self, name):
        self.name = name
        if name is None:
            message = "Cannot look up a field without a name"
        else:
            message = f"No field named '{name}'"
        super().__init__(message)


class UnsupportedOperationError(SchemaError, TypeError):
    """Raised for operations a descriptor refuses to perform, such as hashing."""


class SchemaSyntaxError(SchemaError, ValueError):
    """Raised when a schema declaration cannot be parsed."""
