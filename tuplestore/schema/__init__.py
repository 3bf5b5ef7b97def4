"""
Schema descriptors: typed, optionally named field lists describing relations.
"""
from .errors import (
    SchemaError,
    ConstructionError,
    FieldIndexError,
    FieldNotFoundError,
    UnsupportedOperationError,
    SchemaSyntaxError,
)
from .model.field_type import FieldType, STRING_LEN
from .model.field_descriptor import FieldDescriptor
from .model.schema_descriptor import SchemaDescriptor, SchemaIterator
from .parser.schema_parser import SchemaParser, parse_schema

__all__ = [
    'SchemaError', 'ConstructionError', 'FieldIndexError', 'FieldNotFoundError',
    'UnsupportedOperationError', 'SchemaSyntaxError',
    'FieldType', 'STRING_LEN', 'FieldDescriptor', 'SchemaDescriptor', 'SchemaIterator',
    'SchemaParser', 'parse_schema',
]
