from .schema_parser import SchemaParser, parse_schema

__all__ = ['SchemaParser', 'parse_schema']
