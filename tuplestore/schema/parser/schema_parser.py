import logging
logger = logging.getLogger("tuplestore.schema.parser")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(handler)

# No level of its own: inherits logging.level applied to the "tuplestore" logger

from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError

from ..errors import SchemaSyntaxError
from ..model.field_type import FieldType
from ..model.schema_descriptor import SchemaDescriptor

schema_grammar = r"""
// -----------------------------
// A schema is a comma separated column list, optionally parenthesized
//   (id int, name string, int)
// -----------------------------
?start: schema
schema: "(" field_list ")"
      | field_list

field_list: field ("," field)*

// A column is "<name> <type>" or a bare "<type>" for an anonymous field
field: NAME NAME  -> named_field
     | NAME       -> anonymous_field

NAME: /[A-Za-z_][A-Za-z0-9_]*/

%ignore /#[^\n]*/
%import common.WS
%ignore WS
"""


class SchemaTransformer(Transformer):
    """
    Transforms a Lark parse tree into a list of (name, type_text) pairs.
    Type names are resolved after the transform so that lookup errors are
    raised as-is instead of wrapped by Lark.
    """

    def schema(self, items):
        result = items[0]
        logger.debug("schema result: %s", result)
        return result

    def field_list(self, items):
        logger.debug("Entering field_list with items: %s", items)
        return list(items)

    def named_field(self, items):
        result = (str(items[0]), str(items[1]))
        logger.debug("named_field result: %s", result)
        return result

    def anonymous_field(self, items):
        result = (None, str(items[0]))
        logger.debug("anonymous_field result: %s", result)
        return result


class SchemaParser:
    def __init__(self):
        self.parser = Lark(schema_grammar, parser="earley")
        self.transformer = SchemaTransformer()

    def parse_fields(self, text: str) -> list[tuple[Optional[str], str]]:
        """Parse a declaration into (name, type_text) pairs without resolving types."""
        logger.debug("Starting parse for text:\n%s", text)
        try:
            parse_tree = self.parser.parse(text)
        except LarkError as e:
            logger.debug(f"[PARSE] Failed to parse schema declaration: {text!r}")
            raise SchemaSyntaxError(f"Invalid schema declaration: {e}") from e
        logger.debug("Parse tree:\n%s", parse_tree.pretty())
        return self.transformer.transform(parse_tree)

    def parse(self, text: str) -> SchemaDescriptor:
        """Parse a declaration such as ``(id int, name string)`` into a SchemaDescriptor.

        Raises:
            SchemaSyntaxError: if the text is not a valid column list
            ConstructionError: if a type name is unknown
        """
        pairs = self.parse_fields(text)
        names = [name for name, _ in pairs]
        types = [FieldType.from_name(type_text) for _, type_text in pairs]
        descriptor = SchemaDescriptor.create(types, names)
        logger.debug("Final schema: %s", descriptor)
        return descriptor


_default_parser: Optional[SchemaParser] = None


def parse_schema(text: str) -> SchemaDescriptor:
    """Parse a schema declaration with a shared SchemaParser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = SchemaParser()
    return _default_parser.parse(text)
