from tuplestore.schema import SchemaDescriptor, SchemaError, SchemaParser
from tuplestore.schema.parser.schema_parser import logger as parser_logger
import logging
import pprint


def main():

    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')

    test_schemas = [
        (
            "Named columns",
            r"""
                (id int, name string)
            """,
        ),
        (
            "Anonymous columns without parentheses",
            r"""
                int, string, int
            """,
        ),
        (
            "Unknown type (should fail)",
            r"""
                (price float)
            """,
        ),
        (
            "Missing column (should fail)",
            r"""
                (id int, )
            """,
        ),
    ]

    parser = SchemaParser()
    parsed = []

    for desc, text in test_schemas:
        print(f"--- {desc} ---")
        try:
            pprint.pprint(parser.parse_fields(text))
            schema = parser.parse(text)
            print(schema)
            print(f"byte size: {schema.byte_size()}")
            parsed.append(schema)
        except SchemaError as e:
            print(f"Error parsing '{desc}': {e}")

    print("--- Merge of all parsed schemas ---")
    merged = parsed[0]
    for schema in parsed[1:]:
        merged = SchemaDescriptor.merge(merged, schema)
    print(merged)

    print("--- Debug trace for a single parse ---")
    parser_logger.setLevel(logging.DEBUG)
    parser.parse("(id int)")


if __name__ == "__main__":
    main()
