"""
Field type enumeration. Every type has a fixed on-disk byte width.
"""
from enum import Enum

from ..errors import ConstructionError

# Maximum number of characters stored for a string field.
STRING_LEN = 128


class FieldType(Enum):
    """
    Enumeration of field types supported by tuples.

    FIXED WIDTHS:
    - INT_TYPE: 4 byte signed integer
    - STRING_TYPE: 4 byte length prefix followed by STRING_LEN bytes
    """
    INT_TYPE = "int"
    STRING_TYPE = "string"

    def get_len(self) -> int:
        """Return the number of bytes a value of this type occupies."""
        if self is FieldType.INT_TYPE:
            return 4
        return STRING_LEN + 4

    @classmethod
    def from_name(cls, text: str) -> 'FieldType':
        """Resolve a type from its member name or short name, ignoring case.

        Args:
            text: e.g. "INT_TYPE", "int", "String"

        Returns:
            The matching FieldType

        Raises:
            ConstructionError: if no type matches
        """
        key = text.strip().lower()
        for member in cls:
            if key == member.value or key == member.name.lower():
                return member
        raise ConstructionError(
            f"Unknown field type: {text}. Valid options: {cls.get_all_types()}"
        )

    @classmethod
    def get_all_types(cls) -> list[str]:
        """Return the short names of all field types."""
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FieldType.{self.name}"
