from dataclasses import dataclass
from typing import Optional

from .field_type import FieldType


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """
    One column of a schema: a field type and an optional name.
      - field_type: the FieldType of the column
      - name: column name, or None for an anonymous field. Names need not be unique.
    """
    field_type: FieldType
    name: Optional[str] = None

    def same_type(self, other: 'FieldDescriptor') -> bool:
        """True if both fields have the same type. Names are not compared."""
        return self.field_type == other.field_type

    def get_len(self) -> int:
        return self.field_type.get_len()

    def __str__(self) -> str:
        return f"{self.field_type}({self.name})"
