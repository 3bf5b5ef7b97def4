"""
Schema descriptor: the ordered, immutable list of typed fields of a relation.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from ..engine.config import config
from ..errors import (
    ConstructionError,
    FieldIndexError,
    FieldNotFoundError,
    UnsupportedOperationError,
)
from .field_descriptor import FieldDescriptor
from .field_type import FieldType

logger = logging.getLogger(__name__)


class SchemaIterator(Iterator[FieldDescriptor]):
    """
    Cursor over the fields of one SchemaDescriptor.

    Each call to ``iter(descriptor)`` creates a new cursor, so advancing one
    never moves another.
    """
    __slots__ = ("_fields", "_pos")

    def __init__(self, fields: tuple[FieldDescriptor, ...]) -> None:
        self._fields = fields
        self._pos = 0

    def __iter__(self) -> 'SchemaIterator':
        return self

    def __next__(self) -> FieldDescriptor:
        if self._pos >= len(self._fields):
            raise StopIteration
        item = self._fields[self._pos]
        self._pos += 1
        return item


@dataclass(frozen=True, slots=True, eq=False)
class SchemaDescriptor:
    """
    Schema of a relation: an ordered, non-empty, fixed-length tuple of fields.

    Equality is structural on field types only, names are ignored:
        create([INT_TYPE], ["a"]) == create([INT_TYPE], ["b"])

    Hashing is refused unless ``schema.hashable`` is enabled in the config.
    The flag is read on every hash call, so set it before any descriptor is
    hashed: a set or dict built with it enabled stops working once it is off.
    """
    fields: tuple[FieldDescriptor, ...]

    def __post_init__(self):
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        if len(self.fields) == 0:
            raise ConstructionError("SchemaDescriptor: at least one field is required.")

    @classmethod
    def create(
        cls,
        types: Sequence[FieldType],
        names: Optional[Sequence[Optional[str]]] = None
    ) -> 'SchemaDescriptor':
        """Build a descriptor pairing ``types[i]`` with ``names[i]``.

        Args:
            types: field types, at least one
            names: field names of the same length, entries may be None.
                If omitted every field is anonymous.

        Raises:
            ConstructionError: if types is empty or the lengths differ
        """
        if len(types) == 0:
            logger.debug("[CREATE] Rejected empty type list")
            raise ConstructionError("SchemaDescriptor: at least one type is required.")
        if names is None:
            names = [None] * len(types)
        if len(types) != len(names):
            logger.debug(f"[CREATE] Rejected {len(types)} types with {len(names)} names")
            raise ConstructionError(
                f"SchemaDescriptor: got {len(types)} types but {len(names)} names."
            )
        fields = tuple(FieldDescriptor(t, n) for t, n in zip(types, names))
        return cls(fields)

    @classmethod
    def from_fields(cls, fields: Iterable[FieldDescriptor]) -> 'SchemaDescriptor':
        """Build a descriptor from already assembled field descriptors."""
        return cls(tuple(fields))

    @staticmethod
    def merge(first: 'SchemaDescriptor', second: 'SchemaDescriptor') -> 'SchemaDescriptor':
        """Concatenate two descriptors: all fields of ``first`` then all of ``second``.

        Names are kept as they are, duplicates included.
        """
        merged = SchemaDescriptor.from_fields(first.fields + second.fields)
        logger.debug(
            f"[MERGE] {first.field_count()} + {second.field_count()} fields -> {merged.field_count()}"
        )
        return merged

    def field_count(self) -> int:
        return len(self.fields)

    def _check_index(self, i: int) -> None:
        if i < 0 or i >= len(self.fields):
            raise FieldIndexError(i, len(self.fields))

    def field_name(self, i: int) -> Optional[str]:
        """Name of the i-th field, None for an anonymous field.

        Raises:
            FieldIndexError: if i is not in [0, field_count())
        """
        self._check_index(i)
        return self.fields[i].name

    def field_type(self, i: int) -> FieldType:
        """Type of the i-th field.

        Raises:
            FieldIndexError: if i is not in [0, field_count())
        """
        self._check_index(i)
        return self.fields[i].field_type

    def index_of_field_name(self, name: Optional[str]) -> int:
        """Index of the first field named ``name``.

        Raises:
            FieldNotFoundError: if name is None or no field has that name
        """
        if name is None:
            raise FieldNotFoundError(None)
        for i, fd in enumerate(self.fields):
            # anonymous fields never match
            if fd.name is not None and fd.name == name:
                return i
        raise FieldNotFoundError(name)

    def byte_size(self) -> int:
        """Size in bytes of a tuple with this schema."""
        size = 0
        for fd in self.fields:
            size += fd.get_len()
        return size

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> SchemaIterator:
        return SchemaIterator(self.fields)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SchemaDescriptor):
            return False
        if len(self.fields) != len(other.fields):
            return False
        for mine, theirs in zip(self.fields, other.fields):
            if not mine.same_type(theirs):
                return False
        return True

    def __hash__(self) -> int:
        if not config.is_hashable():
            raise UnsupportedOperationError("SchemaDescriptor does not support hashing")
        return hash(tuple(fd.field_type for fd in self.fields))

    def __str__(self) -> str:
        parts = [str(fd) for fd in self.fields]
        parts.append(f"{len(self.fields)} Fields in all")
        return ", ".join(parts)
