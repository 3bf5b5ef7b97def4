from unittest import mock

import pytest

from tuplestore.schema import (
    FieldType,
    SchemaDescriptor,
    UnsupportedOperationError,
)
from tuplestore.schema.engine.config import config

INT = FieldType.INT_TYPE
STRING = FieldType.STRING_TYPE


def test_merge_concatenates_in_order():
    a = SchemaDescriptor.create([INT], ["a"])
    b = SchemaDescriptor.create([STRING, INT], ["b", "c"])
    merged = SchemaDescriptor.merge(a, b)

    assert merged.field_count() == a.field_count() + b.field_count()
    assert [merged.field_type(i) for i in range(3)] == [INT, STRING, INT]
    assert merged.fields[0] == a.fields[0]
    assert merged.fields[1:] == b.fields


def test_merge_keeps_duplicate_and_missing_names():
    a = SchemaDescriptor.create([INT, INT], ["id", None])
    b = SchemaDescriptor.create([STRING, INT], ["id", None])
    merged = SchemaDescriptor.merge(a, b)

    assert [merged.field_name(i) for i in range(4)] == ["id", None, "id", None]
    assert merged.index_of_field_name("id") == 0


def test_merge_leaves_inputs_untouched():
    a = SchemaDescriptor.create([INT], ["a"])
    b = SchemaDescriptor.create([STRING], ["b"])
    SchemaDescriptor.merge(a, b)
    assert a.field_count() == 1
    assert b.field_count() == 1


def test_merge_byte_size_adds_up():
    a = SchemaDescriptor.create([INT, STRING])
    b = SchemaDescriptor.create([STRING])
    assert SchemaDescriptor.merge(a, b).byte_size() == a.byte_size() + b.byte_size()


def test_equality_is_reflexive():
    desc = SchemaDescriptor.create([INT, STRING], ["id", "name"])
    assert desc == desc


def test_equality_ignores_names():
    named = SchemaDescriptor.create([INT, STRING], ["id", "name"])
    renamed = SchemaDescriptor.create([INT, STRING], ["key", "label"])
    anonymous = SchemaDescriptor.create([INT, STRING])
    assert named == renamed
    assert named == anonymous
    assert not (named != renamed)


def test_equality_requires_same_count():
    assert SchemaDescriptor.create([INT]) != SchemaDescriptor.create([INT, INT])


def test_equality_requires_same_positional_types():
    assert SchemaDescriptor.create([INT, STRING]) != SchemaDescriptor.create([STRING, INT])


@pytest.mark.parametrize("other", [None, 1, "INT_TYPE(None), 1 Fields in all", [INT], (INT,)])
def test_never_equal_to_other_kinds(other):
    desc = SchemaDescriptor.create([INT])
    assert desc != other
    assert not (desc == other)


def test_hash_is_unsupported():
    desc = SchemaDescriptor.create([INT])
    with pytest.raises(UnsupportedOperationError):
        hash(desc)


def test_unhashable_in_sets_and_dicts():
    desc = SchemaDescriptor.create([INT, STRING], ["id", "name"])
    with pytest.raises(TypeError):
        {desc}
    with pytest.raises(TypeError):
        {desc: "people"}


def test_hash_enabled_by_config_matches_equality():
    config.set("schema.hashable", True)
    named = SchemaDescriptor.create([INT, STRING], ["id", "name"])
    renamed = SchemaDescriptor.create([INT, STRING], ["key", "label"])

    assert hash(named) == hash(renamed)
    assert len({named, renamed}) == 1


class _EqualsEverything:
    def __eq__(self, other):
        return True

    def __ne__(self, other):
        return False


@pytest.mark.parametrize("other", [_EqualsEverything(), mock.ANY])
def test_not_equal_to_objects_claiming_equality(other):
    desc = SchemaDescriptor.create([INT])
    assert not (desc == other)
    assert desc.__eq__(other) is False


def test_hash_flag_is_read_at_each_hash_call():
    config.set("schema.hashable", True)
    desc = SchemaDescriptor.create([INT])
    cache = {desc}

    config.reset()
    with pytest.raises(UnsupportedOperationError):
        desc in cache
