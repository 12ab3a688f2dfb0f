"""Dispatch planning tests."""

from __future__ import annotations

from fieldname_access.dispatch_planning import (
    DispatchEntry,
    Mutability,
    build_dispatch_table,
    build_dispatch_tables,
)
from fieldname_access.schema_model import build_record_schema
from fieldname_access.variant_planning import plan_variants


def _schema():
    return build_record_schema(
        "NamedFieldname",
        [("name", "String"), ("age", "i64"), ("dog_age", "i64")],
        field_directives={"age": {"variant_name": "MyAge"}},
    )


def test_every_field_gets_exactly_one_entry() -> None:
    schema = _schema()
    table = build_dispatch_table(schema, plan_variants(schema), Mutability.READ)

    assert table.keys() == ("name", "age", "dog_age")
    assert len(table) == 3
    assert table.lookup("age") == DispatchEntry("age", "MyAge", "i64", Mutability.READ)
    assert table.lookup("dog_age") == DispatchEntry("dog_age", "I64", "i64", Mutability.READ)


def test_lookup_of_unknown_name_is_no_match() -> None:
    schema = _schema()
    read_table, mutate_table = build_dispatch_tables(schema, plan_variants(schema))

    assert read_table.lookup("not_important") is None
    assert mutate_table.lookup("not_really_important") is None
    assert "not_important" not in read_table


def test_read_and_mutate_tables_agree_on_keys_and_variants() -> None:
    schema = _schema()
    read_table, mutate_table = build_dispatch_tables(schema, plan_variants(schema))

    assert read_table.mutability is Mutability.READ
    assert mutate_table.mutability is Mutability.MUTATE
    assert read_table.keys() == mutate_table.keys()
    for read_entry in read_table:
        mutate_entry = mutate_table.lookup(read_entry.field_name)
        assert mutate_entry is not None
        assert mutate_entry.variant_name == read_entry.variant_name
        assert mutate_entry.type_signature == read_entry.type_signature
        assert mutate_entry.mutability is Mutability.MUTATE


def test_shared_type_fields_dispatch_to_same_variant() -> None:
    schema = build_record_schema(
        "NamedFieldname", [("name", "String"), ("age", "i64"), ("dog_age", "i64")]
    )
    table = build_dispatch_table(schema, plan_variants(schema), Mutability.MUTATE)

    age = table.lookup("age")
    dog_age = table.lookup("dog_age")
    assert age is not None and dog_age is not None
    assert age.variant_name == dog_age.variant_name == "I64"
