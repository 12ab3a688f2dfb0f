"""Generation plan assembly tests."""

from __future__ import annotations

import pytest
from fieldname_access.dispatch_planning import Mutability
from fieldname_access.generation_plan import generate_plan, resolve_record_config
from fieldname_access.schema_model import build_record_schema
from fieldname_access.variant_planning import VariantNameCollision


def test_default_union_names_derive_from_record_name() -> None:
    plan = generate_plan(build_record_schema("TestStruct", [("name", "String")]))

    assert plan.read_union.name == "TestStructField"
    assert plan.mutable_union.name == "TestStructFieldMut"
    assert plan.config.enum_name_immutable == "TestStructField"
    assert plan.config.enum_name_mutable == "TestStructFieldMut"


def test_configured_enum_name_applies_to_both_unions() -> None:
    schema = build_record_schema(
        "NamedFieldname",
        [("name", "String"), ("age", "i64")],
        record_directives={"enum_name": "NewName"},
    )

    plan = generate_plan(schema)

    assert plan.read_union.name == "NewName"
    assert plan.mutable_union.name == "NewNameMut"
    assert plan.read_union.capabilities == ()
    assert plan.mutable_union.capabilities == ()


def test_capabilities_attach_to_their_own_union() -> None:
    schema = build_record_schema(
        "NamedFieldname",
        [("name", "String")],
        record_directives={"derive": ["Debug", "Clone"], "derive_mut": ["Debug"]},
    )

    plan = generate_plan(schema)

    assert plan.read_union.capabilities == ("Debug", "Clone")
    assert plan.mutable_union.capabilities == ("Debug",)


def test_unions_list_variants_in_plan_order() -> None:
    schema = build_record_schema(
        "NamedFieldname",
        [("name", "String"), ("age", "i64"), ("dog_age", "i64")],
        field_directives={"age": {"variant_name": "MyAge"}},
    )

    plan = generate_plan(schema)

    assert plan.read_union.variant_names == ("String", "MyAge", "I64")
    assert plan.mutable_union.variant_names == plan.read_union.variant_names
    assert plan.read_union.mutability is Mutability.READ
    assert plan.mutable_union.mutability is Mutability.MUTATE
    my_age = plan.variant("MyAge")
    assert my_age is not None and my_age.member_fields == ("age",)
    assert plan.variant("U8") is None


def test_resolve_keeps_explicit_names() -> None:
    schema = build_record_schema("Record", [], record_directives={"enum_name": "Custom"})

    config = resolve_record_config(schema)

    assert (config.enum_name_immutable, config.enum_name_mutable) == ("Custom", "CustomMut")


def test_collisions_abort_plan_generation() -> None:
    schema = build_record_schema("Units", [("count", "u64"), ("other", "units::U64")])

    with pytest.raises(VariantNameCollision):
        generate_plan(schema)
