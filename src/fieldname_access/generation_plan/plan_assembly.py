"""Generation plan assembly service."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

from fieldname_access.dispatch_planning import DispatchTable, Mutability, build_dispatch_tables
from fieldname_access.schema_model import RecordConfig, RecordSchema
from fieldname_access.variant_planning import VariantClass, plan_variants

from .plan_models import GenerationPlan, TaggedUnionShape

_LOGGER = logging.getLogger(__name__)

FIELD_ENUM_SUFFIX = "Field"
MUTABLE_ENUM_SUFFIX = "Mut"


def resolve_record_config(schema: RecordSchema) -> RecordConfig:
    """Fill in default tagged-union names: `<Record>Field` and `<read name>Mut`."""
    config = schema.config
    immutable_name = config.enum_name_immutable or f"{schema.record_name}{FIELD_ENUM_SUFFIX}"
    mutable_name = config.enum_name_mutable or f"{immutable_name}{MUTABLE_ENUM_SUFFIX}"
    return dataclasses.replace(
        config, enum_name_immutable=immutable_name, enum_name_mutable=mutable_name
    )


def assemble_generation_plan(
    schema: RecordSchema,
    variants: Sequence[VariantClass],
    read_table: DispatchTable,
    mutate_table: DispatchTable,
) -> GenerationPlan:
    """Package resolved configuration, variants and both dispatch tables into one plan."""
    config = resolve_record_config(schema)
    variant_names = tuple(variant.variant_name for variant in variants)
    assert config.enum_name_immutable is not None
    assert config.enum_name_mutable is not None
    return GenerationPlan(
        record_name=schema.record_name,
        config=config,
        variants=tuple(variants),
        read_union=TaggedUnionShape(
            name=config.enum_name_immutable,
            mutability=Mutability.READ,
            capabilities=config.derived_capabilities_immutable,
            variant_names=variant_names,
        ),
        mutable_union=TaggedUnionShape(
            name=config.enum_name_mutable,
            mutability=Mutability.MUTATE,
            capabilities=config.derived_capabilities_mutable,
            variant_names=variant_names,
        ),
        read_table=read_table,
        mutate_table=mutate_table,
    )


def generate_plan(schema: RecordSchema) -> GenerationPlan:
    """Run variant planning, dispatch planning and assembly for one record.

    Raises:
      MalformedSchema: If a field type yields no usable variant name.
      VariantNameCollision: If two variants of the record share a name.
    """
    variants = plan_variants(schema)
    read_table, mutate_table = build_dispatch_tables(schema, variants)
    plan = assemble_generation_plan(schema, variants, read_table, mutate_table)
    _LOGGER.info(
        "Generated plan for %s: %s / %s with %d variants",
        plan.record_name,
        plan.read_union.name,
        plan.mutable_union.name,
        len(plan.variants),
    )
    return plan
