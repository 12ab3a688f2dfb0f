"""Dispatch planning service."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fieldname_access.schema_model import RecordSchema
from fieldname_access.variant_planning import VariantClass

from .dispatch_models import DispatchEntry, DispatchTable, Mutability

_LOGGER = logging.getLogger(__name__)


def build_dispatch_table(
    schema: RecordSchema, variants: Sequence[VariantClass], mutability: Mutability
) -> DispatchTable:
    """Map every field of `schema` to the variant containing it, for one mutability mode."""
    variant_by_field = {
        field_name: variant for variant in variants for field_name in variant.member_fields
    }
    entries = tuple(
        DispatchEntry(
            field_name=field.name,
            variant_name=variant_by_field[field.name].variant_name,
            type_signature=variant_by_field[field.name].type_signature,
            mutability=mutability,
        )
        for field in schema.fields
    )
    _LOGGER.debug(
        "Built %s dispatch table for %s with %d entries",
        mutability.value,
        schema.record_name,
        len(entries),
    )
    return DispatchTable(mutability=mutability, entries=entries)


def build_dispatch_tables(
    schema: RecordSchema, variants: Sequence[VariantClass]
) -> tuple[DispatchTable, DispatchTable]:
    """Return the read and mutate dispatch tables of a record."""
    return (
        build_dispatch_table(schema, variants, Mutability.READ),
        build_dispatch_table(schema, variants, Mutability.MUTATE),
    )
