"""Variant planning service.

Fields without an override are grouped by their normalized type signature and
named after the signature's canonical short form. Fields carrying a
`variant_name` override get their own variant keyed by `(override, type)`, so
an overridden field never shares a variant with same-typed plain fields.
"""

from __future__ import annotations

import logging

from fieldname_access.schema_model import (
    FieldDescriptor,
    MalformedSchema,
    RecordSchema,
    canonical_short_name,
)

from .variant_models import VariantClass

_LOGGER = logging.getLogger(__name__)

_VariantKey = tuple[str | None, str]


class VariantNameCollision(Exception):
    """Raised when two distinct variants of one record reduce to the same name."""

    def __init__(self, record_name: str, variant_name: str, first: str, second: str) -> None:
        super().__init__(
            f"Variant name collision in record '{record_name}': '{variant_name}' is produced "
            f"by {first} and by {second}. Add a variant_name override to disambiguate."
        )
        self.record_name = record_name
        self.variant_name = variant_name
        self.first = first
        self.second = second


def default_variant_name(type_signature: str) -> str:
    """Return the type-derived variant name for a normalized type signature."""
    return canonical_short_name(type_signature)


def plan_variants(schema: RecordSchema) -> tuple[VariantClass, ...]:
    """Compute the ordered, name-unique variant classes of a record.

    Raises:
      MalformedSchema: If a type signature yields no usable default variant name.
      VariantNameCollision: If two variants would share a name.
    """
    members: dict[_VariantKey, list[str]] = {}
    names: dict[_VariantKey, str] = {}
    for field in schema.fields:
        key: _VariantKey = (field.variant_override, field.type_signature)
        if key not in members:
            members[key] = []
            names[key] = field.variant_override or _default_name_for(schema, field)
        members[key].append(field.name)

    variants = tuple(
        VariantClass(
            variant_name=names[key],
            type_signature=key[1],
            member_fields=tuple(field_names),
            is_override=key[0] is not None,
        )
        for key, field_names in members.items()
    )
    _reject_collisions(schema.record_name, variants)
    _LOGGER.debug(
        "Planned %d variants for %s: %s",
        len(variants),
        schema.record_name,
        ", ".join(variant.variant_name for variant in variants),
    )
    return variants


def _default_name_for(schema: RecordSchema, field: FieldDescriptor) -> str:
    name = default_variant_name(field.type_signature)
    if not name:
        raise MalformedSchema(
            schema.record_name,
            f"field '{field.name}'",
            f"type '{field.type_signature}' has no nameable segment; set a variant_name",
        )
    return name


def _reject_collisions(record_name: str, variants: tuple[VariantClass, ...]) -> None:
    claimed: dict[str, VariantClass] = {}
    for variant in variants:
        existing = claimed.get(variant.variant_name)
        if existing is not None:
            raise VariantNameCollision(
                record_name, variant.variant_name, existing.describe(), variant.describe()
            )
        claimed[variant.variant_name] = variant
