"""Record schema construction and validation service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .schema_models import FieldDescriptor, RecordConfig, RecordSchema
from .type_signatures import is_identifier, normalize_type_signature

_LOGGER = logging.getLogger(__name__)

RECORD_DIRECTIVES: tuple[str, ...] = ("enum_name", "derive", "derive_mut", "derive_all")
FIELD_DIRECTIVES: tuple[str, ...] = ("variant_name",)


class MalformedSchema(Exception):
    """Raised when a record schema or one of its directives is invalid."""

    def __init__(self, record_name: str, subject: str, reason: str) -> None:
        super().__init__(f"Malformed schema for record '{record_name}': {subject}: {reason}")
        self.record_name = record_name
        self.subject = subject
        self.reason = reason


def build_record_schema(
    record_name: str,
    fields: Iterable[tuple[str, str]],
    record_directives: Mapping[str, Any] | None = None,
    field_directives: Mapping[str, Mapping[str, Any]] | None = None,
) -> RecordSchema:
    """Build a validated schema from ordered `(name, type_signature)` pairs and raw directives.

    Args:
      record_name: Name of the record type.
      fields: Field names with their declared types, in declaration order.
      record_directives: Record-level directives (`enum_name`, `derive`, `derive_mut`,
        `derive_all`).
      field_directives: Per-field directives keyed by field name (`variant_name`).

    Returns:
      The record schema.

    Raises:
      MalformedSchema: On duplicate or invalid field names, empty types, unknown
        directives, or directives referencing fields absent from the schema.
    """
    if not is_identifier(record_name):
        raise MalformedSchema(str(record_name), "record name", "must be an identifier")

    typed_fields = _collect_fields(record_name, fields)
    known_names = {name for name, _ in typed_fields}
    overrides = _parse_field_directives(record_name, field_directives or {}, known_names)
    config = _parse_record_directives(record_name, record_directives or {})

    descriptors = tuple(
        FieldDescriptor(name=name, type_signature=signature, variant_override=overrides.get(name))
        for name, signature in typed_fields
    )
    _LOGGER.debug(
        "Built schema for %s with %d fields (%d overrides)",
        record_name,
        len(descriptors),
        len(overrides),
    )
    return RecordSchema(record_name=record_name, fields=descriptors, config=config)


def _collect_fields(record_name: str, fields: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    collected: list[tuple[str, str]] = []
    seen: set[str] = set()
    for name, type_signature in fields:
        if not is_identifier(name):
            raise MalformedSchema(record_name, f"field '{name}'", "name must be an identifier")
        if name in seen:
            raise MalformedSchema(record_name, f"field '{name}'", "duplicate field name")
        if not isinstance(type_signature, str):
            raise MalformedSchema(record_name, f"field '{name}'", "type must be a string")
        normalized = normalize_type_signature(type_signature)
        if not normalized:
            raise MalformedSchema(record_name, f"field '{name}'", "type must not be empty")
        seen.add(name)
        collected.append((name, normalized))
    return collected


def _parse_field_directives(
    record_name: str,
    field_directives: Mapping[str, Mapping[str, Any]],
    known_names: set[str],
) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for field_name, directives in field_directives.items():
        subject = f"field directive for '{field_name}'"
        if field_name not in known_names:
            raise MalformedSchema(record_name, subject, "field does not exist in schema")
        if not isinstance(directives, Mapping):
            raise MalformedSchema(record_name, subject, "directives must be a mapping")
        for key in directives:
            if key not in FIELD_DIRECTIVES:
                raise MalformedSchema(record_name, subject, f"unknown directive '{key}'")
        variant_name = directives.get("variant_name")
        if variant_name is None:
            continue
        if not is_identifier(variant_name):
            raise MalformedSchema(
                record_name, subject, f"variant_name '{variant_name}' must be an identifier"
            )
        overrides[field_name] = variant_name
    return overrides


def _parse_record_directives(record_name: str, directives: Mapping[str, Any]) -> RecordConfig:
    for key in directives:
        if key not in RECORD_DIRECTIVES:
            raise MalformedSchema(record_name, f"directive '{key}'", "unknown record directive")

    enum_name = directives.get("enum_name")
    if enum_name is not None and not is_identifier(enum_name):
        raise MalformedSchema(
            record_name, "directive 'enum_name'", f"'{enum_name}' must be an identifier"
        )

    derive_all = directives.get("derive_all")
    if derive_all is not None:
        ignored = [key for key in ("derive", "derive_mut") if directives.get(key) is not None]
        if ignored:
            _LOGGER.warning(
                "Record %s: derive_all overrides %s; those directives are ignored",
                record_name,
                ", ".join(ignored),
            )
        capabilities = _normalize_capabilities(record_name, "derive_all", derive_all)
        derive = derive_mut = capabilities
    else:
        derive = _normalize_capabilities(record_name, "derive", directives.get("derive"))
        derive_mut = _normalize_capabilities(
            record_name, "derive_mut", directives.get("derive_mut")
        )

    return RecordConfig(
        enum_name_immutable=enum_name,
        enum_name_mutable=None,
        derived_capabilities_immutable=derive,
        derived_capabilities_mutable=derive_mut,
    )


def _normalize_capabilities(record_name: str, directive: str, value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise MalformedSchema(
            record_name, f"directive '{directive}'", "must be a string or list of strings"
        )
    capabilities: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise MalformedSchema(
                record_name, f"directive '{directive}'", "entries must be non-empty strings"
            )
        tag = item.strip()
        if tag not in capabilities:
            capabilities.append(tag)
    return tuple(capabilities)
