"""Declaration file loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from fieldname_access.schema_model import RecordSchema, build_record_schema

from .runtime_settings import Configuration, RecordDeclaration

_RECORD_STRUCTURE_KEYS = ("name", "fields", "field_directives")
_FIELD_STRUCTURE_KEYS = ("name", "type")


class ConfigurationError(Exception):
    """Raised when the declaration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load a YAML or JSON declaration file and check its structure.

    Directive keys are passed through untouched; their meaning is validated
    when each declaration is turned into a schema.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Declaration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse declaration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Declaration file root must be a mapping.")

    records = _parse_records_section(parsed.get("records"))
    return Configuration(path=path, records=records)


def build_declared_schema(declaration: RecordDeclaration) -> RecordSchema:
    """Validate one declaration into a record schema.

    Raises:
      MalformedSchema: If the declaration's fields or directives are invalid.
    """
    return build_record_schema(
        declaration.name,
        declaration.fields,
        record_directives=declaration.record_directives,
        field_directives=declaration.field_directives,
    )


def _parse_records_section(value: Any) -> tuple[RecordDeclaration, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError("Configuration section 'records' must be a list.")
    if not value:
        raise ConfigurationError("Configuration section 'records' must not be empty.")

    declarations: list[RecordDeclaration] = []
    seen_names: set[str] = set()
    for index, item in enumerate(value):
        declaration = _parse_record(item, f"records[{index}]")
        if declaration.name in seen_names:
            raise ConfigurationError(f"Duplicate record declaration: {declaration.name}")
        seen_names.add(declaration.name)
        declarations.append(declaration)
    return tuple(declarations)


def _parse_record(value: Any, label: str) -> RecordDeclaration:
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    label = f"records[{name}]"

    raw_fields = section.get("fields")
    if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
        raise ConfigurationError(f"{label}.fields must be a list.")

    fields: list[tuple[str, str]] = []
    field_directives: dict[str, dict[str, object]] = {}
    for index, raw_field in enumerate(raw_fields):
        field_label = f"{label}.fields[{index}]"
        field_section = _require_mapping(raw_field, field_label)
        field_name = _require_non_empty_string(field_section.get("name"), f"{field_label}.name")
        field_type = _require_non_empty_string(field_section.get("type"), f"{field_label}.type")
        fields.append((field_name, field_type))
        inline = {
            key: item for key, item in field_section.items() if key not in _FIELD_STRUCTURE_KEYS
        }
        if inline:
            field_directives[field_name] = inline

    for field_name, directives in _parse_field_directives(section, label).items():
        merged = field_directives.setdefault(field_name, {})
        for key, item in directives.items():
            if key in merged and merged[key] != item:
                raise ConfigurationError(
                    f"{label}.field_directives.{field_name}.{key} conflicts with the field entry."
                )
            merged[key] = item

    record_directives = {
        key: item for key, item in section.items() if key not in _RECORD_STRUCTURE_KEYS
    }
    return RecordDeclaration(
        name=name,
        fields=tuple(fields),
        record_directives=record_directives,
        field_directives=field_directives,
    )


def _parse_field_directives(section: Mapping[str, Any], label: str) -> dict[str, dict[str, Any]]:
    value = section.get("field_directives")
    if value is None:
        return {}
    directives = _require_mapping(value, f"{label}.field_directives")
    parsed: dict[str, dict[str, Any]] = {}
    for field_name, entry in directives.items():
        if not isinstance(field_name, str):
            raise ConfigurationError(f"{label}.field_directives keys must be strings.")
        parsed[field_name] = dict(_require_mapping(entry, f"{label}.field_directives.{field_name}"))
    return parsed


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
