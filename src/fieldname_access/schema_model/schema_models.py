"""Schema model entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """One record field with its normalized type and optional variant override."""

    name: str
    type_signature: str
    variant_override: str | None = None


@dataclass(frozen=True)
class RecordConfig:
    """Naming and capability settings for the two generated tagged unions.

    Unset enum names are resolved during plan assembly.
    """

    enum_name_immutable: str | None = None
    enum_name_mutable: str | None = None
    derived_capabilities_immutable: tuple[str, ...] = ()
    derived_capabilities_mutable: tuple[str, ...] = ()


@dataclass(frozen=True)
class RecordSchema:
    """Ordered field list and configuration of one record declaration."""

    record_name: str
    fields: tuple[FieldDescriptor, ...]
    config: RecordConfig

    @property
    def field_names(self) -> tuple[str, ...]:
        """Return field names in declaration order."""
        return tuple(field.name for field in self.fields)

    def get_field(self, name: str) -> FieldDescriptor | None:
        """Return the descriptor for `name`, or None when the record has no such field."""
        for field in self.fields:
            if field.name == name:
                return field
        return None
