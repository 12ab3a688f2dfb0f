"""Generation plan entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fieldname_access.dispatch_planning import DispatchTable, Mutability
from fieldname_access.schema_model import RecordConfig
from fieldname_access.variant_planning import VariantClass


@dataclass(frozen=True)
class TaggedUnionShape:
    """One generated tagged union: its name, reference mode, capabilities and cases."""

    name: str
    mutability: Mutability
    capabilities: tuple[str, ...]
    variant_names: tuple[str, ...]


@dataclass(frozen=True)
class GenerationPlan:
    """Fully resolved, emitter-ready output of planning one record."""

    record_name: str
    config: RecordConfig
    variants: tuple[VariantClass, ...]
    read_union: TaggedUnionShape
    mutable_union: TaggedUnionShape
    read_table: DispatchTable
    mutate_table: DispatchTable

    def variant(self, variant_name: str) -> VariantClass | None:
        """Return the variant class named `variant_name`, if any."""
        for variant in self.variants:
            if variant.variant_name == variant_name:
                return variant
        return None

    def to_document(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with a fixed key order."""
        return {
            "record": self.record_name,
            "unions": {
                "read": _union_document(self.read_union),
                "mutable": _union_document(self.mutable_union),
            },
            "variants": [
                {
                    "name": variant.variant_name,
                    "type": variant.type_signature,
                    "fields": list(variant.member_fields),
                    "override": variant.is_override,
                }
                for variant in self.variants
            ],
            "dispatch": {
                "read": _table_document(self.read_table),
                "mutate": _table_document(self.mutate_table),
            },
        }


def _union_document(shape: TaggedUnionShape) -> dict[str, Any]:
    return {
        "name": shape.name,
        "mutability": shape.mutability.value,
        "capabilities": list(shape.capabilities),
        "variants": list(shape.variant_names),
    }


def _table_document(table: DispatchTable) -> list[dict[str, str]]:
    return [{"field": entry.field_name, "variant": entry.variant_name} for entry in table]
