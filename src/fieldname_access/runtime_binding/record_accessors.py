"""By-name field accessors bound from a generation plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fieldname_access.generation_plan import GenerationPlan

from .tagged_unions import FieldRef, FieldRefMut, TaggedUnion, build_tagged_union


@dataclass(frozen=True)
class RecordAccessors:
    """Read and mutate lookups for one record type."""

    plan: GenerationPlan
    read_union: type[TaggedUnion]
    mutable_union: type[TaggedUnion]

    def field(self, record: Any, field_name: str) -> FieldRef | None:
        """Return the read-only variant wrapping `field_name` of `record`, or None."""
        entry = self.plan.read_table.lookup(field_name)
        if entry is None:
            return None
        return self.read_union.__variants__[entry.variant_name](record, entry.field_name)

    def field_mut(self, record: Any, field_name: str) -> FieldRefMut | None:
        """Return the mutable variant wrapping `field_name` of `record`, or None."""
        entry = self.plan.mutate_table.lookup(field_name)
        if entry is None:
            return None
        variant_cls = self.mutable_union.__variants__[entry.variant_name]
        reference = variant_cls(record, entry.field_name)
        assert isinstance(reference, FieldRefMut)
        return reference


def bind_accessors(plan: GenerationPlan) -> RecordAccessors:
    """Build both tagged unions of `plan` and return accessors using them."""
    return RecordAccessors(
        plan=plan,
        read_union=build_tagged_union(plan.read_union, plan.variants),
        mutable_union=build_tagged_union(plan.mutable_union, plan.variants),
    )
