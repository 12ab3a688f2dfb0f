"""Runtime binding exports."""

from .record_accessors import RecordAccessors, bind_accessors
from .tagged_unions import (
    CAPABILITY_ALIASES,
    FieldRef,
    FieldRefMut,
    TaggedUnion,
    build_tagged_union,
    union_variant,
)

__all__ = [
    "CAPABILITY_ALIASES",
    "FieldRef",
    "FieldRefMut",
    "RecordAccessors",
    "TaggedUnion",
    "bind_accessors",
    "build_tagged_union",
    "union_variant",
]
