"""Record extraction exports."""

from .dataclass_schema import (
    VARIANT_NAME_METADATA_KEY,
    describe_annotation,
    extract_dataclass_schema,
)
from .record_decorator import field_enums, fieldname_access, record_accessors

__all__ = [
    "VARIANT_NAME_METADATA_KEY",
    "describe_annotation",
    "extract_dataclass_schema",
    "field_enums",
    "fieldname_access",
    "record_accessors",
]
