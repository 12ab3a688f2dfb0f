"""Schema model exports."""

from .schema_construction import (
    FIELD_DIRECTIVES,
    RECORD_DIRECTIVES,
    MalformedSchema,
    build_record_schema,
)
from .schema_models import FieldDescriptor, RecordConfig, RecordSchema
from .type_signatures import canonical_short_name, is_identifier, normalize_type_signature

__all__ = [
    "FieldDescriptor",
    "RecordConfig",
    "RecordSchema",
    "MalformedSchema",
    "RECORD_DIRECTIVES",
    "FIELD_DIRECTIVES",
    "build_record_schema",
    "canonical_short_name",
    "is_identifier",
    "normalize_type_signature",
]
