"""Schema extraction from Python dataclasses."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Sequence
from typing import Any

from fieldname_access.schema_model import RecordSchema, build_record_schema

VARIANT_NAME_METADATA_KEY = "variant_name"


def describe_annotation(annotation: Any) -> str:
    """Return the textual type signature of a field annotation.

    String annotations are used as written minus outer quotes, builtins by bare name, other classes
    as `module.qualname` with any `<locals>` scope dropped, and generic aliases by their repr
    without `typing.`.
    """
    if isinstance(annotation, str):
        return annotation.strip().strip("\"'")
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, type) and not isinstance(annotation, types.GenericAlias):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        qualname = annotation.__qualname__.rpartition(".<locals>.")[2]
        return f"{annotation.__module__}.{qualname}"
    return repr(annotation).replace("typing.", "")


def extract_dataclass_schema(
    cls: type,
    *,
    enum_name: str | None = None,
    derive: Sequence[str] = (),
    derive_mut: Sequence[str] = (),
    derive_all: Sequence[str] = (),
) -> RecordSchema:
    """Build a record schema from a dataclass declaration.

    Per-field overrides come from `dataclasses.field(metadata={"variant_name": ...})`.

    Raises:
      TypeError: If `cls` is not a dataclass.
      MalformedSchema: If the declaration or its directives are invalid.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass")

    fields = dataclasses.fields(cls)
    field_directives = {
        field.name: {VARIANT_NAME_METADATA_KEY: field.metadata[VARIANT_NAME_METADATA_KEY]}
        for field in fields
        if VARIANT_NAME_METADATA_KEY in field.metadata
    }
    record_directives: dict[str, Any] = {}
    if enum_name is not None:
        record_directives["enum_name"] = enum_name
    if derive_all:
        record_directives["derive_all"] = list(derive_all)
    if derive:
        record_directives["derive"] = list(derive)
    if derive_mut:
        record_directives["derive_mut"] = list(derive_mut)

    return build_record_schema(
        cls.__name__,
        [(field.name, describe_annotation(field.type)) for field in fields],
        record_directives=record_directives,
        field_directives=field_directives,
    )
