"""Class decorator attaching by-name field accessors to dataclasses."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar, overload

from fieldname_access.generation_plan import generate_plan
from fieldname_access.runtime_binding import (
    FieldRef,
    FieldRefMut,
    RecordAccessors,
    TaggedUnion,
    bind_accessors,
)

from .dataclass_schema import extract_dataclass_schema

ACCESSORS_ATTRIBUTE = "__fieldname_access__"
_RESERVED_MEMBERS = ("field", "field_mut")

_RecordT = TypeVar("_RecordT", bound=type)


@overload
def fieldname_access(cls: _RecordT) -> _RecordT: ...


@overload
def fieldname_access(
    cls: None = None,
    *,
    enum_name: str | None = None,
    derive: Sequence[str] = (),
    derive_mut: Sequence[str] = (),
    derive_all: Sequence[str] = (),
) -> Callable[[_RecordT], _RecordT]: ...


def fieldname_access(
    cls: Any = None,
    *,
    enum_name: str | None = None,
    derive: Sequence[str] = (),
    derive_mut: Sequence[str] = (),
    derive_all: Sequence[str] = (),
) -> Any:
    """Plan a dataclass and attach `field(name)` and `field_mut(name)` to it.

    Usable bare (`@fieldname_access`) or with directives
    (`@fieldname_access(enum_name="NewName", derive=["Debug"])`). Apply it
    above `@dataclass`.

    Raises:
      TypeError: If the class is not a dataclass or already defines `field`/`field_mut`.
      MalformedSchema: If the declaration or its directives are invalid.
      VariantNameCollision: If two field types reduce to the same variant name.
    """

    def decorate(target: _RecordT) -> _RecordT:
        schema = extract_dataclass_schema(
            target,
            enum_name=enum_name,
            derive=derive,
            derive_mut=derive_mut,
            derive_all=derive_all,
        )
        for member in _RESERVED_MEMBERS:
            if member in vars(target) or schema.get_field(member) is not None:
                raise TypeError(f"{target.__name__} already defines '{member}'")
        accessors = bind_accessors(generate_plan(schema))
        setattr(target, ACCESSORS_ATTRIBUTE, accessors)
        setattr(target, "field", _field)
        setattr(target, "field_mut", _field_mut)
        return target

    if cls is None:
        return decorate
    return decorate(cls)


def record_accessors(cls: type) -> RecordAccessors:
    """Return the accessors bound to a decorated class."""
    accessors = getattr(cls, ACCESSORS_ATTRIBUTE, None)
    if not isinstance(accessors, RecordAccessors):
        raise TypeError(f"{cls!r} is not decorated with fieldname_access")
    return accessors


def field_enums(cls: type) -> tuple[type[TaggedUnion], type[TaggedUnion]]:
    """Return the read-only and mutable tagged unions of a decorated class."""
    accessors = record_accessors(cls)
    return accessors.read_union, accessors.mutable_union


def _field(self: Any, fieldname: str) -> FieldRef | None:
    """Return a read-only reference to the field named `fieldname`, or None."""
    return record_accessors(type(self)).field(self, fieldname)


def _field_mut(self: Any, fieldname: str) -> FieldRefMut | None:
    """Return a mutable reference to the field named `fieldname`, or None."""
    return record_accessors(type(self)).field_mut(self, fieldname)
