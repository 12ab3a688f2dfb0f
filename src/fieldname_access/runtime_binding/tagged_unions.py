"""Runtime tagged-union classes built from a generation plan."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar

from fieldname_access.dispatch_planning import Mutability
from fieldname_access.generation_plan import TaggedUnionShape
from fieldname_access.variant_planning import VariantClass

_LOGGER = logging.getLogger(__name__)

CAPABILITY_ALIASES: Mapping[str, str] = {
    "Debug": "printable",
    "printable": "printable",
    "PartialEq": "comparable",
    "Eq": "comparable",
    "comparable": "comparable",
    "Hash": "hashable",
    "hashable": "hashable",
    "Clone": "cloneable",
    "Copy": "cloneable",
    "cloneable": "cloneable",
}


class FieldRef:
    """Read-only reference to one field of a record."""

    __slots__ = ("_record", "_field_name")
    __match_args__ = ("value",)

    union_name: ClassVar[str] = ""
    variant_name: ClassVar[str] = ""
    type_signature: ClassVar[str] = ""

    def __init__(self, record: Any, field_name: str) -> None:
        self._record = record
        self._field_name = field_name

    @property
    def record(self) -> Any:
        return self._record

    @property
    def field_name(self) -> str:
        return self._field_name

    @property
    def value(self) -> Any:
        """Current value of the referenced field."""
        return getattr(self._record, self._field_name)


class FieldRefMut(FieldRef):
    """Mutable reference to one field of a record; assigning `value` writes through."""

    __slots__ = ()

    @property
    def value(self) -> Any:
        """Current value of the referenced field."""
        return getattr(self._record, self._field_name)

    @value.setter
    def value(self, new_value: Any) -> None:
        setattr(self._record, self._field_name, new_value)


class TaggedUnion:
    """Namespace of the variant classes of one generated tagged union.

    Union metadata lives under dunder names so any identifier can name a variant.
    """

    __union_name__: ClassVar[str] = ""
    __mutability__: ClassVar[Mutability] = Mutability.READ
    __capabilities__: ClassVar[tuple[str, ...]] = ()
    __variants__: ClassVar[Mapping[str, type[FieldRef]]] = {}

    def __init__(self) -> None:
        raise TypeError(f"{type(self).__name__} is a tagged-union namespace, not a value type")


def union_variant(union: type[TaggedUnion], variant_name: str) -> type[FieldRef] | None:
    """Return the variant class named `variant_name` of `union`, if any."""
    return union.__variants__.get(variant_name)


def build_tagged_union(
    shape: TaggedUnionShape, variants: Sequence[VariantClass]
) -> type[TaggedUnion]:
    """Create the namespace class and one reference class per variant for `shape`."""
    base = FieldRefMut if shape.mutability is Mutability.MUTATE else FieldRef
    methods = _capability_methods(shape)
    variant_classes: dict[str, type[FieldRef]] = {}
    for variant in variants:
        attributes: dict[str, Any] = {
            "__slots__": (),
            "__qualname__": f"{shape.name}.{variant.variant_name}",
            "union_name": shape.name,
            "variant_name": variant.variant_name,
            "type_signature": variant.type_signature,
        }
        attributes.update(methods)
        variant_classes[variant.variant_name] = type(variant.variant_name, (base,), attributes)

    namespace: dict[str, Any] = dict(variant_classes)
    namespace.update(
        __union_name__=shape.name,
        __mutability__=shape.mutability,
        __capabilities__=shape.capabilities,
        __variants__=dict(variant_classes),
    )
    return type(shape.name, (TaggedUnion,), namespace)


def _capability_methods(shape: TaggedUnionShape) -> dict[str, Callable[..., Any]]:
    methods: dict[str, Callable[..., Any]] = {}
    unsupported: list[str] = []
    for capability in shape.capabilities:
        kind = CAPABILITY_ALIASES.get(capability)
        if kind == "printable":
            methods["__repr__"] = _variant_repr
        elif kind == "comparable":
            methods["__eq__"] = _variant_eq
            methods.setdefault("__hash__", None)  # type: ignore[arg-type]
        elif kind == "hashable":
            methods["__hash__"] = _variant_hash
        elif kind == "cloneable":
            methods["clone"] = _variant_clone
        else:
            unsupported.append(capability)
    if unsupported:
        _LOGGER.warning(
            "Tagged union %s: capabilities %s are kept in the plan but have no runtime effect",
            shape.name,
            ", ".join(unsupported),
        )
    return methods


def _variant_repr(self: FieldRef) -> str:
    return f"{self.union_name}.{self.variant_name}({self.value!r})"


def _variant_eq(self: FieldRef, other: object) -> bool:
    if type(other) is not type(self):
        return NotImplemented
    assert isinstance(other, FieldRef)
    return bool(self.value == other.value)


def _variant_hash(self: FieldRef) -> int:
    return hash((self.union_name, self.variant_name, self.value))


def _variant_clone(self: FieldRef) -> FieldRef:
    return type(self)(self.record, self.field_name)
