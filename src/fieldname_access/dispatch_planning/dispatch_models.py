"""Dispatch planning entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Mutability(str, Enum):
    """Reference mode carried by a tagged union and its lookup table."""

    READ = "read"
    MUTATE = "mutate"


@dataclass(frozen=True)
class DispatchEntry:
    """One row of a by-name lookup: a field name and the variant wrapping it."""

    field_name: str
    variant_name: str
    type_signature: str
    mutability: Mutability


@dataclass(frozen=True)
class DispatchTable:
    """Field-name lookup for one mutability mode, in field declaration order."""

    mutability: Mutability
    entries: tuple[DispatchEntry, ...]
    _index: dict[str, DispatchEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {entry.field_name: entry for entry in self.entries})

    def lookup(self, field_name: str) -> DispatchEntry | None:
        """Return the entry for `field_name`, or None when the record has no such field."""
        return self._index.get(field_name)

    def keys(self) -> tuple[str, ...]:
        return tuple(entry.field_name for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DispatchEntry]:
        return iter(self.entries)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._index
