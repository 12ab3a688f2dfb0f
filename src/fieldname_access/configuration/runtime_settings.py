"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RecordDeclaration:
    """One record as written in a declaration file, before schema validation."""

    name: str
    fields: tuple[tuple[str, str], ...]
    record_directives: Mapping[str, object]
    field_directives: Mapping[str, Mapping[str, object]]


@dataclass(frozen=True)
class Configuration:
    """Top-level declaration file aggregate."""

    path: Path
    records: tuple[RecordDeclaration, ...]

    @property
    def record_names(self) -> tuple[str, ...]:
        return tuple(record.name for record in self.records)

    def get_record(self, name: str) -> RecordDeclaration | None:
        for record in self.records:
            if record.name == name:
                return record
        return None
