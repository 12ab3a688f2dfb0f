"""Variant planning entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VariantClass:
    """A named case of the generated tagged union and the fields resolving to it."""

    variant_name: str
    type_signature: str
    member_fields: tuple[str, ...]
    is_override: bool = False

    def describe(self) -> str:
        """Return a short human-readable description used in error messages."""
        members = ", ".join(f"'{name}'" for name in self.member_fields)
        origin = "override" if self.is_override else "type"
        return f"{origin} variant for {self.type_signature} (fields {members})"
