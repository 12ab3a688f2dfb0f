"""Textual type signature normalization and canonical short names."""

from __future__ import annotations

import re

_TOKEN_PATTERN = re.compile(r"'[A-Za-z_][A-Za-z0-9_]*|[A-Za-z_][A-Za-z0-9_]*|\d+|::|\S")
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_WORD_PATTERN = re.compile(r"'?[A-Za-z_][A-Za-z0-9_]*|\d+")
_PATH_SEPARATORS = frozenset({"::", "."})
_QUALIFIER_KEYWORDS = frozenset({"mut", "dyn", "impl", "const"})


def is_identifier(value: object) -> bool:
    """Return True when `value` is an ASCII identifier."""
    return isinstance(value, str) and _IDENTIFIER_PATTERN.fullmatch(value) is not None


def tokenize_type_signature(text: str) -> list[str]:
    """Split a textual type into identifiers, lifetimes, numbers and punctuation."""
    return _TOKEN_PATTERN.findall(text)


def normalize_type_signature(text: str) -> str:
    """Collapse insignificant whitespace so equal types compare equal as text.

    Tokens are joined without spaces, except between two word tokens
    (`&'a mut T`), after commas (`HashMap<String, u32>`) and around `|`.
    """
    parts: list[str] = []
    previous: str | None = None
    for token in tokenize_type_signature(text):
        if previous is not None and _needs_space(previous, token):
            parts.append(" ")
        parts.append(token)
        previous = token
    return "".join(parts)


def canonical_short_name(type_signature: str) -> str:
    """Return the default variant name for a normalized type signature.

    Every identifier path contributes its last segment, camel-cased:
    `std::option::Option<std::option::Option<i64>>` becomes `OptionOptionI64`
    and `list[int]` becomes `ListInt`. References, lifetimes and qualifier
    keywords do not contribute. Returns an empty string when nothing nameable
    remains.
    """
    segments: list[str] = []
    after_separator = False
    for token in tokenize_type_signature(type_signature):
        if token in _PATH_SEPARATORS:
            after_separator = True
            continue
        if token not in _QUALIFIER_KEYWORDS and (
            _IDENTIFIER_PATTERN.fullmatch(token) or token.isdigit()
        ):
            if after_separator and segments:
                segments[-1] = token
            else:
                segments.append(token)
        after_separator = False

    short_name = "".join(_camel_case(segment) for segment in segments)
    if not is_identifier(short_name):
        return ""
    return short_name


def _needs_space(previous: str, token: str) -> bool:
    if previous == "|" or token == "|":
        return True
    if previous == ",":
        return True
    return bool(_WORD_PATTERN.fullmatch(previous) and _WORD_PATTERN.fullmatch(token))


def _camel_case(segment: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in segment.split("_") if part)
