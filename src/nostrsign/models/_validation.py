"""Shared predicates for the event models.

Private module -- not part of the public API. Every helper here answers a
yes/no question about untrusted input and never raises, so
[validate_event()][nostrsign.models.event.validate_event] can be built from
them without any ``try``/``except``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


_MISSING = object()
_HEX_CHARS = re.compile(r"[a-f0-9]*")


def is_int(value: Any) -> bool:
    """Return True if *value* is an ``int`` (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_non_negative_int(value: Any) -> bool:
    return is_int(value) and value >= 0


def is_lower_hex(value: Any, length: int) -> bool:
    """Return True if *value* is a string of exactly *length* lowercase hex chars."""
    return (
        isinstance(value, str)
        and len(value) == length
        and _HEX_CHARS.fullmatch(value) is not None
    )


def is_sequence(value: Any) -> bool:
    """Return True for JSON-array-like values: ``list`` or ``tuple``."""
    return isinstance(value, (list, tuple))


def is_tag_item(value: Any) -> bool:
    """Return True for values allowed inside a tag entry: strings only.

    Numbers are refused because their JSON spelling differs between
    encoders (``1.0`` vs ``1``, ``NaN``), which would change the event id.
    """
    return isinstance(value, str)


def is_tag_list(value: Any) -> bool:
    """Return True if *value* is a sequence of sequences of strings."""
    if not is_sequence(value):
        return False
    return all(is_sequence(tag) and all(is_tag_item(item) for item in tag) for tag in value)


def get_field(candidate: Any, name: str) -> Any:
    """Read *name* from a mapping key or an attribute, ``_MISSING`` if absent."""
    if isinstance(candidate, Mapping):
        return candidate.get(name, _MISSING)
    return getattr(candidate, name, _MISSING)
