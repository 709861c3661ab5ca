"""
Nostr event records in their three lifecycle stages.

An event starts as an [EventTemplate][nostrsign.models.event.EventTemplate]
(``kind``, ``tags``, ``content``, ``created_at``), becomes an
[UnsignedEvent][nostrsign.models.event.UnsignedEvent] once the author's
``pubkey`` is attached, and ends as a signed
[Event][nostrsign.models.event.Event] carrying ``id`` and ``sig``.

All three are frozen dataclasses. Construction normalizes tags into tuples
of tuples but performs no validation: the structural gate is
[validate_event()][nostrsign.models.event.validate_event], a predicate that
accepts arbitrary untrusted input (mappings or model instances) and never
raises.

See Also:
    [nostrsign.nips.nip01.serialize][]: Canonical serialization that refuses
        input failing [validate_event()][nostrsign.models.event.validate_event].
    [nostrsign.nips.nip01.signature][]: Id derivation, signing and
        verification.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ._validation import (
    get_field,
    is_int,
    is_lower_hex,
    is_non_negative_int,
    is_sequence,
    is_tag_list,
)
from .constants import PUBKEY_HEX_LENGTH, EventKind


Tags = tuple[tuple[str, ...], ...]


def _freeze_tags(tags: Any) -> Any:
    """Convert a list of lists into a tuple of tuples.

    Malformed values are passed through untouched so that
    [validate_event()][nostrsign.models.event.validate_event] can still
    reject them.
    """
    if not is_sequence(tags):
        return tags
    return tuple(tuple(tag) if is_sequence(tag) else tag for tag in tags)


def _plain_int(value: Any) -> Any:
    # IntEnum members (EventKind) are stored as plain ints
    return int(value) if is_int(value) and type(value) is not int else value


def validate_template(candidate: Any) -> bool:
    """Return True if *candidate* has valid ``kind``, ``content``, ``created_at`` and ``tags``.

    * ``kind`` is a non-negative integer (``bool`` excluded).
    * ``content`` is a string.
    * ``created_at`` is an integer (``bool`` excluded).
    * ``tags`` is a list/tuple of lists/tuples containing strings only.
    """
    kind = get_field(candidate, "kind")
    content = get_field(candidate, "content")
    created_at = get_field(candidate, "created_at")
    tags = get_field(candidate, "tags")

    return (
        is_non_negative_int(kind)
        and isinstance(content, str)
        and is_int(created_at)
        and is_tag_list(tags)
    )


def validate_event(candidate: Any) -> bool:
    """Return True if *candidate* can be treated as an unsigned event.

    Adds the ``pubkey`` check (exactly 64 lowercase hex characters) to
    [validate_template()][nostrsign.models.event.validate_template]. No
    cryptographic check is performed, and ``id``/``sig`` are ignored.

    Examples:
        ```python
        validate_event({"kind": 1, "content": "hi", "created_at": 0,
                        "pubkey": "a" * 64, "tags": []})          # True
        validate_event({"kind": 1, "content": "hi", "created_at": 0,
                        "pubkey": "a" * 64, "tags": [[{}]]})      # False
        ```
    """
    if not validate_template(candidate):
        return False
    pubkey = get_field(candidate, "pubkey")
    return is_lower_hex(pubkey, PUBKEY_HEX_LENGTH)


@dataclass(frozen=True, slots=True)
class EventTemplate:
    """Caller-built event content before an author key is known.

    Attributes:
        kind: Event kind (see [EventKind][nostrsign.models.constants.EventKind]).
        tags: Tag entries, each a tuple of strings.
        content: Arbitrary text payload.
        created_at: Unix timestamp in seconds. ``0`` is a valid placeholder.
    """

    kind: int
    tags: Tags = ()
    content: str = ""
    created_at: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", _plain_int(self.kind))
        object.__setattr__(self, "created_at", _plain_int(self.created_at))
        object.__setattr__(self, "tags", _freeze_tags(self.tags))

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EventTemplate:
        """Build a template from a decoded JSON object.

        Raises:
            ValueError: If the template fields fail
                [validate_template()][nostrsign.models.event.validate_template].
        """
        if not validate_template(data):
            raise ValueError("Event template has wrong or missing properties")
        return cls(
            kind=data["kind"],
            tags=data["tags"],
            content=data["content"],
            created_at=data["created_at"],
        )


@dataclass(frozen=True, slots=True)
class UnsignedEvent(EventTemplate):
    """An [EventTemplate][nostrsign.models.event.EventTemplate] with its author attached.

    Attributes:
        pubkey: Author x-only public key, 64 lowercase hex characters.
    """

    pubkey: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"pubkey": self.pubkey, **EventTemplate.to_dict(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UnsignedEvent:
        """Build an unsigned event from a decoded JSON object.

        Raises:
            ValueError: If *data* fails
                [validate_event()][nostrsign.models.event.validate_event].
        """
        if not validate_event(data):
            raise ValueError("Unsigned event has wrong or missing properties")
        return cls(
            kind=data["kind"],
            tags=data["tags"],
            content=data["content"],
            created_at=data["created_at"],
            pubkey=data["pubkey"],
        )


@dataclass(frozen=True, slots=True)
class Event(UnsignedEvent):
    """A signed, content-addressed Nostr event.

    The identity-bearing fields are immutable once constructed. The only
    state that changes after construction is the verification cache, which
    [verify_event()][nostrsign.nips.nip01.signature.verify_event] fills in
    on first use. The cache is excluded from equality, hashing, ``repr``
    and [to_dict()][nostrsign.models.event.Event.to_dict].

    Attributes:
        id: SHA-256 of the canonical serialization, 64 lowercase hex chars.
        sig: BIP-340 Schnorr signature over ``id``, 128 lowercase hex chars.

    Examples:
        ```python
        event = Event.from_dict(json.loads(raw))
        event.verified        # None -- not checked yet
        verify_event(event)   # True / False, cached on the instance
        event.verified        # the cached result
        ```

    Note:
        ``id`` and ``sig`` are not checked at construction time. Malformed
        values are representable so that verification can report them as a
        failed check instead of an exception.
    """

    id: str = ""
    sig: str = ""
    _verified: bool | None = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )

    @property
    def verified(self) -> bool | None:
        """Cached verification result, or ``None`` if never verified."""
        return self._verified

    def _mark_verified(self, result: bool) -> bool:
        """Store *result* as this instance's verification outcome and return it.

        Used by the signature engine only. Repeated or concurrent calls with
        the same deterministic result are harmless.
        """
        object.__setattr__(self, "_verified", result)
        return result

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **UnsignedEvent.to_dict(self), "sig": self.sig}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Build a signed event from a decoded JSON object.

        The structural fields must pass
        [validate_event()][nostrsign.models.event.validate_event]; ``id`` and
        ``sig`` only need to be strings.

        Raises:
            ValueError: If the structure is invalid or ``id``/``sig`` are
                missing or not strings.
        """
        if not validate_event(data):
            raise ValueError("Event has wrong or missing properties")
        event_id = data.get("id")
        sig = data.get("sig")
        if not isinstance(event_id, str) or not isinstance(sig, str):
            raise ValueError("Event id and sig must be strings")
        return cls(
            kind=data["kind"],
            tags=data["tags"],
            content=data["content"],
            created_at=data["created_at"],
            pubkey=data["pubkey"],
            id=event_id,
            sig=sig,
        )


def get_blank_event(kind: int = EventKind.BLANK) -> EventTemplate:
    """Return an empty template of *kind* with ``created_at`` set to ``0``."""
    return EventTemplate(kind=kind, tags=(), content="", created_at=0)
