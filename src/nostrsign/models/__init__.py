"""Pure event models with zero I/O.

The bottom layer of the package: depends only on the standard library and is
imported by every other layer.

Attributes:
    EventTemplate: Kind, tags, content and timestamp chosen by a caller.
    UnsignedEvent: A template with the author's ``pubkey`` attached.
    Event: A signed event with ``id``, ``sig`` and a per-instance
        verification cache.
    EventKind: Well-known event kinds (open enumeration).
    validate_event: Structural predicate for untrusted event-shaped input.

Note:
    All models use ``object.__setattr__`` to set fields on frozen dataclasses,
    both in ``__post_init__`` (tag normalization) and for the verification
    cache on [Event][nostrsign.models.event.Event].
"""

from .constants import PUBKEY_HEX_LENGTH, EventKind
from .event import (
    Event,
    EventTemplate,
    Tags,
    UnsignedEvent,
    get_blank_event,
    validate_event,
    validate_template,
)


__all__ = [
    "PUBKEY_HEX_LENGTH",
    "Event",
    "EventKind",
    "EventTemplate",
    "Tags",
    "UnsignedEvent",
    "get_blank_event",
    "validate_event",
    "validate_template",
]
