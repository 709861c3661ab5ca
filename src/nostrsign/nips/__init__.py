"""Nostr Implementation Possibilities -- protocol rules for events.

The NIPs layer sits in the middle of the DAG, depending on
[nostrsign.models][nostrsign.models] and [nostrsign.core][nostrsign.core].
It performs no I/O: every function is synchronous and CPU-only.

Attributes:
    nip01: Canonical serialization, id derivation, BIP-340 signing and
        cached verification.
"""

from nostrsign.nips.nip01 import (
    finish_event,
    generate_private_key,
    get_event_hash,
    get_public_key,
    get_signature,
    serialize_event,
    sign_event,
    verify_event,
)


__all__ = [
    "finish_event",
    "generate_private_key",
    "get_event_hash",
    "get_public_key",
    "get_signature",
    "serialize_event",
    "sign_event",
    "verify_event",
]
