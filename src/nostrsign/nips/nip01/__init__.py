"""NIP-01: canonical serialization, event ids, Schnorr signatures.

Attributes:
    serialize_event: Canonical ``[0, pubkey, created_at, kind, tags, content]``
        byte encoding. See [serialize][nostrsign.nips.nip01.serialize].
    get_event_hash: SHA-256 event id derived from the serialization.
    finish_event: Sign a template into a fully populated, verified event.
    verify_event: Cached id + signature check that never raises.
    get_public_key, generate_private_key: secp256k1 key primitives.
        See [keys][nostrsign.nips.nip01.keys].
"""

from .keys import generate_private_key, get_public_key, parse_private_key
from .serialize import canonical_array, serialize_event
from .signature import (
    finish_event,
    get_event_hash,
    get_signature,
    sign_event,
    verify_event,
)


__all__ = [
    "canonical_array",
    "finish_event",
    "generate_private_key",
    "get_event_hash",
    "get_public_key",
    "get_signature",
    "parse_private_key",
    "serialize_event",
    "sign_event",
    "verify_event",
]
