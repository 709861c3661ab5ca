"""
NIP-01 event ids and BIP-340 Schnorr signatures.

The id of an event is the lowercase hex SHA-256 of its
[canonical serialization][nostrsign.nips.nip01.serialize.serialize_event];
the signature is a BIP-340 Schnorr signature over the 32 raw bytes of that
id, made with the key whose x-only public key is the event's ``pubkey``.

Signing is delegated to ``nostr_sdk``, which uses fresh auxiliary
randomness, so two signatures of the same event differ while both verify;
ids are always reproducible. Verification checks the raw signature against
``(id, pubkey)`` with ``coincurve``, so every event that hashes can also
verify, whatever its kind or timestamp.

Warning:
    [verify_event()][nostrsign.nips.nip01.signature.verify_event] **never
    raises**. Hash mismatches, malformed hex, invalid keys and bad
    signatures all return ``False``. Callers branch only on the boolean.
"""

from __future__ import annotations

import hashlib
import logging
import warnings
from collections.abc import Mapping
from typing import Any

from coincurve import PublicKeyXOnly
from nostr_sdk import Keys, NostrSdkError

from nostrsign.core.exceptions import SigningError, ValidationError
from nostrsign.models._validation import get_field
from nostrsign.models.event import Event, UnsignedEvent, validate_template

from .keys import parse_private_key
from .serialize import serialize_event


logger = logging.getLogger("nostrsign.nips.nip01")


def get_event_hash(event: Any) -> str:
    """Return the event id: hex SHA-256 of the canonical serialization.

    Raises:
        ValidationError: If *event* fails structural validation.
    """
    return hashlib.sha256(serialize_event(event)).hexdigest()


def _sign_digest(keys: Keys, event_id: str) -> str:
    try:
        return keys.sign_schnorr(bytes.fromhex(event_id))
    except NostrSdkError as e:
        raise SigningError(f"schnorr signing failed: {e}") from e


def get_signature(event: Any, private_key: str) -> str:
    """Sign the id of *event* with *private_key*.

    The event's ``pubkey`` is hashed as given; it is not compared with the
    key's public key. Use
    [finish_event()][nostrsign.nips.nip01.signature.finish_event] to get a
    consistent, fully populated event.

    Returns:
        The 64-byte signature as 128 lowercase hex characters.

    Raises:
        ValidationError: If *event* fails structural validation.
        InvalidKeyError: If *private_key* is malformed or out of range.
        SigningError: If the signing backend fails.
    """
    keys = parse_private_key(private_key)
    return _sign_digest(keys, get_event_hash(event))


def sign_event(event: Any, private_key: str) -> str:
    """Deprecated alias of [get_signature()][nostrsign.nips.nip01.signature.get_signature].

    .. deprecated::
        Use ``get_signature`` instead; this name will be removed.
    """
    warnings.warn(
        "sign_event is deprecated and will be removed or changed in the future, "
        "use get_signature instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_signature(event, private_key)


def finish_event(template: Any, private_key: str) -> Event:
    """Turn a template into a signed, verified [Event][nostrsign.models.event.Event].

    Derives ``pubkey`` from *private_key* (replacing any ``pubkey`` already
    on *template*), computes ``id`` and signs it. The returned instance is
    already marked as verified.

    Args:
        template: An [EventTemplate][nostrsign.models.event.EventTemplate],
            [UnsignedEvent][nostrsign.models.event.UnsignedEvent] or a
            mapping with ``kind``, ``tags``, ``content`` and ``created_at``.
        private_key: 64 hex characters.

    Raises:
        ValidationError: If the template fields are malformed.
        InvalidKeyError: If *private_key* is malformed or out of range.
        SigningError: If the signing backend fails.

    Examples:
        ```python
        event = finish_event(EventTemplate(kind=1, content="hello"), sk)
        event.verified        # True
        verify_event(event)   # True, from the cache
        ```
    """
    if not validate_template(template):
        raise ValidationError("can't sign event template with wrong or missing properties")

    keys = parse_private_key(private_key)
    unsigned = UnsignedEvent(
        kind=get_field(template, "kind"),
        tags=get_field(template, "tags"),
        content=get_field(template, "content"),
        created_at=get_field(template, "created_at"),
        pubkey=keys.public_key().to_hex(),
    )
    event_id = get_event_hash(unsigned)
    event = Event(
        kind=unsigned.kind,
        tags=unsigned.tags,
        content=unsigned.content,
        created_at=unsigned.created_at,
        pubkey=unsigned.pubkey,
        id=event_id,
        sig=_sign_digest(keys, event_id),
    )
    event._mark_verified(True)
    logger.debug("event_signed id=%s kind=%s pubkey=%s", event_id, event.kind, event.pubkey)
    return event


def _verify_schnorr(event: Event) -> bool:
    # BIP-340 over the 32 raw id bytes
    public_key = PublicKeyXOnly(bytes.fromhex(event.pubkey))
    return bool(public_key.verify(bytes.fromhex(event.sig), bytes.fromhex(event.id)))


def verify_event(event: Event | Mapping[str, Any]) -> bool:
    """Check that *event*'s ``id`` matches its content and ``sig`` matches ``id``.

    The first call on an [Event][nostrsign.models.event.Event] instance
    stores the outcome on it; later calls return the stored outcome without
    recomputing anything. The id check runs first and short-circuits, so a
    tampered event never reaches the signature math.

    A mapping is accepted for convenience: it is converted into a fresh
    ``Event`` whose cached result is discarded with it.

    Returns:
        True only if both the id and the signature check pass.
    """
    if isinstance(event, Mapping):
        try:
            event = Event.from_dict(event)
        except ValueError as e:
            logger.debug("verify_failed reason=malformed error=%s", e)
            return False

    cached = event.verified
    if cached is not None:
        return cached

    try:
        computed = get_event_hash(event)
    except ValidationError as e:
        logger.debug("verify_failed id=%s reason=malformed error=%s", event.id, e)
        return event._mark_verified(False)

    if computed != event.id:
        logger.debug("verify_failed id=%s reason=id_mismatch computed=%s", event.id, computed)
        return event._mark_verified(False)

    try:
        valid = _verify_schnorr(event)
    except (ValueError, TypeError) as e:
        logger.debug("verify_failed id=%s reason=bad_signature error=%s", event.id, e)
        return event._mark_verified(False)

    if not valid:
        logger.debug("verify_failed id=%s reason=bad_signature", event.id)
    return event._mark_verified(valid)
