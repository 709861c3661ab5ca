"""secp256k1 key primitives for event signing.

Thin adapters over ``nostr_sdk.Keys`` that speak lowercase hex strings and
translate ``NostrSdkError`` into
[InvalidKeyError][nostrsign.core.exceptions.InvalidKeyError].

Warning:
    Private keys are never logged. Only derived public keys appear in log
    fields.
"""

from __future__ import annotations

from nostr_sdk import Keys, NostrSdkError

from nostrsign.core.exceptions import InvalidKeyError
from nostrsign.models._validation import is_lower_hex


PRIVATE_KEY_HEX_LENGTH = 64


def parse_private_key(private_key: str) -> Keys:
    """Parse a 64-character hex private key into ``nostr_sdk.Keys``.

    Only hex is accepted here; bech32 ``nsec1`` strings are handled by
    [load_keys_from_env()][nostrsign.utils.keys.load_keys_from_env].

    Raises:
        InvalidKeyError: If *private_key* is not 64 hex characters, or is
            not a valid secp256k1 scalar (zero or not below the curve order).
    """
    if not isinstance(private_key, str) or not is_lower_hex(
        private_key.lower(), PRIVATE_KEY_HEX_LENGTH
    ):
        raise InvalidKeyError("private key must be 64 hexadecimal characters")
    try:
        return Keys.parse(private_key.lower())
    except NostrSdkError as e:
        raise InvalidKeyError(f"private key is not a valid secp256k1 scalar: {e}") from e


def get_public_key(private_key: str) -> str:
    """Derive the x-only public key (64 lowercase hex chars) from *private_key*.

    Raises:
        InvalidKeyError: If *private_key* is malformed or out of range.

    Examples:
        ```python
        get_public_key("00" * 31 + "01")
        # '79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
        ```
    """
    return parse_private_key(private_key).public_key().to_hex()


def generate_private_key() -> str:
    """Return a fresh random private key as 64 lowercase hex chars.

    Randomness comes from ``nostr_sdk.Keys.generate()``, which draws from the
    operating system's cryptographically secure generator.
    """
    return Keys.generate().secret_key().to_hex()
