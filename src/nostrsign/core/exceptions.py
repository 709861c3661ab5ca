"""nostrsign exception hierarchy.

Every failure the package raises on purpose derives from
[NostrSignError][nostrsign.core.exceptions.NostrSignError], so callers can
separate deterministic, input-dependent failures from programming errors.
None of these are transient: retrying with the same input fails the same
way.

Exception hierarchy:

```text
NostrSignError (base -- never raised directly)
├── ConfigurationError   -- bad YAML config, missing key env var
├── ValidationError      -- event fails the structural predicate
├── InvalidKeyError      -- private key is not a valid secp256k1 scalar
└── SigningError         -- signing failed for any other reason
```

Note:
    [verify_event()][nostrsign.nips.nip01.signature.verify_event] raises
    none of these. Every verification failure collapses into ``False``.
"""

from __future__ import annotations


class NostrSignError(Exception):
    """Base exception for all nostrsign errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(NostrSignError):
    """Invalid or missing configuration (YAML file, env vars, CLI flags)."""


class ValidationError(NostrSignError):
    """Event-shaped input does not satisfy the structural predicate.

    Raised by serialization and id derivation for wrong field types, a
    malformed ``pubkey``, structured values nested inside tags, or strings
    that cannot be encoded as UTF-8.

    See Also:
        [validate_event()][nostrsign.models.event.validate_event]: The
            predicate whose failure triggers this error.
    """


class InvalidKeyError(NostrSignError):
    """A private key is not a valid scalar for the secp256k1 curve.

    Covers wrong length, non-hex input, zero and values at or above the
    curve order.
    """


class SigningError(NostrSignError):
    """Signing failed for a reason other than key validity."""
