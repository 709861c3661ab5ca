r"""nostrsign -- Nostr event serialization, signing and verification.

Builds, hashes, signs and verifies NIP-01 events, and keeps timestamp-sorted
event lists without duplicates.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
              __main__         Command-line interface
             /   |   \
          core  nips  utils    Infrastructure, protocol, and helpers
             \   |   /
              models           Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Event templates, unsigned and signed events, kinds, and the
        structural predicate. Depends only on stdlib.
    core: Exceptions, structured logging, YAML loading.
    nips: NIP-01 serialization, ids, Schnorr signing and verification.
    utils: Sorted insertion, relay URL normalization, message queue,
        key loading from the environment.

Note:
    For lightweight usage, import directly from subpackages::

        from nostrsign.models import EventTemplate
        from nostrsign.nips import finish_event, verify_event

    Top-level imports (``from nostrsign import finish_event``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostrsign")

__all__ = [
    "Event",
    "EventKind",
    "EventTemplate",
    "InvalidKeyError",
    "KeysConfig",
    "Logger",
    "MessageQueue",
    "NostrSignError",
    "SigningError",
    "UnsignedEvent",
    "ValidationError",
    "finish_event",
    "generate_private_key",
    "get_blank_event",
    "get_event_hash",
    "get_public_key",
    "get_signature",
    "insert_event_into_ascending_list",
    "insert_event_into_descending_list",
    "normalize_url",
    "serialize_event",
    "validate_event",
    "verify_event",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "InvalidKeyError": ("nostrsign.core", "InvalidKeyError"),
    "Logger": ("nostrsign.core", "Logger"),
    "NostrSignError": ("nostrsign.core", "NostrSignError"),
    "SigningError": ("nostrsign.core", "SigningError"),
    "ValidationError": ("nostrsign.core", "ValidationError"),
    "Event": ("nostrsign.models", "Event"),
    "EventKind": ("nostrsign.models", "EventKind"),
    "EventTemplate": ("nostrsign.models", "EventTemplate"),
    "UnsignedEvent": ("nostrsign.models", "UnsignedEvent"),
    "get_blank_event": ("nostrsign.models", "get_blank_event"),
    "validate_event": ("nostrsign.models", "validate_event"),
    "finish_event": ("nostrsign.nips", "finish_event"),
    "generate_private_key": ("nostrsign.nips", "generate_private_key"),
    "get_event_hash": ("nostrsign.nips", "get_event_hash"),
    "get_public_key": ("nostrsign.nips", "get_public_key"),
    "get_signature": ("nostrsign.nips", "get_signature"),
    "serialize_event": ("nostrsign.nips", "serialize_event"),
    "verify_event": ("nostrsign.nips", "verify_event"),
    "KeysConfig": ("nostrsign.utils", "KeysConfig"),
    "MessageQueue": ("nostrsign.utils", "MessageQueue"),
    "insert_event_into_ascending_list": ("nostrsign.utils", "insert_event_into_ascending_list"),
    "insert_event_into_descending_list": ("nostrsign.utils", "insert_event_into_descending_list"),
    "normalize_url": ("nostrsign.utils", "normalize_url"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nostrsign' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
