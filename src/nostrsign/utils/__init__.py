"""Helpers built on the models layer: ordering, URLs, queues, key loading.

Attributes:
    ordering: Copy-on-write, dedup-aware insertion into timestamp-sorted
        event lists.
    keys: Loading signing keys from environment variables (hex or nsec1)
        with Pydantic validation.
    url: Relay URL normalization with RFC 3986 parsing.
    queue: FIFO queue of string messages.

Note:
    The utils layer has **zero** imports from ``nostrsign.core`` or
    ``nostrsign.nips``; it depends only on
    [nostrsign.models][nostrsign.models] and third-party libraries.
"""

from .keys import ENV_PRIVATE_KEY, KeysConfig, load_keys_from_env
from .ordering import insert_event_into_ascending_list, insert_event_into_descending_list
from .queue import MessageQueue
from .url import normalize_url


__all__ = [
    "ENV_PRIVATE_KEY",
    "KeysConfig",
    "MessageQueue",
    "insert_event_into_ascending_list",
    "insert_event_into_descending_list",
    "load_keys_from_env",
    "normalize_url",
]
