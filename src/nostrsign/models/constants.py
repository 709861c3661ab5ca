"""Shared constants for the models layer.

See Also:
    [nostrsign.models.event][]: Uses [EventKind][nostrsign.models.constants.EventKind]
        for blank templates and [PUBKEY_HEX_LENGTH][nostrsign.models.constants.PUBKEY_HEX_LENGTH]
        for structural validation.
"""

from __future__ import annotations

from enum import IntEnum


class EventKind(IntEnum):
    """Well-known Nostr event kinds.

    The enumeration is open: kinds are plain non-negative integers on the
    wire, and any such value is legal event data whether or not it has a
    member here.

    Examples:
        ```python
        EventKind.TEXT == 1          # True
        EventKind(30023).name        # 'ARTICLE'
        ```
    """

    METADATA = 0
    TEXT = 1
    RECOMMEND_RELAY = 2
    CONTACTS = 3
    ENCRYPTED_DIRECT_MESSAGE = 4
    EVENT_DELETION = 5
    REPOST = 6
    REACTION = 7
    BADGE_AWARD = 8
    CHANNEL_CREATION = 40
    CHANNEL_METADATA = 41
    CHANNEL_MESSAGE = 42
    CHANNEL_HIDE_MESSAGE = 43
    CHANNEL_MUTE_USER = 44
    BLANK = 255
    FILE_METADATA = 1063
    REPORT = 1984
    ZAP_REQUEST = 9734
    ZAP = 9735
    RELAY_LIST = 10_002
    CLIENT_AUTH = 22_242
    NWC_REQUEST = 23_194
    HTTP_AUTH = 27_235
    PROFILE_BADGE = 30_008
    BADGE_DEFINITION = 30_009
    ARTICLE = 30_023


# x-only public key, lowercase hex
PUBKEY_HEX_LENGTH = 64
