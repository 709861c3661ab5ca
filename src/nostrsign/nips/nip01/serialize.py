"""
NIP-01 canonical serialization.

The event id is the SHA-256 of the UTF-8 bytes of the compact JSON array::

    [0, <pubkey>, <created_at>, <kind>, <tags>, <content>]

This byte string is the one cross-implementation contract of the package:
two independent implementations must agree on it for identical field
values, or they disagree on every event id. The encoding therefore uses:

* ``separators=(",", ":")`` -- no insignificant whitespace;
* ``ensure_ascii=False`` -- non-ASCII characters are emitted as raw UTF-8,
  only ``"``, ``\\``, and control characters are escaped;
* a fixed positional array, so key order in the source mapping is irrelevant.
"""

from __future__ import annotations

import json
from typing import Any

from nostrsign.core.exceptions import ValidationError
from nostrsign.models._validation import get_field
from nostrsign.models.event import validate_event


def canonical_array(event: Any) -> list[Any]:
    """Return the positional array that is hashed into the event id.

    Tags are copied into lists so tuple and list inputs encode identically.
    The caller is responsible for having validated *event*.
    """
    return [
        0,
        get_field(event, "pubkey"),
        int(get_field(event, "created_at")),
        int(get_field(event, "kind")),
        [list(tag) for tag in get_field(event, "tags")],
        get_field(event, "content"),
    ]


def serialize_event(event: Any) -> bytes:
    """Serialize the identity-bearing fields of *event* into canonical bytes.

    Args:
        event: A mapping or an [UnsignedEvent][nostrsign.models.event.UnsignedEvent]
            (or subclass) instance.

    Returns:
        UTF-8 encoded compact JSON array, suitable as the SHA-256 preimage.

    Raises:
        ValidationError: If *event* fails
            [validate_event()][nostrsign.models.event.validate_event], or a
            string field holds characters that have no UTF-8 encoding (lone
            surrogates).

    Examples:
        ```python
        serialize_event({"pubkey": "a" * 64, "created_at": 0, "kind": 1,
                         "tags": [], "content": "hi"})
        # b'[0,"aaaa...aaaa",0,1,[],"hi"]'
        ```
    """
    if not validate_event(event):
        raise ValidationError("can't serialize event with wrong or missing properties")

    text = json.dumps(canonical_array(event), ensure_ascii=False, separators=(",", ":"))
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationError(f"event contains a string that is not valid UTF-8: {e.reason}") from e
