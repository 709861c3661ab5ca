"""Relay URL normalization.

Two spellings of the same relay (``wss://Relay.Example.com:443//``,
``wss://relay.example.com``) must compare equal before they are used as keys
in relay lists or ``r``/``relay`` tags. [normalize_url()][nostrsign.utils.url.normalize_url]
produces that canonical spelling.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode

from rfc3986 import uri_reference
from rfc3986.exceptions import ValidationError
from rfc3986.validators import Validator


_DEFAULT_PORTS: dict[str, int] = {"ws": 80, "wss": 443, "http": 80, "https": 443}


def normalize_url(url: str) -> str:
    """Return the canonical form of *url*.

    * scheme and host are lowercased (RFC 3986 normalization);
    * runs of ``/`` in the path collapse to one and a trailing ``/`` is
      dropped, except for the root path, which stays ``/``;
    * the port is dropped when it is the scheme's default;
    * query parameters are sorted by key, keeping the relative order of
      repeated keys;
    * the fragment is removed.

    Raises:
        ValueError: If *url* has no scheme or host, or is not a valid URI.

    Examples:
        ```python
        normalize_url("wss://Relay.Example.com:443//inbox/?b=2&a=1#x")
        # 'wss://relay.example.com/inbox?a=1&b=2'
        ```
    """
    uri = uri_reference(url.strip()).normalize()

    validator = (
        Validator()
        .require_presence_of("scheme", "host")
        .check_validity_of("scheme", "host", "port", "path")
    )
    try:
        validator.validate(uri)
    except ValidationError as e:
        raise ValueError(f"Invalid URL: {url!r}") from e

    scheme = uri.scheme
    port = int(uri.port) if uri.port else None
    if port is not None and _DEFAULT_PORTS.get(scheme) == port:
        port = None

    path = uri.path or ""
    while "//" in path:
        path = path.replace("//", "/")
    path = path.rstrip("/") or "/"

    authority = f"{uri.host}:{port}" if port is not None else uri.host
    normalized = f"{scheme}://{authority}{path}"

    if uri.query:
        params = sorted(parse_qsl(uri.query, keep_blank_values=True), key=lambda kv: kv[0])
        normalized += "?" + urlencode(params)

    return normalized
