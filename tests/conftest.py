"""
Pytest configuration and shared fixtures for nostrsign tests.

Provides:
- A fixed secp256k1 test key and its known public key
- A sample template, unsigned event and mapping for the "hello" event
"""

import logging
from typing import Any

import pytest

from nostrsign.models import EventTemplate, UnsignedEvent


# Valid secp256k1 test keys (DO NOT USE IN PRODUCTION)
PRIVATE_KEY_THREE = "00" * 31 + "03"  # pragma: allowlist secret
PUBLIC_KEY_THREE = "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"

HELLO_CREATED_AT = 1700362009


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def private_key() -> str:
    return PRIVATE_KEY_THREE


@pytest.fixture
def public_key() -> str:
    return PUBLIC_KEY_THREE


@pytest.fixture
def hello_template() -> EventTemplate:
    return EventTemplate(kind=1, tags=(), content="hello", created_at=HELLO_CREATED_AT)


@pytest.fixture
def hello_unsigned() -> UnsignedEvent:
    return UnsignedEvent(
        kind=1, tags=(), content="hello", created_at=HELLO_CREATED_AT, pubkey=PUBLIC_KEY_THREE
    )


@pytest.fixture
def hello_dict() -> dict[str, Any]:
    return {
        "kind": 1,
        "tags": [],
        "content": "hello",
        "created_at": HELLO_CREATED_AT,
        "pubkey": PUBLIC_KEY_THREE,
    }
