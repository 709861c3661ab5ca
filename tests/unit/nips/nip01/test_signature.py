"""Unit tests for nips.nip01.signature module.

Signatures use fresh auxiliary randomness, so tests check their format and
that they verify, never exact signature bytes.
"""

import hashlib
from unittest.mock import MagicMock

import pytest

from nostrsign.core.exceptions import InvalidKeyError, ValidationError
from nostrsign.models import Event, EventTemplate, UnsignedEvent
from nostrsign.nips.nip01 import (
    finish_event,
    get_event_hash,
    get_signature,
    serialize_event,
    sign_event,
    verify_event,
)
from nostrsign.nips.nip01 import signature as signature_module


HELLO_ID = "af0bd815efeea5446ce8e0df2eea7f770fd37a84e00a62c03b723f4bf5875bb5"
EMPTY_ID = "1d60156c7d5c3d752ed401ba085300ea90869712b4acc88edff9601de4c0b15c"
KEY_ONE = "00" * 31 + "01"  # pragma: allowlist secret
PUBKEY_ONE = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


def _is_hex(value: str, length: int) -> bool:
    return len(value) == length and all(c in "0123456789abcdef" for c in value)


@pytest.fixture
def signed(hello_template, private_key) -> Event:
    return finish_event(hello_template, private_key)


class TestGetEventHash:
    def test_known_vector(self, hello_dict):
        assert get_event_hash(hello_dict) == HELLO_ID

    def test_empty_event(self):
        event = UnsignedEvent(kind=1, tags=(), content="", created_at=0, pubkey=PUBKEY_ONE)
        assert get_event_hash(event) == EMPTY_ID

    def test_matches_sha256_of_serialization(self, hello_unsigned):
        expected = hashlib.sha256(serialize_event(hello_unsigned)).hexdigest()
        assert get_event_hash(hello_unsigned) == expected

    def test_content_changes_id(self, hello_dict):
        assert get_event_hash({**hello_dict, "content": "hello!"}) != HELLO_ID

    def test_invalid_raises(self, hello_dict):
        with pytest.raises(ValidationError):
            get_event_hash({**hello_dict, "pubkey": "nope"})


class TestGetSignature:
    def test_format(self, hello_unsigned, private_key):
        assert _is_hex(get_signature(hello_unsigned, private_key), 128)

    def test_signature_verifies(self, hello_unsigned, private_key):
        sig = get_signature(hello_unsigned, private_key)
        event = Event(**hello_unsigned.to_dict(), id=HELLO_ID, sig=sig)
        assert verify_event(event) is True

    def test_invalid_key(self, hello_unsigned):
        with pytest.raises(InvalidKeyError):
            get_signature(hello_unsigned, "00" * 32)

    def test_invalid_event(self, private_key):
        with pytest.raises(ValidationError):
            get_signature({"kind": 1}, private_key)


class TestSignEventAlias:
    def test_warns_and_signs(self, hello_unsigned, private_key):
        with pytest.warns(DeprecationWarning, match="get_signature"):
            sig = sign_event(hello_unsigned, private_key)
        assert _is_hex(sig, 128)


class TestFinishEvent:
    def test_fields(self, signed, public_key):
        assert signed.pubkey == public_key
        assert signed.id == HELLO_ID
        assert signed.kind == 1
        assert signed.content == "hello"
        assert signed.created_at == 1700362009
        assert _is_hex(signed.sig, 128)

    def test_marked_verified(self, signed):
        assert signed.verified is True

    def test_fresh_copy_verifies(self, signed):
        copy = Event.from_dict(signed.to_dict())
        assert copy.verified is None
        assert verify_event(copy) is True

    def test_mapping_template(self, private_key):
        event = finish_event(
            {"kind": 1, "tags": [["t", "nostr"]], "content": "hi", "created_at": 5}, private_key
        )
        assert event.tags == (("t", "nostr"),)
        assert verify_event(event.to_dict()) is True

    def test_existing_pubkey_replaced(self, hello_dict, private_key, public_key):
        event = finish_event({**hello_dict, "pubkey": PUBKEY_ONE}, private_key)
        assert event.pubkey == public_key

    def test_different_key_different_id(self, hello_template):
        event = finish_event(hello_template, KEY_ONE)
        assert event.pubkey == PUBKEY_ONE
        assert event.id != HELLO_ID

    def test_invalid_template(self, private_key):
        with pytest.raises(ValidationError):
            finish_event(EventTemplate(kind=-1), private_key)

    @pytest.mark.parametrize("item", [21, 1.0, True])
    def test_non_string_tag_item(self, private_key, item):
        with pytest.raises(ValidationError):
            finish_event(EventTemplate(kind=1, tags=[["amount", item]]), private_key)

    def test_invalid_key(self, hello_template):
        with pytest.raises(InvalidKeyError):
            finish_event(hello_template, "not-a-key")


class TestVerifyEvent:
    def test_valid_mapping(self, signed):
        assert verify_event(signed.to_dict()) is True

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("content", "goodbye"),
            ("kind", 2),
            ("tags", [["t", "tampered"]]),
            ("created_at", 1700362010),
            ("pubkey", PUBKEY_ONE),
        ],
    )
    def test_tampered_field(self, signed, field, value):
        assert verify_event({**signed.to_dict(), field: value}) is False

    @pytest.mark.parametrize(
        "template",
        [
            EventTemplate(kind=70000, content="large kind"),
            EventTemplate(kind=1, created_at=-5),
            EventTemplate(kind=2**40, created_at=-(2**40)),
            EventTemplate(kind=1, tags=[["amount", "21"], ["e", ""]]),
        ],
    )
    def test_reparsed_copy_verifies(self, template, private_key):
        event = finish_event(template, private_key)
        copy = Event.from_dict(event.to_dict())
        assert event.verified is True
        assert verify_event(copy) is True
        assert copy.verified is True

    def test_tampered_id(self, signed):
        assert verify_event({**signed.to_dict(), "id": "0" * 64}) is False

    def test_tampered_sig(self, signed):
        sig = signed.sig
        flipped = ("0" if sig[0] != "0" else "1") + sig[1:]
        assert verify_event({**signed.to_dict(), "sig": flipped}) is False

    def test_signature_from_other_key(self, signed, hello_template):
        other = finish_event(hello_template, KEY_ONE)
        assert verify_event({**signed.to_dict(), "sig": other.sig}) is False

    @pytest.mark.parametrize("sig", ["", "zz" * 64, "ab" * 10, "ab" * 65])
    def test_malformed_sig(self, signed, sig):
        assert verify_event({**signed.to_dict(), "sig": sig}) is False

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"kind": 1},
            {"kind": 1, "tags": [], "content": "", "created_at": 0, "pubkey": "x"},
        ],
    )
    def test_malformed_mapping(self, data):
        assert verify_event(data) is False

    def test_malformed_pubkey_on_instance(self, signed):
        event = Event(**{**signed.to_dict(), "pubkey": "NOT-HEX"})
        assert verify_event(event) is False
        assert event.verified is False

    def test_pubkey_off_curve(self, hello_dict):
        unsigned = {**hello_dict, "pubkey": "ff" * 32}
        event = Event(**unsigned, id=get_event_hash(unsigned), sig="ab" * 64)
        assert verify_event(event) is False

    def test_result_cached(self, signed, monkeypatch):
        event = Event.from_dict(signed.to_dict())
        spy = MagicMock(wraps=signature_module._verify_schnorr)
        monkeypatch.setattr(signature_module, "_verify_schnorr", spy)

        assert verify_event(event) is True
        assert verify_event(event) is True
        assert spy.call_count == 1
        assert event.verified is True

    def test_failure_cached(self, signed, monkeypatch):
        event = Event(**{**signed.to_dict(), "content": "tampered"})
        assert verify_event(event) is False

        hasher = MagicMock()
        monkeypatch.setattr(signature_module, "get_event_hash", hasher)
        assert verify_event(event) is False
        hasher.assert_not_called()

    def test_id_mismatch_skips_signature_check(self, signed, monkeypatch):
        spy = MagicMock(return_value=True)
        monkeypatch.setattr(signature_module, "_verify_schnorr", spy)

        assert verify_event({**signed.to_dict(), "id": "0" * 64}) is False
        spy.assert_not_called()

    def test_backend_error_returns_false(self, signed, monkeypatch):
        monkeypatch.setattr(
            signature_module, "_verify_schnorr", MagicMock(side_effect=ValueError("bad"))
        )
        event = Event.from_dict(signed.to_dict())
        assert verify_event(event) is False
        assert event.verified is False

    def test_unicode_content(self, private_key):
        event = finish_event(EventTemplate(kind=1, content="héllo 🌍 \"q\"\n"), private_key)
        assert verify_event(Event.from_dict(event.to_dict())) is True
