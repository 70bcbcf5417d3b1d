"""
Test suite for payload serialization and HMAC-SHA256 signing
"""

import base64
import hashlib
import hmac

import pytest

from itransact_sdk.signing import (
    HmacSigner,
    create_signer,
    serialize_payload,
    sign,
    sign_body,
    sign_payload,
    to_key_bytes,
    verify_signature,
)


def reference_signature(key: bytes, body: bytes) -> str:
    return base64.b64encode(hmac.new(key, body, hashlib.sha256).digest()).decode('ascii')


class TestSerializePayload:
    """Test canonical JSON serialization"""

    def test_compact_output(self):
        """No whitespace between tokens"""
        assert serialize_payload({"a": 1, "b": [1, 2], "c": {"d": None}}) == b'{"a":1,"b":[1,2],"c":{"d":null}}'

    def test_key_order_preserved(self):
        """Keys are emitted in construction order, not sorted"""
        assert serialize_payload({"z": 1, "a": 2, "m": 3}) == b'{"z":1,"a":2,"m":3}'

    def test_scalars_and_arrays(self):
        assert serialize_payload([]) == b'[]'
        assert serialize_payload({}) == b'{}'
        assert serialize_payload("x") == b'"x"'
        assert serialize_payload(True) == b'true'
        assert serialize_payload(None) == b'null'

    def test_non_ascii_is_raw_utf8(self):
        """Non-ASCII text is not escaped"""
        body = serialize_payload({"name": "Zoë"})
        assert body == '{"name":"Zoë"}'.encode('utf-8')

    def test_metadata_list_keeps_duplicates(self):
        metadata = [{"key": "k", "value": "1"}, {"key": "k", "value": "2"}]
        assert serialize_payload({"metadata": metadata}) == (
            b'{"metadata":[{"key":"k","value":"1"},{"key":"k","value":"2"}]}'
        )

    def test_rejects_unserializable(self):
        with pytest.raises(TypeError):
            serialize_payload({"when": object()})

        with pytest.raises(ValueError):
            serialize_payload({"amount": float("nan")})

    def test_lone_surrogate_is_caller_error(self):
        """Strings with no UTF-8 encoding fail before anything is signed"""
        with pytest.raises(UnicodeEncodeError):
            serialize_payload({"name": "\ud800"})

    def test_repeatable(self):
        payload = {"amount": 1000, "card": {"number": "4111111111111111"}}
        assert serialize_payload(payload) == serialize_payload(payload)


class TestSignature:
    """Test HMAC-SHA256 signatures"""

    def test_rfc4231_vector(self):
        """HMAC-SHA256 test case 2 from RFC 4231"""
        expected_hex = "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        expected = base64.b64encode(bytes.fromhex(expected_hex)).decode('ascii')
        assert sign_body("Jefe", b"what do ya want for nothing?") == expected

    def test_matches_reference_implementation(self):
        payload = {"amount": 1234, "order_number": "ord-1", "capture": True}
        body = serialize_payload(payload)
        assert sign_payload("secret", payload) == reference_signature(b"secret", body)

    def test_sign_alias(self):
        assert sign is sign_payload

    def test_deterministic(self):
        payload = {"id": "cus_9", "metadata": [{"key": "a", "value": "b"}]}
        assert sign_payload("secret", payload) == sign_payload("secret", payload)

    def test_sensitive_to_payload(self):
        assert sign_payload("secret", {"amount": 100}) != sign_payload("secret", {"amount": 101})

    def test_sensitive_to_key_order(self):
        """Different byte order means a different signature"""
        assert sign_payload("secret", {"a": 1, "b": 2}) != sign_payload("secret", {"b": 2, "a": 1})

    def test_sensitive_to_key(self):
        assert sign_payload("secret", {"amount": 100}) != sign_payload("secret2", {"amount": 100})

    def test_str_and_bytes_keys_agree(self):
        assert sign_body("clé", b"{}") == sign_body("clé".encode('utf-8'), b"{}")

    def test_output_is_base64_sha256(self):
        signature = sign_payload("secret", {})
        assert len(base64.b64decode(signature)) == 32

    def test_invalid_key_type(self):
        with pytest.raises(TypeError):
            to_key_bytes(12345)


class TestVerifySignature:
    """Test signature verification"""

    def test_valid_signature(self):
        body = serialize_payload({"amount": 100})
        assert verify_signature("secret", body, sign_body("secret", body))

    def test_wrong_key(self):
        body = serialize_payload({"amount": 100})
        assert not verify_signature("other", body, sign_body("secret", body))

    def test_tampered_body(self):
        body = serialize_payload({"amount": 100})
        signature = sign_body("secret", body)
        assert not verify_signature("secret", body.replace(b"100", b"900"), signature)

    def test_garbage_signature(self):
        assert not verify_signature("secret", b"{}", "not base64!!")
        assert not verify_signature("secret", b"{}", "")


class TestHmacSigner:
    """Test the key-bound signer"""

    def test_sign_matches_functions(self):
        signer = create_signer("secret")
        payload = {"token": "tok_1"}
        assert isinstance(signer, HmacSigner)
        assert signer.sign(payload) == sign_payload("secret", payload)
        assert signer.sign_body(b"{}") == sign_body("secret", b"{}")

    def test_verify(self):
        signer = HmacSigner(b"secret")
        body = serialize_payload([1, 2, 3])
        assert signer.verify(body, signer.sign_body(body))
        assert not signer.verify(body + b" ", signer.sign_body(body))

    def test_repr_hides_key(self):
        assert "secret" not in repr(HmacSigner("secret"))
