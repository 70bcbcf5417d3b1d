"""
HMAC-SHA256 payload signer

The iTransact API authenticates each request with a signature over the exact
JSON body: HMAC-SHA256 keyed by the API secret, base64 encoded. The scheme has
no nonce or timestamp, so the same (key, body) pair always signs the same way.
"""

import base64
import binascii
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from .utils import SecretKey, serialize_payload, to_key_bytes


def _hmac_sha256(key: bytes, body: bytes) -> hmac.HMAC:
    mac = hmac.HMAC(key, hashes.SHA256())
    mac.update(body)
    return mac


def sign_body(secret_key: SecretKey, body: bytes) -> str:
    """
    Sign already-serialized payload bytes.

    Args:
        secret_key: API secret key (str keys are UTF-8 encoded)
        body: Serialized request body

    Returns:
        str: Base64 encoded HMAC-SHA256 digest
    """
    digest = _hmac_sha256(to_key_bytes(secret_key), body).finalize()
    return base64.b64encode(digest).decode('ascii')


def sign_payload(secret_key: SecretKey, payload: Any) -> str:
    """
    Serialize a payload with :func:`serialize_payload` and sign the result.

    Args:
        secret_key: API secret key
        payload: JSON-serializable request payload

    Returns:
        str: Base64 encoded HMAC-SHA256 signature
    """
    return sign_body(secret_key, serialize_payload(payload))


def verify_signature(secret_key: SecretKey, body: bytes, signature: str) -> bool:
    """
    Check a base64 signature against serialized payload bytes.

    The comparison is constant time. Signatures that are not valid base64
    are rejected rather than raising.
    """
    try:
        expected = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return False

    try:
        _hmac_sha256(to_key_bytes(secret_key), body).verify(expected)
    except InvalidSignature:
        return False
    return True


class HmacSigner:
    """
    Signer bound to a single API secret key.

    Holds the key so callers do not have to thread it through every call.
    The key is kept out of ``repr`` output.
    """

    def __init__(self, secret_key: SecretKey):
        self._key = to_key_bytes(secret_key)

    def sign(self, payload: Any) -> str:
        """Serialize and sign a payload."""
        return sign_body(self._key, serialize_payload(payload))

    def sign_body(self, body: bytes) -> str:
        """Sign already-serialized bytes."""
        return sign_body(self._key, body)

    def verify(self, body: bytes, signature: str) -> bool:
        return verify_signature(self._key, body, signature)

    def __repr__(self) -> str:
        return "HmacSigner(secret_key=<redacted>)"


def create_signer(secret_key: SecretKey) -> HmacSigner:
    """
    Create an HMAC signer for the given secret key.

    Args:
        secret_key: API secret key

    Returns:
        HmacSigner: Configured signer
    """
    return HmacSigner(secret_key)
