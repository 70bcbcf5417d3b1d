"""
iTransact Python SDK - Request Signing Module

HMAC-SHA256 signatures over canonical JSON payloads, as required by the
iTransact API ``Authorization`` header.
"""

from .utils import (
    SecretKey,
    serialize_payload,
    to_key_bytes,
)

from .hmac_signer import (
    HmacSigner,
    create_signer,
    sign_body,
    sign_payload,
    verify_signature,
)

# ``sign`` is the canonical name for payload signing
sign = sign_payload

# Public API exports
__all__ = [
    # Core signing functionality
    'HmacSigner',
    'create_signer',
    'sign',
    'sign_payload',
    'sign_body',
    'verify_signature',
    # Utilities
    'SecretKey',
    'serialize_payload',
    'to_key_bytes',
]
