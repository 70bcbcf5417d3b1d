"""
Utility functions for payload signing

This module owns the single JSON serialization routine used by the SDK. The
bytes it produces are the bytes that get signed and the bytes that get sent,
so nothing else in the package may serialize a request body.
"""

import json
from typing import Any, Union

SecretKey = Union[str, bytes]

# Matches JSON.stringify: no whitespace, insertion-ordered keys, raw UTF-8.
_JSON_SEPARATORS = (',', ':')


def serialize_payload(payload: Any) -> bytes:
    """
    Serialize a request payload to its canonical JSON bytes.

    Args:
        payload: Any JSON-serializable value (dict, list, str, number, bool, None)

    Returns:
        bytes: Compact UTF-8 encoded JSON, keys in construction order

    Raises:
        TypeError: If the payload contains a value JSON cannot represent
        ValueError: If the payload contains NaN or infinity, or a circular reference
        UnicodeEncodeError: If a string contains a lone surrogate such as "\\ud800",
            which has no UTF-8 encoding
    """
    return json.dumps(
        payload,
        separators=_JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    ).encode('utf-8')


def to_key_bytes(secret_key: SecretKey) -> bytes:
    """
    Normalize a secret key to bytes.

    String keys are UTF-8 encoded; bytes are returned unchanged.
    """
    if isinstance(secret_key, bytes):
        return secret_key
    if isinstance(secret_key, str):
        return secret_key.encode('utf-8')
    raise TypeError(f"Secret key must be str or bytes, got {type(secret_key).__name__}")
