"""
Exception classes for iTransact Python SDK
"""

from typing import Optional, Dict, Any


class ITransactSDKError(Exception):
    """Base exception for all iTransact SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(ITransactSDKError):
    """Exception raised for invalid client configuration"""
    pass


class TransportError(ITransactSDKError):
    """
    Exception raised when no HTTP response could be obtained.

    Covers DNS resolution, connection, protocol and timeout failures. The
    underlying exception is available as ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "TRANSPORT_ERROR", details)
        self.cause = cause


class APIError(ITransactSDKError):
    """
    Exception raised for HTTP responses with a status other than 200 or 201.

    ``body`` is the response text as decoded by httpx and is never parsed.
    Bytes that are not valid in the response charset are replaced during
    decoding, so ``body_bytes`` keeps the exact bytes the server sent.
    """

    def __init__(self, message: str, status_code: int, body: str,
                 body_bytes: bytes = b"",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "API_ERROR", details)
        self.status_code = status_code
        self.body = body
        self.body_bytes = body_bytes


class MalformedResponseError(ITransactSDKError):
    """
    Exception raised when a 200/201 response body is not valid JSON

    ``body`` is the decoded response text; ``body_bytes`` the exact bytes.
    """

    def __init__(self, message: str, status_code: int, body: str,
                 body_bytes: bytes = b"",
                 cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "MALFORMED_RESPONSE", details)
        self.status_code = status_code
        self.body = body
        self.body_bytes = body_bytes
        self.cause = cause
