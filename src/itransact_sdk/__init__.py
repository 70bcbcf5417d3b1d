"""
iTransact Python SDK
Async client for the iTransact payment API with HMAC-signed requests
"""

from .version import __version__
from .config import (
    BASE_URLS,
    ClientConfig,
    Environment,
)
from .exceptions import (
    ITransactSDKError,
    ValidationError,
    TransportError,
    APIError,
    MalformedResponseError,
)
from .http_client import (
    ITransactClient,
    create_client,
    default_user_agent,
)
from .models import (
    ACH,
    Address,
    Card,
    Credit,
    Customer,
    CustomerCreateRequest,
    CustomerPostRequest,
    CustomerUpdateRequest,
    Metadata,
    MetadataEntry,
    PaymentSource,
    Payout,
    PayoutRequest,
    Subscription,
    Token,
    TokenCreateRequest,
    TokenID,
    Transaction,
    TransactionCreateRequest,
)
from .signing import (
    HmacSigner,
    create_signer,
    serialize_payload,
    sign,
    sign_body,
    sign_payload,
    verify_signature,
)

__all__ = [
    '__version__',
    # Configuration
    'BASE_URLS',
    'ClientConfig',
    'Environment',
    # Exceptions
    'ITransactSDKError',
    'ValidationError',
    'TransportError',
    'APIError',
    'MalformedResponseError',
    # HTTP client
    'ITransactClient',
    'create_client',
    'default_user_agent',
    # Entities
    'ACH',
    'Address',
    'Card',
    'Credit',
    'Customer',
    'CustomerCreateRequest',
    'CustomerPostRequest',
    'CustomerUpdateRequest',
    'Metadata',
    'MetadataEntry',
    'PaymentSource',
    'Payout',
    'PayoutRequest',
    'Subscription',
    'Token',
    'TokenCreateRequest',
    'TokenID',
    'Transaction',
    'TransactionCreateRequest',
    # Request Signing
    'HmacSigner',
    'create_signer',
    'serialize_payload',
    'sign',
    'sign_body',
    'sign_payload',
    'verify_signature',
]
