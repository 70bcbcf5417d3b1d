"""
Async HTTP client for the iTransact API

Every API call goes through one pipeline: serialize the payload once, sign
those exact bytes with the API secret, POST them with the signature in the
Authorization header, then classify the response. Calls are independent;
each one opens and closes its own ``httpx.AsyncClient`` so no connection
state is shared between them. There are no retries and no default timeout.
"""

import json
import logging
import platform
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx

from .config import ClientConfig, Environment
from .exceptions import APIError, MalformedResponseError, TransportError
from .models import (
    Customer,
    CustomerCreateRequest,
    CustomerUpdateRequest,
    Payout,
    PayoutRequest,
    Token,
    TokenCreateRequest,
    Transaction,
    TransactionCreateRequest,
)
from .signing import SecretKey, serialize_payload, sign_body
from .version import __version__

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201})


def default_user_agent() -> str:
    """Identifying client header sent with every request."""
    return f"Python {platform.python_version()} - iTransact SDK {__version__}"


def _path_segment(identifier: str) -> str:
    return quote(str(identifier), safe='')


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {token}")


class ITransactClient:
    """
    Client for the iTransact payment API.

    Construction is pure configuration and performs no I/O. A single instance
    can serve any number of concurrent calls; its configuration is immutable.
    """

    def __init__(
        self,
        environment: Union[Environment, str],
        username: str,
        secret_key: SecretKey,
        *,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            environment: ``"local"``, ``"stage"``, or anything else for production
            username: API username
            secret_key: API secret key used to sign payloads
            timeout: Optional request timeout in seconds; None waits indefinitely
            user_agent: Optional override for the User-Agent header
            transport: Optional httpx transport used for every request

        Raises:
            ValidationError: If the credentials are invalid
        """
        self.config = ClientConfig(
            environment=environment,
            username=username,
            secret_key=secret_key,
            timeout=timeout,
            user_agent=user_agent,
        )
        self._transport = transport

        logger.info(
            f"Initialized iTransact client for {self.config.environment.value}: {self.config.base_url}"
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> 'ITransactClient':
        return cls(
            config.environment,
            config.username,
            config.secret_key,
            timeout=config.timeout,
            user_agent=config.user_agent,
            transport=transport,
        )

    @property
    def environment(self) -> Environment:
        return self.config.environment

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_headers(self, body: bytes) -> Dict[str, str]:
        """
        Build request headers for a serialized body.

        Args:
            body: Exact bytes that will be transmitted

        Returns:
            dict: Authorization, Content-Type and User-Agent headers
        """
        signature = sign_body(self.config.secret_key, body)
        return {
            'Authorization': f"{self.config.username}:{signature}",
            'Content-Type': 'application/json',
            'User-Agent': self.config.user_agent or default_user_agent(),
        }

    async def execute(self, endpoint_path: str, payload: Any) -> Any:
        """
        Sign and POST a payload, returning the parsed JSON response.

        Args:
            endpoint_path: Path relative to the environment base URL
            payload: JSON-serializable request body

        Returns:
            The parsed response body. Its shape is not validated.

        Raises:
            TransportError: If no HTTP response was received
            APIError: If the response status is not 200 or 201
            MalformedResponseError: If a 200/201 body is not valid JSON
            TypeError, ValueError: If the payload cannot be serialized
                (including UnicodeEncodeError for lone surrogates)
        """
        body = serialize_payload(payload)
        headers = self.build_headers(body)
        url = f"{self.config.base_url}{endpoint_path}"

        logger.debug(f"Making POST request to {url} ({len(body)} bytes)")

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.config.timeout,
            ) as http:
                response = await http.post(url, content=body, headers=headers)
        except httpx.RequestError as e:
            logger.warning(f"Transport failure for POST {url}: {e!r}")
            raise TransportError(
                f"Request to {url} failed: {e}",
                cause=e,
                details={'url': url},
            ) from e

        return self._handle_response(url, response)

    def _handle_response(self, url: str, response: httpx.Response) -> Any:
        status_code = response.status_code
        logger.debug(f"Received HTTP {status_code} from {url}")

        if status_code not in SUCCESS_STATUS_CODES:
            logger.warning(f"iTransact API returned HTTP {status_code} for {url}")
            raise APIError(
                f"Server request failed: HTTP {status_code}",
                status_code=status_code,
                body=response.text,
                body_bytes=response.content,
                details={'url': url},
            )

        try:
            return json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as e:
            logger.warning(f"Invalid JSON in HTTP {status_code} response from {url}")
            raise MalformedResponseError(
                f"Invalid JSON response: {e}",
                status_code=status_code,
                body=response.text,
                body_bytes=response.content,
                cause=e,
                details={'url': url},
            ) from e

    # Public API methods
    async def create_customer(self, request: CustomerCreateRequest) -> Customer:
        return await self.execute("customers", request)

    async def update_customer(self, request: CustomerUpdateRequest) -> Customer:
        """Update a customer; the id travels in both the query string and the body."""
        return await self.execute(f"customers?id={_path_segment(request['id'])}", request)

    async def create_payout(self, request: PayoutRequest) -> Payout:
        return await self.execute("payouts", request)

    async def get_payout(self, payout_id: str) -> Payout:
        """Fetch a payout. The API uses POST with an empty object body."""
        return await self.execute(f"payouts/{_path_segment(payout_id)}", {})

    async def create_token(self, request: TokenCreateRequest) -> Token:
        return await self.execute("tokens", request)

    async def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        return await self.execute("transactions", request)

    async def get_transaction(self, transaction_id: str) -> Transaction:
        """Fetch a transaction. The API uses POST with an empty object body."""
        return await self.execute(f"transactions/{_path_segment(transaction_id)}", {})


def create_client(
    environment: Union[Environment, str],
    username: str,
    secret_key: SecretKey,
    timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ITransactClient:
    """
    Create an iTransact client.

    Args:
        environment: Environment member or selector string
        username: API username
        secret_key: API secret key
        timeout: Optional request timeout in seconds
        user_agent: Optional override for the User-Agent header
        transport: Optional httpx transport

    Returns:
        ITransactClient: Configured client
    """
    return ITransactClient(
        environment,
        username,
        secret_key,
        timeout=timeout,
        user_agent=user_agent,
        transport=transport,
    )
