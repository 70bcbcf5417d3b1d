"""
Client configuration for the iTransact Python SDK

Maps deployment environments to their fixed API base URLs and holds the
credentials a client is built with. Configuration is resolved once, when the
client is constructed, and is never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from ..exceptions import ValidationError
from ..signing.utils import SecretKey


class Environment(str, Enum):
    """Deployment targets of the iTransact API"""
    LOCAL = "local"
    STAGE = "stage"
    PRODUCTION = "production"

    @classmethod
    def resolve(cls, selector: Union['Environment', str]) -> 'Environment':
        """
        Resolve an environment selector.

        ``"local"`` and ``"stage"`` select their environments. Every other
        string, including ``""`` and ``"prod"``, selects production.

        Args:
            selector: Environment member or environment name

        Returns:
            Environment: The resolved environment

        Raises:
            ValidationError: If the selector is not a string
        """
        if isinstance(selector, cls):
            return selector
        if not isinstance(selector, str):
            raise ValidationError(
                f"Environment selector must be a string, got {type(selector).__name__}",
                "INVALID_ENVIRONMENT",
            )
        if selector == cls.LOCAL.value:
            return cls.LOCAL
        if selector == cls.STAGE.value:
            return cls.STAGE
        return cls.PRODUCTION

    @property
    def base_url(self) -> str:
        return BASE_URLS[self]


BASE_URLS: Dict[Environment, str] = {
    Environment.LOCAL: "http://localhost:8080/",
    Environment.STAGE: "https://stage.api.itransact.com/",
    Environment.PRODUCTION: "https://api.itransact.com/",
}


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration for an iTransact client.

    Attributes:
        environment: Environment member or selector string
        username: API username sent in the Authorization header
        secret_key: API secret key used for HMAC signing
        timeout: Optional per-request timeout in seconds (None means no timeout)
        user_agent: Optional override for the identifying User-Agent header
        base_url: Derived from ``environment``; not settable
    """
    environment: Environment
    username: str
    secret_key: SecretKey = field(repr=False)
    timeout: Optional[float] = None
    user_agent: Optional[str] = None
    base_url: str = field(init=False)

    def __post_init__(self):
        """Resolve the environment and validate credentials."""
        environment = Environment.resolve(self.environment)
        object.__setattr__(self, 'environment', environment)
        object.__setattr__(self, 'base_url', BASE_URLS[environment])

        if not isinstance(self.username, str) or not self.username:
            raise ValidationError("API username cannot be empty", "INVALID_USERNAME")

        if not isinstance(self.secret_key, (str, bytes)) or not self.secret_key:
            raise ValidationError("API secret key cannot be empty", "INVALID_SECRET_KEY")

        if self.timeout is not None and self.timeout <= 0:
            raise ValidationError("Timeout must be positive", "INVALID_TIMEOUT")
