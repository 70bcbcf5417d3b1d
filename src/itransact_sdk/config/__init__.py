"""
Configuration management for iTransact Python SDK

Environment selection and immutable client configuration.
"""

from .client_config import (
    BASE_URLS,
    ClientConfig,
    Environment,
)

__all__ = [
    'BASE_URLS',
    'ClientConfig',
    'Environment',
]
