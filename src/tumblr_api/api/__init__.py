"""
API Client Module

Provides the signed HTTP client for the Tumblr v2 API.
"""

from .auth import Credentials, OAuthFlow
from .client import TumblrClient, build_url
from .errors import (
    APIStatusError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    TransportError,
    TumblrError,
)

__all__ = [
    "TumblrClient", "build_url", "Credentials", "OAuthFlow",
    "TumblrError", "ConfigurationError", "AuthorizationError",
    "TransportError", "DecodeError", "APIStatusError",
]
