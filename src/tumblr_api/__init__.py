"""
Tumblr API client.

    from tumblr_api import TumblrClient

    client = TumblrClient(consumer_key, consumer_secret, oauth_key, oauth_secret)
    info = client.blog_info("staff.tumblr.com")
    print(info.blog.title)
"""

from .api import (
    APIStatusError,
    AuthorizationError,
    ConfigurationError,
    Credentials,
    DecodeError,
    OAuthFlow,
    TransportError,
    TumblrClient,
    TumblrError,
    build_url,
)
from .config import config

__version__ = "0.1.0"

__all__ = [
    "TumblrClient", "Credentials", "OAuthFlow", "build_url", "config",
    "TumblrError", "ConfigurationError", "AuthorizationError",
    "TransportError", "DecodeError", "APIStatusError",
]
