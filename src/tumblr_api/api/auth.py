"""
Authentication Module

OAuth 1.0a credentials, request signing and the three-legged token flow.
Signing itself is done by authlib's httpx integration; this module only
decides which keys go where.

An easy way to get a full set of credentials for a registered application
is the interactive console at https://api.tumblr.com/console.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

import httpx
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.httpx_client import OAuth1Auth, OAuth1Client

from ..config import config
from .errors import AuthorizationError, ConfigurationError, TransportError


logger = logging.getLogger(__name__)


ENV_VARS = {
    "consumer_key": "TUMBLR_CONSUMER_KEY",
    "consumer_secret": "TUMBLR_CONSUMER_SECRET",
    "oauth_key": "TUMBLR_OAUTH_TOKEN",
    "oauth_secret": "TUMBLR_OAUTH_SECRET",
}


@dataclass(frozen=True)
class Credentials:
    """Consumer (application) keys plus the user's access token."""
    consumer_key: str
    consumer_secret: str
    oauth_key: str
    oauth_secret: str

    def __post_init__(self):
        missing = [name for name in ENV_VARS if not getattr(self, name)]
        if missing:
            raise ConfigurationError(f"Missing credentials: {', '.join(missing)}")

    def __repr__(self) -> str:
        return f"Credentials(consumer_key={self.consumer_key!r}, secrets=***)"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Credentials":
        """
        Read credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Raises:
            ConfigurationError: If any of the four variables is unset or empty.
        """
        environ = os.environ if environ is None else environ
        values = {name: environ.get(var, "") for name, var in ENV_VARS.items()}
        missing = [ENV_VARS[name] for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")
        return cls(**values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Credentials":
        """
        Read credentials from a JSON file.

        The file holds an object with the keys consumer_key, consumer_secret,
        oauth_key and oauth_secret.

        Raises:
            ConfigurationError: If the file is unreadable or incomplete.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read credentials file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Credentials file {path} must hold a JSON object")
        return cls(**{name: str(data.get(name) or "") for name in ENV_VARS})


def sign_auth(credentials: Credentials) -> OAuth1Auth:
    """Build the httpx auth object that signs requests with HMAC-SHA1."""
    return OAuth1Auth(
        client_id=credentials.consumer_key,
        client_secret=credentials.consumer_secret,
        token=credentials.oauth_key,
        token_secret=credentials.oauth_secret,
    )


class OAuthFlow:
    """
    Three-legged OAuth 1.0a authorization.

    Usage:
        flow = OAuthFlow(consumer_key, consumer_secret, callback_uri)
        flow.fetch_request_token()
        print(flow.authorization_url())      # user visits, gets a verifier
        credentials = flow.fetch_access_token(verifier)
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        callback_uri: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.callback_uri = callback_uri
        self.transport = transport
        self.request_token: Optional[Dict[str, str]] = None

    def _client(self, **kwargs) -> OAuth1Client:
        return OAuth1Client(
            self.consumer_key,
            self.consumer_secret,
            timeout=config.api.timeout_seconds,
            transport=self.transport,
            **kwargs,
        )

    def fetch_request_token(self) -> Dict[str, str]:
        """Obtain a temporary request token."""
        logger.info("Fetching OAuth request token")
        try:
            with self._client(redirect_uri=self.callback_uri) as client:
                token = client.fetch_request_token(config.api.request_token_url)
        except httpx.HTTPError as e:
            raise TransportError(f"Request token call failed: {e}") from e
        except (AuthlibBaseError, ValueError) as e:
            raise AuthorizationError(f"Request token denied: {e}") from e

        self.request_token = dict(token)
        return self.request_token

    def authorization_url(self) -> str:
        """URL the user must visit to approve the request token."""
        if self.request_token is None:
            raise AuthorizationError("fetch_request_token() must be called first")
        with self._client() as client:
            return client.create_authorization_url(
                config.api.authorize_url,
                request_token=self.request_token["oauth_token"],
            )

    def fetch_access_token(self, verifier: str) -> Credentials:
        """Exchange the approved request token for long-lived credentials."""
        if self.request_token is None:
            raise AuthorizationError("fetch_request_token() must be called first")

        logger.info("Exchanging request token for access token")
        try:
            with self._client(
                token=self.request_token["oauth_token"],
                token_secret=self.request_token["oauth_token_secret"],
            ) as client:
                token = client.fetch_access_token(config.api.access_token_url, verifier=verifier)
        except httpx.HTTPError as e:
            raise TransportError(f"Access token call failed: {e}") from e
        except (AuthlibBaseError, ValueError) as e:
            raise AuthorizationError(f"Access token denied: {e}") from e

        return Credentials(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            oauth_key=token.get("oauth_token", ""),
            oauth_secret=token.get("oauth_token_secret", ""),
        )
