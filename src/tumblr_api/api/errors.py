"""
API Errors

Exception hierarchy raised by the Tumblr client. Every failure a caller can
observe derives from TumblrError.
"""

from typing import Optional

from ..models.envelope import Meta


class TumblrError(Exception):
    """Base class for all client errors."""


class ConfigurationError(TumblrError):
    """Credentials are missing or malformed."""


class AuthorizationError(TumblrError):
    """The OAuth token exchange was refused or used out of order."""


class TransportError(TumblrError):
    """The HTTP request could not be completed (connection, DNS, timeout)."""


class DecodeError(TumblrError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.http_status = http_status


class APIStatusError(TumblrError):
    """The response envelope carried a non-success status."""

    def __init__(self, meta: Meta):
        super().__init__(f"response status {meta.status} with {meta.msg}")
        self.meta = meta

    @property
    def status(self) -> int:
        return self.meta.status

    @property
    def msg(self) -> str:
        return self.meta.msg
