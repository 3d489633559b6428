"""
Configuration constants for the Tumblr API client.

This module centralizes the endpoint templates, HTTP settings and logging
parameters so the client can be pointed at a different host or tuned
without touching the request code.

Credentials are deliberately absent: they belong to a client instance.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class APIConfig:
    """API endpoint and HTTP configuration."""
    base_url: str = "https://api.tumblr.com/v2"
    blog_path: str = "/blog/"
    user_path: str = "/user/"
    tagged_path: str = "/tagged"

    # OAuth 1.0a token endpoints
    request_token_url: str = "https://www.tumblr.com/oauth/request_token"
    authorize_url: str = "https://www.tumblr.com/oauth/authorize"
    access_token_url: str = "https://www.tumblr.com/oauth/access_token"

    timeout_seconds: float = 10.0
    user_agent: str = "tumblr-api-python/0.1"

    # Avatar sizes are square, one value for both length and width
    default_avatar_size: int = 64
    avatar_sizes: Tuple[int, ...] = (16, 24, 30, 40, 48, 64, 96, 128, 512)

    # Envelope status codes treated as success
    success_statuses: Tuple[int, ...] = (200, 201)

    @property
    def blog_url(self) -> str:
        """Prefix for blog endpoints, followed by the blog hostname."""
        return f"{self.base_url}{self.blog_path}"

    @property
    def user_url(self) -> str:
        """Prefix for endpoints acting on the authenticated user."""
        return f"{self.base_url}{self.user_path}"

    @property
    def tagged_url(self) -> str:
        return f"{self.base_url}{self.tagged_path}"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "tumblr_api.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
