"""
API Client Module

Signed HTTP client for the Tumblr v2 API. Every endpoint method reduces to
building a URL and parameter set, then handing it to one of a few helpers
that sign the request, perform it and decode the response envelope.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar
from urllib.parse import urlencode

import httpx

from ..config import config
from ..models import (
    BlogAvatar,
    BlogFollowers,
    BlogInfo,
    BlogList,
    BlogPosts,
    Likes,
    Meta,
    Post,
    Response,
    UserFollowing,
    UserInfo,
    decode_posts,
)
from .auth import Credentials, sign_auth
from .errors import APIStatusError, DecodeError, TransportError


logger = logging.getLogger(__name__)

T = TypeVar("T")

Params = Optional[Mapping[str, Any]]


def build_url(base: str, params: Params = None) -> str:
    """
    Append URL-encoded query parameters to a base URL.

    Keys are sorted so the same mapping always yields the same URL.
    """
    merged = _merge(None, params)
    if not merged:
        return base
    query = urlencode(sorted(merged.items()))
    return f"{base}?{query}"


def _wire_value(value: Any) -> str:
    """Render a parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_wire_value(item) for item in value)
    return str(value)


def _merge(defaults: Params, params: Params, required: Params = None) -> Dict[str, str]:
    """Defaults, overridden by caller params, overridden by required ones.

    None values are dropped.
    """
    merged: Dict[str, str] = {}
    for source in (defaults, params, required):
        for key, value in (source or {}).items():
            if value is None:
                continue
            merged[str(key)] = _wire_value(value)
    return merged


class TumblrClient:
    """
    Client for the Tumblr v2 API.

    Holds the OAuth credentials for one application/user pair and is not
    modified after construction, so one instance can serve many threads.

    Features:
    - OAuth 1.0a signing of every request
    - Typed results for every informational endpoint
    - Explicit exceptions for transport, status and decode failures
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        oauth_key: str,
        oauth_secret: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            consumer_key: Application key, also sent as api_key where required.
            consumer_secret: Application secret.
            oauth_key: User access token.
            oauth_secret: User access token secret.
            timeout: Per-request timeout in seconds (uses config default if None).
            transport: Optional httpx transport, mainly for testing.
        """
        self.credentials = Credentials(consumer_key, consumer_secret, oauth_key, oauth_secret)
        self.api_key = consumer_key
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.transport = transport
        self._auth = sign_auth(self.credentials)
        logger.info(f"TumblrClient initialized (base_url: {config.api.base_url})")

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs) -> "TumblrClient":
        return cls(
            credentials.consumer_key,
            credentials.consumer_secret,
            credentials.oauth_key,
            credentials.oauth_secret,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def _http(self, follow_redirects: bool = False) -> httpx.Client:
        return httpx.Client(
            auth=self._auth,
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=follow_redirects,
            headers={"User-Agent": config.api.user_agent},
        )

    def _send(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, str]] = None,
        follow_redirects: bool = False,
    ) -> httpx.Response:
        logger.debug(f"{method} {url}")
        try:
            with self._http(follow_redirects) as client:
                return client.request(method, url, data=data)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    def _request(self, method: str, url: str, data: Optional[Dict[str, str]] = None) -> Response:
        """
        Perform a signed request and decode the response envelope.

        Args:
            method: HTTP method.
            url: Full request URL, query string included.
            data: Form fields for POST requests.

        Returns:
            The decoded envelope; its status is not checked here.

        Raises:
            TransportError: If the request could not be completed.
            DecodeError: If the body is not a JSON envelope.
        """
        http_response = self._send(method, url, data=data)
        return self._decode_envelope(http_response)

    @staticmethod
    def _decode_envelope(http_response: httpx.Response) -> Response:
        try:
            return Response.from_dict(http_response.json())
        except (ValueError, TypeError) as e:
            raise DecodeError(
                f"Undecodable response from {http_response.request.url} "
                f"(HTTP {http_response.status_code}): {e}",
                http_status=http_response.status_code,
            ) from e

    @staticmethod
    def _check(response: Response) -> Response:
        if not response.meta.ok:
            logger.warning(f"API error: status {response.meta.status} with {response.meta.msg}")
            raise APIStatusError(response.meta)
        return response

    def _info(self, url: str, decode: Callable[[Any], T]) -> T:
        """
        GET a URL and decode its payload into the structure chosen by the caller.

        Args:
            url: Full request URL.
            decode: Converts the raw payload into the result type.

        Raises:
            APIStatusError: If the envelope status is not a success.
            DecodeError: If the payload does not have the expected shape.
        """
        response = self._check(self._request("GET", url))
        try:
            return decode(response.response)
        except (ValueError, TypeError) as e:
            raise DecodeError(f"Unexpected payload from {url}: {e}", http_status=response.meta.status) from e

    def _action(self, url: str, data: Dict[str, str]) -> Meta:
        """POST form fields and return the envelope status."""
        return self._check(self._request("POST", url, data=data)).meta

    def _raw_get(self, url: str) -> bytes:
        """GET a URL, following redirects, and return the body bytes."""
        http_response = self._send("GET", url, follow_redirects=True)
        if http_response.is_error:
            raise APIStatusError(Meta(status=http_response.status_code, msg=http_response.reason_phrase))
        return http_response.content

    def _blog_url(self, blog_hostname: str, path: str) -> str:
        return f"{config.api.blog_url}{blog_hostname}/{path}"

    def _user_url(self, path: str) -> str:
        return f"{config.api.user_url}{path}"

    def _with_api_key(self, params: Params) -> Dict[str, str]:
        return _merge({"api_key": self.api_key}, params)

    # ------------------------------------------------------------------
    # Blog endpoints
    # ------------------------------------------------------------------

    def blog_info(self, blog_hostname: str) -> BlogInfo:
        """
        General information about a blog: title, post count and so on.

        Args:
            blog_hostname: Standard or custom hostname (example.tumblr.com, example.com).
        """
        url = build_url(self._blog_url(blog_hostname, "info"), self._with_api_key(None))
        return self._info(url, BlogInfo.from_dict)

    def blog_avatar(self, blog_hostname: str, size: Optional[int] = None) -> bytes:
        """
        Download a blog's avatar image.

        Args:
            blog_hostname: Standard or custom hostname.
            size: Square size in pixels; one of config.api.avatar_sizes, 64 by default.

        Returns:
            The raw image bytes.
        """
        url = self._avatar_url(blog_hostname, size)
        return self._raw_get(url)

    def blog_avatar_url(self, blog_hostname: str, size: Optional[int] = None) -> BlogAvatar:
        """Resolve the location of a blog's avatar without downloading it."""
        url = self._avatar_url(blog_hostname, size)
        http_response = self._send("GET", url)

        location = http_response.headers.get("location")
        if http_response.is_redirect and location:
            return BlogAvatar(avatar_url=location)

        response = self._check(self._decode_envelope(http_response))
        try:
            return BlogAvatar.from_dict(response.response)
        except TypeError as e:
            raise DecodeError(f"Unexpected payload from {url}: {e}", http_status=response.meta.status) from e

    def _avatar_url(self, blog_hostname: str, size: Optional[int]) -> str:
        if size is None:
            size = config.api.default_avatar_size
        if size not in config.api.avatar_sizes:
            raise ValueError(f"Avatar size must be one of {config.api.avatar_sizes}, got {size}")
        return self._blog_url(blog_hostname, f"avatar/{size}")

    def blog_likes(self, blog_hostname: str, params: Params = None) -> Likes:
        """
        Publicly exposed likes of a blog.

        Params: limit (1-20), offset, before, after (timestamps).
        """
        url = build_url(self._blog_url(blog_hostname, "likes"), self._with_api_key(params))
        return self._info(url, Likes.from_dict)

    def blog_followers(self, blog_hostname: str, params: Params = None) -> BlogFollowers:
        """
        Followers of a blog the caller owns.

        Params: limit (1-20), offset.
        """
        url = build_url(self._blog_url(blog_hostname, "followers"), _merge(None, params))
        return self._info(url, BlogFollowers.from_dict)

    def blog_posts(self, blog_hostname: str, params: Params = None) -> BlogPosts:
        """
        Published posts of a blog.

        Params: type, id, tag, limit (1-20), offset, reblog_info, notes_info,
        filter (text or raw).
        """
        url = build_url(self._blog_url(blog_hostname, "posts"), self._with_api_key(params))
        return self._info(url, BlogPosts.from_dict)

    def blog_queued_posts(self, blog_hostname: str, params: Params = None) -> BlogList:
        """Queued posts. Params: offset, limit (1-20), filter."""
        url = build_url(self._blog_url(blog_hostname, "posts/queue"), _merge(None, params))
        return self._info(url, BlogList.from_dict)

    def blog_drafts(self, blog_hostname: str, params: Params = None) -> BlogList:
        """Draft posts. Params: before_id, filter."""
        url = build_url(self._blog_url(blog_hostname, "posts/draft"), _merge(None, params))
        return self._info(url, BlogList.from_dict)

    def blog_submissions(self, blog_hostname: str, params: Params = None) -> BlogList:
        """Submission posts. Params: offset, filter."""
        url = build_url(self._blog_url(blog_hostname, "posts/submission"), _merge(None, params))
        return self._info(url, BlogList.from_dict)

    # ------------------------------------------------------------------
    # Post endpoints
    # ------------------------------------------------------------------

    def post(self, blog_hostname: str, params: Params = None) -> Meta:
        """
        Create a post.

        Common params: type (text, photo, quote, link, chat, audio, video),
        state (published, draft, queue, private), tags, tweet, date, format
        (html or markdown), slug. Type-specific params follow the API docs,
        e.g. title/body for text posts, quote/source for quotes.
        """
        return self._action(self._blog_url(blog_hostname, "post"), _merge(None, params))

    def post_edit(self, blog_hostname: str, post_id: int, params: Params = None) -> Meta:
        """Edit a post. Accepts the same params as post()."""
        data = _merge(None, params, {"id": post_id})
        return self._action(self._blog_url(blog_hostname, "post/edit"), data)

    def post_reblog(
        self,
        blog_hostname: str,
        post_id: int,
        reblog_key: str,
        params: Params = None,
    ) -> Meta:
        """
        Reblog a post onto a blog.

        Args:
            post_id: ID of the post being reblogged.
            reblog_key: Reblog key of that post, found in blog_posts() results.
            params: Same as post(), plus comment.
        """
        data = _merge(None, params, {"id": post_id, "reblog_key": reblog_key})
        return self._action(self._blog_url(blog_hostname, "post/reblog"), data)

    def post_delete(self, blog_hostname: str, post_id: int) -> Meta:
        """Delete a post by ID."""
        return self._action(self._blog_url(blog_hostname, "post/delete"), _merge(None, None, {"id": post_id}))

    # ------------------------------------------------------------------
    # User endpoints
    # ------------------------------------------------------------------

    def user_info(self) -> UserInfo:
        """Account information of the user owning the OAuth token."""
        return self._info(self._user_url("info"), UserInfo.from_dict)

    def user_dashboard(self, params: Params = None) -> BlogList:
        """
        The user's dashboard.

        Params: limit (1-20), offset, type, since_id, reblog_info, notes_info.
        """
        url = build_url(self._user_url("dashboard"), _merge(None, params))
        return self._info(url, BlogList.from_dict)

    def user_likes(self, params: Params = None) -> Likes:
        """Posts the user liked. Params: limit, offset, before, after."""
        url = build_url(self._user_url("likes"), _merge(None, params))
        return self._info(url, Likes.from_dict)

    def user_following(self, params: Params = None) -> UserFollowing:
        """Blogs the user follows. Params: limit, offset."""
        url = build_url(self._user_url("following"), _merge(None, params))
        return self._info(url, UserFollowing.from_dict)

    def user_follow(self, blog_url: str) -> Meta:
        """Follow a blog (blogname.tumblr.com or a custom domain)."""
        return self._action(self._user_url("follow"), {"url": blog_url})

    def user_unfollow(self, blog_url: str) -> Meta:
        """Stop following a blog."""
        return self._action(self._user_url("unfollow"), {"url": blog_url})

    def user_like(self, post_id: int, reblog_key: str) -> Meta:
        """Like a post, identified by its ID and reblog key."""
        data = _merge(None, None, {"id": post_id, "reblog_key": reblog_key})
        return self._action(self._user_url("like"), data)

    def user_unlike(self, post_id: int, reblog_key: str) -> Meta:
        """Remove a like from a post."""
        data = _merge(None, None, {"id": post_id, "reblog_key": reblog_key})
        return self._action(self._user_url("unlike"), data)

    # ------------------------------------------------------------------
    # Tagged
    # ------------------------------------------------------------------

    def tagged_posts(self, tag: str, params: Params = None) -> List[Post]:
        """
        Posts carrying a tag.

        Params: before (timestamp; for featured tags use featured_timestamp),
        limit (1-20), filter.
        """
        data = _merge({"api_key": self.api_key}, params, {"tag": tag})
        return self._info(build_url(config.api.tagged_url, data), decode_posts)
