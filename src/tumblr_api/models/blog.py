"""
Blog Models

Payloads of the /blog/{hostname}/... endpoints.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .envelope import require_object
from .fields import as_bool, as_dict, as_int, as_list, as_str
from .post import Post


@dataclass
class Blog:
    """High-level blog data, as returned by /info."""
    title: str = ""
    posts: int = 0
    name: str = ""
    url: str = ""
    updated: int = 0
    description: str = ""
    ask: bool = False
    ask_anon: bool = False
    likes: int = 0
    is_blocked_from_primary: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Blog":
        return cls(
            title=as_str(data, "title"),
            posts=as_int(data, "posts"),
            name=as_str(data, "name"),
            url=as_str(data, "url"),
            updated=as_int(data, "updated"),
            description=as_str(data, "description"),
            ask=as_bool(data, "ask"),
            ask_anon=as_bool(data, "ask_anon"),
            likes=as_int(data, "likes"),
            is_blocked_from_primary=as_bool(data, "is_blocked_from_primary"),
        )


@dataclass
class BlogInfo:
    blog: Blog = field(default_factory=Blog)

    @classmethod
    def from_dict(cls, data: Any) -> "BlogInfo":
        data = require_object(data, "blog info")
        return cls(blog=Blog.from_dict(as_dict(data, "blog")))


@dataclass
class BlogAvatar:
    avatar_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "BlogAvatar":
        data = require_object(data, "avatar")
        return cls(avatar_url=as_str(data, "avatar_url"))


@dataclass
class Likes:
    """Posts liked by a blog or by the authenticated user."""
    liked_posts: List[Post] = field(default_factory=list)
    liked_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Likes":
        data = require_object(data, "likes")
        return cls(
            liked_posts=as_list(data, "liked_posts", Post.from_dict),
            liked_count=as_int(data, "liked_count"),
        )


@dataclass
class Follower:
    name: str = ""
    following: bool = False
    url: str = ""
    updated: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Follower":
        return cls(
            name=as_str(data, "name"),
            following=as_bool(data, "following"),
            url=as_str(data, "url"),
            updated=as_int(data, "updated"),
        )


@dataclass
class BlogFollowers:
    total_users: int = 0
    users: List[Follower] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BlogFollowers":
        data = require_object(data, "followers")
        return cls(
            total_users=as_int(data, "total_users"),
            users=as_list(data, "users", Follower.from_dict),
        )


@dataclass
class BlogList:
    """A bare list of posts (queue, drafts, submissions, dashboard)."""
    posts: List[Post] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BlogList":
        data = require_object(data, "post list")
        return cls(posts=as_list(data, "posts", Post.from_dict))


@dataclass
class BlogPosts:
    """Published posts together with the blog they belong to."""
    blog: Blog = field(default_factory=Blog)
    posts: List[Post] = field(default_factory=list)
    total_posts: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "BlogPosts":
        data = require_object(data, "blog posts")
        return cls(
            blog=Blog.from_dict(as_dict(data, "blog")),
            posts=as_list(data, "posts", Post.from_dict),
            total_posts=as_int(data, "total_posts"),
        )
