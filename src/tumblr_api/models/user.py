"""
User Models

Payloads of the /user/... endpoints, which act on the account whose OAuth
token signed the request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .envelope import require_object
from .fields import as_bool, as_dict, as_int, as_list, as_str


@dataclass
class UserBlog:
    """A blog the user has permission to post to."""
    name: str = ""
    url: str = ""
    title: str = ""
    primary: bool = False
    followers: int = 0
    tweet: str = ""     # auto, Y or N
    facebook: str = ""  # Y or N
    type: str = ""      # public or private

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserBlog":
        return cls(
            name=as_str(data, "name"),
            url=as_str(data, "url"),
            title=as_str(data, "title"),
            primary=as_bool(data, "primary"),
            followers=as_int(data, "followers"),
            tweet=as_str(data, "tweet"),
            facebook=as_str(data, "facebook"),
            type=as_str(data, "type"),
        )


@dataclass
class User:
    following: int = 0
    default_post_format: str = ""
    name: str = ""
    likes: int = 0
    blogs: List[UserBlog] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            following=as_int(data, "following"),
            default_post_format=as_str(data, "default_post_format"),
            name=as_str(data, "name"),
            likes=as_int(data, "likes"),
            blogs=as_list(data, "blogs", UserBlog.from_dict),
        )


@dataclass
class UserInfo:
    user: User = field(default_factory=User)

    @classmethod
    def from_dict(cls, data: Any) -> "UserInfo":
        data = require_object(data, "user info")
        return cls(user=User.from_dict(as_dict(data, "user")))


@dataclass
class FollowedBlog:
    name: str = ""
    url: str = ""
    updated: int = 0
    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FollowedBlog":
        return cls(
            name=as_str(data, "name"),
            url=as_str(data, "url"),
            updated=as_int(data, "updated"),
            title=as_str(data, "title"),
            description=as_str(data, "description"),
        )


@dataclass
class UserFollowing:
    total_blogs: int = 0
    blogs: List[FollowedBlog] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "UserFollowing":
        data = require_object(data, "following")
        return cls(
            total_blogs=as_int(data, "total_blogs"),
            blogs=as_list(data, "blogs", FollowedBlog.from_dict),
        )
