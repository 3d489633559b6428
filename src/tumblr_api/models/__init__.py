"""
Models Module

Typed structures mirroring the JSON documents returned by the Tumblr API.
"""

from .envelope import Meta, Response
from .post import DialogueLine, Photo, PhotoSize, Post, VideoPlayer, decode_posts
from .blog import (
    Blog,
    BlogAvatar,
    BlogFollowers,
    BlogInfo,
    BlogList,
    BlogPosts,
    Follower,
    Likes,
)
from .user import FollowedBlog, User, UserBlog, UserFollowing, UserInfo

__all__ = [
    "Meta", "Response",
    "Post", "Photo", "PhotoSize", "DialogueLine", "VideoPlayer", "decode_posts",
    "Blog", "BlogInfo", "BlogAvatar", "Likes", "Follower", "BlogFollowers",
    "BlogList", "BlogPosts",
    "User", "UserBlog", "UserInfo", "FollowedBlog", "UserFollowing",
]
