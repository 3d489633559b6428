"""
Post Model

A single wide structure covering every post type. The "type" field selects
which of the type-specific groups is meaningful; the others stay empty.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .envelope import require_object
from .fields import as_bool, as_dict, as_int, as_list, as_str, as_str_list


@dataclass
class PhotoSize:
    height: int = 0
    width: int = 0
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhotoSize":
        return cls(
            height=as_int(data, "height"),
            width=as_int(data, "width"),
            url=as_str(data, "url"),
        )


@dataclass
class Photo:
    """One photo of a photo post, with its alternate sizes."""
    caption: str = ""
    original_size: PhotoSize = field(default_factory=PhotoSize)
    alt_sizes: List[PhotoSize] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Photo":
        return cls(
            caption=as_str(data, "caption"),
            original_size=PhotoSize.from_dict(as_dict(data, "original_size")),
            alt_sizes=as_list(data, "alt_sizes", PhotoSize.from_dict),
        )


@dataclass
class DialogueLine:
    name: str = ""
    label: str = ""
    phrase: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DialogueLine":
        return cls(
            name=as_str(data, "name"),
            label=as_str(data, "label"),
            phrase=as_str(data, "phrase"),
        )


@dataclass
class VideoPlayer:
    width: int = 0
    embed_code: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoPlayer":
        return cls(width=as_int(data, "width"), embed_code=as_str(data, "embed_code"))


@dataclass
class Post:
    """A blog post of any type."""
    # Common fields
    blog_name: str = ""
    id: int = 0
    post_url: str = ""
    short_url: str = ""
    slug: str = ""
    type: str = ""
    timestamp: int = 0
    date: str = ""
    format: str = ""
    reblog_key: str = ""
    tags: List[str] = field(default_factory=list)
    bookmarklet: bool = False
    mobile: bool = False
    source_url: str = ""
    source_title: str = ""
    liked: bool = False
    state: str = ""
    note_count: int = 0
    summary: str = ""
    featured_timestamp: int = 0

    # Text posts
    title: str = ""
    body: str = ""

    # Photo posts
    caption: str = ""
    photos: List[Photo] = field(default_factory=list)

    # Quote posts
    text: str = ""
    source: str = ""

    # Link posts
    url: str = ""
    author: str = ""
    excerpt: str = ""
    publisher: str = ""
    description: str = ""

    # Chat posts
    dialogue: List[DialogueLine] = field(default_factory=list)

    # Audio posts
    audio_player: str = ""
    plays: int = 0
    album_art: str = ""
    artist: str = ""
    album: str = ""
    track_name: str = ""
    track_number: int = 0
    year: int = 0

    # Video posts
    video_player: List[VideoPlayer] = field(default_factory=list)

    # Answer posts
    asking_name: str = ""
    asking_url: str = ""
    question: str = ""
    answer: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Post":
        data = require_object(data, "post")
        post_type = as_str(data, "type")

        # "player" is HTML for audio posts and a list of embeds for video posts
        audio_player = as_str(data, "player") if post_type == "audio" else ""
        video_player = (
            as_list(data, "player", VideoPlayer.from_dict) if post_type == "video" else []
        )

        return cls(
            blog_name=as_str(data, "blog_name"),
            id=as_int(data, "id"),
            post_url=as_str(data, "post_url"),
            short_url=as_str(data, "short_url"),
            slug=as_str(data, "slug"),
            type=post_type,
            timestamp=as_int(data, "timestamp"),
            date=as_str(data, "date"),
            format=as_str(data, "format"),
            reblog_key=as_str(data, "reblog_key"),
            tags=as_str_list(data, "tags"),
            bookmarklet=as_bool(data, "bookmarklet"),
            mobile=as_bool(data, "mobile"),
            source_url=as_str(data, "source_url"),
            source_title=as_str(data, "source_title"),
            liked=as_bool(data, "liked"),
            state=as_str(data, "state"),
            note_count=as_int(data, "note_count"),
            summary=as_str(data, "summary"),
            featured_timestamp=as_int(data, "featured_timestamp"),
            title=as_str(data, "title"),
            body=as_str(data, "body"),
            caption=as_str(data, "caption"),
            photos=as_list(data, "photos", Photo.from_dict),
            text=as_str(data, "text"),
            source=as_str(data, "source"),
            url=as_str(data, "url"),
            author=as_str(data, "author"),
            excerpt=as_str(data, "excerpt"),
            publisher=as_str(data, "publisher"),
            description=as_str(data, "description"),
            dialogue=as_list(data, "dialogue", DialogueLine.from_dict),
            audio_player=audio_player,
            plays=as_int(data, "plays"),
            album_art=as_str(data, "album_art"),
            artist=as_str(data, "artist"),
            album=as_str(data, "album"),
            track_name=as_str(data, "track_name"),
            track_number=as_int(data, "track_number"),
            year=as_int(data, "year"),
            video_player=video_player,
            asking_name=as_str(data, "asking_name"),
            asking_url=as_str(data, "asking_url"),
            question=as_str(data, "question"),
            answer=as_str(data, "answer"),
        )


def decode_posts(data: Any) -> List[Post]:
    """Decode a bare JSON list of posts (the /tagged payload)."""
    if not isinstance(data, list):
        raise TypeError(f"posts: expected a JSON array, got {type(data).__name__}")
    return as_list({"posts": data}, "posts", Post.from_dict)
