"""Reddit objects shared by the API services: users, posts, timestamps and listing options."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping


def parse_timestamp(value: Any) -> datetime | None:
    """Turn a Reddit epoch timestamp into an aware UTC datetime.

    Reddit sends ``false`` or ``null`` where there is no time (for example an
    unedited post); those become ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = float(value)
    return datetime.fromtimestamp(value, tz=timezone.utc)


@dataclass
class User:
    """A Reddit user account."""

    id: str = ""
    name: str = ""
    created: datetime | None = None
    post_karma: int = 0
    comment_karma: int = 0
    is_friend: bool = False
    is_employee: bool = False
    has_verified_email: bool = False
    nsfw: bool = False
    is_suspended: bool = False


@dataclass
class Post:
    """A submission in a subreddit."""

    id: str = ""
    full_id: str = ""
    created: datetime | None = None
    edited: datetime | None = None
    permalink: str = ""
    url: str = ""
    title: str = ""
    body: str = ""
    likes: bool | None = None
    score: int = 0
    upvote_ratio: float = 0.0
    number_of_comments: int = 0
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    subreddit_subscribers: int = 0
    author: str = ""
    author_id: str = ""
    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False


@dataclass
class ListOptions:
    """Paging options for listing endpoints."""

    limit: int = 0
    after: str = ""
    before: str = ""

    def to_params(self) -> dict[str, str]:
        """Query parameters for the options that are set."""
        params: dict[str, str] = {}
        if self.limit:
            params["limit"] = str(self.limit)
        if self.after:
            params["after"] = self.after
        if self.before:
            params["before"] = self.before
        return params


def _thing_data(thing: Any, kind: str) -> Mapping[str, Any] | None:
    if not isinstance(thing, Mapping) or thing.get("kind") != kind:
        return None
    data = thing.get("data")
    return data if isinstance(data, Mapping) else {}


def parse_user(thing: Any) -> User | None:
    """Build a User from a ``t2`` thing, or return None for anything else."""
    data = _thing_data(thing, "t2")
    if data is None:
        return None
    return User(
        id=data.get("id") or "",
        name=data.get("name") or "",
        created=parse_timestamp(data.get("created_utc")),
        post_karma=data.get("link_karma") or 0,
        comment_karma=data.get("comment_karma") or 0,
        is_friend=bool(data.get("is_friend")),
        is_employee=bool(data.get("is_employee")),
        has_verified_email=bool(data.get("has_verified_email")),
        nsfw=bool(data.get("over_18")),
        is_suspended=bool(data.get("is_suspended")),
    )


def parse_post(thing: Any) -> Post | None:
    """Build a Post from a ``t3`` thing, or return None for anything else."""
    data = _thing_data(thing, "t3")
    if data is None:
        return None
    return Post(
        id=data.get("id") or "",
        full_id=data.get("name") or "",
        created=parse_timestamp(data.get("created_utc")),
        edited=parse_timestamp(data.get("edited")),
        permalink=data.get("permalink") or "",
        url=data.get("url") or "",
        title=data.get("title") or "",
        body=data.get("selftext") or "",
        likes=data.get("likes"),
        score=data.get("score") or 0,
        upvote_ratio=float(data.get("upvote_ratio") or 0),
        number_of_comments=data.get("num_comments") or 0,
        subreddit_name=data.get("subreddit") or "",
        subreddit_name_prefixed=data.get("subreddit_name_prefixed") or "",
        subreddit_id=data.get("subreddit_id") or "",
        subreddit_subscribers=data.get("subreddit_subscribers") or 0,
        author=data.get("author") or "",
        author_id=data.get("author_fullname") or "",
        spoiler=bool(data.get("spoiler")),
        locked=bool(data.get("locked")),
        nsfw=bool(data.get("over_18")),
        is_self_post=bool(data.get("is_self")),
        saved=bool(data.get("saved")),
        stickied=bool(data.get("stickied")),
    )