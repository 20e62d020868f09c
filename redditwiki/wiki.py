"""The wiki section of the Reddit API."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Mapping

from redditwiki.client import Client
from redditwiki.models import ListOptions, Post, User, parse_post, parse_timestamp, parse_user

_REVISION_ID_PREFIX = "WikiRevision_"


@dataclass
class WikiPage:
    """A wiki page in a subreddit."""

    content: str = ""
    reason: str = ""
    may_revise: bool = False
    revision_id: str = ""
    revision_date: datetime | None = None
    revision_by: User | None = None


@dataclass
class WikiPageEditRequest:
    """A request to edit a wiki page. The reason is optional, up to 256 characters."""

    subreddit: str
    page: str
    content: str
    reason: str = ""

    def to_form(self) -> dict[str, str]:
        form = {"page": self.page, "content": self.content}
        if self.reason:
            form["reason"] = self.reason
        return form


class WikiPagePermissionLevel(IntEnum):
    """Who can edit a specific wiki page."""

    SUBREDDIT_WIKI_PERMISSIONS = 0
    APPROVED_CONTRIBUTORS_ONLY = 1
    MODERATORS_ONLY = 2


@dataclass
class WikiPageSettings:
    """The settings of a wiki page."""

    permission_level: WikiPagePermissionLevel = WikiPagePermissionLevel.SUBREDDIT_WIKI_PERMISSIONS
    listed: bool = False
    editors: list[User] = field(default_factory=list)


@dataclass
class WikiPageSettingsUpdateRequest:
    """A request to update the visibility and permissions of a wiki page.

    The permission level is always sent; the API fails without it.
    """

    permission_level: WikiPagePermissionLevel
    listed: bool | None = None

    def to_form(self) -> dict[str, str]:
        form = {"permlevel": str(int(self.permission_level))}
        if self.listed is not None:
            form["listed"] = "true" if self.listed else "false"
        return form


@dataclass
class WikiPageRevision:
    """A revision of a wiki page."""

    id: str = ""
    page: str = ""
    created: datetime | None = None
    reason: str = ""
    hidden: bool = False
    author: User | None = None


def parse_wiki_page(data: Mapping[str, Any]) -> WikiPage:
    """Build a WikiPage from the data of a ``wikipage`` thing."""
    return WikiPage(
        content=data.get("content_md") or "",
        reason=data.get("reason") or "",
        may_revise=bool(data.get("may_revise")),
        revision_id=data.get("revision_id") or "",
        revision_date=parse_timestamp(data.get("revision_date")),
        revision_by=parse_user(data.get("revision_by")),
    )


def parse_wiki_page_settings(data: Mapping[str, Any]) -> WikiPageSettings:
    """Build WikiPageSettings from the data of a ``wikipagesettings`` thing."""
    editors = [user for user in map(parse_user, data.get("editors") or []) if user is not None]
    return WikiPageSettings(
        permission_level=WikiPagePermissionLevel(data.get("permlevel") or 0),
        listed=bool(data.get("listed")),
        editors=editors,
    )


def parse_wiki_page_revision(data: Mapping[str, Any]) -> WikiPageRevision:
    """Build a WikiPageRevision from one entry of a revisions listing."""
    return WikiPageRevision(
        id=data.get("id") or "",
        page=data.get("page") or "",
        created=parse_timestamp(data.get("timestamp")),
        reason=data.get("reason") or "",
        hidden=bool(data.get("revision_hidden")),
        author=parse_user(data.get("author")),
    )


def _data_of(thing: Mapping[str, Any] | None, kind: str) -> Any:
    if not isinstance(thing, Mapping) or thing.get("kind") != kind:
        return None
    return thing.get("data")


def _with_revision_prefix(value: str) -> str:
    if value and not value.startswith(_REVISION_ID_PREFIX):
        return _REVISION_ID_PREFIX + value
    return value


class WikiService:
    """Wiki pages, their settings, revisions and editors."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def page(self, subreddit: str, page: str) -> WikiPage | None:
        """Get the current version of a wiki page."""
        return self.page_revision(subreddit, page, "")

    def page_revision(self, subreddit: str, page: str, revision_id: str) -> WikiPage | None:
        """Get a wiki page as it was at a revision; an empty id means the latest."""
        params = {"v": revision_id} if revision_id else None
        data = _data_of(self.client.get_thing(f"r/{subreddit}/wiki/{page}", params), "wikipage")
        return parse_wiki_page(data) if isinstance(data, Mapping) else None

    def pages(self, subreddit: str) -> list[str]:
        """List the wiki pages of a subreddit (403 if the wiki is disabled)."""
        data = _data_of(self.client.get_thing(f"r/{subreddit}/wiki/pages"), "wikipagelisting")
        return list(data) if isinstance(data, list) else []

    def edit(self, request: WikiPageEditRequest | None) -> None:
        """Edit a wiki page."""
        if request is None:
            raise ValueError("edit request cannot be None")
        self.client.request("POST", f"r/{request.subreddit}/api/wiki/edit", form=request.to_form())

    def revert(self, subreddit: str, page: str, revision_id: str) -> None:
        """Revert a wiki page to a revision."""
        form = {"page": page, "revision": revision_id}
        self.client.request("POST", f"r/{subreddit}/api/wiki/revert", form=form)

    def settings(self, subreddit: str, page: str) -> WikiPageSettings | None:
        """Get the settings of a wiki page."""
        thing = self.client.get_thing(f"r/{subreddit}/wiki/settings/{page}")
        data = _data_of(thing, "wikipagesettings")
        return parse_wiki_page_settings(data) if isinstance(data, Mapping) else None

    def update_settings(
        self, subreddit: str, page: str, request: WikiPageSettingsUpdateRequest | None
    ) -> WikiPageSettings | None:
        """Update the settings of a wiki page and return the new settings."""
        if request is None:
            raise ValueError("settings update request cannot be None")
        thing = self.client.request(
            "POST", f"r/{subreddit}/wiki/settings/{page}", form=request.to_form()
        )
        data = _data_of(thing, "wikipagesettings")
        return parse_wiki_page_settings(data) if isinstance(data, Mapping) else None

    def discussions(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[Post]:
        """List the posts that discuss a wiki page."""
        listing = self.client.get_listing(f"r/{subreddit}/wiki/discussions/{page}", options)
        posts = (parse_post(child) for child in listing.get("children") or [])
        return [post for post in posts if post is not None]

    def toggle_visibility(self, subreddit: str, page: str, revision_id: str) -> bool:
        """Toggle the public visibility of a revision; returns whether it is now hidden."""
        form = {"page": page, "revision": revision_id}
        result = self.client.request("POST", f"r/{subreddit}/api/wiki/hide", form=form)
        return bool(result.get("status")) if isinstance(result, Mapping) else False

    def _revisions(
        self, subreddit: str, page: str, options: ListOptions | None
    ) -> list[WikiPageRevision]:
        path = f"r/{subreddit}/wiki/revisions"
        if page:
            path += f"/{page}"
        params = None
        if options is not None:
            params = dataclasses.replace(
                options,
                after=_with_revision_prefix(options.after),
                before=_with_revision_prefix(options.before),
            ).to_params()
        root = self.client.request("GET", path, params=params)
        data = root.get("data") if isinstance(root, Mapping) else None
        children = data.get("children") if isinstance(data, Mapping) else None
        return [parse_wiki_page_revision(child) for child in children or []]

    def revisions(self, subreddit: str, options: ListOptions | None = None) -> list[WikiPageRevision]:
        """List revisions of all pages in the wiki."""
        return self._revisions(subreddit, "", options)

    def revisions_page(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[WikiPageRevision]:
        """List revisions of one page; an empty page name means all pages."""
        return self._revisions(subreddit, page, options)

    def allow(self, subreddit: str, page: str, username: str) -> None:
        """Allow a user to edit a wiki page."""
        form = {"page": page, "username": username}
        self.client.request("POST", f"r/{subreddit}/api/wiki/alloweditor/add", form=form)

    def deny(self, subreddit: str, page: str, username: str) -> None:
        """Take away a user's ability to edit a wiki page."""
        form = {"page": page, "username": username}
        self.client.request("POST", f"r/{subreddit}/api/wiki/alloweditor/del", form=form)