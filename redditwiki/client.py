"""A small HTTP client for the Reddit JSON API."""

from __future__ import annotations

from typing import Any, Mapping

import requests

from redditwiki.models import ListOptions

DEFAULT_USER_AGENT = "redditwiki"


class ResponseError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or response.reason or ""


class Client:
    """Sends requests to the API rooted at ``base_url``."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.session = session if session is not None else requests.Session()
        self.user_agent = user_agent

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        form: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None if it is empty."""
        response = self.session.request(
            method,
            self.base_url + path.lstrip("/"),
            params=dict(params) if params else None,
            data=dict(form) if form else None,
            headers={"User-Agent": self.user_agent},
        )
        if not response.ok:
            raise ResponseError(response.status_code, _error_message(response))
        if not response.content.strip():
            return None
        return response.json()

    def get_thing(self, path: str, params: Mapping[str, str] | None = None) -> dict[str, Any]:
        """GET a single thing: a JSON object with ``kind`` and ``data``."""
        result = self.request("GET", path, params=params)
        if not isinstance(result, dict):
            raise ValueError(f"expected a JSON object from {path!r}")
        return result

    def get_listing(self, path: str, options: ListOptions | None = None) -> dict[str, Any]:
        """GET a listing and return its data (``children``, ``after``, ...)."""
        params = options.to_params() if options is not None else None
        thing = self.get_thing(path, params)
        if thing.get("kind") != "Listing" or not isinstance(thing.get("data"), dict):
            return {}
        return thing["data"]