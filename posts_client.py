"""Posts API client.

A thin wrapper around the REST API served by ``posts_api``.  The client
uses the ``requests`` library and exposes one method per operation:

* :meth:`PostsClient.create_post` – create a post.
* :meth:`PostsClient.list_posts` – return all posts.
* :meth:`PostsClient.get_post` – fetch one post, ``None`` if missing.
* :meth:`PostsClient.update_post` – replace title and content.
* :meth:`PostsClient.delete_post` – delete a post.

Posts are returned as the decoded JSON dictionaries sent by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from posts_api.app.core.exceptions import PostNotFoundError


logger = logging.getLogger(__name__)


class PostsClient:
    """Client for interacting with the Posts API."""

    def __init__(
        self,
        base_url: str,
        *,
        prefix: str = "/api/v1/posts",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            prefix: Path under which the posts routes are mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _url(self, post_id: Optional[int] = None) -> str:
        if post_id is None:
            return f"{self.base_url}{self.prefix}/"
        return f"{self.base_url}{self.prefix}/{post_id}"

    def _request(self, method: str, url: str, *, json_body: Any | None = None) -> requests.Response:
        """Perform an HTTP request and return the response.

        404 responses are returned to the caller untouched; any other
        error status raises :class:`requests.HTTPError` after being
        logged.
        """
        logger.debug("Sending %s request to %s", method, url)
        response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        if response.status_code == 404:
            return response
        try:
            response.raise_for_status()
        except requests.HTTPError:
            logger.error("API request %s %s failed (%s): %s", method, url, response.status_code, response.text)
            raise
        return response

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def create_post(self, title: str, content: str) -> Dict[str, Any]:
        response = self._request("POST", self._url(), json_body={"title": title, "content": content})
        return response.json()

    def list_posts(self) -> List[Dict[str, Any]]:
        response = self._request("GET", self._url())
        return response.json()

    def get_post(self, post_id: int) -> Optional[Dict[str, Any]]:
        """Return the post, or ``None`` when the server answers 404."""
        response = self._request("GET", self._url(post_id))
        if response.status_code == 404:
            return None
        return response.json()

    def update_post(self, post_id: int, title: str, content: str) -> Dict[str, Any]:
        """Replace title and content of a post.

        Raises :class:`PostNotFoundError` when the post does not exist.
        """
        response = self._request("PUT", self._url(post_id), json_body={"title": title, "content": content})
        if response.status_code == 404:
            raise PostNotFoundError(post_id)
        return response.json()

    def delete_post(self, post_id: int) -> None:
        self._request("DELETE", self._url(post_id))
