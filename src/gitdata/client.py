"""Core GitHub client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .context import RepoContext
from .resources.git_data import GitData
from .resources.tags import Tags

DEFAULT_ENDPOINT = os.environ.get("GITHUB_API_URL", "https://api.github.com")
DEFAULT_TOKEN = os.environ.get("GITHUB_TOKEN") or None
DEFAULT_OWNER = os.environ.get("GITHUB_OWNER") or None
DEFAULT_REPO = os.environ.get("GITHUB_REPO") or None
API_VERSION = "2022-11-28"
USER_AGENT = "gitdata-python"


class GitHub:
    """Resource-grouped client for the GitHub REST API."""

    git_data: GitData
    tags: Tags

    def __init__(
        self,
        *,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        login: Optional[str] = None,
        password: Optional[str] = None,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        """Create a GitHub client.

        Parameters
        ----------
        endpoint
            Base API URL, e.g. ``https://github.example.com/api/v3`` for GitHub Enterprise.
        token
            OAuth or personal access token. Takes precedence over ``login``/``password``.
        login
            Username for basic auth.
        password
            Password for basic auth.
        owner
            Default repository owner for calls that omit it.
        repo
            Default repository name for calls that omit it.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        user_agent
            Value for the ``User-Agent`` header.
        """
        self.endpoint = (endpoint or DEFAULT_ENDPOINT).rstrip("/")
        self.token = token or DEFAULT_TOKEN
        self.login = login
        self.password = password
        self.default_timeout = default_timeout
        self.user_agent = user_agent or USER_AGENT
        self.context = RepoContext(owner or DEFAULT_OWNER, repo or DEFAULT_REPO)
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.git_data: GitData = GitData(self)
        self.tags: Tags = self.git_data.tags

    @property
    def owner(self) -> Optional[str]:
        return self.context.owner

    @property
    def repo(self) -> Optional[str]:
        return self.context.repo

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _auth(self) -> Optional[tuple[str, str]]:
        if self.token or not (self.login and self.password):
            return None
        return (self.login, self.password)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the GitHub API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path relative to the API endpoint.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response body is empty.

        Raises
        ------
        requests.RequestException
            Connection and HTTP status failures, re-raised unchanged after logging.
        ValueError
            If a non-empty response body is not JSON.
        """
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.endpoint}{path}"

        requester = self._session or requests
        self._logger.debug("%s %s", method, url)
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(),
                auth=self._auth(),
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = exc.response.json() if exc.response is not None else None
                if isinstance(error_body, dict) and "message" in error_body:
                    error_msg = f"{exc}\nServer message: {error_body['message']}"
            except ValueError:
                pass  # Response wasn't JSON
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            raise
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            raise

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            raise
