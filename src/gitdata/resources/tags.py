"""Annotated tag object resource wrapper."""

from __future__ import annotations

from typing import Any, Mapping, Optional, cast

from requests.utils import quote

from .base import Resource
from .tags_types import TagResponse, _normalize_tag_params
from ..errors import MissingParameter
from ..utils import is_blank, normalize_keys


def _repo_path(owner: str, repo: str, *segments: str) -> str:
    """Build a repository path with every segment percent-encoded."""
    parts = ["repos", owner, repo, *segments]
    return "/" + "/".join(quote(str(part), safe="") for part in parts)


class Tags(Resource):
    """Tag object operations.

    These endpoints only deal with tag objects, so only annotated tags.
    A lightweight tag is just a reference and is not handled here.
    """

    def get(
        self,
        owner: Optional[str],
        repo: Optional[str],
        sha: str,
        params: Optional[Mapping[Any, Any]] = None,
        *,
        timeout: Optional[int] = None,
    ) -> TagResponse | None:
        """Fetch a tag object by SHA.

        Parameters
        ----------
        owner
            Repository owner, or ``None`` to use the client's current owner.
        repo
            Repository name, or ``None`` to use the client's current repository.
        sha
            SHA of the tag object.
        params
            Extra query parameters; keys are normalized before sending.
        timeout
            Request timeout in seconds.

        Returns
        -------
        TagResponse or None
            Tag object dict, or ``None`` if the response body was empty.

        Raises
        ------
        MissingParameter
            If owner/repo cannot be resolved or ``sha`` is blank. Raised
            before any request is sent.
        """
        owner, repo = self._context.resolve(owner, repo)
        if is_blank(sha):
            raise MissingParameter("sha")
        query = normalize_keys(params)

        response = self._get(
            _repo_path(owner, repo, "git", "tags", str(sha).strip()),
            params=query or None,
            timeout=timeout,
        )
        if not isinstance(response, dict):
            if response is not None:
                self._logger.warning("Tag response was not an object: %s", response)
            return None
        return cast(TagResponse, response)

    def create(
        self,
        owner: Optional[str],
        repo: Optional[str],
        params: Optional[Mapping[Any, Any]] = None,
        *,
        timeout: Optional[int] = None,
        **fields: Any,
    ) -> TagResponse | None:
        """Create a tag object.

        Creating a tag object does not create the ``refs/tags/<tag>`` reference
        that makes a tag in Git. For an annotated tag, call this first and then
        create the reference. A lightweight tag only needs the reference.

        Parameters
        ----------
        owner
            Repository owner, or ``None`` to use the client's current owner.
        repo
            Repository name, or ``None`` to use the client's current repository.
        params
            Tag fields. Recognised keys:

            - ``tag``: tag name, usually a version like ``"v0.0.1"``
            - ``message``: tag message
            - ``object``: SHA of the git object being tagged
            - ``type``: type of the tagged object; ``"commit"``, ``"tree"`` or ``"blob"``
            - ``name``, ``email``, ``date``: tagger identity and timestamp, also
              accepted as a nested ``tagger`` mapping. ``date`` may be a datetime.

            Any other key is dropped.
        timeout
            Request timeout in seconds.
        **fields
            Tag fields given as keywords; these override ``params``.

        Returns
        -------
        TagResponse or None
            Created tag object dict, or ``None`` if the response body was empty.

        Raises
        ------
        MissingParameter
            If owner/repo cannot be resolved.
        InvalidEnumValue
            If ``type`` is not a valid object type.

        Examples
        --------
        >>> github.git_data.tags.create(
        ...     "octocat", "Hello-World",
        ...     tag="v0.0.1",
        ...     message="initial version\\n",
        ...     type="commit",
        ...     object="c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
        ...     tagger={"name": "Monalisa Octocat", "email": "octocat@github.com"},
        ... )  # doctest: +SKIP
        """
        owner, repo = self._context.resolve(owner, repo)
        merged = normalize_keys(params)
        merged.update(normalize_keys(fields))

        payload, dropped = _normalize_tag_params(merged)
        if dropped:
            self._logger.debug("Dropping unsupported tag params: %s", ", ".join(dropped))

        response = self._post(
            _repo_path(owner, repo, "git", "tags"),
            json=cast(dict[str, Any], payload),
            timeout=timeout,
        )
        if not isinstance(response, dict):
            if response is not None:
                self._logger.warning("Create tag response was not an object: %s", response)
            return None
        return cast(TagResponse, response)


__all__ = ["Tags"]
