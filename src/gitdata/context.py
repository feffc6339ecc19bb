"""Repository coordinates shared by every resource of a client."""

from __future__ import annotations

from typing import Optional

from .errors import MissingParameter
from .utils import is_blank


class RepoContext:
    """Holds the current owner/repository defaults for a client.

    Values passed to :meth:`update` or :meth:`resolve` replace the stored ones
    (last write wins); blank values leave them untouched.
    """

    def __init__(self, owner: Optional[str] = None, repo: Optional[str] = None) -> None:
        self.owner: Optional[str] = None
        self.repo: Optional[str] = None
        self.update(owner, repo)

    def __repr__(self) -> str:
        return f"RepoContext(owner={self.owner!r}, repo={self.repo!r})"

    def has_owner(self) -> bool:
        return not is_blank(self.owner)

    def has_repo(self) -> bool:
        return not is_blank(self.repo)

    def is_set(self) -> bool:
        """True when both owner and repository are known."""
        return self.has_owner() and self.has_repo()

    def update(self, owner: Optional[str] = None, repo: Optional[str] = None) -> None:
        """Store whichever of ``owner``/``repo`` are non-blank."""
        if not is_blank(owner):
            self.owner = str(owner).strip()
        if not is_blank(repo):
            self.repo = str(repo).strip()

    def resolve(self, owner: Optional[str] = None, repo: Optional[str] = None) -> tuple[str, str]:
        """Merge explicit coordinates into the context and return both.

        Parameters
        ----------
        owner
            Repository owner (user or organization). Falls back to the stored one.
        repo
            Repository name. Falls back to the stored one.

        Returns
        -------
        tuple[str, str]
            The resolved ``(owner, repo)`` pair.

        Raises
        ------
        MissingParameter
            If either coordinate is still unknown after merging.
        """
        self.update(owner, repo)
        missing = [
            name
            for name, present in (("owner", self.has_owner()), ("repo", self.has_repo()))
            if not present
        ]
        if missing:
            raise MissingParameter(*missing)
        return str(self.owner), str(self.repo)


__all__ = ["RepoContext"]
