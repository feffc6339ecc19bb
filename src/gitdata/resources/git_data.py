"""Git Data resource group."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Resource
from .tags import Tags

if TYPE_CHECKING:  # pragma: no cover
    from ..client import GitHub


class GitData(Resource):
    """Low-level access to git objects stored in a repository."""

    tags: Tags

    def __init__(self, client: "GitHub") -> None:
        super().__init__(client)
        self.tags = Tags(client)
