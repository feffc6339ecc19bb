"""Resource module exports."""

from .git_data import GitData
from .tags import Tags

__all__ = [
    "GitData",
    "Tags",
]
