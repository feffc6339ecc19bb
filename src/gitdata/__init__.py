"""Public package surface for the gitdata Python client."""

from .client import DEFAULT_ENDPOINT, GitHub
from .context import RepoContext
from .errors import GitDataError, InvalidEnumValue, MissingParameter
from .resources.tags_types import TAG_TYPES, VALID_TAG_PARAM_NAMES, TagResponse, TagType
from .utils import normalize_keys


__all__ = [
    "DEFAULT_ENDPOINT",
    "GitDataError",
    "GitHub",
    "InvalidEnumValue",
    "MissingParameter",
    "RepoContext",
    "TAG_TYPES",
    "TagResponse",
    "TagType",
    "VALID_TAG_PARAM_NAMES",
    "normalize_keys",
]
