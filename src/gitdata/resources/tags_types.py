"""Types and validation helpers for the tags resource.

Only annotated tag objects are modelled here; lightweight tags are plain
references and never reach these endpoints.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal, Mapping, TypedDict, get_args
from typing_extensions import ReadOnly

from ..errors import InvalidEnumValue


# --- Response Types --- #
class TaggerResponse(TypedDict, total=False):
    """Readonly identity block attached to a tag object."""
    name: ReadOnly[str]
    email: ReadOnly[str]
    date: ReadOnly[str]


class TagObjectResponse(TypedDict, total=False):
    """Readonly reference to the object a tag points at."""
    sha: ReadOnly[str]
    type: ReadOnly[TagType]
    url: ReadOnly[str]


class VerificationResponse(TypedDict, total=False):
    """Readonly signature verification block."""
    verified: ReadOnly[bool]
    reason: ReadOnly[str]
    signature: ReadOnly[str | None]
    payload: ReadOnly[str | None]


class TagResponse(TypedDict, total=False):
    """Readonly tag object dict returned by the git tags endpoints."""
    node_id: ReadOnly[str]
    sha: ReadOnly[str]
    url: ReadOnly[str]
    tag: ReadOnly[str]
    message: ReadOnly[str]
    tagger: ReadOnly[TaggerResponse]
    object: ReadOnly[TagObjectResponse]
    verification: ReadOnly[VerificationResponse]


# --- Request Types --- #
TagType = Literal["blob", "tree", "commit"]
TAG_TYPES: tuple[TagType, ...] = get_args(TagType)

TagParamName = Literal["tag", "message", "object", "type", "name", "email", "date"]
VALID_TAG_PARAM_NAMES: tuple[TagParamName, ...] = get_args(TagParamName)

# Allow-listed names that belong to the nested ``tagger`` block on the wire
TaggerParamName = Literal["name", "email", "date"]
TAGGER_PARAM_NAMES: tuple[TaggerParamName, ...] = get_args(TaggerParamName)


class TaggerRequest(TypedDict, total=False):
    name: str
    email: str
    date: str


class CreateTagRequest(TypedDict, total=False):
    """Validated body for ``POST /repos/{owner}/{repo}/git/tags``."""
    tag: str
    message: str
    object: str
    type: TagType
    tagger: TaggerRequest


def _normalize_tag_type(value: object) -> TagType:
    """Return ``value`` if it is a valid tag object type.

    Raises
    ------
    InvalidEnumValue
        If the value is not one of ``blob``, ``tree`` or ``commit``.
    """
    if isinstance(value, str) and value in TAG_TYPES:
        return value  # type: ignore[return-value]
    raise InvalidEnumValue("type", value, TAG_TYPES)


def _normalize_tagger_date(value: object) -> object:
    """Serialize dates to ISO 8601; anything else is passed through."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _normalize_tag_params(
    params: Mapping[str, Any],
) -> tuple[CreateTagRequest, list[str] | None]:
    """Filter creation params down to the allow-list and validate them.

    Parameters
    ----------
    params
        Params with already normalized (string, lower-case) keys. Tagger
        fields may be given flat (``name``/``email``/``date``) or nested
        under ``tagger``; flat values win.

    Returns
    -------
    tuple[CreateTagRequest, list[str] | None]
        The request body and the names of dropped keys (``None`` if none
        were dropped). ``None`` values count as not supplied, except for
        ``type``, which is validated whenever the key is present.

    Raises
    ------
    InvalidEnumValue
        If ``type`` is present (even as ``None``) and not a valid tag object type.
    """
    if "type" in params:
        _normalize_tag_type(params["type"])

    payload: dict[str, Any] = {}
    tagger: dict[str, Any] = {}
    dropped: list[str] = []

    nested = params.get("tagger")
    if isinstance(nested, Mapping):
        for key, value in nested.items():
            if key in TAGGER_PARAM_NAMES:
                if value is not None:
                    tagger[key] = value
            else:
                dropped.append(f"tagger.{key}")
    elif nested is not None:
        dropped.append("tagger")

    for key, value in params.items():
        if key == "tagger":
            continue
        if key not in VALID_TAG_PARAM_NAMES:
            dropped.append(key)
            continue
        if value is None:
            continue
        if key in TAGGER_PARAM_NAMES:
            tagger[key] = value
        else:
            payload[key] = value

    if "date" in tagger:
        tagger["date"] = _normalize_tagger_date(tagger["date"])
    if tagger:
        payload["tagger"] = tagger

    return CreateTagRequest(**payload), (dropped or None)  # type: ignore[typeddict-item]


__all__ = [
    "CreateTagRequest",
    "TAG_TYPES",
    "TAGGER_PARAM_NAMES",
    "TagObjectResponse",
    "TagResponse",
    "TagType",
    "TaggerRequest",
    "TaggerResponse",
    "VALID_TAG_PARAM_NAMES",
    "VerificationResponse",
]
