"""Shared helpers for the gitdata client."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional


def _normalize_key(key: object) -> str:
    if isinstance(key, Enum):
        key = key.value
    return str(key).strip().lower().replace("-", "_")


def normalize_keys(params: Optional[Mapping[Any, Any]]) -> dict[str, Any]:
    """Return a copy of ``params`` with keys converted to canonical strings.

    Enum keys use their value; all keys are stripped, lower-cased and have
    dashes replaced by underscores. Nested mappings are normalized too.
    """
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise TypeError(f"Params must be a mapping: {type(params)}")

    normalized: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, Mapping):
            value = normalize_keys(value)
        normalized[_normalize_key(key)] = value
    return normalized


def is_blank(value: object) -> bool:
    """Return True for ``None`` and strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
