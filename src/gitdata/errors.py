"""Exceptions raised by gitdata before any request is sent.

Transport failures are not wrapped: ``requests`` exceptions reach the caller
unchanged.
"""

from __future__ import annotations

from typing import Sequence


class GitDataError(Exception):
    """Base for all local validation errors."""


class MissingParameter(GitDataError, ValueError):
    """A required identifier (owner, repo, or object SHA) was not provided.

    The ``.names`` attribute lists the missing parameter names.
    """

    def __init__(self, *names: str) -> None:
        self.names = tuple(names)
        super().__init__(f"Missing required parameter(s): {', '.join(self.names)}")


class InvalidEnumValue(GitDataError, ValueError):
    """A parameter value is not one of the values the API accepts."""

    def __init__(self, field: str, value: object, allowed: Sequence[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value for {field!r}: {value!r}. Must be one of: {', '.join(self.allowed)}"
        )


__all__ = ["GitDataError", "InvalidEnumValue", "MissingParameter"]
