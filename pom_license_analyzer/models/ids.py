"""Literal and regular-expression matchers for group and artifact ids.

Ignore rules target groups and artifacts either by exact name or by a
regular expression. The two variants form a tagged union on ``kind`` and
all behavior lives in the module-level :func:`matches` and :func:`subsumes`
functions so both variants are handled in one place.
"""

from __future__ import annotations

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator


class LiteralId(BaseModel):
    """Matches one exact id."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["literal"] = "literal"
    value: str = Field(description="Exact id to match")

    def __str__(self) -> str:
        return self.value


class RegexId(BaseModel):
    """Matches ids against a regular expression (whole string)."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["regex"] = "regex"
    pattern: str = Field(description="Regular expression the full id must match")

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{value}': {e}") from e
        return value

    def __str__(self) -> str:
        return f"/{self.pattern}/"


Id = Annotated[Union[LiteralId, RegexId], Field(discriminator="kind")]


def literal_id(value: str) -> LiteralId:
    return LiteralId(value=value)


def regex_id(pattern: str) -> RegexId:
    return RegexId(pattern=pattern)


def matches(matcher: Id, value: str) -> bool:
    """Check whether a matcher accepts an id.

    Args:
        matcher: Literal or regex matcher.
        value: Group or artifact id to test.

    Returns:
        True if the literal equals the value, or the regex matches all of it.
    """
    if isinstance(matcher, LiteralId):
        return matcher.value == value
    if isinstance(matcher, RegexId):
        return re.fullmatch(matcher.pattern, value) is not None
    raise TypeError(f"Unsupported id matcher: {matcher!r}")


def subsumes(matcher: Id, other: Id) -> bool:
    """Check whether ``matcher`` accepts everything ``other`` accepts.

    This is a structural, best-effort comparison used only to warn about
    redundant ignore rules. Two regexes are only related when their pattern
    text is identical, so semantically equal patterns written differently
    are not detected.

    Args:
        matcher: The broader candidate.
        other: The narrower candidate.

    Returns:
        True if ``other`` is known to be covered by ``matcher``.
    """
    if isinstance(matcher, LiteralId):
        if isinstance(other, LiteralId):
            return matcher.value == other.value
        if isinstance(other, RegexId):
            return re.escape(matcher.value) == other.pattern
    elif isinstance(matcher, RegexId):
        if isinstance(other, LiteralId):
            return re.fullmatch(matcher.pattern, other.value) is not None
        if isinstance(other, RegexId):
            return matcher.pattern == other.pattern
    raise TypeError(f"Unsupported id matchers: {matcher!r}, {other!r}")
