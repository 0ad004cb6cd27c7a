"""Unified user model shared by every source."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AVATAR = "default-avatar.svg"


class UserSource(str, Enum):
    """Closed set of upstream sources a unified user can come from."""

    INTERNAL = "internal"
    GITHUB = "github"
    JSONPLACEHOLDER = "jsonplaceholder"
    TWITTER = "twitter"


def source_display_name(source: UserSource) -> str:
    """Human readable source name used in error reports."""
    if source is UserSource.INTERNAL:
        return "Internal"
    if source is UserSource.GITHUB:
        return "GitHub"
    if source is UserSource.JSONPLACEHOLDER:
        return "JSONPlaceholder"
    if source is UserSource.TWITTER:
        return "Twitter"
    raise ValueError(f"Unsupported source: {source}")


def source_badge_style(source: UserSource) -> str:
    """CSS classes for the source badge shown next to a user."""
    if source is UserSource.GITHUB:
        return "bg-purple-100 text-purple-800"
    if source is UserSource.INTERNAL:
        return "bg-blue-100 text-blue-800"
    if source is UserSource.JSONPLACEHOLDER:
        return "bg-green-100 text-green-800"
    if source is UserSource.TWITTER:
        return "bg-sky-100 text-sky-800"
    raise ValueError(f"Unsupported source: {source}")


class UnifiedUser(BaseModel):
    """Unified user schema.

    ``joined_date`` has three states: a datetime, an explicit ``None`` (the
    source has the concept but no usable value) and unset (the source never
    provides it). Use ``has_joined_date`` to tell the last two apart.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    avatar: str = Field(min_length=1)
    joined_date: Optional[datetime] = None
    source: UserSource

    @property
    def has_joined_date(self) -> bool:
        return "joined_date" in self.model_fields_set


class AdaptationError(BaseModel):
    """A single record that could not be adapted."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: UserSource
    display_name: str
    index: int
    reason: str
    message: str
    dto: Any = Field(default=None, repr=False)

    def __str__(self) -> str:
        return self.message


class AggregationResult(BaseModel):
    """Outcome of one aggregation run."""

    model_config = ConfigDict(frozen=True)

    users: Tuple[UnifiedUser, ...] = ()
    errors: Tuple[AdaptationError, ...] = ()
    started_at: datetime
    ended_at: datetime

    @property
    def success_count(self) -> int:
        return len(self.users)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def error_messages(self) -> list[str]:
        return [err.message for err in self.errors]
