"""Raw per-source user DTOs, shaped exactly as each upstream API returns them.

Every field is optional at the schema level: deciding which fields are
required is the matching adapter's job, so a DTO with missing data still
reaches the adapter and fails there with a descriptive message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class RawUserDto(BaseModel):
    """Common config for raw DTOs (unknown keys kept, never mutated)."""

    model_config = ConfigDict(extra="allow", frozen=True)


class InternalUserDto(RawUserDto):
    """User record from the internal company API."""

    userId: Optional[str] = None
    fullName: Optional[str] = None
    emailAddress: Optional[str] = None
    profileImage: Optional[str] = None
    registeredAt: Optional[str] = None


class GithubUserDto(RawUserDto):
    """User record from the GitHub users API."""

    id: Optional[int] = None
    login: Optional[str] = None
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    name: Optional[str] = None


class JsonplaceholderUserDto(RawUserDto):
    """User record from JSONPlaceholder (no avatar, no registration date)."""

    id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None


class TwitterUserDto(RawUserDto):
    """User record from the Twitter users API. Email is never exposed."""

    id_str: Optional[str] = None
    screen_name: Optional[str] = None
    name: Optional[str] = None
    profile_image_url_https: Optional[str] = None
    created_at: Optional[str] = None
    verified: Optional[bool] = None
    followers_count: Optional[int] = None
    description: Optional[str] = None
