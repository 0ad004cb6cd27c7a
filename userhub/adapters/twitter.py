"""Adapter for users coming from the Twitter users API."""

from __future__ import annotations

from typing import Optional

from userhub.adapters.base import BaseUserAdapter
from userhub.adapters.primitives import require_field, sanitize_text
from userhub.schemas.normalized import DEFAULT_AVATAR, UnifiedUser, UserSource
from userhub.schemas.raw import TwitterUserDto


class TwitterUserAdapter(BaseUserAdapter[TwitterUserDto]):
    """Maps TwitterUserDto to UnifiedUser.

    Twitter never exposes emails, so one is synthesized from the screen name.
    """

    name = "TwitterUserAdapter"
    source = UserSource.TWITTER
    dto_model = TwitterUserDto

    def _build(self, dto: TwitterUserDto) -> UnifiedUser:
        require_field(dto.id_str, "id_str", self.name)
        require_field(dto.screen_name, "screen_name", self.name)

        return UnifiedUser(
            id=self._parse_twitter_id(dto.id_str),
            name=self._resolve_name(dto.name, dto.screen_name),
            email=f"{dto.screen_name.lower()}@twitter.com",
            avatar=self._resolve_avatar(dto.profile_image_url_https),
            joined_date=self._resolve_joined_date(dto.created_at),
            source=self.source,
        )

    def _parse_twitter_id(self, id_str: str) -> int:
        return self._parse_id(id_str, "id_str")

    @staticmethod
    def _resolve_name(name: Optional[str], screen_name: str) -> str:
        sanitized = sanitize_text(name, 100)
        return sanitized if sanitized != "" else f"@{screen_name}"

    @staticmethod
    def _resolve_avatar(profile_image_url: Optional[str]) -> str:
        if not profile_image_url or profile_image_url.strip() == "":
            return DEFAULT_AVATAR
        # "_normal" is the 48x48 thumbnail; "_400x400" is the full size image
        return profile_image_url.replace("_normal", "_400x400")


twitter_user_adapter = TwitterUserAdapter()
