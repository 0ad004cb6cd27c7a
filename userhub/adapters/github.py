"""Adapter for users coming from the GitHub users API."""

from __future__ import annotations

from typing import Any, Dict, Optional

from userhub.adapters.base import BaseUserAdapter
from userhub.adapters.primitives import (
    get_value_or_default,
    is_valid_email,
    normalize_email,
    require_field,
    sanitize_text,
)
from userhub.schemas.normalized import DEFAULT_AVATAR, UnifiedUser, UserSource
from userhub.schemas.raw import GithubUserDto


class GithubUserAdapter(BaseUserAdapter[GithubUserDto]):
    """Maps GithubUserDto to UnifiedUser.

    Only ``id`` and ``login`` are required; name and email fall back to
    values derived from the login.
    """

    name = "GithubUserAdapter"
    source = UserSource.GITHUB
    dto_model = GithubUserDto

    def _build(self, dto: GithubUserDto) -> UnifiedUser:
        require_field(dto.id, "id", self.name)
        require_field(dto.login, "login", self.name)

        fields: Dict[str, Any] = {
            "id": self._check_positive(dto.id, "id", dto.id),
            "name": self._resolve_name(dto.name, dto.login),
            "email": self._resolve_email(dto.email, dto.login),
            "avatar": get_value_or_default(dto.avatar_url, DEFAULT_AVATAR),
            "source": self.source,
        }
        # joined_date stays unset when GitHub did not send created_at
        if dto.created_at:
            fields["joined_date"] = self._resolve_joined_date(dto.created_at)
        return UnifiedUser(**fields)

    @staticmethod
    def _resolve_name(name: Optional[str], login: str) -> str:
        sanitized = sanitize_text(name or "", 100)
        return sanitized if sanitized != "" else login

    @staticmethod
    def _resolve_email(email: Optional[str], login: str) -> str:
        if email and is_valid_email(email):
            return normalize_email(email)
        return f"{login.lower()}@github.com"


github_user_adapter = GithubUserAdapter()
