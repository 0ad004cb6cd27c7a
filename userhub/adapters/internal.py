"""Adapter for users coming from the internal company API."""

from __future__ import annotations

from userhub.adapters.base import BaseUserAdapter
from userhub.adapters.primitives import (
    get_value_or_default,
    is_valid_email,
    normalize_email,
    require_field,
    sanitize_text,
)
from userhub.core.errors import ValidationError
from userhub.schemas.normalized import DEFAULT_AVATAR, UnifiedUser, UserSource
from userhub.schemas.raw import InternalUserDto


class InternalUserAdapter(BaseUserAdapter[InternalUserDto]):
    """Maps InternalUserDto to UnifiedUser.

    The internal API is the only source that stores string ids, requires a
    valid email and clamps registration dates that lie in the future.
    """

    name = "InternalUserAdapter"
    source = UserSource.INTERNAL
    dto_model = InternalUserDto

    clamp_future_dates = True
    require_positive_id = True

    def _build(self, dto: InternalUserDto) -> UnifiedUser:
        require_field(dto.userId, "userId", self.name)
        require_field(dto.fullName, "fullName", self.name)
        require_field(dto.emailAddress, "emailAddress", self.name)

        return UnifiedUser(
            id=self._parse_user_id(dto.userId),
            name=self._resolve_name(dto.fullName),
            email=self._resolve_email(dto.emailAddress),
            avatar=get_value_or_default(dto.profileImage, DEFAULT_AVATAR),
            joined_date=self._resolve_joined_date(dto.registeredAt),
            source=self.source,
        )

    def _parse_user_id(self, user_id: str) -> int:
        return self._parse_id(user_id, "userId")

    def _resolve_name(self, full_name: str) -> str:
        sanitized = sanitize_text(full_name, 150)
        if sanitized == "":
            raise ValidationError(
                f"[{self.name}] fullName cannot be empty after sanitization: {full_name}",
                adapter_name=self.name,
                field_name="fullName",
            )
        return sanitized

    def _resolve_email(self, email_address: str) -> str:
        if not is_valid_email(email_address):
            raise ValidationError(
                f"[{self.name}] Invalid email format: {email_address}",
                adapter_name=self.name,
                field_name="emailAddress",
            )
        return normalize_email(email_address)


internal_user_adapter = InternalUserAdapter()
