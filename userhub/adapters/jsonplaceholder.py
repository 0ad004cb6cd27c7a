"""Adapter for JSONPlaceholder users (no avatar, no registration date)."""

from __future__ import annotations

from userhub.adapters.base import BaseUserAdapter
from userhub.adapters.primitives import is_valid_email, normalize_email, require_field, sanitize_text
from userhub.core.errors import ValidationError
from userhub.schemas.normalized import DEFAULT_AVATAR, UnifiedUser, UserSource
from userhub.schemas.raw import JsonplaceholderUserDto


class JsonplaceholderUserAdapter(BaseUserAdapter[JsonplaceholderUserDto]):
    name = "JsonplaceholderUserAdapter"
    source = UserSource.JSONPLACEHOLDER
    dto_model = JsonplaceholderUserDto

    def _build(self, dto: JsonplaceholderUserDto) -> UnifiedUser:
        require_field(dto.id, "id", self.name)
        require_field(dto.name, "name", self.name)
        require_field(dto.email, "email", self.name)

        return UnifiedUser(
            id=self._check_positive(dto.id, "id", dto.id),
            name=self._resolve_name(dto.name),
            email=self._resolve_email(dto.email),
            avatar=DEFAULT_AVATAR,
            source=self.source,
        )

    def _resolve_name(self, name: str) -> str:
        sanitized = sanitize_text(name, 100)
        if sanitized == "":
            raise ValidationError(
                f"[{self.name}] Name cannot be empty: {name}",
                adapter_name=self.name,
                field_name="name",
            )
        return sanitized

    def _resolve_email(self, email: str) -> str:
        if not is_valid_email(email):
            raise ValidationError(
                f"[{self.name}] Invalid email format: {email}",
                adapter_name=self.name,
                field_name="email",
            )
        return normalize_email(email)


jsonplaceholder_user_adapter = JsonplaceholderUserAdapter()
