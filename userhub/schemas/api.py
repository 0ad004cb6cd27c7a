from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from userhub.schemas.normalized import UnifiedUser, UserSource, source_badge_style, source_display_name


class UnifiedUserOut(BaseModel):
    """Unified user plus presentation metadata for its source."""

    id: int
    name: str
    email: str
    avatar: str
    joined_date: Optional[datetime] = None
    source: UserSource
    source_label: str
    badge_style: str

    @classmethod
    def from_user(cls, user: UnifiedUser) -> "UnifiedUserOut":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            joined_date=user.joined_date,
            source=user.source,
            source_label=source_display_name(user.source),
            badge_style=source_badge_style(user.source),
        )


class UsersResponse(BaseModel):
    request_id: str
    api_latency_ms: int
    total_count: int
    data: list[UnifiedUserOut]


class LoadResponse(BaseModel):
    success: bool
    users_adapted: int
    errors: list[str]


class ErrorsResponse(BaseModel):
    total_count: int
    errors: list[str]


class HealthResponse(BaseModel):
    status: str
    users_loaded: int
    last_run_at: datetime | None
