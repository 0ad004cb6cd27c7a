"""Input unit for an aggregation run: one source's DTOs plus its adapter."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from userhub.schemas.normalized import UserSource, source_display_name


class SourceBatch(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: UserSource
    display_name: str
    dtos: Sequence[Any]
    adapter: Any

    @classmethod
    def for_source(
        cls,
        source: UserSource,
        dtos: Sequence[Any],
        adapter: Any,
        display_name: Optional[str] = None,
    ) -> "SourceBatch":
        """Build a batch, defaulting the display name from the source."""
        return cls(
            source=source,
            display_name=display_name or source_display_name(source),
            dtos=list(dtos),
            adapter=adapter,
        )
