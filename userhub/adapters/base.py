"""Adapter contract shared by every per-source user adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any, ClassVar, Generic, Optional, Protocol, Type, TypeVar, runtime_checkable

from userhub.adapters.primitives import clamp_future_date, parse_date_safely, parse_number, require_field
from userhub.core.errors import ValidationError
from userhub.schemas.normalized import UnifiedUser, UserSource
from userhub.schemas.raw import RawUserDto

DtoT = TypeVar("DtoT", bound=RawUserDto)
DtoT_contra = TypeVar("DtoT_contra", contravariant=True)


@runtime_checkable
class UserAdapter(Protocol[DtoT_contra]):
    """Anything that turns one source DTO into a UnifiedUser."""

    def adapt(self, dto: DtoT_contra) -> UnifiedUser:
        """Raises ValidationError when the DTO is missing or invalid."""
        ...


class BaseUserAdapter(ABC, Generic[DtoT]):
    """Base class for the bundled source adapters.

    Subclasses declare their ``name``, ``source`` and ``dto_model`` and
    implement ``_build``. Policy flags can be overridden per instance;
    adapters keep no other state.
    """

    name: ClassVar[str]
    source: ClassVar[UserSource]
    dto_model: ClassVar[Type[RawUserDto]]

    clamp_future_dates: bool = False
    require_positive_id: bool = False

    def __init__(
        self,
        clamp_future_dates: Optional[bool] = None,
        require_positive_id: Optional[bool] = None,
    ):
        if clamp_future_dates is not None:
            self.clamp_future_dates = clamp_future_dates
        if require_positive_id is not None:
            self.require_positive_id = require_positive_id

    def adapt(self, dto: DtoT | Mapping[str, Any] | None) -> UnifiedUser:
        return self._build(self._coerce(dto))

    @abstractmethod
    def _build(self, dto: DtoT) -> UnifiedUser:
        """Validate required fields and map the DTO to a UnifiedUser."""

    def _coerce(self, dto: Any) -> DtoT:
        require_field(dto, "dto", self.name)
        if isinstance(dto, self.dto_model):
            return dto  # type: ignore[return-value]
        if isinstance(dto, Mapping):
            return self.dto_model.model_validate(dict(dto))  # type: ignore[return-value]
        if isinstance(dto, RawUserDto):
            return self.dto_model.model_validate(dto.model_dump())  # type: ignore[return-value]
        raise TypeError(f"[{self.name}] Unsupported DTO type: {type(dto).__name__}")

    def _parse_id(self, raw: Any, field_name: str) -> int:
        """Parse a string-encoded id, rejecting non-integral values."""
        parsed = parse_number(raw, field_name, self.name)
        if isinstance(parsed, float):
            if not parsed.is_integer():
                raise ValidationError(
                    f"[{self.name}] Invalid number format for field: {field_name}: {raw}",
                    adapter_name=self.name,
                    field_name=field_name,
                )
            parsed = int(parsed)
        return self._check_positive(parsed, field_name, raw)

    def _check_positive(self, value: int, field_name: str, raw: Any) -> int:
        if self.require_positive_id and value <= 0:
            raise ValidationError(
                f"[{self.name}] {field_name} must be positive: {raw}",
                adapter_name=self.name,
                field_name=field_name,
            )
        return value

    def _resolve_joined_date(self, raw: Optional[str]) -> Optional[datetime]:
        joined = parse_date_safely(raw)
        if self.clamp_future_dates:
            return clamp_future_date(joined, self.name)
        return joined
