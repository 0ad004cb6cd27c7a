"""Runs every source adapter over its batch and publishes one unified result."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Tuple

from userhub.core.logging import get_logger
from userhub.schemas.batch import SourceBatch
from userhub.schemas.normalized import AdaptationError, AggregationResult, UnifiedUser
from userhub.services.mock_data import MockUserDataProvider
from userhub.services.user_store import UserStore

log = get_logger("aggregation_service")

UNKNOWN_ERROR = "Unknown error"


class UserAggregationService:
    """Adapts user batches from all sources into one collection.

    Responsibilities:
    - Run each batch through its adapter, in batch order then record order
    - Isolate per-record failures so the rest of the run continues
    - Publish successes and errors to the store, replacing the previous run
    """

    def __init__(self, store: Optional[UserStore] = None, provider: Optional[MockUserDataProvider] = None):
        self.store = store or UserStore()
        self.provider = provider or MockUserDataProvider()

    @property
    def all_users(self) -> Tuple[UnifiedUser, ...]:
        return self.store.all_users

    @property
    def errors(self) -> Tuple[AdaptationError, ...]:
        return self.store.errors

    def load(self) -> AggregationResult:
        """Run one aggregation over the provider's static batches."""
        return self.run(self.provider.batches())

    def run(self, batches: Iterable[SourceBatch]) -> AggregationResult:
        started_at = datetime.now(timezone.utc)
        users: List[UnifiedUser] = []
        errors: List[AdaptationError] = []

        for batch in batches:
            self._adapt_batch(batch, users, errors)

        result = AggregationResult(
            users=tuple(users),
            errors=tuple(errors),
            started_at=started_at,
            ended_at=datetime.now(timezone.utc),
        )
        self.store.publish(result.users, result.errors, result)

        log.info(f"Successfully adapted {result.success_count} users")
        if result.errors:
            log.warning(f"{result.error_count} errors during adaptation: {result.error_messages}")
        return result

    # -------------------------------------------------------------------------
    # Per-record isolation
    # -------------------------------------------------------------------------
    def _adapt_batch(
        self,
        batch: SourceBatch,
        users: List[UnifiedUser],
        errors: List[AdaptationError],
    ) -> None:
        for index, dto in enumerate(batch.dtos):
            try:
                users.append(batch.adapter.adapt(dto))
            except Exception as exc:  # noqa: BLE001
                errors.append(self._record_failure(batch, index, dto, exc))

    @staticmethod
    def _record_failure(batch: SourceBatch, index: int, dto: Any, exc: Exception) -> AdaptationError:
        reason = str(exc) or UNKNOWN_ERROR
        message = f"[{batch.display_name}] Failed to adapt user at index {index}: {reason}"
        log.bind(source=batch.source.value, index=index, dto=dto).error(f"{message} | dto={dto!r}")
        return AdaptationError(
            source=batch.source,
            display_name=batch.display_name,
            index=index,
            reason=reason,
            message=message,
            dto=dto,
        )


_aggregation_service: Optional[UserAggregationService] = None


def get_aggregation_service() -> UserAggregationService:
    """Get the global aggregation service, creating it on first use."""
    global _aggregation_service
    if _aggregation_service is None:
        _aggregation_service = UserAggregationService()
    return _aggregation_service


def reset_aggregation_service() -> None:
    """Drop the global service so the next call starts from an empty store."""
    global _aggregation_service
    _aggregation_service = None
