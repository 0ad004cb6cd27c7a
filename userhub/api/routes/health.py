"""Health routes - Service liveness and load status."""

from fastapi import APIRouter, Depends

from userhub.api.deps import get_service
from userhub.schemas.api import HealthResponse
from userhub.services.aggregation_service import UserAggregationService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health(service: UserAggregationService = Depends(get_service)):
    """Liveness check; reports how many users the last run published."""
    last_result = service.store.last_result
    return HealthResponse(
        status="healthy",
        users_loaded=len(service.all_users),
        last_run_at=last_result.ended_at if last_result else None,
    )
