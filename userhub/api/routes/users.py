"""User routes - Trigger aggregation and read the unified users."""

import time
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from userhub.api.deps import get_service
from userhub.core.logging import get_logger
from userhub.schemas.api import ErrorsResponse, LoadResponse, UnifiedUserOut, UsersResponse
from userhub.schemas.normalized import UserSource
from userhub.services.aggregation_service import UserAggregationService

router = APIRouter(prefix="/users", tags=["users"])
log = get_logger("users_routes")


@router.post("/load", response_model=LoadResponse)
def load_users(service: UserAggregationService = Depends(get_service)):
    """
    Run one full aggregation over every source and publish the result.

    Records that fail to adapt are skipped and reported in ``errors``;
    the previous result is replaced entirely.
    """
    log.info("User aggregation triggered")
    result = service.load()
    return LoadResponse(
        success=not result.errors,
        users_adapted=result.success_count,
        errors=result.error_messages,
    )


@router.get("", response_model=UsersResponse)
def list_users(
    source: Optional[UserSource] = Query(None, description="Only users from this source"),
    service: UserAggregationService = Depends(get_service),
):
    """Unified users from the last aggregation run (empty before the first run)."""
    start = time.perf_counter()
    users = service.all_users
    if source is not None:
        users = [user for user in users if user.source is source]

    data = [UnifiedUserOut.from_user(user) for user in users]
    return UsersResponse(
        request_id=str(uuid.uuid4()),
        api_latency_ms=int((time.perf_counter() - start) * 1000),
        total_count=len(data),
        data=data,
    )


@router.get("/errors", response_model=ErrorsResponse)
def list_errors(service: UserAggregationService = Depends(get_service)):
    """Adaptation errors from the last aggregation run."""
    messages = [err.message for err in service.errors]
    return ErrorsResponse(total_count=len(messages), errors=messages)
