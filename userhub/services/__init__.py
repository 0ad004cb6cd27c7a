# Services package
from userhub.services.aggregation_service import (
    UserAggregationService,
    get_aggregation_service,
    reset_aggregation_service,
)
from userhub.services.mock_data import MockUserDataProvider
from userhub.services.user_store import UserStore

__all__ = [
    "UserAggregationService",
    "get_aggregation_service",
    "reset_aggregation_service",
    "MockUserDataProvider",
    "UserStore",
]
