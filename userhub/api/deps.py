"""API dependencies"""

from userhub.services.aggregation_service import UserAggregationService, get_aggregation_service


def get_service() -> UserAggregationService:
    """Aggregation service dependency"""
    return get_aggregation_service()
