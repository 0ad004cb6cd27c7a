"""Aggregation entrypoint - Standalone script for one aggregation run.

Usage:
    python -m userhub.aggregate_entrypoint
"""

import sys

from userhub.core.logging import get_logger
from userhub.schemas.normalized import AggregationResult
from userhub.services.aggregation_service import get_aggregation_service

logger = get_logger("aggregate_entrypoint")


def run_aggregation() -> AggregationResult:
    """Load every source once and publish the unified users."""
    logger.info("Running user aggregation for all sources")
    return get_aggregation_service().load()


def main() -> AggregationResult:
    """Main entry point for the aggregation run."""
    result = run_aggregation()

    for user in result.users:
        logger.info(f"{user.source.value}: #{user.id} {user.name} <{user.email}>")

    logger.info(f"Aggregation completed: {result.success_count} users, {result.error_count} errors")

    # Exit with error code if any record failed
    if result.errors:
        sys.exit(1)

    return result


if __name__ == "__main__":
    main()
