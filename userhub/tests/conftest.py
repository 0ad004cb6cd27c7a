"""Shared fixtures for userhub tests."""

import os

# Keep test runs from writing log files into the working tree
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest  # noqa: E402
from loguru import logger  # noqa: E402

from userhub.services.aggregation_service import reset_aggregation_service  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_aggregation_service():
    """Every test starts without a global service or published users."""
    reset_aggregation_service()
    yield
    reset_aggregation_service()


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)