"""
Live Fastly API fixtures.

These tests create and delete real services. They are skipped unless
FASTLY_API_KEY is set in the environment.

Usage:
    FASTLY_API_KEY=... nox -s integration
"""

import logging
import os
import uuid

import pytest

logger = logging.getLogger(__name__)

API_KEY_ENV = "FASTLY_API_KEY"


@pytest.fixture(scope="session")
def live_api_key():
    """The API key for live tests. Skips when it is not configured."""
    api_key = os.environ.get(API_KEY_ENV)
    if not api_key:
        pytest.skip(f"{API_KEY_ENV} not set; skipping live Fastly API tests")
    return api_key


@pytest.fixture
def service_name():
    """A unique, disposable service name."""
    name = f"phastly-test-{uuid.uuid4().hex[:24]}"
    logger.info(f"Using live test service name {name}")
    return name
