"""Integration test fixtures and configuration."""

import os

import pytest


@pytest.fixture
def azure_test_subscription_id() -> str:
    """Subscription to discover clusters in, from AZURE_TEST_SUBSCRIPTION_ID.

    Tests using this fixture are skipped when the variable is not set.
    """
    subscription_id = os.getenv("AZURE_TEST_SUBSCRIPTION_ID")
    if not subscription_id:
        pytest.skip(
            "Azure subscription not available. Set AZURE_TEST_SUBSCRIPTION_ID environment variable."
        )
    return subscription_id
