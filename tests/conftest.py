"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from fakes import FakeListing, credential_results


@pytest.fixture
def mock_sdk_client() -> MagicMock:
    """Patch the async ContainerServiceClient and return the instance mock."""
    sdk_client = MagicMock()
    sdk_client.close = AsyncMock()
    sdk_client.managed_clusters.list.return_value = FakeListing([])
    sdk_client.managed_clusters.list_cluster_admin_credentials = AsyncMock(
        return_value=credential_results()
    )

    with patch(
        "reflector.clients.aks_client.ContainerServiceClient", return_value=sdk_client
    ) as sdk_class:
        sdk_client.sdk_class = sdk_class
        yield sdk_client


@pytest.fixture
def mock_credential() -> MagicMock:
    """Mock async token credential."""
    credential = MagicMock()
    credential.get_token = AsyncMock(return_value=SimpleNamespace(token="t", expires_on=0))
    credential.close = AsyncMock()
    return credential


@pytest.fixture
def mock_resolver(mock_credential: MagicMock) -> MagicMock:
    """Mock credential resolver returning mock_credential."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=mock_credential)
    return resolver
