"""Contract tests for ClusterProvider interface.

All ClusterProvider implementations must pass these tests to ensure substitutability.
"""

import inspect
from unittest.mock import AsyncMock, MagicMock

import pytest

from fakes import SUBSCRIPTION_ID, FakeListing, admin_credentials_for, kubeconfig_bytes, managed_cluster
from reflector.adapters.aks_adapter import AKSProvider
from reflector.interfaces.cluster_provider import ClusterProvider
from reflector.interfaces.cluster_types import ProviderCluster


class ClusterProviderContract:
    """Base contract tests for ClusterProvider interface."""

    @pytest.fixture
    def provider(self) -> ClusterProvider:
        """Subclass must provide a concrete provider backed by two clusters."""
        raise NotImplementedError("Subclass must implement provider fixture")

    def test_provider_is_cluster_provider(self, provider: ClusterProvider):
        """Provider must implement the ClusterProvider interface."""
        assert isinstance(provider, ClusterProvider)

    def test_list_clusters_is_coroutine(self, provider: ClusterProvider):
        """list_clusters must be awaitable."""
        assert inspect.iscoroutinefunction(provider.list_clusters)

    @pytest.mark.asyncio
    async def test_list_clusters_returns_provider_clusters(self, provider: ClusterProvider):
        """list_clusters must return a list of ProviderCluster."""
        clusters = await provider.list_clusters()

        assert isinstance(clusters, list)
        assert all(isinstance(c, ProviderCluster) for c in clusters)

    @pytest.mark.asyncio
    async def test_cluster_names_are_unique(self, provider: ClusterProvider):
        """Cluster names must be unique within one result."""
        names = [c.name for c in await provider.list_clusters()]

        assert len(names) == len(set(names))

    @pytest.mark.asyncio
    async def test_results_are_independent_between_calls(self, provider: ClusterProvider):
        """Each call must return a fresh list the caller owns."""
        first = await provider.list_clusters()
        first.clear()

        second = await provider.list_clusters()

        assert len(second) == 2


class TestAKSProviderContract(ClusterProviderContract):
    """AKSProvider must satisfy the ClusterProvider contract."""

    @pytest.fixture
    def provider(self, mock_sdk_client: MagicMock, mock_resolver: MagicMock) -> ClusterProvider:
        mock_sdk_client.managed_clusters.list.return_value = FakeListing(
            [[managed_cluster("aks-prod")], [managed_cluster("aks-dev")]]
        )
        mock_sdk_client.managed_clusters.list_cluster_admin_credentials = AsyncMock(
            side_effect=admin_credentials_for(
                {"aks-prod": kubeconfig_bytes("aks-prod"), "aks-dev": None}
            )
        )
        return AKSProvider(SUBSCRIPTION_ID, credential_resolver=mock_resolver)
