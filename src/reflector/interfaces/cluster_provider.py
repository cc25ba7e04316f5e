"""Cluster provider interface for managed cluster discovery."""

from abc import ABC, abstractmethod

from reflector.interfaces.cluster_types import ProviderCluster


class ClusterProvider(ABC):
    """Abstract interface for discovering managed Kubernetes clusters.

    Each cloud has its own implementation. A provider holds configuration
    only: every call to ``list_clusters`` starts from scratch and may run
    concurrently with other calls.

    Implementation Note:
    Concrete implementations should hide SDK-specific details (exception
    types, response models, pagination) behind this interface and report
    failures as ProviderError subclasses.
    """

    @abstractmethod
    async def list_clusters(self) -> list[ProviderCluster]:
        """Discover all clusters visible to the provider.

        Returns:
            Clusters in the order the cloud API listed them

        Raises:
            ProviderError: If any stage of discovery fails. No partial
                result is returned.
        """
