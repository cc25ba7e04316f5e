"""Azure Kubernetes Service client for managed cluster operations."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from azure.core.exceptions import AzureError
from azure.mgmt.containerservice.aio import ContainerServiceClient

from reflector.interfaces.cluster_types import ManagedClusterDescriptor
from reflector.interfaces.exceptions import (
    ClientConstructionError,
    CredentialFetchError,
    PageFetchError,
)
from reflector.utils.logging import get_logger

if TYPE_CHECKING:
    from azure.core.credentials_async import AsyncTokenCredential

logger = get_logger(__name__)


class AKSClient:
    """Client for listing AKS managed clusters and fetching their credentials.

    All calls are awaited on the caller's task, so cancelling the task aborts
    the request in flight.
    """

    def __init__(
        self,
        credential: AsyncTokenCredential,
        subscription_id: str,
        retry_total: int = 0,
        base_url: str | None = None,
    ):
        """Initialize AKS client.

        Args:
            credential: Async Azure credential
            subscription_id: Subscription to operate on
            retry_total: Transport-level retries (0 disables them)
            base_url: ARM endpoint override (optional)

        Raises:
            ClientConstructionError: If the SDK client cannot be built
        """
        self.subscription_id = subscription_id

        kwargs: dict[str, Any] = {"retry_total": retry_total}
        if base_url:
            kwargs["base_url"] = base_url

        try:
            self._client = ContainerServiceClient(
                credential=credential, subscription_id=subscription_id, **kwargs
            )
        except (ValueError, TypeError, AzureError) as e:
            logger.error("aks_client_construction_failed", subscription_id=subscription_id)
            raise ClientConstructionError(str(e)) from e

        logger.debug("aks_client_initialized", subscription_id=subscription_id)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> AKSClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def list_managed_clusters(self) -> AsyncIterator[ManagedClusterDescriptor]:
        """List managed clusters in the subscription, one page at a time.

        Every call starts a new listing from the first page. Pages are fetched
        lazily as the iterator advances.

        Yields:
            ManagedClusterDescriptor in the order the API returns them

        Raises:
            PageFetchError: If a page cannot be retrieved
        """
        logger.debug("listing_managed_clusters", subscription_id=self.subscription_id)

        page_number = 0
        try:
            async for page in self._client.managed_clusters.list().by_page():
                page_number += 1
                clusters = [cluster async for cluster in page]
                logger.debug(
                    "managed_cluster_page_fetched", page=page_number, count=len(clusters)
                )
                for cluster in clusters:
                    yield _to_descriptor(cluster)
        except AzureError as e:
            logger.error(
                "managed_cluster_page_failed",
                subscription_id=self.subscription_id,
                page=page_number + 1,
                error=str(e),
            )
            raise PageFetchError(f"failed to fetch page {page_number + 1}: {e}") from e

    async def get_admin_kubeconfig(self, resource_group: str, cluster_name: str) -> bytes | None:
        """Get the admin kubeconfig for a cluster.

        Only the first kubeconfig of the response is used.

        Args:
            resource_group: Resource group of the cluster
            cluster_name: Name of the cluster

        Returns:
            Raw kubeconfig bytes, or None if the API returned no kubeconfig

        Raises:
            CredentialFetchError: If the credentials cannot be retrieved
        """
        try:
            logger.debug(
                "getting_cluster_admin_credentials",
                resource_group=resource_group,
                cluster_name=cluster_name,
            )
            result = await self._client.managed_clusters.list_cluster_admin_credentials(
                resource_group, cluster_name
            )
        except AzureError as e:
            logger.error(
                "cluster_admin_credentials_failed",
                resource_group=resource_group,
                cluster_name=cluster_name,
                error=str(e),
            )
            raise CredentialFetchError(str(e), cluster=cluster_name) from e

        if not result.kubeconfigs or result.kubeconfigs[0].value is None:
            logger.info("cluster_credentials_missing", cluster_name=cluster_name)
            return None

        value = result.kubeconfigs[0].value
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _to_descriptor(cluster: Any) -> ManagedClusterDescriptor:
    return ManagedClusterDescriptor(
        id=cluster.id or "",
        name=cluster.name or "",
        location=cluster.location,
        metadata={
            "kubernetes_version": cluster.kubernetes_version,
            "provisioning_state": cluster.provisioning_state,
            "fqdn": cluster.fqdn,
        },
    )
