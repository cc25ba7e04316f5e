"""AKS adapter implementing ClusterProvider interface."""

from __future__ import annotations

from contextlib import aclosing
from typing import TYPE_CHECKING

from reflector.clients.aks_client import AKSClient
from reflector.core.exceptions import ConfigurationError
from reflector.interfaces.cluster_provider import ClusterProvider
from reflector.interfaces.cluster_types import ManagedClusterDescriptor, ProviderCluster
from reflector.interfaces.exceptions import DecodeError, ParseError, ProviderError
from reflector.utils.credentials import CredentialResolver
from reflector.utils.kubeconfig import decode_kubeconfig
from reflector.utils.logging import get_logger, log_error
from reflector.utils.resource_id import parse_resource_id

if TYPE_CHECKING:
    from reflector.core.config import AzureConfig

logger = get_logger(__name__)


class AKSProvider(ClusterProvider):
    """Discover AKS clusters in one subscription with their admin kubeconfigs.

    Discovery is all or nothing: the first failure at any stage aborts the
    call and nothing collected so far is returned.
    """

    def __init__(
        self,
        subscription_id: str,
        credential_resolver: CredentialResolver | None = None,
        retry_total: int = 0,
        base_url: str | None = None,
    ):
        """Initialize AKS provider. Performs no I/O.

        Args:
            subscription_id: Azure subscription to discover clusters in
            credential_resolver: Resolver for the ambient credential
            retry_total: Transport-level retries for ARM calls
            base_url: ARM endpoint override (optional)

        Raises:
            ConfigurationError: If subscription_id is empty
        """
        if not subscription_id or not subscription_id.strip():
            raise ConfigurationError("Azure subscription_id is required")

        self.subscription_id = subscription_id.strip()
        self.credential_resolver = credential_resolver or CredentialResolver()
        self.retry_total = retry_total
        self.base_url = base_url

    @classmethod
    def from_config(cls, config: AzureConfig) -> AKSProvider:
        return cls(
            subscription_id=config.subscription_id,
            credential_resolver=CredentialResolver(exclude=config.exclude_credential_sources),
            retry_total=config.retry_total,
            base_url=config.base_url,
        )

    async def list_clusters(self) -> list[ProviderCluster]:
        """Discover all AKS clusters in the subscription.

        Returns:
            Clusters in listing order, each with its decoded admin kubeconfig

        Raises:
            AuthError: If no ambient credential is usable
            ClientConstructionError: If the ARM client cannot be built
            PageFetchError: If a listing page cannot be fetched
            ParseError: If a cluster resource id is malformed
            CredentialFetchError: If a cluster's credentials cannot be fetched
            DecodeError: If a cluster's kubeconfig cannot be decoded
        """
        log = logger.bind(subscription_id=self.subscription_id)
        log.info("discovering_clusters")

        credential = None
        try:
            credential = await self.credential_resolver.resolve()
            async with AKSClient(
                credential,
                self.subscription_id,
                retry_total=self.retry_total,
                base_url=self.base_url,
            ) as client:
                clusters: list[ProviderCluster] = []
                async with aclosing(client.list_managed_clusters()) as descriptors:
                    async for descriptor in descriptors:
                        clusters.append(await self._reflect_cluster(client, descriptor))
        except ProviderError as e:
            log_error(log, e, operation="list_clusters", stage=e.stage, cluster=e.cluster)
            raise
        finally:
            if credential is not None:
                await credential.close()

        log.info("clusters_discovered", count=len(clusters))
        return clusters

    async def _reflect_cluster(
        self, client: AKSClient, descriptor: ManagedClusterDescriptor
    ) -> ProviderCluster:
        try:
            resource = parse_resource_id(descriptor.id)
        except ParseError as e:
            raise ParseError(e.message, cluster=descriptor.name or descriptor.id) from e

        name = descriptor.name or resource.resource_name
        payload = await client.get_admin_kubeconfig(resource.resource_group, name)

        if payload is None:
            return ProviderCluster(name=name)

        try:
            kubeconfig = decode_kubeconfig(payload)
        except DecodeError as e:
            raise DecodeError(e.message, cluster=name) from e

        logger.debug("cluster_reflected", cluster_name=name, resource_group=resource.resource_group)
        return ProviderCluster(name=name, kubeconfig=kubeconfig)
