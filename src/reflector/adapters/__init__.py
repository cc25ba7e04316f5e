"""Cluster provider implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reflector.adapters.aks_adapter import AKSProvider
from reflector.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from reflector.core.config import ReflectorConfig
    from reflector.interfaces.cluster_provider import ClusterProvider

PROVIDERS = {
    "azure": lambda config: AKSProvider.from_config(config.azure),
}


def create_provider(config: ReflectorConfig) -> ClusterProvider:
    """Create the cluster provider named by the configuration.

    Raises:
        ConfigurationError: If the provider kind is not registered
    """
    factory = PROVIDERS.get(config.provider)
    if factory is None:
        raise ConfigurationError(
            f"Unknown provider {config.provider!r}, expected one of: {', '.join(sorted(PROVIDERS))}"
        )
    return factory(config)


__all__ = ["AKSProvider", "PROVIDERS", "create_provider"]
