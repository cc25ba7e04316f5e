"""Interface definitions for cluster providers."""

from reflector.interfaces.cluster_provider import ClusterProvider
from reflector.interfaces.cluster_types import ManagedClusterDescriptor, ProviderCluster
from reflector.interfaces.exceptions import (
    AuthError,
    ClientConstructionError,
    CredentialFetchError,
    DecodeError,
    InterfaceError,
    PageFetchError,
    ParseError,
    ProviderError,
)

__all__ = [
    "ClusterProvider",
    "ManagedClusterDescriptor",
    "ProviderCluster",
    "AuthError",
    "ClientConstructionError",
    "CredentialFetchError",
    "DecodeError",
    "InterfaceError",
    "PageFetchError",
    "ParseError",
    "ProviderError",
]
