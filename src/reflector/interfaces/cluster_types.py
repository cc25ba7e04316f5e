"""Data types for ClusterProvider interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from reflector.utils.kubeconfig import KubeConfig


@dataclass(frozen=True)
class ProviderCluster:
    """A discovered cluster and the client configuration to reach it.

    ``kubeconfig`` is None when the provider returned no credential payload
    for the cluster.
    """

    name: str
    kubeconfig: KubeConfig | None = None


@dataclass(frozen=True)
class ManagedClusterDescriptor:
    """One entry of a managed cluster listing."""

    id: str
    name: str
    location: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
