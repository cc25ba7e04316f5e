"""Kubeconfig decoding and client construction."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from reflector.interfaces.exceptions import DecodeError

if TYPE_CHECKING:
    from kubernetes.client import ApiClient

DEFAULT_NAMESPACE = "default"


class _KubeconfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ClusterEntry(_KubeconfigModel):
    """Connection details for one API server."""

    server: str | None = None
    certificate_authority_data: str | None = Field(None, alias="certificate-authority-data")
    certificate_authority: str | None = Field(None, alias="certificate-authority")
    insecure_skip_tls_verify: bool | None = Field(None, alias="insecure-skip-tls-verify")


class NamedCluster(_KubeconfigModel):
    name: str
    cluster: ClusterEntry = Field(default_factory=ClusterEntry)

    @field_validator("cluster", mode="before")
    @classmethod
    def _null_entry(cls, value: Any) -> Any:
        return {} if value is None else value


class NamedUser(_KubeconfigModel):
    name: str
    user: dict[str, Any] = Field(default_factory=dict)


class ContextEntry(_KubeconfigModel):
    cluster: str | None = None
    user: str | None = None
    namespace: str | None = None


class NamedContext(_KubeconfigModel):
    name: str
    context: ContextEntry = Field(default_factory=ContextEntry)

    @field_validator("context", mode="before")
    @classmethod
    def _null_entry(cls, value: Any) -> Any:
        return {} if value is None else value


class KubeConfig(_KubeconfigModel):
    """Structured Kubernetes client configuration."""

    api_version: str = Field("v1", alias="apiVersion")
    kind: str = "Config"
    clusters: list[NamedCluster] = Field(default_factory=list)
    users: list[NamedUser] = Field(default_factory=list)
    contexts: list[NamedContext] = Field(default_factory=list)
    current_context: str = Field("", alias="current-context")
    preferences: dict[str, Any] = Field(default_factory=dict)

    @field_validator("clusters", "users", "contexts", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("preferences", mode="before")
    @classmethod
    def _null_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("current_context", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return "" if value is None else value

    def get_context(self, name: str | None = None) -> NamedContext | None:
        """Get a context by name, or the current context if no name is given."""
        target = name or self.current_context
        return next((c for c in self.contexts if c.name == target), None)

    def get_cluster(self, name: str) -> NamedCluster | None:
        return next((c for c in self.clusters if c.name == name), None)

    def server(self, context: str | None = None) -> str | None:
        """API server URL of the given (or current) context."""
        ctx = self.get_context(context)
        if ctx is None or ctx.context.cluster is None:
            return None
        cluster = self.get_cluster(ctx.context.cluster)
        return cluster.cluster.server if cluster else None

    def default_namespace(self, context: str | None = None) -> str:
        ctx = self.get_context(context)
        if ctx is None or not ctx.context.namespace:
            return DEFAULT_NAMESPACE
        return ctx.context.namespace

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary using kubeconfig key names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def dump(self) -> bytes:
        """Encode as kubeconfig YAML."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False).encode(
            "utf-8"
        )

    def write(self, path: str | Path) -> Path:
        """Write the kubeconfig to disk, readable by the owner only.

        Args:
            path: Destination file

        Returns:
            Path that was written
        """
        target = Path(path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch(mode=0o600, exist_ok=True)
        target.chmod(0o600)
        target.write_bytes(self.dump())
        return target

    def new_api_client(self, context: str | None = None) -> ApiClient:
        """Build a Kubernetes API client from this configuration.

        Args:
            context: Context to use (current context if None)

        Returns:
            Configured kubernetes.client.ApiClient
        """
        from kubernetes import config as k8s_config

        return k8s_config.new_client_from_config_dict(
            config_dict=self.to_dict(), context=context, persist_config=False
        )


def decode_kubeconfig(data: bytes | bytearray | str) -> KubeConfig:
    """Decode a kubeconfig payload.

    An empty payload decodes to an empty configuration.

    Args:
        data: Raw kubeconfig YAML

    Returns:
        KubeConfig

    Raises:
        DecodeError: If the payload is not valid kubeconfig YAML
    """
    if isinstance(data, bytearray):
        data = bytes(data)

    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DecodeError(f"invalid YAML: {e}") from e

    if document is None:
        return KubeConfig()
    if not isinstance(document, dict):
        raise DecodeError(f"expected a mapping, got {type(document).__name__}")

    try:
        return KubeConfig.model_validate(document)
    except ValidationError as e:
        raise DecodeError(f"invalid kubeconfig: {e}") from e
