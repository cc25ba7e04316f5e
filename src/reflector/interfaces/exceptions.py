"""Exceptions for interface implementations."""


class InterfaceError(Exception):
    """Base exception for all interface-related errors."""


class ProviderError(InterfaceError):
    """Exception for cluster provider operations.

    Every discovery failure is reported as a subclass naming the stage that
    failed and, when known, the cluster being processed.

    Attributes:
        stage: Discovery stage that failed
        cluster: Cluster name or resource id the failure relates to
    """

    stage = "discovery"

    def __init__(self, message: str, cluster: str | None = None):
        """Initialize provider error.

        Args:
            message: Error message
            cluster: Optional cluster name or resource id
        """
        self.message = message
        self.cluster = cluster
        super().__init__(self._format())

    def _format(self) -> str:
        if self.cluster:
            return f"{self.stage} failed for cluster {self.cluster}: {self.message}"
        return f"{self.stage} failed: {self.message}"


class AuthError(ProviderError):
    """No usable ambient credential was found."""

    stage = "credential resolution"


class ClientConstructionError(ProviderError):
    """The remote API client could not be built."""

    stage = "client construction"


class PageFetchError(ProviderError):
    """A page of the managed cluster listing could not be retrieved."""

    stage = "cluster listing"


class ParseError(ProviderError):
    """A resource identifier does not match the expected grammar."""

    stage = "resource id parsing"


class CredentialFetchError(ProviderError):
    """Admin credential retrieval for a cluster failed."""

    stage = "credential retrieval"


class DecodeError(ProviderError):
    """A kubeconfig payload is not a valid client configuration."""

    stage = "kubeconfig decoding"
