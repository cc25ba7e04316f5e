"""Ambient Azure credential resolution."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from azure.identity.aio import (
    AzureCliCredential,
    AzureDeveloperCliCredential,
    AzurePowerShellCredential,
    EnvironmentCredential,
    ManagedIdentityCredential,
    WorkloadIdentityCredential,
)

from reflector.interfaces.exceptions import AuthError
from reflector.utils.logging import get_logger

if TYPE_CHECKING:
    from azure.core.credentials_async import AsyncTokenCredential

logger = get_logger(__name__)

ARM_SCOPE = "https://management.azure.com/.default"


@dataclass(frozen=True)
class CredentialSource:
    """A named way of building a credential from the environment."""

    name: str
    factory: Callable[[], AsyncTokenCredential]


DEFAULT_SOURCES: tuple[CredentialSource, ...] = (
    CredentialSource("environment", EnvironmentCredential),
    CredentialSource("workload_identity", WorkloadIdentityCredential),
    CredentialSource("managed_identity", ManagedIdentityCredential),
    CredentialSource("azure_cli", AzureCliCredential),
    CredentialSource("azure_powershell", AzurePowerShellCredential),
    CredentialSource("azure_developer_cli", AzureDeveloperCliCredential),
)


class CredentialResolver:
    """Resolve the first usable credential from an ordered list of sources.

    Each source is built and probed with a token request for the ARM scope.
    Sources that cannot produce a token are closed and skipped. The resolver
    keeps no credential between calls; token caching is left to the
    credential objects themselves.
    """

    def __init__(
        self,
        sources: Iterable[CredentialSource] = DEFAULT_SOURCES,
        exclude: Iterable[str] = (),
        scope: str = ARM_SCOPE,
    ):
        """Initialize credential resolver.

        Args:
            sources: Credential sources in precedence order
            exclude: Names of sources to skip
            scope: Token scope used to probe each source
        """
        excluded = set(exclude)
        self.sources = tuple(s for s in sources if s.name not in excluded)
        self.scope = scope

    @property
    def source_names(self) -> list[str]:
        return [s.name for s in self.sources]

    async def resolve(self) -> AsyncTokenCredential:
        """Return the first credential that can issue a token.

        Returns:
            Async token credential; the caller owns it and must close it

        Raises:
            AuthError: If no source produced a usable credential
        """
        failures: list[str] = []

        for source in self.sources:
            try:
                credential = source.factory()
            except Exception as e:
                logger.debug("credential_source_unavailable", source=source.name, error=str(e))
                failures.append(f"{source.name}: {e}")
                continue

            try:
                await credential.get_token(self.scope)
            except Exception as e:
                await credential.close()
                logger.debug("credential_source_unavailable", source=source.name, error=str(e))
                failures.append(f"{source.name}: {e}")
                continue
            except BaseException:
                await credential.close()
                raise

            logger.info("credential_resolved", source=source.name)
            return credential

        logger.error("credential_resolution_failed", attempted=self.source_names)
        if not failures:
            raise AuthError("no credential sources configured")
        raise AuthError("no usable credential found (" + "; ".join(failures) + ")")
