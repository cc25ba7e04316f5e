"""Unit tests for custom exceptions."""

import pytest

from reflector.core.exceptions import ConfigurationError, ReflectorError
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

STAGE_ERRORS = [
    AuthError,
    ClientConstructionError,
    PageFetchError,
    ParseError,
    CredentialFetchError,
    DecodeError,
]


class TestExceptionHierarchy:
    """Tests for exception hierarchy and inheritance."""

    @pytest.mark.parametrize("exc_class", STAGE_ERRORS)
    def test_stage_errors_inherit_from_provider_error(self, exc_class) -> None:
        """Test every discovery stage error is a ProviderError."""
        assert issubclass(exc_class, ProviderError)
        assert issubclass(exc_class, InterfaceError)

    def test_stages_are_distinct(self) -> None:
        """Test each error class names its own stage."""
        stages = [exc_class.stage for exc_class in STAGE_ERRORS]
        assert len(set(stages)) == len(stages)

    def test_configuration_error_inherits_from_reflector_error(self) -> None:
        """Test ConfigurationError is a ReflectorError."""
        assert issubclass(ConfigurationError, ReflectorError)
        assert issubclass(ReflectorError, Exception)

    def test_can_catch_with_base_exception(self) -> None:
        """Test stage errors can be caught as ProviderError."""
        with pytest.raises(ProviderError):
            raise PageFetchError("page 3 unavailable")


class TestProviderErrorMessages:
    """Tests for ProviderError formatting."""

    def test_message_without_cluster(self) -> None:
        """Test the message names the stage."""
        error = PageFetchError("failed to fetch page 2: timeout")

        assert str(error) == "cluster listing failed: failed to fetch page 2: timeout"
        assert error.message == "failed to fetch page 2: timeout"
        assert error.cluster is None

    def test_message_with_cluster(self) -> None:
        """Test the message names the stage and the cluster."""
        error = CredentialFetchError("(AuthorizationFailed) forbidden", cluster="aks-prod")

        assert str(error) == (
            "credential retrieval failed for cluster aks-prod: (AuthorizationFailed) forbidden"
        )
        assert error.cluster == "aks-prod"
        assert error.stage == "credential retrieval"

    def test_cause_is_preserved(self) -> None:
        """Test chained exceptions keep the underlying error."""
        cause = ValueError("bad yaml")

        with pytest.raises(DecodeError) as exc_info:
            try:
                raise cause
            except ValueError as e:
                raise DecodeError("invalid YAML", cluster="aks-dev") from e

        assert exc_info.value.__cause__ is cause
