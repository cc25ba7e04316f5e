"""Integration tests for Cluster Reflector.

These tests interact with real Azure services and require:
- An ambient Azure credential (environment, managed identity, az login, ...)
- AZURE_TEST_SUBSCRIPTION_ID naming a subscription the identity can read

Tests are marked with @pytest.mark.integration and can be run with:
    pytest tests/integration/ -m integration

To skip integration tests:
    pytest -m "not integration"
"""
