"""Unit tests for tenant context dependencies.

Covers:
- Reading the context attached by the middleware
- Missing middleware state (empty context)
- Required tenant resolved from the request
- Required tenant falling back to the default tenant
- Required tenant missing without a default (400)
- Domain probe invocations for all scenarios
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from iam.dependencies.tenant_context import (
    _get_default_tenant_id,
    get_tenant_context,
    require_tenant_context,
)
from infrastructure.settings import TenancySettings
from shared_kernel.middleware.observability.tenant_context_probe import (
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext


@pytest.fixture
def mock_probe() -> MagicMock:
    """Create a mock tenant context probe."""
    return MagicMock(spec=TenantContextProbe)


def make_request(tenant: TenantContext | None = None, path: str = "/orders"):
    """Build a stand-in request carrying middleware state."""
    state = SimpleNamespace()
    if tenant is not None:
        state.tenant = tenant
        state.tenant_id = tenant.tenant_id
    return SimpleNamespace(state=state, url=SimpleNamespace(path=path))


class TestGetTenantContext:
    """Tests for get_tenant_context()."""

    def test_returns_context_from_middleware(self) -> None:
        tenant = TenantContext(tenant_id="acme", source="subdomain")
        assert get_tenant_context(make_request(tenant)) is tenant

    def test_returns_empty_context_without_middleware(self) -> None:
        assert get_tenant_context(make_request()) == TenantContext()


class TestRequireTenantContext:
    """Tests for require_tenant_context()."""

    def test_returns_resolved_tenant(self, mock_probe: MagicMock) -> None:
        tenant = TenantContext(tenant_id="acme", source="header")

        result = require_tenant_context(
            request=make_request(tenant),
            tenant=tenant,
            default_tenant_id="main",
            probe=mock_probe,
        )

        assert result is tenant
        mock_probe.tenant_resolved_from_default.assert_not_called()
        mock_probe.tenant_required.assert_not_called()

    def test_falls_back_to_default_tenant(self, mock_probe: MagicMock) -> None:
        result = require_tenant_context(
            request=make_request(TenantContext()),
            tenant=TenantContext(),
            default_tenant_id="main",
            probe=mock_probe,
        )

        assert result == TenantContext(tenant_id="main", source="default")
        mock_probe.tenant_resolved_from_default.assert_called_once_with(
            tenant_id="main"
        )

    def test_rejects_without_tenant_or_default(self, mock_probe: MagicMock) -> None:
        with pytest.raises(HTTPException) as exc_info:
            require_tenant_context(
                request=make_request(TenantContext(), path="/orders"),
                tenant=TenantContext(),
                default_tenant_id=None,
                probe=mock_probe,
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Tenant could not be resolved"
        mock_probe.tenant_required.assert_called_once_with(path="/orders")


class TestDefaultTenantIdDependency:
    """Tests for _get_default_tenant_id()."""

    def test_reads_settings(self) -> None:
        settings = TenancySettings(default_tenant_id="main")
        assert _get_default_tenant_id(settings) == "main"

    def test_blank_default_is_unset(self) -> None:
        settings = TenancySettings(default_tenant_id="  ")
        assert _get_default_tenant_id(settings) is None
