"""Unit tests for the tenant context inspection routes."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from iam.dependencies.tenant_context import (
    _get_default_tenant_id,
    get_tenant_context_probe,
)
from iam.presentation import router
from shared_kernel.middleware.tenant_resolver import TenantResolutionMiddleware


@pytest.fixture
def app() -> FastAPI:
    """IAM router behind the tenant resolution middleware."""
    app = FastAPI()
    app.add_middleware(TenantResolutionMiddleware)
    app.include_router(router)
    app.dependency_overrides[_get_default_tenant_id] = lambda: None
    app.dependency_overrides[get_tenant_context_probe] = lambda: MagicMock()
    return app


class TestGetTenant:
    """Tests for GET /iam/tenant."""

    def test_returns_tenant_from_subdomain(self, app: FastAPI) -> None:
        client = TestClient(app, base_url="http://acme.example.com")

        response = client.get("/iam/tenant")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"tenant_id": "acme", "source": "subdomain"}

    def test_returns_tenant_from_header(self, app: FastAPI) -> None:
        client = TestClient(app, base_url="http://acme.example.com")

        response = client.get("/iam/tenant", headers={"x-tenant-id": "globex"})

        assert response.json() == {"tenant_id": "globex", "source": "header"}

    def test_unresolved_without_middleware(self) -> None:
        app = FastAPI()
        app.include_router(router)
        client = TestClient(app)

        response = client.get("/iam/tenant")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"tenant_id": None, "source": None}


class TestGetRequiredTenant:
    """Tests for GET /iam/tenant/required."""

    def test_returns_resolved_tenant(self, app: FastAPI) -> None:
        client = TestClient(app, base_url="http://acme.example.com")

        response = client.get("/iam/tenant/required")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["tenant_id"] == "acme"

    def test_rejects_without_tenant(self) -> None:
        app = FastAPI()
        app.include_router(router)
        app.dependency_overrides[_get_default_tenant_id] = lambda: None
        client = TestClient(app)

        response = client.get("/iam/tenant/required")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Tenant could not be resolved"

    def test_falls_back_to_default_tenant(self) -> None:
        app = FastAPI()
        app.include_router(router)
        app.dependency_overrides[_get_default_tenant_id] = lambda: "main"
        client = TestClient(app)

        response = client.get("/iam/tenant/required")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"tenant_id": "main", "source": "default"}
