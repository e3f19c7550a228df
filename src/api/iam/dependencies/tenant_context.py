"""Tenant context FastAPI dependencies.

Expose the TenantContext that ``TenantResolutionMiddleware`` attached to the
request. Routes that merely read the tenant use ``get_tenant_context``;
routes that must be scoped to a tenant use ``require_tenant_context``, which
falls back to the configured default tenant (SUITE_TENANCY_DEFAULT_TENANT_ID)
or rejects the request with 400.

Usage in FastAPI routes:
    @router.get("/example")
    async def example(
        tenant: Annotated[TenantContext, Depends(require_tenant_context)],
    ):
        # tenant.tenant_id is always set here
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from infrastructure.settings import TenancySettings, get_tenancy_settings
from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext


def get_tenant_context_probe() -> TenantContextProbe:
    """Get the tenant context probe."""
    return DefaultTenantContextProbe()


def _get_default_tenant_id(
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> str | None:
    """Extract the default tenant id from tenancy settings.

    This is a thin sub-dependency so that unit tests can call
    ``require_tenant_context(default_tenant_id=...)`` directly without
    constructing the full settings object.
    """
    return settings.default_tenant_id


def get_tenant_context(request: Request) -> TenantContext:
    """Get the tenant context resolved for this request.

    Args:
        request: The current request.

    Returns:
        The TenantContext attached by the middleware, or an empty context
        when the middleware is not installed.
    """
    context = getattr(request.state, "tenant", None)
    if isinstance(context, TenantContext):
        return context
    return TenantContext()


def require_tenant_context(
    request: Request,
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    default_tenant_id: Annotated[str | None, Depends(_get_default_tenant_id)],
    probe: Annotated[TenantContextProbe, Depends(get_tenant_context_probe)],
) -> TenantContext:
    """Get the tenant context, insisting that a tenant is known.

    Args:
        request: The current request.
        tenant: The resolved tenant context.
        default_tenant_id: Configured fallback tenant, or None.
        probe: Domain probe for observability.

    Returns:
        The resolved TenantContext, or a context with source 'default'
        when the request carried no tenant and a default is configured.

    Raises:
        HTTPException 400: If no tenant was resolved and no default tenant
            is configured.
    """
    if tenant.is_resolved:
        return tenant

    if default_tenant_id is not None:
        probe.tenant_resolved_from_default(tenant_id=default_tenant_id)
        return TenantContext(tenant_id=default_tenant_id, source="default")

    probe.tenant_required(path=request.url.path)
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Tenant could not be resolved",
    )
