"""HTTP routes for tenant context inspection."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from iam.dependencies.tenant_context import (
    get_tenant_context,
    require_tenant_context,
)
from iam.presentation.tenants.models import TenantContextResponse
from shared_kernel.middleware.tenant_context import TenantContext

router = APIRouter(
    prefix="/tenant",
    tags=["tenant"],
)


@router.get("")
async def get_current_tenant(
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
) -> TenantContextResponse:
    """Get the tenant resolved for this request.

    Never fails: a request without any tenant signal returns a null
    tenant id.

    Returns:
        TenantContextResponse with the tenant id and its source
    """
    return TenantContextResponse.from_context(tenant)


@router.get("/required")
async def get_required_tenant(
    tenant: Annotated[TenantContext, Depends(require_tenant_context)],
) -> TenantContextResponse:
    """Get the tenant of this request, falling back to the default tenant.

    Returns:
        TenantContextResponse with the tenant id and its source

    Raises:
        HTTPException: 400 if no tenant was resolved and no default tenant
            is configured
    """
    return TenantContextResponse.from_context(tenant)
