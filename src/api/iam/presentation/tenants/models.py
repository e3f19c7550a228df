"""Pydantic models for tenant API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shared_kernel.middleware.tenant_context import TenantContext, TenantSource


class TenantContextResponse(BaseModel):
    """Response model for the tenant context of a request."""

    tenant_id: str | None = Field(
        None, description="Resolved tenant id, null when unresolved"
    )
    source: TenantSource | None = Field(
        None, description="Signal the tenant id was taken from"
    )

    @classmethod
    def from_context(cls, context: TenantContext) -> TenantContextResponse:
        """Convert a TenantContext value object to an API response.

        Args:
            context: Tenant context of the request

        Returns:
            TenantContextResponse with the same values
        """
        return cls(tenant_id=context.tenant_id, source=context.source)
