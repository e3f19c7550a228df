"""Tenant context value object for resolved tenant identification.

This module contains the pure value object that represents the tenant
context of a single request. It is framework-agnostic and contains no
resolution logic, making it safe for the shared kernel.

The resolution logic (header, subdomain and query parameter lookup) lives
in ``shared_kernel.middleware.tenant_resolver``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TenantSource = Literal["header", "subdomain", "query", "default"]


@dataclass(frozen=True)
class TenantContext:
    """Tenant context for the current request.

    An empty context (``tenant_id is None``) is a valid outcome: it means
    no tenant signal was present on the request, and the caller decides
    whether to reject the request or fall back to a default tenant.

    Attributes:
        tenant_id: The resolved tenant identifier, or None if unresolved.
        source: How the tenant was resolved - 'header' if from the tenant
            header, 'subdomain' if from the request host, 'query' if from
            the query string, 'default' if a configured default was applied.
            None when unresolved.
    """

    tenant_id: str | None = None
    source: TenantSource | None = None

    @property
    def is_resolved(self) -> bool:
        """Whether a tenant identifier was found for the request."""
        return self.tenant_id is not None
