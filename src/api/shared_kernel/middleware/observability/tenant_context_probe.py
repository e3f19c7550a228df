"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving the tenant of an inbound
request from its header, host subdomain or query string.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def tenant_resolved(
        self,
        tenant_id: str,
        source: str,
    ) -> None:
        """Record that a tenant was resolved for the request."""
        ...

    def tenant_unresolved(
        self,
        host: str,
    ) -> None:
        """Record that no tenant signal was present on the request."""
        ...

    def tenant_resolved_from_default(
        self,
        tenant_id: str,
    ) -> None:
        """Record that the configured default tenant was applied."""
        ...

    def tenant_required(
        self,
        path: str,
    ) -> None:
        """Record that a route requiring a tenant received none."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def tenant_resolved(
        self,
        tenant_id: str,
        source: str,
    ) -> None:
        """Record that a tenant was resolved for the request."""
        self._logger.debug(
            "tenant_context_resolved",
            tenant_id=tenant_id,
            source=source,
            **self._get_context_kwargs(),
        )

    def tenant_unresolved(
        self,
        host: str,
    ) -> None:
        """Record that no tenant signal was present on the request."""
        self._logger.debug(
            "tenant_context_unresolved",
            host=host,
            **self._get_context_kwargs(),
        )

    def tenant_resolved_from_default(
        self,
        tenant_id: str,
    ) -> None:
        """Record that the configured default tenant was applied."""
        self._logger.debug(
            "tenant_context_resolved_from_default",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_required(
        self,
        path: str,
    ) -> None:
        """Record that a route requiring a tenant received none."""
        self._logger.warning(
            "tenant_context_required",
            path=path,
            message="Request did not carry a tenant and no default tenant is configured",
            **self._get_context_kwargs(),
        )
