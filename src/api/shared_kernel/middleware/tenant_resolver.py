"""Tenant resolution for inbound requests.

Derives the tenant of a request from, in priority order:

1. the tenant header (``x-tenant-id`` by default), used verbatim;
2. the first label of the request host (``acme`` for ``acme.example.com``);
3. the tenant query parameter (``tenantId`` by default).

The first non-empty signal wins. A request without any signal gets an
empty TenantContext; that is a valid outcome, never an error.

Note that a host without any dot (e.g. ``localhost``) yields the whole
host as its first label, so such requests resolve to that tenant.

Usage:
    app.add_middleware(TenantResolutionMiddleware)

    @router.get("/example")
    async def example(request: Request):
        tenant_id = request.state.tenant_id  # None if unresolved
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from shared_kernel.middleware.observability.tenant_context_probe import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from shared_kernel.observability_context import ObservationContext

DEFAULT_TENANT_HEADER = "x-tenant-id"
DEFAULT_TENANT_QUERY_PARAM = "tenantId"
REQUEST_ID_HEADER = "x-request-id"


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up a header case-insensitively."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def _strip_port(host: str) -> str:
    """Remove a trailing ``:port`` from a Host header value."""
    if host.startswith("["):
        # IPv6 literal, e.g. "[::1]:8000"
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    return host.partition(":")[0]


def extract_subdomain(host: str) -> str | None:
    """Return the label before the first dot of a host.

    Args:
        host: Host header value, optionally with a port.

    Returns:
        The first label, the whole host when it has no dot, or None for
        an empty host.
    """
    hostname = _strip_port(host.strip())
    if not hostname:
        return None
    label = hostname.split(".", 1)[0]
    return label or None


def resolve_tenant_context(
    headers: Mapping[str, str],
    host: str | None,
    query_params: Mapping[str, str],
    header_name: str = DEFAULT_TENANT_HEADER,
    query_param: str = DEFAULT_TENANT_QUERY_PARAM,
) -> TenantContext:
    """Resolve the tenant of a request.

    Args:
        headers: Request headers.
        host: Request host (the Host header), possibly with a port.
        query_params: Request query parameters.
        header_name: Name of the tenant header.
        query_param: Name of the tenant query parameter.

    Returns:
        TenantContext carrying the tenant id and the signal it came from,
        or an empty TenantContext when no signal is present.
    """
    header_value = _get_header(headers, header_name)
    if header_value:
        return TenantContext(tenant_id=header_value, source="header")

    subdomain = extract_subdomain(host or "")
    if subdomain:
        return TenantContext(tenant_id=subdomain, source="subdomain")

    query_value = query_params.get(query_param)
    if query_value:
        return TenantContext(tenant_id=query_value, source="query")

    return TenantContext()


class TenantResolutionMiddleware(BaseHTTPMiddleware):
    """Attach the resolved TenantContext to every HTTP request.

    Sets ``request.state.tenant`` (the TenantContext) and
    ``request.state.tenant_id`` (the raw identifier or None) before the
    downstream handler runs, and binds ``tenant_id`` into the structlog
    context variables for the duration of the request. Never rejects a
    request.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = DEFAULT_TENANT_HEADER,
        query_param: str = DEFAULT_TENANT_QUERY_PARAM,
        probe: TenantContextProbe | None = None,
    ) -> None:
        super().__init__(app)
        self._header_name = header_name
        self._query_param = query_param
        self._probe = probe or DefaultTenantContextProbe()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        host = request.headers.get("host", "")
        context = resolve_tenant_context(
            headers=request.headers,
            host=host,
            query_params=request.query_params,
            header_name=self._header_name,
            query_param=self._query_param,
        )

        request.state.tenant = context
        request.state.tenant_id = context.tenant_id

        probe = self._probe.with_context(
            ObservationContext(
                request_id=request.headers.get(REQUEST_ID_HEADER),
                extra={"path": request.url.path},
            )
        )
        if context.tenant_id is not None and context.source is not None:
            probe.tenant_resolved(tenant_id=context.tenant_id, source=context.source)
        else:
            probe.tenant_unresolved(host=host)

        with structlog.contextvars.bound_contextvars(tenant_id=context.tenant_id):
            return await call_next(request)
