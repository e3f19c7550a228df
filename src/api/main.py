"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from iam.presentation import router as iam_router
from infrastructure.logging import configure_logging
from infrastructure.settings import (
    get_navigation_settings,
    get_settings,
    get_tenancy_settings,
)
from infrastructure.version import __version__
from navigation.dependencies import build_navigation_service
from navigation.presentation import routes as navigation_routes
from shared_kernel.middleware.tenant_resolver import TenantResolutionMiddleware


@asynccontextmanager
async def suite_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Navigation config loading and validation (fails startup in strict mode)
    """
    app.state.navigation_service = build_navigation_service(
        get_navigation_settings()
    )

    yield

    app.state.navigation_service = None


settings = get_settings()
tenancy_settings = get_tenancy_settings()

configure_logging(debug=settings.debug)

app = FastAPI(
    title=settings.app_name,
    description="Tenant-aware shell of the business application suite",
    version=__version__,
    lifespan=suite_lifespan,
)

app.add_middleware(
    TenantResolutionMiddleware,
    header_name=tenancy_settings.header_name,
    query_param=tenancy_settings.query_param,
)

# Include Navigation bounded context routes
app.include_router(navigation_routes.router)

# Include IAM routes (tenant context)
app.include_router(iam_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
