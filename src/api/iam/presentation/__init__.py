"""IAM presentation layer - aggregate-based organization.

Organizes presentation concerns by aggregate following vertical slicing.
Each aggregate package contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation.tenants import routes as tenants

router = APIRouter(
    prefix="/iam",
    tags=["iam"],
)

router.include_router(tenants.router)

__all__ = ["router"]
