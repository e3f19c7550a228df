"""HTTP routes for Navigation bounded context.

Serves the sidebar tree to the client. Responses use the camelCase wire
format of the client's sidebar model.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from navigation.application.services import NavigationService
from navigation.dependencies import get_navigation_service
from navigation.domain.value_objects import (
    NavigationConfig,
    NavigationNode,
    NavigationViolation,
)

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model_exclude_none=True)
async def get_navigation(
    service: Annotated[NavigationService, Depends(get_navigation_service)],
    role: Annotated[
        str | None,
        Query(description="Role of the caller; omit for unrestricted entries only"),
    ] = None,
) -> NavigationConfig:
    """Get the sidebar visible to a role.

    Entries whose ``allowedRoles`` do not include the role are removed,
    along with sections and groups left empty. Order is preserved.

    Returns:
        The role-filtered navigation config.
    """
    return service.sidebar_for_role(role)


@router.get("/violations")
async def get_violations(
    service: Annotated[NavigationService, Depends(get_navigation_service)],
) -> list[NavigationViolation]:
    """List structural problems of the active navigation config."""
    return service.validate()


@router.get("/nodes/{node_id}", response_model_exclude_none=True)
async def get_node(
    node_id: str,
    service: Annotated[NavigationService, Depends(get_navigation_service)],
) -> NavigationNode:
    """Get a single navigation node, with its subtree.

    Raises:
        HTTPException: 404 if no node has the id.
    """
    node = service.find_node(node_id)
    if node is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Navigation node '{node_id}' not found",
        )
    return node
