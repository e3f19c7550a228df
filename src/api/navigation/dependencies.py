"""Dependency injection for Navigation bounded context.

The NavigationService is application-scoped: it is built once during the
application lifespan and stored on ``app.state``. Routes reach it through
``get_navigation_service``, which tests override.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from infrastructure.settings import NavigationSettings
from navigation.application.services import NavigationService
from navigation.infrastructure.config_loader import load_navigation_config


def build_navigation_service(settings: NavigationSettings) -> NavigationService:
    """Load the configured navigation config and wrap it in a service.

    Args:
        settings: Navigation settings (config path, strict validation).

    Returns:
        NavigationService holding the loaded config.

    Raises:
        NavigationConfigError: If the config cannot be loaded, or strict
            validation is enabled and the config has violations.
    """
    config = load_navigation_config(settings.config_path)
    return NavigationService(
        config=config,
        strict_validation=settings.strict_validation,
    )


def get_navigation_service(request: Request) -> NavigationService:
    """Get the application-scoped NavigationService.

    Args:
        request: The current request.

    Returns:
        The NavigationService created at startup.

    Raises:
        HTTPException 503: If the application has not finished starting.
    """
    service: NavigationService | None = getattr(
        request.app.state, "navigation_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Navigation is not initialized",
        )
    return service
