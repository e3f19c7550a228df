"""Navigation application layer.

Contains the application service that owns the active navigation config
and provides the public API for the Navigation bounded context.
"""

from navigation.application.services import NavigationService

__all__ = ["NavigationService"]
